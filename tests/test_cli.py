import pytest
from PIL import Image

from assext.cli import main, run
from assext.geometry import Rect
from assext.image_processor import FontNotFoundError


def _make_png(base):
    Image.new("RGB", (60, 30), (128, 128, 128)).save(f"{base}.png")


def _rect():
    return Rect(x=0, y=0, width=60, height=30)


def test_run_missing_png_raises(tmp_path):
    with pytest.raises(FileNotFoundError, match="PNG file does not exist"):
        run(str(tmp_path / "hero"), str(tmp_path / "out"), 2, rect=_rect())


def test_run_negative_count_raises(tmp_path):
    _make_png(tmp_path / "hero")
    with pytest.raises(ValueError):
        run(str(tmp_path / "hero"), str(tmp_path / "out"), -1, rect=_rect())


def test_run_zero_count_png_only(tmp_path, capsys):
    base = tmp_path / "hero"
    _make_png(base)
    out = tmp_path / "out"
    written = run(str(base), str(out), 0, rect=_rect())
    assert written == []
    assert out.is_dir()
    assert list(out.iterdir()) == []
    captured = capsys.readouterr().out
    assert "Selected rectangle region: x=0, y=0, width=60, height=30" in captured
    assert "Generated 0 image files in output directory." in captured


def test_run_zero_count_with_companions_message(tmp_path, capsys):
    base = tmp_path / "hero"
    _make_png(base)
    (tmp_path / "hero.atlas").write_text("atlas")
    run(str(base), str(tmp_path / "out"), 0, rect=_rect())
    assert "Generated 0 directories." in capsys.readouterr().out


def test_run_prepares_directories_before_drawing(tmp_path):
    base = tmp_path / "hero"
    _make_png(base)
    (tmp_path / "hero.atlas").write_text("atlas data")
    (tmp_path / "hero.skel").write_bytes(b"skel")
    out = tmp_path / "out"
    with pytest.raises(FontNotFoundError):
        run(str(base), str(out), 2, rect=_rect(), font_paths=[tmp_path / "missing.ttf"])
    assert sorted(p.name for p in out.iterdir()) == ["hero_01", "hero_02"]
    assert (out / "hero_01" / "hero.atlas").read_text() == "atlas data"
    assert (out / "hero_01" / "hero.skel").read_bytes() == b"skel"
    assert list((out / "hero_02").iterdir()) == []


def test_run_png_only_creates_no_subdirectories(tmp_path):
    base = tmp_path / "hero"
    _make_png(base)
    out = tmp_path / "out"
    with pytest.raises(FontNotFoundError):
        run(str(base), str(out), 3, rect=_rect(), font_paths=[tmp_path / "missing.ttf"])
    assert out.is_dir()
    assert list(out.iterdir()) == []


def test_main_missing_png_returns_error(tmp_path, capsys):
    code = main([str(tmp_path / "hero"), str(tmp_path / "out"), "3"])
    assert code == 1
    assert "PNG file does not exist" in capsys.readouterr().err


def test_main_rejects_non_numeric_count(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "hero"), str(tmp_path / "out"), "abc"])
    assert info.value.code == 2


def test_main_rejects_negative_count(tmp_path):
    with pytest.raises(SystemExit) as info:
        main([str(tmp_path / "hero"), str(tmp_path / "out"), "-1"])
    assert info.value.code == 2
"""Command line entry point: number copies of a Spine asset inside a chosen region."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from assext.file_manager import FileManager, format_number
from assext.geometry import Rect
from assext.image_processor import ImageProcessor


def run(
    spine_path: str,
    output_dir: str,
    count: int,
    rect: Rect | None = None,
    font_paths: Iterable[str | Path] | None = None,
) -> list[Path]:
    """Generate ``count`` numbered copies and return the paths of the written images.

    Without a rectangle the interactive selector is opened on the image.
    """
    if count < 0:
        raise ValueError(f"count must not be negative: {count}")

    atlas_path = Path(f"{spine_path}.atlas")
    png_path = Path(f"{spine_path}.png")
    skel_path = Path(f"{spine_path}.skel")

    if not png_path.exists():
        raise FileNotFoundError(f"PNG file does not exist: {png_path}")

    has_atlas = atlas_path.exists()
    has_skel = skel_path.exists()
    has_companions = has_atlas or has_skel
    spine_name = Path(spine_path).stem

    if rect is None:
        from assext.gui import select_rect

        rect = select_rect(str(png_path))

    print(
        f"Selected rectangle region: x={rect.x}, y={rect.y}, "
        f"width={rect.width}, height={rect.height}"
    )

    manager = FileManager(output_dir, spine_name, has_companions)
    manager.create_output_dirs(count)
    processor = ImageProcessor(png_path, font_paths)
    out_root = Path(output_dir)

    written: list[Path] = []
    for index in range(1, count + 1):
        number = format_number(index, count)
        dir_name = f"{spine_name}_{number}"
        manager.copy_files(dir_name, atlas_path, skel_path, has_atlas, has_skel)

        if has_companions:
            output_png = out_root / dir_name / f"{spine_name}.png"
        else:
            output_png = out_root / f"{spine_name}_{number}.png"

        processor.draw_text_in_rect_with_color_variation(
            output_png, number, rect, rect.enable_color_variation, 0.0, index
        )
        written.append(output_png)

    if has_companions:
        print(f"Processing completed! Generated {count} directories.")
    else:
        print(f"Processing completed! Generated {count} image files in output directory.")
    return written


def _count(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"invalid count: {value}")
    return number


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="assext",
        description="Asset file extension tool - generate numbers in a chosen region",
    )
    parser.add_argument("spine_path", help="Spine file path without extension, e.g. ./data/hero")
    parser.add_argument("output_dir", help="Output directory, e.g. output")
    parser.add_argument("count", type=_count, help="Number of files to generate, e.g. 3")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Parse arguments, run the tool and return the exit status."""
    args = _parser().parse_args(argv)
    try:
        run(args.spine_path, args.output_dir, args.count)
    except (OSError, RuntimeError, ValueError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
import pytest

from assext.geometry import (
    Area,
    Rect,
    TextDirection,
    area_from_points,
    calculate_image_display,
    ui_to_image_coords,
)


def test_text_direction_labels():
    assert [str(d) for d in TextDirection] == ["Up", "Down", "Left", "Right"]
    assert TextDirection("Left") is TextDirection.LEFT


def test_area_from_points_orders_corners():
    area = area_from_points((50.0, 10.0), (5.0, 40.0))
    assert area == Area(5.0, 10.0, 50.0, 40.0)
    assert area.width() == 50.0 - 5.0
    assert area.height() == 40.0 - 10.0


def test_area_from_points_is_symmetric():
    a, b = (3.0, 7.0), (11.0, 2.0)
    assert area_from_points(a, b) == area_from_points(b, a)


def test_rect_defaults():
    rect = Rect(x=1, y=2, width=3, height=4)
    assert rect.text_direction is TextDirection.RIGHT
    assert rect.enable_color_variation is False
    assert rect.text_color == (0, 0, 0)


@pytest.mark.parametrize(
    "available, image",
    [((820.0, 620.0), (1600.0, 400.0)), ((820.0, 620.0), (300.0, 900.0)), ((120.0, 120.0), (64.0, 64.0))],
)
def test_display_fits_and_keeps_ratio(available, image):
    (w, h), area = calculate_image_display(available, image)
    assert w <= available[0] - 20.0 + 1e-9
    assert h <= available[1] - 20.0 + 1e-9
    assert w / h == pytest.approx(image[0] / image[1])
    assert w == pytest.approx(available[0] - 20.0) or h == pytest.approx(available[1] - 20.0)
    assert area.min_x == 0.0 and area.min_y == 0.0
    assert area.width() == pytest.approx(w)
    assert area.height() == pytest.approx(h)


def test_ui_to_image_identity_scale():
    image_area = Area(0.0, 0.0, 200.0, 100.0)
    ui = Area(10.0, 20.0, 50.0, 60.0)
    rect = ui_to_image_coords(ui, image_area, (200.0, 100.0), (200.0, 100.0), (255, 0, 0))
    assert (rect.x, rect.y) == (10, 20)
    assert (rect.width, rect.height) == (int(ui.width()), int(ui.height()))
    assert rect.text_color == (255, 0, 0)
    assert rect.text_direction is TextDirection.RIGHT


def test_ui_to_image_scales_with_display():
    image_area = Area(0.0, 0.0, 100.0, 50.0)
    ui = Area(10.0, 10.0, 30.0, 20.0)
    half = ui_to_image_coords(ui, image_area, (100.0, 50.0), (100.0, 50.0), (0, 0, 0))
    double = ui_to_image_coords(ui, image_area, (100.0, 50.0), (200.0, 100.0), (0, 0, 0))
    assert double.x == 2 * half.x
    assert double.y == 2 * half.y
    assert double.width == 2 * half.width
    assert double.height == 2 * half.height


def test_ui_to_image_clamps_to_image():
    image_area = Area(0.0, 0.0, 100.0, 100.0)
    ui = Area(500.0, -30.0, 800.0, 0.0)
    rect = ui_to_image_coords(ui, image_area, (100.0, 100.0), (100.0, 100.0), (0, 0, 0))
    assert rect.x == 99
    assert rect.y == 0
    assert rect.x + rect.width <= 100
    assert rect.width >= 1


def test_ui_to_image_minimum_size():
    image_area = Area(0.0, 0.0, 100.0, 100.0)
    ui = Area(10.0, 10.0, 10.0, 10.0)
    rect = ui_to_image_coords(ui, image_area, (100.0, 100.0), (100.0, 100.0), (0, 0, 0))
    assert rect.width == 1
    assert rect.height == 1
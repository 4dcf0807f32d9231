"""Geometry shared by the region selector: directions, areas and image rectangles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

Point = tuple[float, float]
Size = tuple[float, float]
Color = tuple[int, int, int]

_MARGIN = 20.0


class TextDirection(Enum):
    """Orientation in which the number is drawn inside the region."""

    UP = "Up"
    DOWN = "Down"
    LEFT = "Left"
    RIGHT = "Right"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Area:
    """An axis-aligned area in floating-point screen coordinates."""

    min_x: float
    min_y: float
    max_x: float
    max_y: float

    def width(self) -> float:
        return self.max_x - self.min_x

    def height(self) -> float:
        return self.max_y - self.min_y


@dataclass
class Rect:
    """A region of the source image together with the drawing options."""

    x: int
    y: int
    width: int
    height: int
    text_color: Color = (0, 0, 0)
    enable_color_variation: bool = False
    base_hue: float = 0.0
    text_direction: TextDirection = TextDirection.RIGHT


def area_from_points(first: Point, second: Point) -> Area:
    """Return the smallest area containing both points."""
    (x1, y1), (x2, y2) = first, second
    return Area(min(x1, x2), min(y1, y2), max(x1, x2), max(y1, y2))


def calculate_image_display(available_size: Size, image_size: Size) -> tuple[Size, Area]:
    """Fit an image into the available space, keeping its aspect ratio.

    A margin is kept around the image; the result is anchored at the origin.
    """
    avail_w = available_size[0] - _MARGIN
    avail_h = available_size[1] - _MARGIN
    image_ratio = image_size[0] / image_size[1]
    available_ratio = avail_w / avail_h

    if image_ratio > available_ratio:
        display = (avail_w, avail_w / image_ratio)
    else:
        display = (avail_h * image_ratio, avail_h)

    return display, Area(0.0, 0.0, display[0], display[1])


def _to_unsigned(value: float) -> int:
    return max(0, int(value))


def ui_to_image_coords(
    ui_area: Area,
    image_area: Area,
    display_size: Size,
    image_size: Size,
    text_color: Color,
) -> Rect:
    """Map an area in display coordinates onto pixel coordinates of the image."""
    scale_x = image_size[0] / display_size[0]
    scale_y = image_size[1] / display_size[1]

    x = min(max((ui_area.min_x - image_area.min_x) * scale_x, 0.0), image_size[0] - 1.0)
    y = min(max((ui_area.min_y - image_area.min_y) * scale_y, 0.0), image_size[1] - 1.0)
    width = min(max(ui_area.width() * scale_x, 1.0), image_size[0] - x)
    height = min(max(ui_area.height() * scale_y, 1.0), image_size[1] - y)

    return Rect(
        x=int(x),
        y=int(y),
        width=_to_unsigned(width),
        height=_to_unsigned(height),
        text_color=text_color,
        enable_color_variation=False,
        base_hue=0.0,
        text_direction=TextDirection.RIGHT,
    )
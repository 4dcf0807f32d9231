"""Drawing numbers into a region of an image, with optional colour shifting."""

from __future__ import annotations

import math
from collections.abc import Iterable
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from assext.geometry import Color, Rect, TextDirection

SYSTEM_FONT_PATHS: tuple[str, ...] = (
    "/System/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "C:\\Windows\\Fonts\\arial.ttf",
)

GOLDEN_RATIO = 1.618033988749895
_PHASE_SHIFTS = (0.0, 2.0943951023931953, 4.1887902047863905)
_MIN_FONT_SIZE = 12.0
_MAX_FONT_SIZE = 200.0
_ROTATION_MARGIN = 10

FontType = ImageFont.FreeTypeFont


class FontNotFoundError(RuntimeError):
    """Raised when none of the candidate font files can be loaded."""


def calculate_font_size(text: str, rect_width: int, rect_height: int) -> float:
    """Pick a font size that lets the text fit the rectangle, kept within 12..200."""
    length = len(text.encode("utf-8"))
    width_ratio = rect_width / (length * 0.6) if length else math.inf
    height_ratio = rect_height * 0.8
    return min(max(min(width_ratio, height_ratio), _MIN_FONT_SIZE), _MAX_FONT_SIZE)


def load_system_font(size: float, font_paths: Iterable[str | Path] | None = None) -> FontType:
    """Load the first usable font among the candidates at the given size."""
    for path in SYSTEM_FONT_PATHS if font_paths is None else font_paths:
        if not Path(path).exists():
            continue
        try:
            return ImageFont.truetype(str(path), max(1, round(size)))
        except OSError:
            continue
    raise FontNotFoundError("Failed to load font")


def _shift_table(index: int) -> list[tuple[int, int, int] | None]:
    hue = math.radians((index * 360.0 * GOLDEN_RATIO) % 360.0)
    offsets = [0.3 * math.cos(hue + shift) for shift in _PHASE_SHIFTS]
    table: list[tuple[int, int, int] | None] = []
    for total in range(3 * 255 + 1):
        brightness = total / 765.0
        if brightness < 0.1 or brightness > 0.9:
            table.append(None)
            continue
        r, g, b = (int(min(max(brightness + off, 0.0), 1.0) * 255.0) for off in offsets)
        table.append((r, g, b))
    return table


def apply_color_variation(image: Image.Image, index: int) -> Image.Image:
    """Return a copy whose mid-tone pixels are tinted with a hue derived from the index.

    Very dark and very bright pixels, and every alpha value, are left unchanged.
    """
    rgba = image.convert("RGBA")
    table = _shift_table(index)
    data = bytearray(rgba.tobytes())
    channels = zip(data[0::4], data[1::4], data[2::4])
    shifted = [table[r + g + b] or (r, g, b) for r, g, b in channels]
    if shifted:
        reds, greens, blues = zip(*shifted)
        data[0::4] = bytes(reds)
        data[1::4] = bytes(greens)
        data[2::4] = bytes(blues)
    return Image.frombytes("RGBA", rgba.size, bytes(data))


def _half(value: int) -> int:
    return int(value / 2)


def _text_width(text: str, font: FontType) -> float:
    return float(max(0, font.getbbox(text)[2])) if text else 0.0


def _text_height(font: FontType) -> float:
    ascent, descent = font.getmetrics()
    return float(ascent + descent)


def _copy_rotated(
    target: Image.Image, source: Image.Image, center_x: int, center_y: int, angle_degrees: float
) -> None:
    angle = math.radians(angle_degrees)
    cos_a = round(math.cos(angle), 6)
    sin_a = round(math.sin(angle), 6)
    src_w, src_h = source.size
    dst_w, dst_h = target.size
    half_w, half_h = src_w // 2, src_h // 2
    src_pixels = source.load()
    dst_pixels = target.load()
    for y in range(src_h):
        rel_y = y - half_h
        for x in range(src_w):
            pixel = src_pixels[x, y]
            if pixel[3] == 0:
                continue
            rel_x = x - half_w
            tx = center_x + int(rel_x * cos_a - rel_y * sin_a)
            ty = center_y + int(rel_x * sin_a + rel_y * cos_a)
            if 0 <= tx < dst_w and 0 <= ty < dst_h:
                dst_pixels[tx, ty] = pixel


def _draw_rotated(
    canvas: Image.Image,
    text: str,
    font: FontType,
    center_x: int,
    center_y: int,
    angle_degrees: float,
    color: Color,
) -> None:
    width = int(_text_width(text, font))
    height = int(_text_height(font))
    temp = Image.new(
        "RGBA", (width + 2 * _ROTATION_MARGIN, height + 2 * _ROTATION_MARGIN), (0, 0, 0, 0)
    )
    ImageDraw.Draw(temp).text(
        (_ROTATION_MARGIN, _ROTATION_MARGIN), text, font=font, fill=(*color, 255)
    )
    _copy_rotated(canvas, temp, center_x, center_y, angle_degrees)


def _draw_with_direction(canvas: Image.Image, text: str, font: FontType, rect: Rect) -> None:
    width = int(_text_width(text, font))
    height = int(_text_height(font))
    color = rect.text_color
    direction = rect.text_direction

    if direction in (TextDirection.DOWN, TextDirection.UP):
        x = rect.x + _half(rect.width - width)
        y = rect.y + _half(rect.height - height)
    else:
        x = rect.x + _half(rect.width - height)
        y = rect.y + _half(rect.height - width)

    if direction is TextDirection.DOWN:
        ImageDraw.Draw(canvas).text((x, y), text, font=font, fill=(*color, 255))
    elif direction is TextDirection.UP:
        _draw_rotated(canvas, text, font, x, y, 180.0, color)
    elif direction is TextDirection.RIGHT:
        _draw_rotated(canvas, text, font, x, y, 270.0, color)
    else:
        _draw_rotated(canvas, text, font, x, y, 90.0, color)


class ImageProcessor:
    """Holds a source image and writes numbered copies of it."""

    def __init__(self, image_path: str | Path, font_paths: Iterable[str | Path] | None = None) -> None:
        with Image.open(image_path) as img:
            img.load()
            self.original_image = img.copy()
        self.font_paths = None if font_paths is None else list(font_paths)

    def draw_text_in_rect(self, output_path: str | Path, text: str, rect: Rect) -> None:
        """Draw the text inside the rectangle and save the result."""
        self.draw_text_in_rect_with_color_variation(output_path, text, rect, False, 0.0, 0)

    def draw_text_in_rect_with_color_variation(
        self,
        output_path: str | Path,
        text: str,
        rect: Rect,
        enable_color_variation: bool,
        base_hue: float,
        index: int,
    ) -> None:
        """Draw the text, optionally tint the image by index, and save it."""
        canvas = self.original_image.convert("RGBA")
        size = calculate_font_size(text, rect.width, rect.height)
        font = load_system_font(size, self.font_paths)
        _draw_with_direction(canvas, text, font, rect)
        if enable_color_variation:
            canvas = apply_color_variation(canvas, index)
        canvas.save(output_path)
"""State of an interactive rectangle selection over a displayed image."""

from __future__ import annotations

from assext.geometry import Area, Color, Point, Rect, Size, TextDirection, area_from_points


class SelectionHandler:
    """Tracks a drag selection and the drawing options chosen by the user."""

    def __init__(self) -> None:
        self.is_selecting: bool = False
        self.start: Point | None = None
        self.current: Point | None = None
        self.text_color: Color = (0, 0, 0)
        self.image_area: Area | None = None
        self.enable_selection: bool = True
        self.enable_color_variation: bool = True
        self.text_direction: TextDirection = TextDirection.RIGHT

    def set_image_area(self, area: Area) -> None:
        """Record where the image is actually shown on screen."""
        self.image_area = area

    def on_click(self, point: Point) -> None:
        """Start a new selection at the clicked point."""
        self.is_selecting = True
        self.start = point
        self.current = point

    def on_drag(self, point: Point) -> None:
        """Extend the selection, starting one if none is in progress."""
        if not self.is_selecting:
            self.is_selecting = True
            self.start = point
        self.current = point

    def on_release(self) -> None:
        """Finish the selection in progress."""
        if self.is_selecting:
            self.is_selecting = False

    def clamped_selection(self, image_area: Area) -> Area | None:
        """Return the selection clamped inside the given image area."""
        if self.start is None or self.current is None:
            return None
        area = area_from_points(self.start, self.current)

        def clamp_x(v: float) -> float:
            return min(max(v, image_area.min_x), image_area.max_x)

        def clamp_y(v: float) -> float:
            return min(max(v, image_area.min_y), image_area.max_y)

        return Area(
            clamp_x(area.min_x),
            clamp_y(area.min_y),
            clamp_x(area.max_x),
            clamp_y(area.max_y),
        )

    def has_selection(self) -> bool:
        return self.start is not None and self.current is not None

    def reset(self) -> None:
        """Discard the current selection."""
        self.is_selecting = False
        self.start = None
        self.current = None

    def selection_info(self, image_size: Size) -> tuple[float, float, float, float] | None:
        """Return the selection as (x, y, width, height) in image pixels."""
        if self.image_area is None or self.start is None or self.current is None:
            return None
        shown = self.image_area
        selection = area_from_points(self.start, self.current)

        scale_x = image_size[0] / shown.width()
        scale_y = image_size[1] / shown.height()

        rel_x = max(selection.min_x - shown.min_x, 0.0)
        rel_y = max(selection.min_y - shown.min_y, 0.0)
        rel_w = min(selection.width(), shown.width() - rel_x)
        rel_h = min(selection.height(), shown.height() - rel_y)

        x = min(max(rel_x * scale_x, 0.0), image_size[0] - 1.0)
        y = min(max(rel_y * scale_y, 0.0), image_size[1] - 1.0)
        width = min(max(rel_w * scale_x, 1.0), image_size[0] - x)
        height = min(max(rel_h * scale_y, 1.0), image_size[1] - y)
        return x, y, width, height

    def confirm(self, image_size: Size) -> Rect | None:
        """Build the final rectangle, or None if selection is enabled but empty.

        With selection disabled the whole image is used.
        """
        if self.enable_selection:
            info = self.selection_info(image_size)
            if info is None:
                return None
            x, y, width, height = info
        else:
            x, y, width, height = 0.0, 0.0, image_size[0], image_size[1]
        return Rect(
            x=int(x),
            y=int(y),
            width=max(0, int(width)),
            height=max(0, int(height)),
            text_color=self.text_color,
            enable_color_variation=self.enable_color_variation,
            base_hue=0.0,
            text_direction=self.text_direction,
        )
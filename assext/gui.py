"""Window for picking the region of an image in which numbers are drawn."""

from __future__ import annotations

import tkinter as tk
from tkinter import colorchooser, ttk

from PIL import Image, ImageTk

from assext.geometry import Area, Rect, Size, TextDirection
from assext.selection import SelectionHandler

WINDOW_TITLE = "Select Rectangle Region"
WINDOW_GEOMETRY = "1200x1000"
PANEL_WIDTH = 300

_SELECTING = "✅ Selecting rectangle region..."
_SELECTED = "✅ Rectangle region selected"
_PROMPT = "Please drag on the image to select a rectangle region"
_WHOLE_IMAGE = "Will use the entire image area"
_VARIATION_ON = (
    "Each generated image will automatically overlay different HSL colors\n"
    "Colors will be evenly distributed based on the number of images"
)
_VARIATION_OFF = "Will use the original image colors"


def fit_to_width(image_size: Size, max_width: float) -> Size:
    """Scale an image size down so it is no wider than max_width, keeping its ratio."""
    width, height = image_size
    if width <= 0 or width <= max_width:
        return width, height
    scale = max_width / width
    return max_width, height * scale


def status_text(handler: SelectionHandler) -> str:
    """Describe the state of the selection for the control panel."""
    if not handler.enable_selection:
        return _WHOLE_IMAGE
    if handler.is_selecting:
        return _SELECTING
    if handler.has_selection():
        return _SELECTED
    return _PROMPT


def _info_text(handler: SelectionHandler, image_size: Size) -> str:
    if not handler.enable_selection:
        return ""
    info = handler.selection_info(image_size)
    if info is None:
        return ""
    x, y, width, height = info
    return (
        "Selection area info:\n"
        f"X: {x:.0f}, Y: {y:.0f}\n"
        f"Width: {width:.0f}, Height: {height:.0f}"
    )


class SelectorWindow:
    """Control panel plus image canvas; the chosen rectangle ends up in ``result``."""

    def __init__(self, root: tk.Misc, image_path: str) -> None:
        self.root = root
        self.handler = SelectionHandler()
        self.result: Rect | None = None

        try:
            with Image.open(image_path) as img:
                self._image: Image.Image | None = img.convert("RGB")
        except OSError:
            self._image = None
        self.image_size: Size = (
            (float(self._image.width), float(self._image.height)) if self._image else (0.0, 0.0)
        )
        self._photo: ImageTk.PhotoImage | None = None
        self._shown_size: Size = (0.0, 0.0)
        self._press_point: tuple[float, float] | None = None
        self._dragged = False

        self._build_panel()
        self._build_canvas()
        self._refresh_panel()

    # -- layout -----------------------------------------------------------

    def _build_panel(self) -> None:
        panel = ttk.Frame(self.root, width=PANEL_WIDTH, padding=10)
        panel.pack(side=tk.LEFT, fill=tk.Y)

        ops = ttk.LabelFrame(panel, text="Operations", padding=10)
        ops.pack(fill=tk.X, pady=(0, 10))
        ttk.Button(ops, text="✅ Confirm", command=self.confirm).pack(
            side=tk.LEFT, expand=True, fill=tk.X, padx=2
        )
        ttk.Button(ops, text="❌ Cancel", command=self.cancel).pack(
            side=tk.LEFT, expand=True, fill=tk.X, padx=2
        )

        area = ttk.LabelFrame(panel, text="Selection Area", padding=10)
        area.pack(fill=tk.X, pady=(0, 10))
        self._selection_var = tk.BooleanVar(master=self.root, value=self.handler.enable_selection)
        ttk.Checkbutton(
            area,
            text="Enable Selection",
            variable=self._selection_var,
            command=self._on_toggle_selection,
        ).pack(anchor=tk.W)
        self._status_label = ttk.Label(area, wraplength=PANEL_WIDTH - 40)
        self._status_label.pack(anchor=tk.W, pady=(10, 0))
        self._info_label = ttk.Label(area, justify=tk.LEFT)
        self._info_label.pack(anchor=tk.W, pady=(5, 0))

        direction_row = ttk.Frame(area)
        direction_row.pack(fill=tk.X, pady=(10, 0))
        ttk.Label(direction_row, text="Text Direction:").pack(side=tk.LEFT)
        self._direction_var = tk.StringVar(master=self.root, value=str(self.handler.text_direction))
        combo = ttk.Combobox(
            direction_row,
            textvariable=self._direction_var,
            values=[str(d) for d in TextDirection],
            state="readonly",
            width=10,
        )
        combo.pack(side=tk.LEFT, padx=(5, 0))
        combo.bind("<<ComboboxSelected>>", self._on_direction)

        color = ttk.LabelFrame(panel, text="Text Color", padding=10)
        color.pack(fill=tk.X, pady=(0, 10))
        ttk.Button(color, text="Choose…", command=self._on_choose_color).pack(side=tk.LEFT)
        self._color_label = ttk.Label(color)
        self._color_label.pack(side=tk.LEFT, padx=(10, 0))

        variation = ttk.LabelFrame(panel, text="Color Variation", padding=10)
        variation.pack(fill=tk.X)
        self._variation_var = tk.BooleanVar(
            master=self.root, value=self.handler.enable_color_variation
        )
        ttk.Checkbutton(
            variation,
            text="Enable Color Variation",
            variable=self._variation_var,
            command=self._on_toggle_variation,
        ).pack(anchor=tk.W)
        self._variation_label = ttk.Label(variation, wraplength=PANEL_WIDTH - 40)
        self._variation_label.pack(anchor=tk.W, pady=(10, 0))

    def _build_canvas(self) -> None:
        self.canvas = tk.Canvas(self.root, highlightthickness=0)
        self.canvas.pack(side=tk.LEFT, fill=tk.BOTH, expand=True)
        self.canvas.bind("<Configure>", self._on_resize)
        self.canvas.bind("<ButtonPress-1>", self._on_press)
        self.canvas.bind("<B1-Motion>", self._on_motion)
        self.canvas.bind("<ButtonRelease-1>", self._on_button_release)

    # -- drawing ----------------------------------------------------------

    def _on_resize(self, event: tk.Event) -> None:
        self._redraw_image(float(event.width))

    def _redraw_image(self, available_width: float) -> None:
        self.canvas.delete("all")
        if self._image is None:
            self.canvas.create_text(10, 10, anchor=tk.NW, text="Loading image...")
            return
        width, height = fit_to_width(self.image_size, max(available_width, 1.0))
        self._shown_size = (width, height)
        scaled = self._image.resize((max(1, int(width)), max(1, int(height))))
        self._photo = ImageTk.PhotoImage(scaled, master=self.root)
        self.canvas.create_image(0, 0, anchor=tk.NW, image=self._photo)
        self.handler.set_image_area(Area(0.0, 0.0, width, height))
        self._redraw_selection()

    def _redraw_selection(self) -> None:
        self.canvas.delete("selection")
        if not self.handler.enable_selection or self.handler.image_area is None:
            return
        area = self.handler.clamped_selection(self.handler.image_area)
        if area is None:
            return
        self.canvas.create_rectangle(
            area.min_x,
            area.min_y,
            area.max_x,
            area.max_y,
            outline="red",
            width=2,
            tags="selection",
        )

    def _refresh_panel(self) -> None:
        self._status_label.configure(text=status_text(self.handler))
        self._info_label.configure(text=_info_text(self.handler, self.image_size))
        r, g, b = self.handler.text_color
        self._color_label.configure(text=f"RGB({r}, {g}, {b})")
        self._variation_label.configure(
            text=_VARIATION_ON if self.handler.enable_color_variation else _VARIATION_OFF
        )
        self._redraw_selection()

    # -- mouse ------------------------------------------------------------

    def _inside_image(self, x: float, y: float) -> bool:
        width, height = self._shown_size
        return 0 <= x <= width and 0 <= y <= height

    def _on_press(self, event: tk.Event) -> None:
        if not self.handler.enable_selection or not self._inside_image(event.x, event.y):
            self._press_point = None
            return
        self._press_point = (float(event.x), float(event.y))
        self._dragged = False

    def _on_motion(self, event: tk.Event) -> None:
        if self._press_point is None:
            return
        if not self._dragged:
            self._dragged = True
            self.handler.on_drag(self._press_point)
        self.handler.on_drag((float(event.x), float(event.y)))
        self._refresh_panel()

    def _on_button_release(self, event: tk.Event) -> None:
        if self._press_point is None:
            return
        if self._dragged:
            self.handler.on_release()
        else:
            self.handler.on_click(self._press_point)
        self._press_point = None
        self._refresh_panel()

    # -- controls ---------------------------------------------------------

    def _on_toggle_selection(self) -> None:
        self.handler.enable_selection = bool(self._selection_var.get())
        self._refresh_panel()

    def _on_toggle_variation(self) -> None:
        self.handler.enable_color_variation = bool(self._variation_var.get())
        self._refresh_panel()

    def _on_direction(self, _event: tk.Event | None = None) -> None:
        self.handler.text_direction = TextDirection(self._direction_var.get())

    def _on_choose_color(self) -> None:
        rgb, _hex = colorchooser.askcolor(
            color="#%02x%02x%02x" % self.handler.text_color, parent=self.root
        )
        if rgb is not None:
            self.handler.text_color = tuple(int(c) for c in rgb)  # type: ignore[assignment]
            self._refresh_panel()

    def confirm(self) -> None:
        """Store the chosen rectangle and close the window."""
        self.result = self.handler.confirm(self.image_size)
        self.root.destroy()

    def cancel(self) -> None:
        """Close the window without choosing a rectangle."""
        self.root.destroy()


def select_rect(image_path: str) -> Rect:
    """Open the selector for an image and return the rectangle the user confirmed."""
    try:
        root = tk.Tk()
        root.title(WINDOW_TITLE)
        root.geometry(WINDOW_GEOMETRY)
        window = SelectorWindow(root, image_path)
        root.mainloop()
    except tk.TclError as exc:
        raise RuntimeError(f"GUI error: {exc}") from exc
    if window.result is None:
        raise RuntimeError("No rectangle region selected")
    return window.result
# assext

`assext` makes numbered copies of a Spine asset. It takes a texture
(`name.png`) and also its `name.atlas` and `name.skel` files if they
exist. It writes one copy per number. Each copy gets a sequential number
drawn into a region of the image that you choose. The numbers are `01`,
`02`, … or, for more than 99 copies, `001`, `002`, ….

## Installation

```
pip install .
```

To install the test dependencies as well, run `pip install .[test]`.

The region selector window uses Tkinter, through Pillow's `ImageTk`. Your
Python installation must therefore include Tk support.

## Usage

```
assext SPINE_PATH OUTPUT_DIR COUNT
```

- `SPINE_PATH`: the path of the Spine asset without an extension, for
  example `./data/hero`. The file `./data/hero.png` must exist.
- `OUTPUT_DIR`: the directory to write the results to, for example `output`.
- `COUNT`: how many copies to generate, for example `3`. The count must
  not be negative.

Example:

```
assext ./data/hero output 3
```

A window titled "Select Rectangle Region" opens and shows the texture.
In it you can:

- Drag on the image to choose the rectangle that receives the number.
  If you clear "Enable Selection", the whole image is used instead.
- Choose the text direction: Up, Down, Left or Right. The default is Right.
- Choose the text colour. The default is black.
- Switch "Enable Color Variation" on or off. It is on by default. When it
  is on, each copy's mid-tone pixels get a hue tint derived from the copy's
  number. Very dark pixels, very bright pixels and the alpha channel are
  left unchanged.

Press **Confirm** to start generating. **Cancel** closes the window and
writes nothing. If you confirm while selection is enabled but no region
has been dragged, nothing is written either.

The command prints the selected rectangle. When it finishes, it prints a
summary line. On an error it prints `Error: ...` to standard error and
exits with status 1. Errors include a missing PNG, a cancelled selection
and a font that cannot be found.

### Output layout

If an `.atlas` or `.skel` file sits next to the texture, the command
creates one directory per copy. Each directory holds the numbered texture
and a copy of each companion file that exists. An existing directory with
the same name is removed first.

```
output/hero_01/hero.png
output/hero_01/hero.atlas
output/hero_01/hero.skel
output/hero_02/...
```

If there is only a PNG, the numbered images go straight into the output
directory:

```
output/hero_01.png
output/hero_02.png
```

### Fonts

The numbers are rendered with the first TrueType font that can be loaded
from `assext.image_processor.SYSTEM_FONT_PATHS`. These are the usual
locations of Arial, Helvetica and DejaVu Sans on macOS, Linux and
Windows. If none can be loaded, `FontNotFoundError` is raised.

The font size follows the rectangle. It is chosen so that the text fits
the width and about 80% of the height, and it stays between 12 and 200.

## Using it from Python

The pieces can be used on their own:

```python
from assext.geometry import Rect, TextDirection
from assext.image_processor import ImageProcessor, calculate_font_size, apply_color_variation
from assext.file_manager import FileManager, format_number
from assext.cli import run
```

`run(spine_path, output_dir, count, rect, font_paths)` does the whole job
and returns the paths of the images it wrote. If you pass a `Rect`, no
window opens. `font_paths` replaces the list of candidate font files.
Without a `Rect`, `run` opens the selector (`assext.gui.select_rect`).

```python
from assext.cli import run
from assext.geometry import Rect, TextDirection

rect = Rect(x=10, y=10, width=120, height=60,
            text_color=(255, 0, 0), text_direction=TextDirection.DOWN)
paths = run("./data/hero", "output", 3, rect)
```

The selection logic in `assext.selection.SelectionHandler` does not
depend on the window. It turns clicks and drags into a rectangle in
image pixels. The helpers in `assext.geometry` map display coordinates
onto image coordinates.
# fractol

Renders three classic escape-time fractals and saves them as binary PPM (P6)
images:

- **mandelbrot**: the Mandelbrot set
- **julia**: the Julia set for the constant `-0.7 + 0.27015i`
- **burning_ship**: the Burning Ship fractal

Each pixel is mapped onto the complex plane, from `-2.5` to `1.0` on the real
axis and from `-1.25` to `1.25` on the imaginary axis. The top row of the image
is the largest imaginary part. A point is iterated at most 50 times, and it
escapes once `|z|²` reaches 4. Points that never escape are drawn black. Every
other point gets the base colour `0x001188` multiplied by the number of steps
it took to escape.

## Installation

```
pip install .
```

Only the Python standard library is needed (Python 3.10 or later).

## Command line

```
fractol mandelbrot
fractol julia
fractol burning_ship
fractol mandelbrot -o mandelbrot.ppm --width 400 --height 300
```

| Option              | Meaning                                  | Default       |
|---------------------|------------------------------------------|---------------|
| `fractal`           | `mandelbrot`, `julia` or `burning_ship`  | (none)        |
| `-o`, `--output`    | file the PPM image is written to         | `fractol.ppm` |
| `--width`           | image width in pixels (positive integer) | `800`         |
| `--height`          | image height in pixels (positive integer)| `600`         |

The fractal name is matched by prefix: an argument that starts with
`mandelbrot`, `julia` or `burning_ship` selects that fractal.

- If no fractal is given, the command prints a usage message and exits with
  status 1.
- If the name matches none of the three, the command prints
  `AVAILABLE FRACTOL: MANDELBROT, JULIA, BURNING_SHIP`, writes no file and
  exits with status 0.
- Otherwise it writes the image and exits with status 0.

## What it does not do

The package does not open a window and has no interactive display. The
command renders a single image to a file and exits. `FractolApp` keeps the
key and mouse handling of a viewer, but only as state you drive from code.
The zoom it tracks is recorded and never applied to rendering: every redraw
covers the same region of the plane.

## Library use

- `fractol.complex_math`
  - `Viewport` is a frozen dataclass holding the pixel size and the
    complex-plane bounds. Width and height must be positive.
  - `pixel_to_complex(x, y, viewport)` maps a pixel to a point on the plane.
  - `square_step`, `burning_ship_step` and `modulus_squared` do the arithmetic
    for one iteration and for the escape test.
- `fractol.render`
  - `FractalType` is an enum of the three fractals.
  - `parse_fractal_type(query)` matches a name by prefix and raises
    `ValueError` for an unknown one.
  - `escape_count(ftype, c, julia_c, max_iter)` returns the number of steps
    before a point escapes, up to `max_iter`.
  - `pixel_color(count, base_color, max_iter)` gives the colour for a step
    count.
  - `render(buffer, viewport, ftype, julia_c, base_color)` fills an
    `ImageBuffer`.
  - `ImageBuffer` stores pixels as blue, green, red and one unused byte. It
    has `put_pixel`, which ignores pixels outside the image, and `get_pixel`,
    which raises `IndexError` for them. `to_ppm()` encodes the buffer as P6.
- `fractol.controls`
  - `Zoom` holds a zoom level and offset. `zoom_in` and `zoom_out` change the
    level by a factor of 1.42 while keeping the point under the given pixel
    in place. `apply(direction, x, y)` zooms for direction 1 or -1 and does
    nothing for any other value. `reset` returns to the initial view.
  - `key_action(keysym)` maps X11 keysyms to an `Action`:

    | Key          | Action         |
    |--------------|----------------|
    | Escape, `x`  | `QUIT`         |
    | `m`          | `MANDELBROT`   |
    | `j`          | `JULIA`        |
    | `s`          | `BURNING_SHIP` |
    | `r`          | `RESET`        |

    Unbound keys give `None`.
  - `mouse_direction(button)` returns 1 for button 4 (scroll up), -1 for
    button 5 (scroll down) and 0 for any other button.
- `fractol.app`
  - `FractolApp` ties the pieces together.
    - `draw(query, cx, cy)` renders into `app.buffer` and calls the optional
      `on_display` callback with the buffer.
    - `redraw()` renders the current fractal again.
    - `on_key(keysym)` and `on_mouse(button, x, y)` carry out the actions
      listed above. A quit key sets `app.closed`.
  - `main(argv)` is the entry point of the `fractol` command.
- `fractol.text` provides small string helpers that behave like their C
  library namesakes: `atoi`, `itoa`, `split`, `strncmp`, `strnstr`,
  `strtrim`, `substr`, `strmapi` and `putendl`.

```python
from fractol.complex_math import Viewport
from fractol.render import FractalType, ImageBuffer, render

view = Viewport(width=200, height=150)
image = render(ImageBuffer(200, 150), view, FractalType.MANDELBROT)
with open("small.ppm", "wb") as handle:
    handle.write(image.to_ppm())
```

## Running the tests

```
pip install ".[test]"
pytest
```
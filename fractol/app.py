"""Viewer state and the command-line entry point."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from fractol.complex_math import Viewport
from fractol.controls import Action, Zoom, key_action, mouse_direction
from fractol.render import (
    DEFAULT_COLOR,
    FractalType,
    ImageBuffer,
    parse_fractal_type,
    render,
)
from fractol.text import putendl, strncmp

JULIA_DEFAULT = complex(-0.7, 0.27015)

DisplayCallback = Callable[[ImageBuffer], None]


class FractolApp:
    """Holds the image, the view and the fractal currently shown."""

    def __init__(
        self,
        viewport: Optional[Viewport] = None,
        color: int = DEFAULT_COLOR,
        on_display: Optional[DisplayCallback] = None,
    ) -> None:
        self.viewport = viewport if viewport is not None else Viewport()
        self.buffer = ImageBuffer(self.viewport.width, self.viewport.height)
        self.color = color
        self.zoom = Zoom()
        self.current_fractal: Optional[FractalType] = None
        self.julia_c = JULIA_DEFAULT
        self.closed = False
        self._on_display = on_display

    def draw(self, query: str, cx: float = 0.0, cy: float = 0.0) -> FractalType:
        """Render the fractal named by ``query``; raise ValueError for unknown names."""
        ftype = parse_fractal_type(query)
        julia_c = complex(cx, cy)
        render(self.buffer, self.viewport, ftype, julia_c, self.color)
        self.current_fractal = ftype
        if ftype is FractalType.JULIA:
            self.julia_c = julia_c
        if self._on_display is not None:
            self._on_display(self.buffer)
        return ftype

    def redraw(self) -> None:
        """Render the current fractal again; nothing happens before the first draw."""
        if self.current_fractal is None:
            return
        if self.current_fractal is FractalType.JULIA:
            self.draw(FractalType.JULIA.value, self.julia_c.real, self.julia_c.imag)
        else:
            self.draw(self.current_fractal.value)

    def close(self) -> None:
        """Mark the viewer as closed."""
        self.closed = True

    def on_key(self, keysym: int) -> None:
        """Handle a key press."""
        action = key_action(keysym)
        if action is Action.QUIT:
            self.close()
        elif action is Action.MANDELBROT:
            self.draw(FractalType.MANDELBROT.value)
        elif action is Action.JULIA:
            self.draw(FractalType.JULIA.value, JULIA_DEFAULT.real, JULIA_DEFAULT.imag)
        elif action is Action.BURNING_SHIP:
            self.draw(FractalType.BURNING_SHIP.value)
        elif action is Action.RESET:
            self.zoom.reset()
            self.redraw()

    def on_mouse(self, button: int, x: int, y: int) -> None:
        """Handle a mouse button: scrolling zooms, then the view is redrawn."""
        self.zoom.apply(mouse_direction(button), x, y)
        self.redraw()


def _positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError("must be a positive integer")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="fractol", description="Render a fractal to a PPM image."
    )
    parser.add_argument("fractal", nargs="?", help="mandelbrot, julia or burning_ship")
    parser.add_argument("-o", "--output", default="fractol.ppm", help="output PPM file")
    parser.add_argument("--width", type=_positive_int, default=800)
    parser.add_argument("--height", type=_positive_int, default=600)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Render the requested fractal and write it as a PPM image."""
    args = _build_parser().parse_args(argv)
    if args.fractal is None:
        print("Usage: fractol <type>")
        print("Types: mandelbrot, julia, burning_ship")
        return 1
    app = FractolApp(Viewport(width=args.width, height=args.height))
    try:
        if strncmp(args.fractal, "julia", 5) == 0:
            app.draw("julia", JULIA_DEFAULT.real, JULIA_DEFAULT.imag)
        else:
            app.draw(args.fractal)
    except ValueError as error:
        putendl(str(error), sys.stdout)
        return 0
    Path(args.output).write_bytes(app.buffer.to_ppm())
    return 0
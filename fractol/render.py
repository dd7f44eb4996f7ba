"""Escape-time rendering of the Mandelbrot, Julia and Burning Ship sets."""

from __future__ import annotations

import enum

from fractol.complex_math import (
    Viewport,
    burning_ship_step,
    modulus_squared,
    pixel_to_complex,
    square_step,
)
from fractol.text import strncmp

MAX_ITER = 50
ESCAPE_RADIUS_SQUARED = 4.0
DEFAULT_COLOR = 0x001188
AVAILABLE_MESSAGE = "AVAILABLE FRACTOL: MANDELBROT, JULIA, BURNING_SHIP"


class FractalType(enum.Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    BURNING_SHIP = "burning_ship"


class ImageBuffer:
    """A 32-bit little-endian pixel buffer (blue, green, red, unused)."""

    BYTES_PER_PIXEL = 4

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("image width and height must be positive")
        self.width = width
        self.height = height
        self.line_len = width * self.BYTES_PER_PIXEL
        self.data = bytearray(self.line_len * height)

    def _offset(self, x: int, y: int) -> int | None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            return None
        return y * self.line_len + x * self.BYTES_PER_PIXEL

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Store ``color`` at (x, y); pixels outside the image are ignored."""
        offset = self._offset(x, y)
        if offset is None:
            return
        self.data[offset:offset + 4] = bytes(
            (color & 0xFF, (color >> 8) & 0xFF, (color >> 16) & 0xFF, 0)
        )

    def get_pixel(self, x: int, y: int) -> int:
        """Return the 0xRRGGBB colour stored at (x, y)."""
        offset = self._offset(x, y)
        if offset is None:
            raise IndexError(f"pixel ({x}, {y}) is outside the image")
        blue, green, red = self.data[offset:offset + 3]
        return blue | (green << 8) | (red << 16)

    def to_ppm(self) -> bytes:
        """Encode the image as a binary PPM (P6) file."""
        header = f"P6\n{self.width} {self.height}\n255\n".encode("ascii")
        body = bytearray()
        for start in range(0, len(self.data), self.BYTES_PER_PIXEL):
            blue, green, red = self.data[start:start + 3]
            body += bytes((red, green, blue))
        return header + bytes(body)


def parse_fractal_type(query: str) -> FractalType:
    """Recognise a fractal name by its prefix; raise ValueError otherwise."""
    for ftype in (FractalType.MANDELBROT, FractalType.JULIA, FractalType.BURNING_SHIP):
        name = ftype.value
        if strncmp(query, name, len(name)) == 0:
            return ftype
    raise ValueError(AVAILABLE_MESSAGE)


def escape_count(
    ftype: FractalType,
    c: complex,
    julia_c: complex = 0j,
    max_iter: int = MAX_ITER,
) -> int:
    """Count iterations before the orbit leaves the radius-2 disc, up to ``max_iter``."""
    if ftype is FractalType.MANDELBROT:
        z, constant, step = 0j, c, square_step
    elif ftype is FractalType.JULIA:
        z, constant, step = c, julia_c, square_step
    elif ftype is FractalType.BURNING_SHIP:
        z, constant, step = c, c, burning_ship_step
    else:
        raise ValueError(f"unknown fractal type: {ftype!r}")
    count = 0
    while modulus_squared(z) < ESCAPE_RADIUS_SQUARED and count < max_iter:
        z = step(z, constant)
        count += 1
    return count


def pixel_color(count: int, base_color: int = DEFAULT_COLOR, max_iter: int = MAX_ITER) -> int:
    """Black for points that never escaped, otherwise the base colour scaled by the count."""
    if count == max_iter:
        return 0x000000
    return base_color * count


def render(
    buffer: ImageBuffer,
    viewport: Viewport,
    ftype: FractalType,
    julia_c: complex = 0j,
    base_color: int = DEFAULT_COLOR,
) -> ImageBuffer:
    """Fill ``buffer`` with the chosen fractal over ``viewport`` and return it."""
    for y in range(viewport.height):
        for x in range(viewport.width):
            c = pixel_to_complex(x, y, viewport)
            count = escape_count(ftype, c, julia_c)
            buffer.put_pixel(x, y, pixel_color(count, base_color))
    return buffer
"""Complex-plane arithmetic for the escape-time fractals."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Viewport:
    """A window of pixels mapped onto a rectangle of the complex plane."""

    width: int = 800
    height: int = 600
    min_re: float = -2.5
    max_re: float = 1.0
    min_im: float = -1.25
    max_im: float = 1.25

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("viewport width and height must be positive")


def modulus_squared(z: complex) -> float:
    """Return ``|z|**2`` without taking a square root."""
    return z.real * z.real + z.imag * z.imag


def square_step(z: complex, c: complex) -> complex:
    """One step of ``z -> z**2 + c``."""
    return z * z + c


def burning_ship_step(z: complex, c: complex) -> complex:
    """One Burning Ship step: square the absolute parts of ``z`` and add ``c``."""
    folded = complex(abs(z.real), abs(z.imag))
    return folded * folded + c


def pixel_to_complex(x: int, y: int, viewport: Viewport) -> complex:
    """Map a pixel to the complex plane; the top row is the maximum imaginary part."""
    re = viewport.min_re + x / viewport.width * (viewport.max_re - viewport.min_re)
    im = viewport.max_im + y / viewport.height * (viewport.min_im - viewport.max_im)
    return complex(re, im)
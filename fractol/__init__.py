"""Escape-time fractal rendering (Mandelbrot, Julia, Burning Ship) to PPM images."""

__version__ = "0.1.0"

__all__ = ["app", "complex_math", "controls", "render", "text"]
"""Zoom state and input mapping for the fractal viewer."""

from __future__ import annotations

import enum
from dataclasses import dataclass

ZOOM_FACTOR = 1.42
DEFAULT_ITERATIONS = 50

KEY_ESCAPE = 0xFF1B
KEY_X = 0x78
KEY_M = 0x6D
KEY_J = 0x6A
KEY_S = 0x73
KEY_R = 0x72

BUTTON_SCROLL_UP = 4
BUTTON_SCROLL_DOWN = 5


@dataclass
class Zoom:
    """Zoom level and offset, kept so the point under the cursor stays put."""

    zoom: float = 1.0
    offset_x: float = 0.0
    offset_y: float = 0.0
    iterations: int = DEFAULT_ITERATIONS

    def _rescale(self, x: int, y: int, new_zoom: float) -> None:
        self.offset_x = (x / self.zoom + self.offset_x) - x / new_zoom
        self.offset_y = (y / self.zoom + self.offset_y) - y / new_zoom
        self.zoom = new_zoom

    def zoom_in(self, x: int, y: int) -> None:
        """Magnify around pixel (x, y)."""
        self._rescale(x, y, self.zoom * ZOOM_FACTOR)

    def zoom_out(self, x: int, y: int) -> None:
        """Shrink around pixel (x, y)."""
        self._rescale(x, y, self.zoom / ZOOM_FACTOR)

    def apply(self, direction: int, x: int, y: int) -> None:
        """Zoom in for direction 1, out for -1; any other value does nothing."""
        if direction == 1:
            self.zoom_in(x, y)
        elif direction == -1:
            self.zoom_out(x, y)

    def reset(self) -> None:
        """Return to the initial view."""
        self.zoom = 1.0
        self.offset_x = 0.0
        self.offset_y = 0.0
        self.iterations = DEFAULT_ITERATIONS


class Action(enum.Enum):
    """What a key press asks the viewer to do."""

    QUIT = "quit"
    MANDELBROT = "mandelbrot"
    JULIA = "julia"
    BURNING_SHIP = "burning_ship"
    RESET = "reset"


_KEY_ACTIONS = {
    KEY_ESCAPE: Action.QUIT,
    KEY_X: Action.QUIT,
    KEY_M: Action.MANDELBROT,
    KEY_J: Action.JULIA,
    KEY_S: Action.BURNING_SHIP,
    KEY_R: Action.RESET,
}


def key_action(keysym: int) -> Action | None:
    """Map an X11 keysym to an action, or None for unbound keys."""
    return _KEY_ACTIONS.get(keysym)


def mouse_direction(button: int) -> int:
    """Scroll up zooms in (1), scroll down zooms out (-1), other buttons give 0."""
    if button == BUTTON_SCROLL_UP:
        return 1
    if button == BUTTON_SCROLL_DOWN:
        return -1
    return 0
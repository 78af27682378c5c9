"""A pixel buffer and line rasterisation."""

from __future__ import annotations

from array import array
from collections.abc import Iterator
from typing import Protocol

_MASK = 0xFFFFFFFF


class _XY(Protocol):
    x: int
    y: int


class Canvas:
    """A width x height buffer of 0xRRGGBB pixels; writes outside it are dropped."""

    def __init__(self, width: int = 1280, height: int = 720) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("canvas size must be positive")
        self.width = width
        self.height = height
        self.pixels = array("L", [0]) * (width * height)

    def put_pixel(self, x: int, y: int, color: int) -> None:
        """Set one pixel, silently ignoring positions off the canvas."""
        if 0 <= x < self.width and 0 <= y < self.height:
            self.pixels[y * self.width + x] = color & _MASK

    def get_pixel(self, x: int, y: int) -> int:
        """Return one pixel; raise IndexError off the canvas."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside the canvas")
        return self.pixels[y * self.width + x]

    def clear(self, color: int = 0) -> None:
        """Fill the whole canvas with one colour."""
        self.pixels = array("L", [color & _MASK]) * (self.width * self.height)


def line_points(a: _XY, b: _XY) -> Iterator[tuple[int, int]]:
    """Yield the Bresenham pixels from ``a`` towards ``b``, excluding ``b`` itself."""
    x, y = a.x, a.y
    dx, dy = abs(b.x - x), abs(b.y - y)
    step_x = 1 if x < b.x else -1
    step_y = 1 if y < b.y else -1
    err = dx - dy
    while x != b.x or y != b.y:
        yield x, y
        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += step_x
        if e2 < dx:
            err += dx
            y += step_y


def draw_segment(canvas: Canvas, a: _XY, b: _XY, color: int) -> None:
    """Draw the line from ``a`` to ``b`` in one colour."""
    for x, y in line_points(a, b):
        canvas.put_pixel(x, y, color)
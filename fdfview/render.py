"""Drawing a height map as a wireframe onto a canvas."""

from __future__ import annotations

from fdfview.color import height_color
from fdfview.mapfile import HeightMap
from fdfview.projection import Projected, View, project
from fdfview.raster import Canvas, draw_segment

BACKGROUND = 0x000000


def draw_line(canvas: Canvas, a: Projected, b: Projected) -> None:
    """Draw one wire, coloured by the height of its starting point."""
    draw_segment(canvas, a, b, height_color(a.z))


def draw_map(heightmap: HeightMap, canvas: Canvas, view: View) -> None:
    """Draw every wire of the grid as seen through ``view``."""
    for start, end in heightmap.edges():
        draw_line(canvas, project(start, view), project(end, view))


def render_frame(heightmap: HeightMap, canvas: Canvas, view: View) -> None:
    """Clear the canvas to the background colour and draw the map on it."""
    canvas.clear(BACKGROUND)
    draw_map(heightmap, canvas, view)
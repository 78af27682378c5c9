"""Keyboard controls and the on-screen help panel."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import IntEnum
from typing import NamedTuple

from fdfview.mapfile import HeightMap
from fdfview.projection import View

PANEL_COLOR = 0xCCCCCC
PANEL_LEFT = 15
PANEL_TOP = 20
PANEL_LINE_HEIGHT = 20

ZOOM_IN_FACTOR = 1.1
ZOOM_OUT_FACTOR = 0.9
PAN_STEP = 30
ANGLE_STEP = 0.1

_PANEL_TEXT = (
    "--- CONTROLES ---",
    "Z/X: Zoom",
    "Flechas: Mover mapa",
    "W/S: Rotar eje Y",
    "Q/E: Rotar eje X",
    "R/L: Rotar eje Z",
    "B: Cambiar proyeccion",
    "Backspace: Resetear vista",
    "H: Ocultar controles",
)


class Key(IntEnum):
    """Viewer keys, numbered by their hardware key codes."""

    TOGGLE_PANEL = 4
    ZOOM_IN = 6
    ZOOM_OUT = 7
    ROTATE_X_DOWN = 1
    PROJECTION = 11
    ROTATE_Y_DOWN = 12
    ROTATE_X_UP = 13
    ROTATE_Y_UP = 14
    ROTATE_Z_DOWN = 15
    ROTATE_Z_UP = 37
    RESET = 51
    ESCAPE = 53
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class PanelLine(NamedTuple):
    """One line of help text and where it goes on screen."""

    x: int
    y: int
    text: str


def default_view(heightmap: HeightMap) -> View:
    """Return the starting view for a map."""
    return View(map_width=heightmap.width, map_height=heightmap.height)


@dataclass
class ViewerState:
    """The current view, the view to reset to, and panel and run flags."""

    view: View
    reset_view: View | None = None
    show_panel: bool = True
    running: bool = field(default=True)

    def __post_init__(self) -> None:
        if self.reset_view is None:
            self.reset_view = replace(self.view)

    def handle_key(self, key: Key | int) -> None:
        """Apply one key press; unknown keys are ignored."""
        try:
            key = Key(key)
        except ValueError:
            return
        view = self.view
        if key is Key.ESCAPE:
            self.running = False
        elif key is Key.ZOOM_IN:
            view.scale *= ZOOM_IN_FACTOR
        elif key is Key.ZOOM_OUT:
            view.scale *= ZOOM_OUT_FACTOR
        elif key is Key.LEFT:
            view.offset_x -= PAN_STEP
        elif key is Key.RIGHT:
            view.offset_x += PAN_STEP
        elif key is Key.DOWN:
            view.offset_y += PAN_STEP
        elif key is Key.UP:
            view.offset_y -= PAN_STEP
        elif key is Key.ROTATE_Z_UP:
            view.angle_z += ANGLE_STEP
        elif key is Key.ROTATE_Z_DOWN:
            view.angle_z -= ANGLE_STEP
        elif key is Key.PROJECTION:
            view.projection_mode = view.projection_mode.toggled()
        elif key is Key.ROTATE_X_UP:
            view.angle_x += ANGLE_STEP
        elif key is Key.ROTATE_X_DOWN:
            view.angle_x -= ANGLE_STEP
        elif key is Key.ROTATE_Y_UP:
            view.angle_y += ANGLE_STEP
        elif key is Key.ROTATE_Y_DOWN:
            view.angle_y -= ANGLE_STEP
        elif key is Key.RESET:
            self.view = replace(self.reset_view)
        elif key is Key.TOGGLE_PANEL:
            self.show_panel = not self.show_panel

    def panel_lines(self) -> list[PanelLine]:
        """Return the help lines to draw, or none when the panel is hidden."""
        if not self.show_panel:
            return []
        return [
            PanelLine(PANEL_LEFT, PANEL_TOP + i * PANEL_LINE_HEIGHT, text)
            for i, text in enumerate(_PANEL_TEXT)
        ]
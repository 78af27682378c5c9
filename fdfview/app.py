"""The interactive wireframe viewer window."""

from __future__ import annotations

import os
import sys
from array import array
from collections.abc import Sequence

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from fdfview.controls import PANEL_COLOR, Key, ViewerState, default_view  # noqa: E402
from fdfview.mapfile import HeightMap, MapError, read_map  # noqa: E402
from fdfview.raster import Canvas  # noqa: E402
from fdfview.render import render_frame  # noqa: E402

WINDOW_WIDTH = 1280
WINDOW_HEIGHT = 720
WINDOW_TITLE = "FdF"

_PYGAME_KEYS = {
    pygame.K_ESCAPE: Key.ESCAPE,
    pygame.K_z: Key.ZOOM_IN,
    pygame.K_x: Key.ZOOM_OUT,
    pygame.K_LEFT: Key.LEFT,
    pygame.K_RIGHT: Key.RIGHT,
    pygame.K_DOWN: Key.DOWN,
    pygame.K_UP: Key.UP,
    pygame.K_l: Key.ROTATE_Z_UP,
    pygame.K_r: Key.ROTATE_Z_DOWN,
    pygame.K_b: Key.PROJECTION,
    pygame.K_w: Key.ROTATE_X_UP,
    pygame.K_s: Key.ROTATE_X_DOWN,
    pygame.K_e: Key.ROTATE_Y_UP,
    pygame.K_q: Key.ROTATE_Y_DOWN,
    pygame.K_BACKSPACE: Key.RESET,
    pygame.K_h: Key.TOGGLE_PANEL,
}


def key_from_pygame(keycode: int) -> Key | None:
    """Map a pygame key code to a viewer key, or None if it has no meaning."""
    return _PYGAME_KEYS.get(keycode)


def _word_array(canvas: Canvas) -> array:
    for code in ("I", "L"):
        if array(code).itemsize == 4:
            return array(code, canvas.pixels)
    raise RuntimeError("no 32-bit array type available")


def canvas_to_surface_bytes(canvas: Canvas) -> bytes:
    """Return the canvas as packed RGB bytes, row by row."""
    raw = _word_array(canvas).tobytes()
    out = bytearray(canvas.width * canvas.height * 3)
    if sys.byteorder == "little":
        red, green, blue = raw[2::4], raw[1::4], raw[0::4]
    else:
        red, green, blue = raw[1::4], raw[2::4], raw[3::4]
    out[0::3] = red
    out[1::3] = green
    out[2::3] = blue
    return bytes(out)


def _draw(screen, font, canvas: Canvas, state: ViewerState, heightmap: HeightMap) -> None:
    render_frame(heightmap, canvas, state.view)
    image = pygame.image.frombuffer(
        canvas_to_surface_bytes(canvas), (canvas.width, canvas.height), "RGB"
    )
    screen.blit(image, (0, 0))
    text_color = pygame.Color(
        (PANEL_COLOR >> 16) & 0xFF, (PANEL_COLOR >> 8) & 0xFF, PANEL_COLOR & 0xFF
    )
    for line in state.panel_lines():
        screen.blit(font.render(line.text, True, text_color), (line.x, line.y))
    pygame.display.flip()


def run(heightmap: HeightMap) -> int:
    """Open the viewer window for a map and run until it is closed."""
    pygame.init()
    try:
        screen = pygame.display.set_mode((WINDOW_WIDTH, WINDOW_HEIGHT))
        pygame.display.set_caption(WINDOW_TITLE)
        font = pygame.font.Font(None, 20)
        canvas = Canvas(WINDOW_WIDTH, WINDOW_HEIGHT)
        state = ViewerState(default_view(heightmap))
        _draw(screen, font, canvas, state, heightmap)
        while state.running:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type != pygame.KEYDOWN:
                continue
            key = key_from_pygame(event.key)
            if key is not None:
                state.handle_key(key)
            if state.running:
                _draw(screen, font, canvas, state, heightmap)
    finally:
        pygame.quit()
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: view the map file named by the single argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("usage: fdfview MAP_FILE", file=sys.stderr)
        return 1
    try:
        heightmap = read_map(args[0])
    except MapError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return run(heightmap)


if __name__ == "__main__":
    sys.exit(main())
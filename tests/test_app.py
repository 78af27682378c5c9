import pygame
import pytest

from fdfview.app import canvas_to_surface_bytes, key_from_pygame, main
from fdfview.controls import Key
from fdfview.raster import Canvas


@pytest.mark.parametrize(
    "keycode, expected",
    [
        (pygame.K_ESCAPE, Key.ESCAPE),
        (pygame.K_z, Key.ZOOM_IN),
        (pygame.K_x, Key.ZOOM_OUT),
        (pygame.K_LEFT, Key.LEFT),
        (pygame.K_UP, Key.UP),
        (pygame.K_b, Key.PROJECTION),
        (pygame.K_BACKSPACE, Key.RESET),
        (pygame.K_h, Key.TOGGLE_PANEL),
    ],
)
def test_key_from_pygame_known(keycode, expected):
    assert key_from_pygame(keycode) is expected


def test_key_from_pygame_unknown():
    assert key_from_pygame(pygame.K_F12) is None


def test_canvas_to_surface_bytes_order_and_size():
    canvas = Canvas(3, 2)
    canvas.put_pixel(0, 0, 0x112233)
    canvas.put_pixel(2, 1, 0xAABBCC)
    data = canvas_to_surface_bytes(canvas)
    assert len(data) == 3 * 2 * 3
    assert data[0:3] == bytes([0x11, 0x22, 0x33])
    assert data[-3:] == bytes([0xAA, 0xBB, 0xCC])
    assert data[3:15] == bytes(12)


def test_canvas_to_surface_bytes_all_pixels_round_trip():
    canvas = Canvas(4, 4)
    colours = [(x * 40) << 16 | (y * 50) << 8 | (x + y) for y in range(4) for x in range(4)]
    for i, c in enumerate(colours):
        canvas.put_pixel(i % 4, i // 4, c)
    data = canvas_to_surface_bytes(canvas)
    rebuilt = [data[i] << 16 | data[i + 1] << 8 | data[i + 2] for i in range(0, len(data), 3)]
    assert rebuilt == colours


def test_main_requires_exactly_one_argument():
    assert main([]) == 1
    assert main(["a.fdf", "b.fdf"]) == 1


def test_main_missing_file(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.fdf"
    path.write_text("a b\n", encoding="utf-8")
    assert main([str(path)]) == 1
    assert "invalid map" in capsys.readouterr().err
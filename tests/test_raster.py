import pytest

from fdfview.projection import Projected
from fdfview.raster import Canvas, draw_segment, line_points


def P(x, y):
    return Projected(x, y, 0)


def test_canvas_default_size_and_blank():
    c = Canvas()
    assert (c.width, c.height) == (1280, 720)
    assert c.get_pixel(0, 0) == 0
    assert c.get_pixel(1279, 719) == 0


def test_put_and_get_round_trip():
    c = Canvas(10, 10)
    c.put_pixel(3, 4, 0xE99696)
    assert c.get_pixel(3, 4) == 0xE99696
    assert c.get_pixel(4, 3) == 0


def test_put_outside_is_ignored():
    c = Canvas(10, 10)
    for x, y in [(-1, 0), (0, -1), (10, 0), (0, 10)]:
        c.put_pixel(x, y, 0xFFFFFF)
    assert all(p == 0 for p in c.pixels)


def test_get_outside_raises():
    c = Canvas(10, 10)
    with pytest.raises(IndexError):
        c.get_pixel(10, 0)


def test_invalid_size():
    with pytest.raises(ValueError):
        Canvas(0, 5)


def test_clear_fills_everything():
    c = Canvas(6, 4)
    c.put_pixel(1, 1, 0x123456)
    c.clear(0xEDEDED)
    assert all(p == 0xEDEDED for p in c.pixels)
    assert len(c.pixels) == 24


def test_horizontal_line_excludes_end():
    assert list(line_points(P(0, 0), P(3, 0))) == [(0, 0), (1, 0), (2, 0)]


def test_same_point_yields_nothing():
    assert list(line_points(P(5, 5), P(5, 5))) == []


@pytest.mark.parametrize(
    "a, b",
    [((0, 0), (7, 3)), ((7, 3), (0, 0)), ((2, 9), (-4, 1)), ((0, 0), (0, -6)), ((1, 1), (6, 6))],
)
def test_line_invariants(a, b):
    pts = list(line_points(P(*a), P(*b)))
    assert len(pts) == max(abs(b[0] - a[0]), abs(b[1] - a[1]))
    assert pts[0] == a
    steps = pts + [b]
    for (x1, y1), (x2, y2) in zip(steps, steps[1:]):
        assert max(abs(x2 - x1), abs(y2 - y1)) == 1
    assert len(set(pts)) == len(pts)


def test_draw_segment_paints_line():
    c = Canvas(20, 20)
    draw_segment(c, P(2, 2), P(10, 6), 0xFADDDD)
    painted = {(x, y) for y in range(20) for x in range(20) if c.get_pixel(x, y)}
    assert painted == set(line_points(P(2, 2), P(10, 6)))
    assert c.get_pixel(10, 6) == 0


def test_draw_segment_clips_offscreen_part():
    c = Canvas(5, 5)
    draw_segment(c, P(-3, 2), P(8, 2), 0xFFFFFF)
    assert [c.get_pixel(x, 2) for x in range(5)] == [0xFFFFFF] * 5
    assert c.get_pixel(0, 1) == 0
import pytest

from fdfview.color import height_color


@pytest.mark.parametrize(
    "z, expected",
    [
        (-50, 0x8B3A3A),
        (0, 0x8B3A3A),
        (1, 0xE99696),
        (40, 0xE99696),
        (41, 0xFADDDD),
        (80, 0xFADDDD),
        (81, 0xEDEDED),
        (100, 0xEDEDED),
        (101, 0xFFFFFF),
        (10000, 0xFFFFFF),
    ],
)
def test_ramp(z, expected):
    assert height_color(z) == expected


def test_colors_fit_in_24_bits():
    for z in range(-10, 200):
        assert 0 <= height_color(z) <= 0xFFFFFF
"""Colour ramp by height."""


def height_color(z: int) -> int:
    """Return the 0xRRGGBB colour used for a wire starting at height ``z``."""
    if z <= 0:
        return 0x8B3A3A
    if z <= 40:
        return 0xE99696
    if z <= 80:
        return 0xFADDDD
    if z <= 100:
        return 0xEDEDED
    return 0xFFFFFF
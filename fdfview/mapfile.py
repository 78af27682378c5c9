"""Reading wireframe height maps from text files."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from os import PathLike

_WHITESPACE = " \t\n\v\f\r"


class MapError(ValueError):
    """Raised when a map file cannot be read or is malformed."""


@dataclass(frozen=True)
class Point:
    """A grid vertex: its column, row, height and colour (-1 for none)."""

    x: int
    y: int
    z: int
    color: int = -1


@dataclass
class HeightMap:
    """A rectangular grid of points, ``points[row][column]``."""

    width: int
    height: int
    points: list[list[Point]] = field(default_factory=list)

    def edges(self) -> Iterator[tuple[Point, Point]]:
        """Yield every wire of the grid: right neighbour first, then the one below."""
        for y, row in enumerate(self.points):
            for x, point in enumerate(row):
                if x < self.width - 1:
                    yield point, row[x + 1]
                if y < self.height - 1:
                    yield point, self.points[y + 1][x]


def is_valid(token: str | None) -> bool:
    """Tell whether a token is an optionally signed integer, possibly followed by ',...'."""
    if not token:
        return False
    body = token[1:] if token[0] in "+-" else token
    number = body.split(",", 1)[0]
    return all("0" <= ch <= "9" for ch in number)


def parse_int(text: str) -> int:
    """Parse a leading integer the lenient way: skip blanks, read sign and digits.

    Anything after the digits is ignored; no digits yields 0. The result
    wraps to a signed 32-bit value.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not "0" <= ch <= "9":
            break
        value = value * 10 + (ord(ch) - ord("0"))
    value *= sign
    return ((value + 2**31) % 2**32) - 2**31


def _tokens(line: str) -> list[str]:
    return [part for part in line.split(" ") if part]


def parse_map(lines: Iterable[str]) -> HeightMap:
    """Build a height map from lines of space separated heights.

    The width is the number of tokens on the first line; longer rows are cut
    to it. Lines may keep their trailing newline.
    """
    rows = [_tokens(line) for line in lines]
    if not rows:
        raise MapError("map is empty")
    width = len(rows[0])
    if width == 0:
        raise MapError("first line of the map holds no values")
    points: list[list[Point]] = []
    for y, tokens in enumerate(rows):
        if not is_valid(tokens[0] if tokens else None):
            raise MapError(f"invalid map: bad value on line {y + 1}")
        if len(tokens) < width:
            raise MapError(
                f"invalid map: line {y + 1} has {len(tokens)} values, expected {width}"
            )
        points.append(
            [Point(x, y, parse_int(token)) for x, token in enumerate(tokens[:width])]
        )
    return HeightMap(width=width, height=len(points), points=points)


def _split_lines(text: str) -> list[str]:
    parts = text.split("\n")
    lines = [part + "\n" for part in parts[:-1]]
    if parts[-1]:
        lines.append(parts[-1])
    return lines


def read_map(path: str | PathLike[str]) -> HeightMap:
    """Read and parse a map file."""
    try:
        with open(path, encoding="utf-8", errors="surrogateescape", newline="") as fh:
            text = fh.read()
    except OSError as exc:
        raise MapError(f"cannot read map {path!s}: {exc.strerror or exc}") from exc
    return parse_map(_split_lines(text))
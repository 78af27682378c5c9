"""Rotating and projecting map points onto the screen."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import IntEnum
from typing import NamedTuple

from fdfview.mapfile import Point


class ProjectionMode(IntEnum):
    """How the rotated grid is laid out on the screen."""

    ISOMETRIC = 0
    PARALLEL = 1

    def toggled(self) -> ProjectionMode:
        return ProjectionMode.PARALLEL if self is ProjectionMode.ISOMETRIC else ProjectionMode.ISOMETRIC


@dataclass
class View:
    """Camera settings: zoom, height scale, screen offset and rotations."""

    scale: float = 3.0
    z_scale: float = 5.0
    offset_x: float = 640.0
    offset_y: float = 360.0
    angle_z: float = 0.0
    angle_x: float = 0.0
    angle_y: float = 0.0
    projection_mode: ProjectionMode = ProjectionMode.ISOMETRIC
    map_width: int = 0
    map_height: int = 0


class Projected(NamedTuple):
    """A point in screen pixels, keeping its original height."""

    x: int
    y: int
    z: int


def rotate_axes(x: float, y: float, z: float, view: View) -> tuple[float, float, float]:
    """Rotate about the X axis, then about the Y axis."""
    cos_x, sin_x = math.cos(view.angle_x), math.sin(view.angle_x)
    y, z = y * cos_x - z * sin_x, y * sin_x + z * cos_x
    cos_y, sin_y = math.cos(view.angle_y), math.sin(view.angle_y)
    x, z = x * cos_y + z * sin_y, -x * sin_y + z * cos_y
    return x, y, z


def _project_view(x: float, y: float, view: View, point: Point) -> Projected:
    cos_z, sin_z = math.cos(view.angle_z), math.sin(view.angle_z)
    rot_x = x * cos_z - y * sin_z
    rot_y = x * sin_z + y * cos_z
    if view.projection_mode == ProjectionMode.ISOMETRIC:
        px = (rot_x - rot_y) * 10 * view.scale * 1.5 + view.offset_x
        py = ((rot_x + rot_y) * 5 - point.z * view.z_scale) * view.scale + view.offset_y
    else:
        px = rot_x * view.scale + view.offset_x
        py = rot_y * view.scale - point.z * (view.z_scale * 0.1) + view.offset_y
    return Projected(int(px), int(py), point.z)


def project(point: Point, view: View) -> Projected:
    """Project a map point to screen coordinates, centred on the map middle."""
    x = point.x - view.map_width / 2
    y = point.y - view.map_height / 2
    x, y, _ = rotate_axes(x, y, float(point.z), view)
    return _project_view(x, y, view, point)
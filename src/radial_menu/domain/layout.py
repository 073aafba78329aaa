# radial_menu/domain/layout.py
from dataclasses import dataclass

import numpy as np

from radial_menu.domain.entities.actions import ActionNode
from radial_menu.domain.entities.geometry import Point
from radial_menu.domain.state import WheelState


def bubble_centers(center: Point, n: int, distance: float) -> np.ndarray:
    """(n, 2) array of bubble centres, bubble 0 straight above `center`, then clockwise."""
    theta = 2 * np.pi * np.arange(n) / max(n, 1)
    xs = center.x + distance * np.sin(theta)
    ys = center.y - distance * np.cos(theta)
    return np.column_stack((xs, ys))


@dataclass(frozen=True)
class WheelSnapshot:
    """Everything a renderer needs to draw the current ring. Read-only."""

    origin: Point | None
    center: Point
    entries: tuple[ActionNode, ...]
    positions: tuple[Point, ...]
    active_radius: float
    bubble_radius: float
    bubble_distance: float

    @property
    def active(self) -> bool:
        return self.origin is not None


def snapshot(
    state: WheelState,
    *,
    active_radius: float,
    bubble_radius: float,
    bubble_distance: float,
    canvas: tuple[float, float] | None = None,
) -> WheelSnapshot:
    if state.origin is not None:
        center = state.origin
    elif canvas is not None:
        # idle: draw around the middle of the surface
        center = Point(canvas[0] / 2.0, canvas[1] / 2.0)
    else:
        center = Point(0.0, 0.0)
    xy = bubble_centers(center, len(state.level), bubble_distance)
    return WheelSnapshot(
        origin=state.origin,
        center=center,
        entries=tuple(state.level),
        positions=tuple(Point(float(x), float(y)) for x, y in xy),
        active_radius=active_radius,
        bubble_radius=bubble_radius,
        bubble_distance=bubble_distance,
    )

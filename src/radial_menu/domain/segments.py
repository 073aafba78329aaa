# radial_menu/domain/segments.py
import math

from radial_menu.domain.entities.geometry import Point


def segment_index(phi: float, n: int) -> int:
    """
    Sector of a ring of n bubbles that the angle phi (in [-pi, pi)) falls in.
    Sector 0 starts at phi = -pi; each sector is 2*pi/n wide.
    """
    if n < 1:
        raise ValueError(f"segment_index needs at least one bubble, got n={n}")
    if not math.isfinite(phi):
        raise ValueError(f"segment_index needs a finite angle, got {phi!r}")
    i = math.floor((phi + math.pi) / (2 * math.pi) * n)
    # rounding near phi -> pi can land one past the end
    return min(max(i, 0), n - 1)


def bubble_center(origin: Point, segment: int, n: int, distance: float) -> Point:
    theta = 2 * math.pi * segment / n
    sin, cos = math.sin(theta), math.cos(theta)
    return Point(origin.x + distance * sin, origin.y - distance * cos)

import math
from dataclasses import dataclass
from math import isfinite


# Screen-space coordinates, same space the host delivers pointer events in
@dataclass(frozen=True)
class Point:
    x: float
    y: float

    def __post_init__(self):
        if not (isfinite(self.x) and isfinite(self.y)):
            raise ValueError(f"Point coordinates must be finite, got ({self.x}, {self.y})")


Pt = Point | tuple[float, float]


def to_point(p: Pt) -> Point:
    return p if isinstance(p, Point) else Point(float(p[0]), float(p[1]))


def distance(a: Point, b: Point) -> float:
    return math.hypot(b.x - a.x, b.y - a.y)


def gradient(a: Point, b: Point) -> float:
    """Slope of a->b. A vertical segment gives +/-inf, a zero-length one NaN."""
    dx, dy = b.x - a.x, b.y - a.y
    if dx == 0.0:
        if dy == 0.0:
            return math.nan
        # follow IEEE division: the sign of the zero matters
        return math.copysign(math.inf, dy) * math.copysign(1.0, dx)
    return dy / dx


def rotation_angle(a: Point, b: Point) -> float:
    """
    Clockwise angle from "rightward of a" to the direction a->b.
    Right is 0, (0, +1) is pi/2, left is -pi, (0, -1) is -pi/2.
    Result is in [-pi, pi).
    """
    dx = b.x - a.x
    atan = math.atan(gradient(a, b))
    if atan >= 0.0 and dx < 0.0:
        return atan - math.pi
    if atan < 0.0 and dx < 0.0:
        return atan + math.pi
    return atan

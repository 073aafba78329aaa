# app/events.py
from dataclasses import dataclass

from radial_menu.domain.entities.geometry import Point
from radial_menu.engine.event import BaseEvent


# Pointer input (host -> wheel)
@dataclass(order=True)
class PointerEvent(BaseEvent):
    x: float
    y: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass(order=True)
class PointerDown(PointerEvent):
    pass


@dataclass(order=True)
class PointerMotion(PointerEvent):
    pass


@dataclass(order=True)
class PointerUp(PointerEvent):
    pass


# Transitions (wheel -> renderer / launcher)
@dataclass(order=True)
class RedrawRequested(BaseEvent):
    pass


@dataclass(order=True)
class SubmenuEntered(BaseEvent):
    segment: int
    name: str
    depth: int


@dataclass(order=True)
class CommandCommitted(BaseEvent):
    segment: int
    name: str
    command: str


@dataclass(order=True)
class GestureCancelled(BaseEvent):
    distance: float


@dataclass(order=True)
class GestureReleased(BaseEvent):
    """Released over a bubble that has nothing to run."""

    segment: int
    name: str

# radial_menu/domain/state.py
from dataclasses import dataclass

from radial_menu.domain.entities.actions import ActionNode
from radial_menu.domain.entities.geometry import Point


@dataclass
class WheelState:
    level: list[ActionNode]
    origin: Point | None = None  # None => no gesture in progress
    result: str | None = None
    depth: int = 0  # how many drill-downs the current level is below the root

    @property
    def active(self) -> bool:
        return self.origin is not None

    def anchor(self, p: Point) -> None:
        self.origin = p
        self.result = None

    def release(self, result: str | None = None) -> None:
        self.origin = None
        self.result = result

    def descend(self, origin: Point, children: list[ActionNode]) -> None:
        # previous level is dropped, there is no way back up
        self.origin = origin
        self.level = children
        self.depth += 1

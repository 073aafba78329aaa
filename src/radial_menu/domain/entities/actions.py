from collections.abc import Iterator
from dataclasses import dataclass


@dataclass(eq=False)
class ActionNode:
    """
    One bubble of the wheel.
    - command set  => selectable (commit on release)
    - children set => opens a nested wheel (drill-down on hover)
    Both, or neither, are allowed.
    """

    name: str
    icon: str = ""
    command: str | None = None
    children: list["ActionNode"] | None = None

    @property
    def is_leaf(self) -> bool:
        return self.command is not None

    @property
    def is_branch(self) -> bool:
        return bool(self.children)

    def take_children(self) -> list["ActionNode"] | None:
        children, self.children = self.children, None
        return children

    def take_command(self) -> str | None:
        command, self.command = self.command, None
        return command


def walk(level: list[ActionNode], depth: int = 0) -> Iterator[tuple[int, ActionNode]]:
    """Depth-first (depth, node) pairs over a level and everything below it."""
    for node in level:
        yield depth, node
        if node.children:
            yield from walk(node.children, depth + 1)

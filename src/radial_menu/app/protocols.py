from typing import Protocol, runtime_checkable

from radial_menu.domain.layout import WheelSnapshot


@runtime_checkable
class Renderer(Protocol):
    """
    Responsibilities:
      • Draw the ring described by a snapshot (window/overlay/theme are its business).
    Called after every transition that changes what is on screen.
    """

    def request_redraw(self, snapshot: WheelSnapshot) -> None: ...


@runtime_checkable
class Launcher(Protocol):
    """
    Responsibilities:
      • Run a committed command string (spawn, shell out, IPC, ...).
    The wheel only hands the string over; it never executes anything itself.
    """

    def launch(self, command: str) -> None: ...


class NullRenderer:
    def __init__(self):
        self.frames: list[WheelSnapshot] = []

    def request_redraw(self, snapshot: WheelSnapshot) -> None:
        self.frames.append(snapshot)


class RecordingLauncher:
    def __init__(self):
        self.commands: list[str] = []

    def launch(self, command: str) -> None:
        self.commands.append(command)

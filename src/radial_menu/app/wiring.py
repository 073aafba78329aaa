# radial_menu/app/wiring.py
from radial_menu.app.controllers.outputs import OutputHandler
from radial_menu.app.controllers.wheel import WheelHandler
from radial_menu.app.events import (
    CommandCommitted,
    GestureCancelled,
    GestureReleased,
    PointerDown,
    PointerMotion,
    PointerUp,
    RedrawRequested,
    SubmenuEntered,
)
from radial_menu.engine.dispatcher import Dispatcher
from radial_menu.io.recorder import Recorder

TRANSITIONS = (SubmenuEntered, CommandCommitted, GestureCancelled, GestureReleased)


def wire(
    dispatcher: Dispatcher,
    *,
    wheel: WheelHandler,
    outputs: OutputHandler | None = None,
    recorder: Recorder | None = None,
) -> None:
    d = dispatcher

    # pointer input
    d.on(PointerDown, wheel.on_pointer_down)
    d.on(PointerMotion, wheel.on_pointer_motion)
    d.on(PointerUp, wheel.on_pointer_up)

    # transitions -> collaborators
    if outputs:
        d.on(RedrawRequested, outputs.on_redraw)
        d.on(CommandCommitted, outputs.on_command)

    # analytics
    if recorder:
        for etype in TRANSITIONS:
            d.on(etype, recorder.emit)

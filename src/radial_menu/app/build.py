# radial_menu/app/build.py
import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, field

from radial_menu.app.controllers.outputs import OutputHandler
from radial_menu.app.controllers.wheel import WheelHandler
from radial_menu.app.events import PointerDown, PointerMotion, PointerUp
from radial_menu.app.protocols import Launcher, NullRenderer, RecordingLauncher, Renderer
from radial_menu.app.wiring import wire
from radial_menu.config.models import AppModel
from radial_menu.domain.entities.actions import ActionNode
from radial_menu.domain.state import WheelState
from radial_menu.engine.dispatcher import Dispatcher
from radial_menu.engine.hooks import NoopHooks
from radial_menu.io.config import load_actions, load_app_config
from radial_menu.io.recorder import Recorder
from radial_menu.io.wheel_logging import WheelLogging
from radial_menu.runtime.sink_factory import make_sink


@dataclass
class App:
    dispatcher: Dispatcher
    state: WheelState
    wheel: WheelHandler
    outputs: OutputHandler
    recorder: Recorder | None = None
    sinks: list = field(default_factory=list)

    # host-facing entry points; each one is delivered and fully handled before returning
    def pointer_down(self, x: float, y: float, t: float = 0.0) -> int:
        return self.dispatcher.send(PointerDown(t=t, x=x, y=y))

    def pointer_motion(self, x: float, y: float, t: float = 0.0) -> int:
        return self.dispatcher.send(PointerMotion(t=t, x=x, y=y))

    def pointer_up(self, x: float, y: float, t: float = 0.0) -> int:
        return self.dispatcher.send(PointerUp(t=t, x=x, y=y))

    @property
    def result(self) -> str | None:
        return self.state.result

    def close(self) -> None:
        for s in self.sinks:
            fp = getattr(s, "fp", None)
            if fp is not None and fp is not sys.stdout:
                fp.close()


def build(
    cfg: AppModel | Mapping | str | os.PathLike | None = None,
    *,
    actions: list[ActionNode] | None = None,
    renderer: Renderer | None = None,
    launcher: Launcher | None = None,
    use_logging: bool = True,
) -> App:
    # 0) Validate config; a bad action document stops us here
    model = cfg if isinstance(cfg, AppModel) else load_app_config(cfg)
    root = actions if actions is not None else load_actions(model.actions_file)

    # 1) Recorder for transitions
    sinks = [make_sink(s) for s in model.sinks]
    recorder = Recorder(*sinks) if sinks else None

    # 2) Dispatcher (with hooks)
    hooks = (
        WheelLogging(
            run_id=model.run_id,
            level=model.log.level,
            debug=model.log.debug,
            sample_every=model.log.sample_every,
        )
        if use_logging
        else NoopHooks()
    )
    dispatcher = Dispatcher(hooks=hooks)

    # 3) State & handlers
    state = WheelState(level=root)
    wheel = WheelHandler(state, model.wheel, hooks=hooks)
    outputs = OutputHandler(
        wheel,
        renderer=renderer or NullRenderer(),
        launcher=launcher or RecordingLauncher(),
    )

    # 4) Wiring
    wire(dispatcher, wheel=wheel, outputs=outputs, recorder=recorder)

    return App(dispatcher, state, wheel, outputs, recorder, sinks)

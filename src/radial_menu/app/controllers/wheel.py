# radial_menu/app/controllers/wheel.py
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
from radial_menu.config.models import WheelModel
from radial_menu.domain.entities.actions import ActionNode
from radial_menu.domain.entities.geometry import Pt, distance, rotation_angle, to_point
from radial_menu.domain.layout import WheelSnapshot, snapshot
from radial_menu.domain.segments import bubble_center, segment_index
from radial_menu.domain.state import WheelState
from radial_menu.engine.hooks import DispatcherHooks, NoopHooks


class WheelHandler:
    """
    Navigation state machine of the wheel.

    Idle (no origin) <-> Active (origin set). Each of begin/move/end returns the
    transition events it produced; an empty list means nothing changed.
    """

    def __init__(
        self,
        state: WheelState,
        wheel: WheelModel | None = None,
        hooks: DispatcherHooks | None = None,
    ):
        self.state = state
        self.wheel = wheel or WheelModel()
        self.hooks = hooks or NoopHooks()

    # ------------- gesture entry points -----------------

    def begin(self, p: Pt, t: float = 0.0):
        # level is kept on purpose: re-aiming must not undo a drill-down
        self.state.anchor(to_point(p))
        return [RedrawRequested(t=t)]

    def move(self, p: Pt, t: float = 0.0):
        s = self.state
        if not s.active:
            return []
        p = to_point(p)
        if distance(s.origin, p) < self.wheel.gesture_threshold:
            return []
        hit = self._resolve(p, t)
        if hit is None:
            return []
        segment, node = hit
        if not node.children:
            # hovering a leaf never commits it
            return []
        n = len(s.level)
        name = node.name
        children = node.take_children()
        s.descend(bubble_center(s.origin, segment, n, self.wheel.bubble_distance), children)
        return [SubmenuEntered(t=t, segment=segment, name=name, depth=s.depth), RedrawRequested(t=t)]

    def end(self, p: Pt, t: float = 0.0):
        s = self.state
        if not s.active:
            return []
        p = to_point(p)
        d = distance(s.origin, p)
        if d < self.wheel.gesture_threshold:
            s.release()
            return [GestureCancelled(t=t, distance=d), RedrawRequested(t=t)]
        hit = self._resolve(p, t)
        if hit is None:
            return []
        segment, node = hit
        command = node.take_command()
        s.release(command)
        if command is None:
            # releasing on a drill-only bubble does not open it
            return [GestureReleased(t=t, segment=segment, name=node.name), RedrawRequested(t=t)]
        return [
            CommandCommitted(t=t, segment=segment, name=node.name, command=command),
            RedrawRequested(t=t),
        ]

    # ------------- dispatcher adapters ------------------

    def on_pointer_down(self, ev: PointerDown):
        return self.begin(ev.point, ev.t)

    def on_pointer_motion(self, ev: PointerMotion):
        return self.move(ev.point, ev.t)

    def on_pointer_up(self, ev: PointerUp):
        return self.end(ev.point, ev.t)

    # ------------- read side ----------------------------

    def snapshot(self) -> WheelSnapshot:
        return snapshot(
            self.state,
            active_radius=self.wheel.active_radius,
            bubble_radius=self.wheel.bubble_radius,
            bubble_distance=self.wheel.bubble_distance,
            canvas=self.wheel.canvas,
        )

    # ------------- helpers ------------------------------

    def _resolve(self, p, t: float) -> tuple[int, ActionNode] | None:
        s = self.state
        n = len(s.level)
        if n == 0:
            self.hooks.error(None, reason="empty_level", t=t, depth=s.depth)
            return None
        segment = segment_index(rotation_angle(s.origin, p), n)
        return segment, s.level[segment]

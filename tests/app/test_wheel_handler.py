# tests/app/test_wheel_handler.py
import math

import pytest

from radial_menu.app.controllers.wheel import WheelHandler
from radial_menu.app.events import (
    CommandCommitted,
    GestureCancelled,
    GestureReleased,
    RedrawRequested,
    SubmenuEntered,
)
from radial_menu.config.models import WheelModel
from radial_menu.domain.entities.actions import ActionNode
from radial_menu.domain.entities.geometry import Point
from radial_menu.domain.state import WheelState
from radial_menu.engine.hooks import NoopHooks


class FaultHooks(NoopHooks):
    def __init__(self):
        self.errors = []

    def error(self, ev, *, reason, **kw):
        self.errors.append(reason)


def names(events):
    return [type(e).__name__ for e in events]


@pytest.fixture
def submenu():
    return [ActionNode("Lock", "lock", command="lock"), ActionNode("Sleep", "sleep", command="sleep")]


@pytest.fixture
def handler(submenu):
    # ring of 4 by angle: 0 = [-pi, -pi/2), 1 = [-pi/2, 0), 2 = [0, pi/2), 3 = [pi/2, pi)
    level = [
        ActionNode("Files", "files", command="nautilus"),
        ActionNode("Browser", "web", command="firefox"),
        ActionNode("Terminal", "term", command="foot"),
        ActionNode("System", "system", children=submenu),
    ]
    state = WheelState(level=level)
    return WheelHandler(state, WheelModel(gesture_threshold=50, bubble_distance=80))


# ------------------ idle ------------------


def test_move_and_end_are_noops_while_idle(handler):
    level = handler.state.level
    assert handler.move(Point(0.0, 200.0)) == []
    assert handler.end(Point(0.0, 200.0)) == []
    assert handler.state.origin is None
    assert handler.state.result is None
    assert handler.state.level is level


def test_begin_anchors_and_requests_redraw(handler):
    handler.state.result = "stale"
    out = handler.begin(Point(3.0, 4.0), t=12.0)
    assert handler.state.origin == Point(3.0, 4.0)
    assert handler.state.result is None
    assert names(out) == ["RedrawRequested"]
    assert out[0].t == 12.0


def test_begin_accepts_plain_tuples(handler):
    handler.begin((1, 2))
    assert handler.state.origin == Point(1.0, 2.0)


# ------------------ drill-down ------------------


def test_move_past_threshold_drills_into_submenu(handler, submenu):
    system = handler.state.level[3]
    handler.begin(Point(0.0, 0.0))
    out = handler.move(Point(0.0, 60.0))

    assert names(out) == ["SubmenuEntered", "RedrawRequested"]
    entered = out[0]
    assert (entered.segment, entered.name, entered.depth) == (3, "System", 1)
    assert handler.state.level is submenu
    assert handler.state.depth == 1
    # recentred on bubble 3 of the old ring: (0 + 80 sin(3pi/2), 0 - 80 cos(3pi/2))
    o = handler.state.origin
    assert (o.x, o.y) == pytest.approx((-80.0, 0.0), abs=1e-9)
    # the children were handed over, not copied
    assert system.children is None


def test_move_inside_threshold_changes_nothing(handler):
    level = handler.state.level
    handler.begin(Point(0.0, 0.0))
    assert handler.move(Point(0.0, 30.0)) == []
    assert handler.state.level is level
    assert handler.state.origin == Point(0.0, 0.0)


def test_move_at_exact_threshold_counts(handler):
    handler.begin(Point(0.0, 0.0))
    out = handler.move(Point(0.0, 50.0))
    assert names(out)[0] == "SubmenuEntered"


def test_hovering_a_leaf_does_not_commit(handler):
    handler.begin(Point(0.0, 0.0))
    assert handler.move(Point(60.0, 1.0)) == []  # Terminal
    assert handler.state.result is None
    assert handler.state.origin == Point(0.0, 0.0)
    assert handler.state.level[2].command == "foot"


def test_begin_while_active_keeps_drilled_level(handler, submenu):
    handler.begin(Point(0.0, 0.0))
    handler.move(Point(0.0, 60.0))
    handler.begin(Point(300.0, 300.0))
    assert handler.state.origin == Point(300.0, 300.0)
    assert handler.state.level is submenu


# ------------------ commit / cancel ------------------


def test_release_on_leaf_commits():
    level = [ActionNode("Music", "music", command="launch-music")]
    h = WheelHandler(WheelState(level=level), WheelModel(gesture_threshold=50))
    h.begin(Point(10.0, 10.0))
    out = h.end(Point(10.0, 95.0))
    assert names(out) == ["CommandCommitted", "RedrawRequested"]
    assert out[0].command == "launch-music"
    assert h.state.result == "launch-music"
    assert h.state.origin is None


def test_release_inside_threshold_cancels():
    level = [ActionNode("Music", "music", command="launch-music")]
    h = WheelHandler(WheelState(level=level), WheelModel(gesture_threshold=50))
    h.begin(Point(10.0, 10.0))
    out = h.end(Point(10.0, 40.0))
    assert names(out) == ["GestureCancelled", "RedrawRequested"]
    assert out[0].distance == pytest.approx(30.0)
    assert h.state.result is None
    assert h.state.origin is None
    assert level[0].command == "launch-music"


def test_drill_then_release_commits_in_submenu(handler):
    handler.begin(Point(0.0, 0.0))
    handler.move(Point(0.0, 60.0))
    o = handler.state.origin
    # ring of two: lower half of the circle is segment 1
    out = handler.end(Point(o.x, o.y + 60.0))
    assert names(out) == ["CommandCommitted", "RedrawRequested"]
    assert (out[0].segment, out[0].name) == (1, "Sleep")
    assert handler.state.result == "sleep"
    assert handler.state.origin is None


def test_release_on_drill_only_bubble_does_not_open_it(handler, submenu):
    root = handler.state.level
    handler.begin(Point(0.0, 0.0))
    out = handler.end(Point(0.0, 60.0))
    assert names(out) == ["GestureReleased", "RedrawRequested"]
    assert handler.state.result is None
    assert handler.state.origin is None
    assert handler.state.level is root
    assert root[3].children is submenu


def test_command_fires_once_per_node():
    level = [ActionNode("Music", "music", command="launch-music")]
    h = WheelHandler(WheelState(level=level))
    h.begin(Point(0.0, 0.0))
    h.end(Point(0.0, 100.0))
    assert h.state.result == "launch-music"

    h.begin(Point(0.0, 0.0))
    assert h.state.result is None
    out = h.end(Point(0.0, 100.0))
    assert isinstance(out[0], GestureReleased)
    assert h.state.result is None


def test_node_with_both_fields_drills_on_hover_and_commits_on_release():
    both = ActionNode("Both", "b", command="run", children=[ActionNode("Inner", "i", command="inner")])
    h = WheelHandler(WheelState(level=[both]))
    h.begin(Point(0.0, 0.0))
    out = h.end(Point(100.0, 0.0))
    assert isinstance(out[0], CommandCommitted)
    assert h.state.result == "run"
    assert both.children is not None

    h.begin(Point(0.0, 0.0))
    out = h.move(Point(100.0, 0.0))
    assert isinstance(out[0], SubmenuEntered)
    assert [n.name for n in h.state.level] == ["Inner"]


def test_empty_node_is_a_noop_everywhere():
    empty = ActionNode("Nothing", "none")
    h = WheelHandler(WheelState(level=[empty]))
    h.begin(Point(0.0, 0.0))
    assert h.move(Point(0.0, 90.0)) == []
    out = h.end(Point(0.0, 90.0))
    assert isinstance(out[0], GestureReleased)
    assert h.state.result is None


def test_single_entry_ring_takes_every_direction():
    level = [ActionNode("Only", "o", command="only")]
    for angle in (0.0, 1.0, 2.5, -3.0, math.pi / 2):
        level[0].command = "only"
        h = WheelHandler(WheelState(level=level))
        h.begin(Point(0.0, 0.0))
        h.end(Point(100 * math.cos(angle), 100 * math.sin(angle)))
        assert h.state.result == "only"


# ------------------ faults ------------------


def test_empty_level_is_logged_and_ignored():
    hooks = FaultHooks()
    h = WheelHandler(WheelState(level=[]), hooks=hooks)
    h.begin(Point(0.0, 0.0))
    assert h.move(Point(0.0, 100.0)) == []
    assert h.end(Point(0.0, 100.0)) == []
    assert hooks.errors == ["empty_level", "empty_level"]
    assert h.state.origin == Point(0.0, 0.0)


def test_snapshot_reflects_state(handler):
    snap = handler.snapshot()
    assert not snap.active
    assert len(snap.positions) == 4
    handler.begin(Point(5.0, 5.0))
    snap = handler.snapshot()
    assert snap.center == Point(5.0, 5.0)
    assert snap.active_radius == 30.0 and snap.bubble_radius == 20.0


def test_redraw_requested_is_plain_event():
    assert RedrawRequested(t=1.0).t == 1.0
    assert GestureCancelled(t=0.0, distance=2.0).distance == 2.0

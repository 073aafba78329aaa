# engine/hooks.py
from typing import Protocol

from radial_menu.engine.event import BaseEvent


class DispatcherHooks(Protocol):
    def run_start(self, *, qsize): ...
    def run_end(self, *, processed, qsize, wall_ms): ...
    def post(self, ev: BaseEvent, *, qsize): ...
    def dispatch_start(self, ev: BaseEvent, *, seq, qsize, handlers): ...
    def dispatch_end(self, ev: BaseEvent, *, out_events, ms): ...
    def error(self, ev: BaseEvent | None, *, reason: str, **kw): ...


class NoopHooks:
    def run_start(self, **_):
        pass

    def run_end(self, **_):
        pass

    def post(self, *_, **__):
        pass

    def dispatch_start(self, *_, **__):
        pass

    def dispatch_end(self, *_, **__):
        pass

    def error(self, *_, **__):
        pass

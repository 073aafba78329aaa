# engine/dispatcher.py

import time
from collections import deque
from collections.abc import Callable, Iterable

from .event import BaseEvent
from .hooks import DispatcherHooks, NoopHooks

Handler = Callable[[BaseEvent], Iterable[BaseEvent] | None]


class Dispatcher:
    """
    Synchronous FIFO event loop. Events are handled one at a time, in the
    order they were posted; whatever a handler returns is queued behind them.
    """

    def __init__(self, hooks: DispatcherHooks | None = None):
        self._q: deque[BaseEvent] = deque()
        self._seq = 0
        self._subs: dict[type[BaseEvent], list[Handler]] = {}
        self._hooks = hooks or NoopHooks()

    @property
    def pending(self) -> int:
        return len(self._q)

    def on(self, etype: type[BaseEvent], handler: Handler) -> None:
        self._subs.setdefault(etype, []).append(handler)

    def post(self, ev: BaseEvent) -> None:
        self._q.append(ev)
        self._hooks.post(ev, qsize=len(self._q))

    def run(self, max_events: int | None = None) -> int:
        t0 = time.perf_counter()
        self._hooks.run_start(qsize=len(self._q))
        processed = 0
        while self._q:
            ev = self._q.popleft()
            self._seq += 1
            handlers = self._subs.get(type(ev), ())
            t1 = time.perf_counter()
            self._hooks.dispatch_start(
                ev, seq=self._seq, qsize=len(self._q), handlers=len(handlers)
            )
            total_out = 0
            for h in handlers:
                try:
                    out = h(ev) or ()
                except Exception as exc:
                    self._hooks.error(ev, reason="handler_failed", exc=exc)
                    raise
                for nxt in out:
                    total_out += 1
                    self.post(nxt)
            ms = (time.perf_counter() - t1) * 1000
            self._hooks.dispatch_end(ev, out_events=total_out, ms=ms)
            processed += 1
            if max_events and processed >= max_events:
                break
        self._hooks.run_end(
            processed=processed,
            qsize=len(self._q),
            wall_ms=(time.perf_counter() - t0) * 1000,
        )
        return processed

    def send(self, ev: BaseEvent) -> int:
        """Post one event and drain the queue."""
        self.post(ev)
        return self.run()

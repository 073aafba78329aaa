# io/wheel_logging.py
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from radial_menu.engine.hooks import NoopHooks


def _default_json_logger(name="radial_menu", level="INFO"):
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler(sys.stdout)

        class _JsonFormatter(logging.Formatter):
            def format(self, record: logging.LogRecord) -> str:
                payload = {
                    "level": record.levelname,
                    "msg": record.getMessage(),
                    "logger": record.name,
                }
                extra = getattr(record, "extra", None)
                if isinstance(extra, dict):
                    payload.update(extra)
                return json.dumps(payload, default=str)

        h.setFormatter(_JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(level)
    return logger


class WheelLogging(NoopHooks):
    """
    Structured logs for the dispatcher and the wheel's transitions.
    """

    BUSINESS = {
        "SubmenuEntered",
        "CommandCommitted",
        "GestureCancelled",
        "GestureReleased",
    }

    def __init__(
        self,
        run_id: str = "local",
        level: str = "INFO",
        debug: bool = False,
        sample_every: int = 1,
        logger: logging.Logger | None = None,
    ):
        self.run_id, self.debug, self.sample_every = run_id, debug, max(1, sample_every)
        self.log = logger or _default_json_logger(level=level)
        self._processed = 0

    # --------------- Helpers -----------------------------

    def _emit(self, level: str, msg: str, **extra):
        payload = {"run_id": self.run_id}
        self.log.log(getattr(logging, level), msg, extra={"extra": {**payload, **extra}})

    def _shape_event(self, ev, want_name: bool = False):
        name = type(ev).__name__
        base = {"t": getattr(ev, "t", None)}
        if is_dataclass(ev):
            evd = asdict(ev)
            evd.pop("t", None)
            if evd:
                base["data"] = evd
        return (name, base) if want_name else base

    # --------------------------------------------------------

    def run_start(self, *, qsize: int):
        if self.debug:
            self._emit("DEBUG", "run_start", qsize=qsize)

    def run_end(self, *, processed: int, **extra):
        if self.debug:
            self._emit("DEBUG", "run_end", processed=processed, **extra)

    def post(self, ev, *, qsize: int):
        if self.debug and (qsize % self.sample_every) == 0:
            self._emit("DEBUG", "post", **self._shape_event(ev), qsize=qsize)

    def dispatch_start(self, ev, *, seq: int, qsize: int, handlers: int):
        self._processed += 1
        name, extra = self._shape_event(ev, want_name=True)
        if name in self.BUSINESS:
            self._emit("INFO", name, **extra, seq=seq)
        elif self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", name, **extra, seq=seq, qsize=qsize, handlers=handlers)

    def dispatch_end(self, ev, *, out_events: int, ms: float):
        if self.debug and (self._processed % self.sample_every) == 0:
            self._emit("DEBUG", "dispatch_done", out_events=out_events, ms=round(ms, 3))

    def error(self, ev, *, reason: str, exc: BaseException | None = None, **extra):
        fields = {"reason": reason, **extra}
        if ev is not None:
            fields["event"] = type(ev).__name__
        if exc is not None:
            fields["error"] = str(exc)
        self._emit("ERROR", "wheel_error", **fields)

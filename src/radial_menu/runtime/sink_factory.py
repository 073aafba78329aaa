# runtime/sink_factory.py
import sys
from collections.abc import Callable

from radial_menu.config.models import SinkJsonlModel, SinkMemoryModel, SinkUnion
from radial_menu.io.recorder import JsonlSink, MemorySink, Sink

SinkFactory = Callable[[SinkUnion], Sink]

_sink_registry: dict[str, SinkFactory] = {}


def register_sink(kind: str):
    def deco(fn: SinkFactory):
        _sink_registry[kind] = fn
        return fn

    return deco


def make_sink(cfg: SinkUnion) -> Sink:
    try:
        factory = _sink_registry[cfg.kind]
    except KeyError:
        raise ValueError(f"Unknown sink kind {cfg.kind!r}")
    return factory(cfg)


@register_sink("jsonl")
def _make_jsonl(cfg: SinkJsonlModel):
    # caller owns the handle (App.close)
    fp = open(cfg.file, "a", encoding="utf-8") if cfg.file else sys.stdout
    return JsonlSink(fp)


@register_sink("memory")
def _make_memory(cfg: SinkMemoryModel):
    return MemorySink()

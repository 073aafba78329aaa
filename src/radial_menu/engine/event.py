# engine/event.py
from dataclasses import dataclass


@dataclass(order=True)
class BaseEvent:
    t: float  # host timestamp (ms), informational only

# src/spaceballs/core/events.py

from __future__ import annotations
from dataclasses import dataclass
from abc import ABC


@dataclass(kw_only=True)
class BaseEvent(ABC):
    """Marker base class so you can type on 'list[BaseEvent]'."""
    t: float  # simulation time when this event occurred
    shape_id: int | None = None

    def to_payload_dict(self) -> dict:
        return {}


@dataclass(kw_only=True)
class WrapEvent(BaseEvent):
    axis: int          # 0 = x, 1 = y
    new_coord: float   # coordinate on the opposite edge

    def to_payload_dict(self) -> dict:
        return {"axis": self.axis, "new_coord": self.new_coord}


@dataclass(kw_only=True)
class SpawnEvent(BaseEvent):
    kind: str
    radius: float

    def to_payload_dict(self) -> dict:
        return {"kind": self.kind, "radius": self.radius}


@dataclass(kw_only=True)
class DestroyEvent(BaseEvent):
    reason: str = "shrunk"

    def to_payload_dict(self) -> dict:
        return {"reason": self.reason}

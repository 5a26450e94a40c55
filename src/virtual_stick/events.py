"""Update events delivered to stick consumers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .geometry import Direction, RelativeVector


class EventType(str, Enum):
    START = "start"
    MOVE = "move"
    STOP = "stop"


@dataclass(frozen=True)
class UpdateEvent:
    """Normalized notification; geometry is only present on moves."""
    type: EventType
    x: Optional[float] = None
    y: Optional[float] = None
    direction: Optional[Direction] = None

    @classmethod
    def start(cls) -> "UpdateEvent":
        return cls(EventType.START)

    @classmethod
    def stop(cls) -> "UpdateEvent":
        return cls(EventType.STOP)

    @classmethod
    def move(cls, vector: RelativeVector, direction: Direction) -> "UpdateEvent":
        # screen y grows downwards, consumers get y growing upwards
        return cls(EventType.MOVE, x=vector.relative_x, y=-vector.relative_y, direction=direction)

    def to_dict(self) -> dict:
        return {
            "type": self.type.value,
            "x": self.x,
            "y": self.y,
            "direction": self.direction.value if self.direction is not None else None,
        }


Listener = Callable[[UpdateEvent], None]


@dataclass
class UpdateEmitter:
    """
    The three consumer channels.

    Any channel may be left unset; its notifications are then dropped.
    """
    on_start: Optional[Listener] = None
    on_move: Optional[Listener] = None
    on_stop: Optional[Listener] = None

    def emit_start(self, event: UpdateEvent) -> None:
        if self.on_start:
            self.on_start(event)

    def emit_move(self, event: UpdateEvent) -> None:
        if self.on_move:
            self.on_move(event)

    def emit_stop(self, event: UpdateEvent) -> None:
        if self.on_stop:
            self.on_stop(event)

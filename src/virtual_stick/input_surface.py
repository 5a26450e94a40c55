from __future__ import annotations

from enum import Enum
from typing import Callable, Dict, List, Optional, Protocol, Tuple

from .geometry import PointerSample, PointerSource


class SampleKind(Enum):
    MOUSE_DOWN = "mousedown"
    MOUSE_MOVE = "mousemove"
    MOUSE_UP = "mouseup"
    TOUCH_START = "touchstart"
    TOUCH_MOVE = "touchmove"
    TOUCH_END = "touchend"


# (move kind, release kind) a session listens to, by the source of its press
TRACKING_KINDS: Dict[PointerSource, Tuple[SampleKind, SampleKind]] = {
    PointerSource.MOUSE: (SampleKind.MOUSE_MOVE, SampleKind.MOUSE_UP),
    PointerSource.TOUCH: (SampleKind.TOUCH_MOVE, SampleKind.TOUCH_END),
}

SampleHandler = Callable[[Optional[PointerSample]], None]


class InputSurface(Protocol):
    def subscribe(self, kind: SampleKind, handler: SampleHandler) -> None: ...
    def unsubscribe(self, kind: SampleKind, handler: SampleHandler) -> None: ...


class ListenerSurface:
    """In-process input surface that fans samples out to subscribed handlers."""

    def __init__(self) -> None:
        self._handlers: Dict[SampleKind, List[SampleHandler]] = {kind: [] for kind in SampleKind}

    def subscribe(self, kind: SampleKind, handler: SampleHandler) -> None:
        handlers = self._handlers[kind]
        if handler not in handlers:
            handlers.append(handler)

    def unsubscribe(self, kind: SampleKind, handler: SampleHandler) -> None:
        handlers = self._handlers[kind]
        if handler in handlers:
            handlers.remove(handler)

    def listener_count(self, kind: SampleKind) -> int:
        return len(self._handlers[kind])

    def dispatch(self, kind: SampleKind, sample: Optional[PointerSample] = None) -> None:
        # copy: a release handler unsubscribes while we iterate
        for handler in list(self._handlers[kind]):
            handler(sample)

"""Drag-session engine turning pointer samples into a bounded stick vector."""

from .config_manager import StickConfig
from .events import EventType, UpdateEmitter, UpdateEvent
from .geometry import (
    Direction,
    PointerSample,
    PointerSource,
    ReferenceFrame,
    RelativeVector,
    classify_direction,
    compute_relative_vector,
    direction_for_angle,
    first_touch,
)
from .input_surface import InputSurface, ListenerSurface, SampleKind
from .session import StickSession, StickSnapshot
from .throttle import ThrottleGate

__all__ = [
    'Direction',
    'EventType',
    'InputSurface',
    'ListenerSurface',
    'PointerSample',
    'PointerSource',
    'ReferenceFrame',
    'RelativeVector',
    'SampleKind',
    'StickConfig',
    'StickSession',
    'StickSnapshot',
    'ThrottleGate',
    'UpdateEmitter',
    'UpdateEvent',
    'classify_direction',
    'compute_relative_vector',
    'direction_for_angle',
    'first_touch',
]

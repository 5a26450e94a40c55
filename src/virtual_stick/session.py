from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from .config_manager import StickConfig
from .events import UpdateEmitter, UpdateEvent
from .geometry import (
    Direction,
    PointerSample,
    ReferenceFrame,
    RelativeVector,
    compute_relative_vector,
    direction_for_angle,
)
from .input_surface import TRACKING_KINDS, InputSurface, ListenerSurface, SampleKind
from .throttle import Clock, ThrottleGate


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StickSnapshot:
    """Immutable view of the session for painting/UI."""
    dragging: bool
    vector: Optional[RelativeVector]
    direction: Optional[Direction]
    disabled: bool


class StickSession:
    """
    Drag lifecycle of a single stick.

    Responsibilities:
      - Idle/Dragging transitions driven by press, move and release samples
      - Capture the reference frame on press, drop it on release
      - Register for move/release samples on the input surface only while dragging
      - Deliver start/stop directly and moves through the throttle gate
    """

    def __init__(
        self,
        config: Optional[StickConfig] = None,
        emitter: Optional[UpdateEmitter] = None,
        surface: Optional[InputSurface] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._config = replace(config) if config is not None else StickConfig()
        self._emitter = emitter or UpdateEmitter()
        self._surface = surface if surface is not None else ListenerSurface()
        self._gate = ThrottleGate(self._config.throttle, clock=clock)

        self._dragging = False
        self._frame: Optional[ReferenceFrame] = None
        self._last_vector: Optional[RelativeVector] = None
        self._last_direction: Optional[Direction] = None
        self._tracking: Optional[Tuple[SampleKind, SampleKind]] = None

    # ---- config ----
    def get_config(self) -> StickConfig:
        return self._config

    def set_config(self, cfg: StickConfig) -> None:
        """Takes effect from the next press; an active drag keeps its frame."""
        self._config = replace(cfg)

    def set_disabled(self, disabled: bool) -> None:
        # an active drag runs on until its release
        self._config = replace(self._config, disabled=bool(disabled))

    # ---- state ----
    @property
    def dragging(self) -> bool:
        return self._dragging

    @property
    def frame(self) -> Optional[ReferenceFrame]:
        return self._frame

    @property
    def last_vector(self) -> Optional[RelativeVector]:
        return self._last_vector

    def snapshot(self) -> StickSnapshot:
        return StickSnapshot(
            dragging=self._dragging,
            vector=self._last_vector,
            direction=self._last_direction,
            disabled=self._config.disabled,
        )

    # ---- transitions ----
    def press(self, sample: PointerSample, left: float, top: float) -> bool:
        """
        Start a drag with the control's bounding box at (left, top).

        Returns True when a session was started.
        """
        if self._config.disabled:
            logger.debug("Ignoring press on disabled stick")
            return False
        if self._dragging:
            logger.debug("Ignoring press while already dragging")
            return False

        self._frame = ReferenceFrame.from_bounds(left, top, self._config.size)
        self._dragging = True
        self._gate.duration_ms = self._config.throttle
        self._gate.reset()

        self._tracking = TRACKING_KINDS[sample.source]
        move_kind, release_kind = self._tracking
        self._surface.subscribe(move_kind, self._on_surface_move)
        self._surface.subscribe(release_kind, self._on_surface_release)

        logger.debug(f"Drag started from {sample.source.value} at ({sample.x}, {sample.y})")
        self._emitter.emit_start(UpdateEvent.start())
        return True

    def move(self, sample: PointerSample) -> Optional[UpdateEvent]:
        """
        Process a move sample.

        Returns the move event when it was computed, whether or not the
        throttle let it through to the consumer; None while idle.
        """
        if not self._dragging or self._frame is None:
            return None

        vector = compute_relative_vector(sample, self._frame)
        direction = direction_for_angle(vector.angle)
        self._last_vector = vector
        self._last_direction = direction

        event = UpdateEvent.move(vector, direction)
        if self._gate.admit():
            self._emitter.emit_move(event)
        return event

    def release(self) -> bool:
        """End the drag. Returns False when there was nothing to end."""
        if not self._dragging:
            return False

        self._dragging = False
        self._frame = None
        self._last_vector = None
        self._last_direction = None

        if self._tracking is not None:
            move_kind, release_kind = self._tracking
            self._surface.unsubscribe(move_kind, self._on_surface_move)
            self._surface.unsubscribe(release_kind, self._on_surface_release)
            self._tracking = None

        logger.debug("Drag stopped")
        self._emitter.emit_stop(UpdateEvent.stop())
        return True

    def cancel(self) -> bool:
        return self.release()

    # ---- surface handlers ----
    def _on_surface_move(self, sample: Optional[PointerSample]) -> None:
        if sample is not None:
            self.move(sample)

    def _on_surface_release(self, sample: Optional[PointerSample]) -> None:
        self.release()

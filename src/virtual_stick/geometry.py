"""Pointer geometry and direction classification for the virtual stick."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Sequence, Tuple


class PointerSource(Enum):
    """Device family a pointer sample came from."""
    MOUSE = "mouse"
    TOUCH = "touch"


class Direction(str, Enum):
    """Quadrant the stick is pointing at."""
    FORWARD = "FORWARD"
    RIGHT = "RIGHT"
    LEFT = "LEFT"
    BACKWARD = "BACKWARD"


# Quadrant boundaries in radians, measured by atan2(x, y) so that zero points
# down the screen and +/-pi points up.
TOP_RIGHT = 2.35619449
TOP_LEFT = -2.35619449
BOTTOM_RIGHT = 0.785398163
BOTTOM_LEFT = -0.785398163


@dataclass(frozen=True)
class PointerSample:
    """Absolute pointer position in host-surface coordinates."""
    x: float
    y: float
    source: PointerSource = PointerSource.MOUSE


@dataclass(frozen=True)
class ReferenceFrame:
    """Origin (top-left of the control) and radius captured at press time."""
    origin_x: float
    origin_y: float
    radius: float

    @classmethod
    def from_bounds(cls, left: float, top: float, size: float) -> "ReferenceFrame":
        return cls(origin_x=float(left), origin_y=float(top), radius=size / 2.0)

    @property
    def center(self) -> Tuple[float, float]:
        return (self.origin_x + self.radius, self.origin_y + self.radius)


@dataclass(frozen=True)
class RelativeVector:
    """
    Pointer position relative to the control.

    relative_x/relative_y are measured from the center and clamped to the
    radius; axis_x/axis_y are measured from the top-left corner and are
    never clamped.
    """
    relative_x: float
    relative_y: float
    axis_x: float
    axis_y: float

    @property
    def distance(self) -> float:
        return math.hypot(self.relative_x, self.relative_y)

    @property
    def angle(self) -> float:
        # x before y: zero angle points down the screen
        return math.atan2(self.relative_x, self.relative_y)


def first_touch(points: Sequence[Tuple[float, float]]) -> Optional[PointerSample]:
    """Primary touch point as a sample, or None if no point is down."""
    if not points:
        return None
    x, y = points[0]
    return PointerSample(float(x), float(y), PointerSource.TOUCH)


def compute_relative_vector(sample: PointerSample, frame: ReferenceFrame) -> RelativeVector:
    """Map an absolute sample into the frame and clamp it to the circle."""
    axis_x = sample.x - frame.origin_x
    axis_y = sample.y - frame.origin_y
    relative_x = axis_x - frame.radius
    relative_y = axis_y - frame.radius

    distance = math.hypot(relative_x, relative_y)
    # distance == 0 never exceeds the radius, so the scale is always defined
    if distance > frame.radius:
        scale = frame.radius / distance
        relative_x *= scale
        relative_y *= scale

    return RelativeVector(
        relative_x=relative_x,
        relative_y=relative_y,
        axis_x=axis_x,
        axis_y=axis_y,
    )


def direction_for_angle(angle: float) -> Direction:
    """
    Bucket an atan2(x, y) angle into a quadrant.

    Exact boundary values are not claimed by the RIGHT band (both of its
    comparisons are strict) and fall through to BACKWARD.
    """
    if angle > TOP_RIGHT or angle < TOP_LEFT:
        return Direction.FORWARD
    elif angle < TOP_RIGHT and angle > BOTTOM_RIGHT:
        return Direction.RIGHT
    elif angle < BOTTOM_LEFT:
        return Direction.LEFT
    return Direction.BACKWARD


def classify_direction(relative_x: float, relative_y: float) -> Direction:
    return direction_for_angle(RelativeVector(relative_x, relative_y, 0.0, 0.0).angle)

"""Configuration utilities for the virtual stick."""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Mapping


logger = logging.getLogger(__name__)

DEFAULT_SIZE = 100.0
DEFAULT_BASE_COLOR = "#000033"
DEFAULT_STICK_COLOR = "#3D59AB"
DEFAULT_THROTTLE_MS = 0.0


@dataclass
class StickConfig:
    """Container for the host-supplied stick options."""

    size: float = DEFAULT_SIZE  # diameter in layout units
    base_color: str = DEFAULT_BASE_COLOR
    stick_color: str = DEFAULT_STICK_COLOR
    throttle: float = DEFAULT_THROTTLE_MS  # ms between delivered moves, 0 = off
    disabled: bool = False

    def __post_init__(self):
        self.validate()

    def validate(self):
        if not self.size > 0.0:
            raise ValueError("Size must be positive")

        if self.throttle < 0.0:
            raise ValueError("Throttle must be non-negative")

        for value, label in [
            (self.base_color, "Base"),
            (self.stick_color, "Stick"),
        ]:
            if not value or not str(value).strip():
                raise ValueError(f"{label} color cannot be empty")

    @property
    def radius(self) -> float:
        return self.size / 2.0

    @property
    def stick_size(self) -> float:
        return self.size / 1.5

    @classmethod
    def from_options(cls, options: Mapping[str, Any]) -> "StickConfig":
        """Build a config from host option names, falling back on bad values."""

        def lookup(camel: str, snake: str):
            if camel in options:
                return options[camel]
            return options.get(snake)

        size = _checked(
            safe_convert(lookup("size", "size"), float, DEFAULT_SIZE),
            lambda v: v > 0.0, "size", DEFAULT_SIZE,
        )
        throttle = _checked(
            safe_convert(lookup("throttle", "throttle"), float, DEFAULT_THROTTLE_MS),
            lambda v: v >= 0.0, "throttle", DEFAULT_THROTTLE_MS,
        )
        base_color = _checked(
            safe_convert(lookup("baseColor", "base_color"), str, DEFAULT_BASE_COLOR),
            lambda v: bool(v.strip()), "baseColor", DEFAULT_BASE_COLOR,
        )
        stick_color = _checked(
            safe_convert(lookup("stickColor", "stick_color"), str, DEFAULT_STICK_COLOR),
            lambda v: bool(v.strip()), "stickColor", DEFAULT_STICK_COLOR,
        )
        disabled = to_bool(lookup("disabled", "disabled"), False)

        return cls(
            size=size,
            base_color=base_color,
            stick_color=stick_color,
            throttle=throttle,
            disabled=disabled,
        )


def safe_convert(value, converter: Callable, default):
    try:
        return converter(value) if value is not None else default
    except (ValueError, TypeError):
        logger.warning(f"Could not convert option value {value!r}, using {default!r}")
        return default


def to_bool(value, default: bool) -> bool:
    """Coerce an option value to bool with fallback."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"1", "true", "yes", "on"}:
            return True
        if lowered in {"0", "false", "no", "off", ""}:
            return False
    if isinstance(value, (int, float)):
        return bool(value)
    logger.warning(f"Could not interpret {value!r} as a boolean, using {default!r}")
    return default


def _checked(value, predicate: Callable, label: str, default):
    if predicate(value):
        return value
    logger.warning(f"Ignoring invalid {label} option {value!r}, using {default!r}")
    return default

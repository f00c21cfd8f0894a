# MIT License (see LICENSE)
"""
Live-tunable simulation parameters.

SimParameters is the one place the integrator reads its scalars from. UI
controls (sliders, text boxes, the pygame key bindings, a test harness) only
ever write through the set_* methods, which coerce the incoming value, reject
anything that would destabilise the integrator, and log the rejection. A
rejected update leaves the previous value in place.
"""
from __future__ import annotations
from dataclasses import dataclass, fields
import logging
import math

from . import constants

logger = logging.getLogger(__name__)


def _coerce_float(value) -> float | None:
    """float(value) for numbers and numeric strings; None when not finite or unparsable."""
    if isinstance(value, bool):
        return None
    try:
        out = float(value)
    except (TypeError, ValueError):
        return None
    return out if math.isfinite(out) else None


def _coerce_count(value) -> int | None:
    out = _coerce_float(value)
    if out is None or out != int(out):
        return None
    return int(out)


@dataclass
class SimParameters:
    """
    Scalars read by the integrator every frame.

    Attributes:
        spring_constant: Stiffness k of every spring. Must be >= 0.
        rest_length: Vertical rest length of every spring. Must be >= 0.
        gravity: Downward acceleration g (negative pulls up).
        node_count: Requested chain length. Must be >= 1.
        force_dampen: Unitless force divisor. Must be > 0.
        friction: Per-step velocity multiplier in (0, 1].
        fps: Nominal frame rate the acceleration is scaled to. Must be > 0.
        max_dt_ms: Ceiling for the elapsed time of one step. Must be >= 0.
        flick_scale: Release velocity per unit of pointer displacement.
    """
    spring_constant: float = constants.SPRING_CONSTANT
    rest_length: float = constants.REST_LENGTH
    gravity: float = constants.GRAVITY
    node_count: int = constants.NODE_COUNT
    force_dampen: float = constants.FORCE_DAMPEN
    friction: float = constants.FRICTION
    fps: float = constants.FPS
    max_dt_ms: float = constants.MAX_DT_MS
    flick_scale: float = constants.FLICK_SCALE

    def __post_init__(self) -> None:
        for f in fields(self):
            value = getattr(self, f.name)
            check = _VALIDATORS[f.name]
            coerced = check(value)
            if coerced is None:
                raise ValueError(f"Invalid value for {f.name}: {value!r}")
            setattr(self, f.name, coerced)

    def _update(self, name: str, value) -> bool:
        coerced = _VALIDATORS[name](value)
        if coerced is None:
            logger.warning("Ignoring invalid %s update: %r", name, value)
            return False
        setattr(self, name, coerced)
        return True

    def set_spring_constant(self, value) -> bool:
        return self._update("spring_constant", value)

    def set_rest_length(self, value) -> bool:
        return self._update("rest_length", value)

    def set_gravity(self, value) -> bool:
        return self._update("gravity", value)

    def set_node_count(self, value) -> bool:
        """Record a new chain length. Resizing the chain is the caller's job."""
        return self._update("node_count", value)

    def set_friction(self, value) -> bool:
        return self._update("friction", value)

    def set_force_dampen(self, value) -> bool:
        return self._update("force_dampen", value)


def _non_negative(value) -> float | None:
    out = _coerce_float(value)
    return out if out is not None and out >= 0 else None


def _positive(value) -> float | None:
    out = _coerce_float(value)
    return out if out is not None and out > 0 else None


def _unit_interval(value) -> float | None:
    out = _coerce_float(value)
    return out if out is not None and 0 < out <= 1 else None


def _at_least_one(value) -> int | None:
    out = _coerce_count(value)
    return out if out is not None and out >= 1 else None


_VALIDATORS = {
    "spring_constant": _non_negative,
    "rest_length": _non_negative,
    "gravity": _coerce_float,
    "node_count": _at_least_one,
    "force_dampen": _positive,
    "friction": _unit_interval,
    "fps": _positive,
    "max_dt_ms": _non_negative,
    "flick_scale": _coerce_float,
}

"""Shared utility helpers used across guess-duel modules.

Small clamping / coercion primitives shared by the models and the
rule loader.
"""

from __future__ import annotations


def clamp_float(value: float, minimum: float, maximum: float) -> float:
    """Clamp *value* to the inclusive ``[minimum, maximum]`` range."""
    return max(minimum, min(maximum, float(value)))


def coerce_int(value: object) -> int | None:
    """Safely coerce *value* to ``int``, returning ``None`` on failure.

    Floats with a fractional part and booleans are not treated as integers.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float) and not value.is_integer():
        return None
    try:
        return int(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None

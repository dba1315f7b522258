"""Helpers for bounded, stepped numeric values."""

from __future__ import annotations

import math


def snap_to_step(
    value: float,
    minimum: float,
    maximum: float,
    step: float = 1.0,
) -> float:
    """Clamp ``value`` into ``[minimum, maximum]`` and snap it onto the step grid.

    The grid is anchored at ``minimum``. Non-finite input collapses to
    ``minimum``.

    Args:
        value: Raw value, e.g. from a mouse position or a stored policy.
        minimum: Lower bound (inclusive).
        maximum: Upper bound (inclusive).
        step: Grid spacing; must be positive.

    Returns:
        The nearest on-grid value within bounds.
    """
    if step <= 0:
        raise ValueError(f"step must be positive, got {step!r}")
    if minimum > maximum:
        raise ValueError(f"minimum {minimum!r} is greater than maximum {maximum!r}")
    if not math.isfinite(value):
        return float(minimum)
    clamped = min(max(float(value), minimum), maximum)
    steps = round((clamped - minimum) / step)
    snapped = minimum + steps * step
    return float(min(snapped, maximum))


def format_count(count: int, unit: str) -> str:
    """Return ``"1 Book"`` / ``"15 Books"`` style labels."""
    suffix = "" if count == 1 else "s"
    return f"{count} {unit}{suffix}"


__all__ = ["format_count", "snap_to_step"]

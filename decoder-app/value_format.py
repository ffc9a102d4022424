"""
Resistor Decoder - Resistance Unit Scaling

Scales a raw resistance in ohms to the largest applicable unit (Ω / KΩ / MΩ).
Returns structured dicts; rounding for display is left to describe().
"""

from __future__ import annotations

import math

# (threshold, divisor, unit), checked in order; first match wins.
UNIT_SCALES: list[tuple[float, float, str]] = [
    (1_000_000, 1_000_000, "MΩ"),
    (1_000,     1_000,     "KΩ"),
    (0,         1,         "Ω"),
]


def format_resistance(raw_value: float) -> dict:
    """Scale *raw_value* ohms to ``{'magnitude': float, 'unit': str}``.

    Exactly 1 000 → 1 KΩ and exactly 1 000 000 → 1 MΩ.  Anything below
    1 000 (including 0 and fractions of an ohm) is returned unscaled in Ω.

    Raises:
        ValueError: If *raw_value* is negative or not finite.
    """
    if not math.isfinite(raw_value):
        raise ValueError(f"Resistance must be finite, got {raw_value!r}")

    for threshold, divisor, unit in UNIT_SCALES:
        if raw_value >= threshold:
            return {"magnitude": raw_value / divisor, "unit": unit}

    raise ValueError(f"Resistance must be non-negative, got {raw_value!r}")


def describe(result) -> str:
    """Return a display string for a ResistanceResult, e.g. ``'4.7 KΩ ±5%'``.

    The magnitude is shown with at most three decimals and a trailing
    ``.0`` is stripped.
    """
    text = f"{result.magnitude:.3f}".rstrip("0").rstrip(".")
    if result.tolerance:
        return f"{text} {result.unit} {result.tolerance}"
    return f"{text} {result.unit}"

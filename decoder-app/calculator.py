"""
Resistor Decoder - Band Selection to Resistance

    value = (digit1 × 10 + digit2) × multiplier

Every band is validated against the registry before use.  A color that does
not supply the role its position needs raises InvalidRoleError instead of
being read as zero.
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass

import config
from color_bands import REGISTRY, ColorBandRegistry
from value_format import format_resistance


@dataclass(frozen=True)
class BandSelection:
    """The four chosen band colors, band 1 first."""

    band1: str = config.DEFAULT_BANDS[0]
    band2: str = config.DEFAULT_BANDS[1]
    band3: str = config.DEFAULT_BANDS[2]
    band4: str = config.DEFAULT_BANDS[3]

    def bands(self) -> tuple[str, str, str, str]:
        return (self.band1, self.band2, self.band3, self.band4)

    def with_band(self, band: int, color: str) -> BandSelection:
        """Return a copy with band position *band* (1–4) set to *color*."""
        if band not in (1, 2, 3, 4):
            raise ValueError(f"Band position must be 1–4, got {band!r}")
        return dataclasses.replace(self, **{f"band{band}": color})


@dataclass(frozen=True)
class ResistanceResult:
    magnitude: float
    unit: str
    tolerance: str | None


def compute(selection: BandSelection, registry: ColorBandRegistry = REGISTRY) -> dict:
    """Decode *selection* to ``{'raw_value': float, 'tolerance': str}``.

    A leading black band (digit 0) is accepted.  Gold and silver multipliers
    give values below the two-digit significand.

    Raises:
        UnknownColorError: A band names a color not in *registry*.
        InvalidRoleError:  A band names a color without the role it needs.
    """
    d1 = registry.lookup_for_band(1, selection.band1).digit
    d2 = registry.lookup_for_band(2, selection.band2).digit
    m  = registry.lookup_for_band(3, selection.band3).multiplier
    t  = registry.lookup_for_band(4, selection.band4).tolerance

    return {"raw_value": (d1 * 10 + d2) * m, "tolerance": t}


def decode(selection: BandSelection, registry: ColorBandRegistry = REGISTRY) -> ResistanceResult:
    """Run compute() then format_resistance() and combine the results."""
    computed = compute(selection, registry)
    scaled = format_resistance(computed["raw_value"])
    return ResistanceResult(
        magnitude=scaled["magnitude"],
        unit=scaled["unit"],
        tolerance=computed["tolerance"],
    )

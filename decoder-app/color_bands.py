from __future__ import annotations

"""
Resistor Decoder - Color Band Registry

The canonical 4-band color table: which colors may appear on which band and
what each one means there.

Exports:
    ColorSpec          – one registry entry (digit / multiplier / tolerance)
    ColorBandRegistry  – immutable name → ColorSpec mapping
    REGISTRY           – the standard 12-color registry
    UnknownColorError  – name is not a registry key
    InvalidRoleError   – color cannot be used on the requested band
"""

from dataclasses import dataclass, replace
from types import MappingProxyType

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ColorCodeError(Exception):
    """Base class for color-code input errors."""


class UnknownColorError(ColorCodeError, KeyError):
    """Raised when a color name is not present in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown color: {name!r}")
        self.name = name

    def __str__(self) -> str:
        return self.args[0]


class InvalidRoleError(ColorCodeError, ValueError):
    """Raised when a color lacks the role required by its band position."""

    def __init__(self, band: int, color: str, role: str) -> None:
        super().__init__(f"Band {band}: {color!r} has no {role} value")
        self.band = band
        self.color = color
        self.role = role


# ---------------------------------------------------------------------------
# ColorSpec
# ---------------------------------------------------------------------------

# Band position → attribute the band reads.
BAND_ROLES: dict[int, str] = {
    1: "digit",
    2: "digit",
    3: "multiplier",
    4: "tolerance",
}


@dataclass(frozen=True)
class ColorSpec:
    """Decode properties for one named band color.

    Any of ``digit``, ``multiplier`` and ``tolerance`` may be ``None``; a
    color can only sit on the bands whose role it supplies.
    """

    name: str
    digit: int | None
    multiplier: float | None
    tolerance: str | None
    rgb: tuple[int, int, int]
    text_rgb: tuple[int, int, int]

    @property
    def display_name(self) -> str:
        return self.name.capitalize()

    def supports(self, role: str) -> bool:
        return getattr(self, role) is not None


# ---------------------------------------------------------------------------
# Registry
# ---------------------------------------------------------------------------


def _normalise(name: str) -> str:
    return name.strip().lower()


class ColorBandRegistry:
    """Read-only mapping from color name to :class:`ColorSpec`.

    Iteration, ``digit_colors()``, ``multiplier_colors()`` and
    ``tolerance_colors()`` all follow definition order.  Names are matched
    case-insensitively.

    Args:
        specs: ColorSpec entries in display order.  Names must be unique.
    """

    def __init__(self, specs) -> None:
        table: dict[str, ColorSpec] = {}
        for spec in specs:
            key = _normalise(spec.name)
            if key in table:
                raise ValueError(f"Duplicate color: {spec.name!r}")
            table[key] = spec if spec.name == key else replace(spec, name=key)
        self._specs = MappingProxyType(table)

        self._by_role: dict[str, tuple[str, ...]] = {
            role: tuple(k for k, s in table.items() if s.supports(role))
            for role in ("digit", "multiplier", "tolerance")
        }

    def __contains__(self, name) -> bool:
        return isinstance(name, str) and _normalise(name) in self._specs

    def __iter__(self):
        return iter(self._specs)

    def __len__(self) -> int:
        return len(self._specs)

    def lookup(self, name: str) -> ColorSpec:
        """Return the ColorSpec for *name*.

        Raises:
            UnknownColorError: If *name* is not a registry key.
        """
        if not isinstance(name, str):
            raise UnknownColorError(name)
        try:
            return self._specs[_normalise(name)]
        except KeyError:
            raise UnknownColorError(name) from None

    def digit_colors(self) -> tuple[str, ...]:
        """Colors valid for bands 1 and 2."""
        return self._by_role["digit"]

    def multiplier_colors(self) -> tuple[str, ...]:
        """Colors valid for band 3."""
        return self._by_role["multiplier"]

    def tolerance_colors(self) -> tuple[str, ...]:
        """Colors valid for band 4."""
        return self._by_role["tolerance"]

    def allowed_colors(self, band: int) -> tuple[str, ...]:
        """Return the allowed color sequence for band position *band* (1–4)."""
        if band not in BAND_ROLES:
            raise ValueError(f"Band position must be 1–4, got {band!r}")
        return self._by_role[BAND_ROLES[band]]

    def lookup_for_band(self, band: int, name: str) -> ColorSpec:
        """Look up *name* and check it can be used on *band*.

        Raises:
            UnknownColorError: If *name* is not a registry key.
            InvalidRoleError:  If the color does not supply the band's role.
        """
        if band not in BAND_ROLES:
            raise ValueError(f"Band position must be 1–4, got {band!r}")
        spec = self.lookup(name)
        role = BAND_ROLES[band]
        if not spec.supports(role):
            raise InvalidRoleError(band, spec.name, role)
        return spec


# ---------------------------------------------------------------------------
# Standard 4-band table
# ---------------------------------------------------------------------------

_WHITE_TEXT = (255, 255, 255)
_BLACK_TEXT = (0,   0,   0  )

REGISTRY = ColorBandRegistry([
    #          name      digit  multiplier   tolerance  fill RGB             label RGB
    ColorSpec("black",  0,     1,           None,      (0,   0,   0  ),    _WHITE_TEXT),
    ColorSpec("brown",  1,     10,          "±1%",     (139, 69,  19 ),    _WHITE_TEXT),
    ColorSpec("red",    2,     100,         "±2%",     (255, 0,   0  ),    _WHITE_TEXT),
    ColorSpec("orange", 3,     1_000,       None,      (255, 165, 0  ),    _BLACK_TEXT),
    ColorSpec("yellow", 4,     10_000,      None,      (255, 255, 0  ),    _BLACK_TEXT),
    ColorSpec("green",  5,     100_000,     None,      (0,   128, 0  ),    _WHITE_TEXT),
    ColorSpec("blue",   6,     1_000_000,   None,      (0,   0,   255),    _WHITE_TEXT),
    ColorSpec("violet", 7,     10_000_000,  None,      (139, 0,   255),    _WHITE_TEXT),
    ColorSpec("grey",   8,     None,        None,      (128, 128, 128),    _WHITE_TEXT),
    ColorSpec("white",  9,     None,        None,      (255, 255, 255),    _BLACK_TEXT),
    ColorSpec("gold",   None,  0.1,         "±5%",     (255, 215, 0  ),    _BLACK_TEXT),
    ColorSpec("silver", None,  0.01,        "±10%",    (192, 192, 192),    _BLACK_TEXT),
])


def option_label(name: str, band: int, registry: ColorBandRegistry = REGISTRY) -> str:
    """Return selector text for *name* on *band*, e.g. ``'Red (×100)'``."""
    spec = registry.lookup_for_band(band, name)
    if band == 4:
        value = spec.tolerance
    elif band == 3:
        value = f"×{spec.multiplier:,}"
    else:
        value = str(spec.digit)
    return f"{spec.display_name} ({value})"

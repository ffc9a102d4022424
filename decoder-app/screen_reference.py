"""
Resistor Decoder - Color Reference Screen

Static chart of what each color means on each band.  The rows are written
out by hand for readability; tests/test_reference.py keeps them in step with
color_bands.REGISTRY.
"""

from __future__ import annotations

import pygame

from color_bands import REGISTRY
from ui_manager import load_font

# ---------------------------------------------------------------------------
# Reference rows: (color, digit, multiplier, tolerance); "-" = not used
# ---------------------------------------------------------------------------

REFERENCE_TABLE: list[tuple[str, str, str, str]] = [
    ("Black",  "0", "×1",    "-"),
    ("Brown",  "1", "×10",   "±1%"),
    ("Red",    "2", "×100",  "±2%"),
    ("Orange", "3", "×1K",   "-"),
    ("Yellow", "4", "×10K",  "-"),
    ("Green",  "5", "×100K", "-"),
    ("Blue",   "6", "×1M",   "-"),
    ("Violet", "7", "×10M",  "-"),
    ("Grey",   "8", "-",     "-"),
    ("White",  "9", "-",     "-"),
    ("Gold",   "-", "×0.1",  "±5%"),
    ("Silver", "-", "×0.01", "±10%"),
]

_HEADERS = ("Color", "Digit", "Multiplier", "Tolerance")

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

_TABLE_X    = 10
_TABLE_Y    = 6
_HEADER_H   = 22
_ROW_H      = 20
_SWATCH     = 14
_COL_X      = (_TABLE_X + 26, 200, 300, 410)   # column anchors (first is left-aligned)

BG_COLOR    = (15,  23,  42)
HEADER_BG   = (30,  41,  59)
ROW_ALT_BG  = (22,  33,  62)
TEXT_COLOR  = (226, 232, 240)
TEXT_MUTED  = (150, 160, 180)
SWATCH_EDGE = (75,  85,  99)


class ScreenReference:
    """Renders REFERENCE_TABLE with a color swatch per row."""

    def __init__(self, surface) -> None:
        self._surface = surface._surface if hasattr(surface, "_surface") else surface
        self._font = None

    def update(self, dt: float) -> None:
        pass

    def handle_event(self, event) -> None:
        pass

    def draw(self, surface: pygame.Surface | None = None) -> None:
        target = surface if surface is not None else self._surface
        target.fill(BG_COLOR)

        if self._font is None:
            pygame.font.init()
            self._font = load_font("dejavusans", 13)

        try:
            self._draw_table(target)
        except (TypeError, pygame.error):
            # pygame.draw.* rejects MagicMock surfaces in headless tests.
            pass

    def _draw_table(self, surface: pygame.Surface) -> None:
        width = surface.get_width() - 2 * _TABLE_X

        header = pygame.Rect(_TABLE_X, _TABLE_Y, width, _HEADER_H)
        pygame.draw.rect(surface, HEADER_BG, header)
        for i, (title, x) in enumerate(zip(_HEADERS, _COL_X)):
            self._text(surface, title, TEXT_COLOR, x, header.centery, first=(i == 0))

        for row_idx, row in enumerate(REFERENCE_TABLE):
            y = header.bottom + row_idx * _ROW_H
            if row_idx % 2:
                pygame.draw.rect(surface, ROW_ALT_BG, pygame.Rect(_TABLE_X, y, width, _ROW_H))

            swatch = pygame.Rect(0, 0, _SWATCH, _SWATCH)
            swatch.center = (_TABLE_X + 12, y + _ROW_H // 2)
            pygame.draw.ellipse(surface, REGISTRY.lookup(row[0]).rgb, swatch)
            pygame.draw.ellipse(surface, SWATCH_EDGE, swatch, width=1)

            for i, (cell, x) in enumerate(zip(row, _COL_X)):
                color = TEXT_MUTED if cell == "-" else TEXT_COLOR
                self._text(surface, cell, color, x, y + _ROW_H // 2, first=(i == 0))

    def _text(self, surface, text, color, x, cy, first=False) -> None:
        surf = self._font.render(text, True, color)
        rect = surf.get_rect()
        if first:
            rect.midleft = (x, cy)
        else:
            rect.center = (x, cy)
        surface.blit(surf, rect)

"""
Resistor Decoder - Color Code Screen

Pick the four band colors; the decoded resistance and tolerance update on
every change.

Layout (480 × 320, content area 480 × 272 above the nav bar):

  TOP     (y   8– 62)  Resistor illustration with the selected bands
  MIDDLE  (y  70–120)  Result card, e.g. "4.7 KΩ ±5%"
  BOTTOM  (y 130–266)  2 × 2 band selectors, each with ◀ / ▶ buttons

Keyboard: 1–4 pick the active band, ←/→ (or ↑/↓) step through the colors
allowed on it.

Construction modes (same as the other screens):
  ScreenColorCode(surface)     — test mode: plain Surface or MagicMock
  ScreenColorCode(ui_manager)  — app mode: UIManager instance
"""

from __future__ import annotations

import logging

import pygame

from calculator import BandSelection, ResistanceResult, decode
from color_bands import BAND_ROLES, REGISTRY, ColorBandRegistry, option_label
from ui_manager import load_font
from value_format import describe

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

SCREEN_W = 480

# Resistor illustration
_RES_W  = 300
_RES_H  = 46
_RES_X  = (SCREEN_W - _RES_W) // 2
_RES_Y  = 12
_LEAD_W = int(_RES_W * 0.15)
_BODY_X = _RES_X + _LEAD_W
_BODY_W = int(_RES_W * 0.70)
_BAND_W = max(2, int(_RES_W * 0.06))
# Tolerance band sits apart from the three value bands.
_BAND_PCTS = [0.18, 0.34, 0.50, 0.80]

# Result card
_RESULT_Y = 70
_RESULT_H = 50
_RESULT_X = 10
_RESULT_W = SCREEN_W - 20

# Band selectors (2 columns × 2 rows)
_SEL_TOP   = 130
_SEL_W     = 225
_SEL_H     = 64
_SEL_GAP   = 10
_SEL_BTN_W = 44   # touch-safe
_SEL_BTN_H = 40
_SEL_LEFT  = (SCREEN_W - 2 * _SEL_W - _SEL_GAP) // 2

_BAND_TITLES = {
    1: "Band 1 · 1st digit",
    2: "Band 2 · 2nd digit",
    3: "Band 3 · Multiplier",
    4: "Band 4 · Tolerance",
}

_DIGIT_KEYS = {"1": 1, "2": 2, "3": 3, "4": 4}

# ---------------------------------------------------------------------------
# Colour palette  (mirrors ui_manager.py)
# ---------------------------------------------------------------------------

BG_COLOR      = (15,  23,  42)
CARD_BG       = (22,  33,  62)
CARD_ACTIVE   = (30,  45,  75)
RESULT_BG     = (15,  30,  20)
TEXT_COLOR    = (226, 232, 240)
TEXT_MUTED    = (150, 160, 180)
ACCENT        = (56,  189, 248)
GREEN         = (52,  211, 153)
RESISTOR_TAN  = (210, 180, 140)
LEAD_COLOR    = (160, 160, 160)

# ---------------------------------------------------------------------------
# Font helpers
# ---------------------------------------------------------------------------

_FONT_CACHE: dict[str, pygame.font.Font] | None = None


def _fonts() -> dict[str, pygame.font.Font]:
    global _FONT_CACHE
    if _FONT_CACHE is None:
        pygame.font.init()
        _FONT_CACHE = {
            "result": load_font("dejavusans", 28, bold=True),
            "body":   load_font("dejavusans", 15),
            "small":  load_font("dejavusans", 12),
        }
    return _FONT_CACHE


def _draw_text(surface, text, font, color, x, y, anchor="topleft") -> pygame.Rect:
    surf = font.render(text, True, color)
    rect = surf.get_rect()
    setattr(rect, anchor, (x, y))
    surface.blit(surf, rect)
    return rect


def _selector_rect(band: int) -> pygame.Rect:
    col = (band - 1) % 2
    row = (band - 1) // 2
    return pygame.Rect(
        _SEL_LEFT + col * (_SEL_W + _SEL_GAP),
        _SEL_TOP + row * (_SEL_H + _SEL_GAP // 2),
        _SEL_W,
        _SEL_H,
    )


# ---------------------------------------------------------------------------
# ScreenColorCode
# ---------------------------------------------------------------------------

class ScreenColorCode:
    """Four-band selector with a live resistance readout.

    Holds the current :class:`BandSelection` and re-runs the decode pipeline
    synchronously after every change; ``self.result`` is always the decode
    of ``self.selection``.

    Args:
        surface:   pygame.Surface to render onto, OR a UIManager instance.
        registry:  Color registry to decode against.
        selection: Initial selection (defaults to brown-black-red-gold).
    """

    def __init__(
        self,
        surface,
        registry: ColorBandRegistry = REGISTRY,
        selection: BandSelection | None = None,
    ) -> None:
        if hasattr(surface, "_surface"):
            self._ui      = surface
            self._surface = surface._surface
        else:
            self._ui      = None
            self._surface = surface

        self.registry = registry
        self.selection = selection if selection is not None else BandSelection()
        self.result: ResistanceResult = decode(self.selection, self.registry)
        self.active_band = 1

        # Hit-rects built during draw: (band, step, rect)
        self._button_rects: list[tuple[int, int, pygame.Rect]] = []

        if not pygame.font.get_init():
            pygame.font.init()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def set_band(self, band: int, color: str) -> None:
        """Select *color* for band position *band* and recompute.

        Raises:
            UnknownColorError / InvalidRoleError: *color* is not allowed on
            *band*.  The previous selection is kept.
        """
        selection = self.selection.with_band(band, color)
        result = decode(selection, self.registry)
        self.selection, self.result = selection, result
        log.debug("Bands %s -> %s", "-".join(selection.bands()), describe(result))

    def cycle_band(self, band: int, step: int = 1) -> None:
        """Move band *band* *step* places through its allowed colors (wrapping)."""
        options = self.registry.allowed_colors(band)
        current = self.selection.bands()[band - 1]
        index = options.index(self.registry.lookup(current).name)
        self.set_band(band, options[(index + step) % len(options)])

    # ------------------------------------------------------------------
    # Screen interface
    # ------------------------------------------------------------------

    def update(self, dt: float) -> None:
        """No-op: nothing here is time-based."""
        pass

    def draw(self, surface: pygame.Surface | None = None) -> None:
        target = surface if surface is not None else self._surface
        target.fill(BG_COLOR)

        try:
            fnt = _fonts()
            self._draw_resistor(target)
            self._draw_result(target, fnt)
            self._draw_selectors(target, fnt)
        except (TypeError, pygame.error):
            # pygame.draw.* rejects MagicMock surfaces in headless tests.
            pass

    def handle_event(self, event) -> None:
        """Keyboard: 1–4 pick a band, arrow keys step through its colors."""
        if event.type != pygame.KEYDOWN:
            return

        if event.key in (pygame.K_RIGHT, pygame.K_DOWN):
            self.cycle_band(self.active_band, 1)
        elif event.key in (pygame.K_LEFT, pygame.K_UP):
            self.cycle_band(self.active_band, -1)
        elif event.unicode in _DIGIT_KEYS:
            self.active_band = _DIGIT_KEYS[event.unicode]

    def handle_touch(self, x: int, y: int) -> None:
        """Tap on a ◀ / ▶ button steps that band; a tap elsewhere on a
        selector makes it the active band."""
        for band, step, rect in self._button_rects:
            if rect.collidepoint(x, y):
                self.active_band = band
                self.cycle_band(band, step)
                return
        for band in BAND_ROLES:
            if _selector_rect(band).collidepoint(x, y):
                self.active_band = band
                return

    # ------------------------------------------------------------------
    # Private: drawing
    # ------------------------------------------------------------------

    def _band_specs(self):
        return [self.registry.lookup(name) for name in self.selection.bands()]

    def _draw_resistor(self, surface: pygame.Surface) -> None:
        cy = _RES_Y + _RES_H // 2
        pygame.draw.line(surface, LEAD_COLOR, (_RES_X, cy), (_BODY_X, cy), 2)
        pygame.draw.line(surface, LEAD_COLOR, (_BODY_X + _BODY_W, cy), (_RES_X + _RES_W, cy), 2)

        body_rect = pygame.Rect(_BODY_X, _RES_Y, _BODY_W, _RES_H)
        radius = max(2, _RES_H // 3)
        pygame.draw.rect(surface, RESISTOR_TAN, body_rect, border_radius=radius)

        for pct, spec in zip(_BAND_PCTS, self._band_specs()):
            bx = int(_BODY_X + pct * _BODY_W) - _BAND_W // 2
            band_rect = pygame.Rect(bx, _RES_Y, _BAND_W, _RES_H).clip(body_rect)
            pygame.draw.rect(surface, spec.rgb, band_rect)

        pygame.draw.rect(surface, RESISTOR_TAN, body_rect, width=2, border_radius=radius)

    def _draw_result(self, surface: pygame.Surface, fnt: dict) -> None:
        rect = pygame.Rect(_RESULT_X, _RESULT_Y, _RESULT_W, _RESULT_H)
        pygame.draw.rect(surface, RESULT_BG, rect, border_radius=8)
        pygame.draw.line(surface, GREEN, (rect.left + 4, rect.top + 1), (rect.right - 5, rect.top + 1), 2)
        _draw_text(surface, describe(self.result), fnt["result"], GREEN,
                   rect.centerx, rect.centery, anchor="center")

    def _draw_selectors(self, surface: pygame.Surface, fnt: dict) -> None:
        self._button_rects = []
        specs = self._band_specs()

        for band, spec in zip(BAND_ROLES, specs):
            rect = _selector_rect(band)
            is_active = band == self.active_band
            pygame.draw.rect(surface, CARD_ACTIVE if is_active else CARD_BG, rect, border_radius=8)
            if is_active:
                pygame.draw.rect(surface, ACCENT, rect, width=2, border_radius=8)

            _draw_text(surface, _BAND_TITLES[band], fnt["small"], TEXT_MUTED,
                       rect.centerx, rect.top + 3, anchor="midtop")

            btn_y = rect.bottom - _SEL_BTN_H - 4
            prev_rect = pygame.Rect(rect.left + 4, btn_y, _SEL_BTN_W, _SEL_BTN_H)
            next_rect = pygame.Rect(rect.right - 4 - _SEL_BTN_W, btn_y, _SEL_BTN_W, _SEL_BTN_H)
            for step, btn in ((-1, prev_rect), (1, next_rect)):
                self._button_rects.append((band, step, btn))
                pygame.draw.rect(surface, BG_COLOR, btn, border_radius=6)
                _draw_text(surface, "◀" if step < 0 else "▶", fnt["body"], ACCENT,
                           btn.centerx, btn.centery, anchor="center")

            swatch = pygame.Rect(prev_rect.right + 6, btn_y, next_rect.left - prev_rect.right - 12, _SEL_BTN_H)
            pygame.draw.rect(surface, spec.rgb, swatch, border_radius=6)
            _draw_text(surface, option_label(spec.name, band, self.registry), fnt["body"],
                       spec.text_rgb, swatch.centerx, swatch.centery, anchor="center")

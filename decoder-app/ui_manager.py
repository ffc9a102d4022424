from __future__ import annotations

"""
Resistor Decoder - Pygame Display Manager

Owns the pygame display, the screen registry, the bottom nav bar and the
per-frame event / update / draw dispatch.

  UIManager()          – app mode: pygame.init(), 480×320 display (fullscreen
                         unless RESISTOR_DECODER_WINDOWED is set).
  UIManager(surface)   – headless / test mode: the given surface is used
                         as-is, no display flip or clock.
"""

import logging

import pygame

import config

log = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Layout constants
# ---------------------------------------------------------------------------

SCREEN_W  = config.SCREEN_W
SCREEN_H  = config.SCREEN_H
NAV_H     = 48
CONTENT_H = SCREEN_H - NAV_H

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------

BG_COLOR    = (15,  23,  42)
TEXT_COLOR  = (226, 232, 240)
ACCENT      = (56,  189, 248)
NAV_BG      = (8,   15,  30)
NAV_BORDER  = (30,  41,  59)

# ---------------------------------------------------------------------------
# Nav bar configuration
# ---------------------------------------------------------------------------

_NAV_LABELS = ["Color Code", "Reference"]
_NAV_KEYS   = ["color_code", "reference"]
_NAV_BTN_W  = SCREEN_W // len(_NAV_KEYS)


def load_font(family: str, size: int, bold: bool = False) -> pygame.font.Font:
    """Load a system font, falling back to pygame's default font."""
    font = pygame.font.SysFont(family, size, bold=bold)
    # SysFont can return None in dummy SDL environments
    if font is None:
        font = pygame.font.Font(None, size)
    return font


class UIManager:
    """Registered screens plus event, update and draw dispatch.

    Only the active screen receives update(), draw() and handle_event().

    Args:
        surface: Optional pygame.Surface for headless / test mode.
    """

    def __init__(self, surface=None) -> None:
        self._test_mode = surface is not None

        if self._test_mode:
            pygame.font.init()
            self._surface = surface
            self.clock    = None
        else:
            pygame.init()
            flags = pygame.FULLSCREEN if config.FULLSCREEN else 0
            self._surface = pygame.display.set_mode((SCREEN_W, SCREEN_H), flags)
            pygame.display.set_caption("Resistor Decoder")
            self.clock = pygame.time.Clock()

        self.screen    = self._surface
        self.nav_font  = load_font("dejavusans", 16)

        self._screens: dict[str, object] = {}
        self._active: str | None = None
        self._nav_rects: list[pygame.Rect] = []

    @property
    def current_screen(self) -> str | None:
        return self._active

    # ------------------------------------------------------------------
    # Screen registry
    # ------------------------------------------------------------------

    def register_screen(self, name: str, screen_obj) -> None:
        """Add *screen_obj* (update / draw / handle_event) under *name*."""
        self._screens[name] = screen_obj

    def switch_to(self, name: str) -> None:
        """Activate the named screen.

        Raises:
            KeyError: If *name* has not been registered.
        """
        if name not in self._screens:
            raise KeyError(f"Unknown screen: {name!r}")
        if self._active is not None and self._active != name:
            old = self._screens[self._active]
            if hasattr(old, "on_exit"):
                old.on_exit()
        self._active = name
        new = self._screens[name]
        if hasattr(new, "on_enter"):
            new.on_enter()
        log.debug("Switched to screen %r", name)

    # ------------------------------------------------------------------
    # Main-loop hooks
    # ------------------------------------------------------------------

    def handle_event(self, event) -> None:
        """Forward a single event to the active screen (if any)."""
        if self._active is not None:
            self._screens[self._active].handle_event(event)

    def handle_events(self) -> bool:
        """Drain the pygame event queue.

        Returns:
            ``False`` if the app should quit (window closed or Escape),
            ``True`` otherwise.
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
            if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
                if self._nav_hit(event.pos) is not None:
                    continue
                screen = self._screens.get(self._active)
                if screen is not None and hasattr(screen, "handle_touch"):
                    screen.handle_touch(*event.pos)
                continue
            self.handle_event(event)
        return True

    def update(self, dt: float) -> None:
        if self._active is not None:
            self._screens[self._active].update(dt)

    def draw(self) -> None:
        """Render the active screen, then the nav bar (app mode only)."""
        if self._active is not None:
            self._screens[self._active].draw(self._surface)

        if not self._test_mode:
            self.draw_nav_bar()
            pygame.display.flip()
            self.clock.tick(config.FPS)

    # ------------------------------------------------------------------
    # Nav bar
    # ------------------------------------------------------------------

    def draw_nav_bar(self) -> None:
        """Draw the bottom nav bar and rebuild its hit rects."""
        nav_y = SCREEN_H - NAV_H
        pygame.draw.line(self._surface, NAV_BORDER, (0, nav_y), (SCREEN_W - 1, nav_y), 1)

        self._nav_rects = []
        for i, (label, key) in enumerate(zip(_NAV_LABELS, _NAV_KEYS)):
            rect = pygame.Rect(i * _NAV_BTN_W, nav_y + 1, _NAV_BTN_W, NAV_H - 1)
            self._nav_rects.append(rect)

            is_active = key == self._active
            pygame.draw.rect(self._surface, ACCENT if is_active else NAV_BG, rect)
            surf = self.nav_font.render(label, True, BG_COLOR if is_active else TEXT_COLOR)
            self._surface.blit(surf, surf.get_rect(center=rect.center))

    def _nav_hit(self, pos) -> str | None:
        """Switch screens if *pos* hits a nav button; return the key or None."""
        for rect, key in zip(self._nav_rects, _NAV_KEYS):
            if rect.collidepoint(pos):
                if key in self._screens:
                    self.switch_to(key)
                return key
        return None

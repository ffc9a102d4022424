"""
Resistor Decoder - Main Entry Point

Builds the pygame UI (color-code selector + reference chart) and runs the
main loop until the window is closed or Escape is pressed.
"""

import logging
import sys
import time

import pygame

import config
from screen_color_code import ScreenColorCode
from screen_reference import ScreenReference
from ui_manager import UIManager
from value_format import describe

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(levelname)s %(name)s: %(message)s",
    stream=sys.stdout,
)
log = logging.getLogger(__name__)


def main() -> None:
    mgr = UIManager()

    color_code = ScreenColorCode(mgr)
    reference  = ScreenReference(mgr)

    mgr.register_screen("color_code", color_code)
    mgr.register_screen("reference",  reference)
    mgr.switch_to("color_code")

    log.info("Resistor Decoder started: %s", describe(color_code.result))

    last_t = time.monotonic()
    try:
        running = True
        while running:
            now = time.monotonic()
            dt = now - last_t
            last_t = now

            running = mgr.handle_events()
            mgr.update(dt)
            mgr.draw()
    finally:
        pygame.quit()
        log.info("Pygame quit")


if __name__ == "__main__":
    main()

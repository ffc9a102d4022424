"""
pytest configuration for the decoder-app tests.
- Runs pygame in headless/dummy mode (no physical display required).
- Adds decoder-app/ to sys.path so the flat app modules import directly.
"""
import os
import sys

# Headless SDL: must be set before pygame is imported
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

_tests_dir = os.path.dirname(__file__)
sys.path.insert(0, os.path.join(_tests_dir, ".."))   # decoder-app/

"""
Resistor Decoder - App Configuration
"""

import os

# Touchscreen display
SCREEN_W   = 480
SCREEN_H   = 320
FULLSCREEN = os.environ.get("RESISTOR_DECODER_WINDOWED", "") == ""
FPS        = 30

# Logging
LOG_LEVEL = os.environ.get("RESISTOR_DECODER_LOG_LEVEL", "INFO").upper()

# Selection shown on start-up: 1 kΩ ±5 %
DEFAULT_BANDS = ("brown", "black", "red", "gold")

"""Application-wide constants for the Drake Equation Simulator."""

import os

# --- Display ---
SCREEN_WIDTH = 1280
SCREEN_HEIGHT = 720
FPS = 60
TITLE = "Drake Equation Simulator"

# --- Colors (RGB) ---
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
BACKGROUND = (43, 44, 47)

# --- Text ---
TITLE_FONT_SIZE = 40
LABEL_FONT_SIZE = 20
RESULT_FONT_SIZE = 30
ROW_MARGIN = 10  # Pixels on every side of a parameter row

# Font files, relative to ASSETS_DIR inside the package. None uses pygame's bundled default font.
ASSETS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "assets")
TITLE_FONT_FILE: str | None = None    # e.g. "fonts/FiraSans-Bold.ttf"
LABEL_FONT_FILE: str | None = None    # e.g. "fonts/FiraSans-Regular.ttf"

# --- Result line ---
RESULT_PREFIX = "N = "
RESULT_PLACEHOLDER = "0"
RESULT_TAG = "result"

# --- Drake parameters: (label, value, min, max) ---
# Bounds are displayed metadata only; values are never clamped against them.
DRAKE_PARAMETERS: list[tuple[str, float, float, float]] = [
    ("R*", 1.0, 0.1, 10.0),
    ("f_p", 0.5, 0.0, 1.0),
    ("n_e", 0.1, 0.0, 1.0),
    ("f_l", 0.1, 0.0, 1.0),
    ("f_i", 0.01, 0.0, 1.0),
    ("f_c", 0.01, 0.0, 1.0),
    ("L", 10000.0, 100.0, 1_000_000.0),
]

# --- Logging ---
APP_NAME = "drake_simulator"
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_TO_FILE = False  # When True, also write to user_log_dir(APP_NAME)/simulator.log

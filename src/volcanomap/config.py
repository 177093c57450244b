"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths and magic numbers (panel widths,
   margins, colours) from being scattered through the model and the view.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find assets (the bundled CSV) when the app is frozen into an .exe.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    DEFAULT_DATA_PATH (str): Absolute path to the bundled volcano table.
"""
import logging
import os
import sys
from pathlib import Path

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: resolve relative to this file
    # config.py is in src/volcanomap/
    current_file_path: Path = Path(__file__)
    project_root: Path = current_file_path.parent.parent.parent
    return os.path.join(str(project_root), relative_path)


# Paths
ASSETS_PATH: str = get_resource_path("assets")
DEFAULT_DATA_PATH: str = os.path.join(ASSETS_PATH, "volcanoes.csv")

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")

VISIBLE_APP_NAME = "Volcano Map"
MAP_TITLE = "Global Volcano Distribution (linear projection)"

# ------------------------------------------------------------------------------
# Layout (viewport pixels)
# ------------------------------------------------------------------------------
LEGEND_HEIGHT: float = 90.0
OUTER_MARGIN: float = 12.0
INNER_PAD: float = 8.0
SIDEBAR_WIDTH: float = 180.0  # filter list, left
INFO_WIDTH: float = 320.0  # detail panel, right
LEGEND_GUTTER: float = 24.0
LABEL_ALLOWANCE: float = 20.0  # room below the map for the longitude readout
MIN_MAP_HEIGHT: float = 60.0
MIN_AVAILABLE_WIDTH: float = 200.0
INFO_GAP: float = 16.0
SIDEBAR_GAP: float = 4.0

PANEL_PAD: float = 12.0
PANEL_HEADER_HEIGHT: float = 36.0
FILTER_ROW_HEIGHT: float = 32.0

# Map interior margin used by the linear projection
MAP_INNER_MARGIN: float = 20.0

# Glyph size bounds, derived from the map height
GLYPH_SIZE_DIVISOR: float = 120.0
GLYPH_SIZE_MIN: int = 6
GLYPH_SIZE_MAX: int = 20

# Hover hit radius = max(HIT_RADIUS_MIN, glyph_size * HIT_RADIUS_FACTOR)
HIT_RADIUS_MIN: float = 8.0
HIT_RADIUS_FACTOR: float = 1.2

# ------------------------------------------------------------------------------
# Colours
# ------------------------------------------------------------------------------
COLOR_LOW = "#66CCFF"  # light blue, lowest elevation
COLOR_HIGH = "#FF6666"  # coral red, highest elevation
COLOR_BACKGROUND = "#121212"
COLOR_PANEL = "#1E1E1E"
COLOR_MAP = "#000000"
COLOR_MAP_BORDER = "#333333"
COLOR_FIELD_BOX = "#0A0A0A"
COLOR_CROSSHAIR = "#888888"
COLOR_ACTIVE_ROW = "#444444"
COLOR_HOVER_ROW = "#292929"
COLOR_ACTIVE_TEXT = "#FFD700"
COLOR_TEXT = "#FFFFFF"
COLOR_MUTED_TEXT = "#AAAAAA"

HOVER_SCALE: float = 1.8
HOVER_WHITEN: float = 0.55

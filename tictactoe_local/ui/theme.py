import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QPalette, QColor

logger = logging.getLogger(__name__)

LIGHT = "light"
DARK = "dark"
THEMES = (LIGHT, DARK)

# -----------------------------------------------------------------------------
# COLOR CONSTANTS
# -----------------------------------------------------------------------------

DARK_COLORS = {
    QPalette.Window: QColor(53, 53, 53),
    QPalette.WindowText: QColor(Qt.white),
    QPalette.Base: QColor(35, 35, 35),
    QPalette.AlternateBase: QColor(53, 53, 53),
    QPalette.ToolTipBase: QColor(Qt.white),
    QPalette.ToolTipText: QColor(Qt.black),
    QPalette.Text: QColor(Qt.white),
    QPalette.Button: QColor(66, 66, 66),
    QPalette.ButtonText: QColor(Qt.white),
    QPalette.BrightText: QColor(Qt.red),
    QPalette.Link: QColor(42, 130, 218),
    QPalette.Highlight: QColor(42, 130, 218),
    QPalette.HighlightedText: QColor(Qt.white),
    QPalette.PlaceholderText: QColor(160, 160, 160),
}

LIGHT_COLORS = {
    QPalette.Window: QColor(248, 249, 250),
    QPalette.WindowText: QColor(33, 37, 41),
    QPalette.Base: QColor(255, 255, 255),
    QPalette.AlternateBase: QColor(233, 236, 239),
    QPalette.ToolTipBase: QColor(33, 37, 41),
    QPalette.ToolTipText: QColor(Qt.white),
    QPalette.Text: QColor(33, 37, 41),
    QPalette.Button: QColor(233, 236, 239),
    QPalette.ButtonText: QColor(33, 37, 41),
    QPalette.BrightText: QColor(Qt.red),
    QPalette.Link: QColor(25, 118, 210),
    QPalette.Highlight: QColor(25, 118, 210),
    QPalette.HighlightedText: QColor(Qt.white),
    QPalette.PlaceholderText: QColor(108, 117, 125),
}

DISABLED_COLOR = QColor(127, 127, 127)

# board painting colours per theme: background, grid, X, O, winning cell
BOARD_COLORS = {
    DARK: {
        "background": QColor("#333"),
        "grid": QColor("#555"),
        "x": QColor("#8acaff"),
        "o": QColor("#ff8a8a"),
        "highlight": QColor(255, 215, 0, 70),
    },
    LIGHT: {
        "background": QColor("#ffffff"),
        "grid": QColor("#ced4da"),
        "x": QColor("#1976d2"),
        "o": QColor("#d32f2f"),
        "highlight": QColor(255, 193, 7, 90),
    },
}

# status label styles per theme, as in the old _update_message
STATUS_STYLES = {
    DARK: {
        "error": "color: #ff8a8a; font-weight: bold;",
        "win": "color: limegreen; font-weight: bold;",
        "draw": "color: orange; font-weight: bold;",
        "turn": "color: #8acaff; font-weight: bold;",
    },
    LIGHT: {
        "error": "color: #c62828; font-weight: bold;",
        "win": "color: #2e7d32; font-weight: bold;",
        "draw": "color: #e65100; font-weight: bold;",
        "turn": "color: #1565c0; font-weight: bold;",
    },
}


def status_style(name, kind):
    # empty stylesheet for plain messages
    return STATUS_STYLES[name].get(kind, "")

# -----------------------------------------------------------------------------
# PALETTE SETUP
# -----------------------------------------------------------------------------

def other_theme(name):
    return DARK if name == LIGHT else LIGHT


def build_palette(name):
    """
    Build the palette for a theme name ('light' or 'dark').
    """
    if name not in THEMES:
        raise ValueError(f"unknown theme {name!r}, expected one of {THEMES}")
    colors = DARK_COLORS if name == DARK else LIGHT_COLORS
    palette = QPalette()
    for role, color in colors.items():
        palette.setColor(role, color)
    # Disabled roles
    palette.setColor(QPalette.Disabled, QPalette.Text, DISABLED_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.ButtonText, DISABLED_COLOR)
    palette.setColor(QPalette.Disabled, QPalette.WindowText, DISABLED_COLOR)
    return palette


def apply_theme(app, name):
    """
    Apply a theme palette to the whole application.
    """
    app.setPalette(build_palette(name))
    logger.info("theme set to %s", name)


def toggle_label(name):
    # button shows the theme you would switch to
    return "🌙 Dark" if name == LIGHT else "☀️ Light"


def toggle_tooltip(name):
    return f"Switch to {other_theme(name)} mode"

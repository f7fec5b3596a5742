"""
Theme definitions for the Match Quiz GUI.
"""
from enum import Enum


class Colors:
    # Primary Colors
    PRIMARY_BLUE = "#0364B8"
    PRIMARY_BLUE_HOVER = "#0A2767"

    # Backgrounds
    BACKGROUND = "#f5f5f5"
    SURFACE = "#ffffff"
    DISABLED_BG = "#e0e0e0"

    # Text
    TEXT_PRIMARY = "#1f1f1f"
    TEXT_SECONDARY = "#666666"
    TEXT_DISABLED = "#757575"

    # Borders
    BORDER = "#e0e0e0"

    # Status
    ERROR = "#d32f2f"
    SUCCESS = "#388e3c"

    # Card backgrounds (tinted versions of the border colours)
    CARD_BG = "#D6E6F5"
    CARD_SELECTED_BG = "#EAF2FA"
    CARD_MATCHING_BG = "#DFF0E0"
    CARD_MISMATCH_BG = "#FBE3E3"


class CardState(Enum):
    """Visual state of one card, derived from a round snapshot."""

    EMPTY = "empty"
    NORMAL = "normal"
    SELECTED = "selected"
    MATCHING = "matching"    # Selected and the current pair is correct
    MISMATCH = "mismatch"
    MATCHED = "matched"
    FROZEN = "frozen"


# (border, background, border width)
_CARD_PALETTE = {
    CardState.EMPTY: (Colors.BORDER, Colors.BACKGROUND, 1),
    CardState.NORMAL: (Colors.PRIMARY_BLUE, Colors.CARD_BG, 1),
    CardState.SELECTED: (Colors.PRIMARY_BLUE, Colors.CARD_SELECTED_BG, 3),
    CardState.MATCHING: (Colors.SUCCESS, Colors.CARD_MATCHING_BG, 3),
    CardState.MISMATCH: (Colors.ERROR, Colors.CARD_MISMATCH_BG, 3),
    CardState.MATCHED: (Colors.SUCCESS, Colors.CARD_MATCHING_BG, 3),
    CardState.FROZEN: (Colors.BORDER, Colors.DISABLED_BG, 1),
}


def card_stylesheet(state: CardState) -> str:
    """Stylesheet for a CardButton in the given state."""
    border, background, width = _CARD_PALETTE[state]
    text = Colors.TEXT_DISABLED if state in (CardState.EMPTY, CardState.FROZEN) else Colors.TEXT_PRIMARY
    return f"""
        QPushButton {{
            background-color: {background};
            border: {width}px solid {border};
            border-radius: 12px;
            color: {text};
            padding: 8px;
            font-size: 14px;
        }}
    """


GLOBAL_STYLESHEET = f"""
    QMainWindow, QWidget {{
        background-color: {Colors.BACKGROUND};
        color: {Colors.TEXT_PRIMARY};
    }}
    QStatusBar {{
        color: {Colors.TEXT_SECONDARY};
    }}
"""

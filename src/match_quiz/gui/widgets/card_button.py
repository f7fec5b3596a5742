"""
Card widget for one slot of the board.
"""
from PySide6.QtWidgets import QPushButton, QSizePolicy
from PySide6.QtCore import Qt

from match_quiz.gui.styles.theme import CardState, card_stylesheet


class CardButton(QPushButton):
    """
    A single tappable card. Shows the slot's text and styles itself from
    its CardState; empty cards are disabled.
    """

    def __init__(self, parent=None):
        super().__init__(parent)
        self._state = CardState.EMPTY
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setMinimumHeight(56)
        self.setCursor(Qt.CursorShape.PointingHandCursor)
        self.set_card("", CardState.EMPTY)

    @property
    def state(self) -> CardState:
        return self._state

    def set_card(self, text: str, state: CardState) -> None:
        if self.text() != text:
            self.setText(text)
        if state is not self._state or not self.styleSheet():
            self._state = state
            self.setStyleSheet(card_stylesheet(state))
        self.setEnabled(state is not CardState.EMPTY)

"""
Board widget: the two-column grid of cards.

Renders a RoundEngine snapshot and forwards taps to the engine. After a
tap that leaves both columns selected it schedules
``evaluate_pending_pair()`` on the running asyncio loop.
"""
import asyncio
import logging
from functools import partial
from typing import Callable, Coroutine, Optional, Set

from PySide6.QtWidgets import QWidget, QGridLayout, QLabel
from PySide6.QtCore import Qt

from match_quiz.core.models import Column
from match_quiz.engine import RoundEngine, RoundSnapshot
from match_quiz.gui.styles.theme import CardState, Colors
from match_quiz.gui.widgets.card_button import CardButton

logger = logging.getLogger(__name__)


def card_state_for(snapshot: RoundSnapshot, column: Column, row: int) -> CardState:
    """Visual state of the card at ``column``/``row``."""
    if snapshot.slot(column, row).is_empty:
        return CardState.EMPTY
    if snapshot.is_mismatch(column, row):
        return CardState.MISMATCH
    if snapshot.is_match(column, row):
        return CardState.MATCHED
    if snapshot.is_selected(column, row):
        return CardState.MATCHING if snapshot.is_currently_matching else CardState.SELECTED
    if snapshot.is_frozen(column, row):
        return CardState.FROZEN
    return CardState.NORMAL


def card_text_for(snapshot: RoundSnapshot, column: Column, row: int) -> str:
    item = snapshot.slot(column, row).item
    if item is None:
        return ""
    return item.question if column is Column.LEFT else item.answer


class BoardWidget(QWidget):
    """
    Grid of ``rows x 2`` cards bound to a RoundEngine.

    Args:
        engine: Engine to render and drive
        schedule: Called with the evaluation coroutine; defaults to
            scheduling it as a task on the current asyncio loop
    """

    def __init__(
        self,
        engine: RoundEngine,
        schedule: Optional[Callable[[Coroutine], None]] = None,
        parent=None,
    ):
        super().__init__(parent)
        self._engine = engine
        self._schedule = schedule or self._schedule_task
        self._tasks: Set[asyncio.Task] = set()
        self._cards = {column: [] for column in Column}

        layout = QGridLayout(self)
        layout.setSpacing(12)
        layout.setContentsMargins(16, 16, 16, 16)

        for col_index, (column, title) in enumerate(((Column.LEFT, "Questions"), (Column.RIGHT, "Answers"))):
            header = QLabel(title)
            header.setAlignment(Qt.AlignmentFlag.AlignCenter)
            header.setStyleSheet(f"color: {Colors.TEXT_SECONDARY}; font-weight: bold;")
            layout.addWidget(header, 0, col_index)
            for row in range(engine.rows):
                card = CardButton(self)
                card.clicked.connect(partial(self._on_card_clicked, column, row))
                layout.addWidget(card, row + 1, col_index)
                self._cards[column].append(card)

        engine.stateChanged.connect(self.refresh)
        self.refresh()

    def card(self, column: Column, row: int) -> CardButton:
        return self._cards[column][row]

    def refresh(self) -> None:
        """Re-render every card from a fresh snapshot."""
        snapshot = self._engine.snapshot()
        for column in Column:
            for row, card in enumerate(self._cards[column]):
                card.set_card(
                    card_text_for(snapshot, column, row),
                    card_state_for(snapshot, column, row),
                )

    def _on_card_clicked(self, column: Column, row: int, *_args) -> None:
        self._engine.toggle_selection(column, row)
        if self._engine.selected_left is not None and self._engine.selected_right is not None:
            self._schedule(self._engine.evaluate_pending_pair())

    def _schedule_task(self, coro: Coroutine) -> None:
        task = asyncio.ensure_future(coro)
        self._tasks.add(task)
        task.add_done_callback(self._on_task_done)

    def _on_task_done(self, task: asyncio.Task) -> None:
        self._tasks.discard(task)
        if not task.cancelled() and task.exception() is not None:
            logger.error(f"Pair evaluation failed: {task.exception()!r}")

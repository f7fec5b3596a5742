"""
Module: engine.round_engine

Purpose:
    The round state machine. Owns all mutable game state and exposes
    the three entry points the presentation layer may call
    (initialize, toggle, evaluate) plus pure read accessors.

Key Classes:
    - RoundEngine: Round lifecycle, selection and match/mismatch resolution

Scheduling:
    All calls come from one thread / event loop. Only the delayed tail of
    ``evaluate_pending_pair()`` is asynchronous; it suspends at the
    configured delays and re-checks the round token (``generation``)
    after every suspension, abandoning silently if a new round started.
    Between suspensions every mutation is applied in one step and
    followed by a single ``stateChanged`` emission.

Dependencies:
    - PySide6.QtCore: QObject / Signal change notification
    - engine.placement: Right column placement
    - engine.config: EngineConfig

Used By:
    - gui.widgets.board: BoardWidget
    - gui.app: Entry point
"""

from __future__ import annotations

import asyncio
import logging
import random
from typing import Awaitable, Callable, Optional

from PySide6.QtCore import QObject, Signal

from match_quiz.core.models import Column, ItemSource, QAItem, Slot

from .config import EngineConfig
from .placement import place_right_column
from .state import RoundSnapshot, RoundState

logger = logging.getLogger(__name__)

SleepFn = Callable[[float], Awaitable[None]]


class RoundEngine(QObject):
    """
    Round engine for the two-column matching game.

    Args:
        source: Items to play with; an empty source deals an empty round
        config: Engine configuration (defaults to ``EngineConfig()``)
        rng: Random source; defaults to ``random.Random(config.seed)``
        sleep: Coroutine function used for every delay
        parent: Optional Qt parent

    Signals:
        stateChanged(): After every state mutation
        roundStarted(int): New round token after ``initialize_round()``
        pairResolved(bool): A resolution began (True = match)
        roundCleared(): Last pair removed and pool empty

    Example:
        >>> engine = RoundEngine(ItemSource.default(), EngineConfig(seed=1))
        >>> engine.initialize_round()
        >>> engine.toggle_left(0)
        >>> engine.toggle_right(3)
        >>> asyncio.run(engine.evaluate_pending_pair())
    """

    stateChanged = Signal()
    roundStarted = Signal(int)
    pairResolved = Signal(bool)
    roundCleared = Signal()

    def __init__(
        self,
        source: ItemSource,
        config: Optional[EngineConfig] = None,
        *,
        rng: Optional[random.Random] = None,
        sleep: Optional[SleepFn] = None,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._source = source
        self._config = config or EngineConfig()
        self._rng = rng or random.Random(self._config.seed)
        self._sleep = sleep or asyncio.sleep
        self._state = RoundState.blank(self._config.visible_rows)
        self._cleared_announced = False

    # ─────────────────────────────────────────────────────────────────────────
    # Round lifecycle
    # ─────────────────────────────────────────────────────────────────────────

    def initialize_round(self) -> None:
        """
        Start a fresh round, replacing all state.

        Any resolution still waiting on a delay belongs to the old round
        token and will abandon itself when it wakes up.
        """
        rows = self._config.visible_rows
        order = list(self._source.items)
        self._rng.shuffle(order)

        count = min(rows, len(order))
        state = RoundState.blank(rows, generation=self._state.generation + 1)
        state.slots[Column.LEFT] = [Slot.occupied(item) for item in order[:count]] + [
            Slot.empty()
        ] * (rows - count)
        state.pool = order[count:]
        state.slots[Column.RIGHT] = list(place_right_column(state.left, None, self._rng))

        self._state = state
        self._cleared_announced = False
        logger.info(
            f"Round {state.generation} started: {count} rows on board, {len(state.pool)} in pool"
        )
        self.roundStarted.emit(state.generation)
        self.stateChanged.emit()
        self._announce_if_cleared()

    # ─────────────────────────────────────────────────────────────────────────
    # Selection
    # ─────────────────────────────────────────────────────────────────────────

    def toggle_selection(self, column: Column, row: int) -> None:
        """
        Select ``row`` in ``column``, or unselect it if already selected.

        Selecting a second row in the same column replaces the first.
        Out-of-range, empty and frozen slots are ignored.
        """
        state = self._state
        if not state.in_range(row):
            logger.debug(f"Ignoring tap on {column.value} row {row}: out of range")
            return
        if state.slots[column][row].is_empty:
            logger.debug(f"Ignoring tap on {column.value} row {row}: empty slot")
            return
        if row in state.frozen[column]:
            logger.debug(f"Ignoring tap on {column.value} row {row}: frozen")
            return

        state.selected[column] = None if state.selected[column] == row else row
        logger.debug(f"Selection now left={state.selected[Column.LEFT]} right={state.selected[Column.RIGHT]}")
        self.stateChanged.emit()

    def toggle_left(self, row: int) -> None:
        self.toggle_selection(Column.LEFT, row)

    def toggle_right(self, row: int) -> None:
        self.toggle_selection(Column.RIGHT, row)

    # ─────────────────────────────────────────────────────────────────────────
    # Resolution
    # ─────────────────────────────────────────────────────────────────────────

    async def evaluate_pending_pair(self) -> None:
        """
        Resolve the current left/right selection as a match or mismatch.

        The caller invokes this after a toggle that leaves both columns
        selected. Does nothing unless both selections point at occupied
        slots. Selection is cleared before the first suspension point.
        """
        state = self._state
        li = state.selected[Column.LEFT]
        ri = state.selected[Column.RIGHT]
        if li is None or ri is None:
            return
        if not (state.in_range(li) and state.in_range(ri)):
            return
        left_item = state.left[li].item
        right_item = state.right[ri].item
        if left_item is None or right_item is None:
            return

        token = state.generation
        if left_item.id == right_item.id:
            await self._resolve_match(left_item, li, ri, token)
        else:
            await self._resolve_mismatch(li, ri, token)

    async def _resolve_mismatch(self, li: int, ri: int, token: int) -> None:
        state = self._state
        state.mismatch[Column.LEFT] = li
        state.mismatch[Column.RIGHT] = ri
        state.frozen[Column.LEFT].add(li)
        state.frozen[Column.RIGHT].add(ri)
        state.clear_selection()
        logger.debug(f"Mismatch: left row {li} / right row {ri}")
        self.pairResolved.emit(False)
        self.stateChanged.emit()

        await self._sleep(self._config.mismatch_penalty_delay)
        if self._is_stale(token):
            return

        state = self._state
        state.clear_marker(state.mismatch, Column.LEFT, li)
        state.clear_marker(state.mismatch, Column.RIGHT, ri)
        state.frozen[Column.LEFT].discard(li)
        state.frozen[Column.RIGHT].discard(ri)
        self.stateChanged.emit()

    async def _resolve_match(self, item: QAItem, li: int, ri: int, token: int) -> None:
        state = self._state
        state.frozen[Column.LEFT].add(li)
        state.frozen[Column.RIGHT].add(ri)
        state.match[Column.LEFT] = li
        state.match[Column.RIGHT] = ri
        state.clear_selection()
        logger.debug(f"Match: {item!r} at left row {li} / right row {ri}")
        self.pairResolved.emit(True)
        self.stateChanged.emit()

        await self._sleep(self._config.match_highlight_delay)
        if self._is_stale(token):
            return

        state = self._state
        state.clear_marker(state.match, Column.LEFT, li)
        state.clear_marker(state.match, Column.RIGHT, ri)
        self.stateChanged.emit()

        disappear = self._rng.choice(self._config.disappear_delays)
        await self._sleep(disappear)
        if self._is_stale(token):
            return

        state = self._state
        self._remove_pair(item, li, ri)
        self._refill_left()
        state.slots[Column.RIGHT] = list(
            place_right_column(state.left, state.right, self._rng)
        )
        state.frozen[Column.LEFT].discard(li)
        state.frozen[Column.RIGHT].discard(ri)
        self.stateChanged.emit()
        self._announce_if_cleared()

    def _remove_pair(self, item: QAItem, li: int, ri: int) -> None:
        """Empty the slots holding ``item``, preferring the captured rows."""
        state = self._state
        for column, row in ((Column.LEFT, li), (Column.RIGHT, ri)):
            slots = state.slots[column]
            if not slots[row].holds(item):
                row = next((k for k, slot in enumerate(slots) if slot.holds(item)), None)
                if row is None:
                    continue
            slots[row] = Slot.empty()

    def _refill_left(self) -> None:
        """Fill empty left slots from the pool, in random slot order."""
        state = self._state
        empty_rows = [i for i, slot in enumerate(state.left) if slot.is_empty]
        self._rng.shuffle(empty_rows)
        self._rng.shuffle(state.pool)
        filled = 0
        while state.pool and empty_rows:
            row = empty_rows.pop(0)
            state.left[row] = Slot.occupied(state.pool.pop(0))
            filled += 1
        logger.debug(f"Refilled {filled} left slot(s); {len(state.pool)} left in pool")

    def _is_stale(self, token: int) -> bool:
        if token != self._state.generation:
            logger.debug(f"Abandoning resolution from round {token}; round is now {self._state.generation}")
            return True
        return False

    def _announce_if_cleared(self) -> None:
        if self._cleared_announced or not self.is_cleared:
            return
        self._cleared_announced = True
        logger.info(f"Round {self._state.generation} cleared")
        self.roundCleared.emit()

    # ─────────────────────────────────────────────────────────────────────────
    # Queries
    # ─────────────────────────────────────────────────────────────────────────

    @property
    def config(self) -> EngineConfig:
        return self._config

    @property
    def source(self) -> ItemSource:
        return self._source

    @property
    def rows(self) -> int:
        return self._state.rows

    @property
    def generation(self) -> int:
        return self._state.generation

    @property
    def pool_size(self) -> int:
        return len(self._state.pool)

    @property
    def selected_left(self) -> Optional[int]:
        return self._state.selected[Column.LEFT]

    @property
    def selected_right(self) -> Optional[int]:
        return self._state.selected[Column.RIGHT]

    def slot(self, column: Column, row: int) -> Slot:
        return self._state.slots[column][row]

    def left_slot(self, row: int) -> Slot:
        return self.slot(Column.LEFT, row)

    def right_slot(self, row: int) -> Slot:
        return self.slot(Column.RIGHT, row)

    def is_selected(self, column: Column, row: int) -> bool:
        return self._state.selected[column] == row

    def is_frozen(self, column: Column, row: int) -> bool:
        return row in self._state.frozen[column]

    def is_mismatch(self, column: Column, row: int) -> bool:
        return self._state.mismatch[column] == row

    def is_match(self, column: Column, row: int) -> bool:
        return self._state.match[column] == row

    @property
    def is_currently_matching(self) -> bool:
        return self.snapshot().is_currently_matching

    @property
    def is_cleared(self) -> bool:
        """True once a started round has no cards left and an empty pool."""
        state = self._state
        return (
            state.generation > 0
            and not state.pool
            and all(slot.is_empty for slot in state.left)
        )

    def snapshot(self) -> RoundSnapshot:
        return self._state.snapshot()

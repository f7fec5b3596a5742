"""
Module: engine.state

Purpose:
    State containers for a round. RoundState is the engine's private,
    mutable working state; RoundSnapshot is the immutable read model
    handed to the presentation layer.

Key Classes:
    - RoundState: Slot arrays, pool, selection, freezes, markers, generation
    - RoundSnapshot: Frozen copy of a RoundState

Used By:
    - engine.round_engine: RoundEngine
    - gui.widgets.board: Rendering
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set

from match_quiz.core.models import Column, QAItem, Slot


def _per_column(factory):
    return field(default_factory=lambda: {column: factory() for column in Column})


@dataclass
class RoundState:
    """
    Mutable state of one round. Owned exclusively by a RoundEngine.

    Attributes:
        slots: Slot array per column, each of length ``rows``
        pool: Items drawn for the round but not yet on the board
        selected: Selected row per column (None = nothing selected)
        frozen: Rows per column that cannot be selected right now
        mismatch: Row per column showing the mismatch marker
        match: Row per column showing the match marker
        generation: Round token; bumped by every round initialization
    """

    slots: Dict[Column, List[Slot]]
    pool: List[QAItem] = field(default_factory=list)
    selected: Dict[Column, Optional[int]] = _per_column(lambda: None)
    frozen: Dict[Column, Set[int]] = _per_column(set)
    mismatch: Dict[Column, Optional[int]] = _per_column(lambda: None)
    match: Dict[Column, Optional[int]] = _per_column(lambda: None)
    generation: int = 0

    @classmethod
    def blank(cls, rows: int, generation: int = 0) -> RoundState:
        """State with every slot empty."""
        return cls(
            slots={column: [Slot.empty()] * rows for column in Column},
            generation=generation,
        )

    @property
    def rows(self) -> int:
        return len(self.slots[Column.LEFT])

    @property
    def left(self) -> List[Slot]:
        return self.slots[Column.LEFT]

    @property
    def right(self) -> List[Slot]:
        return self.slots[Column.RIGHT]

    def in_range(self, row: int) -> bool:
        return 0 <= row < self.rows

    def clear_selection(self) -> None:
        for column in Column:
            self.selected[column] = None

    def clear_marker(self, markers: Dict[Column, Optional[int]], column: Column, row: int) -> None:
        """Clear a marker only if it still points at ``row``."""
        if markers[column] == row:
            markers[column] = None

    def snapshot(self) -> RoundSnapshot:
        return RoundSnapshot(
            left=tuple(self.left),
            right=tuple(self.right),
            selected_left=self.selected[Column.LEFT],
            selected_right=self.selected[Column.RIGHT],
            frozen_left=frozenset(self.frozen[Column.LEFT]),
            frozen_right=frozenset(self.frozen[Column.RIGHT]),
            mismatch_left=self.mismatch[Column.LEFT],
            mismatch_right=self.mismatch[Column.RIGHT],
            match_left=self.match[Column.LEFT],
            match_right=self.match[Column.RIGHT],
            pool_size=len(self.pool),
            generation=self.generation,
        )


@dataclass(frozen=True)
class RoundSnapshot:
    """
    Immutable view of a round at one point in time.

    Example:
        >>> snap = engine.snapshot()
        >>> snap.slot(Column.LEFT, 0).item.question
        'Capital of France'
    """

    left: tuple[Slot, ...]
    right: tuple[Slot, ...]
    selected_left: Optional[int]
    selected_right: Optional[int]
    frozen_left: frozenset[int]
    frozen_right: frozenset[int]
    mismatch_left: Optional[int]
    mismatch_right: Optional[int]
    match_left: Optional[int]
    match_right: Optional[int]
    pool_size: int
    generation: int

    @property
    def rows(self) -> int:
        return len(self.left)

    def slots(self, column: Column) -> tuple[Slot, ...]:
        return self.left if column is Column.LEFT else self.right

    def slot(self, column: Column, row: int) -> Slot:
        return self.slots(column)[row]

    def selected(self, column: Column) -> Optional[int]:
        return self.selected_left if column is Column.LEFT else self.selected_right

    def is_selected(self, column: Column, row: int) -> bool:
        return self.selected(column) == row

    def is_frozen(self, column: Column, row: int) -> bool:
        frozen = self.frozen_left if column is Column.LEFT else self.frozen_right
        return row in frozen

    def is_mismatch(self, column: Column, row: int) -> bool:
        marker = self.mismatch_left if column is Column.LEFT else self.mismatch_right
        return marker == row

    def is_match(self, column: Column, row: int) -> bool:
        marker = self.match_left if column is Column.LEFT else self.match_right
        return marker == row

    @property
    def is_currently_matching(self) -> bool:
        """True if the selected left and right cards form a valid pair."""
        if self.selected_left is None or self.selected_right is None:
            return False
        if not (0 <= self.selected_left < self.rows and 0 <= self.selected_right < self.rows):
            return False
        left = self.left[self.selected_left].item
        right = self.right[self.selected_right].item
        return left is not None and right is not None and left.id == right.id

    @property
    def occupied_rows(self) -> int:
        return sum(1 for slot in self.left if slot.is_occupied)

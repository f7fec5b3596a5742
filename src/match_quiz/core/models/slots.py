"""
Module: slots

Purpose:
    Grid cell model. A slot is a fixed position in one of the two
    columns and holds either one item or nothing.

Key Classes:
    - Column: LEFT (questions) or RIGHT (answers)
    - Slot: Tagged Empty | Occupied(QAItem) value

Used By:
    - engine.placement: Right column construction
    - engine.state: Slot arrays
    - gui.widgets.board: Rendering
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .items import QAItem


class Column(Enum):
    """Which side of the board a slot belongs to."""

    LEFT = "left"    # Questions
    RIGHT = "right"  # Answers


@dataclass(frozen=True)
class Slot:
    """
    Content of a single grid cell (immutable).

    Use the ``Slot.empty()`` / ``Slot.occupied(item)`` factories rather
    than passing ``None`` around, so "no item" can never be confused with
    an item that happens to have default values.

    Example:
        >>> Slot.empty().is_empty
        True
        >>> Slot.occupied(item).item is item
        True
    """

    item: Optional[QAItem] = None

    @property
    def is_empty(self) -> bool:
        return self.item is None

    @property
    def is_occupied(self) -> bool:
        return self.item is not None

    def holds(self, item: QAItem) -> bool:
        """True if this slot holds ``item`` (by identity)."""
        return self.item is not None and self.item.id == item.id

    @classmethod
    def empty(cls) -> Slot:
        return _EMPTY

    @classmethod
    def occupied(cls, item: QAItem) -> Slot:
        return cls(item=item)

    def __repr__(self) -> str:
        return "Slot(empty)" if self.item is None else f"Slot({self.item!r})"


_EMPTY = Slot()

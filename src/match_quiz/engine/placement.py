"""
Module: engine.placement

Purpose:
    Derangement-biased placement of the right (answer) column.
    Builds a right column that is always a rearrangement of the left
    column's items and, where possible, never pairs a row with itself.

Key Functions:
    - place_right_column(): Main entry point
    - count_self_pairs(): Rows whose left and right hold the same item

Algorithm:
    1. Stability pass: keep previous right items that still belong on
       the board and do not pair with their own row
    2. Shuffle the items still to be placed
    3. Fill pass: give each open row an item that differs from its left
    4. Fallback: if only the row's own item is left, place it and swap
       it with an already placed row so neither pair self-matches
    5. Drain: any leftovers go into open rows without constraint

Dependencies:
    - random (std)
    - core.models: QAItem, Slot

Used By:
    - engine.round_engine: Round initialization and refill
"""

from __future__ import annotations

import logging
import random
from typing import List, Optional, Sequence

from match_quiz.core.models import QAItem, Slot

logger = logging.getLogger(__name__)


def place_right_column(
    left: Sequence[Slot],
    previous_right: Optional[Sequence[Slot]],
    rng: random.Random,
) -> tuple[Slot, ...]:
    """
    Build the right column for the given left column.

    Args:
        left: Current left column (some slots may be empty)
        previous_right: Right column before the change, used only to keep
            still-valid cells in place. None or empty on a fresh round.
        rng: Random source for the shuffle

    Returns:
        New right column with the same length as ``left``

    Invariants:
        - Non-empty right items are exactly the non-empty left items
        - With 2+ occupied rows no row pairs an item with itself

    Example:
        >>> right = place_right_column(left, None, random.Random(1))
        >>> count_self_pairs(left, right)
        0
    """
    rows = len(left)
    previous = list(previous_right or ())
    new_right: List[Optional[QAItem]] = [None] * rows

    to_place: List[QAItem] = [slot.item for slot in left if slot.item is not None]

    # 1. Stability pass
    kept = 0
    for i in range(rows):
        left_item = left[i].item
        if left_item is None or i >= len(previous):
            continue
        current = previous[i].item
        if current is None or current.id == left_item.id:
            continue
        idx = _index_of(to_place, current)
        if idx is not None:
            new_right[i] = to_place.pop(idx)
            kept += 1

    # 2. Shuffle
    rng.shuffle(to_place)

    # 3-5. Fill with fallback
    for i in range(rows):
        left_item = left[i].item
        if left_item is None or new_right[i] is not None or not to_place:
            continue
        safe = next(
            (k for k, candidate in enumerate(to_place) if candidate.id != left_item.id),
            None,
        )
        if safe is not None:
            new_right[i] = to_place.pop(safe)
            continue

        new_right[i] = to_place.pop(0)
        swap_with = _find_swap(left, new_right, i)
        if swap_with is not None:
            new_right[i], new_right[swap_with] = new_right[swap_with], new_right[i]
            logger.debug(f"Swapped rows {i} and {swap_with} to avoid a same-row pair")
        else:
            logger.debug(f"Accepting unavoidable same-row pair at row {i}")

    # Drain, rows with a left item first
    if to_place:
        open_rows = sorted(
            (i for i in range(rows) if new_right[i] is None),
            key=lambda i: left[i].item is None,
        )
        for i in open_rows:
            if not to_place:
                break
            new_right[i] = to_place.pop(0)

    logger.debug(f"Placed right column: kept {kept} of {sum(s.is_occupied for s in left)}")
    return tuple(Slot.empty() if item is None else Slot.occupied(item) for item in new_right)


def count_self_pairs(left: Sequence[Slot], right: Sequence[Slot]) -> int:
    """Number of rows where both columns hold the same item."""
    return sum(
        1
        for l, r in zip(left, right)
        if l.item is not None and r.item is not None and l.item.id == r.item.id
    )


def _index_of(items: List[QAItem], item: QAItem) -> Optional[int]:
    for k, candidate in enumerate(items):
        if candidate.id == item.id:
            return k
    return None


def _find_swap(
    left: Sequence[Slot],
    right: List[Optional[QAItem]],
    row: int,
) -> Optional[int]:
    """
    Find a placed row to swap with ``row`` so neither pair self-matches.

    Earlier rows are tried first, then rows kept by the stability pass.
    """
    rows = len(left)
    stuck = right[row]
    row_left = left[row].item
    order = list(range(row)) + list(range(row + 1, rows))
    for k in order:
        other = right[k]
        other_left = left[k].item
        if other is None or other_left is None:
            continue
        if other.id != row_left.id and stuck.id != other_left.id:
            return k
    return None

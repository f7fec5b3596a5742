"""
Unit tests for derangement-biased right column placement.
"""

import random
from collections import Counter

import pytest

from match_quiz.core.models import QAItem, Slot
from match_quiz.engine import count_self_pairs, place_right_column

from conftest import make_source


def _slots(items, rows):
    slots = [Slot.occupied(item) for item in items]
    return slots + [Slot.empty()] * (rows - len(slots))


def _ids(slots):
    return Counter(slot.item.id for slot in slots if slot.is_occupied)


class TestPlaceRightColumn:
    """Tests for place_right_column."""

    @pytest.mark.parametrize("seed", range(50))
    def test_fresh_column_is_permutation_without_self_pairs(self, seed):
        """Right is a rearrangement of left and no row pairs with itself."""
        items = list(make_source(5))
        left = _slots(items, 5)

        right = place_right_column(left, None, random.Random(seed))

        assert len(right) == 5
        assert _ids(right) == _ids(left)
        assert count_self_pairs(left, right) == 0

    @pytest.mark.parametrize("occupied", [2, 3, 4])
    def test_sparse_left_column_keeps_empty_rows_and_derangement(self, occupied):
        items = list(make_source(occupied))
        # Occupied rows scattered among empty ones
        left = [Slot.empty()] * 5
        for k, row in enumerate([4, 0, 2, 1][:occupied]):
            left[row] = Slot.occupied(items[k])

        for seed in range(20):
            right = place_right_column(left, None, random.Random(seed))
            assert _ids(right) == _ids(left)
            assert count_self_pairs(left, right) == 0

    def test_single_item_is_allowed_to_pair_with_itself(self):
        item = QAItem("q", "a", id="only")
        left = _slots([item], 5)

        right = place_right_column(left, None, random.Random(0))

        assert _ids(right) == _ids(left)
        assert right[0].holds(item)

    def test_empty_left_gives_empty_right(self):
        right = place_right_column([Slot.empty()] * 3, None, random.Random(0))
        assert all(slot.is_empty for slot in right)

    def test_stability_keeps_untouched_rows_in_place(self):
        """After one row is refilled, unaffected non-trivial cells stay put."""
        a, b, c, d, e, f = make_source(6)
        left = _slots([a, b, c, d, e], 5)
        previous_right = _slots([b, c, d, e, a], 5)

        # Row 0 (item a) matched and refilled with f
        new_left = list(left)
        new_left[0] = Slot.occupied(f)
        stale_right = list(previous_right)
        stale_right[4] = Slot.empty()

        right = place_right_column(new_left, stale_right, random.Random(3))

        assert _ids(right) == _ids(new_left)
        assert count_self_pairs(new_left, right) == 0
        # Rows 0-3 still hold b, c, d, e: all still on the board and non-trivial
        assert [right[i].item.id for i in range(4)] == [b.id, c.id, d.id, e.id]
        assert right[4].holds(f)

    def test_stability_drops_cells_that_would_self_pair(self):
        a, b, c = make_source(3)
        left = _slots([a, b, c], 3)
        previous_right = _slots([a, c, b], 3)  # row 0 would self-pair

        right = place_right_column(left, previous_right, random.Random(0))

        assert not right[0].holds(a)
        assert count_self_pairs(left, right) == 0

    def test_stability_ignores_items_no_longer_on_board(self):
        a, b, c, gone = make_source(4)
        left = _slots([a, b, c], 3)
        previous_right = _slots([gone, c, a], 3)

        right = place_right_column(left, previous_right, random.Random(0))

        assert _ids(right) == _ids(left)
        assert all(not slot.holds(gone) for slot in right)

    def test_fallback_when_stability_leaves_only_own_item(self):
        a, b, c = make_source(3)
        left = _slots([a, b, c], 3)
        # Stability keeps row0=b and row1=a; the only item left is c, which
        # is row 2's own item, so row 2 must be swapped with a placed row.
        previous_right = _slots([b, a], 3)

        right = place_right_column(left, previous_right, random.Random(0))

        assert _ids(right) == _ids(left)
        assert count_self_pairs(left, right) == 0
        assert not right[2].holds(c)

    def test_fallback_swaps_with_later_stability_kept_row(self):
        """No earlier row qualifies, so the swap partner is a later kept row."""
        a, b, c = make_source(3)
        left = _slots([a, b, c], 3)
        # Rows 1 and 2 keep c and b; only a is left for row 0, its own item
        previous_right = [Slot.empty(), Slot.occupied(c), Slot.occupied(b)]

        right = place_right_column(left, previous_right, random.Random(0))

        assert [slot.item.id for slot in right] == [c.id, a.id, b.id]
        assert count_self_pairs(left, right) == 0

    def test_deterministic_for_same_seed(self):
        left = _slots(list(make_source(5)), 5)
        first = place_right_column(left, None, random.Random(99))
        second = place_right_column(left, None, random.Random(99))
        assert first == second


class TestCountSelfPairs:
    def test_counts_only_rows_with_same_item(self):
        a, b = make_source(2)
        left = _slots([a, b], 3)
        right = [Slot.occupied(a), Slot.occupied(a), Slot.empty()]
        assert count_self_pairs(left, right) == 1

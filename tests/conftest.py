import asyncio
import os
import random
import sys
from pathlib import Path

import pytest

# Run Qt headless when no display is available.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Add src to sys.path so we can import match_quiz
SRC_PATH = Path(__file__).resolve().parent.parent / "src"
if SRC_PATH.as_posix() not in sys.path:
    sys.path.insert(0, SRC_PATH.as_posix())

from match_quiz.core.models import Column, ItemSource, QAItem


class ManualClock:
    """
    Fake clock for the engine's ``sleep`` hook.

    ``sleep()`` parks the caller until ``advance()`` moves time past its
    deadline. Sleeps that start while advancing (e.g. the disappear wait
    that follows the highlight wait) are honoured in deadline order.
    """

    def __init__(self) -> None:
        self.now = 0.0
        self._waiters: list[tuple[float, asyncio.Future]] = []

    async def sleep(self, delay: float) -> None:
        future = asyncio.get_running_loop().create_future()
        self._waiters.append((self.now + delay, future))
        await future

    @property
    def pending(self) -> int:
        return sum(1 for _, future in self._waiters if not future.done())

    async def settle(self) -> None:
        for _ in range(10):
            await asyncio.sleep(0)

    async def advance(self, seconds: float) -> None:
        target = self.now + seconds
        await self.settle()
        while True:
            due = [(d, f) for d, f in self._waiters if d <= target and not f.done()]
            if not due:
                break
            deadline = min(d for d, _ in due)
            self.now = deadline
            for d, future in due:
                if d == deadline:
                    future.set_result(None)
            self._waiters = [(d, f) for d, f in self._waiters if not f.done()]
            await self.settle()
        self.now = target


def make_source(count: int) -> ItemSource:
    """Source of ``count`` items with readable ids (i0, i1, ...)."""
    return ItemSource.from_items(
        QAItem(question=f"Question {i}", answer=f"Answer {i}", id=f"i{i}")
        for i in range(count)
    )


def matching_right_row(engine, left_row: int) -> int:
    """Right row holding the pair of ``left_row``."""
    item = engine.left_slot(left_row).item
    return next(r for r in range(engine.rows) if engine.right_slot(r).holds(item))


def non_matching_right_row(engine, left_row: int) -> int:
    """Some occupied right row that does NOT pair with ``left_row``."""
    item = engine.left_slot(left_row).item
    return next(
        r for r in range(engine.rows)
        if engine.right_slot(r).is_occupied and not engine.right_slot(r).holds(item)
    )


def board_ids(engine, column: Column) -> list:
    return sorted(
        engine.slot(column, r).item.id
        for r in range(engine.rows)
        if engine.slot(column, r).is_occupied
    )


# Common test fixtures
@pytest.fixture
def clock() -> ManualClock:
    return ManualClock()


@pytest.fixture
def source20() -> ItemSource:
    return make_source(20)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)

"""Tests for the BoardWidget card grid."""

import asyncio

import pytest
from PySide6.QtCore import Qt

from match_quiz.core.models import Column
from match_quiz.engine import EngineConfig, RoundEngine
from match_quiz.gui.styles.theme import CardState
from match_quiz.gui.widgets.board import BoardWidget, card_state_for, card_text_for

from conftest import make_source, matching_right_row, non_matching_right_row


class _Scheduler:
    """Collects scheduled coroutines instead of running them."""

    def __init__(self):
        self.coros = []

    def __call__(self, coro):
        self.coros.append(coro)

    def close(self):
        for coro in self.coros:
            coro.close()


@pytest.fixture
def scheduler():
    scheduler = _Scheduler()
    yield scheduler
    scheduler.close()


@pytest.fixture
def engine(qapp, clock):
    engine = RoundEngine(
        make_source(10),
        EngineConfig(
            visible_rows=4,
            match_highlight_delay=0.5,
            mismatch_penalty_delay=1,
            disappear_delay_range=(1, 1),
            seed=11,
        ),
        sleep=clock.sleep,
    )
    engine.initialize_round()
    return engine


@pytest.fixture
def board(qtbot, engine, scheduler):
    widget = BoardWidget(engine, schedule=scheduler)
    qtbot.addWidget(widget)
    return widget


class TestBoardRendering:
    def test_cards_show_questions_left_and_answers_right(self, board, engine):
        for row in range(engine.rows):
            assert board.card(Column.LEFT, row).text() == engine.left_slot(row).item.question
            assert board.card(Column.RIGHT, row).text() == engine.right_slot(row).item.answer
            assert board.card(Column.LEFT, row).state is CardState.NORMAL

    def test_empty_slots_render_disabled(self, qtbot, qapp, clock):
        engine = RoundEngine(make_source(2), EngineConfig(visible_rows=3, seed=1), sleep=clock.sleep)
        engine.initialize_round()
        widget = BoardWidget(engine, schedule=lambda coro: coro.close())
        qtbot.addWidget(widget)

        card = widget.card(Column.LEFT, 2)
        assert card.state is CardState.EMPTY
        assert card.text() == ""
        assert not card.isEnabled()

    def test_card_text_for_uses_question_and_answer(self, engine):
        snapshot = engine.snapshot()
        assert card_text_for(snapshot, Column.LEFT, 0) == snapshot.left[0].item.question
        assert card_text_for(snapshot, Column.RIGHT, 0) == snapshot.right[0].item.answer


class TestBoardInteraction:
    def test_click_selects_card(self, qtbot, board, engine, scheduler):
        qtbot.mouseClick(board.card(Column.LEFT, 1), Qt.MouseButton.LeftButton)

        assert engine.selected_left == 1
        assert board.card(Column.LEFT, 1).state is CardState.SELECTED
        assert scheduler.coros == []

    def test_matching_pair_selected_shows_matching_state(self, board, engine):
        right_row = matching_right_row(engine, 0)
        engine.toggle_left(0)
        engine.toggle_right(right_row)

        assert card_state_for(engine.snapshot(), Column.LEFT, 0) is CardState.MATCHING
        assert board.card(Column.RIGHT, right_row).state is CardState.MATCHING

    def test_second_column_click_schedules_evaluation(self, qtbot, board, engine, scheduler):
        qtbot.mouseClick(board.card(Column.LEFT, 0), Qt.MouseButton.LeftButton)
        qtbot.mouseClick(
            board.card(Column.RIGHT, non_matching_right_row(engine, 0)),
            Qt.MouseButton.LeftButton,
        )

        assert len(scheduler.coros) == 1

    def test_scheduled_match_updates_cards(self, qtbot, board, engine, scheduler, clock):
        item = engine.left_slot(0).item
        right_row = matching_right_row(engine, 0)
        qtbot.mouseClick(board.card(Column.LEFT, 0), Qt.MouseButton.LeftButton)
        qtbot.mouseClick(board.card(Column.RIGHT, right_row), Qt.MouseButton.LeftButton)
        coro = scheduler.coros.pop()

        async def drive():
            task = asyncio.ensure_future(coro)
            await clock.settle()
            assert board.card(Column.LEFT, 0).state is CardState.MATCHED
            await clock.advance(0.5)
            assert board.card(Column.LEFT, 0).state is CardState.FROZEN
            await clock.advance(1)
            await task

        asyncio.run(drive())

        assert board.card(Column.LEFT, 0).text() != item.question
        assert board.card(Column.LEFT, 0).state is CardState.NORMAL

    def test_scheduled_mismatch_marks_then_releases(self, qtbot, board, engine, scheduler, clock):
        right_row = non_matching_right_row(engine, 0)
        engine.toggle_left(0)
        engine.toggle_right(right_row)
        coro = engine.evaluate_pending_pair()

        async def drive():
            task = asyncio.ensure_future(coro)
            await clock.settle()
            assert board.card(Column.LEFT, 0).state is CardState.MISMATCH
            assert board.card(Column.RIGHT, right_row).state is CardState.MISMATCH
            await clock.advance(1)
            await task

        asyncio.run(drive())
        assert board.card(Column.LEFT, 0).state is CardState.NORMAL

"""Tests for MainWindow status and menu wiring."""

import pytest

from match_quiz.engine import EngineConfig, RoundEngine
from match_quiz.gui.main_window import MainWindow

from conftest import make_source


@pytest.fixture
def window(qtbot, qapp, clock):
    engine = RoundEngine(make_source(8), EngineConfig(visible_rows=3, seed=5), sleep=clock.sleep)
    engine.initialize_round()
    win = MainWindow(engine, schedule=lambda coro: coro.close())
    qtbot.addWidget(win)
    return win


class TestMainWindow:
    def test_status_shows_round_and_counts(self, window):
        assert window.status_label.text() == "Round 1 | on board: 3 | remaining: 5"

    def test_new_round_action_starts_next_round(self, window):
        window.new_round_action.trigger()
        assert window.status_label.text().startswith("Round 2 |")

    def test_round_cleared_shows_message(self, window):
        window._engine.roundCleared.emit()
        assert "All pairs matched" in window.statusBar().currentMessage()

    def test_title_uses_deck_title(self, qtbot, qapp, clock):
        from match_quiz.core.models import ItemSource

        engine = RoundEngine(ItemSource.default(), sleep=clock.sleep)
        win = MainWindow(engine)
        qtbot.addWidget(win)
        assert win.windowTitle() == "Match Quiz - General knowledge"

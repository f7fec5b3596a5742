"""
Module: engine

Purpose:
    Round engine for the two-column matching game: deals a board of
    question/answer rows, keeps the answer column a derangement-biased
    rearrangement of the question column, and resolves selected pairs
    with timed match/mismatch transitions.

Key Functions:
    - place_right_column(): Derangement-biased right column placement

Key Classes:
    - EngineConfig: Row count, delays and seed
    - RoundEngine: Round state machine (Qt signals for change notification)
    - RoundSnapshot: Immutable read model of a round

Dependencies:
    - PySide6.QtCore: Signals
    - match_quiz.core.models: QAItem, Slot, Column, ItemSource

Used By:
    - match_quiz.gui: Presentation shell
"""

from .config import EngineConfig
from .placement import place_right_column, count_self_pairs
from .state import RoundState, RoundSnapshot
from .round_engine import RoundEngine

__all__ = [
    # Config
    "EngineConfig",
    # Placement
    "place_right_column",
    "count_self_pairs",
    # State
    "RoundState",
    "RoundSnapshot",
    # Engine
    "RoundEngine",
]

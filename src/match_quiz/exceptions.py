"""
Module: exceptions

Purpose:
    Exception hierarchy shared by the core packages.

Key Classes:
    - MatchQuizError: Base class for all project errors
    - DeckError: Deck file could not be read or written

Used By:
    - core.utils.serialization: Deck loading
    - core.schemas.validator: ValidationError
    - gui.app: Startup error handling
"""


class MatchQuizError(Exception):
    """Base class for all match_quiz errors."""
    pass


class DeckError(MatchQuizError):
    """Error reading or writing a deck file."""
    pass

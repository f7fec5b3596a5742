"""
Core Models Package

Immutable data models shared by the engine and the GUI.

All models are frozen dataclasses (plus the ``Column`` enum), so they can
be handed to the presentation layer without risk of it mutating engine
state, and they can live in sets and dict keys.
"""

from .items import QAItem
from .slots import Column, Slot
from .source import ItemSource

__all__ = [
    "QAItem",
    "Column",
    "Slot",
    "ItemSource",
]

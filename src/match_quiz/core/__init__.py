"""
Match Quiz Core Package

Shared data models and utilities used by the engine and the GUI.

1. **Immutable Data Models**
   - Items, slots and sources are frozen dataclasses
   - The engine replaces slots, it never mutates an item

2. **Identity, Not Text**
   - Items compare by ``id`` only; equal answer text never pairs

3. **Validated Input**
   - Deck files are checked against ``deck.schema.json`` before use
"""

from .models import QAItem, Column, Slot, ItemSource
from .schemas import ValidationError
from .utils import load_deck, save_deck

__all__ = [
    "QAItem",
    "Column",
    "Slot",
    "ItemSource",
    "ValidationError",
    "load_deck",
    "save_deck",
]

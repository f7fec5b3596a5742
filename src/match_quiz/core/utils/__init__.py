"""
Utils Package

Serialization and utility functions.
"""

from .serialization import (
    serialize_item,
    deserialize_item,
    serialize_deck,
    deserialize_deck,
    load_deck,
    save_deck,
)

__all__ = [
    "serialize_item",
    "deserialize_item",
    "serialize_deck",
    "deserialize_deck",
    "load_deck",
    "save_deck",
]

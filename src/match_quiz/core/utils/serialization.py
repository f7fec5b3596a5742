"""
Serialization Utilities

Provides to/from JSON utilities for items and decks.

- ``serialize_*`` / ``deserialize_*`` work on dictionaries
- ``load_deck`` / ``save_deck`` work on files
- Validation via schemas before deserialization
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

from match_quiz.exceptions import DeckError

from ..models.items import QAItem
from ..models.source import ItemSource
from ..schemas.validator import DECK_SCHEMA_VERSION, validate_deck

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Item Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_item(item: QAItem) -> dict[str, Any]:
    """Serialize a QAItem to a dictionary."""
    return item.to_dict()


def deserialize_item(data: dict[str, Any]) -> QAItem:
    """
    Deserialize a QAItem from a dictionary.

    Raises:
        KeyError: If question or answer is missing
    """
    return QAItem.from_dict(data)


# ─────────────────────────────────────────────────────────────────────────────
# Deck Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_deck(source: ItemSource) -> dict[str, Any]:
    """Serialize an ItemSource to a deck document."""
    return {
        "schema_version": DECK_SCHEMA_VERSION,
        "title": source.title,
        "items": [serialize_item(item) for item in source.items],
    }


def deserialize_deck(data: Any, *, strict: bool = True) -> ItemSource:
    """
    Deserialize a deck document into an ItemSource.

    Args:
        data: Parsed JSON document
        strict: Run full JSON Schema validation

    Raises:
        ValidationError: If data is invalid
    """
    validate_deck(data, strict=strict)
    items = tuple(deserialize_item(entry) for entry in data["items"])
    return ItemSource(items=items, title=data.get("title"))


def load_deck(path: Path, *, strict: bool = True) -> ItemSource:
    """
    Load a deck JSON file.

    Args:
        path: Path to the deck file
        strict: Run full JSON Schema validation

    Returns:
        ItemSource with the deck's items in file order

    Raises:
        DeckError: If the file cannot be read or is not JSON
        ValidationError: If the document is not a valid deck

    Example:
        >>> source = load_deck(Path("decks/capitals.json"))
        >>> len(source)
        20
    """
    path = Path(path)
    if not path.exists():
        raise DeckError(f"Deck file does not exist: {path}")

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise DeckError(f"Deck file is not valid JSON: {path}: {e}") from e
    except OSError as e:
        raise DeckError(f"Failed to read deck file {path}: {e}") from e

    source = deserialize_deck(data, strict=strict)
    if source.is_empty:
        logger.warning(f"Deck {path} contains no items")
    else:
        logger.debug(f"Loaded {len(source)} items from {path}")
    return source


def save_deck(source: ItemSource, path: Path, *, title: Optional[str] = None) -> None:
    """
    Write an ItemSource to a deck JSON file.

    Args:
        source: Items to write
        path: Destination file (parent directories are created)
        title: Overrides ``source.title`` when given

    Raises:
        DeckError: If the file cannot be written
    """
    path = Path(path)
    data = serialize_deck(source)
    if title is not None:
        data["title"] = title
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
    except OSError as e:
        raise DeckError(f"Failed to write deck file {path}: {e}") from e

"""
Module: source

Purpose:
    Provides ItemSource - the immutable, ordered deck of question/answer
    pairs handed to a round engine once at startup.

Key Functions:
    - ItemSource.from_pairs(): Build from (question, answer) tuples
    - ItemSource.default(): Built-in general-knowledge deck

Dependencies:
    - .items.QAItem

Used By:
    - engine.round_engine.RoundEngine
    - core.utils.serialization: load_deck / save_deck
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from .items import QAItem


@dataclass(frozen=True)
class ItemSource:
    """
    Read-only ordered collection of items.

    Attributes:
        items: Items in deck order
        title: Optional human-readable deck title

    Invariants:
        - Item ids are unique within the source

    Example:
        >>> source = ItemSource.from_pairs([("1 + 1", "2"), ("3 * 3", "9")])
        >>> len(source)
        2
    """

    items: tuple[QAItem, ...]
    title: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate source on construction."""
        counts = Counter(item.id for item in self.items)
        duplicates = sorted(item_id for item_id, n in counts.items() if n > 1)
        if duplicates:
            raise ValueError(f"Duplicate item ids in source: {duplicates}")

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[QAItem]:
        return iter(self.items)

    def __getitem__(self, index: int) -> QAItem:
        return self.items[index]

    @property
    def is_empty(self) -> bool:
        return not self.items

    @classmethod
    def from_items(cls, items: Iterable[QAItem], title: Optional[str] = None) -> ItemSource:
        return cls(items=tuple(items), title=title)

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[tuple[str, str]],
        title: Optional[str] = None,
    ) -> ItemSource:
        """Create a source from (question, answer) tuples; ids are generated."""
        return cls(
            items=tuple(QAItem(question=q, answer=a) for q, a in pairs),
            title=title,
        )

    @classmethod
    def default(cls) -> ItemSource:
        """The built-in general-knowledge deck."""
        from ..decks import DEFAULT_DECK, DEFAULT_DECK_TITLE
        return cls.from_pairs(DEFAULT_DECK, title=DEFAULT_DECK_TITLE)

    def __repr__(self) -> str:
        return f"ItemSource({self.title!r}, items={len(self.items)})"

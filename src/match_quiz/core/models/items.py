"""
Module: items

Purpose:
    Provides the QAItem dataclass - one question/answer pair of a deck.
    Items are immutable and compared by identity only, never by text.

Key Classes:
    - QAItem: Question/answer pair with a unique id

Dependencies:
    - dataclasses (std)
    - uuid (std)

Used By:
    - core.models.slots.Slot
    - core.models.source.ItemSource
    - engine.placement / engine.round_engine
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any


def _new_item_id() -> str:
    return uuid.uuid4().hex


@dataclass(frozen=True)
class QAItem:
    """
    A single question/answer pair (immutable).

    Attributes:
        question: Prompt shown in the left column
        answer: Answer shown in the right column
        id: Unique identifier, generated when not given

    Invariants:
        - Equality and hashing use ``id`` only. Two items with the same
          question and answer text but different ids do NOT pair.

    Example:
        >>> a = QAItem("7 + 5", "12")
        >>> b = QAItem("Months in a year", "12")
        >>> a == b
        False
        >>> a == QAItem("anything", "else", id=a.id)
        True
    """

    question: str = field(compare=False)
    answer: str = field(compare=False)
    id: str = field(default_factory=_new_item_id)

    def __post_init__(self) -> None:
        """Validate item on construction."""
        if not self.id:
            raise ValueError("id must be a non-empty string")
        if not isinstance(self.question, str) or not isinstance(self.answer, str):
            raise ValueError(f"question and answer must be strings: {self.id}")

    def to_dict(self) -> dict[str, Any]:
        """Serialize to a JSON-compatible dictionary."""
        return {"id": self.id, "question": self.question, "answer": self.answer}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> QAItem:
        """
        Create an item from a dictionary.

        A missing ``id`` gets a freshly generated one.
        """
        item_id = data.get("id") or _new_item_id()
        return cls(question=data["question"], answer=data["answer"], id=str(item_id))

    def __repr__(self) -> str:
        return f"QAItem({self.question!r} -> {self.answer!r}, id={self.id[:8]})"

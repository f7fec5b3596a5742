"""
Schema Validation Utilities

Validates deck JSON data before it is turned into an ItemSource.

Two layers, as with every payload this project reads:
- Basic checks (always): required fields, types, unique ids
- Full JSON Schema validation (``strict=True``) against
  ``deck.schema.json`` using ``jsonschema``
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema

from match_quiz.exceptions import MatchQuizError


# Schema version constants
DECK_SCHEMA_VERSION = 1


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(MatchQuizError):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def validate_deck(data: Any, *, strict: bool = False) -> None:
    """
    Validate deck data.

    Args:
        data: Parsed JSON document
        strict: If True, also validate against ``deck.schema.json``

    Raises:
        ValidationError: If data is invalid
    """
    if not isinstance(data, dict):
        raise ValidationError(f"Deck must be a JSON object, got {type(data).__name__}")

    missing = [f for f in ("schema_version", "items") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing],
        )

    version = data.get("schema_version")
    if version != DECK_SCHEMA_VERSION:
        raise ValidationError(
            f"Unsupported deck schema version: {version} (expected {DECK_SCHEMA_VERSION})",
            path="schema_version",
        )

    items = data["items"]
    if not isinstance(items, list):
        raise ValidationError("items must be a list", path="items")

    seen: set[str] = set()
    for index, entry in enumerate(items):
        _validate_item(entry, f"items.{index}")
        item_id = entry.get("id")
        if item_id is None:
            continue
        if item_id in seen:
            raise ValidationError(f"Duplicate item id: {item_id!r}", path=f"items.{index}.id")
        seen.add(item_id)

    if strict:
        schema = _load_schema("deck")
        try:
            jsonschema.validate(data, schema)
        except jsonschema.ValidationError as e:
            raise ValidationError(
                f"Schema validation failed: {e.message}",
                path=".".join(str(p) for p in e.absolute_path),
                errors=[e.message],
            )


def _validate_item(data: Any, path: str) -> None:
    """Validate one deck entry."""
    if not isinstance(data, dict):
        raise ValidationError(f"Item must be an object at {path}", path=path)

    missing = [f for f in ("question", "answer") if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields at {path}: {missing}",
            path=path,
            errors=[f"Missing field: {f}" for f in missing],
        )

    for key in ("question", "answer"):
        if not isinstance(data[key], str):
            raise ValidationError(f"{key} must be a string at {path}", path=f"{path}.{key}")

    if "id" in data and (not isinstance(data["id"], str) or not data["id"]):
        raise ValidationError(f"id must be a non-empty string at {path}", path=f"{path}.id")

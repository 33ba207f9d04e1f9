"""Record and check the version of migrated data in a document collection.

The collection is any object offering ``find_one(filter)`` and
``update_one(filter, update, upsert=...)`` in the manner of a MongoDB collection.
"""

from __future__ import annotations

import re
from typing import Any

COLLECTION = "data_version"

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_version(value: Any) -> int:
    if not isinstance(value, str) or not _INTEGER.fullmatch(value):
        raise ValueError(f"version {value} parse error")
    return int(value)


def check_version(coll: Any, key: str, current_version: int) -> bool:
    """Return True when the stored version for key is at least current_version."""
    doc = coll.find_one({"key": key})
    if doc is None:
        return False
    return _parse_version(doc.get("value", "")) >= current_version


def set_version(coll: Any, key: str, version: int) -> None:
    """Store version for key, inserting the record if needed."""
    value = str(version)
    coll.update_one(
        {"key": key, "value": value},
        {"$set": {"key": key, "value": value}},
        upsert=True,
    )
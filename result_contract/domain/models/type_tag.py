"""Type tag normalization.

A type tag names a category of outcome (e.g. "ok", "not_found"). Tags are
declared once per contract and compared in one canonical form: a stripped,
lower-cased string. Enum members contribute their string value (or their
name, for non-string enums) so that `Status.OK`, `"ok"` and `" OK "` all
resolve to the same tag.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum
from typing import Any

from result_contract.domain.errors.contract import InvalidTypeTagError

TypeTag = str


def normalize_type_tag(key: Any) -> TypeTag:
    """Convert a raw key into its canonical type tag.

    Args:
        key: A str or Enum member.

    Returns:
        The canonical tag.

    Raises:
        InvalidTypeTagError: If the key is of another kind or is blank.
    """
    if isinstance(key, Enum):
        raw = key.value if isinstance(key.value, str) else key.name
    elif isinstance(key, str):
        raw = key
    else:
        raise InvalidTypeTagError(key, "must be a str or Enum member")

    tag = raw.strip().lower()
    if not tag:
        raise InvalidTypeTagError(key, "is blank")
    return tag


def normalize_type_tags(keys: Iterable[Any]) -> frozenset[TypeTag]:
    """Normalize a collection of keys, refusing keys that collide.

    Args:
        keys: Raw keys from a contract declaration.

    Returns:
        The declared set of canonical tags.

    Raises:
        InvalidTypeTagError: If a key is invalid or two keys share a tag.
    """
    tags: set[TypeTag] = set()
    for key in keys:
        tag = normalize_type_tag(key)
        if tag in tags:
            raise InvalidTypeTagError(key, f"duplicates type tag {tag!r}")
        tags.add(tag)
    return frozenset(tags)

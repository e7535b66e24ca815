"""
Identifiers for stored entities.

New ids are UUID4 hex strings. Older catalog records were imported with
free-form string ids, so lookups try the canonical UUID form first and then
the raw string.
"""

import re
import uuid

_ID_PATTERN = re.compile(r"^[A-Za-z0-9_-]{1,64}$")


def new_id() -> str:
    return uuid.uuid4().hex


def is_valid_id(value: str | None) -> bool:
    return bool(value) and bool(_ID_PATTERN.match(value))


def canonical_id(value: str) -> str | None:
    """Canonical UUID hex for `value`, or None when it is not a UUID."""
    try:
        return uuid.UUID(value).hex
    except (ValueError, AttributeError, TypeError):
        return None


def candidate_ids(value: str) -> list[str]:
    candidates = []
    typed = canonical_id(value)
    if typed:
        candidates.append(typed)
    if value not in candidates:
        candidates.append(value)
    return candidates

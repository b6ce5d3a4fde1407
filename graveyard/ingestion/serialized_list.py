"""Lookup over the save format's sparse ``{"Key": ..., "Value": ...}`` lists.

Stat blocks such as ``_statCounters`` and ``_statAggregators`` carry their
data under ``_serializedList``. Lookups scan linearly and stop at the first
entry whose ``Key`` matches.
"""

from typing import Any

from graveyard.ingestion.document import as_array, as_object, get_array, is_number
from graveyard.ingestion.exceptions import MissingFieldError

_MISSING = object()


def serialized_list(stat_block: Any) -> list[Any] | None:
    """Return the ``_serializedList`` array of a stat block, if there is one."""
    return get_array(stat_block, "_serializedList")


def _find_value(entries: Any, key: str) -> Any:
    items = as_array(entries)
    if items is None:
        return _MISSING
    for item in items:
        entry = as_object(item)
        if entry is not None and entry.get("Key") == key:
            return entry.get("Value", _MISSING)
    return _MISSING


def lookup(entries: Any, key: str) -> int | float:
    """Optional lookup: absent list, absent key or non-numeric value yield 0."""
    value = _find_value(entries, key)
    return value if is_number(value) else 0


def lookup_required(entries: Any, key: str) -> int | float:
    """Required lookup.

    Raises:
        MissingFieldError: if the list is absent, the key is not present, or
            the first matching entry does not carry a numeric value.
    """
    value = _find_value(entries, key)
    if not is_number(value):
        raise MissingFieldError(key)
    return value

"""Total accessors over the untyped save document.

The parsed save is a plain JSON tree (dict/list/int/float/str/bool/None).
Every accessor here returns ``None`` on a shape mismatch instead of raising,
so that required-field failures are raised deliberately by the policy layer.
"""

from typing import Any

JsonValue = dict[str, Any] | list[Any] | int | float | str | bool | None


def is_number(value: Any) -> bool:
    """True for JSON numbers. Booleans are excluded even though they are ints."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def as_object(value: Any) -> dict[str, Any] | None:
    return value if isinstance(value, dict) else None


def as_array(value: Any) -> list[Any] | None:
    return value if isinstance(value, list) else None


def as_number(value: Any) -> int | float | None:
    return value if is_number(value) else None


def get_object(node: Any, key: str) -> dict[str, Any] | None:
    obj = as_object(node)
    return as_object(obj.get(key)) if obj is not None else None


def get_array(node: Any, key: str) -> list[Any] | None:
    obj = as_object(node)
    return as_array(obj.get(key)) if obj is not None else None


def get_number(node: Any, key: str) -> int | float | None:
    obj = as_object(node)
    return as_number(obj.get(key)) if obj is not None else None


def get_bool(node: Any, key: str) -> bool | None:
    obj = as_object(node)
    if obj is None:
        return None
    value = obj.get(key)
    return value if isinstance(value, bool) else None


def last_element(node: Any) -> Any:
    """Last item of an array, or None for a missing or empty array."""
    array = as_array(node)
    return array[-1] if array else None

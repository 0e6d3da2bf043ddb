"""
Deterministic JSON serialization for machine-readable output.

Identical data produces identical JSON regardless of dict ordering.
"""

from __future__ import annotations

from typing import Any

import orjson


def _default_serializer(obj: Any) -> Any:
    """
    Custom serializer for types not natively supported by orjson.

    Raises:
        TypeError: If object cannot be serialized.
    """
    if hasattr(obj, "to_dict"):
        return obj.to_dict()
    if hasattr(obj, "model_dump"):
        # Pydantic models
        return obj.model_dump(mode="json")
    if isinstance(obj, (set, frozenset)):
        return sorted(obj, key=str)

    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def canonical_json_dumps(obj: Any, *, indent: bool = False) -> str:
    """
    Serialize object to canonical JSON string.

    Args:
        obj: Object to serialize.
        indent: If True, pretty-print with 2-space indentation.

    Returns:
        Canonical JSON string with sorted keys.

    Examples:
        >>> canonical_json_dumps({"b": 2, "a": 1})
        '{"a":1,"b":2}'
    """
    # Dataclasses go through _default_serializer so their to_dict applies
    options = orjson.OPT_SORT_KEYS | orjson.OPT_PASSTHROUGH_DATACLASS
    if indent:
        options |= orjson.OPT_INDENT_2
    return orjson.dumps(obj, default=_default_serializer, option=options).decode("utf-8")


def canonical_json_loads(json_str: str | bytes) -> Any:
    """Parse JSON string."""
    return orjson.loads(json_str)

"""Deterministic cache keys for singleton acquisition.

Options are encoded as canonical JSON: mapping keys sorted, compact
separators, sequences kept in order. Structurally equal options therefore
produce the same key regardless of object identity or dict insertion order.

Supported option shapes:
    - None, bool, int, float, str
    - list and tuple (order-sensitive; a tuple encodes like a list)
    - mappings with string keys
    - set and frozenset (members sorted by their encoded form)
    - pydantic models and dataclass instances (encoded as their fields)

Options that contain themselves (e.g. a list appended to itself) are not
supported and raise UnserializableOptionsError.
"""

import dataclasses
import json
from collections.abc import Mapping
from typing import Any, Optional, Set, Tuple

from pydantic import BaseModel

from ..errors import UnserializableOptionsError

SingletonKey = Tuple[str, str]


def _normalize(value: Any, active: Optional[Set[int]] = None) -> Any:
    """Reduce a value to plain JSON-compatible data.

    ``active`` holds the ids of containers on the current path; meeting one
    again means the options refer to themselves.
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value

    if active is None:
        active = set()
    if id(value) in active:
        raise UnserializableOptionsError(
            f"Options of type {type(value).__name__} contain a reference to themselves"
        )

    active.add(id(value))
    try:
        return _normalize_container(value, active)
    finally:
        active.discard(id(value))


def _normalize_container(value: Any, active: Set[int]) -> Any:
    if isinstance(value, BaseModel):
        try:
            dumped = value.model_dump(mode="json")
        except ValueError as e:
            raise UnserializableOptionsError(
                f"Cannot dump {type(value).__name__} options: {e}"
            ) from e
        return _normalize(dumped, active)

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        # Field by field; asdict() would deep-copy every value
        return {
            field.name: _normalize(getattr(value, field.name), active)
            for field in dataclasses.fields(value)
        }

    if isinstance(value, Mapping):
        normalized = {}
        for key, item in value.items():
            if not isinstance(key, str):
                raise UnserializableOptionsError(
                    f"Option mapping keys must be strings, got {type(key).__name__}: {key!r}"
                )
            normalized[key] = _normalize(item, active)
        return normalized

    if isinstance(value, (list, tuple)):
        return [_normalize(item, active) for item in value]

    if isinstance(value, (set, frozenset)):
        members = [_normalize(item, active) for item in value]
        return sorted(members, key=_encode)

    raise UnserializableOptionsError(
        f"Cannot derive a singleton key from options of type {type(value).__name__}"
    )


def _encode(value: Any) -> str:
    try:
        return json.dumps(value, sort_keys=True, separators=(",", ":"), allow_nan=True)
    except (TypeError, ValueError) as e:
        raise UnserializableOptionsError(f"Cannot encode options: {e}") from e


def canonical_options(options: Any) -> str:
    """Encode options as canonical JSON text.

    Raises:
        UnserializableOptionsError: If options contain an unsupported type
    """
    return _encode(_normalize(options))


def singleton_key(name: str, options: Any = None) -> SingletonKey:
    """Build the singleton cache key for a resource kind and its options.

    Example:
        >>> singleton_key("db", {"port": 5432, "host": "a"})
        ('db', '{"host":"a","port":5432}')
    """
    return (name, canonical_options(options))

"""Text codec for plain value graphs.

``encode`` renders values as compact JSON with sorted keys. ``decode`` parses
JSON and copies the top-level keys onto a fresh instance of a given class
without running its initializer:

    r = decode(Rectangle, '{"width": 10, "height": 20}')
    r.get_area()  # 200
"""

from __future__ import annotations

import dataclasses
import json
import logging
from typing import Any, TypeVar

from objtasks.errors import ParseError, SerializationError

__all__ = ["encode", "decode"]

log = logging.getLogger(__name__)

T = TypeVar("T")


def _public_fields(value: object) -> dict[str, Any]:
    """Return the encodable attributes of a dataclass or plain object."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        items = [(f.name, getattr(value, f.name)) for f in dataclasses.fields(value)]
    else:
        items = list(vars(value).items())
    # Methods and other callables are dropped, not rendered.
    return {k: v for k, v in items if not k.startswith("_") and not callable(v)}


def _is_record(value: object) -> bool:
    return (
        hasattr(value, "__dict__")
        and not isinstance(value, type)
        and not callable(value)
    )


def _drop_callables(value: Any, active: set[int]) -> Any:
    """Copy *value* with callables removed: dropped from mappings, ``None`` in lists."""
    if not isinstance(value, (dict, list, tuple)) and not _is_record(value):
        return value
    marker = id(value)
    if marker in active:
        raise ValueError("Circular reference detected")
    active.add(marker)
    try:
        if isinstance(value, (list, tuple)):
            return [None if callable(v) else _drop_callables(v, active) for v in value]
        items = value if isinstance(value, dict) else _public_fields(value)
        return {k: _drop_callables(v, active) for k, v in items.items() if not callable(v)}
    finally:
        active.discard(marker)


def encode(value: Any) -> str:
    """Serialise *value* to compact JSON with keys in ascending order.

    Callables nested in mappings and objects are dropped and callables in
    lists become ``null``; a callable passed directly is not serializable.
    """
    try:
        return json.dumps(
            _drop_callables(value, set()),
            sort_keys=True,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError) as e:
        log.debug("encode failed: %s", e)
        raise SerializationError(str(e), cause=e) from e


def decode(proto: type[T], text: str | bytes) -> T:
    """Parse *text* and copy its top-level keys onto a new *proto* instance.

    The instance is created without calling ``proto.__init__``; keys are
    copied verbatim with no coercion or validation against declared fields.
    """
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        log.debug("decode failed at line %d column %d: %s", e.lineno, e.colno, e.msg)
        raise ParseError(e.msg, line=e.lineno, column=e.colno, cause=e) from e
    except UnicodeDecodeError as e:
        log.debug("decode failed: %s", e)
        raise ParseError(str(e), cause=e) from e

    if not isinstance(data, dict):
        raise ParseError(
            f"Expected a JSON object at top level, got {type(data).__name__}"
        )

    instance = proto.__new__(proto)
    for key, value in data.items():
        try:
            # Bypasses frozen dataclass __setattr__.
            object.__setattr__(instance, key, value)
        except (TypeError, AttributeError) as e:
            raise ParseError(
                f"Cannot set key {key!r} on {proto.__name__}: {e}", cause=e
            ) from e
    return instance

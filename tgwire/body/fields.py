"""Wire-field reflection, zero-value rules, and value rendering.

WHY: Both body builders need the same view of a record: which fields it
has, in which order, under which wire names, and whether an empty value
may be dropped. Multipart bodies also need every value flattened to a
string, with nested structures embedded as JSON.

HOW: Records are dataclasses. wire_field() stores the wire name and the
omit-if-empty marker in the dataclass field metadata, and
iter_wire_fields() reads them back in declaration order. Plain mappings
are accepted too, with their keys used as wire names. Composite values
(records, mappings, lists, tuples, sets) go through to_json_value() and
dumps(); everything else through render_primitive().

RULES:
- Wire name = explicit tag when non-empty, otherwise the attribute name
- Zero values: None, False, 0, 0.0, "", b"", empty containers, and
  records whose fields are all zero
- Omit-if-empty fields are dropped from JSON output as well
- JSON is compact, UTF-8, and rejects NaN/Infinity
- Any serialization failure surfaces as EncodingError
"""

from __future__ import annotations

import dataclasses
import json
from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any

from tgwire.body.errors import EncodingError

WIRE_NAME_KEY = "wire_name"
OMIT_EMPTY_KEY = "omit_empty"


@dataclass(frozen=True)
class WireField:
    """One record field as the encoders see it.

    Attributes:
        name: Resolved wire name.
        value: Current runtime value.
        omit_empty: True when a zero value drops the field.
    """

    name: str
    value: Any
    omit_empty: bool = False


def wire_field(name: str = "", *, omit_empty: bool = False, **kwargs: Any) -> Any:
    """Declare a dataclass field with a wire name and omission marker.

    Works like ``dataclasses.field()``; extra keyword arguments
    (``default``, ``default_factory``, ``metadata``, ...) are passed
    through. An empty ``name`` means "use the attribute name".

    Example::

        @dataclass
        class PhotoMessage:
            chat_id: str = wire_field("chat_id")
            caption: str = wire_field("caption", omit_empty=True, default="")
    """
    metadata = dict(kwargs.pop("metadata", None) or {})
    metadata[WIRE_NAME_KEY] = name
    metadata[OMIT_EMPTY_KEY] = omit_empty
    return dataclasses.field(metadata=metadata, **kwargs)


def iter_wire_fields(record: Any) -> list[WireField]:
    """Return the record's fields in declaration order.

    Raises:
        EncodingError: If ``record`` is neither a dataclass instance nor a
            mapping.
    """
    if _is_dataclass_instance(record):
        result = []
        for f in dataclasses.fields(record):
            name = first_non_zero(f.metadata.get(WIRE_NAME_KEY, ""), f.name)
            result.append(
                WireField(
                    name=name,
                    value=getattr(record, f.name),
                    omit_empty=bool(f.metadata.get(OMIT_EMPTY_KEY, False)),
                )
            )
        return result

    if isinstance(record, Mapping):
        return [WireField(name=str(key), value=value) for key, value in record.items()]

    raise EncodingError(
        f"cannot encode {type(record).__name__} as a record; "
        "expected a dataclass instance or a mapping"
    )


# ---------------------------------------------------------------------------
# Zero values
# ---------------------------------------------------------------------------


def is_zero(value: Any, _active: set[int] | None = None) -> bool:
    """Return True if ``value`` is the zero/empty value for its type."""
    if value is None:
        return True
    if isinstance(value, Enum):
        return is_zero(value.value)
    if isinstance(value, (str, bytes, bytearray, int, float, complex)):
        return not value
    if isinstance(value, (Mapping, list, tuple, set, frozenset)):
        return len(value) == 0
    if _is_dataclass_instance(value):
        if _active is None:
            _active = set()
        # A record that reaches itself holds at least that reference.
        if id(value) in _active:
            return False
        _active.add(id(value))
        try:
            return all(
                is_zero(getattr(value, f.name), _active) for f in dataclasses.fields(value)
            )
        finally:
            _active.discard(id(value))
    return False


def first_non_zero(*values: Any, default: Any = None) -> Any:
    """Return the first value that is not zero.

    When every value is zero the last one is returned, so the result still
    has the type of the inputs. With no values at all, ``default`` is
    returned.

        >>> first_non_zero("", "fallback")
        'fallback'
        >>> first_non_zero() is None
        True
    """
    if not values:
        return default
    for value in values:
        if not is_zero(value):
            return value
    return values[-1]


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------


def is_composite(value: Any) -> bool:
    """True for values embedded as JSON: records, mappings, lists, tuples, sets."""
    return _is_dataclass_instance(value) or isinstance(
        value, (Mapping, list, tuple, set, frozenset)
    )


def render_primitive(value: Any) -> str:
    """Render a primitive value as a form field string.

    RULES:
    - None → "" ; bool → "true"/"false"
    - float → shortest round-trip decimal (``repr``)
    - Enum → rendering of its value
    - bytes → UTF-8 decoded text; the JSON builder rejects bytes, so a
      bytes field only encodes in multipart bodies
    - anything else → ``str(value)``
    """
    if value is None:
        return ""
    if isinstance(value, Enum):
        return render_primitive(value.value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise EncodingError(f"bytes value is not valid UTF-8: {exc}") from exc
    return str(value)


def encode_field_value(value: Any) -> str:
    """Encode one field value for a multipart form field."""
    if is_composite(value):
        return dumps(value)
    return render_primitive(value)


def to_json_value(value: Any, _active: set[int] | None = None) -> Any:
    """Convert records (recursively) into JSON-ready dicts keyed by wire name.

    Mappings, lists and tuples are walked so nested records are converted
    too. Other values are returned unchanged; json.dumps decides whether
    they can be represented.

    Raises:
        ValueError: On a circular reference.
    """
    if _active is None:
        _active = set()

    if isinstance(value, Enum):
        return to_json_value(value.value, _active)

    # Sets have no JSON form; json.dumps rejects them.
    if not is_composite(value) or isinstance(value, (set, frozenset)):
        return value

    marker = id(value)
    if marker in _active:
        raise ValueError("circular reference detected")
    _active.add(marker)
    try:
        if _is_dataclass_instance(value):
            return {
                wire.name: to_json_value(wire.value, _active)
                for wire in iter_wire_fields(value)
                if not (wire.omit_empty and is_zero(wire.value))
            }
        if isinstance(value, Mapping):
            return {key: to_json_value(item, _active) for key, item in value.items()}
        return [to_json_value(item, _active) for item in value]
    finally:
        _active.discard(marker)


def dumps(value: Any) -> str:
    """Serialize ``value`` to compact JSON text.

    Raises:
        EncodingError: If the value (or something nested in it) has no
            JSON representation.
    """
    try:
        return json.dumps(
            to_json_value(value),
            ensure_ascii=False,
            separators=(",", ":"),
            allow_nan=False,
        )
    except (TypeError, ValueError, RecursionError) as exc:
        raise EncodingError(f"value is not JSON serializable: {exc}") from exc


def _is_dataclass_instance(value: Any) -> bool:
    return dataclasses.is_dataclass(value) and not isinstance(value, type)

"""Unit tests for wire-field reflection and value rendering.

WHY: Wire names, zero values, and primitive rendering decide what ends
up on the wire for every Bot API call. A wrong zero test silently drops
data; a wrong rendering sends "True" where the API expects "true".

HOW: Tests are grouped by helper: first_non_zero, is_zero,
iter_wire_fields, render_primitive/encode_field_value, dumps.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

import pytest

from tgwire.body.errors import EncodingError
from tgwire.body.fields import (
    OMIT_EMPTY_KEY,
    WIRE_NAME_KEY,
    WireField,
    dumps,
    encode_field_value,
    first_non_zero,
    is_composite,
    is_zero,
    iter_wire_fields,
    render_primitive,
    wire_field,
)


class Color(str, enum.Enum):
    RED = "red"
    NONE = ""


@dataclass
class Point:
    x: int = wire_field("x")
    y: int = wire_field("y", omit_empty=True, default=0)


@dataclass
class Mixed:
    tagged: str = wire_field("wire_tagged")
    untagged: str = wire_field()
    plain: int = 0


@dataclass
class Node:
    label: str = wire_field("label")
    next: object = wire_field("next", omit_empty=True, default=None)


class TestFirstNonZero:
    """first_non_zero returns the first non-zero argument."""

    def test_no_arguments_returns_none(self):
        assert first_non_zero() is None

    def test_no_arguments_returns_default(self):
        assert first_non_zero(default="x") == "x"

    def test_skips_empty_string(self):
        assert first_non_zero("", "fallback") == "fallback"

    def test_first_non_zero_wins(self):
        assert first_non_zero("a", "b") == "a"

    def test_all_zero_returns_last(self):
        assert first_non_zero(0, 0) == 0
        assert first_non_zero("", "") == ""

    def test_single_argument(self):
        assert first_non_zero("") == ""
        assert first_non_zero(7) == 7

    def test_works_for_numbers(self):
        assert first_non_zero(0, 0.0, 3) == 3


class TestIsZero:
    """is_zero matches the zero value of each supported type."""

    @pytest.mark.parametrize(
        "value",
        [None, False, 0, 0.0, "", b"", [], (), {}, set(), Color.NONE, Point(x=0)],
    )
    def test_zero_values(self, value):
        assert is_zero(value)

    @pytest.mark.parametrize(
        "value",
        [True, 1, -1, 0.5, "0", " ", b"\x00", [0], (None,), {"a": None}, Color.RED, Point(x=1)],
    )
    def test_non_zero_values(self, value):
        assert not is_zero(value)

    def test_arbitrary_objects_are_not_zero(self):
        assert not is_zero(object())

    def test_self_referencing_record_is_not_zero(self):
        node = Node(label="")
        node.next = node
        assert not is_zero(node)


class TestIterWireFields:
    """iter_wire_fields resolves wire names in declaration order."""

    def test_tag_then_identifier(self):
        record = Mixed(tagged="a", untagged="b", plain=3)
        fields = iter_wire_fields(record)
        assert [f.name for f in fields] == ["wire_tagged", "untagged", "plain"]
        assert [f.value for f in fields] == ["a", "b", 3]

    def test_omit_marker_read_from_metadata(self):
        fields = iter_wire_fields(Point(x=1))
        assert fields == [
            WireField(name="x", value=1, omit_empty=False),
            WireField(name="y", value=0, omit_empty=True),
        ]

    def test_mapping_keys_are_wire_names(self):
        fields = iter_wire_fields({"chat_id": 1, "text": "hi"})
        assert fields == [WireField("chat_id", 1), WireField("text", "hi")]

    def test_dataclass_class_is_rejected(self):
        with pytest.raises(EncodingError):
            iter_wire_fields(Point)

    @pytest.mark.parametrize("value", [42, "text", [1, 2], None])
    def test_non_record_is_rejected(self, value):
        with pytest.raises(EncodingError, match="expected a dataclass instance or a mapping"):
            iter_wire_fields(value)


class TestWireField:
    """wire_field behaves like dataclasses.field with extra metadata."""

    def test_keeps_caller_metadata(self):
        @dataclass
        class Tagged:
            value: str = wire_field("v", metadata={"doc": "kept"}, default="")

        meta = Tagged.__dataclass_fields__["value"].metadata
        assert meta["doc"] == "kept"
        assert meta[WIRE_NAME_KEY] == "v"
        assert meta[OMIT_EMPTY_KEY] is False

    def test_default_factory_passes_through(self):
        @dataclass
        class Holder:
            items: list = wire_field("items", default_factory=list)

        assert Holder().items == []
        assert Holder().items is not Holder().items

    def test_plain_field_untouched(self):
        @dataclass
        class Plain:
            value: int = field(default=1)

        assert iter_wire_fields(Plain()) == [WireField("value", 1)]


class TestRendering:
    """Primitive values render as their default string form."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("123", "123"),
            (123, "123"),
            (-7, "-7"),
            (True, "true"),
            (False, "false"),
            (0.1, "0.1"),
            (1.0, "1.0"),
            (1e16, "1e+16"),
            (None, ""),
            (Color.RED, "red"),
            (b"bytes", "bytes"),
            ("Grüße", "Grüße"),
        ],
    )
    def test_render_primitive(self, value, expected):
        assert render_primitive(value) == expected

    def test_invalid_utf8_bytes_raise(self):
        with pytest.raises(EncodingError):
            render_primitive(b"\xff\xfe")

    def test_composite_kinds(self):
        assert is_composite(Point(x=1))
        assert is_composite({"a": 1})
        assert is_composite([1])
        assert is_composite((1,))
        assert is_composite({1})
        assert is_composite(frozenset({1}))
        assert not is_composite("abc")
        assert not is_composite(Point)

    def test_composite_field_is_json(self):
        assert encode_field_value({"a": [1, 2]}) == '{"a":[1,2]}'
        assert encode_field_value([Point(x=1, y=2)]) == '[{"x":1,"y":2}]'

    def test_primitive_field_is_not_quoted(self):
        assert encode_field_value("hello") == "hello"


class TestDumps:
    """dumps converts records by wire name and rejects non-JSON values."""

    def test_nested_record_uses_wire_names_and_omits_empty(self):
        assert dumps({"point": Point(x=5)}) == '{"point":{"x":5}}'

    def test_enum_serialized_by_value(self):
        assert dumps([Color.RED]) == '["red"]'

    def test_non_ascii_kept_verbatim(self):
        assert dumps({"text": "привет"}) == '{"text":"привет"}'

    def test_shared_reference_is_not_a_cycle(self):
        shared = [1]
        assert dumps({"a": shared, "b": shared}) == '{"a":[1],"b":[1]}'

    def test_cycle_raises_encoding_error(self):
        loop: list = []
        loop.append(loop)
        with pytest.raises(EncodingError, match="circular reference"):
            dumps(loop)

    def test_cyclic_record_raises_encoding_error(self):
        node = Node(label="a")
        node.next = node
        with pytest.raises(EncodingError):
            dumps(node)

    @pytest.mark.parametrize("value", [{"f": lambda: None}, {"s": {1, 2}}, {"n": float("nan")}, object()])
    def test_unserializable_raises_encoding_error(self, value):
        with pytest.raises(EncodingError, match="not JSON serializable"):
            dumps(value)

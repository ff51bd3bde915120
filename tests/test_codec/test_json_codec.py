"""Tests for the JSON codec."""

import logging
from dataclasses import dataclass

import pytest

from objectkit import ObjectKitConfig, ParseError, Rectangle
from objectkit.codec import JsonCodec, decode, encode, loads


class Circle:
    def __init__(self, radius):
        raise AssertionError("decode must not call __init__")

    def get_diameter(self):
        return self.radius * 2


class Blank:
    pass


@dataclass(frozen=True)
class Point:
    x: int
    y: int

    def norm1(self):
        return abs(self.x) + abs(self.y)


# ---------------------------------------------------------------------------
# encode
# ---------------------------------------------------------------------------


class TestEncode:
    def test_insertion_order_preserved(self):
        assert encode({"width": 10, "height": 20}) == '{"width":10,"height":20}'

    def test_reverse_order_preserved(self):
        assert encode({"height": 20, "width": 10}) == '{"height":20,"width":10}'

    def test_array(self):
        assert encode([1, 2, 3]) == "[1,2,3]"

    def test_scalars(self):
        assert encode("text") == '"text"'
        assert encode(None) == "null"
        assert encode(True) == "true"

    def test_non_ascii_kept(self):
        assert encode({"name": "café"}) == '{"name":"café"}'

    def test_dataclass_uses_own_fields(self):
        assert encode(Rectangle(10, 20)) == '{"width":10,"height":20}'

    def test_plain_object_uses_vars(self):
        obj = Blank()
        obj.a = 1
        obj.b = [True]
        assert encode(obj) == '{"a":1,"b":[true]}'

    def test_nested_objects(self):
        assert encode({"shape": Rectangle(1, 2)}) == '{"shape":{"width":1,"height":2}}'

    def test_unserialisable_raises_type_error(self):
        with pytest.raises(TypeError):
            encode(object())

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), {"x": float("-inf")}])
    def test_non_finite_floats_rejected(self, value):
        with pytest.raises(ValueError):
            encode(value)


class TestEncodeConfig:
    def test_indent(self):
        codec = JsonCodec(ObjectKitConfig(json_indent=2))
        assert codec.encode({"a": 1}) == '{\n  "a": 1\n}'

    def test_ensure_ascii(self):
        codec = JsonCodec(ObjectKitConfig(ensure_ascii=True))
        assert codec.encode("é") == '"\\u00e9"'

    def test_default_config(self):
        assert JsonCodec().config == ObjectKitConfig()


# ---------------------------------------------------------------------------
# loads / decode
# ---------------------------------------------------------------------------


class TestLoads:
    def test_parses_document(self):
        assert loads('{"a":[1,2]}') == {"a": [1, 2]}

    def test_malformed_raises_parse_error(self):
        with pytest.raises(ParseError) as info:
            loads('{"a":')
        assert info.value.line == 1
        assert info.value.column == 6
        assert info.value.position == "line 1, column 6"

    def test_error_position_on_later_line(self):
        with pytest.raises(ParseError) as info:
            loads('{\n  "a": 1,\n  oops\n}')
        assert info.value.line == 3

    @pytest.mark.parametrize("text", ["NaN", "[1, Infinity]", "{\"a\": -Infinity}"])
    def test_non_standard_constants_rejected(self, text):
        with pytest.raises(ParseError):
            loads(text)

    def test_cause_is_chained(self):
        with pytest.raises(ParseError) as info:
            loads("nope")
        assert info.value.__cause__ is not None


class TestDecode:
    def test_methods_available(self):
        circle = decode(Circle, '{"radius":10}')
        assert isinstance(circle, Circle)
        assert circle.radius == 10
        assert circle.get_diameter() == 20

    def test_rectangle(self):
        r = decode(Rectangle, '{"width":10,"height":20}')
        assert isinstance(r, Rectangle)
        assert r.area() == 200

    def test_frozen_dataclass(self):
        p = decode(Point, '{"x":3,"y":-4}')
        assert p == Point(3, -4)
        assert p.norm1() == 7

    def test_array_returned_unchanged(self):
        assert decode(Blank, "[1,2,3]") == [1, 2, 3]

    def test_scalar_returned_unchanged(self):
        assert decode(Blank, "42") == 42
        assert decode(Blank, "null") is None

    def test_malformed_raises_parse_error(self):
        with pytest.raises(ParseError):
            decode(Circle, "{radius: 10}")

    def test_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="objectkit.codec"):
            decode(Blank, '{"a":1}')
        assert "decoded 1 field(s) onto Blank" in caplog.text


class TestRoundTrip:
    @pytest.mark.parametrize(
        "value",
        [
            {"width": 10, "height": 20},
            {},
            {"nested": {"list": [1, "two", None, 3.5]}, "flag": False},
            {"unicode": "ñ", "empty": ""},
        ],
    )
    def test_own_fields_equal_input(self, value):
        assert vars(decode(Blank, encode(value))) == value

    def test_rectangle_round_trip(self):
        original = Rectangle(3, 4)
        assert decode(Rectangle, encode(original)) == original

    def test_dunder_keys_stay_plain_fields(self):
        value = {"__class__": 1, "__dict__": {"a": 1}, "b": 2}
        decoded = decode(Blank, encode(value))
        assert isinstance(decoded, Blank)
        assert vars(decoded) == value


class Slotted:
    __slots__ = ("x",)


class TestDecodeSlots:
    def test_declared_slot_set(self):
        assert decode(Slotted, '{"x":5}').x == 5

    def test_undeclared_key_rejected(self):
        with pytest.raises(AttributeError):
            decode(Slotted, '{"y":5}')

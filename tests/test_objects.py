from dataclasses import dataclass

import pytest

from objects import (
    JsonParseError,
    JsonShapeError,
    Rectangle,
    decode_from_json_as,
    encode_to_json,
    make_rectangle,
)


class Circle:
    def __init__(self, radius):
        self.radius = radius

    def get_circumference(self):
        return 2 * 3 * self.radius


@pytest.mark.parametrize("w,h", [(10, 20), (0, 5), (2.5, 4), (0, 0)])
def test_rectangle_area(w, h):
    r = make_rectangle(w, h)
    assert r.width == w
    assert r.height == h
    assert r.get_area() == w * h


def test_encode_is_compact():
    assert encode_to_json([1, 2, 3]) == "[1,2,3]"
    assert encode_to_json({"height": 10, "width": 20}) == '{"height":10,"width":20}'
    assert encode_to_json("x") == '"x"'
    assert encode_to_json(None) == "null"


def test_encode_objects_uses_attributes_only():
    assert encode_to_json(make_rectangle(10, 20)) == '{"width":10,"height":20}'
    assert encode_to_json(Circle(10)) == '{"radius":10}'
    assert encode_to_json([Circle(1), {"r": make_rectangle(1, 2)}]) == '[{"radius":1},{"r":{"width":1,"height":2}}]'


def test_encode_unserialisable_raises_type_error():
    with pytest.raises(TypeError):
        encode_to_json({1, 2})


def test_decode_binds_methods():
    c = decode_from_json_as(Circle, '{"radius":10}')
    assert isinstance(c, Circle)
    assert c.radius == 10
    assert c.get_circumference() == 60

    r = decode_from_json_as(Rectangle, '{"width":10,"height":20}')
    assert isinstance(r, Rectangle)
    assert r.get_area() == 200


def test_round_trip():
    r = make_rectangle(3, 7)
    assert decode_from_json_as(Rectangle, encode_to_json(r)) == r

    value = {"a": [1, 2.5, None, True], "b": {"c": "ü"}}
    assert decode_from_json_as(Circle, encode_to_json(value)).__dict__ == value


def test_decode_invalid_json():
    with pytest.raises(JsonParseError, match="Invalid JSON"):
        decode_from_json_as(Circle, '{"radius":')
    with pytest.raises(ValueError):
        decode_from_json_as(Circle, "not json")


def test_decode_non_object():
    with pytest.raises(JsonShapeError):
        decode_from_json_as(Circle, "[1,2,3]")


class SlottedCircle:
    __slots__ = ("radius",)

    def get_diameter(self):
        return 2 * self.radius


@dataclass(frozen=True)
class FrozenBox:
    size: int


def test_decode_into_slotted_and_frozen_classes():
    c = decode_from_json_as(SlottedCircle, '{"radius":10}')
    assert isinstance(c, SlottedCircle)
    assert c.get_diameter() == 20

    assert decode_from_json_as(FrozenBox, '{"size":3}') == FrozenBox(3)


def test_decode_into_dict():
    d = decode_from_json_as(dict, '{"a":1}')
    assert type(d) is dict
    assert d == {"a": 1}


def test_decode_keys_the_class_cannot_hold():
    with pytest.raises(JsonShapeError):
        decode_from_json_as(SlottedCircle, '{"radius":10,"color":"red"}')
    with pytest.raises(JsonShapeError):
        decode_from_json_as(int, '{"a":1}')


@pytest.mark.parametrize("value", [float("nan"), float("inf"), [1, float("-inf")]])
def test_encode_rejects_non_finite_floats(value):
    with pytest.raises(ValueError):
        encode_to_json(value)


@pytest.mark.parametrize("text", ['{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'])
def test_decode_rejects_non_finite_constants(text):
    with pytest.raises(JsonParseError):
        decode_from_json_as(Circle, text)

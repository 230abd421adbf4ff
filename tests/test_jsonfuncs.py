import math

import pytest

from rislang.byteslice import ByteSlice
from rislang.jsonfuncs import marshal, unmarshal, valid


def test_unmarshal_structure_with_float_numbers():
    result = unmarshal('{"a": 1, "b": [true, null, "x"]}')
    assert result == {"a": 1.0, "b": [True, None, "x"]}
    assert isinstance(result["a"], float)


def test_unmarshal_accepts_bytes_and_byteslice():
    assert unmarshal(b"[1, 2]") == [1.0, 2.0]
    assert unmarshal(ByteSlice(b'"hi"')) == "hi"


@pytest.mark.parametrize("text", ["{", "NaN", "Infinity", "1e400", "[1,]", ""])
def test_unmarshal_errors(text):
    with pytest.raises(ValueError, match="^value error: json.unmarshal failed with: "):
        unmarshal(text)


def test_unmarshal_type_error():
    with pytest.raises(TypeError):
        unmarshal(42)


def test_marshal_sorts_keys():
    assert marshal({"b": 1, "a": 2}) == '{"a":2,"b":1}'


@pytest.mark.parametrize(
    "value",
    [
        {"name": "x", "items": [1.5, 2.0, None, True], "nested": {"z": [], "y": {}}},
        [0.1, -3.25, 1e22, 1e-9, "üñí", "quote \" back \\ slash"],
        "line\nbreak\ttab",
        -0.5,
    ],
)
def test_marshal_round_trip(value):
    assert unmarshal(marshal(value)) == value
    assert unmarshal(marshal(value, "  ")) == value


def test_marshal_float_formats():
    assert marshal(1.0) == "1"
    assert marshal(1e21) == "1e+21"
    assert marshal(1e-7) == "1e-7"
    assert marshal(1) == "1"


def test_marshal_html_safe_strings():
    assert marshal("<&>") == '"\\u003c\\u0026\\u003e"'
    assert marshal("\x01") == '"\\u0001"'


def test_marshal_bytes_as_base64():
    assert marshal(b"hi") == '"aGk="'
    assert marshal(ByteSlice(b"hi")) == marshal(b"hi")


def test_marshal_indent():
    assert marshal({"a": [1, 2]}, "  ") == '{\n  "a": [\n    1,\n    2\n  ]\n}'
    assert marshal([], "  ") == "[]"
    assert marshal({}, "\t") == "{}"


@pytest.mark.parametrize("value", [math.nan, math.inf, [-math.inf], object(), {1: "a"}])
def test_marshal_unsupported(value):
    with pytest.raises(ValueError, match="^value error: json.marshal failed: json: unsupported"):
        marshal(value)


def test_marshal_cycle():
    items = []
    items.append(items)
    with pytest.raises(ValueError, match="cycle"):
        marshal(items)


def test_marshal_raises_given_error():
    with pytest.raises(KeyError, match="boom"):
        marshal(KeyError("boom"))


def test_valid():
    assert valid('{"a": 1}') is True
    assert valid(b"[1e400]") is True
    assert valid("{") is False
    assert valid("NaN") is False
    assert valid("") is False
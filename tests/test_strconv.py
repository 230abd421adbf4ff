import math

import pytest

from rislang.strconv import NumError, atoi, parse_bool, parse_float, parse_int


def test_atoi_values():
    assert atoi("123") == 123
    assert atoi("-42") == -42
    assert atoi("+7") == 7
    assert atoi("9223372036854775807") == 9223372036854775807
    assert atoi("-9223372036854775808") == -9223372036854775808


def test_atoi_syntax_error_message():
    with pytest.raises(NumError) as info:
        atoi("abc")
    assert str(info.value) == 'strconv.Atoi: parsing "abc": invalid syntax'
    assert info.value.func == "Atoi"
    assert info.value.num == "abc"


@pytest.mark.parametrize("text", ["", "+", "1_000", "12a", " 1", "0x10"])
def test_atoi_invalid(text):
    with pytest.raises(NumError) as info:
        atoi(text)
    assert info.value.err == "invalid syntax"


def test_atoi_out_of_range():
    with pytest.raises(NumError) as info:
        atoi("9223372036854775808")
    assert info.value.err == "value out of range"


def test_atoi_type_error():
    with pytest.raises(TypeError):
        atoi(12)


@pytest.mark.parametrize("text", ["1", "t", "T", "TRUE", "true", "True"])
def test_parse_bool_true(text):
    assert parse_bool(text) is True


@pytest.mark.parametrize("text", ["0", "f", "F", "FALSE", "false", "False"])
def test_parse_bool_false(text):
    assert parse_bool(text) is False


def test_parse_bool_invalid():
    with pytest.raises(NumError) as info:
        parse_bool("yes")
    assert info.value.func == "ParseBool"
    assert info.value.err == "invalid syntax"


@pytest.mark.parametrize("value", [1.5, -0.25, 1e-300, 12345.678, 6.02e23])
def test_parse_float_round_trip(value):
    assert parse_float(repr(value)) == value


def test_parse_float_specials():
    assert parse_float("inf") == math.inf
    assert parse_float("-Infinity") == -math.inf
    assert parse_float("+INF") == math.inf
    assert math.isnan(parse_float("NaN"))


def test_parse_float_hex():
    assert parse_float("0x1p-2") == 0.25
    assert parse_float("0x1.8p1") == float.fromhex("0x1.8p1")


def test_parse_float_range():
    with pytest.raises(NumError) as info:
        parse_float("1e400")
    assert info.value.err == "value out of range"
    assert info.value.func == "ParseFloat"


@pytest.mark.parametrize("text", ["", " 1", "1_0", "abc", "1e", "0x1.8", "+nan"])
def test_parse_float_syntax(text):
    with pytest.raises(NumError) as info:
        parse_float(text)
    assert info.value.err == "invalid syntax"


@pytest.mark.parametrize("value", [0, 1, 255, 4096, 2**62])
@pytest.mark.parametrize("base, spec", [(2, "b"), (8, "o"), (16, "x")])
def test_parse_int_round_trip(value, base, spec):
    assert parse_int(format(value, spec), base, 64) == value
    assert parse_int("-" + format(value, spec), base, 64) == -value


def test_parse_int_base_zero_prefixes():
    assert parse_int("0x_1F", 0, 64) == 0x1F
    assert parse_int("0b101", 0, 64) == 0b101
    assert parse_int("0o17", 0, 64) == 0o17
    assert parse_int("017", 0, 64) == 0o17
    assert parse_int("1_000", 0, 64) == 1000
    assert parse_int("0", 0, 64) == 0


@pytest.mark.parametrize("text", ["1__0", "_10", "10_", "08"])
def test_parse_int_base_zero_syntax(text):
    with pytest.raises(NumError) as info:
        parse_int(text, 0, 64)
    assert info.value.err == "invalid syntax"


def test_parse_int_bit_size():
    assert parse_int("127", 10, 8) == 127
    assert parse_int("-128", 10, 8) == -128
    with pytest.raises(NumError) as info:
        parse_int("128", 10, 8)
    assert info.value.err == "value out of range"
    assert info.value.func == "ParseInt"
    assert info.value.num == "128"


def test_parse_int_invalid_base_and_bit_size():
    with pytest.raises(NumError) as info:
        parse_int("1", 1, 64)
    assert info.value.err == "invalid base 1"
    with pytest.raises(NumError) as info:
        parse_int("1", 10, 65)
    assert info.value.err == "invalid bit size 65"


def test_parse_int_error_quotes_input():
    with pytest.raises(NumError) as info:
        parse_int('"x', 10, 64)
    assert str(info.value) == 'strconv.ParseInt: parsing "\\"x": invalid syntax'
"""Conversions from strings to booleans, integers and floats."""

from __future__ import annotations

import math
import re

SYNTAX = "invalid syntax"
RANGE = "value out of range"

_SHORT_ESCAPES = {
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
    '"': '\\"',
    "\\": "\\\\",
}

_TRUE = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE = {"0", "f", "F", "FALSE", "false", "False"}

_SPECIAL_FLOATS = {
    "inf": math.inf,
    "+inf": math.inf,
    "-inf": -math.inf,
    "infinity": math.inf,
    "+infinity": math.inf,
    "-infinity": -math.inf,
    "nan": math.nan,
}

_DECIMAL_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")
_HEX_RE = re.compile(
    r"([+-]?)0[xX]([0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP]([+-]?[0-9]+)\Z"
)


def _quote(text: str) -> str:
    out = ['"']
    for ch in text:
        if ch in _SHORT_ESCAPES:
            out.append(_SHORT_ESCAPES[ch])
        elif ch.isprintable():
            out.append(ch)
        else:
            code = ord(ch)
            if code < 0x80:
                out.append(f"\\x{code:02x}")
            elif code < 0x10000:
                out.append(f"\\u{code:04x}")
            else:
                out.append(f"\\U{code:08x}")
    out.append('"')
    return "".join(out)


class NumError(ValueError):
    """A failed conversion: ``func`` names the parser, ``num`` the input, ``err`` the cause."""

    def __init__(self, func: str, num: str, err: str) -> None:
        super().__init__(f"strconv.{func}: parsing {_quote(num)}: {err}")
        self.func = func
        self.num = num
        self.err = err


def _as_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"type error: expected a string (got {type(value).__name__})")
    return value


def _as_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"type error: expected an int (got {type(value).__name__})")
    return value


def _underscore_ok(text: str) -> bool:
    """Underscores may only separate digits, or a base prefix from a digit."""
    saw = "^"
    i = 0
    if text[:1] in ("+", "-"):
        text = text[1:]
    hex_digits = False
    if len(text) >= 2 and text[0] == "0" and text[1].lower() in "box":
        i = 2
        saw = "0"
        hex_digits = text[1].lower() == "x"
    for ch in text[i:]:
        if "0" <= ch <= "9" or (hex_digits and "a" <= ch.lower() <= "f" and ch.isascii()):
            saw = "0"
            continue
        if ch == "_":
            if saw != "0":
                return False
            saw = "_"
            continue
        if saw == "_":
            return False
        saw = "!"
    return saw != "_"


def _parse_uint(text: str, base: int, bit_size: int, func: str, num: str) -> int:
    if not text:
        raise NumError(func, num, SYNTAX)
    base_prefixed = base == 0
    original = text
    if base == 0:
        base = 10
        if text[0] == "0":
            marker = text[1:2].lower()
            if len(text) >= 3 and marker == "b":
                base, text = 2, text[2:]
            elif len(text) >= 3 and marker == "o":
                base, text = 8, text[2:]
            elif len(text) >= 3 and marker == "x":
                base, text = 16, text[2:]
            else:
                base, text = 8, text[1:]
    elif not 2 <= base <= 36:
        raise NumError(func, num, f"invalid base {base}")

    if bit_size == 0:
        bit_size = 64
    elif bit_size < 0 or bit_size > 64:
        raise NumError(func, num, f"invalid bit size {bit_size}")

    max_value = (1 << bit_size) - 1
    underscores = False
    value = 0
    for ch in text:
        if ch == "_" and base_prefixed:
            underscores = True
            continue
        if not ch.isascii():
            raise NumError(func, num, SYNTAX)
        if "0" <= ch <= "9":
            digit = ord(ch) - ord("0")
        elif "a" <= ch.lower() <= "z":
            digit = ord(ch.lower()) - ord("a") + 10
        else:
            raise NumError(func, num, SYNTAX)
        if digit >= base:
            raise NumError(func, num, SYNTAX)
        value = value * base + digit
        if value > max_value:
            raise NumError(func, num, RANGE)
    if underscores and not _underscore_ok(original):
        raise NumError(func, num, SYNTAX)
    return value


def _parse_int(text: str, base: int, bit_size: int, func: str) -> int:
    if not text:
        raise NumError(func, text, SYNTAX)
    body = text
    negative = False
    if body[0] in "+-":
        negative = body[0] == "-"
        body = body[1:]
    magnitude = _parse_uint(body, base, bit_size, func, text)
    if bit_size == 0:
        bit_size = 64
    cutoff = 1 << (bit_size - 1)
    if (not negative and magnitude >= cutoff) or (negative and magnitude > cutoff):
        raise NumError(func, text, RANGE)
    return -magnitude if negative else magnitude


def atoi(s: str) -> int:
    """Parse a base-10 signed 64-bit integer."""
    return _parse_int(_as_str(s), 10, 64, "Atoi")


def parse_bool(s: str) -> bool:
    """Parse 1, t, T, TRUE, true, True or 0, f, F, FALSE, false, False."""
    text = _as_str(s)
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise NumError("ParseBool", text, SYNTAX)


def parse_float(s: str) -> float:
    """Parse a decimal or hexadecimal floating-point number, inf or nan."""
    text = _as_str(s)
    special = _SPECIAL_FLOATS.get(text.lower())
    if special is not None:
        return special
    if _DECIMAL_RE.match(text):
        value = float(text)
        if math.isinf(value):
            raise NumError("ParseFloat", text, RANGE)
        return value
    match = _HEX_RE.match(text)
    if match:
        sign, mantissa, exponent = match.groups()
        try:
            return float.fromhex(f"{sign}0x{mantissa}p{exponent}")
        except OverflowError:
            raise NumError("ParseFloat", text, RANGE) from None
    raise NumError("ParseFloat", text, SYNTAX)


def parse_int(s: str, base: int, bit_size: int) -> int:
    """Parse a signed integer in ``base`` (0 infers it from a prefix) that fits ``bit_size``."""
    return _parse_int(_as_str(s), _as_int(base), _as_int(bit_size), "ParseInt")
"""JSON decoding, encoding and validation with sorted keys and HTML-safe strings."""

from __future__ import annotations

import base64
import json
import math
from decimal import Decimal
from typing import Any

from rislang.byteslice import ByteSlice

_SHORT_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t"}
_HTML_UNSAFE = "<>&\u2028\u2029"


class _MarshalError(ValueError):
    pass


def _text(data: object) -> str:
    if isinstance(data, str):
        return data
    if isinstance(data, (ByteSlice, bytes, bytearray, memoryview)):
        return bytes(data).decode("utf-8", errors="replace")
    raise TypeError(f"type error: expected a string or byte_slice (got {type(data).__name__})")


def _number(text: str) -> float:
    value = float(text)
    if math.isinf(value):
        raise ValueError(f"number {text} is out of range")
    return value


def _reject_constant(name: str) -> Any:
    raise ValueError(f"invalid value {name}")


def unmarshal(data: str | bytes | ByteSlice) -> Any:
    """Decode JSON text; every number becomes a float."""
    text = _text(data)
    try:
        return json.loads(
            text,
            parse_int=_number,
            parse_float=_number,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as exc:
        raise ValueError(f"value error: json.unmarshal failed with: {exc}") from exc


def valid(data: str | bytes | ByteSlice) -> bool:
    """Report whether ``data`` is syntactically valid JSON."""
    text = _text(data)
    try:
        json.loads(text, parse_int=lambda _: 0, parse_constant=_reject_constant)
    except (ValueError, RecursionError):
        return False
    return True


def _quote_string(text: str) -> str:
    out = ['"']
    for ch in text:
        if ch in _SHORT_ESCAPES:
            out.append(_SHORT_ESCAPES[ch])
        elif ch < " " or ch in _HTML_UNSAFE:
            out.append(f"\\u{ord(ch):04x}")
        elif "\ud800" <= ch <= "\udfff":
            out.append("\\ufffd")
        else:
            out.append(ch)
    out.append('"')
    return "".join(out)


def _float_name(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    return "+Inf" if value > 0 else "-Inf"


def _format_float(value: float) -> str:
    if not math.isfinite(value):
        raise _MarshalError(f"json: unsupported value: {_float_name(value)}")
    magnitude = abs(value)
    number = Decimal(repr(value))
    if magnitude != 0 and (magnitude < 1e-6 or magnitude >= 1e21):
        sign, digits, exponent = number.as_tuple()
        exp = exponent + len(digits) - 1
        shown = "".join(str(d) for d in digits).rstrip("0")
        mantissa = shown[0] + ("." + shown[1:] if len(shown) > 1 else "")
        exp_text = f"-{-exp}" if exp < 0 else f"+{exp:02d}"
        return ("-" if sign else "") + mantissa + "e" + exp_text
    text = format(number, "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def _container(open_: str, close: str, parts: list[str], indent: str | None, depth: int) -> str:
    if not parts:
        return open_ + close
    if indent is None:
        return open_ + ",".join(parts) + close
    inner = "\n" + indent * (depth + 1)
    return open_ + inner + ("," + inner).join(parts) + "\n" + indent * depth + close


def _encode(value: Any, indent: str | None, depth: int, active: set[int]) -> str:
    if value is None:
        return "null"
    if value is True:
        return "true"
    if value is False:
        return "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _format_float(value)
    if isinstance(value, str):
        return _quote_string(value)
    if isinstance(value, (ByteSlice, bytes, bytearray, memoryview)):
        return '"' + base64.b64encode(bytes(value)).decode("ascii") + '"'
    if isinstance(value, (dict, list, tuple)):
        if id(value) in active:
            raise _MarshalError(
                f"json: unsupported value: encountered a cycle via {type(value).__name__}"
            )
        active.add(id(value))
        try:
            if isinstance(value, dict):
                keys = []
                for key in value:
                    if not isinstance(key, str):
                        raise _MarshalError(
                            f"json: unsupported type: map with {type(key).__name__} key"
                        )
                    keys.append(key)
                separator = ":" if indent is None else ": "
                parts = [
                    _quote_string(key) + separator + _encode(value[key], indent, depth + 1, active)
                    for key in sorted(keys)
                ]
                return _container("{", "}", parts, indent, depth)
            parts = [_encode(item, indent, depth + 1, active) for item in value]
            return _container("[", "]", parts, indent, depth)
        finally:
            active.discard(id(value))
    raise _MarshalError(f"json: unsupported type: {type(value).__name__}")


def marshal(obj: Any, indent: str | None = None) -> str:
    """Encode ``obj`` as JSON; with ``indent`` each nested level is indented by it.

    An exception passed as ``obj`` is raised instead of encoded.
    """
    if isinstance(obj, Exception):
        raise obj
    if indent is not None and not isinstance(indent, str):
        raise TypeError(f"type error: expected a string (got {type(indent).__name__})")
    try:
        return _encode(obj, indent, 0, set())
    except _MarshalError as exc:
        raise ValueError(f"value error: json.marshal failed: {exc}") from None
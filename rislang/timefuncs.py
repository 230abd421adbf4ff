"""Current time, parsing by reference-time layouts, and sleeping."""

from __future__ import annotations

import calendar
import time as _time
from datetime import datetime, timedelta, timezone

ANSIC = "Mon Jan _2 15:04:05 2006"
UNIX_DATE = "Mon Jan _2 15:04:05 MST 2006"
RUBY_DATE = "Mon Jan 02 15:04:05 -0700 2006"
RFC822 = "02 Jan 06 15:04 MST"
RFC822Z = "02 Jan 06 15:04 -0700"
RFC850 = "Monday, 02-Jan-06 15:04:05 MST"
RFC1123 = "Mon, 02 Jan 2006 15:04:05 MST"
RFC1123Z = "Mon, 02 Jan 2006 15:04:05 -0700"
RFC3339 = "2006-01-02T15:04:05Z07:00"
RFC3339_NANO = "2006-01-02T15:04:05.999999999Z07:00"
KITCHEN = "3:04PM"
STAMP = "Jan _2 15:04:05"
STAMP_MILLI = "Jan _2 15:04:05.000"
STAMP_MICRO = "Jan _2 15:04:05.000000"
STAMP_NANO = "Jan _2 15:04:05.000000000"

_LONG_DAYS = ("Sunday", "Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday")
_SHORT_DAYS = tuple(day[:3] for day in _LONG_DAYS)
_LONG_MONTHS = tuple(calendar.month_name[1:])
_SHORT_MONTHS = tuple(calendar.month_abbr[1:])

_NUMERIC_ZONES = ("-07:00:00", "-070000", "-07:00", "-0700", "-07")
_ISO_ZONES = tuple("Z" + zone[1:] for zone in _NUMERIC_ZONES)

# Without a year in the layout the year defaults to 1, the earliest a datetime holds.
_DEFAULT_YEAR = 1


def _quote(text: str) -> str:
    return '"' + text.replace("\\", "\\\\").replace('"', '\\"') + '"'


class TimeParseError(ValueError):
    """A value did not match its layout, or a field was out of range."""

    def __init__(
        self,
        layout: str,
        value: str,
        layout_elem: str = "",
        value_elem: str = "",
        message: str = "",
    ) -> None:
        if message:
            text = f"parsing time {_quote(value)}{message}"
        else:
            text = (
                f"parsing time {_quote(value)} as {_quote(layout)}: "
                f"cannot parse {_quote(value_elem)} as {_quote(layout_elem)}"
            )
        super().__init__(text)
        self.layout = layout
        self.value = value
        self.layout_elem = layout_elem
        self.value_elem = value_elem


class _Bad(Exception):
    pass


class _OutOfRange(Exception):
    pass


def _is_digit(text: str, i: int) -> bool:
    return i < len(text) and "0" <= text[i] <= "9"


def _next_chunk(layout: str) -> tuple[str, str | None, str]:
    """Split ``layout`` into literal prefix, the next layout element, and the rest."""
    n = len(layout)
    for i, c in enumerate(layout):
        rest = layout[i:]
        tok = None
        if c == "J":
            tok = next((t for t in ("January", "Jan") if rest.startswith(t)), None)
        elif c == "M":
            tok = next((t for t in ("Monday", "Mon", "MST") if rest.startswith(t)), None)
        elif c == "0":
            if len(rest) >= 2 and "1" <= rest[1] <= "6":
                tok = rest[:2]
            elif rest.startswith("002"):
                tok = "002"
        elif c == "1":
            tok = "15" if rest.startswith("15") else "1"
        elif c == "2":
            tok = "2006" if rest.startswith("2006") else "2"
        elif c == "_":
            if rest.startswith("_2"):
                if rest.startswith("_2006"):
                    return layout[: i + 1], "2006", layout[i + 5:]
                tok = "_2"
            elif rest.startswith("__2"):
                tok = "__2"
        elif c in "345":
            tok = c
        elif c == "P" and rest.startswith("PM"):
            tok = "PM"
        elif c == "p" and rest.startswith("pm"):
            tok = "pm"
        elif c == "-":
            tok = next((t for t in _NUMERIC_ZONES if rest.startswith(t)), None)
        elif c == "Z":
            tok = next((t for t in _ISO_ZONES if rest.startswith(t)), None)
        elif c in ".," and i + 1 < n and layout[i + 1] in "09":
            ch = layout[i + 1]
            j = i + 1
            while j < n and layout[j] == ch:
                j += 1
            if not _is_digit(layout, j):
                tok = layout[i:j]
        if tok is not None:
            return layout[:i], tok, layout[i + len(tok):]
    return layout, None, ""


def _skip(value: str, prefix: str) -> tuple[str, bool]:
    while prefix:
        if prefix[0] == " ":
            if value and value[0] != " ":
                return value, False
            prefix = prefix.lstrip(" ")
            value = value.lstrip(" ")
            continue
        if not value or value[0] != prefix[0]:
            return value, False
        prefix, value = prefix[1:], value[1:]
    return value, True


def _getnum(value: str, fixed: bool) -> tuple[int, str]:
    if not _is_digit(value, 0):
        raise _Bad
    if not _is_digit(value, 1):
        if fixed:
            raise _Bad
        return int(value[0]), value[1:]
    return int(value[:2]), value[2:]


def _getnum3(value: str, fixed: bool) -> tuple[int, str]:
    count = 0
    while count < 3 and _is_digit(value, count):
        count += 1
    if count == 0 or (fixed and count != 3):
        raise _Bad
    return int(value[:count]), value[count:]


def _lookup(names: tuple[str, ...], value: str) -> tuple[int, str]:
    for index, name in enumerate(names):
        if value[: len(name)].lower() == name.lower() and len(value) >= len(name):
            return index, value[len(name):]
    raise _Bad


def _digits(text: str) -> int:
    if not text or not all("0" <= c <= "9" for c in text):
        raise _Bad
    return int(text)


def _micro(value: str, nbytes: int) -> int:
    if value[0] not in ".,":
        raise _Bad
    nbytes = min(nbytes, 10)
    digits = value[1:nbytes]
    _digits(digits)
    return int((digits + "000000")[:6])


def _parse_offset(std: str, value: str) -> tuple[timezone, str]:
    body = std[1:]
    length = len(body) + 1
    if len(value) < length:
        raise _Bad
    chunk = value[:length]
    sign, rest = chunk[0], chunk[1:]
    parts = rest.split(":") if ":" in body else [rest[k:k + 2] for k in range(0, len(rest), 2)]
    if ":" in body and [len(p) for p in parts] != [len(p) for p in body.split(":")]:
        raise _Bad
    numbers = [_digits(p) for p in parts] + [0, 0]
    hours, minutes, seconds = numbers[:3]
    if sign not in "+-":
        raise _Bad
    if hours > 24 or minutes > 60 or seconds > 60:
        raise _OutOfRange("time zone offset")
    total = hours * 3600 + minutes * 60 + seconds
    if total >= 86400:
        raise _OutOfRange("time zone offset hour")
    if sign == "-":
        total = -total
    return timezone(timedelta(seconds=total)), value[length:]


def _zone_name_length(value: str) -> int:
    if len(value) < 3:
        return 0
    if value[:4] in ("ChST", "MeST"):
        return 4
    if value.startswith("GMT"):
        rest = value[3:]
        if not rest or rest[0] not in "+-":
            return 3
        count = 0
        while _is_digit(rest, 1 + count):
            count += 1
        if count == 0 or int(rest[1:1 + count]) > 23:
            return 3
        return 4 + count
    upper = 0
    while upper < min(len(value), 6) and "A" <= value[upper] <= "Z":
        upper += 1
    if upper == 3:
        return 3
    if upper == 4 and (value[3] == "T" or value[:4] == "WITA"):
        return 4
    if upper == 5 and value[4] == "T":
        return 5
    return 0


def _parse_zone_name(value: str) -> tuple[timezone, str]:
    if value.startswith("UTC"):
        return timezone.utc, value[3:]
    length = _zone_name_length(value)
    if length == 0:
        raise _Bad
    name = value[:length]
    if name == "GMT":
        return timezone.utc, value[3:]
    offset = int(name[3:]) if name.startswith("GMT") else 0
    return timezone(timedelta(hours=offset), name), value[length:]


def parse(layout: str, value: str) -> datetime:
    """Parse ``value`` using a layout written with the reference time 2006-01-02 15:04:05.

    Values without a zone are taken as UTC.
    """
    for arg in (layout, value):
        if not isinstance(arg, str):
            raise TypeError(f"type error: expected a string (got {type(arg).__name__})")
    full_layout, full_value = layout, value
    year, month, day, yday = _DEFAULT_YEAR, -1, -1, -1
    hour = minute = second = micro = 0
    pm = am = False
    tz: timezone = timezone.utc

    while True:
        prefix, std, suffix = _next_chunk(layout)
        value, ok = _skip(value, prefix)
        if not ok:
            raise TimeParseError(full_layout, full_value, prefix, value)
        if std is None:
            if value:
                raise TimeParseError(
                    full_layout, full_value, message=f": extra text: {_quote(value)}"
                )
            break
        layout = suffix
        hold = value
        try:
            if std == "06":
                n = _digits(value[:2]) if len(value) >= 2 else None
                if n is None:
                    raise _Bad
                year = n + (1900 if n >= 69 else 2000)
                value = value[2:]
            elif std == "2006":
                if len(value) < 4:
                    raise _Bad
                year = _digits(value[:4])
                value = value[4:]
            elif std in ("January", "Jan"):
                index, value = _lookup(_LONG_MONTHS if std == "January" else _SHORT_MONTHS, value)
                month = index + 1
            elif std in ("01", "1"):
                month, value = _getnum(value, std == "01")
                if not 1 <= month <= 12:
                    raise _OutOfRange("month")
            elif std in ("Monday", "Mon"):
                _, value = _lookup(_LONG_DAYS if std == "Monday" else _SHORT_DAYS, value)
            elif std in ("02", "_2", "2"):
                if std == "_2" and value.startswith(" "):
                    value = value[1:]
                day, value = _getnum(value, std == "02")
            elif std in ("002", "__2"):
                if std == "__2" and len(value) > 1 and value[0] == " ":
                    value = value[1:]
                    if len(value) > 1 and value[0] == " ":
                        value = value[1:]
                yday, value = _getnum3(value, std == "002")
                if not 1 <= yday <= 366:
                    raise _OutOfRange("day-of-year")
            elif std == "15":
                hour, value = _getnum(value, False)
                if hour >= 24:
                    raise _OutOfRange("hour")
            elif std in ("03", "3"):
                hour, value = _getnum(value, std == "03")
                if hour > 12:
                    raise _OutOfRange("hour")
            elif std in ("04", "4"):
                minute, value = _getnum(value, std == "04")
                if minute >= 60:
                    raise _OutOfRange("minute")
            elif std in ("05", "5"):
                second, value = _getnum(value, std == "05")
                if second >= 60:
                    raise _OutOfRange("second")
                if len(value) >= 2 and value[0] in ".," and _is_digit(value, 1):
                    _, following, _ = _next_chunk(layout)
                    if following is None or following[0] not in ".,":
                        end = 2
                        while _is_digit(value, end):
                            end += 1
                        micro = _micro(value, end)
                        value = value[end:]
            elif std in ("PM", "pm"):
                if len(value) < 2:
                    raise _Bad
                marker = value[:2]
                if marker == std:
                    pm = True
                elif marker == ("AM" if std == "PM" else "am"):
                    am = True
                else:
                    raise _Bad
                value = value[2:]
            elif std in _NUMERIC_ZONES or std in _ISO_ZONES:
                if std[0] == "Z" and value.startswith("Z"):
                    tz, value = timezone.utc, value[1:]
                else:
                    tz, value = _parse_offset(std, value)
            elif std == "MST":
                tz, value = _parse_zone_name(value)
            elif std[1] == "0":
                if len(value) < len(std):
                    raise _Bad
                micro = _micro(value, len(std))
                value = value[len(std):]
            elif len(value) >= 2 and value[0] in ".," and _is_digit(value, 1):
                end = 1
                while _is_digit(value, end):
                    end += 1
                micro = _micro(value, end)
                value = value[end:]
        except _Bad:
            raise TimeParseError(full_layout, full_value, std, hold) from None
        except _OutOfRange as exc:
            raise TimeParseError(
                full_layout, full_value, std, value, f": {exc} out of range"
            ) from None

    if pm and hour < 12:
        hour += 12
    elif am and hour == 12:
        hour = 0

    def fail(message: str) -> TimeParseError:
        return TimeParseError(full_layout, full_value, message=message)

    if not 1 <= year <= 9999:
        raise fail(": year out of range")
    if yday >= 0:
        if yday > (366 if calendar.isleap(year) else 365):
            raise fail(": day-of-year out of range")
        derived = datetime(year, 1, 1) + timedelta(days=yday - 1)
        if month >= 0 and month != derived.month:
            raise fail(": day-of-year does not match month")
        if day >= 0 and day != derived.day:
            raise fail(": day-of-year does not match day")
        month, day = derived.month, derived.day
    else:
        month = 1 if month < 0 else month
        day = 1 if day < 0 else day
    if day < 1 or day > calendar.monthrange(year, month)[1]:
        raise fail(": day out of range")
    return datetime(year, month, day, hour, minute, second, micro, tzinfo=tz)


def now() -> datetime:
    """The current local time, with its zone attached."""
    return datetime.now().astimezone()


def sleep(seconds: float) -> None:
    """Pause for ``seconds``, truncated to whole milliseconds."""
    if isinstance(seconds, bool) or not isinstance(seconds, (int, float)):
        raise TypeError(f"type error: expected a number (got {type(seconds).__name__})")
    millis = int(seconds * 1000)
    if millis > 0:
        _time.sleep(millis / 1000)
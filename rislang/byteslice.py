"""A mutable byte sequence with the byte_slice operations of the language."""

from __future__ import annotations

from typing import Iterator, Union

BytesLike = Union["ByteSlice", bytes, bytearray, memoryview, str]

_REPLACEMENT = "\ufffd"
_TYPE_NAME = "byte_slice"


def _type_name(value: object) -> str:
    return type(value).__name__


def _as_bytes(value: object) -> bytes:
    if isinstance(value, ByteSlice):
        return bytes(value._data)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    raise TypeError(f"type error: expected a byte_slice or string (got {_type_name(value)})")


def _as_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"type error: expected a string (got {_type_name(value)})")
    return value


def _as_int(value: object) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"type error: expected an int (got {_type_name(value)})")
    return value


def _runes(data: bytes) -> Iterator[tuple[int, str]]:
    """Yield (byte offset, character) for each UTF-8 rune in ``data``.

    Invalid bytes decode to U+FFFD with a width of one byte.
    """
    i = 0
    size = len(data)
    while i < size:
        for width in range(1, 5):
            if i + width > size:
                break
            try:
                char = data[i:i + width].decode("utf-8")
            except UnicodeDecodeError:
                continue
            yield i, char
            i += width
            break
        else:
            yield i, _REPLACEMENT
            i += 1


def _single_ascii(char: object, fn: str) -> int:
    text = _as_str(char)
    encoded = text.encode("utf-8")
    if len(encoded) != 1:
        raise ValueError(f"byte_slice.{fn}: argument must be a single character")
    return encoded[0]


class ByteSlice:
    """A mutable sequence of bytes."""

    __slots__ = ("_data",)

    def __init__(self, data: BytesLike = b"") -> None:
        self._data = bytearray(_as_bytes(data))

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[int]:
        return iter(self._data)

    def __bytes__(self) -> bytes:
        return bytes(self._data)

    def __repr__(self) -> str:
        return f"byte_slice({bytes(self._data)!r})"

    def _resolve_index(self, key: object) -> int:
        if isinstance(key, bool) or not isinstance(key, int):
            raise TypeError(
                f"index error: byte_slice index must be an int (got {_type_name(key)})"
            )
        size = len(self._data)
        index = key + size if key < 0 else key
        if index < 0 or index >= size:
            raise IndexError(f"index error: index out of range: {key}")
        return index

    def __getitem__(self, key: int | slice) -> int | ByteSlice:
        if isinstance(key, slice):
            return ByteSlice(bytes(self._data[key]))
        return self._data[self._resolve_index(key)]

    def __setitem__(self, key: int, value: BytesLike) -> None:
        index = self._resolve_index(key)
        data = _as_bytes(value)
        if len(data) != 1:
            raise ValueError(f"value error: value must be a single byte (got {len(data)})")
        self._data[index] = data[0]

    def __delitem__(self, key: object) -> None:
        """Deletion is refused: a byte_slice keeps its length."""
        message = f"type error: cannot delete from {_TYPE_NAME}"
        raise TypeError(message) from None

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (ByteSlice, bytes, bytearray, memoryview, str)):
            return bytes(self._data) == _as_bytes(other)
        return False

    def __hash__(self) -> int:
        return hash(bytes(self._data))

    def __add__(self, other: object) -> ByteSlice:
        if isinstance(other, (ByteSlice, bytes, bytearray, str)):
            return ByteSlice(bytes(self._data) + _as_bytes(other))
        return NotImplemented

    def __bool__(self) -> bool:
        return len(self._data) > 0

    @property
    def cost(self) -> int:
        """Processing cost of this value: its size in bytes."""
        return len(self._data)

    def compare(self, other: object) -> int:
        """Return -1, 0 or 1 comparing this slice with bytes or a string."""
        if not isinstance(other, (ByteSlice, bytes, bytearray, str)):
            raise TypeError(
                f"type error: cannot compare byte_slice to type {_type_name(other)}"
            )
        mine, theirs = bytes(self._data), _as_bytes(other)
        return (mine > theirs) - (mine < theirs)

    def clone(self) -> ByteSlice:
        return ByteSlice(bytes(self._data))

    def reversed(self) -> ByteSlice:
        return ByteSlice(bytes(self._data[::-1]))

    def integers(self) -> list[int]:
        return list(self._data)

    def contains(self, value: object) -> bool:
        """True if the byte value ``value`` occurs; non-ints give False."""
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        if value < 0 or value > 255:
            return False
        return value in self._data

    def contains_any(self, chars: str) -> bool:
        return self.index_any(chars) >= 0

    def contains_rune(self, char: str) -> bool:
        return _single_ascii(char, "contains_rune") in self._data

    def count(self, sub: BytesLike) -> int:
        """Count non-overlapping occurrences; an empty ``sub`` gives runes + 1."""
        needle = _as_bytes(sub)
        if not needle:
            return sum(1 for _ in _runes(bytes(self._data))) + 1
        return bytes(self._data).count(needle)

    def has_prefix(self, prefix: BytesLike) -> bool:
        return bytes(self._data).startswith(_as_bytes(prefix))

    def has_suffix(self, suffix: BytesLike) -> bool:
        return bytes(self._data).endswith(_as_bytes(suffix))

    def index(self, sub: BytesLike) -> int:
        return bytes(self._data).find(_as_bytes(sub))

    def index_any(self, chars: str) -> int:
        """Byte offset of the first rune that is in ``chars``, or -1."""
        wanted = set(_as_str(chars))
        if not wanted:
            return -1
        for offset, char in _runes(bytes(self._data)):
            if char in wanted:
                return offset
        return -1

    def index_byte(self, value: BytesLike) -> int:
        data = _as_bytes(value)
        if len(data) != 1:
            raise ValueError("byte_slice.index_byte: argument must be a single byte")
        return self._data.find(data)

    def index_rune(self, char: str) -> int:
        return self._data.find(bytes([_single_ascii(char, "index_rune")]))

    def repeat(self, count: int) -> ByteSlice:
        n = _as_int(count)
        if n < 0:
            raise ValueError("value error: negative repeat count")
        return ByteSlice(bytes(self._data) * n)

    def replace(self, old: BytesLike, new: BytesLike, count: int) -> ByteSlice:
        """Replace the first ``count`` occurrences of ``old``; negative means all.

        An empty ``old`` matches at the start and after each UTF-8 rune.
        """
        old_b, new_b, n = _as_bytes(old), _as_bytes(new), _as_int(count)
        data = bytes(self._data)
        if old_b == new_b or n == 0:
            return ByteSlice(data)
        if old_b:
            return ByteSlice(data.replace(old_b, new_b, n if n > 0 else -1))
        boundaries = [offset for offset, _ in _runes(data)] + [len(data)]
        if 0 < n < len(boundaries):
            boundaries = boundaries[:n]
        pieces = []
        last = 0
        for offset in boundaries:
            pieces.append(data[last:offset])
            pieces.append(new_b)
            last = offset
        pieces.append(data[last:])
        return ByteSlice(b"".join(pieces))

    def replace_all(self, old: BytesLike, new: BytesLike) -> ByteSlice:
        return self.replace(old, new, -1)
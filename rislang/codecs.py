"""Base64 encoding and decoding, and message digests."""

from __future__ import annotations

import base64
import hashlib

_STD_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
_URL_ALPHABET = b"ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

_STD_TABLE = {c: i for i, c in enumerate(_STD_ALPHABET)}
_URL_TABLE = {c: i for i, c in enumerate(_URL_ALPHABET)}

_PAD = ord("=")
_NEWLINES = (ord("\n"), ord("\r"))

_HASHES = {
    "sha256": hashlib.sha256,
    "sha512": hashlib.sha512,
    "sha1": hashlib.sha1,
    "md5": hashlib.md5,
}


class Base64Error(ValueError):
    """Raised for malformed base64 input; ``offset`` is the bad input byte."""

    def __init__(self, offset: int) -> None:
        super().__init__(f"illegal base64 data at input byte {offset}")
        self.offset = offset


def _as_bytes(data: bytes | bytearray | str) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    raise TypeError(f"type error: expected a string or byte_slice (got {type(data).__name__})")


def _encode(data: bytes | bytearray | str, padding: bool, urlsafe: bool) -> str:
    raw = _as_bytes(data)
    encoded = base64.urlsafe_b64encode(raw) if urlsafe else base64.b64encode(raw)
    text = encoded.decode("ascii")
    return text if padding else text.rstrip("=")


def _skip_newlines(src: bytes, si: int) -> int:
    while si < len(src) and src[si] in _NEWLINES:
        si += 1
    return si


def _decode(data: str | bytes, padding: bool, table: dict[int, int]) -> bytes:
    src = _as_bytes(data)
    n = len(src)
    out = bytearray()
    si = 0
    while True:
        values: list[int] = []
        dlen = 4
        while len(values) < 4:
            j = len(values)
            if si == n:
                if j == 0:
                    return bytes(out)
                if j == 1 or padding:
                    raise Base64Error(si - j)
                dlen = j
                break
            c = src[si]
            si += 1
            if c in table:
                values.append(table[c])
                continue
            if c in _NEWLINES:
                continue
            if not padding or c != _PAD:
                raise Base64Error(si - 1)
            # Padding reached: it may only follow two or three characters.
            if j in (0, 1):
                raise Base64Error(si - 1)
            if j == 2:
                si = _skip_newlines(src, si)
                if si == n:
                    raise Base64Error(n)
                if src[si] != _PAD:
                    raise Base64Error(si - 1)
                si += 1
            si = _skip_newlines(src, si)
            if si < n:
                raise Base64Error(si)
            dlen = j
            break
        quantum = 0
        for value in values + [0] * (4 - len(values)):
            quantum = (quantum << 6) | value
        out += quantum.to_bytes(3, "big")[: dlen - 1]


def encode(data: bytes | bytearray | str, padding: bool = True) -> str:
    """Encode ``data`` with the standard base64 alphabet."""
    return _encode(data, padding, urlsafe=False)


def url_encode(data: bytes | bytearray | str, padding: bool = True) -> str:
    """Encode ``data`` with the URL-safe base64 alphabet."""
    return _encode(data, padding, urlsafe=True)


def decode(data: str | bytes, padding: bool = True) -> bytes:
    """Decode standard base64 text; raise Base64Error on malformed input."""
    return _decode(data, padding, _STD_TABLE)


def url_decode(data: str | bytes, padding: bool = True) -> bytes:
    """Decode URL-safe base64 text; raise Base64Error on malformed input."""
    return _decode(data, padding, _URL_TABLE)


def hash_bytes(data: bytes | bytearray | str, algorithm: str = "sha256") -> bytes:
    """Return the digest of ``data`` using sha256, sha512, sha1 or md5."""
    factory = _HASHES.get(algorithm)
    if factory is None:
        raise ValueError(
            "type error: hash() algorithm must be one of sha256, sha512, sha1, md5"
        )
    return factory(_as_bytes(data)).digest()
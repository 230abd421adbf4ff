"""Resource limits for running programs: I/O timeouts, buffer sizes and cost."""

from __future__ import annotations

import contextvars
from abc import ABC, abstractmethod
from contextlib import contextmanager
from typing import BinaryIO, Iterator

NO_LIMIT = -1

_CHUNK = 64 * 1024


class LimitsError(Exception):
    """Raised when a configured limit is exceeded."""


LIMITS_NOT_FOUND = "limit error: limits not found in context"


class Limits(ABC):
    """Interface for tracking and enforcing resource limits."""

    @property
    @abstractmethod
    def io_timeout(self) -> float:
        """Maximum number of seconds to wait for I/O operations."""

    @property
    @abstractmethod
    def max_buffer_size(self) -> int:
        """Maximum allowed buffer size in bytes, or NO_LIMIT."""

    @abstractmethod
    def track_http_request(self) -> None:
        """Record an HTTP request; raise LimitsError if it is not allowed."""

    @abstractmethod
    def track_http_response(self, content_length: int | None) -> None:
        """Check an HTTP response size; raise LimitsError if it is too large."""

    @abstractmethod
    def track_cost(self, cost: int) -> None:
        """Add processing cost; raise LimitsError if the limit is exceeded."""

    @abstractmethod
    def read_all(self, reader: BinaryIO) -> bytes:
        """Read ``reader`` to the end, counting the bytes read as cost."""


def _read_up_to(reader: BinaryIO, size: int) -> bytes:
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = reader.read(min(remaining, _CHUNK))
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    return b"".join(chunks)


def read_all(reader: BinaryIO, limit: int) -> bytes:
    """Read ``reader`` until EOF, raising LimitsError if more than ``limit`` bytes.

    A negative limit reads everything.
    """
    if limit <= NO_LIMIT:
        return reader.read()
    # One extra byte tells us whether the supplied limit was exceeded.
    limit += 1
    body = _read_up_to(reader, limit)
    if len(body) >= limit:
        raise LimitsError(f"limit error: data size exceeded limit of {limit} bytes")
    return body


class StandardLimits(Limits):
    """Counter-based limits; NO_LIMIT disables a check."""

    def __init__(
        self,
        io_timeout: float = 0.0,
        max_buffer_size: int = NO_LIMIT,
        max_http_request_count: int = NO_LIMIT,
        max_cost: int = NO_LIMIT,
    ) -> None:
        self._io_timeout = io_timeout
        self._max_buffer_size = max_buffer_size
        self._max_http_request_count = max_http_request_count
        self._max_cost = max_cost
        self._http_request_count = 0
        self._cost = 0

    @property
    def io_timeout(self) -> float:
        return self._io_timeout

    @property
    def max_buffer_size(self) -> int:
        return self._max_buffer_size

    @property
    def max_http_request_count(self) -> int:
        return self._max_http_request_count

    @property
    def max_cost(self) -> int:
        return self._max_cost

    @property
    def http_request_count(self) -> int:
        """Number of HTTP requests tracked so far."""
        return self._http_request_count

    @property
    def cost(self) -> int:
        """Processing cost accumulated so far."""
        return self._cost

    def track_http_request(self) -> None:
        self._http_request_count += 1
        if (
            self._max_http_request_count > NO_LIMIT
            and self._http_request_count > self._max_http_request_count
        ):
            raise LimitsError(
                "limit error: reached maximum number of http requests "
                f"({self._max_http_request_count})"
            )

    def track_http_response(self, content_length: int | None) -> None:
        if content_length is None:
            return
        if (
            self._max_buffer_size > NO_LIMIT
            and content_length >= 0
            and content_length > self._max_buffer_size
        ):
            raise LimitsError(
                "limit error: http response content length exceeds maximum allowed "
                f"buffer size of {self._max_buffer_size} bytes (got {content_length} bytes)"
            )

    def track_cost(self, cost: int) -> None:
        self._cost += cost
        if self._max_cost > NO_LIMIT and self._cost > self._max_cost:
            raise LimitsError(
                f"limit error: reached maximum processing cost ({self._max_cost})"
            )

    def read_all(self, reader: BinaryIO) -> bytes:
        if self._max_cost <= NO_LIMIT:
            return reader.read()
        remaining = self._max_cost - self._cost
        if remaining <= 0:
            raise LimitsError(
                f"limit error: reached maximum processing cost ({self._max_cost})"
            )
        data = read_all(reader, remaining)
        self._cost += len(data)
        return data


_active: contextvars.ContextVar[Limits | None] = contextvars.ContextVar(
    "rislang_limits", default=None
)


@contextmanager
def use_limits(limits: Limits) -> Iterator[Limits]:
    """Make ``limits`` the active limits for the duration of the block."""
    reset = _active.set(limits)
    try:
        yield limits
    finally:
        _active.reset(reset)


def get_limits() -> Limits | None:
    """Return the active limits, or None if none are in effect."""
    return _active.get()


def track_cost(cost: int) -> None:
    """Add ``cost`` to the active limits; raise LimitsError if there are none."""
    limits = get_limits()
    if limits is None:
        raise LimitsError(LIMITS_NOT_FOUND)
    limits.track_cost(cost)
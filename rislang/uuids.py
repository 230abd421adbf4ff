"""Random (version 4) and name-based SHA-1 (version 5) UUIDs."""

from __future__ import annotations

import uuid


def _as_str(value: object) -> str:
    if not isinstance(value, str):
        raise TypeError(f"type error: expected a string (got {type(value).__name__})")
    return value


def v4() -> str:
    """A new random UUID in canonical text form."""
    return str(uuid.uuid4())


def v5(namespace: str, name: str) -> str:
    """The version 5 UUID of ``name`` within the ``namespace`` UUID."""
    namespace_text = _as_str(namespace)
    name_text = _as_str(name)
    try:
        namespace_id = uuid.UUID(namespace_text)
    except ValueError as exc:
        raise ValueError(f"uuid: incorrect UUID format {namespace_text}") from exc
    return str(uuid.uuid5(namespace_id, name_text))
"""Errors for calling builtin functions with the wrong number of arguments."""

from __future__ import annotations


class ArgumentsError(TypeError):
    """A function was called with an unsupported number of arguments."""


def args_error(fn: str, takes: int, given: int) -> ArgumentsError:
    """Build the error for a function that takes an exact number of arguments."""
    return ArgumentsError(
        f"type error: {fn}() takes exactly {takes} arguments ({given} given)"
    )


def args_range_error(fn: str, takes_min: int, takes_max: int, given: int) -> ArgumentsError:
    """Build the error for a function that takes a range of arguments."""
    if abs(takes_max - takes_min) <= 0.0001:
        return ArgumentsError(
            f"type error: {fn}() takes {takes_min} or {takes_max} arguments ({given} given)"
        )
    return ArgumentsError(
        f"type error: {fn}() takes between {takes_min} and {takes_max} arguments "
        f"({given} given)"
    )
"""Lexer, resource limits and standard-library helpers for a small scripting language."""

__version__ = "0.1.0"
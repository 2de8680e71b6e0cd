"""Splitting of command strings into argument words."""

from __future__ import annotations

_SPACE_CHARS = frozenset(" \t\n\v\f\r")


def split_words(s: str, sep: str) -> list[str]:
    """Split ``s`` on ``sep``, dropping empty pieces."""
    if len(sep) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in s.split(sep) if word]


def is_full_space(s: str | None) -> bool:
    """Return True if ``s`` holds only whitespace characters (or is empty)."""
    if s is None:
        return False
    return all(ch in _SPACE_CHARS for ch in s)


def split_command(arg: str) -> list[str]:
    """Split a command argument into words on single spaces.

    A string made only of whitespace is kept as one word so that it reaches
    command lookup unchanged; an empty string yields no words.
    """
    if is_full_space(arg):
        return split_words(arg, "a")
    return split_words(arg, " ")
"""Reading and printing of rectangular character maps."""

from __future__ import annotations

import os
from collections.abc import Sequence

from pipekit.fmt import printf
from pipekit.lines import iter_lines


class MapError(Exception):
    """Raised when a map file cannot be read or is not rectangular."""


def _strip_newline(line: str) -> str:
    return line[:-1] if line.endswith("\n") else line


def read_map(path: str | os.PathLike[str]) -> list[str]:
    """Read a map file into a list of rows, newlines removed.

    Every row must have the same length; otherwise :class:`MapError` is
    raised. An empty or unreadable file also raises :class:`MapError`.
    """
    try:
        with open(path, encoding="utf-8") as handle:
            rows = [_strip_newline(line) for line in iter_lines(handle)]
    except OSError as exc:
        raise MapError("Error opening file.") from exc
    if not rows:
        raise MapError("Error reading file or empty file.")
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise MapError("The map is not a rect.")
    return rows


def print_map(grid: Sequence[str] | None) -> None:
    """Print each row of ``grid`` on its own line to standard output."""
    if grid is None:
        return
    for row in grid:
        printf("%s\n", row)
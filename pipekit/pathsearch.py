"""Lookup of command names along a search path."""

from __future__ import annotations

import os
from collections.abc import Mapping

from pipekit.words import split_words


def _exists(path: str) -> bool:
    return os.access(path, os.F_OK)


def find_command_path(cmd: str | None, env: Mapping[str, str]) -> str | None:
    """Return the path at which ``cmd`` can be found, or None.

    A name containing ``/`` is returned as is if it exists. Otherwise each
    directory in ``env["PATH"]`` is tried in order and the first existing
    ``dir/cmd`` wins. Without a PATH entry nothing is found.
    """
    if cmd is None:
        return None
    if "/" in cmd:
        return cmd if _exists(cmd) else None
    search_path = env.get("PATH")
    if search_path is None:
        return None
    for directory in split_words(search_path, ":"):
        candidate = f"{directory}/{cmd}"
        if _exists(candidate):
            return candidate
    return None
"""Minimal printf-style formatting with a fixed set of conversions.

Supported conversions: ``%s %c %p %d %i %u %x %X %%``. An unknown
conversion character is swallowed without output and consumes no argument.
A lone ``%`` at the very end of the format produces nothing.
"""

from __future__ import annotations

import sys
from collections.abc import Callable, Iterator
from typing import Any, TextIO

_UINT_MASK = 0xFFFFFFFF
_ULONG_MASK = 0xFFFFFFFFFFFFFFFF


def _to_int32(value: int) -> int:
    value = int(value) & _UINT_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def _conv_s(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _conv_c(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c expects a single character")
        return value
    return chr(int(value) & 0xFF)


def _conv_p(value: Any) -> str:
    address = 0 if value is None else int(value) & _ULONG_MASK
    if address == 0:
        return "(nil)"
    return f"0x{address:x}"


def _conv_d(value: Any) -> str:
    return str(_to_int32(value))


def _conv_u(value: Any) -> str:
    return str(int(value) & _UINT_MASK)


def _conv_x(value: Any) -> str:
    return f"{int(value) & _UINT_MASK:x}"


def _conv_upper_x(value: Any) -> str:
    return f"{int(value) & _UINT_MASK:X}"


_CONVERSIONS: dict[str, Callable[[Any], str]] = {
    "s": _conv_s,
    "c": _conv_c,
    "p": _conv_p,
    "d": _conv_d,
    "i": _conv_d,
    "u": _conv_u,
    "x": _conv_x,
    "X": _conv_upper_x,
}


def _next_arg(args: Iterator[Any]) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise ValueError("not enough arguments for format string") from None


def format_message(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        if spec == "%":
            pieces.append("%")
        elif spec in _CONVERSIONS:
            pieces.append(_CONVERSIONS[spec](_next_arg(remaining)))
    return "".join(pieces)


def _write(stream: TextIO, fmt: str, args: tuple[Any, ...]) -> int:
    text = format_message(fmt, *args)
    stream.write(text)
    stream.flush()
    return len(text)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    return _write(sys.stdout, fmt, args)


def eprintf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard error; return its length."""
    return _write(sys.stderr, fmt, args)
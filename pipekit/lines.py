"""Line-by-line reading of text or binary streams."""

from __future__ import annotations

from collections.abc import Iterator
from typing import IO, AnyStr


def iter_lines(stream: IO[AnyStr]) -> Iterator[AnyStr]:
    """Yield successive lines from ``stream``.

    Each line keeps its terminating newline. The final line is yielded
    without one if the stream does not end in a newline. Iteration stops
    at end of stream; an empty stream yields nothing.
    """
    while True:
        line = stream.readline()
        if not line:
            return
        yield line
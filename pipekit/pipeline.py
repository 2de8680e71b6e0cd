"""Run a chain of commands between an input file and an output file.

The command line has the form ``infile cmd1 cmd2 ... cmdN outfile``, or
``here_doc LIMITER cmd1 ... cmdN outfile``. The here-document form reads
standard input up to the limiter line, stores it in a temporary file and
appends to the output file instead of truncating it.
"""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import TextIO

from pipekit.lines import iter_lines
from pipekit.pathsearch import find_command_path
from pipekit.words import split_command

HERE_DOC_KEYWORD = "here_doc"
HERE_DOC_FILE = "tmp"
_FILE_MODE = 0o644


class PipexError(Exception):
    """Raised when the arguments are invalid or the pipeline cannot start."""


@dataclass
class Invocation:
    """A parsed command line: where input comes from, what runs, where it goes."""

    infile: str
    outfile: str
    commands: list[list[str]] = field(default_factory=list)
    append: bool = False
    limiter: str | None = None

    @property
    def is_here_doc(self) -> bool:
        return self.limiter is not None


def parse_args(argv: Sequence[str]) -> Invocation:
    """Parse the arguments that follow the program name."""
    args = list(argv)
    if len(args) < 4:
        raise PipexError("Invalid args")
    if args[0] == HERE_DOC_KEYWORD:
        if len(args) < 5:
            raise PipexError("Invalid args")
        return Invocation(
            infile=HERE_DOC_FILE,
            outfile=args[-1],
            commands=[split_command(arg) for arg in args[2:-1]],
            append=True,
            limiter=args[1],
        )
    return Invocation(
        infile=args[0],
        outfile=args[-1],
        commands=[split_command(arg) for arg in args[1:-1]],
    )


def read_here_doc(limiter: str, source: TextIO, dest: TextIO) -> None:
    """Copy lines from ``source`` to ``dest`` until the limiter line.

    The limiter line itself is not copied. Reaching the end of ``source``
    before the limiter raises :class:`PipexError`.
    """
    terminator = limiter + "\n"
    for line in iter_lines(source):
        if line == terminator:
            return
        dest.write(line)
    raise PipexError("here-document ended before its limiter")


def _open_files(invocation: Invocation) -> tuple[int, int]:
    try:
        in_fd = os.open(invocation.infile, os.O_RDONLY)
    except OSError as exc:
        raise PipexError(f"Input file error: {exc.strerror}") from exc
    mode = os.O_APPEND if invocation.append else os.O_TRUNC
    try:
        out_fd = os.open(
            invocation.outfile, os.O_WRONLY | os.O_CREAT | mode, _FILE_MODE
        )
    except OSError as exc:
        os.close(in_fd)
        raise PipexError(f"Output file error: {exc.strerror}") from exc
    return in_fd, out_fd


def _resolve(cmd: list[str], env: Mapping[str, str]) -> str | None:
    """Return the executable for ``cmd``, or None after reporting why not."""
    if not cmd:
        sys.stderr.write("Permission denied : \n")
        return None
    path = find_command_path(cmd[0], env)
    if path is None:
        sys.stderr.write(f"Command not found: {cmd[0]}\n")
        return None
    if not os.access(path, os.X_OK):
        sys.stderr.write(f"Permission denied: {cmd[0]}\n")
        return None
    return path


def _spawn(
    cmd: list[str], env: Mapping[str, str], stdin: int, stdout: int
) -> subprocess.Popen[bytes] | None:
    path = _resolve(cmd, env)
    if path is None:
        return None
    try:
        return subprocess.Popen(
            cmd,
            executable=path,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
            close_fds=True,
        )
    except OSError as exc:
        sys.stderr.write(f"{path}: {exc.strerror}\n")
        return None


def run_pipeline(invocation: Invocation, env: Mapping[str, str]) -> list[int]:
    """Run every command of ``invocation`` and wait for all of them.

    Returns one exit status per command; a command that could not be
    started counts as status 1.
    """
    in_fd, out_fd = _open_files(invocation)
    count = len(invocation.commands)
    processes: list[subprocess.Popen[bytes] | None] = []
    with ExitStack() as stack:
        stack.callback(os.close, in_fd)
        stack.callback(os.close, out_fd)
        pipes: list[tuple[int, int]] = []
        for _ in range(max(count - 1, 0)):
            read_end, write_end = os.pipe()
            stack.callback(os.close, read_end)
            stack.callback(os.close, write_end)
            pipes.append((read_end, write_end))
        for index, cmd in enumerate(invocation.commands):
            stdin = in_fd if index == 0 else pipes[index - 1][0]
            stdout = out_fd if index == count - 1 else pipes[index][1]
            processes.append(_spawn(cmd, env, stdin, stdout))
    return [1 if proc is None else proc.wait() for proc in processes]


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point; returns the process exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        invocation = parse_args(args)
    except PipexError as exc:
        sys.stderr.write(f"{exc}\n")
        return 1
    if invocation.is_here_doc:
        try:
            with open(HERE_DOC_FILE, "w", encoding="utf-8") as tmp:
                read_here_doc(invocation.limiter or "", sys.stdin, tmp)
        except OSError as exc:
            sys.stderr.write(f"Open tmp failed : {exc.strerror}\n")
            return 1
        except PipexError:
            return 1
    try:
        run_pipeline(invocation, os.environ)
    except PipexError as exc:
        sys.stderr.write(f"{exc}\nInit fail\n")
        return 1
    return 0
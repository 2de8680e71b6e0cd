"""Run chains of commands between files, with here-document input, plus small text helpers."""

__version__ = "0.1.0"
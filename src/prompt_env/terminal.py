"""Terminal helpers for prompting."""

from __future__ import annotations

import termios
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO


def is_interactive(stream: TextIO) -> bool:
    """Return True if *stream* is attached to a terminal."""
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty())


@contextmanager
def hidden_input(stream: TextIO) -> Iterator[None]:
    """Disable terminal echo on *stream* for the duration of the block.

    Line editing stays in canonical mode so a whole line is still read on
    Enter. The previous attributes are restored on exit, interrupts
    included. Streams that are not terminals are left untouched.
    """
    if not is_interactive(stream):
        yield
        return

    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    quiet = termios.tcgetattr(fd)
    quiet[3] &= ~termios.ECHO  # lflags

    # TCSADRAIN keeps any type-ahead already queued for the next read
    termios.tcsetattr(fd, termios.TCSADRAIN, quiet)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)


__all__ = ["hidden_input", "is_interactive"]

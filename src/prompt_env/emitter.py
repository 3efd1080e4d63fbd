"""Buffered env-format output.

Assignments are held until every prompt has been answered so that prompt
text on stderr never interleaves with env lines on stdout, and an
interrupted run prints nothing.
"""

from __future__ import annotations

from typing import TextIO

from .models import ResolvedAssignment


class AssignmentBuffer:
    """Ordered, in-memory holding area for resolved assignments."""

    def __init__(self):
        self._assignments: list[ResolvedAssignment] = []

    def append(self, assignment: ResolvedAssignment) -> None:
        self._assignments.append(assignment)

    def flush(self, stream: TextIO) -> None:
        """Write ``NAME="value"`` lines to *stream* in insertion order.

        The buffer is empty afterwards.
        """
        for assignment in self._assignments:
            stream.write(f"{assignment.to_env_line()}\n")
        stream.flush()
        self._assignments.clear()


__all__ = ["AssignmentBuffer"]

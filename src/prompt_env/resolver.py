"""Value resolution for prompt entries.

A value comes from the environment when the variable is defined there, even
as an empty string. Only unset variables are prompted for.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Optional, TextIO

import click

from .models import PromptSpec, ResolvedAssignment
from .terminal import hidden_input, is_interactive


def strip_line_ending(line: str) -> str:
    """Remove a trailing ``\\n`` or ``\\r\\n``, nothing else."""
    if line.endswith("\n"):
        line = line[:-1]
        if line.endswith("\r"):
            line = line[:-1]
    return line


class ValueResolver:
    """Resolve PromptSpecs from an environment mapping or by prompting.

    Args:
        environ: Variable lookup; a missing key means unset
        input_stream: Where prompted lines are read from
        prompt_stream: Where prompt text is written (kept apart from output)
    """

    def __init__(
        self,
        environ: Mapping[str, str],
        input_stream: TextIO,
        prompt_stream: TextIO,
    ):
        self._environ = environ
        self._input = input_stream
        self._prompt = prompt_stream
        # Values read earlier in this run, for repeated variable names
        self._answered: dict[str, str] = {}

    def lookup(self, name: str) -> Optional[str]:
        """Return the known value for *name*, or None if it is unset."""
        if name in self._answered:
            return self._answered[name]
        return self._environ.get(name)

    def resolve(self, spec: PromptSpec) -> ResolvedAssignment:
        value = self.lookup(spec.variable_name)
        if value is None:
            value = self.prompt(spec)
            self._answered[spec.variable_name] = value
        return ResolvedAssignment(
            variable_name=spec.variable_name, value=value
        )

    def prompt(self, spec: PromptSpec) -> str:
        """Show the prompt and read one line; end of input reads as ""."""
        text = f"{spec.prompt_text}: "

        if not spec.secure:
            click.echo(text, file=self._prompt, nl=False)
            return strip_line_ending(self._input.readline())

        # Echo goes off before the prompt appears so nothing typed is shown
        with hidden_input(self._input):
            click.echo(text, file=self._prompt, nl=False)
            line = self._input.readline()

        # The terminal swallowed the Enter keypress along with the echo
        if is_interactive(self._prompt):
            click.echo("", file=self._prompt)
        return strip_line_ending(line)


__all__ = ["ValueResolver", "strip_line_ending"]

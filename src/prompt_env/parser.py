"""Command-line entry parsing.

Each entry is one argument of the form::

    [PROMPT:]VARNAME [--secure|-s]

Where:
    - PROMPT: Optional text shown to the user (may itself contain colons,
      the variable name is whatever follows the last one)
    - VARNAME: Variable to look up in the environment and emit
    - --secure / -s: Optional modifier for the preceding entry, hides input
"""

from __future__ import annotations

from collections.abc import Sequence

from pydantic import ValidationError

from .models import PromptSpec

SECURE_FLAGS = frozenset({"--secure", "-s"})


class EntryParseError(ValueError):
    """Malformed command-line entry."""

    def __init__(self, message: str, argument: str, position: int):
        super().__init__(message)
        self.argument = argument
        self.position = position


def split_entry(raw: str) -> tuple[str, str]:
    """Split ``PROMPT:VARNAME`` on the last colon.

    Returns:
        (prompt_text, variable_name). Without a colon, or with an empty
        prompt part, the prompt text is the variable name.

    Examples:
        >>> split_entry("API_KEY")
        ('API_KEY', 'API_KEY')
        >>> split_entry("Key (format a:b):API_KEY")
        ('Key (format a:b)', 'API_KEY')
    """
    prompt_text, colon, variable_name = raw.rpartition(":")
    if not colon:
        return raw, raw
    return prompt_text or variable_name, variable_name


def parse_entries(args: Sequence[str]) -> list[PromptSpec]:
    """Parse the raw argument list into prompt specs, left to right.

    Args:
        args: Command-line arguments after the program name

    Returns:
        One PromptSpec per entry, in command-line order

    Raises:
        EntryParseError: A secure flag appears where an entry is expected,
            or an entry's variable name is empty or not a shell identifier
    """
    specs: list[PromptSpec] = []
    position = 0

    while position < len(args):
        raw = args[position]
        if raw in SECURE_FLAGS:
            raise EntryParseError(
                f"'{raw}' must follow a variable entry", raw, position
            )

        prompt_text, variable_name = split_entry(raw)
        entry_position = position
        position += 1

        # Optional modifier belongs to the entry just consumed
        secure = position < len(args) and args[position] in SECURE_FLAGS
        if secure:
            position += 1

        try:
            spec = PromptSpec(
                prompt_text=prompt_text,
                variable_name=variable_name,
                secure=secure,
            )
        except ValidationError as e:
            raise EntryParseError(
                f"Invalid entry '{raw}': {_first_error(e)}",
                raw,
                entry_position,
            ) from e
        specs.append(spec)

    return specs


def _first_error(error: ValidationError) -> str:
    detail = error.errors()[0]
    cause = detail.get("ctx", {}).get("error")
    return str(cause) if cause else detail["msg"]


__all__ = ["EntryParseError", "SECURE_FLAGS", "parse_entries", "split_entry"]

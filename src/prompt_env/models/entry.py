"""Entry models."""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator

IDENTIFIER = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class PromptSpec(BaseModel):
    """One requested variable.

    Built from a command-line entry such as ``"Password":DB_PASSWORD -s``.
    When no prompt text is given the variable name doubles as the prompt.
    """

    model_config = ConfigDict(frozen=True)

    prompt_text: str
    variable_name: str
    secure: bool = False

    @model_validator(mode="before")
    @classmethod
    def _default_prompt_text(cls, data: Any) -> Any:
        if isinstance(data, dict) and not data.get("prompt_text"):
            data = {**data, "prompt_text": data.get("variable_name")}
        return data

    @field_validator("variable_name")
    @classmethod
    def _check_identifier(cls, value: str) -> str:
        if not value:
            raise ValueError("variable name cannot be empty")
        if not IDENTIFIER.fullmatch(value):
            raise ValueError(
                f"'{value}' is not a valid shell variable name"
            )
        return value


class ResolvedAssignment(BaseModel):
    """Variable name paired with its resolved value."""

    model_config = ConfigDict(frozen=True)

    variable_name: str
    value: str

    def to_env_line(self) -> str:
        """Render as ``NAME="value"``; the value is written verbatim."""
        return f'{self.variable_name}="{self.value}"'


__all__ = ["PromptSpec", "ResolvedAssignment"]

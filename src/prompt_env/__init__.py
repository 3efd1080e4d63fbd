"""prompt-env: prompt for variable values and print them in .env format."""

from .models import PromptSpec, ResolvedAssignment
from .parser import EntryParseError, parse_entries

__all__ = [
    "EntryParseError",
    "PromptSpec",
    "ResolvedAssignment",
    "__version__",
    "parse_entries",
]

__version__ = "0.1.0"

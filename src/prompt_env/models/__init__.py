"""Pydantic models for prompt entries and their resolved values."""

from .entry import PromptSpec, ResolvedAssignment

__all__ = ["PromptSpec", "ResolvedAssignment"]

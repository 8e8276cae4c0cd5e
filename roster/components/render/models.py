"""
Render component input/output models.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from roster.domain.entities import Person

# --- Validation Error ---


@dataclass(frozen=True)
class RenderValidationError:
    """Render validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class RenderInput:
    """Input for rendering people as text."""

    people: Iterable[Person]
    format: str = "lines"
    reference_date: date | None = None


# --- Output Models ---


@dataclass(frozen=True)
class RenderOutput:
    """Rendered text, one block per person."""

    blocks: tuple[str, ...]
    errors: tuple[RenderValidationError, ...]
    success: bool

    @property
    def text(self) -> str:
        separator = "\n\n" if any("\n" in b for b in self.blocks) else "\n"
        return separator.join(self.blocks)

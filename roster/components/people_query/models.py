"""
People query component - Data models.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date

from roster.domain.entities import Person, SocialMedia

# --- Validation Errors ---


@dataclass(frozen=True)
class QueryValidationError:
    """Query validation error."""

    code: str
    message: str
    field: str | None = None


# --- Input Models ---


@dataclass(frozen=True)
class QueryInput:
    """Input for querying people."""

    people: Iterable[Person]
    min_age: int
    required_flag: SocialMedia
    reference_date: date | None = None


# --- Output Models ---


@dataclass(frozen=True)
class QueryOutput:
    """Output from a query."""

    people: tuple[Person, ...]
    errors: tuple[QueryValidationError, ...]
    success: bool

    @property
    def total(self) -> int:
        return len(self.people)

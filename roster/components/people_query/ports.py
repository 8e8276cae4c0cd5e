"""
People query component - Port interfaces.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from roster.domain.entities import Person
from roster.ports.clock import ClockPort


class PeopleSourcePort(Protocol):
    """Anything that can hand out a sequence of people."""

    def get_all(self) -> Iterable[Person]:
        """List all people, in roster order."""
        ...


__all__ = ["ClockPort", "PeopleSourcePort"]

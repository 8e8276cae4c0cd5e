"""
Person rendering - field table and text projections.

Functional Core - pure functions, same inputs always produce same outputs.

Fields are declared once in PERSON_FIELDS as (name, getter) pairs and
every formatter iterates that table, so adding a field updates all
output formats at once.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from roster.domain.entities import Person

# --- Field Table ---


@dataclass(frozen=True)
class PersonField:
    """A named, read-only projection of a person."""

    name: str
    getter: Callable[[Person, date | datetime], object]


def _age_or_none(person: Person, now: date | datetime) -> int | None:
    if person.birth_date is None:
        return None
    return person.age_on(now)


PERSON_FIELDS: tuple[PersonField, ...] = (
    PersonField("Title", lambda p, _: p.title),
    PersonField("FirstName", lambda p, _: p.first_name),
    PersonField("LastName", lambda p, _: p.last_name),
    PersonField("FullName", lambda p, _: p.full_name),
    PersonField("Gender", lambda p, _: p.gender),
    PersonField("SocialMedia", lambda p, _: p.social_media),
    PersonField("BirthDate", lambda p, _: p.birth_date),
    PersonField("Age", _age_or_none),
    PersonField("Created", lambda p, _: p.created),
    PersonField("Modified", lambda p, _: p.modified),
)


# --- Value Formatting ---


def display_value(value: object) -> str | int:
    """Text shown for a field value; ints stay ints for JSON output."""
    if value is None:
        return ""
    if isinstance(value, Enum):
        return value.name or ""
    if isinstance(value, date | datetime):
        return value.isoformat()
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return str(value)


def field_values(person: Person, now: date | datetime) -> dict[str, str | int]:
    """Ordered name -> display value mapping."""
    return {f.name: display_value(f.getter(person, now)) for f in PERSON_FIELDS}


# --- Formatters ---


def to_comma_joined(person: Person, now: date | datetime) -> str:
    return ", ".join(str(v) for v in field_values(person, now).values())


def to_json_like(person: Person, now: date | datetime) -> str:
    return json.dumps(field_values(person, now))


def to_lines(person: Person, now: date | datetime) -> str:
    return "\n".join(f"{name}: {value}" for name, value in field_values(person, now).items())


FORMATTERS: dict[str, Callable[[Person, date | datetime], str]] = {
    "csv": to_comma_joined,
    "json": to_json_like,
    "lines": to_lines,
}

"""
People query - age threshold + social media filter.

Functional Core - pure business logic.

Key behaviors:
- filter_older_with_flag is a generator: it pulls one person at a time
  and stops as soon as the consumer stops
- collect_older_with_flag is the eager equivalent
- Absent social media never matches and never raises
- Input order is preserved, nothing is sorted
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from datetime import date, datetime

from roster.domain.entities import Person, SocialMedia

from .models import QueryValidationError

OLD_AGE_THRESHOLD = 35


# --- Validation Functions ---


def validate_query(min_age: object, required_flag: object) -> list[QueryValidationError]:
    """Validate query parameters. Negative or huge ages are allowed."""
    errors: list[QueryValidationError] = []

    if isinstance(min_age, bool) or not isinstance(min_age, int):
        errors.append(
            QueryValidationError(
                code="min_age_invalid",
                message="Minimum age must be a whole number",
                field="min_age",
            )
        )

    if not isinstance(required_flag, SocialMedia):
        errors.append(
            QueryValidationError(
                code="flag_invalid",
                message="Required flag must be a SocialMedia value",
                field="required_flag",
            )
        )

    return errors


# --- Filters ---


def matches(
    person: Person,
    min_age: int,
    required_flag: SocialMedia,
    now: date | datetime,
) -> bool:
    return person.age_on(now) > min_age and person.has_social_media(required_flag)


def filter_older_with_flag(
    people: Iterable[Person],
    min_age: int,
    required_flag: SocialMedia,
    now: date | datetime,
) -> Iterator[Person]:
    """Lazily yield people older than `min_age` who have `required_flag`."""
    for person in people:
        if matches(person, min_age, required_flag, now):
            yield person


def collect_older_with_flag(
    people: Iterable[Person],
    min_age: int,
    required_flag: SocialMedia,
    now: date | datetime,
) -> list[Person]:
    """Eager variant of filter_older_with_flag."""
    result: list[Person] = []
    for person in people:
        if matches(person, min_age, required_flag, now):
            result.append(person)
    return result


def get_old_twitter_people(
    people: Iterable[Person],
    now: date | datetime,
) -> Iterator[Person]:
    """People over 35 who use Twitter."""
    return filter_older_with_flag(people, OLD_AGE_THRESHOLD, SocialMedia.TWITTER, now)

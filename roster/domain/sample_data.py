"""
Sample roster.

Eight hand-written people used by the CLI and the end-to-end tests.
Titles are given raw; "Mister" variants are normalized on assignment.
"""

from __future__ import annotations

from datetime import date

from roster.adapters.clock import SystemClock
from roster.domain.entities import Gender, Person, SocialMedia
from roster.ports.clock import ClockPort


def _person(
    clock: ClockPort,
    gender: Gender,
    title: str,
    first_name: str,
    last_name: str,
    birth_date: date,
    social_media: SocialMedia | None = None,
) -> Person:
    stamp = clock.now()
    person = Person(gender, created=stamp, modified=stamp)
    person.title = title
    person.first_name = first_name
    person.last_name = last_name
    person.birth_date = birth_date
    if social_media is not None:
        person.social_media = social_media
    return person


def build_sample_people(clock: ClockPort | None = None) -> list[Person]:
    """Build the sample roster, stamping created/modified from `clock`."""
    clock = clock or SystemClock()
    return [
        _person(
            clock, Gender.MALE, "Mister", "Tony", "Spencer",
            date(1970, 5, 14), SocialMedia.FACEBOOK_AND_TWITTER,
        ),
        _person(
            clock, Gender.FEMALE, "Ms.", "Jennifer", "Lawrence",
            date(1990, 8, 15), SocialMedia.TWITTER | SocialMedia.INSTAGRAM,
        ),
        _person(
            clock, Gender.MALE, "mister", "Matt", "Damon",
            date(1970, 10, 8), SocialMedia.TWITTER,
        ),
        _person(
            clock, Gender.FEMALE, "Mrs.", "Meryl", "Streep",
            date(1949, 6, 22),
        ),
        _person(
            clock, Gender.MALE, "Mr.", "Chris", "Pine",
            date(1980, 8, 26), SocialMedia.ALL,
        ),
        _person(
            clock, Gender.MALE, "MISTER", "Tom", "Hanks",
            date(1956, 7, 9), SocialMedia.FACEBOOK,
        ),
        _person(
            clock, Gender.FEMALE, "Ms.", "Emma", "Watson",
            date(1990, 4, 15),
            SocialMedia.TWITTER | SocialMedia.FACEBOOK | SocialMedia.INSTAGRAM,
        ),
        _person(
            clock, Gender.MALE, "Sir", "Elton", "John",
            date(1947, 3, 25), SocialMedia.TWITTER | SocialMedia.INSTAGRAM,
        ),
    ]

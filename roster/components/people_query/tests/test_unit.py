"""
People query component unit tests.

Tests for the lazy/eager filters and the shell entry points.
"""

from __future__ import annotations

from collections.abc import Iterator
from datetime import date, datetime

import pytest

from roster.adapters.clock import FrozenClock
from roster.components.people_query import (
    QueryInput,
    collect_older_with_flag,
    filter_older_with_flag,
    get_old_twitter_people,
    run_first,
    run_query,
    validate_query,
)
from roster.domain.entities import Gender, Person, SocialMedia

TODAY = date(2018, 12, 20)


def make_person(
    first_name: str,
    birth_date: date | None,
    social_media: SocialMedia | None = None,
) -> Person:
    return Person(
        Gender.FEMALE,
        first_name=first_name,
        last_name="Test",
        birth_date=birth_date,
        social_media=social_media,
    )


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(datetime(2018, 12, 20, 12, 0))


@pytest.fixture
def people() -> list[Person]:
    return [
        make_person("Old", date(1960, 1, 1), SocialMedia.TWITTER),
        make_person("Young", date(2000, 1, 1), SocialMedia.TWITTER),
        make_person("NoFlags", date(1960, 1, 1)),
        make_person("Facebook", date(1960, 1, 1), SocialMedia.FACEBOOK),
        make_person("Both", date(1970, 6, 1), SocialMedia.FACEBOOK_AND_TWITTER),
    ]


def first_names(people) -> list[str]:
    return [p.first_name for p in people]


# --- Functional Core ---


class TestFilterOlderWithFlag:
    """Test the lazy filter."""

    def test_returns_generator(self, people: list[Person]) -> None:
        result = filter_older_with_flag(people, 35, SocialMedia.TWITTER, TODAY)
        assert isinstance(result, Iterator)

    def test_selects_in_input_order(self, people: list[Person]) -> None:
        result = filter_older_with_flag(people, 35, SocialMedia.TWITTER, TODAY)
        assert first_names(result) == ["Old", "Both"]

    def test_empty_input(self) -> None:
        assert list(filter_older_with_flag([], 35, SocialMedia.TWITTER, TODAY)) == []

    def test_absent_flags_never_match(self, people: list[Person]) -> None:
        result = filter_older_with_flag(people, -1, SocialMedia.ALL, TODAY)
        assert "NoFlags" not in first_names(result)

    def test_age_is_strictly_greater(self) -> None:
        exactly_35 = make_person("Exact", date(1983, 12, 20), SocialMedia.TWITTER)
        assert exactly_35.age_on(TODAY) == 35
        assert list(filter_older_with_flag([exactly_35], 35, SocialMedia.TWITTER, TODAY)) == []

    def test_negative_min_age(self, people: list[Person]) -> None:
        result = filter_older_with_flag(people, -100, SocialMedia.TWITTER, TODAY)
        assert first_names(result) == ["Old", "Young", "Both"]

    def test_huge_min_age(self, people: list[Person]) -> None:
        result = filter_older_with_flag(people, 10**9, SocialMedia.TWITTER, TODAY)
        assert list(result) == []

    def test_combination_flag_requires_all_bits(self, people: list[Person]) -> None:
        result = filter_older_with_flag(people, 35, SocialMedia.FACEBOOK_AND_TWITTER, TODAY)
        assert first_names(result) == ["Both"]

    def test_stops_pulling_input_early(self, people: list[Person]) -> None:
        pulled: list[str] = []

        def tracking() -> Iterator[Person]:
            for person in people:
                pulled.append(person.first_name)
                yield person

        result = filter_older_with_flag(tracking(), 35, SocialMedia.TWITTER, TODAY)
        assert next(result).first_name == "Old"
        assert pulled == ["Old"]

    def test_lazy_until_iterated(self) -> None:
        broken = make_person("Broken", None, SocialMedia.TWITTER)
        # Nothing is evaluated until iteration starts
        result = filter_older_with_flag([broken], 35, SocialMedia.TWITTER, TODAY)
        with pytest.raises(ValueError):
            next(result)

    def test_eager_matches_lazy(self, people: list[Person]) -> None:
        lazy = list(filter_older_with_flag(people, 35, SocialMedia.TWITTER, TODAY))
        eager = collect_older_with_flag(people, 35, SocialMedia.TWITTER, TODAY)
        assert eager == lazy

    def test_old_twitter_people(self, people: list[Person]) -> None:
        assert first_names(get_old_twitter_people(people, TODAY)) == ["Old", "Both"]


class TestValidateQuery:
    """Test query validation."""

    def test_valid(self) -> None:
        assert validate_query(35, SocialMedia.TWITTER) == []

    def test_min_age_not_int(self) -> None:
        errors = validate_query("35", SocialMedia.TWITTER)
        assert len(errors) == 1
        assert errors[0].code == "min_age_invalid"

    def test_min_age_bool(self) -> None:
        errors = validate_query(True, SocialMedia.TWITTER)
        assert errors[0].code == "min_age_invalid"

    def test_flag_not_social_media(self) -> None:
        errors = validate_query(35, 1)
        assert len(errors) == 1
        assert errors[0].code == "flag_invalid"
        assert errors[0].field == "required_flag"


# --- Shell Layer ---


class TestRunQuery:
    """Test run_query entry point."""

    def test_success(self, people: list[Person], clock: FrozenClock) -> None:
        result = run_query(QueryInput(people, 35, SocialMedia.TWITTER), clock)

        assert result.success is True
        assert result.errors == ()
        assert first_names(result.people) == ["Old", "Both"]
        assert result.total == 2

    def test_reference_date_overrides_clock(self, people: list[Person]) -> None:
        # In 1990 nobody in the fixture is over 35
        clock = FrozenClock(datetime(1990, 1, 1))
        result = run_query(
            QueryInput(people, 35, SocialMedia.TWITTER, reference_date=TODAY), clock
        )
        assert first_names(result.people) == ["Old", "Both"]

    def test_uses_clock_without_reference_date(self, people: list[Person]) -> None:
        clock = FrozenClock(datetime(1990, 1, 1))
        result = run_query(QueryInput(people, 35, SocialMedia.TWITTER), clock)
        assert result.success is True
        assert result.people == ()

    def test_invalid_input(self, people: list[Person], clock: FrozenClock) -> None:
        result = run_query(QueryInput(people, "old", SocialMedia.TWITTER), clock)

        assert result.success is False
        assert result.people == ()
        assert result.errors[0].code == "min_age_invalid"

    def test_missing_birth_date(self, clock: FrozenClock) -> None:
        broken = make_person("Broken", None, SocialMedia.TWITTER)
        result = run_query(QueryInput([broken], 35, SocialMedia.TWITTER), clock)

        assert result.success is False
        assert result.errors[0].code == "birth_date_missing"
        assert result.errors[0].field == "birth_date"

    def test_empty_input(self, clock: FrozenClock) -> None:
        result = run_query(QueryInput([], 35, SocialMedia.TWITTER), clock)
        assert result.success is True
        assert result.total == 0


class TestRunFirst:
    """Test run_first entry point."""

    def test_limit(self, people: list[Person], clock: FrozenClock) -> None:
        result = run_first(QueryInput(people, 35, SocialMedia.TWITTER), clock, 1)
        assert first_names(result.people) == ["Old"]

    def test_does_not_evaluate_past_limit(self, clock: FrozenClock) -> None:
        old = make_person("Old", date(1960, 1, 1), SocialMedia.TWITTER)
        # Would raise if evaluated
        broken = make_person("Broken", None, SocialMedia.TWITTER)

        result = run_first(QueryInput([old, broken], 35, SocialMedia.TWITTER), clock, 1)

        assert result.success is True
        assert first_names(result.people) == ["Old"]

    def test_negative_limit(self, people: list[Person], clock: FrozenClock) -> None:
        result = run_first(QueryInput(people, 35, SocialMedia.TWITTER), clock, -1)
        assert result.success is False
        assert result.errors[0].code == "limit_invalid"

"""
People query component - older-than + social media filter.

Shell Layer - resolves "now", materializes results and converts
domain errors into validation errors.
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from itertools import islice

from roster.domain.entities import MissingBirthDateError, Person

from ._impl import filter_older_with_flag, validate_query
from .models import QueryInput, QueryOutput, QueryValidationError
from .ports import ClockPort

logger = logging.getLogger(__name__)


def _resolve_now(input_data: QueryInput, clock: ClockPort) -> date | datetime:
    if input_data.reference_date is not None:
        return input_data.reference_date
    return clock.now()


def _failure(errors: list[QueryValidationError]) -> QueryOutput:
    return QueryOutput(people=(), errors=tuple(errors), success=False)


def _missing_birth_date(e: MissingBirthDateError) -> QueryValidationError:
    return QueryValidationError(
        code="birth_date_missing",
        message=str(e),
        field="birth_date",
    )


# --- Shell Layer Functions ---


def run_query(input_data: QueryInput, clock: ClockPort) -> QueryOutput:
    """Return every matching person, in input order."""
    errors = validate_query(input_data.min_age, input_data.required_flag)
    if errors:
        return _failure(errors)

    now = _resolve_now(input_data, clock)
    logger.debug(
        "Querying people older than %s with %s as of %s",
        input_data.min_age,
        input_data.required_flag,
        now,
    )

    try:
        people = tuple(
            filter_older_with_flag(
                input_data.people, input_data.min_age, input_data.required_flag, now
            )
        )
    except MissingBirthDateError as e:
        logger.warning("Query aborted: %s", e)
        return _failure([_missing_birth_date(e)])

    logger.info("Query matched %d people", len(people))
    return QueryOutput(people=people, errors=(), success=True)


def run_first(input_data: QueryInput, clock: ClockPort, limit: int) -> QueryOutput:
    """
    Return at most `limit` matching people.

    Input past the last needed match is never evaluated.
    """
    errors = validate_query(input_data.min_age, input_data.required_flag)
    if limit < 0:
        errors.append(
            QueryValidationError(
                code="limit_invalid",
                message="Limit must not be negative",
                field="limit",
            )
        )
    if errors:
        return _failure(errors)

    now = _resolve_now(input_data, clock)
    matches = filter_older_with_flag(
        input_data.people, input_data.min_age, input_data.required_flag, now
    )

    try:
        people: tuple[Person, ...] = tuple(islice(matches, limit))
    except MissingBirthDateError as e:
        logger.warning("Query aborted: %s", e)
        return _failure([_missing_birth_date(e)])

    return QueryOutput(people=people, errors=(), success=True)

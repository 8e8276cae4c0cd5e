"""
People query component - find people over an age with a social media flag.
"""

from ._impl import (
    OLD_AGE_THRESHOLD,
    collect_older_with_flag,
    filter_older_with_flag,
    get_old_twitter_people,
    validate_query,
)
from .component import run_first, run_query
from .models import QueryInput, QueryOutput, QueryValidationError
from .ports import PeopleSourcePort

__all__ = [
    # Entry points
    "run_query",
    "run_first",
    # Models
    "QueryInput",
    "QueryOutput",
    "QueryValidationError",
    # Ports
    "PeopleSourcePort",
    # Functional core
    "OLD_AGE_THRESHOLD",
    "filter_older_with_flag",
    "collect_older_with_flag",
    "get_old_twitter_people",
    "validate_query",
]

"""
Render component - text projections of people.
"""

from ._impl import (
    FORMATTERS,
    PERSON_FIELDS,
    PersonField,
    display_value,
    field_values,
    to_comma_joined,
    to_json_like,
    to_lines,
)
from .component import run_render
from .models import RenderInput, RenderOutput, RenderValidationError

__all__ = [
    # Entry points
    "run_render",
    # Models
    "RenderInput",
    "RenderOutput",
    "RenderValidationError",
    # Field table
    "PERSON_FIELDS",
    "PersonField",
    "FORMATTERS",
    # Functions
    "display_value",
    "field_values",
    "to_comma_joined",
    "to_json_like",
    "to_lines",
]

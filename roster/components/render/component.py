"""
Render component - people to text.

Supported formats:
- csv: field values joined by ", "
- json: JSON object keyed by field name
- lines: one "Name: value" line per field
"""

from __future__ import annotations

import logging

from roster.ports.clock import ClockPort

from ._impl import FORMATTERS
from .models import RenderInput, RenderOutput, RenderValidationError

logger = logging.getLogger(__name__)


def run_render(input_data: RenderInput, clock: ClockPort) -> RenderOutput:
    """Render every person in the chosen format."""
    formatter = FORMATTERS.get(input_data.format)
    if formatter is None:
        return RenderOutput(
            blocks=(),
            errors=(
                RenderValidationError(
                    code="format_unknown",
                    message=(
                        f"Unknown format '{input_data.format}', "
                        f"expected one of: {', '.join(FORMATTERS)}"
                    ),
                    field="format",
                ),
            ),
            success=False,
        )

    now = input_data.reference_date or clock.now()
    blocks = tuple(formatter(person, now) for person in input_data.people)
    logger.debug("Rendered %d people as %s", len(blocks), input_data.format)
    return RenderOutput(blocks=blocks, errors=(), success=True)

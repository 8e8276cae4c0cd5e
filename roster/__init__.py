"""Person Roster - person records, age rules and social media queries."""

__version__ = "0.1.0"

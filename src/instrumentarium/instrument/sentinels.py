"""
Reserved values that carry a meaning distinct from ordinary data.
"""

from enum import Enum


class RangeSentinel(str, Enum):
    """Values stored in ``range_description`` that are not a real range."""

    # The range does not apply to the instrument; render nothing.
    NOT_APPLICABLE = "N/A"


class CategorySentinel(Enum):
    """Category selections that are not category names.

    Deliberately not a ``str`` enum: a category literally named "all" in the
    data never compares equal to ``CategorySentinel.ALL``.
    """

    ALL = "all"


def is_renderable_range(value: str | None) -> bool:
    """True when a range description should be shown to the user."""
    return bool(value) and value != RangeSentinel.NOT_APPLICABLE

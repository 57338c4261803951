"""
Client-side filtering over an already fetched snapshot of instruments.

Independent of the API's own filtering: no request is made, and matching
is a plain case-insensitive substring test.
"""

from typing import Iterable

from instrumentarium.instrument.sentinels import CategorySentinel

SEARCHABLE_FIELDS = ("name", "description", "family", "origin")


def _matches_text(instrument: dict, needle: str) -> bool:
    for field in SEARCHABLE_FIELDS:
        value = instrument.get(field)
        if value and needle in value.lower():
            return True
    return False


def filter_instruments(
    instruments: Iterable[dict],
    category: str | CategorySentinel = CategorySentinel.ALL,
    query: str = "",
) -> list[dict]:
    """
    Narrow a snapshot by category and free-text query.

    Args:
        instruments: Instruments as returned by the API
        category: Exact category name, or CategorySentinel.ALL for no constraint
        query: Text looked up in name, description, family and origin

    Returns:
        Matching instruments, in their original order
    """
    selected = list(instruments)

    if category is not CategorySentinel.ALL:
        selected = [i for i in selected if i.get("category") == category]

    needle = (query or "").strip().lower()
    if needle:
        selected = [i for i in selected if _matches_text(i, needle)]

    return selected

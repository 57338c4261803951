"""
Query parameters and filter predicates for the instruments collection.

Untrusted query parameters are validated by ``InstrumentQuery`` and then
translated by ``build_filter()`` into an ``InstrumentFilter``: a flat list
of predicate clauses combined with AND. The repository compiles the filter
into SQL; nothing here touches the database.
"""

from dataclasses import dataclass
from typing import Optional, Union

from pydantic import BaseModel, Field, ValidationError

SEARCH_MAX_LENGTH = 100

# Pattern metacharacters and the escape character of ILIKE.
_SEARCH_STRIP = str.maketrans("", "", "%_\\")

# Query parameter name -> instruments column, for exact-match parameters.
EQUALITY_COLUMNS = {
    "category": "category",
    "family": "family",
    "difficulty": "difficulty_level",
}

SEARCH_COLUMNS = ("name", "description")


class InstrumentQuery(BaseModel):
    """Validated query parameters of the filtered-list endpoint."""

    category: Optional[str] = Field(default=None, max_length=50)
    family: Optional[str] = Field(default=None, max_length=50)
    difficulty: Optional[str] = Field(default=None, max_length=20)
    search: Optional[str] = Field(default=None, max_length=SEARCH_MAX_LENGTH)

    @classmethod
    def from_args(cls, args) -> "InstrumentQuery":
        """
        Validate a request's query string.

        Args:
            args: A werkzeug MultiDict (``request.args``)

        A parameter given more than once is passed through as a list, which
        fails string validation.

        Raises:
            pydantic.ValidationError: if any parameter is invalid
        """
        raw = {}
        for name in cls.model_fields:
            values = args.getlist(name)
            if values:
                raw[name] = values[0] if len(values) == 1 else values
        return cls.model_validate(raw)


def describe_errors(error: ValidationError) -> list[dict]:
    """Flatten a ValidationError into JSON-safe detail entries, one per failure."""
    return [
        {
            "field": ".".join(str(part) for part in e["loc"]),
            "message": e["msg"],
            "type": e["type"],
        }
        for e in error.errors()
    ]


def sanitize_search(value: Optional[str]) -> Optional[str]:
    """
    Strip ILIKE metacharacters from a free-text search.

    Removes ``%``, ``_`` and backslash, trims whitespace and truncates to
    SEARCH_MAX_LENGTH characters. Returns None when nothing is left.
    """
    if not value:
        return None
    cleaned = value.translate(_SEARCH_STRIP).strip()[:SEARCH_MAX_LENGTH]
    return cleaned or None


# =============================================================================
# Predicate Clauses
# =============================================================================


@dataclass(frozen=True)
class Equals:
    """Exact match of one column."""

    column: str
    value: str


@dataclass(frozen=True)
class ContainsText:
    """Case-insensitive substring match against any of several columns."""

    columns: tuple[str, ...]
    term: str


Clause = Union[Equals, ContainsText]


@dataclass(frozen=True)
class InstrumentFilter:
    clauses: tuple[Clause, ...] = ()
    order_by: str = "name"


def build_filter(query: InstrumentQuery) -> InstrumentFilter:
    """Translate validated parameters into predicate clauses (empty values are ignored)."""
    clauses: list[Clause] = []

    for param, column in EQUALITY_COLUMNS.items():
        value = getattr(query, param)
        if value:
            clauses.append(Equals(column=column, value=value))

    term = sanitize_search(query.search)
    if term:
        clauses.append(ContainsText(columns=SEARCH_COLUMNS, term=term))

    return InstrumentFilter(clauses=tuple(clauses))

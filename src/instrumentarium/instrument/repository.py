from typing import List, Optional

from instrumentarium import db
from instrumentarium.instrument.query import ContainsText, Equals, InstrumentFilter

INSTRUMENT_COLUMNS = (
    "id",
    "name",
    "category",
    "family",
    "description",
    "origin",
    "range_description",
    "difficulty_level",
    "image_url",
)

_SELECT = f"SELECT {', '.join(INSTRUMENT_COLUMNS)} FROM instruments"


def _column(name: str) -> str:
    if name not in INSTRUMENT_COLUMNS:
        raise ValueError(f"Unknown instrument column: {name}")
    return name


def compile_filter(instrument_filter: InstrumentFilter) -> tuple[str, tuple]:
    """
    Compile a filter into a parameterized SELECT.

    Clauses are joined with AND; a ContainsText clause becomes an
    OR group of ILIKE conditions.
    """
    conditions = []
    params = []

    for clause in instrument_filter.clauses:
        if isinstance(clause, Equals):
            conditions.append(f"{_column(clause.column)} = %s")
            params.append(clause.value)
        elif isinstance(clause, ContainsText):
            pattern = f"%{clause.term}%"
            group = " OR ".join(f"{_column(c)} ILIKE %s" for c in clause.columns)
            conditions.append(f"({group})")
            params.extend([pattern] * len(clause.columns))
        else:
            raise TypeError(f"Unsupported clause: {clause!r}")

    query = _SELECT
    if conditions:
        query += " WHERE " + " AND ".join(conditions)
    query += f" ORDER BY {_column(instrument_filter.order_by)}"

    return query, tuple(params)


class InstrumentRepository:
    """
    Repository for instrument data access.
    Encapsulates all SQL and queries for the instruments table. Read-only.
    """

    def find(self, instrument_filter: InstrumentFilter) -> List[dict]:
        """List instruments matching every clause of the filter."""
        query, params = compile_filter(instrument_filter)
        return db.fetch_all(query, params)

    def get_by_id(self, instrument_id: str) -> Optional[dict]:
        """Get instrument by ID."""
        return db.fetch_one(f"{_SELECT} WHERE id = %s", (instrument_id,))

    def list_category_values(self) -> List[str]:
        """Category of every row, duplicates included."""
        return db.fetch_column("SELECT category FROM instruments")

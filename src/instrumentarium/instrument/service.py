import logging
import uuid
from collections import Counter

from instrumentarium.instrument.query import InstrumentQuery, build_filter
from instrumentarium.instrument.repository import InstrumentRepository

logger = logging.getLogger(__name__)


class InstrumentService:
    """Read-only views over the instrument catalog, one store query per call."""

    def __init__(self, repository: InstrumentRepository = None):
        self.repository = repository or InstrumentRepository()

    def list_instruments(self, query: InstrumentQuery) -> dict:
        """
        Instruments matching the validated query, sorted by name.
        """
        instrument_filter = build_filter(query)
        logger.debug("Listing instruments with %d clause(s)", len(instrument_filter.clauses))
        instruments = self.repository.find(instrument_filter)
        return {
            "instruments": instruments,
            "count": len(instruments),
        }

    def get_instrument(self, instrument_id: str) -> dict | None:
        """
        Get a single instrument, or None if no row has this ID.

        IDs that are not UUIDs cannot match a row and are answered
        without a query.
        """
        try:
            key = uuid.UUID(instrument_id)
        except ValueError:
            logger.info("Rejected malformed instrument id %r", instrument_id)
            return None
        return self.repository.get_by_id(str(key))

    def list_categories(self) -> list[str]:
        """Distinct categories in lexicographic order."""
        return sorted(set(self.repository.list_category_values()))

    def stats(self) -> dict:
        """Total row count and number of instruments per category."""
        values = self.repository.list_category_values()
        return {
            "total": len(values),
            "by_category": dict(Counter(values)),
        }

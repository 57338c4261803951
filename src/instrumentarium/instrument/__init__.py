"""
Instrument

This module provides the read-only catalog of musical instruments:
query validation, filter predicates, data access and aggregate views.
"""

from instrumentarium.instrument.query import InstrumentFilter, InstrumentQuery, build_filter
from instrumentarium.instrument.repository import InstrumentRepository
from instrumentarium.instrument.sentinels import CategorySentinel, RangeSentinel
from instrumentarium.instrument.service import InstrumentService

__all__ = [
    "CategorySentinel",
    "InstrumentFilter",
    "InstrumentQuery",
    "InstrumentRepository",
    "InstrumentService",
    "RangeSentinel",
    "build_filter",
]

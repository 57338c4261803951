"""
Browse

Client side of the catalog: fetching from the instruments API, filtering
the fetched snapshot locally, and rendering it as cards.
"""

from instrumentarium.browse.client import CatalogClient, CatalogError
from instrumentarium.browse.local_filter import filter_instruments

__all__ = ["CatalogClient", "CatalogError", "filter_instruments"]

"""Instrumentarium: a read-only catalog of musical instruments."""

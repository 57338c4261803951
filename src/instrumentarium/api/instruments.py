import logging

import psycopg
from flask import Blueprint, jsonify, request
from pydantic import ValidationError

from instrumentarium.instrument.query import InstrumentQuery, describe_errors
from instrumentarium.instrument.service import InstrumentService

logger = logging.getLogger(__name__)

bp = Blueprint("instruments", __name__)

instrument_service = InstrumentService()


@bp.route("", methods=["GET"])
def list_instruments():
    """List instruments, filtered by category, family, difficulty and search."""
    try:
        query = InstrumentQuery.from_args(request.args)
    except ValidationError as e:
        details = describe_errors(e)
        logger.warning("Invalid query parameters: %s", details)
        return jsonify({"error": "Invalid query parameters", "details": details}), 400

    return jsonify(instrument_service.list_instruments(query))


@bp.route("/categories", methods=["GET"])
def list_categories():
    """Distinct categories, sorted."""
    return jsonify({"categories": instrument_service.list_categories()})


@bp.route("/stats", methods=["GET"])
def get_stats():
    """Total count and count per category."""
    return jsonify(instrument_service.stats())


@bp.route("/", methods=["GET"], defaults={"subpath": ""})
@bp.route("/<path:subpath>", methods=["GET"])
def get_instrument(subpath: str):
    """Get instrument by ID, taken from the last path segment."""
    instrument_id = subpath.rstrip("/").rsplit("/", 1)[-1]

    # Nested paths still end in a named view, e.g. /instruments-api/v1/stats
    if instrument_id == "categories":
        return list_categories()
    if instrument_id == "stats":
        return get_stats()

    instrument = instrument_service.get_instrument(instrument_id)
    if not instrument:
        return jsonify({"error": "Instrument not found"}), 404
    return jsonify({"instrument": instrument})


@bp.errorhandler(psycopg.Error)
def handle_store_error(e: psycopg.Error):
    """Store failures are reported with the store's own message."""
    logger.error("Store query failed for %s: %s", request.path, e)
    return jsonify({"error": str(e)}), 500

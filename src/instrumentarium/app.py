import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

from instrumentarium.config import config

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}


def create_app() -> Flask:
    """Application factory."""
    logging.basicConfig(
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)

    # Register blueprints
    from instrumentarium.api.instruments import bp as instruments_bp

    app.register_blueprint(instruments_bp, url_prefix=config.api_root)

    @app.before_request
    def preflight():
        # Answered for every path, matched or not
        if request.method == "OPTIONS":
            response = app.response_class(status=200)
            del response.headers["Content-Type"]
            return response
        return None

    @app.after_request
    def add_cors_headers(response):
        response.headers.update(CORS_HEADERS)
        return response

    @app.errorhandler(404)
    @app.errorhandler(405)
    def endpoint_not_found(e):
        return jsonify({"error": "Endpoint not found"}), 404

    @app.errorhandler(Exception)
    def internal_error(e):
        if isinstance(e, HTTPException):
            return jsonify({"error": e.description}), e.code
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return jsonify({"error": "Internal server error"}), 500

    return app

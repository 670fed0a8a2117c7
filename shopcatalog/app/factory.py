from __future__ import annotations

import logging
from flask import Flask, g, jsonify, render_template, request
from werkzeug.exceptions import HTTPException

from shopcatalog.app.config import Config
from shopcatalog.app.extensions import cors
from shopcatalog.app.common.errors import ApiError, error_payload
from shopcatalog.app.common.request_context import init_request_id, echo_request_id
from shopcatalog.app.api.register import register_api_blueprints
from shopcatalog.app.cli import cli_bp
from shopcatalog.app.ui import ui_bp


def ucfirst(value) -> str:
    """Upper-case the first letter only ("men's clothing" -> "Men's clothing")."""
    text = str(value or "")
    return text[:1].upper() + text[1:]


def format_price(value) -> str:
    # 10.0 -> "10", 109.95 -> "109.95"
    return f"{float(value):.2f}".rstrip("0").rstrip(".")


def format_bound(value) -> str:
    # Echo a submitted bound exactly: 20.0 -> "20", 12.345 -> "12.345"
    if value is None:
        return ""
    value = float(value)
    return str(int(value)) if value.is_integer() else repr(value)


def create_app(config_object: type[Config] = Config) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    logging.basicConfig(
        level=getattr(logging, app.config.get("LOG_LEVEL", "INFO"), logging.INFO),
        format="%(asctime)s %(levelname)s %(message)s",
    )

    # Extensions
    cors.init_app(app, resources={r"/api/*": {"origins": app.config.get("CORS_ORIGINS") or "*"}})

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    app.after_request(echo_request_id)

    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    app.jinja_env.filters["ucfirst"] = ucfirst
    app.jinja_env.filters["price"] = format_price
    app.jinja_env.filters["bound"] = format_bound

    @app.context_processor
    def inject_settings():
        return {"currency_label": app.config.get("CURRENCY_LABEL", "")}

    # Catalog page + JSON API
    app.register_blueprint(ui_bp)
    register_api_blueprints(app)

    # CLI (flask categories)
    app.register_blueprint(cli_bp)

    # Error handlers
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict(g.get("request_id"))), err.status_code

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        status = err.code or 500
        if request.path.startswith("/api"):
            # Normalize Werkzeug errors into our JSON shape
            payload = error_payload("http_error", err.description, {"name": err.name}, g.get("request_id"))
            return jsonify(payload), status
        return render_template("error.html", status=status, title=err.name, message=err.description), status

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        if request.path.startswith("/api"):
            payload = error_payload("internal_error", "Internal server error", None, g.get("request_id"))
            return jsonify(payload), 500
        return render_template(
            "error.html", status=500, title="Internal Server Error", message="Une erreur inattendue est survenue."
        ), 500

    return app

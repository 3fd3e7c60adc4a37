"""Flask application setup and blueprint wiring."""

from __future__ import annotations

import os
from datetime import timedelta
from typing import Any, Mapping, Optional

from flask import Flask
from flask_cors import CORS

from ascendia.config import DEFAULT_SESSION_SECRET, load_config, parse_origins
from ascendia.errors import register_error_handlers
from ascendia.routes import register_routes
from ascendia.storage import EXTENSION_KEY, Storage
from ascendia.utils.auth import register_session_cleanup

SESSION_COOKIE_NAME = "ascendia.sid"


def create_app(
    config: Optional[Mapping[str, Any]] = None,
    storage: Optional[Storage] = None,
) -> Flask:
    """Configure and return the Flask application instance.

    ``config`` overrides values read from the environment and ``storage``
    replaces the default in-memory stores.
    """
    app = Flask(__name__)

    settings = load_config()
    if config:
        settings.update(config)
    app.config.update(settings)

    app.config["UPLOAD_DIR"] = os.path.abspath(app.config["UPLOAD_DIR"])
    app.config["SECRET_KEY"] = app.config["SESSION_SECRET"]
    app.config["SESSION_COOKIE_NAME"] = SESSION_COOKIE_NAME
    app.config["SESSION_COOKIE_HTTPONLY"] = True
    app.config["SESSION_COOKIE_SECURE"] = False
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(seconds=app.config["SESSION_TTL_SECONDS"])
    if app.config.get("MAX_UPLOAD_BYTES"):
        app.config["MAX_CONTENT_LENGTH"] = app.config["MAX_UPLOAD_BYTES"]

    # Cookies only cross origins that were listed explicitly.
    origins = parse_origins(app.config["CORS_ORIGINS"])
    app.config["CORS_ORIGINS"] = origins
    CORS(app, resources={r"/*": {"origins": origins}}, supports_credentials=origins != "*")

    app.extensions[EXTENSION_KEY] = storage if storage is not None else Storage.in_memory()

    register_error_handlers(app)
    register_session_cleanup(app)
    register_routes(app)

    if app.config["SESSION_SECRET"] == DEFAULT_SESSION_SECRET:
        app.logger.warning("SESSION_SECRET is not set; falling back to the insecure default secret")

    return app


app = create_app()

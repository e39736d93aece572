from __future__ import annotations

import logging
from typing import Optional

from flask import Flask, render_template, request
from werkzeug.exceptions import HTTPException

from projectfoam.app.config import Config
from projectfoam.app.extensions import profiles
from projectfoam.app.repository import ProfileRepository
from projectfoam.app.common.errors import PageError
from projectfoam.app.common.request_context import current_request_id, init_request_id, mirror_request_id
from projectfoam.app.pages import register_page_blueprints
from projectfoam.app.ui import register_ui
from projectfoam.app.cli import cli_bp

DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(value) -> str:
    """Return a level name logging accepts, or INFO for anything else."""
    name = str(value or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return DEFAULT_LOG_LEVEL


def create_app(config_object: type[Config] = Config, repository: Optional[ProfileRepository] = None) -> Flask:
    app = Flask(__name__, instance_relative_config=True)
    app.config.from_object(config_object)

    requested_level = app.config["LOG_LEVEL"]
    app.config["LOG_LEVEL"] = resolve_log_level(requested_level)
    logging.basicConfig(level=app.config["LOG_LEVEL"], format=app.config["LOG_FORMAT"])
    if app.config["LOG_LEVEL"] != str(requested_level or "").strip().upper():
        app.logger.warning("Unknown LOG_LEVEL %r, using %s", requested_level, DEFAULT_LOG_LEVEL)

    # Extensions
    profiles.init_app(app, repository)
    register_ui(app)

    # Request id
    @app.before_request
    def _before_request():
        init_request_id()

    @app.after_request
    def _after_request(response):
        app.logger.info(
            "%s %s -> %s request_id=%s",
            request.method,
            request.path,
            response.status_code,
            current_request_id(),
        )
        return mirror_request_id(response)

    register_page_blueprints(app)

    # CLI (flask export-pages, flask list-profiles)
    app.register_blueprint(cli_bp)

    # Error handlers
    def _error_page(status: int, title: str, message: str):
        return (
            render_template(
                "errors/error.html",
                status=status,
                title=title,
                message=message,
                request_id=current_request_id(),
            ),
            status,
        )

    @app.errorhandler(PageError)
    def handle_page_error(err: PageError):
        app.logger.warning(
            "Page error %s %s details=%s request_id=%s",
            err.status_code,
            err.code,
            err.details or {},
            current_request_id(),
        )
        return _error_page(err.status_code, err.title, err.message)

    @app.errorhandler(HTTPException)
    def handle_http_exception(err: HTTPException):
        return _error_page(err.code or 500, err.name, err.description)

    @app.errorhandler(Exception)
    def handle_unexpected(err: Exception):
        app.logger.exception("Unhandled exception")
        return _error_page(500, "Server error", "Something went wrong on our side.")

    return app

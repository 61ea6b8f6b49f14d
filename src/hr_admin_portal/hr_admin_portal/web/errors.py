from __future__ import annotations

import logging

from flask import Flask, jsonify, redirect, url_for

from ..core.exceptions import (
    ApiError,
    AuthenticationError,
    AuthorizationError,
    DomainError,
    SessionExpiredError,
    ValidationError,
)

logger = logging.getLogger(__name__)


def register(app: Flask) -> None:
    @app.errorhandler(SessionExpiredError)
    def session_expired(e: SessionExpiredError):
        return redirect(url_for("login"))

    @app.errorhandler(ValidationError)
    def validation_error(e: ValidationError):
        return jsonify({"error": str(e)}), 400

    @app.errorhandler(AuthenticationError)
    def authentication_error(e: AuthenticationError):
        return jsonify({"error": str(e)}), 401

    @app.errorhandler(AuthorizationError)
    def authorization_error(e: AuthorizationError):
        return jsonify({"error": str(e)}), 403

    @app.errorhandler(ApiError)
    def api_error(e: ApiError):
        logger.warning("Backend call failed (%s): %s", e.status_code, e.message)
        status = e.status_code if 400 <= e.status_code < 600 else 502
        return jsonify({"error": e.message}), status

    @app.errorhandler(DomainError)
    def domain_error(e: DomainError):
        return jsonify({"error": str(e)}), 400

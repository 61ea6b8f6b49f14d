"""Route guards shared by every controller.

The container is looked up on ``current_app`` so the decorators can be
applied at import time, before ``create_app`` has built it.
"""

from __future__ import annotations

import logging
from functools import wraps

from flask import current_app, jsonify, redirect, request, url_for

from ..core.constants import DASHBOARD_ROUTE

logger = logging.getLogger(__name__)

EXTENSION_KEY = "hr_admin_portal"


def get_container():
    return current_app.extensions[EXTENSION_KEY]


def login_required(view):
    @wraps(view)
    def wrapper(*args, **kwargs):
        if not get_container().auth_service.is_authenticated():
            return redirect(url_for("login", returnUrl=request.path))
        return view(*args, **kwargs)

    return wrapper


def permission_required(module: str, action: str):
    """Deny with 403 unless the signed-in user holds ``module:action``."""

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            container = get_container()
            if not container.auth_service.is_authenticated():
                return redirect(url_for("login", returnUrl=request.path))
            if not container.permission_service.has_permission(module, action):
                logger.info("Denied %s:%s on %s", module, action, request.path)
                return jsonify({"error": "You do not have permission to perform this action"}), 403
            return view(*args, **kwargs)

        return wrapper

    return decorator


def safe_return_url(value) -> str:
    """Only same-site paths are honoured as a post-login target."""
    if isinstance(value, str) and value.startswith("/") and not value.startswith("//"):
        return value
    return DASHBOARD_ROUTE


def route_guard(view):
    """Send the user back to the dashboard when the route map denies ``request.path``."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        if not get_container().permission_service.can_access_route(request.path):
            logger.info("Route %s not accessible, redirecting to dashboard", request.path)
            return redirect(DASHBOARD_ROUTE)
        return view(*args, **kwargs)

    return wrapper

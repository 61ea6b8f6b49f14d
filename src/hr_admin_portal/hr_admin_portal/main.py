from __future__ import annotations

import importlib
import logging
from datetime import timedelta
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .settings import get_settings_module
from .logging_config import setup_logging
from .container import Container, build_container
from .web import errors
from .web.guards import EXTENSION_KEY
from .web.json_provider import PortalJSONProvider
from .attendance.controller import register as register_attendance
from .audit_logs.controller import register as register_audit_logs
from .auth.controller import register as register_auth
from .holidays.controller import register as register_holidays
from .leave.controller import register as register_leave
from .roles.controller import register as register_roles
from .tours.controller import register as register_tours
from .users.controller import register as register_users

logger = logging.getLogger(__name__)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)
    app.json = PortalJSONProvider(app)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    setup_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["PERMANENT_SESSION_LIFETIME"] = timedelta(days=int(getattr(settings, "SESSION_DAYS", 7)))
    api_config = getattr(settings, "API_CONFIG")

    logger.info("settings=%s backend=%s", settings_module, api_config.get("base_url"))

    container = container or build_container(api_config=api_config)
    app.extensions[EXTENSION_KEY] = container

    errors.register(app)
    register_auth(app, container)
    register_users(app, container)
    register_roles(app, container)
    register_leave(app, container)
    register_holidays(app, container)
    register_tours(app, container)
    register_attendance(app, container)
    register_audit_logs(app, container)

    return app

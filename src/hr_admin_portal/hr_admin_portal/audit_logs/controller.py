from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..web.guards import login_required, permission_required


def register(app: Flask, container: Container) -> None:
    logs = container.audit_log_service

    # audit entries share the reports grant; there is no dedicated module
    @app.route("/admin/audit-logs", endpoint="admin_audit_logs")
    @login_required
    @permission_required("reports", "read")
    def list_audit_logs():
        page = logs.list(
            module=request.args.get("module"),
            action=request.args.get("action"),
            entity_id=request.args.get("entityId"),
            performed_by=request.args.get("performedBy"),
            page=request.args.get("page", DEFAULT_PAGE, type=int),
            limit=request.args.get("limit", DEFAULT_PAGE_SIZE, type=int),
        )
        return jsonify(page)

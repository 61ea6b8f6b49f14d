from __future__ import annotations

from flask import Flask, jsonify, redirect, request, url_for

from ..common.query import parse_bool
from ..container import Container
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..core.enums import LeaveStatus, LeaveType, SortOrder
from ..core.exceptions import ValidationError
from ..web.guards import login_required, permission_required, route_guard
from .model import LeaveFilters

# action that must be held to move a request into each status
STATUS_ACTIONS = {
    LeaveStatus.APPROVED.value: "approve",
    LeaveStatus.REJECTED.value: "reject",
    LeaveStatus.CANCELLED.value: "update",
}


def _enum_arg(enum_cls, value, label):
    if not value:
        return None
    try:
        return enum_cls(value)
    except ValueError:
        raise ValidationError(f"Invalid {label}")


def _filters_from_args(args) -> LeaveFilters:
    half = args.get("isHalfDay")
    return LeaveFilters(
        page=args.get("page", DEFAULT_PAGE, type=int),
        limit=args.get("limit", DEFAULT_PAGE_SIZE, type=int),
        status=_enum_arg(LeaveStatus, args.get("status"), "status"),
        leave_type=_enum_arg(LeaveType, args.get("leaveType"), "leave type"),
        user_id=args.get("userId") or None,
        start_date=args.get("startDate") or None,
        end_date=args.get("endDate") or None,
        is_half_day=None if half in (None, "") else parse_bool(half),
        approved_by=args.get("approvedBy") or None,
        search=args.get("search") or None,
        sort_by=args.get("sortBy") or None,
        sort_order=_enum_arg(SortOrder, args.get("sortOrder"), "sort order"),
    )


def _form_from(data, leaves):
    return leaves.build_form(
        user_id=data.get("userId", ""),
        leave_type=data.get("leaveType", ""),
        start_date=data.get("startDate", ""),
        end_date=data.get("endDate", ""),
        reason=data.get("reason", ""),
        is_half_day=parse_bool(data.get("isHalfDay")),
        half_day_type=data.get("halfDayType"),
        notes=data.get("notes"),
    )


def register(app: Flask, container: Container) -> None:
    leaves = container.leave_service

    def _detail(request_id: str):
        leave = leaves.get(request_id)
        return {
            "leave": leave,
            "statusOptions": leaves.offered_statuses(leave),
            "statusClass": leaves.workflow.css_class(leave.status),
        }

    @app.route("/admin/leave/list", endpoint="leave_page")
    @login_required
    @route_guard
    def leave_page():
        return redirect(url_for("admin_leave", **request.args))

    @app.route("/admin/leave", endpoint="admin_leave")
    @login_required
    @permission_required("leave", "list")
    def list_leave():
        return jsonify(leaves.list(_filters_from_args(request.args)))

    @app.route("/admin/leave", methods=["POST"], endpoint="admin_create_leave")
    @login_required
    @permission_required("leave", "create")
    def create_leave():
        leaves.create(_form_from(request.get_json(silent=True) or {}, leaves))
        return jsonify(leaves.list()), 201

    @app.route("/admin/leave/<request_id>", endpoint="admin_leave_detail")
    @login_required
    @permission_required("leave", "read")
    def leave_detail(request_id: str):
        return jsonify(_detail(request_id))

    @app.route("/admin/leave/<request_id>", methods=["PUT", "PATCH"], endpoint="admin_update_leave")
    @login_required
    @permission_required("leave", "update")
    def update_leave(request_id: str):
        leaves.update(request_id, _form_from(request.get_json(silent=True) or {}, leaves))
        return jsonify(_detail(request_id))

    @app.route("/admin/leave/<request_id>", methods=["DELETE"], endpoint="admin_delete_leave")
    @login_required
    @permission_required("leave", "delete")
    def delete_leave(request_id: str):
        leaves.delete(request_id)
        return jsonify(leaves.list())

    @app.route("/admin/leave/<request_id>/status", methods=["PUT", "POST"], endpoint="admin_leave_status")
    @login_required
    def update_leave_status(request_id: str):
        data = request.get_json(silent=True) or {}
        status = str(data.get("status") or "")
        container.permission_service.require("leave", STATUS_ACTIONS.get(status, "update"))

        leave = leaves.get(request_id)
        leaves.update_status(
            leave,
            status,
            notes=data.get("notes"),
            rejection_reason=data.get("rejectionReason"),
        )
        return jsonify(_detail(request_id))

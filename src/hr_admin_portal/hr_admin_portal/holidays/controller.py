from __future__ import annotations

from flask import Flask, jsonify, redirect, request, url_for

from ..common.query import parse_bool
from ..container import Container
from ..web.guards import login_required, permission_required, route_guard


def register(app: Flask, container: Container) -> None:
    holidays = container.holiday_service

    def _payload(data, *, is_new: bool) -> dict:
        return holidays.build_payload(
            name=data.get("name", ""),
            holiday_date=data.get("date", ""),
            description=data.get("description", ""),
            is_active=parse_bool(data.get("isActive"), default=True),
            is_optional=parse_bool(data.get("isOptional")),
            is_new=is_new,
        )

    @app.route("/admin/holiday/list", endpoint="holidays_page")
    @login_required
    @route_guard
    def holidays_page():
        return redirect(url_for("admin_holidays", **request.args))

    @app.route("/admin/holidays", endpoint="admin_holidays")
    @login_required
    @permission_required("holiday", "list")
    def list_holidays():
        year = request.args.get("year", type=int)
        return jsonify({"items": holidays.list(year)})

    @app.route("/admin/holidays", methods=["POST"], endpoint="admin_create_holiday")
    @login_required
    @permission_required("holiday", "create")
    def create_holiday():
        holidays.create(_payload(request.get_json(silent=True) or {}, is_new=True))
        return jsonify({"items": holidays.list()}), 201

    @app.route("/admin/holidays/<holiday_id>", endpoint="admin_holiday_detail")
    @login_required
    @permission_required("holiday", "read")
    def holiday_detail(holiday_id: str):
        return jsonify(holidays.get(holiday_id))

    @app.route("/admin/holidays/<holiday_id>", methods=["PUT", "PATCH"], endpoint="admin_update_holiday")
    @login_required
    @permission_required("holiday", "update")
    def update_holiday(holiday_id: str):
        holidays.update(holiday_id, _payload(request.get_json(silent=True) or {}, is_new=False))
        return jsonify(holidays.get(holiday_id))

    @app.route("/admin/holidays/<holiday_id>", methods=["DELETE"], endpoint="admin_delete_holiday")
    @login_required
    @permission_required("holiday", "delete")
    def delete_holiday(holiday_id: str):
        holidays.delete(holiday_id)
        return jsonify({"items": holidays.list()})

from __future__ import annotations

from flask import Flask, jsonify, redirect, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..web.guards import login_required, permission_required, route_guard


def _coords(data, prefix: str = ""):
    lat = data.get(f"{prefix}latitude" if not prefix else f"{prefix}Latitude")
    lng = data.get(f"{prefix}longitude" if not prefix else f"{prefix}Longitude")
    return lat, lng


def _record_from(data, attendance, *, partial: bool) -> dict:
    in_lat, in_lng = _coords(data, "checkIn")
    out_lat, out_lng = _coords(data, "checkOut")
    return attendance.build_record(
        user_id=data.get("userId"),
        day=data.get("date"),
        check_in_time=data.get("checkInTime"),
        check_out_time=data.get("checkOutTime"),
        status=data.get("status"),
        notes=data.get("notes"),
        session_number=data.get("sessionNumber"),
        check_in_latitude=in_lat,
        check_in_longitude=in_lng,
        check_out_latitude=out_lat,
        check_out_longitude=out_lng,
        partial=partial,
    )


def register(app: Flask, container: Container) -> None:
    attendance = container.attendance_service
    timelog = container.timelog_service

    def _today():
        sessions = attendance.today()
        status = attendance.current_status(sessions)
        return {"sessions": sessions, "hasActiveSession": status.has_active_session}

    @app.route("/admin/attendance/today", endpoint="attendance_today")
    @login_required
    def attendance_today():
        return jsonify(_today())

    @app.route("/admin/attendance/checkin", methods=["POST"], endpoint="attendance_checkin")
    @login_required
    def attendance_checkin():
        lat, lng = _coords(request.get_json(silent=True) or {})
        attendance.check_in(latitude=lat, longitude=lng)
        return jsonify(_today())

    @app.route("/admin/attendance/checkout", methods=["POST"], endpoint="attendance_checkout")
    @login_required
    def attendance_checkout():
        lat, lng = _coords(request.get_json(silent=True) or {})
        attendance.check_out(latitude=lat, longitude=lng)
        return jsonify(_today())

    @app.route("/admin/attendance/new-session", methods=["POST"], endpoint="attendance_new_session")
    @login_required
    def attendance_new_session():
        lat, lng = _coords(request.get_json(silent=True) or {})
        attendance.start_new_session(latitude=lat, longitude=lng)
        return jsonify(_today())

    @app.route("/admin/attendance", methods=["POST"], endpoint="admin_create_attendance")
    @login_required
    @permission_required("attendance", "create")
    def create_attendance():
        record = attendance.create_record(_record_from(request.get_json(silent=True) or {}, attendance, partial=False))
        return jsonify(record), 201

    @app.route("/admin/attendance/<record_id>", methods=["PUT", "PATCH"], endpoint="admin_update_attendance")
    @login_required
    @permission_required("attendance", "update")
    def update_attendance(record_id: str):
        record = attendance.update_record(
            record_id, _record_from(request.get_json(silent=True) or {}, attendance, partial=True)
        )
        return jsonify(record)

    @app.route("/admin/attendance/<record_id>", methods=["DELETE"], endpoint="admin_delete_attendance")
    @login_required
    @permission_required("attendance", "delete")
    def delete_attendance(record_id: str):
        attendance.delete_record(record_id)
        return jsonify({"message": "Attendance record deleted"})

    @app.route("/admin/timelog/list", endpoint="timelog_page")
    @login_required
    @route_guard
    def timelog_page():
        return redirect(url_for("admin_timelog", **request.args))

    @app.route("/admin/timelog", endpoint="admin_timelog")
    @login_required
    @permission_required("timelog", "list")
    def list_timelog():
        page = timelog.all_users(
            request.args.get("date") or None,
            page=request.args.get("page", DEFAULT_PAGE, type=int),
            limit=request.args.get("limit", DEFAULT_PAGE_SIZE, type=int),
        )
        return jsonify(
            {
                "items": page.items,
                "rows": [timelog.to_row(s) for s in page.items],
                "pagination": page.pagination,
            }
        )

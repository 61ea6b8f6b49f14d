from __future__ import annotations

from flask import Flask, jsonify, redirect, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..web.guards import login_required, permission_required, route_guard
from .model import TourDocument, TourFilters


def _payload_from(data, tours) -> dict:
    documents = [
        TourDocument(
            file_name=str(d.get("fileName") or ""),
            file_url=str(d.get("fileUrl") or ""),
            file_type=str(d.get("fileType") or ""),
            file_size=int(d.get("fileSize") or 0),
        )
        for d in data.get("documents") or []
    ]
    return tours.build_payload(
        assigned_to=data.get("assignedTo", ""),
        purpose=data.get("purpose", ""),
        location=data.get("location", ""),
        expected_time=data.get("expectedTime", ""),
        user_notes=data.get("userNotes"),
        admin_notes=data.get("adminNotes"),
        documents=documents,
    )


def register(app: Flask, container: Container) -> None:
    tours = container.tour_service
    workflow = tours.workflow

    def _detail(tour_id: str):
        tour = tours.get(tour_id)
        return {
            "tour": tour,
            "statusOptions": tours.status_options(tour),
            "badgeClass": workflow.badge_class(tour.status),
            "quickUpdatable": workflow.is_quick_updatable(tour.status),
            "timeline": tours.timeline(tour),
        }

    @app.route("/admin/tour/list", endpoint="tours_page")
    @login_required
    @route_guard
    def tours_page():
        return redirect(url_for("admin_tours", **request.args))

    @app.route("/admin/tours", endpoint="admin_tours")
    @login_required
    @permission_required("tour", "list")
    def list_tours():
        filters = TourFilters(
            page=request.args.get("page", DEFAULT_PAGE, type=int),
            limit=request.args.get("limit", DEFAULT_PAGE_SIZE, type=int),
            status=request.args.get("status") or None,
            assigned_to=request.args.get("assignedTo") or None,
            created_by=request.args.get("createdBy") or None,
            start_date=request.args.get("startDate") or None,
            end_date=request.args.get("endDate") or None,
        )
        return jsonify(tours.list(filters))

    @app.route("/admin/tours", methods=["POST"], endpoint="admin_create_tour")
    @login_required
    @permission_required("tour", "create")
    def create_tour():
        tours.create(_payload_from(request.get_json(silent=True) or {}, tours))
        return jsonify(tours.list()), 201

    @app.route("/admin/tours/<tour_id>", endpoint="admin_tour_detail")
    @login_required
    @permission_required("tour", "read")
    def tour_detail(tour_id: str):
        return jsonify(_detail(tour_id))

    @app.route("/admin/tours/<tour_id>", methods=["PATCH", "PUT"], endpoint="admin_update_tour")
    @login_required
    @permission_required("tour", "update")
    def update_tour(tour_id: str):
        tours.update(tour_id, _payload_from(request.get_json(silent=True) or {}, tours))
        return jsonify(_detail(tour_id))

    @app.route("/admin/tours/<tour_id>", methods=["DELETE"], endpoint="admin_delete_tour")
    @login_required
    @permission_required("tour", "delete")
    def delete_tour(tour_id: str):
        tours.delete(tour_id)
        return jsonify(tours.list())

    @app.route("/admin/tours/<tour_id>/status", methods=["PATCH", "POST"], endpoint="admin_tour_status")
    @login_required
    def update_tour_status(tour_id: str):
        container.permission_service.require_any(["tour:approve", "tour:update"])
        data = request.get_json(silent=True) or {}
        tour = tours.get(tour_id)
        tours.update_status(tour, str(data.get("status") or ""), notes=data.get("notes"))
        return jsonify(_detail(tour_id))

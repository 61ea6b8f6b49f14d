from __future__ import annotations

from flask import Flask, jsonify, redirect, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, DROPDOWN_PAGE_SIZE
from ..web.guards import login_required, permission_required, route_guard


def _form_kwargs(data) -> dict:
    return {
        "firstname": data.get("firstname", ""),
        "lastname": data.get("lastname", ""),
        "email": data.get("email", ""),
        "role": data.get("role", ""),
        "mobilenumber": data.get("mobilenumber", ""),
        "addressline1": data.get("addressline1", ""),
        "addressline2": data.get("addressline2"),
        "city": data.get("city", ""),
        "state": data.get("state", ""),
        "center": data.get("center", ""),
        "pincode": data.get("pincode", ""),
        "password": data.get("password"),
    }


def register(app: Flask, container: Container) -> None:
    users = container.user_service

    @app.route("/admin/user-list", endpoint="users_page")
    @login_required
    @route_guard
    def users_page():
        return redirect(url_for("admin_users", **request.args))

    @app.route("/admin/users", endpoint="admin_users")
    @login_required
    @permission_required("users", "list")
    def list_users():
        page = users.list(
            page=request.args.get("page", DEFAULT_PAGE, type=int),
            limit=request.args.get("limit", DEFAULT_PAGE_SIZE, type=int),
            search=request.args.get("search"),
            sort_by=request.args.get("sortBy"),
            sort_order=request.args.get("sortOrder"),
        )
        return jsonify(page)

    @app.route("/admin/users/options", endpoint="admin_user_options")
    @login_required
    @permission_required("users", "list")
    def user_options():
        limit = request.args.get("limit", DROPDOWN_PAGE_SIZE, type=int)
        options = [
            {"id": u.user_id, "name": u.full_name, "email": u.email}
            for u in users.iter_all(limit, search=request.args.get("search"))
        ]
        return jsonify({"items": options})

    @app.route("/admin/users", methods=["POST"], endpoint="admin_create_user")
    @login_required
    @permission_required("users", "create")
    def create_user():
        data = request.get_json(silent=True) or {}
        payload = users.build_payload(**_form_kwargs(data), is_new=True)
        users.create(payload)
        return jsonify(users.list()), 201

    @app.route("/admin/users/<user_id>", endpoint="admin_user_detail")
    @login_required
    @permission_required("users", "read")
    def user_detail(user_id: str):
        return jsonify(users.get(user_id))

    @app.route("/admin/users/<user_id>", methods=["PATCH", "PUT"], endpoint="admin_update_user")
    @login_required
    @permission_required("users", "update")
    def update_user(user_id: str):
        data = request.get_json(silent=True) or {}
        payload = users.build_payload(**_form_kwargs(data), is_new=False)
        users.update(user_id, payload)
        return jsonify(users.get(user_id))

    @app.route("/admin/users/<user_id>", methods=["DELETE"], endpoint="admin_delete_user")
    @login_required
    @permission_required("users", "delete")
    def delete_user(user_id: str):
        users.delete(user_id)
        return jsonify(users.list())

    @app.route("/admin/users/<user_id>/logout-all-devices", methods=["POST"], endpoint="admin_logout_user_devices")
    @login_required
    @permission_required("users", "update")
    def logout_all_devices(user_id: str):
        users.logout_all_devices(user_id)
        return jsonify(users.get(user_id))

    @app.route("/admin/states", endpoint="admin_states")
    @login_required
    def states():
        return jsonify({"items": users.states()})

    @app.route("/admin/states/<state_id>", endpoint="admin_state_detail")
    @login_required
    def state_detail(state_id: str):
        return jsonify(users.state(state_id))

    @app.route("/admin/cities", endpoint="admin_cities")
    @login_required
    def cities():
        return jsonify({"items": users.cities(request.args.get("state"))})

    @app.route("/admin/cities/<city_id>", endpoint="admin_city_detail")
    @login_required
    def city_detail(city_id: str):
        return jsonify(users.city(city_id))

from __future__ import annotations

from flask import Flask, jsonify, redirect, request, url_for

from ..container import Container
from ..core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from ..web.guards import login_required, permission_required, route_guard
from . import catalog


def register(app: Flask, container: Container) -> None:
    roles = container.roles_service

    @app.route("/admin/roles/list", endpoint="roles_page")
    @login_required
    @route_guard
    def roles_page():
        return redirect(url_for("admin_roles", **request.args))

    @app.route("/admin/roles", endpoint="admin_roles")
    @login_required
    @permission_required("roles", "list")
    def list_roles():
        page = roles.list(
            page=request.args.get("page", DEFAULT_PAGE, type=int),
            limit=request.args.get("limit", DEFAULT_PAGE_SIZE, type=int),
            search=request.args.get("search"),
            sort_by=request.args.get("sortBy"),
            sort_order=request.args.get("sortOrder"),
        )
        return jsonify(page)

    @app.route("/admin/roles/catalog", endpoint="admin_roles_catalog")
    @login_required
    @permission_required("roles", "read")
    def role_catalog():
        modules = catalog.available_modules()
        actions = catalog.available_actions()
        return jsonify(
            {
                "modules": modules,
                "actions": actions,
                "total": catalog.total_available_permissions(),
                "descriptions": {
                    m: {a: catalog.permission_description(m, a) for a in actions} for m in modules
                },
                "displayNames": {
                    m: {a: catalog.permission_display_name(m, a) for a in actions} for m in modules
                },
                "fullAccess": catalog.generate_all_permissions(),
            }
        )

    @app.route("/admin/roles", methods=["POST"], endpoint="admin_create_role")
    @login_required
    @permission_required("roles", "create")
    def create_role():
        data = request.get_json(silent=True) or {}
        payload = roles.build_payload(
            name=data.get("name", ""),
            display_name=data.get("displayName", ""),
            description=data.get("description"),
            is_super_admin=bool(data.get("isSuperAdmin", False)),
            permissions=data.get("permissions") or [],
        )
        roles.create(payload)
        return jsonify(roles.list()), 201

    @app.route("/admin/roles/<role_id>", endpoint="admin_role_detail")
    @login_required
    @permission_required("roles", "read")
    def role_detail(role_id: str):
        return jsonify(roles.get(role_id))

    @app.route("/admin/roles/<role_id>", methods=["PATCH", "PUT"], endpoint="admin_update_role")
    @login_required
    @permission_required("roles", "update")
    def update_role(role_id: str):
        data = request.get_json(silent=True) or {}
        payload = roles.build_payload(
            name=data.get("name", ""),
            display_name=data.get("displayName", ""),
            description=data.get("description"),
            is_super_admin=bool(data.get("isSuperAdmin", False)),
            permissions=data.get("permissions") or [],
            is_active=data.get("isActive"),
        )
        roles.update(role_id, payload)
        return jsonify(roles.get(role_id))

    @app.route("/admin/roles/<role_id>", methods=["DELETE"], endpoint="admin_delete_role")
    @login_required
    @permission_required("roles", "delete")
    def delete_role(role_id: str):
        roles.delete(role_id)
        return jsonify(roles.list())

    @app.route("/admin/roles/<role_id>/permissions", methods=["POST"], endpoint="admin_assign_role_permissions")
    @login_required
    @permission_required("roles", "update")
    def assign_permissions(role_id: str):
        data = request.get_json(silent=True) or {}
        roles.assign_permissions(role_id, data.get("permissions") or [])
        # the signed-in user's own role may have changed
        container.permission_service.refresh()
        return jsonify(roles.get(role_id))

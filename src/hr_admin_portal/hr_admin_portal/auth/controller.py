from __future__ import annotations

from flask import Flask, jsonify, request

from ..container import Container
from ..core.constants import LOGIN_ROUTE
from ..core.exceptions import AuthenticationError, ValidationError
from ..web.guards import login_required, safe_return_url


def register(app: Flask, container: Container) -> None:
    auth = container.auth_service
    permissions = container.permission_service

    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if request.method == "GET":
            user = auth.get_user() if auth.is_authenticated() else None
            return jsonify({"authenticated": user is not None, "user": user})

        data = request.get_json(silent=True) or request.form
        try:
            user = auth.login(data.get("email", ""), data.get("password", ""))
        except ValidationError as e:
            return jsonify({"error": str(e)}), 400
        except AuthenticationError as e:
            return jsonify({"error": str(e)}), 401

        return jsonify(
            {
                "user": user,
                "redirect": safe_return_url(request.args.get("returnUrl")),
                "permissions": permissions.summary(),
            }
        )

    @app.route("/logout", methods=["GET", "POST"], endpoint="logout")
    def logout():
        auth.logout()
        return jsonify({"message": "Logged out", "redirect": LOGIN_ROUTE})

    @app.route("/forgot-password", methods=["POST"], endpoint="forgot_password")
    def forgot_password():
        data = request.get_json(silent=True) or request.form
        return jsonify({"message": auth.forgot_password(data.get("email", ""))})

    @app.route("/reset-password", methods=["POST"], endpoint="reset_password")
    def reset_password():
        data = request.get_json(silent=True) or request.form
        message = auth.reset_password(data.get("token", ""), data.get("newPassword", ""))
        return jsonify({"message": message, "redirect": LOGIN_ROUTE})

    @app.route("/me", endpoint="me")
    @login_required
    def me():
        return jsonify(
            {
                "user": auth.require_user(),
                "fullName": auth.full_name(),
                "isSuperAdmin": auth.is_super_admin(),
                "permissions": permissions.permission_map(),
            }
        )

    @app.route("/admin/dashboard", endpoint="dashboard")
    @login_required
    def dashboard():
        return jsonify(
            {
                "user": auth.require_user(),
                "routes": permissions.accessible_routes(),
                "modules": permissions.accessible_modules(),
                "summary": permissions.summary(),
            }
        )

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
DROPDOWN_PAGE_SIZE = 50
DEFAULT_SESSION_DAYS = 7
DEFAULT_API_TIMEOUT = 15

DASHBOARD_ROUTE = "/admin/dashboard"
LOGIN_ROUTE = "/login"

# Backend endpoints that must never trigger a forced logout.
AUTH_LOGIN_ENDPOINT = "/auth/login"
AUTH_LOGOUT_ENDPOINT = "/auth/logout"

ALL_MODULES = (
    "users",
    "roles",
    "permissions",
    "attendance",
    "leave",
    "holiday",
    "tour",
    "timelog",
    "reports",
)

ALL_ACTIONS = (
    "create",
    "read",
    "update",
    "delete",
    "list",
    "approve",
    "reject",
    "export",
)

ADMIN_ROUTES = (
    "/admin/dashboard",
    "/admin/user-list",
    "/admin/leave/list",
    "/admin/timelog/list",
    "/admin/roles/list",
    "/admin/holiday/list",
    "/admin/tour/list",
)

ROUTE_PERMISSIONS = {
    "/admin/user-list": "users:list",
    "/admin/leave/list": "leave:list",
    "/admin/timelog/list": "timelog:list",
    "/admin/roles/list": "roles:list",
    "/admin/holiday/list": "holiday:list",
    "/admin/tour/list": "tour:list",
}

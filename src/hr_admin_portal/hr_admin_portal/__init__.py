"""HR admin portal.

A Flask backend-for-frontend over the HR REST API: session handling,
role/permission checks, and the leave, tour, holiday, user, role,
attendance and audit-log screens.
"""

from __future__ import annotations

from enum import Enum


class PermissionAction(str, Enum):
    """Actions a role can be granted on a module."""

    CREATE = "create"
    READ = "read"
    UPDATE = "update"
    DELETE = "delete"
    LIST = "list"
    APPROVE = "approve"
    REJECT = "reject"
    EXPORT = "export"


class PermissionModule(str, Enum):
    """Modules that permissions are granted on."""

    USERS = "users"
    ROLES = "roles"
    PERMISSIONS = "permissions"
    ATTENDANCE = "attendance"
    LEAVE = "leave"
    HOLIDAY = "holiday"
    TOUR = "tour"
    TIMELOG = "timelog"
    REPORTS = "reports"


class LeaveStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    CANCELLED = "cancelled"


class LeaveType(str, Enum):
    FULL_DAY = "full-day"
    HALF_DAY = "half-day"
    SICK = "sick"
    CASUAL = "casual"
    ANNUAL = "annual"
    OTHER = "other"


class HalfDayType(str, Enum):
    MORNING = "morning"
    AFTERNOON = "afternoon"


class TourStatus(str, Enum):
    """Field-visit workflow states."""

    PENDING = "pending"
    ASSIGNED = "assigned"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    APPROVED = "approved"
    REJECTED = "rejected"


class AttendanceStatus(str, Enum):
    """Status values an admin may set on an attendance record."""

    PRESENT = "present"
    ABSENT = "absent"
    LATE = "late"
    HALF_DAY = "half-day"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"

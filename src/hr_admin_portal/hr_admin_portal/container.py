from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import requests

from .api.client import ApiClient, ApiConfig
from .attendance.http_attendance_repository import HttpAttendanceRepository
from .attendance.service import AttendanceService, TimelogService
from .audit_logs.http_audit_log_repository import HttpAuditLogRepository
from .audit_logs.service import AuditLogService
from .auth.http_auth_repository import HttpAuthRepository
from .auth.service import AuthService
from .auth.session_store import FlaskSessionStore, SessionStore
from .holidays.http_holiday_repository import HttpHolidayRepository
from .holidays.service import HolidayService
from .leave.http_leave_repository import HttpLeaveRepository
from .leave.service import LeaveService
from .permissions.service import PermissionService
from .roles.http_role_repository import HttpRoleRepository
from .roles.service import RolesService
from .tours.http_tour_repository import HttpTourRepository
from .tours.service import TourService
from .users.http_user_repository import HttpLocationRepository, HttpUserRepository
from .users.service import UserService


@dataclass(frozen=True)
class Container:
    client: ApiClient
    session_store: SessionStore

    auth_service: AuthService
    permission_service: PermissionService
    user_service: UserService
    roles_service: RolesService
    leave_service: LeaveService
    holiday_service: HolidayService
    tour_service: TourService
    attendance_service: AttendanceService
    timelog_service: TimelogService
    audit_log_service: AuditLogService


def build_container(
    *,
    api_config: dict | ApiConfig,
    session_store: Optional[SessionStore] = None,
    http_session: Optional[requests.Session] = None,
) -> Container:
    if not isinstance(api_config, ApiConfig):
        api_config = ApiConfig(
            base_url=str(api_config["base_url"]),
            timeout=float(api_config.get("timeout", 15)),
            extra_headers=dict(api_config.get("extra_headers") or {}),
        )
    store = session_store or FlaskSessionStore()

    client = ApiClient(api_config, token_provider=store.get_token, http_session=http_session)

    auth_service = AuthService(HttpAuthRepository(client), store)
    # 401/403 from any data endpoint drops the local session.
    client.on_unauthorized = auth_service.handle_unauthorized

    attendance_repo = HttpAttendanceRepository(client)

    return Container(
        client=client,
        session_store=store,
        auth_service=auth_service,
        permission_service=PermissionService(auth_service),
        user_service=UserService(HttpUserRepository(client), HttpLocationRepository(client)),
        roles_service=RolesService(HttpRoleRepository(client)),
        leave_service=LeaveService(HttpLeaveRepository(client)),
        holiday_service=HolidayService(HttpHolidayRepository(client)),
        tour_service=TourService(HttpTourRepository(client)),
        attendance_service=AttendanceService(attendance_repo),
        timelog_service=TimelogService(attendance_repo),
        audit_log_service=AuditLogService(HttpAuditLogRepository(client)),
    )

from __future__ import annotations

from ..api.client import ApiClient
from ..api.envelope import unwrap
from .repository import AuthRepository


class HttpAuthRepository(AuthRepository):
    def __init__(self, client: ApiClient):
        self._client = client

    def login(self, *, email: str, password: str) -> dict:
        payload = self._client.post("/auth/login", {"email": email, "password": password}) or {}
        if "access_token" in payload:
            return payload
        return unwrap(payload) or {}

    def logout(self, *, token: str) -> None:
        self._client.post("/auth/logout", {}, token=token)

    def send_otp(self, *, email: str) -> dict:
        return self._client.post("/auth/send-otp", {"email": email}) or {}

    def reset_password(self, *, token: str, new_password: str) -> dict:
        return self._client.post("/auth/reset-password", {"token": token, "newPassword": new_password}) or {}

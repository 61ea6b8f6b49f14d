from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

import requests

from ..common.query import build_params
from ..core.constants import AUTH_LOGIN_ENDPOINT, AUTH_LOGOUT_ENDPOINT, DEFAULT_API_TIMEOUT
from ..core.exceptions import ApiError, SessionExpiredError

logger = logging.getLogger(__name__)


@dataclass
class ApiConfig:
    base_url: str
    timeout: float = DEFAULT_API_TIMEOUT
    extra_headers: dict[str, str] = field(default_factory=dict)


def _error_message(payload: Any, fallback: str) -> str:
    if isinstance(payload, dict):
        message = payload.get("message")
        if isinstance(message, list) and message:
            return str(message[0])
        if message:
            return str(message)
        if payload.get("error"):
            return str(payload["error"])
    return fallback


class ApiClient:
    """Thin wrapper around ``requests.Session`` for the HR backend.

    Every request carries the bearer token from ``token_provider``. A 401/403
    on anything but the login/logout endpoints calls ``on_unauthorized`` (which
    clears the local session) and raises ``SessionExpiredError``.
    """

    def __init__(
        self,
        config: ApiConfig,
        *,
        token_provider: Callable[[], Optional[str]],
        http_session: Optional[requests.Session] = None,
        on_unauthorized: Optional[Callable[[], None]] = None,
    ):
        self._config = config
        self._token_provider = token_provider
        self._http = http_session or requests.Session()
        self.on_unauthorized = on_unauthorized

    @property
    def base_url(self) -> str:
        return self._config.base_url.rstrip("/")

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}{endpoint}"

    def _headers(self, *, json_body: bool = True, token: Optional[str] = None) -> dict[str, str]:
        headers = dict(self._config.extra_headers)
        if json_body:
            headers["Content-Type"] = "application/json"
        token = token or self._token_provider()
        if token:
            headers["Authorization"] = f"Bearer {token}"
        return headers

    def _request(
        self,
        method: str,
        endpoint: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        files: Any = None,
        token: Optional[str] = None,
    ) -> Any:
        url = self.url_for(endpoint)
        logger.debug("%s %s", method, url)
        try:
            resp = self._http.request(
                method,
                url,
                params=build_params(params) or None,
                json=json,
                files=files,
                headers=self._headers(json_body=files is None, token=token),
                timeout=self._config.timeout,
            )
        except requests.RequestException as e:
            logger.warning("Backend unreachable for %s %s: %s", method, url, e)
            raise ApiError("Unable to reach the server. Please try again.", status_code=0)

        payload = self._decode(resp)
        if 200 <= resp.status_code < 300:
            return payload

        if resp.status_code in (401, 403) and not self._is_auth_endpoint(endpoint):
            logger.info("Unauthorized response for %s %s, clearing session", method, url)
            if self.on_unauthorized is not None:
                self.on_unauthorized()
            raise SessionExpiredError(_error_message(payload, "Your session has expired. Please log in again."))

        message = _error_message(payload, f"Request failed with status {resp.status_code}")
        logger.warning("%s %s failed: %s %s", method, url, resp.status_code, message)
        raise ApiError(message, status_code=resp.status_code, payload=payload)

    @staticmethod
    def _decode(resp) -> Any:
        if resp.status_code == 204 or not resp.content:
            return None
        try:
            return resp.json()
        except ValueError:
            return {"message": resp.text}

    @staticmethod
    def _is_auth_endpoint(endpoint: str) -> bool:
        return AUTH_LOGIN_ENDPOINT in endpoint or AUTH_LOGOUT_ENDPOINT in endpoint

    def get(self, endpoint: str, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._request("GET", endpoint, params=params)

    def post(self, endpoint: str, data: Any = None, *, token: Optional[str] = None) -> Any:
        """POST JSON; ``token`` overrides the stored one (used by logout after clearing)."""
        return self._request("POST", endpoint, json=data if data is not None else {}, token=token)

    def put(self, endpoint: str, data: Any = None) -> Any:
        return self._request("PUT", endpoint, json=data if data is not None else {})

    def patch(self, endpoint: str, data: Any = None) -> Any:
        return self._request("PATCH", endpoint, json=data if data is not None else {})

    def delete(self, endpoint: str) -> Any:
        return self._request("DELETE", endpoint)

    def post_form(self, endpoint: str, files: Mapping[str, Any]) -> Any:
        """Multipart POST; requests sets the boundary header itself."""
        return self._request("POST", endpoint, files=files)

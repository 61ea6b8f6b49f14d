from __future__ import annotations

from typing import Protocol


class AuthRepository(Protocol):
    def login(self, *, email: str, password: str) -> dict:
        """Return the raw login payload: ``{access_token, user}``."""

        raise NotImplementedError

    def logout(self, *, token: str) -> None:
        raise NotImplementedError

    def send_otp(self, *, email: str) -> dict:
        raise NotImplementedError

    def reset_password(self, *, token: str, new_password: str) -> dict:
        raise NotImplementedError

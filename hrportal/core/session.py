"""Client-side session state.

The browser holds two cookies: ``clientId`` and the ``isAuthenticated`` flag.
Views never read them directly; they receive a ``SessionState`` built once per
request.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum

from pydantic import BaseModel
from starlette.responses import Response

from hrportal.core.config import Settings

CLIENT_ID_COOKIE = "clientId"
AUTH_COOKIE = "isAuthenticated"


class SessionStatus(str, Enum):
    ANONYMOUS = "anonymous"
    AUTHENTICATED = "authenticated"


class SessionState(BaseModel):
    status: SessionStatus = SessionStatus.ANONYMOUS
    client_id: str | None = None

    model_config = {"frozen": True}

    @classmethod
    def anonymous(cls) -> SessionState:
        return cls()

    @classmethod
    def authenticated(cls, client_id: str) -> SessionState:
        if not client_id:
            raise ValueError("An authenticated session requires a client ID")
        return cls(status=SessionStatus.AUTHENTICATED, client_id=client_id)

    @classmethod
    def from_cookies(cls, cookies: Mapping[str, str]) -> SessionState:
        client_id = (cookies.get(CLIENT_ID_COOKIE) or "").strip()
        if cookies.get(AUTH_COOKIE) == "true" and client_id:
            return cls.authenticated(client_id)
        return cls.anonymous()

    @property
    def is_authenticated(self) -> bool:
        return self.status is SessionStatus.AUTHENTICATED


def persist_session(response: Response, state: SessionState, settings: Settings) -> None:
    if not state.is_authenticated or state.client_id is None:
        raise ValueError("Only authenticated sessions can be persisted")
    for key, value in ((CLIENT_ID_COOKIE, state.client_id), (AUTH_COOKIE, "true")):
        response.set_cookie(
            key,
            value,
            httponly=True,
            samesite="lax",
            secure=settings.COOKIE_SECURE,
        )


def clear_session(response: Response) -> None:
    # clientId stays; the next login overwrites it
    response.delete_cookie(AUTH_COOKIE)

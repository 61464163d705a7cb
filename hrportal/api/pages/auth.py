from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from hrportal.core.config import settings
from hrportal.core.dependencies import get_hr_api, get_session_state
from hrportal.core.session import SessionState, persist_session
from hrportal.core.templates import render_page
from hrportal.services.hr_api import CONNECTION_ERROR_MESSAGE, HrApiClient, HrApiError
from hrportal.services.shell import logout as clear_login

logger = logging.getLogger(__name__)

router = APIRouter(tags=["auth"])

CLIENT_ID_REQUIRED_MESSAGE = "Client ID is required"
INVALID_CLIENT_ID_MESSAGE = "Invalid client ID"


@router.get("/login", response_class=HTMLResponse)
async def login_page(
    request: Request,
    session: SessionState = Depends(get_session_state),  # noqa: B008
):
    if session.is_authenticated:
        return RedirectResponse("/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    return render_page(request, "login.html", session, {"client_id": "", "error": None})


@router.post("/login", response_class=HTMLResponse)
async def login(
    request: Request,
    client_id: str = Form(""),
    api: HrApiClient = Depends(get_hr_api),  # noqa: B008
):
    anonymous = SessionState.anonymous()
    client_id = client_id.strip()

    def _error(message: str, status_code: int) -> HTMLResponse:
        return render_page(
            request,
            "login.html",
            anonymous,
            {"client_id": client_id, "error": message},
            status_code=status_code,
        )

    if not client_id:
        return _error(CLIENT_ID_REQUIRED_MESSAGE, status.HTTP_400_BAD_REQUEST)

    try:
        response = await api.get_organization_info(client_id)
    except HrApiError:
        logger.exception("Login failed: could not reach HR API")
        return _error(CONNECTION_ERROR_MESSAGE, status.HTTP_502_BAD_GATEWAY)

    if response.status != 200:
        logger.info("Login rejected for client=%s (status=%d)", client_id, response.status)
        return _error(INVALID_CLIENT_ID_MESSAGE, status.HTTP_401_UNAUTHORIZED)

    redirect = RedirectResponse("/dashboard", status_code=status.HTTP_303_SEE_OTHER)
    persist_session(redirect, SessionState.authenticated(client_id), settings)
    logger.info("Client %s logged in", client_id)
    return redirect


@router.post("/logout")
async def logout():
    redirect = RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
    clear_login(redirect)
    return redirect

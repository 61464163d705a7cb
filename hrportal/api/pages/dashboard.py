from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse

from hrportal.core.dependencies import get_hr_api, get_session_state
from hrportal.core.session import SessionState
from hrportal.core.templates import render_page
from hrportal.services.hr_api import CONNECTION_ERROR_MESSAGE, HrApiClient, HrApiError

logger = logging.getLogger(__name__)

router = APIRouter(tags=["dashboard"])

ORG_FETCH_FAILED_MESSAGE = "Failed to fetch organization data"


@router.get("/")
async def index(session: SessionState = Depends(get_session_state)):  # noqa: B008
    target = "/dashboard" if session.is_authenticated else "/login"
    return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)


@router.get("/dashboard", response_class=HTMLResponse)
async def dashboard(
    request: Request,
    session: SessionState = Depends(get_session_state),  # noqa: B008
    api: HrApiClient = Depends(get_hr_api),  # noqa: B008
):
    if not session.is_authenticated or session.client_id is None:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    organization: dict = {}
    error: str | None = None
    try:
        response = await api.get_organization_info(session.client_id)
        if response.status == 200:
            organization = response.data
        else:
            error = ORG_FETCH_FAILED_MESSAGE
    except HrApiError:
        logger.exception("Error fetching organization for client=%s", session.client_id)
        error = CONNECTION_ERROR_MESSAGE

    return render_page(
        request,
        "dashboard.html",
        session,
        {"organization": organization, "error": error},
    )

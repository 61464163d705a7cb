from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from hrportal.core.dependencies import get_hr_api, get_session_state
from hrportal.core.session import SessionState
from hrportal.core.templates import render_page
from hrportal.models.employee import EMPLOYEE_LIST_PATH, EmployeeRegistration, OriginContext
from hrportal.services.employee_editor import EmployeeEditor
from hrportal.services.hr_api import CONNECTION_ERROR_MESSAGE, HrApiClient, HrApiError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/employees", tags=["employees"])

REGISTER_FAILED_MESSAGE = "Failed to register new employee"
INVALID_REGISTRATION_MESSAGE = "Please fill in every field with a valid value"

_REGISTRATION_FIELDS = ("first_name", "last_name", "department_id", "hire_date", "position")


@router.get("/{employee_id}/edit", response_class=HTMLResponse)
async def edit_employee_page(
    request: Request,
    employee_id: str,
    origin: str | None = Query(None),
    department_id: str | None = Query(None, alias="departmentId"),
    session: SessionState = Depends(get_session_state),  # noqa: B008
    api: HrApiClient = Depends(get_hr_api),  # noqa: B008
):
    editor = EmployeeEditor(
        api,
        session,
        employee_id.strip(),
        OriginContext.from_params(origin, department_id),
    )
    await editor.load()
    return render_page(request, "edit_employee.html", session, {"editor": editor})


@router.post("/{employee_id}/edit", response_class=HTMLResponse)
async def update_employee(
    request: Request,
    employee_id: str,
    position: str = Form(""),
    salary: str = Form(""),
    performance: str = Form(""),
    origin: str | None = Form(None),
    department_id: str | None = Form(None, alias="departmentId"),
    session: SessionState = Depends(get_session_state),  # noqa: B008
    api: HrApiClient = Depends(get_hr_api),  # noqa: B008
):
    editor = EmployeeEditor(
        api,
        session,
        employee_id.strip(),
        OriginContext.from_params(origin, department_id),
    )
    editor.apply_form(position, salary, performance)

    target = await editor.update()
    if target is not None:
        return RedirectResponse(target, status_code=status.HTTP_303_SEE_OTHER)

    return render_page(request, "edit_employee.html", session, {"editor": editor})


def _render_registration(
    request: Request,
    session: SessionState,
    values: dict[str, str],
    error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    return render_page(
        request,
        "register_employee.html",
        session,
        {"values": values, "error": error},
        status_code=status_code,
    )


@router.get("/new", response_class=HTMLResponse)
async def register_employee_page(
    request: Request,
    session: SessionState = Depends(get_session_state),  # noqa: B008
):
    if not session.is_authenticated:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
    return _render_registration(request, session, dict.fromkeys(_REGISTRATION_FIELDS, ""))


@router.post("/new", response_class=HTMLResponse)
async def register_employee(
    request: Request,
    first_name: str = Form(""),
    last_name: str = Form(""),
    department_id: str = Form(""),
    hire_date: str = Form(""),
    position: str = Form(""),
    session: SessionState = Depends(get_session_state),  # noqa: B008
    api: HrApiClient = Depends(get_hr_api),  # noqa: B008
):
    if not session.is_authenticated or session.client_id is None:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    values = {
        "first_name": first_name,
        "last_name": last_name,
        "department_id": department_id,
        "hire_date": hire_date,
        "position": position,
    }
    try:
        registration = EmployeeRegistration(**values)
    except ValidationError:
        return _render_registration(
            request, session, values, INVALID_REGISTRATION_MESSAGE, status.HTTP_400_BAD_REQUEST
        )

    try:
        response = await api.register_employee(session.client_id, registration)
    except HrApiError:
        logger.exception("Error registering employee")
        return _render_registration(request, session, values, CONNECTION_ERROR_MESSAGE)

    if not response.ok or response.data.get("status") == "failed":
        message = response.data.get("message") or REGISTER_FAILED_MESSAGE
        logger.info("Registration rejected (%d): %s", response.status, message)
        return _render_registration(request, session, values, message)

    logger.info("Registered %s for client=%s", registration.full_name, session.client_id)
    return RedirectResponse(EMPLOYEE_LIST_PATH, status_code=status.HTTP_303_SEE_OTHER)

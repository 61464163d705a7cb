from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, Form, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse
from pydantic import ValidationError

from hrportal.core.dependencies import get_session_state, get_shift_service
from hrportal.core.session import SessionState
from hrportal.core.templates import render_page
from hrportal.models.shift import DAY_NAMES, ShiftAssignment, ShiftRequest, TimeSlot
from hrportal.services.shift_service import ShiftService, ShiftServiceError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/shifts", tags=["shifts"])

INVALID_SHIFT_MESSAGE = "Invalid shift: choose an employee, a day and a time slot"


async def _render_shifts(
    request: Request,
    session: SessionState,
    service: ShiftService,
    error: str | None = None,
    status_code: int = status.HTTP_200_OK,
) -> HTMLResponse:
    shifts: list[ShiftAssignment] = []
    if session.client_id is not None:
        try:
            shifts = await service.list_shifts(session.client_id)
        except ShiftServiceError as e:
            error = error or str(e)

    return render_page(
        request,
        "shifts.html",
        session,
        {
            "shifts": shifts,
            "error": error,
            "day_names": DAY_NAMES,
            "time_slots": list(TimeSlot),
        },
        status_code=status_code,
    )


def _parse_request(employee_id: str, day_of_week: str, time_slot: str) -> ShiftRequest | None:
    try:
        return ShiftRequest(
            employee_id=int(employee_id),
            day_of_week=int(day_of_week),
            time_slot=TimeSlot(int(time_slot)),
        )
    except (ValueError, ValidationError):
        return None


@router.get("", response_class=HTMLResponse)
async def shifts_page(
    request: Request,
    session: SessionState = Depends(get_session_state),  # noqa: B008
    service: ShiftService = Depends(get_shift_service),  # noqa: B008
):
    if not session.is_authenticated:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)
    return await _render_shifts(request, session, service)


@router.post("/add", response_class=HTMLResponse)
async def add_shift(
    request: Request,
    employee_id: str = Form(""),
    day_of_week: str = Form(""),
    time_slot: str = Form(""),
    session: SessionState = Depends(get_session_state),  # noqa: B008
    service: ShiftService = Depends(get_shift_service),  # noqa: B008
):
    return await _change_shift(request, session, service, "add", employee_id, day_of_week, time_slot)


@router.post("/remove", response_class=HTMLResponse)
async def remove_shift(
    request: Request,
    employee_id: str = Form(""),
    day_of_week: str = Form(""),
    time_slot: str = Form(""),
    session: SessionState = Depends(get_session_state),  # noqa: B008
    service: ShiftService = Depends(get_shift_service),  # noqa: B008
):
    return await _change_shift(request, session, service, "remove", employee_id, day_of_week, time_slot)


async def _change_shift(
    request: Request,
    session: SessionState,
    service: ShiftService,
    action: str,
    employee_id: str,
    day_of_week: str,
    time_slot: str,
):
    if not session.is_authenticated or session.client_id is None:
        return RedirectResponse("/login", status_code=status.HTTP_303_SEE_OTHER)

    shift = _parse_request(employee_id, day_of_week, time_slot)
    if shift is None:
        return await _render_shifts(
            request, session, service, INVALID_SHIFT_MESSAGE, status.HTTP_400_BAD_REQUEST
        )

    try:
        if action == "add":
            message = await service.add_shift(session.client_id, shift)
        else:
            message = await service.remove_shift(session.client_id, shift)
    except ShiftServiceError as e:
        return await _render_shifts(request, session, service, str(e))

    logger.info("Shift %s for client=%s: %s", action, session.client_id, message)
    return RedirectResponse("/shifts", status_code=status.HTTP_303_SEE_OTHER)

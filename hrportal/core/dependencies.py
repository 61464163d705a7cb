from __future__ import annotations

from fastapi import Depends, Request

from hrportal.core.session import SessionState
from hrportal.services.hr_api import HrApiClient, hr_api_client
from hrportal.services.shift_service import ShiftService


def get_session_state(request: Request) -> SessionState:
    return SessionState.from_cookies(request.cookies)


def get_hr_api() -> HrApiClient:
    return hr_api_client


def get_shift_service(api: HrApiClient = Depends(get_hr_api)) -> ShiftService:  # noqa: B008
    return ShiftService(api)

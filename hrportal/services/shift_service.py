from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from hrportal.models.employee import ApiResponse
from hrportal.models.shift import DAY_NAMES, ShiftAssignment, ShiftRequest, TimeSlot
from hrportal.services.hr_api import CONNECTION_ERROR_MESSAGE, HrApiClient, HrApiError

logger = logging.getLogger(__name__)

LIST_FAILED_MESSAGE = "Failed to load shifts"
ADD_FAILED_MESSAGE = "Failed to add shift"
REMOVE_FAILED_MESSAGE = "Failed to remove shift"

_DAY_NUMBERS: dict[str, int] = {name.upper(): number for number, name in DAY_NAMES.items()}
_SLOT_NUMBERS: dict[str, TimeSlot] = {slot.time_range: slot for slot in TimeSlot}

# (ShiftAssignment attribute, HR API field name)
_FIELD_MAP: list[tuple[str, str]] = [
    ("employee_id", "employeeId"),
    ("employee_name", "employeeName"),
    ("day_of_week", "dayOfWeek"),
    ("time_slot", "timeSlot"),
]


class ShiftServiceError(Exception):
    pass


def _parse_day(value: Any) -> Any:
    if isinstance(value, str) and value.strip().upper() in _DAY_NUMBERS:
        return _DAY_NUMBERS[value.strip().upper()]
    return value


def _parse_slot(value: Any) -> Any:
    if isinstance(value, str):
        normalized = value.replace(" ", "")
        if normalized in _SLOT_NUMBERS:
            return _SLOT_NUMBERS[normalized]
    return value


class ShiftService:
    def __init__(self, api: HrApiClient) -> None:
        self.api = api

    async def list_shifts(self, client_id: str) -> list[ShiftAssignment]:
        response = await self._call(LIST_FAILED_MESSAGE, self.api.get_shifts(client_id))

        raw_shifts = response.data.get("shifts", response.data.get("items", []))
        if not isinstance(raw_shifts, list):
            return []

        shifts: list[ShiftAssignment] = []
        for raw in raw_shifts:
            shift = self._transform_shift(raw)
            if shift is not None:
                shifts.append(shift)
        shifts.sort(key=lambda s: (s.day_of_week, s.time_slot, s.employee_id))
        return shifts

    async def add_shift(self, client_id: str, request: ShiftRequest) -> str:
        response = await self._call(ADD_FAILED_MESSAGE, self.api.add_shift(client_id, request))
        return response.data.get("message") or "Shift added successfully"

    async def remove_shift(self, client_id: str, request: ShiftRequest) -> str:
        response = await self._call(REMOVE_FAILED_MESSAGE, self.api.remove_shift(client_id, request))
        return response.data.get("message") or "Shift removed successfully"

    async def _call(self, failure_message: str, call: Any) -> ApiResponse:
        try:
            response: ApiResponse = await call
        except HrApiError as e:
            logger.exception("Shift request failed")
            raise ShiftServiceError(CONNECTION_ERROR_MESSAGE) from e

        if not response.ok or response.data.get("status") == "failed":
            message = response.data.get("message") or failure_message
            logger.info("Shift request rejected (%d): %s", response.status, message)
            raise ShiftServiceError(message)
        return response

    def _transform_shift(self, raw: Any) -> ShiftAssignment | None:
        if not isinstance(raw, dict):
            return None

        data: dict[str, Any] = {}
        for python_key, api_key in _FIELD_MAP:
            data[python_key] = raw.get(api_key, raw.get(python_key))

        data["day_of_week"] = _parse_day(data["day_of_week"])
        data["time_slot"] = _parse_slot(data["time_slot"])

        try:
            return ShiftAssignment(**data)
        except ValidationError:
            logger.warning("Skipping malformed shift entry: %s", raw)
            return None

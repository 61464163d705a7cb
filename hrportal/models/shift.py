"""Recurring shift assignments."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, Field

DAY_NAMES: dict[int, str] = {
    1: "Monday",
    2: "Tuesday",
    3: "Wednesday",
    4: "Thursday",
    5: "Friday",
    6: "Saturday",
    7: "Sunday",
}


class TimeSlot(IntEnum):
    MORNING = 0
    AFTERNOON = 1
    EVENING = 2

    @property
    def time_range(self) -> str:
        return _TIME_RANGES[self]


_TIME_RANGES: dict[TimeSlot, str] = {
    TimeSlot.MORNING: "9:00-12:00",
    TimeSlot.AFTERNOON: "14:00-17:00",
    TimeSlot.EVENING: "18:00-21:00",
}


class ShiftRequest(BaseModel):
    """Identifies one shift assignment for add/remove calls."""

    employee_id: int
    day_of_week: int = Field(..., ge=1, le=7)
    time_slot: TimeSlot

    def to_params(self) -> dict[str, str]:
        return {
            "employeeId": str(self.employee_id),
            "dayOfWeek": str(self.day_of_week),
            "timeSlot": str(int(self.time_slot)),
        }


class ShiftAssignment(ShiftRequest):
    employee_name: str | None = None

    @property
    def day_name(self) -> str:
        return DAY_NAMES[self.day_of_week]

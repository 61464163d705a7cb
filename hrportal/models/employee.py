"""Employee models for the record editor and the HR API payloads."""

from __future__ import annotations

import math
from datetime import date
from typing import Any, Literal
from urllib.parse import quote

from pydantic import BaseModel, Field

Number = int | float

DEPARTMENT_ORIGIN = "department"
EMPLOYEES_ORIGIN = "employees"
EMPLOYEE_LIST_PATH = "/employees"


def parse_number(raw: Any) -> Number | None:
    """Parse a numeric form or API value; anything unusable becomes None."""
    if raw is None or isinstance(raw, bool):
        return None
    candidate = raw if isinstance(raw, int | float) else str(raw).strip()
    if candidate == "":
        return None
    try:
        value = float(candidate)
    except (ValueError, OverflowError):
        return None
    if not math.isfinite(value):
        return None
    return int(value) if value.is_integer() else value


class EmployeeForm(BaseModel):
    """The editable slice of an employee record."""

    position: str = ""
    salary: Number | None = None
    performance: Number | None = None

    model_config = {"validate_assignment": True}

    @classmethod
    def from_api(cls, data: dict[str, Any]) -> EmployeeForm:
        position = data.get("position")
        return cls(
            position=str(position) if position else "",
            salary=parse_number(data.get("salary")),
            performance=parse_number(data.get("performance")),
        )


class EmployeeUpdate(BaseModel):
    """Partial update: only explicitly set fields are sent.

    ``position`` is always part of an update. ``salary`` and ``performance``
    are included only when they were passed to the constructor, so a missing
    value means "leave unchanged" on the server, never "clear".
    """

    position: str
    salary: Number | None = None
    performance: Number | None = None

    @classmethod
    def from_form(cls, form: EmployeeForm) -> EmployeeUpdate:
        fields: dict[str, Any] = {"position": form.position}
        if form.salary is not None:
            fields["salary"] = form.salary
        if form.performance is not None:
            fields["performance"] = form.performance
        return cls(**fields)

    def payload(self) -> dict[str, Any]:
        return self.model_dump(include={"position"} | self.model_fields_set)


class EmployeeRegistration(BaseModel):
    """A new hire as sent to the HR API's register call."""

    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)
    department_id: int = Field(ge=0)
    hire_date: date
    position: str = Field(min_length=1)

    model_config = {"str_strip_whitespace": True}

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"

    def to_params(self) -> dict[str, str]:
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "departmentId": str(self.department_id),
            "hireDate": self.hire_date.isoformat(),
            "position": self.position,
        }


class OriginContext(BaseModel):
    """Where the editor was opened from; decides the post-update redirect."""

    origin: Literal["department", "employees"] = EMPLOYEES_ORIGIN
    department_id: str | None = None

    @classmethod
    def from_params(cls, origin: str | None, department_id: str | None) -> OriginContext:
        department_id = (department_id or "").strip() or None
        if origin == DEPARTMENT_ORIGIN:
            return cls(origin=DEPARTMENT_ORIGIN, department_id=department_id)
        return cls(department_id=department_id)

    @property
    def from_department(self) -> bool:
        return self.origin == DEPARTMENT_ORIGIN and self.department_id is not None

    def redirect_target(self) -> str:
        if self.from_department:
            return f"/departments/{quote(self.department_id, safe='')}/edit"
        return EMPLOYEE_LIST_PATH

    @property
    def back_label(self) -> str:
        return "Back to Edit Department" if self.from_department else "Back to Employees"


class ApiResponse(BaseModel):
    status: int
    data: dict[str, Any] = {}

    @property
    def ok(self) -> bool:
        return 200 <= self.status < 300

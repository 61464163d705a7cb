"""Fetch/edit/update flow behind the employee edit page."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Protocol

from hrportal.core.session import SessionState
from hrportal.models.employee import (
    ApiResponse,
    EmployeeForm,
    EmployeeUpdate,
    OriginContext,
    parse_number,
)
from hrportal.services.hr_api import CONNECTION_ERROR_MESSAGE, HrApiError

logger = logging.getLogger(__name__)

MISSING_IDS_MESSAGE = "Missing client ID or employee ID"
FETCH_FAILED_MESSAGE = "Failed to fetch employee data"
UPDATE_FAILED_MESSAGE = "Failed to update employee"


class EmployeeApi(Protocol):
    async def get_employee_info(self, client_id: str, employee_id: str) -> ApiResponse: ...

    async def update_employee_info(
        self, client_id: str, employee_id: str, update: EmployeeUpdate
    ) -> ApiResponse: ...


class EditorState(str, Enum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class EditorStateError(Exception):
    pass


class EmployeeEditor:
    """One page visit of the employee editor.

    Starts in ``LOADING``; ``load()`` moves it to ``READY`` or ``ERROR``.
    The form stays renderable in ``ERROR`` since its fields keep their
    defaults. ``update()`` reports failures through ``error`` and never
    raises for API problems.
    """

    def __init__(
        self,
        api: EmployeeApi,
        session: SessionState,
        employee_id: str | None,
        origin: OriginContext | None = None,
    ) -> None:
        self.api = api
        self.session = session
        self.employee_id = employee_id
        self.origin = origin or OriginContext()
        self.form = EmployeeForm()
        self.state = EditorState.LOADING
        self.error: str | None = None

    @property
    def loading(self) -> bool:
        return self.state is EditorState.LOADING

    def _ids(self) -> tuple[str, str] | None:
        client_id = self.session.client_id
        if not client_id or not self.employee_id:
            return None
        return client_id, self.employee_id

    async def load(self) -> EditorState:
        self.state = EditorState.LOADING
        self.error = None

        ids = self._ids()
        if ids is None:
            return self._fail(MISSING_IDS_MESSAGE)
        client_id, employee_id = ids

        try:
            response = await self.api.get_employee_info(client_id, employee_id)
        except HrApiError:
            logger.exception("Error fetching employee data for employee=%s", employee_id)
            return self._fail(CONNECTION_ERROR_MESSAGE)

        if response.status != 200:
            logger.info("Employee fetch for employee=%s returned %d", employee_id, response.status)
            return self._fail(FETCH_FAILED_MESSAGE)

        self.form = EmployeeForm.from_api(response.data)
        self.state = EditorState.READY
        return self.state

    def _fail(self, message: str) -> EditorState:
        self.error = message
        self.state = EditorState.ERROR
        return self.state

    def set_position(self, value: str) -> None:
        self.form.position = value

    def set_salary(self, raw: Any) -> None:
        self.form.salary = parse_number(raw)

    def set_performance(self, raw: Any) -> None:
        self.form.performance = parse_number(raw)

    def apply_form(self, position: str, salary: Any, performance: Any) -> None:
        self.set_position(position)
        self.set_salary(salary)
        self.set_performance(performance)
        self.state = EditorState.READY

    async def update(self) -> str | None:
        """Submit the form; returns the redirect target on success."""
        if self.loading:
            raise EditorStateError("Cannot update an employee that is still loading")

        ids = self._ids()
        if ids is None:
            self.error = MISSING_IDS_MESSAGE
            return None
        client_id, employee_id = ids

        update = EmployeeUpdate.from_form(self.form)
        try:
            response = await self.api.update_employee_info(client_id, employee_id, update)
        except HrApiError:
            logger.exception("Error updating employee=%s", employee_id)
            self.error = CONNECTION_ERROR_MESSAGE
            return None

        if response.status != 200:
            logger.info("Employee update for employee=%s returned %d", employee_id, response.status)
            self.error = UPDATE_FAILED_MESSAGE
            return None

        logger.info("Employee %s updated (fields=%s)", employee_id, sorted(update.payload()))
        return self.origin.redirect_target()

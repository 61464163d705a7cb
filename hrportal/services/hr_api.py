"""aiohttp client for the external HR API."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import aiohttp

from hrportal.core.config import Settings
from hrportal.models.employee import ApiResponse, EmployeeRegistration, EmployeeUpdate
from hrportal.models.shift import ShiftRequest

logger = logging.getLogger(__name__)

CONNECTION_ERROR_MESSAGE = "Error connecting to the server"


class HrApiError(Exception):
    pass


class HrApiNotConfiguredError(HrApiError):
    pass


class HrApiConnectionError(HrApiError):
    pass


class HrApiClient:
    def __init__(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = 0.0

    async def initialize(self, settings: Settings) -> None:
        if self.initialized:
            return

        if not settings.HR_API_BASE_URL:
            logger.warning("HR API base URL missing, HrApiClient not initialized")
            return

        self.base_url = settings.HR_API_BASE_URL.rstrip("/")
        self.timeout_seconds = settings.HR_API_TIMEOUT_SECONDS
        self.initialized = True
        logger.info("HrApiClient initialized (base_url=%s)", self.base_url)

    async def close(self) -> None:
        self.initialized = False
        self.base_url = ""
        self.timeout_seconds = 0.0

    async def get_employee_info(self, client_id: str, employee_id: str) -> ApiResponse:
        return await self._request("GET", "/getEmpInfo", params={"cid": client_id, "eid": employee_id})

    async def update_employee_info(
        self,
        client_id: str,
        employee_id: str,
        update: EmployeeUpdate,
    ) -> ApiResponse:
        return await self._request(
            "PATCH",
            "/updateEmpInfo",
            params={"cid": client_id, "eid": employee_id},
            json=update.payload(),
        )

    async def register_employee(self, client_id: str, registration: EmployeeRegistration) -> ApiResponse:
        return await self._request("POST", "/register", params={"cid": client_id, **registration.to_params()})

    async def get_organization_info(self, client_id: str) -> ApiResponse:
        return await self._request("GET", "/getOrgInfo", params={"cid": client_id})

    async def get_shifts(self, client_id: str) -> ApiResponse:
        return await self._request("GET", "/getShift", params={"cid": client_id})

    async def add_shift(self, client_id: str, request: ShiftRequest) -> ApiResponse:
        return await self._request("POST", "/addShift", params={"cid": client_id, **request.to_params()})

    async def remove_shift(self, client_id: str, request: ShiftRequest) -> ApiResponse:
        return await self._request("DELETE", "/removeShift", params={"cid": client_id, **request.to_params()})

    async def check_connection(self) -> bool:
        if not self.initialized:
            return False

        try:
            timeout = aiohttp.ClientTimeout(total=10)
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(f"{self.base_url}/") as response:
                    return response.status < 500
        except Exception:
            logger.exception("HrApiClient connection check failed")
            return False

    async def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str],
        json: dict[str, Any] | None = None,
    ) -> ApiResponse:
        if not self.initialized:
            raise HrApiNotConfiguredError("HrApiClient not initialized")

        url = f"{self.base_url}{path}"
        timeout = aiohttp.ClientTimeout(total=self.timeout_seconds)
        kwargs: dict[str, Any] = {"params": params}
        if json is not None:
            kwargs["json"] = json

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.request(method, url, **kwargs) as response:
                    data = await self._read_json(response)
                    logger.debug("%s %s -> %d", method, path, response.status)
                    return ApiResponse(status=response.status, data=data)
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise HrApiConnectionError(f"{method} {path} failed: {e!r}") from e

    @staticmethod
    async def _read_json(response: aiohttp.ClientResponse) -> dict[str, Any]:
        try:
            body = await response.json(content_type=None)
        except ValueError:
            return {}
        if isinstance(body, dict):
            return body
        if isinstance(body, list):
            return {"items": body}
        return {}


hr_api_client = HrApiClient()

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock

import pytest
from starlette.testclient import TestClient

from hrportal.core.dependencies import get_hr_api
from hrportal.core.session import AUTH_COOKIE, CLIENT_ID_COOKIE, SessionState
from hrportal.main import app
from hrportal.models.employee import ApiResponse
from hrportal.services.hr_api import HrApiClient

TEST_CLIENT_ID = "client-42"


def api_response(http_status: int = 200, **data) -> ApiResponse:
    return ApiResponse(status=http_status, data=data)


@pytest.fixture
def mock_api() -> MagicMock:
    api = MagicMock(spec=HrApiClient)
    api.initialized = True
    api.get_employee_info = AsyncMock(
        return_value=api_response(position="Engineer", salary=5000, performance=4.5)
    )
    api.update_employee_info = AsyncMock(return_value=api_response())
    api.register_employee = AsyncMock(
        return_value=api_response(201, status="success", message="Employee registered")
    )
    api.get_organization_info = AsyncMock(return_value=api_response(name="Acme Corp"))
    api.get_shifts = AsyncMock(return_value=api_response(status="success", shifts=[]))
    api.add_shift = AsyncMock(return_value=api_response(status="success", message="Shift added"))
    api.remove_shift = AsyncMock(return_value=api_response(status="success", message="Shift removed"))
    api.check_connection = AsyncMock(return_value=True)
    return api


@pytest.fixture
def authenticated_session() -> SessionState:
    return SessionState.authenticated(TEST_CLIENT_ID)


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def api_client(mock_api):
    app.dependency_overrides[get_hr_api] = lambda: mock_api
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def authenticated_client(api_client):
    api_client.cookies.set(CLIENT_ID_COOKIE, TEST_CLIENT_ID)
    api_client.cookies.set(AUTH_COOKIE, "true")
    return api_client

from __future__ import annotations

from hrportal.api.pages.employees import INVALID_REGISTRATION_MESSAGE, REGISTER_FAILED_MESSAGE
from hrportal.services.employee_editor import FETCH_FAILED_MESSAGE, MISSING_IDS_MESSAGE, UPDATE_FAILED_MESSAGE
from hrportal.services.hr_api import CONNECTION_ERROR_MESSAGE, HrApiConnectionError
from tests.conftest import TEST_CLIENT_ID, api_response


def test_edit_page_renders_loaded_fields(authenticated_client, mock_api):
    response = authenticated_client.get("/employees/17/edit")

    assert response.status_code == 200
    body = response.text
    assert "Edit Employee" in body
    assert 'value="Engineer"' in body
    assert 'value="5000"' in body
    assert 'value="4.5"' in body
    assert "Back to Employees" in body
    assert "Log Out" in body
    mock_api.get_employee_info.assert_awaited_once_with(TEST_CLIENT_ID, "17")


def test_edit_page_from_department_links_back(authenticated_client):
    response = authenticated_client.get("/employees/17/edit?origin=department&departmentId=7")

    assert response.status_code == 200
    assert "Back to Edit Department" in response.text
    assert 'href="/departments/7/edit"' in response.text
    assert 'name="departmentId" value="7"' in response.text


def test_edit_page_not_found_shows_message_and_empty_form(authenticated_client, mock_api):
    mock_api.get_employee_info.return_value = api_response(404)

    response = authenticated_client.get("/employees/17/edit")

    assert response.status_code == 200
    assert FETCH_FAILED_MESSAGE in response.text
    assert 'id="position" name="position" type="text" value=""' in response.text


def test_edit_page_with_out_of_range_salary_renders(authenticated_client, mock_api):
    mock_api.get_employee_info.return_value = api_response(position="CEO", salary=10**400)

    response = authenticated_client.get("/employees/17/edit")

    assert response.status_code == 200
    assert 'value="CEO"' in response.text
    assert FETCH_FAILED_MESSAGE not in response.text


def test_edit_page_without_session_does_not_call_api(api_client, mock_api):
    response = api_client.get("/employees/17/edit")

    assert response.status_code == 200
    assert MISSING_IDS_MESSAGE in response.text
    assert "Log Out" not in response.text
    mock_api.get_employee_info.assert_not_awaited()


def test_update_redirects_to_employee_list(authenticated_client, mock_api):
    response = authenticated_client.post(
        "/employees/17/edit",
        data={"position": "Lead", "salary": "10", "performance": ""},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/employees"
    client_id, employee_id, update = mock_api.update_employee_info.call_args.args
    assert (client_id, employee_id) == (TEST_CLIENT_ID, "17")
    assert update.payload() == {"position": "Lead", "salary": 10}


def test_update_redirects_to_department(authenticated_client):
    response = authenticated_client.post(
        "/employees/17/edit",
        data={"position": "Lead", "origin": "department", "departmentId": "7"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/departments/7/edit"


def test_update_escapes_department_id_in_redirect(authenticated_client):
    response = authenticated_client.post(
        "/employees/17/edit",
        data={"position": "Lead", "origin": "department", "departmentId": "7?x=1"},
        follow_redirects=False,
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/departments/7%3Fx%3D1/edit"


def test_update_rejected_rerenders_with_error(authenticated_client, mock_api):
    mock_api.update_employee_info.return_value = api_response(500)

    response = authenticated_client.post(
        "/employees/17/edit",
        data={"position": "Lead", "salary": "abc"},
        follow_redirects=False,
    )

    assert response.status_code == 200
    assert UPDATE_FAILED_MESSAGE in response.text
    assert 'value="Lead"' in response.text
    assert 'value="abc"' not in response.text


def test_update_transport_error_does_not_navigate(authenticated_client, mock_api):
    mock_api.update_employee_info.side_effect = HrApiConnectionError("down")

    response = authenticated_client.post(
        "/employees/17/edit",
        data={"position": "Lead", "origin": "department", "departmentId": "7"},
        follow_redirects=False,
    )

    assert response.status_code == 200
    assert "location" not in response.headers
    assert CONNECTION_ERROR_MESSAGE in response.text


REGISTRATION_FORM = {
    "first_name": "Ada",
    "last_name": "Lovelace",
    "department_id": "3",
    "hire_date": "2024-02-01",
    "position": "Analyst",
}


def test_register_page_requires_session(api_client):
    response = api_client.get("/employees/new", follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/login"


def test_register_page_renders_empty_form(authenticated_client):
    response = authenticated_client.get("/employees/new")

    assert response.status_code == 200
    assert "Add Employee" in response.text
    assert 'id="first_name" name="first_name" type="text" value=""' in response.text
    assert "Back to Employees" in response.text


def test_register_redirects_to_employee_list(authenticated_client, mock_api):
    response = authenticated_client.post("/employees/new", data=REGISTRATION_FORM, follow_redirects=False)

    assert response.status_code == 303
    assert response.headers["location"] == "/employees"
    client_id, registration = mock_api.register_employee.call_args.args
    assert client_id == TEST_CLIENT_ID
    assert registration.to_params()["hireDate"] == "2024-02-01"
    assert registration.department_id == 3


def test_register_invalid_input_does_not_call_api(authenticated_client, mock_api):
    response = authenticated_client.post(
        "/employees/new",
        data={**REGISTRATION_FORM, "department_id": "sales", "hire_date": ""},
        follow_redirects=False,
    )

    assert response.status_code == 400
    assert INVALID_REGISTRATION_MESSAGE in response.text
    assert 'value="Ada"' in response.text
    mock_api.register_employee.assert_not_awaited()


def test_register_rejection_shows_api_message(authenticated_client, mock_api):
    mock_api.register_employee.return_value = api_response(
        400, status="failed", message="Department does not exist"
    )

    response = authenticated_client.post("/employees/new", data=REGISTRATION_FORM, follow_redirects=False)

    assert response.status_code == 200
    assert "Department does not exist" in response.text
    assert 'value="Lovelace"' in response.text


def test_register_rejection_without_message(authenticated_client, mock_api):
    mock_api.register_employee.return_value = api_response(500)

    response = authenticated_client.post("/employees/new", data=REGISTRATION_FORM, follow_redirects=False)

    assert response.status_code == 200
    assert REGISTER_FAILED_MESSAGE in response.text


def test_register_transport_error_shows_connection_message(authenticated_client, mock_api):
    mock_api.register_employee.side_effect = HrApiConnectionError("down")

    response = authenticated_client.post("/employees/new", data=REGISTRATION_FORM, follow_redirects=False)

    assert response.status_code == 200
    assert "location" not in response.headers
    assert CONNECTION_ERROR_MESSAGE in response.text


def test_register_requires_session(api_client, mock_api):
    response = api_client.post("/employees/new", data=REGISTRATION_FORM, follow_redirects=False)

    assert response.status_code == 303
    mock_api.register_employee.assert_not_awaited()

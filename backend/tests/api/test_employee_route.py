"""Employee route - POST /api/employee contract.

Invariants:
    - Valid body → 200 echoing the body in camelCase
    - Rule failures → 400 with ordered details in the error envelope
    - Malformed body → 400 VALIDATION_ERROR (never 422)
"""

import pytest

from app.core.format_checks import subtract_years


def _body(today, **overrides) -> dict:
    body = {
        "name": "Jonathan Doe",
        "dateOfBirth": subtract_years(today, 25).isoformat(),
        "email": "jonathan.doe@company.com",
        "phone": "+1 555 123 4567",
        "hourlySalary": 120.0,
    }
    body.update(overrides)
    return body


async def test_valid_employee_is_echoed(client, today):
    body = _body(today)
    res = await client.post("/api/employee", json=body)
    assert res.status_code == 200
    assert res.json() == body


async def test_senior_below_minimum_returns_400(client, today):
    res = await client.post("/api/employee", json=_body(
        today, dateOfBirth=subtract_years(today, 40).isoformat(),
        email="", phone="", hourlySalary=150,
    ))
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "RECORD_VALIDATION_FAILED"
    assert error["record_type"] == "employee"
    assert error["details"] == [{
        "field": "hourlySalary",
        "message": "Minimum hourly salary is not valid.",
        "code": "SALARY_BELOW_MINIMUM",
        "attempted_value": 150.0,
    }]


async def test_every_failure_is_reported_in_order(client, today):
    res = await client.post("/api/employee", json={
        "name": "Bob", "dateOfBirth": "1900-01-01",
        "email": "bad-email", "phone": "phone", "hourlySalary": 1000,
    })
    assert res.status_code == 400
    details = res.json()["error"]["details"]
    assert [d["field"] for d in details] == [
        "name", "dateOfBirth", "email", "phone", "hourlySalary",
    ]
    assert details[1]["attempted_value"] == "1900-01-01"


async def test_missing_salary_defaults_to_zero_and_fails(client, today):
    body = _body(today)
    del body["hourlySalary"]
    res = await client.post("/api/employee", json=body)
    assert res.status_code == 400
    assert [d["code"] for d in res.json()["error"]["details"]] == [
        "SALARY_OUT_OF_RANGE", "SALARY_BELOW_MINIMUM",
    ]


async def test_missing_required_field_returns_validation_error(client, today):
    body = _body(today)
    del body["dateOfBirth"]
    res = await client.post("/api/employee", json=body)
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("dateOfBirth") for d in error["details"])


async def test_malformed_json_returns_400(client):
    res = await client.post(
        "/api/employee", content="{not json",
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


@pytest.mark.parametrize("salary", ["1e400", "NaN", "-Infinity"])
async def test_non_finite_salary_returns_400(client, salary):
    res = await client.post(
        "/api/employee",
        content=(
            '{"name": "Jonathan Doe", "dateOfBirth": "2000-01-01", '
            f'"hourlySalary": {salary}}}'
        ),
        headers={"content-type": "application/json"},
    )
    assert res.status_code == 400
    error = res.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert any(d["field"].endswith("hourlySalary") for d in error["details"])


async def test_rule_dates_follow_injected_today(client, today):
    body = _body(today, dateOfBirth=subtract_years(today, 65).isoformat(), hourlySalary=250)
    assert (await client.post("/api/employee", json=body)).status_code == 200

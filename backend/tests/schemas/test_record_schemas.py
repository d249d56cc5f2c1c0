"""Record schemas - wire shape, aliases and conversion to core records.

Invariants:
    - camelCase and snake_case keys both accepted
    - Schemas enforce types only: short names, out-of-range salaries still parse
    - Staff salary echoes as a JSON number
"""

from datetime import date
from decimal import Decimal

import pytest
from pydantic import ValidationError

from app.core.domain_types import EmployeeRecord, StaffRecord
from app.schemas.records import EmployeeIn, StaffIn


# ─── EmployeeIn ───────────────────────────────────────────────────

def test_employee_accepts_camel_case():
    body = EmployeeIn.model_validate({
        "name": "Jonathan Doe", "dateOfBirth": "1990-05-01",
        "email": "j@company.com", "phone": "555-123-4567", "hourlySalary": 250,
    })
    assert body.date_of_birth == date(1990, 5, 1)
    assert body.hourly_salary == 250.0


def test_employee_accepts_snake_case():
    body = EmployeeIn(name="Jonathan Doe", date_of_birth=date(1990, 5, 1))
    assert body.hourly_salary == 0.0
    assert body.email is None


def test_employee_requires_name_and_birthdate():
    with pytest.raises(ValidationError) as exc:
        EmployeeIn.model_validate({"hourlySalary": 100})
    missing = {e["loc"][0] for e in exc.value.errors()}
    assert missing == {"name", "dateOfBirth"}


def test_employee_rejects_unparseable_date():
    with pytest.raises(ValidationError):
        EmployeeIn.model_validate({"name": "Jonathan Doe", "dateOfBirth": "yesterday"})


@pytest.mark.parametrize("salary", [float("inf"), float("-inf"), float("nan")])
def test_employee_rejects_non_finite_salary(salary):
    with pytest.raises(ValidationError):
        EmployeeIn(name="Jonathan Doe", date_of_birth=date(1990, 5, 1), hourly_salary=salary)


def test_employee_does_not_apply_business_rules():
    body = EmployeeIn.model_validate({
        "name": "Bob", "dateOfBirth": "1900-01-01", "hourlySalary": 9999,
    })
    assert body.name == "Bob"


def test_employee_to_record():
    body = EmployeeIn(
        name="Jonathan Doe", date_of_birth=date(1990, 5, 1), hourly_salary=120.5,
    )
    assert body.to_record() == EmployeeRecord(
        name="Jonathan Doe", date_of_birth=date(1990, 5, 1), hourly_salary=120.5,
    )


def test_employee_dumps_camel_case():
    body = EmployeeIn(name="Jonathan Doe", date_of_birth=date(1990, 5, 1))
    dumped = body.model_dump(mode="json", by_alias=True)
    assert dumped["dateOfBirth"] == "1990-05-01"
    assert "hourlySalary" in dumped


# ─── StaffIn ───────────────────────────────────────────────────

def test_staff_all_fields_optional():
    assert StaffIn.model_validate({}).to_record() == StaffRecord()


def test_staff_salary_is_decimal():
    body = StaffIn.model_validate({"hourlySalary": "120.10"})
    assert body.hourly_salary == Decimal("120.10")
    assert body.to_record().hourly_salary == Decimal("120.10")


def test_staff_salary_serializes_as_number():
    body = StaffIn.model_validate({"hourlySalary": 120.5})
    assert body.model_dump(mode="json", by_alias=True)["hourlySalary"] == 120.5


def test_staff_rejects_non_string_name():
    with pytest.raises(ValidationError):
        StaffIn.model_validate({"name": 12345})


def test_staff_rejects_non_finite_salary():
    with pytest.raises(ValidationError):
        StaffIn.model_validate({"hourlySalary": float("nan")})

"""Employee Rules - checks applied to EmployeeRecord submissions.

Invariants:
    - Birthdate rejects only dates older than 65 years; future dates pass
    - Salary range and age-based minimum are independent: both can fire together,
      and the minimum is computed even when the birthdate itself is invalid
    - Senior means born on or before today - 30 years
"""

from datetime import date

from app.core.domain_types import EmployeeRecord, RecordType
from app.core.format_checks import (
    is_blank, is_empty, is_valid_email, is_valid_phone, subtract_years,
)
from app.core.rule_engine import Check, RuleSet

NAME_MIN_LENGTH = 10
NAME_MAX_LENGTH = 250
MAX_AGE_YEARS = 65
SENIOR_AGE_YEARS = 30
SALARY_RANGE = (50, 400)
SENIOR_MIN_SALARY = 200
JUNIOR_MIN_SALARY = 50


def is_senior(record: EmployeeRecord, today: date) -> bool:
    return record.date_of_birth <= subtract_years(today, SENIOR_AGE_YEARS)


def minimum_salary(record: EmployeeRecord, today: date) -> int:
    return SENIOR_MIN_SALARY if is_senior(record, today) else JUNIOR_MIN_SALARY


def _valid_name(record: EmployeeRecord, today: date) -> bool:
    name = record.name
    return not is_empty(name) and NAME_MIN_LENGTH <= len(name) <= NAME_MAX_LENGTH


def _valid_birthdate(record: EmployeeRecord, today: date) -> bool:
    return subtract_years(today, MAX_AGE_YEARS) <= record.date_of_birth


def _salary_in_range(record: EmployeeRecord, today: date) -> bool:
    low, high = SALARY_RANGE
    return low <= record.hourly_salary <= high


def _meets_minimum_salary(record: EmployeeRecord, today: date) -> bool:
    return record.hourly_salary >= minimum_salary(record, today)


EMPLOYEE_RULES = RuleSet(
    record_type=RecordType.EMPLOYEE,
    checks=(
        Check(
            field="name", attribute="name", code="NAME_INVALID",
            message="Invalid Name", predicate=_valid_name,
        ),
        Check(
            field="dateOfBirth", attribute="date_of_birth", code="BIRTHDATE_INVALID",
            message="Birthdate is not valid.", predicate=_valid_birthdate,
        ),
        Check(
            field="email", attribute="email", code="EMAIL_INVALID",
            message="Email address is not valid.",
            predicate=lambda r, _: is_valid_email(r.email),
            guard=lambda r: not is_blank(r.email),
        ),
        Check(
            field="phone", attribute="phone", code="PHONE_INVALID",
            message="Phone is not valid.",
            predicate=lambda r, _: is_valid_phone(r.phone),
            guard=lambda r: not is_blank(r.phone),
        ),
        Check(
            field="hourlySalary", attribute="hourly_salary", code="SALARY_OUT_OF_RANGE",
            message="Hourly salary does not fall within allowed range.",
            predicate=_salary_in_range,
        ),
        Check(
            field="hourlySalary", attribute="hourly_salary", code="SALARY_BELOW_MINIMUM",
            message="Minimum hourly salary is not valid.",
            predicate=_meets_minimum_salary,
        ),
    ),
)

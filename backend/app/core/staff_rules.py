"""Staff Rules - checks applied to StaffRecord submissions.

Every field is optional on the record, so guards test for None rather than
emptiness: an empty name fails both name checks, and an empty email is run
through the email check (and fails), while a missing one is skipped.
A whitespace-only name fails "Name is required." but can pass the length check.
"""

from datetime import date

from app.core.domain_types import RecordType, StaffRecord
from app.core.format_checks import is_blank, is_empty, is_valid_email, is_valid_phone
from app.core.rule_engine import Check, RuleSet

NAME_MIN_LENGTH = 10
NAME_MAX_LENGTH = 250
SALARY_RANGE = (30, 400)


def _name_length_ok(record: StaffRecord, today: date) -> bool:
    return NAME_MIN_LENGTH <= len(record.name) <= NAME_MAX_LENGTH


def _salary_in_range(record: StaffRecord, today: date) -> bool:
    low, high = SALARY_RANGE
    return low <= record.hourly_salary <= high


STAFF_RULES = RuleSet(
    record_type=RecordType.STAFF,
    checks=(
        Check(
            field="name", attribute="name", code="NAME_REQUIRED",
            message="Name is required.",
            predicate=lambda r, _: not is_empty(r.name),
        ),
        Check(
            field="name", attribute="name", code="NAME_LENGTH",
            message="Name length must be between 10 and 250 characters.",
            predicate=_name_length_ok,
            guard=lambda r: r.name is not None,
        ),
        Check(
            field="email", attribute="email", code="EMAIL_INVALID",
            message="Email address is not valid.",
            predicate=lambda r, _: is_valid_email(r.email),
            guard=lambda r: r.email is not None,
        ),
        Check(
            field="phone", attribute="phone", code="PHONE_INVALID",
            message="Phone is not valid.",
            predicate=lambda r, _: is_valid_phone(r.phone),
            guard=lambda r: not is_blank(r.phone),
        ),
        Check(
            field="hourlySalary", attribute="hourly_salary", code="SALARY_REQUIRED",
            message="Hourly salary is required.",
            predicate=lambda r, _: r.hourly_salary is not None,
        ),
        Check(
            field="hourlySalary", attribute="hourly_salary", code="SALARY_OUT_OF_RANGE",
            message="Hourly salary must be between 30 and 400.",
            predicate=_salary_in_range,
            guard=lambda r: r.hourly_salary is not None,
        ),
    ),
)

"""Record Validation - entry points binding records to their rule sets."""

from datetime import date

from app.core.domain_types import (
    EmployeeRecord, RecordType, StaffRecord, ValidationResult,
)
from app.core.employee_rules import EMPLOYEE_RULES
from app.core.rule_engine import RuleSet, validate
from app.core.staff_rules import STAFF_RULES

RULE_SETS: dict[RecordType, RuleSet] = {
    RecordType.EMPLOYEE: EMPLOYEE_RULES,
    RecordType.STAFF: STAFF_RULES,
}


def validate_employee(record: EmployeeRecord, today: date) -> ValidationResult:
    return validate(record, EMPLOYEE_RULES, today)


def validate_staff(record: StaffRecord, today: date) -> ValidationResult:
    return validate(record, STAFF_RULES, today)


def validate_record(
    record_type: RecordType, record: EmployeeRecord | StaffRecord, today: date,
) -> ValidationResult:
    return validate(record, RULE_SETS[record_type], today)

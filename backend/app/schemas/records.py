"""Record Schemas - Pydantic models for the employee and staff endpoints.

Invariants:
    - Wire names are camelCase (dateOfBirth, hourlySalary); snake_case accepted too
    - Schemas only check shape and types; business rules live in app.core
    - to_record() is the single conversion point into core dataclasses

Design Decisions:
    - Missing employee hourlySalary defaults to 0 (range rule then rejects it)
    - Salaries must be finite: inf/NaN bodies fail here with a 400, never reach the rules
    - Staff hourlySalary is a Decimal but echoes back as a JSON number
"""

from datetime import date
from decimal import Decimal
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from app.core.domain_types import EmployeeRecord, StaffRecord

JsonDecimal = Annotated[
    Decimal,
    Field(allow_inf_nan=False),
    PlainSerializer(float, return_type=float, when_used="json"),
]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class EmployeeIn(_CamelModel):
    """Employee submission body."""
    name: str
    date_of_birth: date
    email: str | None = None
    phone: str | None = None
    hourly_salary: float = Field(0.0, allow_inf_nan=False)

    def to_record(self) -> EmployeeRecord:
        return EmployeeRecord(
            name=self.name,
            date_of_birth=self.date_of_birth,
            email=self.email,
            phone=self.phone,
            hourly_salary=self.hourly_salary,
        )


class StaffIn(_CamelModel):
    """Staff submission body - every field optional."""
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    hourly_salary: JsonDecimal | None = None

    def to_record(self) -> StaffRecord:
        return StaffRecord(
            name=self.name,
            email=self.email,
            phone=self.phone,
            hourly_salary=self.hourly_salary,
        )


# ─── Error responses ───────────────────────────────────────────────────

class FailureDetail(BaseModel):
    """One failed rule in a 400 response."""
    field: str
    message: str
    code: str
    attempted_value: Any = None


class RecordErrorBody(BaseModel):
    code: str
    message: str
    category: str
    severity: str
    timestamp: str
    record_type: str
    details: list[FailureDetail]


class RecordErrorResponse(BaseModel):
    """Envelope returned when a record fails validation."""
    error: RecordErrorBody

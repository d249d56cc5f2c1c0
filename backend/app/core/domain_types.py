"""Domain Types - records under validation and the failures they produce.

Invariants:
    - Records are transient inputs: frozen dataclasses, never stored
    - ValidationResult preserves check order; valid iff it holds no failures
    - Field names on failures are the camelCase wire names (dateOfBirth, hourlySalary)

Design Decisions:
    - Plain dataclasses in core, pydantic only at the API boundary (app.schemas)
    - str Enum for RecordType: serializes to JSON without custom encoders
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Any, Iterator


class RecordType(str, Enum):
    """Kinds of record the engine knows how to validate."""
    EMPLOYEE = "employee"
    STAFF = "staff"


# ─── Records ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class EmployeeRecord:
    name: str
    date_of_birth: date
    email: str | None = None
    phone: str | None = None
    hourly_salary: float = 0.0


@dataclass(frozen=True)
class StaffRecord:
    name: str | None = None
    email: str | None = None
    phone: str | None = None
    hourly_salary: Decimal | None = None


# ─── Results ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class ValidationFailure:
    """One violated check: the field it is bound to and the user-facing message."""
    field: str
    message: str
    code: str = ""
    attempted_value: Any = None

    def to_dict(self) -> dict:
        return {
            "field": self.field,
            "message": self.message,
            "code": self.code,
            "attempted_value": self.attempted_value,
        }


@dataclass(frozen=True)
class ValidationResult:
    """Ordered failures from a single evaluation."""
    failures: tuple[ValidationFailure, ...] = ()

    @property
    def is_valid(self) -> bool:
        return not self.failures

    @property
    def fields(self) -> list[str]:
        """Distinct failing field names, in first-failure order."""
        return list(dict.fromkeys(f.field for f in self.failures))

    @property
    def messages(self) -> list[str]:
        return [f.message for f in self.failures]

    def for_field(self, name: str) -> list[ValidationFailure]:
        return [f for f in self.failures if f.field == name]

    def to_dicts(self) -> list[dict]:
        return [f.to_dict() for f in self.failures]

    def __len__(self) -> int:
        return len(self.failures)

    def __iter__(self) -> Iterator[ValidationFailure]:
        return iter(self.failures)

"""Rule Engine - evaluates an ordered rule set against one record.

Invariants:
    - All functions are PURE: no IO, no clock reads; `today` is always passed in
    - Every active check runs exactly once, in declared order; nothing short-circuits
    - A check whose guard returns False contributes nothing
    - validate() never raises for invalid data: invalidity is the returned result

Design Decisions:
    - Checks are plain frozen dataclasses in a tuple, not a fluent builder
    - Predicates take (record, today) so cross-field and date-relative rules
      share one signature with simple field rules
"""

from dataclasses import dataclass
from datetime import date
from typing import Any, Callable

from app.core.domain_types import RecordType, ValidationFailure, ValidationResult

Predicate = Callable[[Any, date], bool]
Guard = Callable[[Any], bool]


@dataclass(frozen=True)
class Check:
    """A single rule bound to one field. `predicate` returns True when the record passes."""
    field: str
    attribute: str
    code: str
    message: str
    predicate: Predicate
    guard: Guard | None = None

    def is_active(self, record: Any) -> bool:
        return self.guard is None or self.guard(record)

    def evaluate(self, record: Any, today: date) -> ValidationFailure | None:
        if not self.is_active(record):
            return None
        if self.predicate(record, today):
            return None
        return ValidationFailure(
            field=self.field,
            message=self.message,
            code=self.code,
            attempted_value=getattr(record, self.attribute),
        )


@dataclass(frozen=True)
class RuleSet:
    record_type: RecordType
    checks: tuple[Check, ...]

    @property
    def fields(self) -> list[str]:
        return list(dict.fromkeys(c.field for c in self.checks))


def validate(record: Any, rule_set: RuleSet, today: date) -> ValidationResult:
    """Run every check in `rule_set` and collect all failures in order."""
    failures = []
    for check in rule_set.checks:
        failure = check.evaluate(record, today)
        if failure is not None:
            failures.append(failure)
    return ValidationResult(failures=tuple(failures))

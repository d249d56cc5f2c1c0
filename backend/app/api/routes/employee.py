"""Employee Route - POST /api/employee.

Invariants:
    - Valid body → 200 with the body echoed back
    - Invalid body → RecordValidationError, rendered as 400 by the global handler
    - `today` comes from the get_today dependency, never read inline
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends

from app.config import get_settings
from app.core.domain_types import RecordType
from app.core.errors import RecordValidationError
from app.core.record_validation import validate_employee
from app.infrastructure.clock import get_today
from app.schemas.records import EmployeeIn, RecordErrorResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix=get_settings().api_prefix, tags=["employee"])


@router.post(
    "/employee",
    response_model=EmployeeIn,
    responses={400: {"model": RecordErrorResponse}},
)
async def post_employee(body: EmployeeIn, today: date = Depends(get_today)):
    """Validate an employee submission against the employee rules."""
    result = validate_employee(body.to_record(), today)
    if not result.is_valid:
        raise RecordValidationError(RecordType.EMPLOYEE, result)
    logger.debug("Employee record accepted", extra={"record_type": "employee"})
    return body

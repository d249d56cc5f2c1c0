"""Staff Route - POST /api/staff, same contract as /api/employee against the staff rules."""

import logging
from datetime import date

from fastapi import APIRouter, Depends

from app.config import get_settings
from app.core.domain_types import RecordType
from app.core.errors import RecordValidationError
from app.core.record_validation import validate_staff
from app.infrastructure.clock import get_today
from app.schemas.records import RecordErrorResponse, StaffIn

logger = logging.getLogger(__name__)
router = APIRouter(prefix=get_settings().api_prefix, tags=["staff"])


@router.post(
    "/staff",
    response_model=StaffIn,
    responses={400: {"model": RecordErrorResponse}},
)
async def post_staff(body: StaffIn, today: date = Depends(get_today)):
    result = validate_staff(body.to_record(), today)
    if not result.is_valid:
        raise RecordValidationError(RecordType.STAFF, result)
    logger.debug("Staff record accepted", extra={"record_type": "staff"})
    return body

"""Maps domain errors to HTTP responses without exposing internal details."""

import structlog
from rest_framework import status
from rest_framework.response import Response
from rest_framework.views import exception_handler

from admissions.domain.errors import DomainError, ErrorCode

logger = structlog.get_logger(__name__)

NOT_FOUND_CODES = frozenset(
    {
        ErrorCode.EVENT_NOT_FOUND,
        ErrorCode.BOOKING_NOT_FOUND,
        ErrorCode.MEMBER_NOT_FOUND,
    }
)
CONFLICT_CODES = frozenset({ErrorCode.FEATURE_DISABLED, ErrorCode.BOOKING_CLOSED})


def status_for(code: ErrorCode) -> int:
    if code in NOT_FOUND_CODES:
        return status.HTTP_404_NOT_FOUND
    if code in CONFLICT_CODES:
        return status.HTTP_409_CONFLICT
    return status.HTTP_400_BAD_REQUEST


def domain_exception_handler(exc: Exception, context: dict) -> Response | None:
    """DRF exception handler: domain errors first, everything else to the default."""
    if isinstance(exc, DomainError):
        logger.info("domain_error", code=exc.code.value, view=type(context.get("view")).__name__)
        return Response({"code": exc.code.value, "message": exc.message}, status=status_for(exc.code))
    return exception_handler(exc, context)

from admissions.domain.models import (
    FREE_ENTRY_TIER,
    BookingStatus,
    CheckInResult,
    CoverChargeType,
    EventConfig,
    GroupBooking,
    GroupMember,
    PaymentLink,
    PaymentStatus,
    PriceTier,
)
from admissions.domain.value_objects import BookingId, EventId, Money, TimeOfDay

__all__ = [
    "FREE_ENTRY_TIER",
    "BookingStatus",
    "CheckInResult",
    "CoverChargeType",
    "EventConfig",
    "GroupBooking",
    "GroupMember",
    "PaymentLink",
    "PaymentStatus",
    "PriceTier",
    "BookingId",
    "EventId",
    "Money",
    "TimeOfDay",
]

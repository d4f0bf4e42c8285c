"""Domain models representing persisted state.

These are pure domain objects with no API input rules.
Django ORM models are in admissions/models.py (persistence layer).
"""

from dataclasses import dataclass, field, replace
import datetime
from enum import Enum

from admissions.domain.value_objects import BookingId, EventId, Money, TimeOfDay

FREE_ENTRY_TIER_NAME = "Free Entry"


class CoverChargeType(Enum):
    FIXED = "fixed"
    REDEEMABLE = "redeemable"
    FREE_BEFORE = "free_before"


class BookingStatus(Enum):
    ACTIVE = "active"
    CLOSED = "closed"


class PaymentStatus(Enum):
    NONE = "none"
    PENDING = "pending"
    PAID = "paid"


@dataclass(frozen=True)
class PriceTier:
    """A named price active from ``start_time`` until a later tier supersedes it."""

    name: str
    start_time: TimeOfDay
    price: Money


FREE_ENTRY_TIER = PriceTier(
    name=FREE_ENTRY_TIER_NAME,
    start_time=TimeOfDay(0),
    price=Money.zero(),
)


@dataclass(frozen=True)
class EventConfig:
    """Domain representation of an event's entry pricing rules."""

    id: EventId
    name: str
    date: datetime.date | None = None
    tiers: tuple[PriceTier, ...] = ()
    cover_charge_type: CoverChargeType = CoverChargeType.FIXED
    redeemable_amount: Money = field(default_factory=Money.zero)
    free_entry_before_time: TimeOfDay | None = None
    grace_period_minutes: int = 15
    group_booking_enabled: bool = True
    max_group_size: int = 10

    def __post_init__(self) -> None:
        if self.grace_period_minutes < 0:
            raise ValueError("Grace period cannot be negative")
        if self.max_group_size < 1:
            raise ValueError("Maximum group size must be at least 1")


@dataclass(frozen=True)
class GroupMember:
    """One person admitted under a group booking. Member 1 is the host."""

    id: int
    name: str
    is_host: bool
    original_tier: PriceTier
    checked_in: bool = False
    check_in_time: TimeOfDay | None = None
    surcharge: Money = field(default_factory=Money.zero)
    surcharge_payment_status: PaymentStatus = PaymentStatus.NONE
    payment_reference: str | None = None

    @property
    def has_outstanding_surcharge(self) -> bool:
        return bool(self.surcharge) and self.surcharge_payment_status is PaymentStatus.PENDING


@dataclass(frozen=True)
class GroupBooking:
    """Domain representation of a group reservation."""

    id: BookingId
    event_id: EventId
    host_name: str
    group_size: int
    booking_time: TimeOfDay
    original_tier: PriceTier
    members: tuple[GroupMember, ...]
    qr_code: str
    status: BookingStatus = BookingStatus.ACTIVE
    created_at: datetime.datetime | None = None

    def member(self, member_id: int) -> GroupMember | None:
        return next((m for m in self.members if m.id == member_id), None)

    def with_members(self, members: tuple[GroupMember, ...]) -> "GroupBooking":
        return replace(self, members=members)

    @property
    def is_active(self) -> bool:
        return self.status is BookingStatus.ACTIVE

    @property
    def checked_in_count(self) -> int:
        return sum(1 for m in self.members if m.checked_in)

    @property
    def is_fully_checked_in(self) -> bool:
        return self.checked_in_count == self.group_size

    @property
    def outstanding_surcharge(self) -> Money:
        total = Money.zero()
        for member in self.members:
            if member.has_outstanding_surcharge:
                total = total + member.surcharge
        return total


@dataclass(frozen=True)
class CheckInResult:
    """Outcome for a single member admitted in a check-in batch. Not persisted."""

    member_id: int
    check_in_time: TimeOfDay
    surcharge: Money

    @property
    def requires_payment(self) -> bool:
        return bool(self.surcharge)


@dataclass(frozen=True)
class PaymentLink:
    """Where and how much to collect for an outstanding surcharge."""

    payment_url: str
    amount: Money

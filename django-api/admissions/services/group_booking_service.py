"""Group booking service - all booking and check-in business logic lives here.

Services:
- Depend only on interfaces (stores)
- Validate domain invariants
- Perform orchestration and error mapping
- Return domain models or domain errors

Every mutation of a booking runs under the store's per-booking lock so
concurrent check-in batches for the same group cannot admit a member
twice or price them twice.
"""

import uuid
from dataclasses import replace
from typing import Sequence

import structlog
from django.utils import timezone

from admissions.domain import (
    BookingId,
    BookingStatus,
    CheckInResult,
    EventId,
    GroupBooking,
    GroupMember,
    PaymentLink,
    PaymentStatus,
    PriceTier,
    TimeOfDay,
)
from admissions.domain.errors import (
    BookingClosedError,
    BookingNotFoundError,
    FeatureDisabledError,
    GroupSizeExceededError,
    InvalidGroupSizeError,
    MemberNotFoundError,
    NoSurchargeError,
)
from admissions.services import tier_resolver
from admissions.services.event_config_service import EventConfigService
from admissions.services.payments import PaymentLinkBuilder
from admissions.services.qr_codes import QrCodeIssuer
from admissions.stores.interfaces import GroupBookingStore

logger = structlog.get_logger(__name__)


def _build_members(host_name: str, group_size: int, tier: PriceTier) -> tuple[GroupMember, ...]:
    members = [GroupMember(id=1, name=f"{host_name} (Host)", is_host=True, original_tier=tier)]
    for member_id in range(2, group_size + 1):
        members.append(GroupMember(id=member_id, name=f"Guest {member_id - 1}", is_host=False, original_tier=tier))
    return tuple(members)


class GroupBookingService:
    """Service for group reservations, partial check-ins and surcharge bookkeeping."""

    def __init__(
        self,
        store: GroupBookingStore,
        events: EventConfigService,
        qr_codes: QrCodeIssuer,
        payment_links: PaymentLinkBuilder,
    ) -> None:
        self._store = store
        self._events = events
        self._qr_codes = qr_codes
        self._payment_links = payment_links

    def create_group_booking(
        self,
        event_id: str,
        *,
        host_name: str,
        group_size: int,
        booking_time: TimeOfDay,
    ) -> GroupBooking:
        """Reserve entry for a group, pricing everyone at ``booking_time``.

        Raises:
            EventNotFoundError: If the event has not been configured.
            FeatureDisabledError: If the event does not accept group bookings.
            InvalidGroupSizeError: If group_size is below 1.
            GroupSizeExceededError: If group_size is above the event's maximum.
            ConfigurationError: If no tier can price booking_time.
        """
        event = self._events.get_event_config(event_id)
        if not event.group_booking_enabled:
            raise FeatureDisabledError(event_id)
        if group_size < 1:
            raise InvalidGroupSizeError(group_size)
        if group_size > event.max_group_size:
            raise GroupSizeExceededError(group_size, event.max_group_size)

        tier = tier_resolver.resolve_tier(event, booking_time)
        booking_id = BookingId(uuid.uuid4())
        booking = GroupBooking(
            id=booking_id,
            event_id=event.id,
            host_name=host_name,
            group_size=group_size,
            booking_time=booking_time,
            original_tier=tier,
            members=_build_members(host_name, group_size, tier),
            qr_code=self._qr_codes.issue(booking_id),
            created_at=timezone.now(),
        )
        self._store.put(booking)
        logger.info(
            "group_booking_created",
            booking_id=str(booking_id),
            event_id=event_id,
            group_size=group_size,
            booking_time=str(booking_time),
            tier=tier.name,
            price=tier.price.amount,
        )
        return booking

    def process_check_in(
        self, booking_id: str, member_ids: Sequence[int], current_time: TimeOfDay
    ) -> list[CheckInResult]:
        """Admit a batch of arriving members, pricing them at ``current_time``.

        Ids that are unknown or already checked in are skipped without a
        result, so the returned list may be shorter than ``member_ids``.
        Results follow the order of ``member_ids``.

        Raises:
            BookingNotFoundError: If the booking does not exist.
            BookingClosedError: If the booking has been closed.
        """
        key = self._parse_booking_id(booking_id)
        with self._store.lock(key):
            booking = self._load(key)
            if not booking.is_active:
                raise BookingClosedError(booking_id)
            event = self._events.get_event_config(booking.event_id.value)

            members = {member.id: member for member in booking.members}
            results: list[CheckInResult] = []
            for member_id in member_ids:
                member = members.get(member_id)
                if member is None or member.checked_in:
                    logger.debug("check_in_member_skipped", booking_id=booking_id, member_id=member_id)
                    continue

                surcharge = tier_resolver.surcharge_between(member.original_tier, current_time, event)
                members[member_id] = replace(
                    member,
                    checked_in=True,
                    check_in_time=current_time,
                    surcharge=surcharge,
                    surcharge_payment_status=PaymentStatus.PENDING if surcharge else PaymentStatus.NONE,
                )
                results.append(CheckInResult(member_id=member_id, check_in_time=current_time, surcharge=surcharge))
                logger.info(
                    "member_checked_in",
                    booking_id=booking_id,
                    member_id=member_id,
                    check_in_time=str(current_time),
                    surcharge=surcharge.amount,
                    within_grace_period=tier_resolver.within_grace_period(
                        booking.booking_time, current_time, event
                    ),
                )

            if results:
                self._store.put(booking.with_members(tuple(members[m.id] for m in booking.members)))
        return results

    def generate_payment_url(self, booking_id: str, member_id: int) -> PaymentLink:
        """Return where to collect a member's outstanding surcharge.

        Raises:
            BookingNotFoundError: If the booking does not exist.
            NoSurchargeError: If the member is unknown or owes nothing.
        """
        key = self._parse_booking_id(booking_id)
        booking = self._load(key)
        member = booking.member(member_id)
        if member is None or not member.has_outstanding_surcharge:
            raise NoSurchargeError(booking_id, member_id)

        link = self._payment_links.build(key, member)
        logger.info("payment_link_generated", booking_id=booking_id, member_id=member_id, amount=link.amount.amount)
        return link

    def process_surcharge_payment(self, booking_id: str, member_id: int, payment_reference: str) -> GroupMember:
        """Record that a member's surcharge has been paid.

        The reference is trusted as given; confirming it with the gateway
        is the caller's responsibility.

        Raises:
            BookingNotFoundError: If the booking does not exist.
            MemberNotFoundError: If the member is not part of the booking.
            NoSurchargeError: If the member has no pending surcharge.
        """
        key = self._parse_booking_id(booking_id)
        with self._store.lock(key):
            booking = self._load(key)
            member = booking.member(member_id)
            if member is None:
                raise MemberNotFoundError(booking_id, member_id)
            if not member.has_outstanding_surcharge:
                raise NoSurchargeError(booking_id, member_id)

            paid = replace(
                member,
                surcharge_payment_status=PaymentStatus.PAID,
                payment_reference=payment_reference,
            )
            self._store.put(booking.with_members(tuple(paid if m.id == member_id else m for m in booking.members)))

        logger.info("surcharge_payment_recorded", booking_id=booking_id, member_id=member_id)
        return paid

    def close_booking(self, booking_id: str) -> GroupBooking:
        """Mark a booking closed. Closing an already closed booking is a no-op."""
        key = self._parse_booking_id(booking_id)
        with self._store.lock(key):
            booking = self._load(key)
            if not booking.is_active:
                return booking
            closed = replace(booking, status=BookingStatus.CLOSED)
            self._store.put(closed)

        logger.info(
            "group_booking_closed",
            booking_id=booking_id,
            checked_in=closed.checked_in_count,
            group_size=closed.group_size,
        )
        return closed

    def get_booking(self, booking_id: str) -> GroupBooking:
        """Return a booking by ID.

        Raises:
            BookingNotFoundError: If the booking does not exist.
        """
        return self._load(self._parse_booking_id(booking_id))

    def get_booking_by_qr_code(self, qr_code: str) -> GroupBooking:
        """Return the booking a scanned QR token was issued for.

        Raises:
            InvalidQrCodeError: If the token was not issued by this service.
            BookingNotFoundError: If the booking no longer exists.
        """
        return self._load(self._qr_codes.resolve(qr_code))

    def get_event_bookings(self, event_id: str) -> list[GroupBooking]:
        """Return the active bookings for an event."""
        try:
            key = EventId(event_id)
        except ValueError:
            return []
        return [booking for booking in self._store.list_for_event(key) if booking.is_active]

    def _parse_booking_id(self, booking_id: str) -> BookingId:
        try:
            return BookingId.from_string(booking_id)
        except ValueError as exc:
            raise BookingNotFoundError(booking_id) from exc

    def _load(self, booking_id: BookingId) -> GroupBooking:
        booking = self._store.get(booking_id)
        if booking is None:
            raise BookingNotFoundError(str(booking_id))
        return booking

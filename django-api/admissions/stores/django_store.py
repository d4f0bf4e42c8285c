"""Django ORM implementation of the admissions stores."""

from collections.abc import Iterator
from contextlib import contextmanager

from django.db import transaction
from django.db.models import F

from admissions import models
from admissions.domain import (
    BookingId,
    BookingStatus,
    CoverChargeType,
    EventConfig,
    EventId,
    GroupBooking,
    GroupMember,
    Money,
    PaymentStatus,
    PriceTier,
    TimeOfDay,
)
from admissions.stores.interfaces import EventConfigStore, GroupBookingStore


def _tier_from_columns(name: str, start_time, price: int) -> PriceTier:
    return PriceTier(name=name, start_time=TimeOfDay.from_time(start_time), price=Money(price))


def _to_event_config(record: models.EventConfig) -> EventConfig:
    return EventConfig(
        id=EventId(record.id),
        name=record.name,
        date=record.date,
        tiers=tuple(_tier_from_columns(t.name, t.start_time, t.price) for t in record.tiers.all()),
        cover_charge_type=CoverChargeType(record.cover_charge_type),
        redeemable_amount=Money(record.redeemable_amount),
        free_entry_before_time=(
            TimeOfDay.from_time(record.free_entry_before_time) if record.free_entry_before_time is not None else None
        ),
        grace_period_minutes=record.grace_period_minutes,
        group_booking_enabled=record.group_booking_enabled,
        max_group_size=record.max_group_size,
    )


def _to_member(record: models.GroupMember) -> GroupMember:
    return GroupMember(
        id=record.member_id,
        name=record.name,
        is_host=record.is_host,
        original_tier=_tier_from_columns(
            record.original_tier_name, record.original_tier_start_time, record.original_tier_price
        ),
        checked_in=record.checked_in,
        check_in_time=TimeOfDay.from_time(record.check_in_time) if record.check_in_time is not None else None,
        surcharge=Money(record.surcharge),
        surcharge_payment_status=PaymentStatus(record.surcharge_payment_status),
        payment_reference=record.payment_reference,
    )


def _to_booking(record: models.GroupBooking) -> GroupBooking:
    return GroupBooking(
        id=BookingId(record.id),
        event_id=EventId(record.event_id),
        host_name=record.host_name,
        group_size=record.group_size,
        booking_time=TimeOfDay.from_time(record.booking_time),
        original_tier=_tier_from_columns(
            record.original_tier_name, record.original_tier_start_time, record.original_tier_price
        ),
        members=tuple(_to_member(m) for m in record.members.all()),
        qr_code=record.qr_code,
        status=BookingStatus(record.status),
        created_at=record.created_at,
    )


class DjangoEventConfigStore(EventConfigStore):
    """Database-backed event configuration store."""

    def get(self, event_id: EventId) -> EventConfig | None:
        record = models.EventConfig.objects.prefetch_related("tiers").filter(pk=event_id.value).first()
        return _to_event_config(record) if record else None

    @transaction.atomic
    def put(self, config: EventConfig) -> None:
        record, _ = models.EventConfig.objects.update_or_create(
            pk=config.id.value,
            defaults={
                "name": config.name,
                "date": config.date,
                "cover_charge_type": config.cover_charge_type.value,
                "redeemable_amount": config.redeemable_amount.amount,
                "free_entry_before_time": (
                    config.free_entry_before_time.to_time() if config.free_entry_before_time is not None else None
                ),
                "grace_period_minutes": config.grace_period_minutes,
                "group_booking_enabled": config.group_booking_enabled,
                "max_group_size": config.max_group_size,
            },
        )
        record.tiers.all().delete()
        models.PriceTier.objects.bulk_create(
            [
                models.PriceTier(
                    event=record,
                    position=position,
                    name=tier.name,
                    start_time=tier.start_time.to_time(),
                    price=tier.price.amount,
                )
                for position, tier in enumerate(config.tiers)
            ]
        )


class DjangoGroupBookingStore(GroupBookingStore):
    """Database-backed booking store. ``lock`` takes a write lock inside a transaction."""

    def get(self, booking_id: BookingId) -> GroupBooking | None:
        record = models.GroupBooking.objects.prefetch_related("members").filter(pk=booking_id.value).first()
        return _to_booking(record) if record else None

    @transaction.atomic
    def put(self, booking: GroupBooking) -> None:
        tier = booking.original_tier
        record, _ = models.GroupBooking.objects.update_or_create(
            pk=booking.id.value,
            defaults={
                "event_id": booking.event_id.value,
                "host_name": booking.host_name,
                "group_size": booking.group_size,
                "booking_time": booking.booking_time.to_time(),
                "original_tier_name": tier.name,
                "original_tier_start_time": tier.start_time.to_time(),
                "original_tier_price": tier.price.amount,
                "qr_code": booking.qr_code,
                "status": booking.status.value,
            },
        )
        for member in booking.members:
            models.GroupMember.objects.update_or_create(
                booking=record,
                member_id=member.id,
                defaults={
                    "name": member.name,
                    "is_host": member.is_host,
                    "original_tier_name": member.original_tier.name,
                    "original_tier_start_time": member.original_tier.start_time.to_time(),
                    "original_tier_price": member.original_tier.price.amount,
                    "checked_in": member.checked_in,
                    "check_in_time": member.check_in_time.to_time() if member.check_in_time is not None else None,
                    "surcharge": member.surcharge.amount,
                    "surcharge_payment_status": member.surcharge_payment_status.value,
                    "payment_reference": member.payment_reference,
                },
            )

    def list_for_event(self, event_id: EventId) -> list[GroupBooking]:
        records = models.GroupBooking.objects.prefetch_related("members").filter(event_id=event_id.value)
        return [_to_booking(record) for record in records]

    @contextmanager
    def lock(self, booking_id: BookingId) -> Iterator[None]:
        with transaction.atomic():
            # No-op write: a row lock, or the database write lock on SQLite where
            # select_for_update() is ignored.
            models.GroupBooking.objects.filter(pk=booking_id.value).update(status=F("status"))
            yield

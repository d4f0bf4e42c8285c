"""Django ORM models (persistence layer).

These models handle database concerns. Domain logic lives in domain/models.py.
"""

import uuid

from django.db import models


class CoverChargeType(models.TextChoices):
    FIXED = "fixed", "Fixed"
    REDEEMABLE = "redeemable", "Redeemable"
    FREE_BEFORE = "free_before", "Free before"


class BookingStatus(models.TextChoices):
    ACTIVE = "active", "Active"
    CLOSED = "closed", "Closed"


class PaymentStatus(models.TextChoices):
    NONE = "none", "None"
    PENDING = "pending", "Pending"
    PAID = "paid", "Paid"


class EventConfig(models.Model):
    """Persistence model for an event's entry pricing configuration."""

    id = models.CharField(primary_key=True, max_length=100)
    name = models.CharField(max_length=255)
    date = models.DateField(blank=True, null=True)
    cover_charge_type = models.CharField(
        max_length=20, choices=CoverChargeType.choices, default=CoverChargeType.FIXED
    )
    redeemable_amount = models.PositiveIntegerField(default=0)
    free_entry_before_time = models.TimeField(blank=True, null=True)
    grace_period_minutes = models.PositiveIntegerField(default=15)
    group_booking_enabled = models.BooleanField(default=True)
    max_group_size = models.PositiveIntegerField(default=10)
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.name


class PriceTier(models.Model):
    """Persistence model for a price tier. ``position`` keeps the configured order."""

    event = models.ForeignKey(EventConfig, on_delete=models.CASCADE, related_name="tiers")
    position = models.PositiveIntegerField()
    name = models.CharField(max_length=100)
    start_time = models.TimeField()
    price = models.PositiveIntegerField()

    class Meta:
        ordering = ["position"]
        constraints = [
            models.UniqueConstraint(fields=["event", "position"], name="unique_tier_position"),
        ]

    def __str__(self) -> str:
        return f"{self.name} - {self.price}"


class GroupBooking(models.Model):
    """Persistence model for a group reservation.

    The tier columns are a snapshot taken at creation and are never
    recomputed from the event's current tiers.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    event = models.ForeignKey(EventConfig, on_delete=models.PROTECT, related_name="group_bookings")
    host_name = models.CharField(max_length=255)
    group_size = models.PositiveIntegerField()
    booking_time = models.TimeField()
    original_tier_name = models.CharField(max_length=100)
    original_tier_start_time = models.TimeField()
    original_tier_price = models.PositiveIntegerField()
    qr_code = models.CharField(max_length=255, unique=True)
    status = models.CharField(max_length=10, choices=BookingStatus.choices, default=BookingStatus.ACTIVE)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ["created_at"]
        indexes = [
            models.Index(fields=["event", "status"], name="booking_event_status_idx"),
        ]

    def __str__(self) -> str:
        return f"{self.host_name} x{self.group_size} ({self.event_id})"


class GroupMember(models.Model):
    """Persistence model for a member of a group booking."""

    booking = models.ForeignKey(GroupBooking, on_delete=models.CASCADE, related_name="members")
    member_id = models.PositiveIntegerField()
    name = models.CharField(max_length=255)
    is_host = models.BooleanField(default=False)
    original_tier_name = models.CharField(max_length=100)
    original_tier_start_time = models.TimeField()
    original_tier_price = models.PositiveIntegerField()
    checked_in = models.BooleanField(default=False)
    check_in_time = models.TimeField(blank=True, null=True)
    surcharge = models.PositiveIntegerField(default=0)
    surcharge_payment_status = models.CharField(
        max_length=10, choices=PaymentStatus.choices, default=PaymentStatus.NONE
    )
    payment_reference = models.CharField(max_length=255, blank=True, null=True)

    class Meta:
        ordering = ["member_id"]
        constraints = [
            models.UniqueConstraint(fields=["booking", "member_id"], name="unique_booking_member"),
        ]

    def __str__(self) -> str:
        return f"{self.name} ({self.booking_id})"

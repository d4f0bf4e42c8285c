"""Serializers for validating requests and rendering domain models."""

from rest_framework import serializers
from rest_framework.fields import empty

from admissions.domain import CoverChargeType, Money, PriceTier, TimeOfDay
from admissions.domain.errors import InvalidTimeError


def parse_time(value: str | None) -> TimeOfDay:
    """Parse a wall-clock time from a query string.

    Raises:
        InvalidTimeError: If the value is missing or not HH:MM / HH:MM:SS.
    """
    try:
        return TimeOfDay.from_string(value or "")
    except ValueError as exc:
        raise InvalidTimeError(value or "") from exc


class TimeOfDayField(serializers.Field):
    """``HH:MM`` on the wire, TimeOfDay in the domain."""

    default_error_messages = {"invalid": "Time must be formatted as HH:MM or HH:MM:SS."}

    def to_internal_value(self, data) -> TimeOfDay:
        if not isinstance(data, str):
            self.fail("invalid")
        try:
            return TimeOfDay.from_string(data)
        except ValueError:
            self.fail("invalid")

    def to_representation(self, value: TimeOfDay) -> str:
        return str(value)


class MoneyField(serializers.IntegerField):
    """Integer minor units on the wire, Money in the domain."""

    def __init__(self, **kwargs) -> None:
        kwargs.setdefault("min_value", 0)
        super().__init__(**kwargs)

    def run_validation(self, data=empty):
        # Validators compare plain ints, so wrap only after they have run.
        value = super().run_validation(data)
        return None if value is None else Money(value)

    def to_representation(self, value: Money) -> int:
        return value.amount


class PriceTierSerializer(serializers.Serializer):
    """Serializer for PriceTier, used for both input and output."""

    name = serializers.CharField(max_length=100)
    start_time = TimeOfDayField()
    price = MoneyField()


class EventConfigInputSerializer(serializers.Serializer):
    """Validates a request to create or replace an event configuration."""

    name = serializers.CharField(max_length=255)
    date = serializers.DateField(required=False, allow_null=True)
    tiers = PriceTierSerializer(many=True, required=False)
    cover_charge_type = serializers.ChoiceField(
        choices=[choice.value for choice in CoverChargeType], required=False
    )
    redeemable_amount = MoneyField(required=False)
    free_entry_before_time = TimeOfDayField(required=False, allow_null=True)
    grace_period_minutes = serializers.IntegerField(min_value=0, required=False)
    group_booking_enabled = serializers.BooleanField(required=False)
    max_group_size = serializers.IntegerField(min_value=1, required=False)

    def to_service_kwargs(self) -> dict:
        data = dict(self.validated_data)
        data["tiers"] = [PriceTier(**tier) for tier in data.get("tiers", [])]
        if "cover_charge_type" in data:
            data["cover_charge_type"] = CoverChargeType(data["cover_charge_type"])
        return data


class EventConfigSerializer(serializers.Serializer):
    """Serializer for EventConfig domain model."""

    id = serializers.CharField(source="id.value")
    name = serializers.CharField()
    date = serializers.DateField()
    tiers = PriceTierSerializer(many=True)
    cover_charge_type = serializers.CharField(source="cover_charge_type.value")
    redeemable_amount = MoneyField()
    free_entry_before_time = TimeOfDayField()
    grace_period_minutes = serializers.IntegerField()
    group_booking_enabled = serializers.BooleanField()
    max_group_size = serializers.IntegerField()


class GroupBookingCreateSerializer(serializers.Serializer):
    host_name = serializers.CharField(max_length=255)
    group_size = serializers.IntegerField()
    booking_time = TimeOfDayField()


class CheckInSerializer(serializers.Serializer):
    member_ids = serializers.ListField(child=serializers.IntegerField(), allow_empty=True)
    check_in_time = TimeOfDayField()


class SurchargePaymentSerializer(serializers.Serializer):
    payment_reference = serializers.CharField(max_length=255)


class GroupMemberSerializer(serializers.Serializer):
    """Serializer for GroupMember domain model."""

    id = serializers.IntegerField()
    name = serializers.CharField()
    is_host = serializers.BooleanField()
    original_tier = PriceTierSerializer()
    checked_in = serializers.BooleanField()
    check_in_time = TimeOfDayField()
    surcharge = MoneyField()
    surcharge_payment_status = serializers.CharField(source="surcharge_payment_status.value")
    payment_reference = serializers.CharField()


class GroupBookingSerializer(serializers.Serializer):
    """Serializer for GroupBooking domain model."""

    id = serializers.CharField()
    event_id = serializers.CharField()
    host_name = serializers.CharField()
    group_size = serializers.IntegerField()
    booking_time = TimeOfDayField()
    original_tier = PriceTierSerializer()
    members = GroupMemberSerializer(many=True)
    qr_code = serializers.CharField()
    status = serializers.CharField(source="status.value")
    checked_in_count = serializers.IntegerField()
    is_fully_checked_in = serializers.BooleanField()
    outstanding_surcharge = MoneyField()


class CheckInResultSerializer(serializers.Serializer):
    """Serializer for CheckInResult domain model."""

    member_id = serializers.IntegerField()
    check_in_time = TimeOfDayField()
    surcharge = MoneyField()
    requires_payment = serializers.BooleanField()


class PaymentLinkSerializer(serializers.Serializer):
    """Serializer for PaymentLink domain model."""

    payment_url = serializers.CharField()
    amount = MoneyField()

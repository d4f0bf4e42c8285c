import uuid

import django.db.models.deletion
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name="EventConfig",
            fields=[
                ("id", models.CharField(max_length=100, primary_key=True, serialize=False)),
                ("name", models.CharField(max_length=255)),
                ("date", models.DateField(blank=True, null=True)),
                (
                    "cover_charge_type",
                    models.CharField(
                        choices=[("fixed", "Fixed"), ("redeemable", "Redeemable"), ("free_before", "Free before")],
                        default="fixed",
                        max_length=20,
                    ),
                ),
                ("redeemable_amount", models.PositiveIntegerField(default=0)),
                ("free_entry_before_time", models.TimeField(blank=True, null=True)),
                ("grace_period_minutes", models.PositiveIntegerField(default=15)),
                ("group_booking_enabled", models.BooleanField(default=True)),
                ("max_group_size", models.PositiveIntegerField(default=10)),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                ("updated_at", models.DateTimeField(auto_now=True)),
            ],
            options={
                "ordering": ["-created_at"],
            },
        ),
        migrations.CreateModel(
            name="PriceTier",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("position", models.PositiveIntegerField()),
                ("name", models.CharField(max_length=100)),
                ("start_time", models.TimeField()),
                ("price", models.PositiveIntegerField()),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="tiers",
                        to="admissions.eventconfig",
                    ),
                ),
            ],
            options={
                "ordering": ["position"],
                "constraints": [
                    models.UniqueConstraint(fields=("event", "position"), name="unique_tier_position"),
                ],
            },
        ),
        migrations.CreateModel(
            name="GroupBooking",
            fields=[
                ("id", models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ("host_name", models.CharField(max_length=255)),
                ("group_size", models.PositiveIntegerField()),
                ("booking_time", models.TimeField()),
                ("original_tier_name", models.CharField(max_length=100)),
                ("original_tier_start_time", models.TimeField()),
                ("original_tier_price", models.PositiveIntegerField()),
                ("qr_code", models.CharField(max_length=255, unique=True)),
                (
                    "status",
                    models.CharField(
                        choices=[("active", "Active"), ("closed", "Closed")],
                        default="active",
                        max_length=10,
                    ),
                ),
                ("created_at", models.DateTimeField(auto_now_add=True)),
                (
                    "event",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.PROTECT,
                        related_name="group_bookings",
                        to="admissions.eventconfig",
                    ),
                ),
            ],
            options={
                "ordering": ["created_at"],
                "indexes": [models.Index(fields=["event", "status"], name="booking_event_status_idx")],
            },
        ),
        migrations.CreateModel(
            name="GroupMember",
            fields=[
                ("id", models.BigAutoField(auto_created=True, primary_key=True, serialize=False, verbose_name="ID")),
                ("member_id", models.PositiveIntegerField()),
                ("name", models.CharField(max_length=255)),
                ("is_host", models.BooleanField(default=False)),
                ("original_tier_name", models.CharField(max_length=100)),
                ("original_tier_start_time", models.TimeField()),
                ("original_tier_price", models.PositiveIntegerField()),
                ("checked_in", models.BooleanField(default=False)),
                ("check_in_time", models.TimeField(blank=True, null=True)),
                ("surcharge", models.PositiveIntegerField(default=0)),
                (
                    "surcharge_payment_status",
                    models.CharField(
                        choices=[("none", "None"), ("pending", "Pending"), ("paid", "Paid")],
                        default="none",
                        max_length=10,
                    ),
                ),
                ("payment_reference", models.CharField(blank=True, max_length=255, null=True)),
                (
                    "booking",
                    models.ForeignKey(
                        on_delete=django.db.models.deletion.CASCADE,
                        related_name="members",
                        to="admissions.groupbooking",
                    ),
                ),
            ],
            options={
                "ordering": ["member_id"],
                "constraints": [
                    models.UniqueConstraint(fields=("booking", "member_id"), name="unique_booking_member"),
                ],
            },
        ),
    ]

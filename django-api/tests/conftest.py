"""Pytest configuration and shared fixtures."""

import pytest
from rest_framework.test import APIClient

from admissions.domain import EventConfig, Money, PriceTier, TimeOfDay
from admissions.services import providers
from admissions.services.event_config_service import EventConfigService
from admissions.services.group_booking_service import GroupBookingService
from admissions.services.payments import PaymentLinkBuilder
from admissions.services.qr_codes import QrCodeIssuer
from admissions.stores.memory_store import InMemoryEventConfigStore, InMemoryGroupBookingStore


@pytest.fixture
def api_client() -> APIClient:
    return APIClient()


@pytest.fixture(autouse=True)
def reset_providers():
    providers.reset()
    yield
    providers.reset()


@pytest.fixture
def evening_tiers() -> list[PriceTier]:
    return [
        PriceTier(name="Doors", start_time=TimeOfDay.of(0, 0), price=Money(0)),
        PriceTier(name="Early Night", start_time=TimeOfDay.of(21, 30), price=Money(500)),
        PriceTier(name="Peak Hours", start_time=TimeOfDay.of(22, 45), price=Money(800)),
    ]


@pytest.fixture
def event_service() -> EventConfigService:
    return EventConfigService(InMemoryEventConfigStore())


@pytest.fixture
def booking_store() -> InMemoryGroupBookingStore:
    return InMemoryGroupBookingStore()


@pytest.fixture
def qr_issuer() -> QrCodeIssuer:
    return QrCodeIssuer(salt="tests.qr", key="tests-signing-key")


@pytest.fixture
def booking_service(
    booking_store: InMemoryGroupBookingStore,
    event_service: EventConfigService,
    qr_issuer: QrCodeIssuer,
) -> GroupBookingService:
    return GroupBookingService(
        booking_store,
        event_service,
        qr_issuer,
        PaymentLinkBuilder("https://payments.test/pay/"),
    )


@pytest.fixture
def saturday_night(event_service: EventConfigService, evening_tiers: list[PriceTier]) -> EventConfig:
    return event_service.set_event_config(
        "saturday-night",
        name="Saturday Night Party",
        tiers=evening_tiers,
        max_group_size=6,
    )

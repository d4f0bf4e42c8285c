"""Builds the service graph from Django settings.

Handlers ask for services here so that tests can swap stores by
changing ``ADMISSIONS_STORE`` and calling ``reset()``.
"""

from functools import lru_cache

from django.conf import settings
from django.utils.module_loading import import_string

from admissions.services.event_config_service import EventConfigService
from admissions.services.group_booking_service import GroupBookingService
from admissions.services.payments import PaymentLinkBuilder
from admissions.services.qr_codes import QrCodeIssuer

STORE_BACKENDS = {
    "django": (
        "admissions.stores.django_store.DjangoEventConfigStore",
        "admissions.stores.django_store.DjangoGroupBookingStore",
    ),
    "memory": (
        "admissions.stores.memory_store.InMemoryEventConfigStore",
        "admissions.stores.memory_store.InMemoryGroupBookingStore",
    ),
}


@lru_cache(maxsize=1)
def _stores() -> tuple:
    try:
        event_store_path, booking_store_path = STORE_BACKENDS[settings.ADMISSIONS_STORE]
    except KeyError as exc:
        raise ValueError(f"Unknown ADMISSIONS_STORE {settings.ADMISSIONS_STORE!r}") from exc
    return import_string(event_store_path)(), import_string(booking_store_path)()


@lru_cache(maxsize=1)
def get_event_config_service() -> EventConfigService:
    event_store, _ = _stores()
    return EventConfigService(
        event_store,
        default_grace_period_minutes=settings.ADMISSIONS_DEFAULT_GRACE_PERIOD_MINUTES,
        default_max_group_size=settings.ADMISSIONS_DEFAULT_MAX_GROUP_SIZE,
    )


@lru_cache(maxsize=1)
def get_group_booking_service() -> GroupBookingService:
    _, booking_store = _stores()
    return GroupBookingService(
        booking_store,
        get_event_config_service(),
        QrCodeIssuer(salt=settings.ADMISSIONS_QR_SALT),
        PaymentLinkBuilder(settings.ADMISSIONS_PAYMENT_BASE_URL),
    )


def reset() -> None:
    """Drop cached services and stores."""
    get_group_booking_service.cache_clear()
    get_event_config_service.cache_clear()
    _stores.cache_clear()

"""Event configuration service - authoring and lookup of pricing rules."""

import datetime
from typing import Iterable

import structlog

from admissions.domain import CoverChargeType, EventConfig, EventId, Money, PriceTier, TimeOfDay
from admissions.domain.errors import EventNotFoundError
from admissions.services import tier_resolver
from admissions.stores.interfaces import EventConfigStore

logger = structlog.get_logger(__name__)


class EventConfigService:
    """Service for event configuration operations."""

    def __init__(
        self,
        store: EventConfigStore,
        *,
        default_grace_period_minutes: int = 15,
        default_max_group_size: int = 10,
    ) -> None:
        self._store = store
        self._default_grace_period_minutes = default_grace_period_minutes
        self._default_max_group_size = default_max_group_size

    def set_event_config(
        self,
        event_id: str,
        *,
        name: str,
        date: datetime.date | None = None,
        tiers: Iterable[PriceTier] = (),
        cover_charge_type: CoverChargeType = CoverChargeType.FIXED,
        redeemable_amount: Money | None = None,
        free_entry_before_time: TimeOfDay | None = None,
        grace_period_minutes: int | None = None,
        group_booking_enabled: bool = True,
        max_group_size: int | None = None,
    ) -> EventConfig:
        """Create or replace the configuration for an event.

        Omitted settings fall back to the configured defaults. Existing
        bookings keep the tier they were priced under.
        """
        config = EventConfig(
            id=EventId(event_id),
            name=name,
            date=date,
            tiers=tuple(tiers),
            cover_charge_type=cover_charge_type,
            redeemable_amount=redeemable_amount if redeemable_amount is not None else Money.zero(),
            free_entry_before_time=free_entry_before_time,
            grace_period_minutes=(
                grace_period_minutes if grace_period_minutes is not None else self._default_grace_period_minutes
            ),
            group_booking_enabled=group_booking_enabled,
            max_group_size=max_group_size if max_group_size is not None else self._default_max_group_size,
        )
        self._store.put(config)
        logger.info(
            "event_config_saved",
            event_id=event_id,
            tiers=len(config.tiers),
            cover_charge_type=config.cover_charge_type.value,
            group_booking_enabled=config.group_booking_enabled,
        )
        return config

    def get_event_config(self, event_id: str) -> EventConfig:
        """Return an event configuration by ID.

        Raises:
            EventNotFoundError: If the event has not been configured.
        """
        try:
            key = EventId(event_id)
        except ValueError as exc:
            raise EventNotFoundError(event_id) from exc
        config = self._store.get(key)
        if config is None:
            raise EventNotFoundError(event_id)
        return config

    def current_price(self, event_id: str, at: TimeOfDay) -> PriceTier:
        """Return the tier an arrival at ``at`` would be charged under."""
        return tier_resolver.resolve_tier(self.get_event_config(event_id), at)

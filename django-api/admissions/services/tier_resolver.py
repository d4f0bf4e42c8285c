"""Tier resolution - pure mapping from an event's pricing rules and a clock time to a price.

Nothing here touches storage; every function is safe to call concurrently.
"""

import structlog

from admissions.domain.errors import ConfigurationError
from admissions.domain.models import FREE_ENTRY_TIER, CoverChargeType, EventConfig, PriceTier
from admissions.domain.value_objects import Money, TimeOfDay

logger = structlog.get_logger(__name__)


def sorted_tiers(tiers: tuple[PriceTier, ...] | list[PriceTier]) -> list[PriceTier]:
    """Order tiers by start time. Equal start times keep their configured order."""
    return sorted(tiers, key=lambda tier: tier.start_time)


def resolve_tier(event: EventConfig, at: TimeOfDay) -> PriceTier:
    """Return the tier that prices an arrival at ``at``.

    The latest tier starting at or before ``at`` wins. When ``at`` precedes
    every tier, a free-before event yields the synthetic free entry tier up
    to its cut-off, and anything else falls back to the earliest tier.

    Raises:
        ConfigurationError: If the event has no tiers and free entry does not apply.
    """
    tiers = sorted_tiers(event.tiers)

    for tier in reversed(tiers):
        if tier.start_time <= at:
            return tier

    if (
        event.cover_charge_type is CoverChargeType.FREE_BEFORE
        and event.free_entry_before_time is not None
        and at <= event.free_entry_before_time
    ):
        return FREE_ENTRY_TIER

    if not tiers:
        raise ConfigurationError(event.id.value)

    logger.debug("tier_fallback_to_earliest", event_id=event.id.value, time=str(at), tier=tiers[0].name)
    return tiers[0]


def surcharge_between(original_tier: PriceTier, at: TimeOfDay, event: EventConfig) -> Money:
    """Extra amount owed for arriving at ``at`` instead of under ``original_tier``.

    Never negative: arriving under a cheaper tier is not refunded.
    """
    current = resolve_tier(event, at)
    return current.price.excess_over(original_tier.price)


def within_grace_period(booking_time: TimeOfDay, check_in_time: TimeOfDay, event: EventConfig) -> bool:
    """Advisory only. Pricing never consults this."""
    return check_in_time.minutes_since(booking_time) <= event.grace_period_minutes

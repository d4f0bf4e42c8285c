"""Unit tests for tier resolution, surcharges and the grace period.

Run with: pytest tests/test_tier_resolver.py -v
"""

import pytest

from admissions.domain import CoverChargeType, EventConfig, EventId, Money, PriceTier, TimeOfDay
from admissions.domain.errors import ConfigurationError
from admissions.services.tier_resolver import (
    resolve_tier,
    sorted_tiers,
    surcharge_between,
    within_grace_period,
)


def at(value: str) -> TimeOfDay:
    return TimeOfDay.from_string(value)


def tier(name: str, start: str, price: int) -> PriceTier:
    return PriceTier(name=name, start_time=at(start), price=Money(price))


def event(tiers, **overrides) -> EventConfig:
    return EventConfig(id=EventId("club-night"), name="Club Night", tiers=tuple(tiers), **overrides)


EARLY = tier("Early Night", "21:30", 500)
PEAK = tier("Peak Hours", "22:45", 800)


class TestResolveTier:
    """Tests for resolve_tier."""

    def test_returns_latest_tier_started(self, evening_tiers):
        """Given a time, returns the latest tier that has already started."""
        config = event(evening_tiers)
        assert resolve_tier(config, at("21:40")).price == Money(500)
        assert resolve_tier(config, at("23:10")).price == Money(800)
        assert resolve_tier(config, at("18:00")).price == Money(0)

    def test_tier_applies_from_its_start_time(self):
        """A tier applies from its start time onwards, not a second earlier."""
        assert resolve_tier(event([EARLY, PEAK]), at("22:45")) == PEAK
        assert resolve_tier(event([EARLY, PEAK]), at("22:44:59")) == EARLY

    def test_tier_order_in_config_does_not_matter(self):
        """Given tiers out of order, resolves against start times."""
        assert resolve_tier(event([PEAK, EARLY]), at("22:00")) == EARLY

    def test_time_before_all_tiers_falls_back_to_earliest(self):
        """Given a time before every tier, returns the earliest tier."""
        assert resolve_tier(event([PEAK, EARLY]), at("20:00")) == EARLY

    def test_free_entry_before_cut_off(self):
        """Given a free-before event and an early time, returns the free entry tier."""
        config = event(
            [EARLY, PEAK],
            cover_charge_type=CoverChargeType.FREE_BEFORE,
            free_entry_before_time=at("21:00"),
        )
        free = resolve_tier(config, at("20:15"))
        assert free.name == "Free Entry"
        assert free.price == Money(0)

    def test_free_entry_cut_off_is_inclusive(self):
        """Given a time exactly at the free entry cut-off, entry is free."""
        config = event(
            [EARLY],
            cover_charge_type=CoverChargeType.FREE_BEFORE,
            free_entry_before_time=at("21:00"),
        )
        assert resolve_tier(config, at("21:00")).price == Money(0)

    def test_after_free_cut_off_but_before_tiers_falls_back(self):
        """Given a time after the free cut-off but before any tier, returns the earliest tier."""
        config = event(
            [EARLY, PEAK],
            cover_charge_type=CoverChargeType.FREE_BEFORE,
            free_entry_before_time=at("21:00"),
        )
        assert resolve_tier(config, at("21:15")) == EARLY

    def test_free_entry_time_ignored_without_free_before_type(self):
        """Given a free entry time on a fixed event, the time is ignored."""
        config = event([EARLY], free_entry_before_time=at("21:00"))
        assert resolve_tier(config, at("20:00")) == EARLY

    def test_free_entry_does_not_override_started_tier(self):
        """Given a tier that has already started, free entry does not apply."""
        config = event(
            [tier("Doors", "00:00", 200), EARLY],
            cover_charge_type=CoverChargeType.FREE_BEFORE,
            free_entry_before_time=at("21:00"),
        )
        assert resolve_tier(config, at("20:00")).price == Money(200)

    def test_no_tiers_raises_configuration_error(self):
        """Given no tiers and no free entry, raises ConfigurationError."""
        with pytest.raises(ConfigurationError):
            resolve_tier(event([]), at("22:00"))

    def test_no_tiers_with_free_entry_is_free(self):
        """Given no tiers, free entry applies until the cut-off and fails after it."""
        config = event([], cover_charge_type=CoverChargeType.FREE_BEFORE, free_entry_before_time=at("23:00"))
        assert resolve_tier(config, at("22:00")).price == Money(0)
        with pytest.raises(ConfigurationError):
            resolve_tier(config, at("23:30"))

    def test_tiers_sharing_a_start_time_last_configured_wins(self):
        """Given two tiers with one start time, the one configured last wins."""
        first = tier("Presale", "21:30", 400)
        second = tier("Door", "21:30", 600)
        assert resolve_tier(event([first, second]), at("22:00")) == second
        assert sorted_tiers([second, PEAK, first]) == [second, first, PEAK]

    def test_price_never_decreases_over_the_night(self, evening_tiers):
        """Given rising tier prices, the resolved price never drops as the night goes on."""
        config = event(evening_tiers)
        prices = [resolve_tier(config, TimeOfDay(minute * 60)).price for minute in range(24 * 60)]
        assert prices == sorted(prices)


class TestSurchargeBetween:
    """Tests for surcharge_between."""

    def test_difference_to_later_tier(self, evening_tiers):
        """Given an arrival under a dearer tier, returns the price difference."""
        assert surcharge_between(EARLY, at("23:10"), event(evening_tiers)) == Money(300)

    def test_same_tier_costs_nothing(self, evening_tiers):
        """Given an arrival under the booked tier, returns zero."""
        assert surcharge_between(EARLY, at("21:40"), event(evening_tiers)) == Money(0)

    def test_cheaper_tier_is_not_refunded(self, evening_tiers):
        """Given an arrival under a cheaper tier, returns zero rather than a refund."""
        assert surcharge_between(PEAK, at("21:40"), event(evening_tiers)) == Money(0)

    def test_never_negative_at_any_time(self, evening_tiers):
        """For every tier and time of day, the surcharge is non-negative."""
        config = event(evening_tiers)
        for original in evening_tiers:
            for minute in range(0, 24 * 60, 5):
                assert surcharge_between(original, TimeOfDay(minute * 60), config).amount >= 0


class TestWithinGracePeriod:
    """Tests for within_grace_period."""

    def test_inside_window(self):
        """Given an arrival at the end of the window, returns True."""
        assert within_grace_period(at("21:35"), at("21:50"), event([EARLY], grace_period_minutes=15))

    def test_outside_window(self):
        """Given an arrival one minute past the window, returns False."""
        assert not within_grace_period(at("21:35"), at("21:51"), event([EARLY], grace_period_minutes=15))

    def test_arrival_before_booking_time(self):
        """Given an arrival before the booking time, returns True."""
        assert within_grace_period(at("21:35"), at("21:00"), event([EARLY], grace_period_minutes=0))

"""In-process stores backed by dicts. Used by tests and the ``memory`` store setting."""

import threading
from collections.abc import Iterator
from contextlib import contextmanager

from admissions.domain import BookingId, EventConfig, EventId, GroupBooking
from admissions.stores.interfaces import EventConfigStore, GroupBookingStore


class InMemoryEventConfigStore(EventConfigStore):
    """Event configurations kept in a dict keyed by event id."""

    def __init__(self) -> None:
        self._configs: dict[EventId, EventConfig] = {}

    def get(self, event_id: EventId) -> EventConfig | None:
        return self._configs.get(event_id)

    def put(self, config: EventConfig) -> None:
        self._configs[config.id] = config


class InMemoryGroupBookingStore(GroupBookingStore):
    """Bookings kept in insertion order with one lock per booking id."""

    def __init__(self) -> None:
        self._bookings: dict[BookingId, GroupBooking] = {}
        self._locks: dict[BookingId, threading.Lock] = {}
        self._registry_lock = threading.Lock()

    def get(self, booking_id: BookingId) -> GroupBooking | None:
        return self._bookings.get(booking_id)

    def put(self, booking: GroupBooking) -> None:
        with self._registry_lock:
            self._locks.setdefault(booking.id, threading.Lock())
        self._bookings[booking.id] = booking

    def list_for_event(self, event_id: EventId) -> list[GroupBooking]:
        return [b for b in list(self._bookings.values()) if b.event_id == event_id]

    @contextmanager
    def lock(self, booking_id: BookingId) -> Iterator[None]:
        # Unknown ids get a throwaway lock; only stored bookings keep one.
        with self._registry_lock:
            booking_lock = self._locks.get(booking_id) or threading.Lock()
        with booking_lock:
            yield

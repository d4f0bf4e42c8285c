"""Store interfaces (repository pattern).

Stores must be swappable and return domain models.
"""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager

from admissions.domain import BookingId, EventConfig, EventId, GroupBooking


class EventConfigStore(ABC):
    """Interface for event configuration persistence."""

    @abstractmethod
    def get(self, event_id: EventId) -> EventConfig | None:
        """Return an event configuration by ID, or None if not found."""
        ...

    @abstractmethod
    def put(self, config: EventConfig) -> None:
        """Create or replace an event configuration, tiers included."""
        ...


class GroupBookingStore(ABC):
    """Interface for group booking persistence."""

    @abstractmethod
    def get(self, booking_id: BookingId) -> GroupBooking | None:
        """Return a booking with its members, or None if not found."""
        ...

    @abstractmethod
    def put(self, booking: GroupBooking) -> None:
        """Create or replace a booking and all of its members."""
        ...

    @abstractmethod
    def list_for_event(self, event_id: EventId) -> list[GroupBooking]:
        """Return every booking for an event, oldest first, whatever its status."""
        ...

    @abstractmethod
    def lock(self, booking_id: BookingId) -> AbstractContextManager[None]:
        """Serialise read-modify-write on a single booking.

        Callers hold the lock across get() and put(). Locks on different
        bookings never block each other.
        """
        ...

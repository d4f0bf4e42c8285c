"""Domain primitives that enforce validity at creation time."""

import re
from dataclasses import dataclass
from datetime import time
from typing import Self
from uuid import UUID

SECONDS_PER_DAY = 24 * 60 * 60

_TIME_PATTERN = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}))?$")


@dataclass(frozen=True)
class EventId:
    """Operator-chosen identifier for an event configuration."""

    value: str

    def __post_init__(self) -> None:
        if not self.value or not self.value.strip():
            raise ValueError("EventId cannot be blank")

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class BookingId:
    """Unique identifier for a GroupBooking."""

    value: UUID

    @classmethod
    def from_string(cls, value: str) -> Self:
        return cls(value=UUID(value))

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, order=True)
class TimeOfDay:
    """Wall-clock time on the single implicit event day.

    Stored as seconds after midnight, so ordering and subtraction are
    plain integer arithmetic.
    """

    seconds: int

    def __post_init__(self) -> None:
        if not 0 <= self.seconds < SECONDS_PER_DAY:
            raise ValueError("TimeOfDay must fall between 00:00 and 23:59:59")

    @classmethod
    def of(cls, hour: int, minute: int = 0, second: int = 0) -> Self:
        if not (0 <= hour < 24 and 0 <= minute < 60 and 0 <= second < 60):
            raise ValueError(f"Invalid time {hour:02d}:{minute:02d}:{second:02d}")
        return cls(seconds=hour * 3600 + minute * 60 + second)

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse ``HH:MM`` or ``HH:MM:SS``."""
        match = _TIME_PATTERN.match(value.strip())
        if match is None:
            raise ValueError(f"Invalid time format: {value!r}")
        hour, minute, second = match.groups()
        return cls.of(int(hour), int(minute), int(second or 0))

    @classmethod
    def from_time(cls, value: time) -> Self:
        return cls.of(value.hour, value.minute, value.second)

    @property
    def hour(self) -> int:
        return self.seconds // 3600

    @property
    def minute(self) -> int:
        return self.seconds % 3600 // 60

    @property
    def second(self) -> int:
        return self.seconds % 60

    def to_time(self) -> time:
        return time(self.hour, self.minute, self.second)

    def minutes_since(self, earlier: "TimeOfDay") -> float:
        """Signed number of minutes between ``earlier`` and this time."""
        return (self.seconds - earlier.seconds) / 60

    def __str__(self) -> str:
        if self.second:
            return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        return f"{self.hour:02d}:{self.minute:02d}"


@dataclass(frozen=True, order=True)
class Money:
    """Non-negative amount in minor currency units (paise, cents)."""

    amount: int

    def __post_init__(self) -> None:
        if isinstance(self.amount, bool) or not isinstance(self.amount, int):
            raise ValueError("Money amount must be an integer number of minor units")
        if self.amount < 0:
            raise ValueError("Money amount cannot be negative")

    @classmethod
    def zero(cls) -> Self:
        return cls(amount=0)

    def __add__(self, other: "Money") -> "Money":
        return Money(self.amount + other.amount)

    def excess_over(self, other: "Money") -> "Money":
        """Amount by which this exceeds ``other``, floored at zero."""
        return Money(max(0, self.amount - other.amount))

    def __bool__(self) -> bool:
        return self.amount > 0

    def __str__(self) -> str:
        return str(self.amount)

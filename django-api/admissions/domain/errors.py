"""Domain error codes for the admissions module."""

from dataclasses import dataclass
from enum import Enum


class ErrorCode(Enum):
    """Domain error codes."""

    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"
    FEATURE_DISABLED = "FEATURE_DISABLED"
    GROUP_SIZE_EXCEEDED = "GROUP_SIZE_EXCEEDED"
    INVALID_GROUP_SIZE = "INVALID_GROUP_SIZE"
    EVENT_NOT_FOUND = "EVENT_NOT_FOUND"
    BOOKING_NOT_FOUND = "BOOKING_NOT_FOUND"
    BOOKING_CLOSED = "BOOKING_CLOSED"
    MEMBER_NOT_FOUND = "MEMBER_NOT_FOUND"
    NO_SURCHARGE = "NO_SURCHARGE"
    INVALID_TIME = "INVALID_TIME"
    INVALID_QR_CODE = "INVALID_QR_CODE"


@dataclass(frozen=True)
class DomainError(Exception):
    """Base domain error with code and user-safe message."""

    code: ErrorCode
    message: str

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"


class ConfigurationError(DomainError):
    """Raised when an event has no tier that could price a given time."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.CONFIGURATION_ERROR,
            message="Event has no price tiers configured",
        )
        self.event_id = event_id


class FeatureDisabledError(DomainError):
    """Raised when group booking is switched off for an event."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.FEATURE_DISABLED,
            message="Group booking not available for this event",
        )
        self.event_id = event_id


class GroupSizeExceededError(DomainError):
    """Raised when a requested group is larger than the event allows."""

    def __init__(self, group_size: int, max_group_size: int) -> None:
        super().__init__(
            code=ErrorCode.GROUP_SIZE_EXCEEDED,
            message=f"Maximum group size is {max_group_size}",
        )
        self.group_size = group_size
        self.max_group_size = max_group_size


class InvalidGroupSizeError(DomainError):
    """Raised when a group would have no members."""

    def __init__(self, group_size: int) -> None:
        super().__init__(
            code=ErrorCode.INVALID_GROUP_SIZE,
            message="Group size must be at least 1",
        )
        self.group_size = group_size


class EventNotFoundError(DomainError):
    """Raised when an event configuration is not found."""

    def __init__(self, event_id: str) -> None:
        super().__init__(
            code=ErrorCode.EVENT_NOT_FOUND,
            message="Event not found",
        )
        self.event_id = event_id


class BookingNotFoundError(DomainError):
    """Raised when a booking is not found."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_NOT_FOUND,
            message="Booking not found",
        )
        self.booking_id = booking_id


class BookingClosedError(DomainError):
    """Raised when a closed booking receives a check-in."""

    def __init__(self, booking_id: str) -> None:
        super().__init__(
            code=ErrorCode.BOOKING_CLOSED,
            message="Booking is closed",
        )
        self.booking_id = booking_id


class MemberNotFoundError(DomainError):
    """Raised when a member id does not exist in a booking."""

    def __init__(self, booking_id: str, member_id: int) -> None:
        super().__init__(
            code=ErrorCode.MEMBER_NOT_FOUND,
            message="Member not found",
        )
        self.booking_id = booking_id
        self.member_id = member_id


class NoSurchargeError(DomainError):
    """Raised when a member has no outstanding surcharge to collect."""

    def __init__(self, booking_id: str, member_id: int) -> None:
        super().__init__(
            code=ErrorCode.NO_SURCHARGE,
            message="No surcharge payment required",
        )
        self.booking_id = booking_id
        self.member_id = member_id


class InvalidTimeError(DomainError):
    """Raised when a wall-clock time cannot be parsed."""

    def __init__(self, value: str) -> None:
        super().__init__(
            code=ErrorCode.INVALID_TIME,
            message="Invalid time format, expected HH:MM",
        )
        self.value = value


class InvalidQrCodeError(DomainError):
    """Raised when a QR token is tampered with or unknown."""

    def __init__(self) -> None:
        super().__init__(
            code=ErrorCode.INVALID_QR_CODE,
            message="Invalid QR code",
        )

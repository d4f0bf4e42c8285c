"""Opaque QR tokens that resolve back to exactly one booking.

Rendering and scanning the code happen outside this service; it only
mints the payload and dereferences it again.
"""

from django.core import signing

from admissions.domain import BookingId
from admissions.domain.errors import InvalidQrCodeError


class QrCodeIssuer:
    """Signs booking ids so a scanned token cannot be forged or altered."""

    def __init__(self, salt: str, key: str | None = None) -> None:
        self._signer = signing.Signer(key=key, salt=salt)

    def issue(self, booking_id: BookingId) -> str:
        return self._signer.sign(str(booking_id))

    def resolve(self, qr_code: str) -> BookingId:
        """Return the booking id a token was minted for.

        Raises:
            InvalidQrCodeError: If the signature does not match or the payload is not a booking id.
        """
        try:
            return BookingId.from_string(self._signer.unsign(qr_code))
        except (signing.BadSignature, ValueError) as exc:
            raise InvalidQrCodeError() from exc

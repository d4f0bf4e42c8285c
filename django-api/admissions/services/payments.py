"""Payment link generation for late-arrival surcharges.

Executing the payment is the gateway's job. The reference it hands back
is recorded through GroupBookingService.process_surcharge_payment.
"""

from admissions.domain import BookingId, GroupMember, PaymentLink


class PaymentLinkBuilder:
    """Builds deterministic gateway URLs for one member's surcharge."""

    def __init__(self, base_url: str) -> None:
        self._base_url = base_url.rstrip("/")

    def build(self, booking_id: BookingId, member: GroupMember) -> PaymentLink:
        return PaymentLink(
            payment_url=f"{self._base_url}/{booking_id}/{member.id}",
            amount=member.surcharge,
        )

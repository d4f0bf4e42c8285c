from admissions.handlers.views import (
    BookingByQrCodeView,
    BookingDetailView,
    CheckInView,
    CloseBookingView,
    CurrentPriceView,
    EventBookingListView,
    EventConfigView,
    PaymentLinkView,
    SurchargePaymentView,
)

__all__ = [
    "BookingByQrCodeView",
    "BookingDetailView",
    "CheckInView",
    "CloseBookingView",
    "CurrentPriceView",
    "EventBookingListView",
    "EventConfigView",
    "PaymentLinkView",
    "SurchargePaymentView",
]

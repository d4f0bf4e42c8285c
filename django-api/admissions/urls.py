from django.urls import path

from admissions.handlers import (
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

urlpatterns = [
    path("events/<str:event_id>/config", EventConfigView.as_view(), name="event-config"),
    path("events/<str:event_id>/price", CurrentPriceView.as_view(), name="event-price"),
    path("events/<str:event_id>/bookings", EventBookingListView.as_view(), name="event-bookings"),
    path("bookings/qr/<str:qr_code>", BookingByQrCodeView.as_view(), name="booking-by-qr"),
    path("bookings/<str:booking_id>", BookingDetailView.as_view(), name="booking-detail"),
    path("bookings/<str:booking_id>/check-ins", CheckInView.as_view(), name="booking-check-ins"),
    path("bookings/<str:booking_id>/close", CloseBookingView.as_view(), name="booking-close"),
    path(
        "bookings/<str:booking_id>/members/<int:member_id>/payment-link",
        PaymentLinkView.as_view(),
        name="member-payment-link",
    ),
    path(
        "bookings/<str:booking_id>/members/<int:member_id>/payment",
        SurchargePaymentView.as_view(),
        name="member-payment",
    ),
]

"""HTTP handlers (views) - handle HTTP concerns only.

Handlers:
- Parse requests and validate input format
- Call services for business logic
- Leave domain errors to admissions.handlers.exceptions for HTTP mapping
- Never contain business logic
"""

from rest_framework import status
from rest_framework.request import Request
from rest_framework.response import Response
from rest_framework.views import APIView

from admissions.handlers.serializers import (
    CheckInResultSerializer,
    CheckInSerializer,
    EventConfigInputSerializer,
    EventConfigSerializer,
    GroupBookingCreateSerializer,
    GroupBookingSerializer,
    GroupMemberSerializer,
    PaymentLinkSerializer,
    PriceTierSerializer,
    SurchargePaymentSerializer,
    parse_time,
)
from admissions.services.providers import get_event_config_service, get_group_booking_service


class EventConfigView(APIView):
    """Handler for GET/PUT /api/events/{event_id}/config"""

    def get(self, request: Request, event_id: str) -> Response:
        config = get_event_config_service().get_event_config(event_id)
        return Response(EventConfigSerializer(config).data)

    def put(self, request: Request, event_id: str) -> Response:
        serializer = EventConfigInputSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        config = get_event_config_service().set_event_config(event_id, **serializer.to_service_kwargs())
        return Response(EventConfigSerializer(config).data)


class CurrentPriceView(APIView):
    """Handler for GET /api/events/{event_id}/price?time=HH:MM"""

    def get(self, request: Request, event_id: str) -> Response:
        at = parse_time(request.query_params.get("time"))
        tier = get_event_config_service().current_price(event_id, at)
        return Response(PriceTierSerializer(tier).data)


class EventBookingListView(APIView):
    """Handler for GET/POST /api/events/{event_id}/bookings"""

    def get(self, request: Request, event_id: str) -> Response:
        bookings = get_group_booking_service().get_event_bookings(event_id)
        return Response(GroupBookingSerializer(bookings, many=True).data)

    def post(self, request: Request, event_id: str) -> Response:
        serializer = GroupBookingCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        booking = get_group_booking_service().create_group_booking(event_id, **serializer.validated_data)
        return Response(GroupBookingSerializer(booking).data, status=status.HTTP_201_CREATED)


class BookingDetailView(APIView):
    """Handler for GET /api/bookings/{booking_id}"""

    def get(self, request: Request, booking_id: str) -> Response:
        booking = get_group_booking_service().get_booking(booking_id)
        return Response(GroupBookingSerializer(booking).data)


class BookingByQrCodeView(APIView):
    """Handler for GET /api/bookings/qr/{qr_code}"""

    def get(self, request: Request, qr_code: str) -> Response:
        booking = get_group_booking_service().get_booking_by_qr_code(qr_code)
        return Response(GroupBookingSerializer(booking).data)


class CheckInView(APIView):
    """Handler for POST /api/bookings/{booking_id}/check-ins"""

    def post(self, request: Request, booking_id: str) -> Response:
        serializer = CheckInSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        results = get_group_booking_service().process_check_in(
            booking_id,
            serializer.validated_data["member_ids"],
            serializer.validated_data["check_in_time"],
        )
        return Response({"results": CheckInResultSerializer(results, many=True).data})


class CloseBookingView(APIView):
    """Handler for POST /api/bookings/{booking_id}/close"""

    def post(self, request: Request, booking_id: str) -> Response:
        booking = get_group_booking_service().close_booking(booking_id)
        return Response(GroupBookingSerializer(booking).data)


class PaymentLinkView(APIView):
    """Handler for POST /api/bookings/{booking_id}/members/{member_id}/payment-link"""

    def post(self, request: Request, booking_id: str, member_id: int) -> Response:
        link = get_group_booking_service().generate_payment_url(booking_id, member_id)
        return Response(PaymentLinkSerializer(link).data)


class SurchargePaymentView(APIView):
    """Handler for POST /api/bookings/{booking_id}/members/{member_id}/payment"""

    def post(self, request: Request, booking_id: str, member_id: int) -> Response:
        serializer = SurchargePaymentSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        member = get_group_booking_service().process_surcharge_payment(
            booking_id, member_id, serializer.validated_data["payment_reference"]
        )
        return Response(GroupMemberSerializer(member).data)

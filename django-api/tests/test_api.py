"""Integration tests for the admissions HTTP API.

Run with: pytest tests/test_api.py -v
"""

import pytest
from rest_framework.test import APIClient

EVENT_CONFIG = {
    "name": "Saturday Night Party",
    "date": "2024-01-20",
    "tiers": [
        {"name": "Early Night", "start_time": "21:30", "price": 500},
        {"name": "Peak Hours", "start_time": "22:45", "price": 800},
    ],
    "cover_charge_type": "redeemable",
    "redeemable_amount": 300,
    "free_entry_before_time": "21:00",
    "grace_period_minutes": 15,
    "group_booking_enabled": True,
    "max_group_size": 6,
}


@pytest.fixture
def configured_event(api_client: APIClient) -> str:
    response = api_client.put("/api/events/event123/config", EVENT_CONFIG, format="json")
    assert response.status_code == 200
    return "event123"


@pytest.fixture
def booking(api_client: APIClient, configured_event: str) -> dict:
    response = api_client.post(
        f"/api/events/{configured_event}/bookings",
        {"host_name": "Ravi", "group_size": 4, "booking_time": "21:35"},
        format="json",
    )
    assert response.status_code == 201
    return response.json()


@pytest.mark.django_db
class TestEventConfig:
    """Tests for PUT/GET /api/events/{id}/config"""

    def test_put_then_get(self, api_client: APIClient, configured_event: str):
        """Given a saved config, GET returns the same fields."""
        response = api_client.get(f"/api/events/{configured_event}/config")

        assert response.status_code == 200
        body = response.json()
        assert body["id"] == "event123"
        assert body["tiers"] == EVENT_CONFIG["tiers"]
        assert body["cover_charge_type"] == "redeemable"
        assert body["free_entry_before_time"] == "21:00"
        assert body["max_group_size"] == 6

    def test_defaults_for_omitted_fields(self, api_client: APIClient):
        """Given only a name, returns the default settings."""
        response = api_client.put("/api/events/minimal/config", {"name": "Minimal"}, format="json")

        body = response.json()
        assert body["grace_period_minutes"] == 15
        assert body["max_group_size"] == 10
        assert body["cover_charge_type"] == "fixed"
        assert body["group_booking_enabled"] is True
        assert body["tiers"] == []
        assert body["free_entry_before_time"] is None

    def test_rejects_bad_tier_time(self, api_client: APIClient):
        """Given a tier starting at 25:00, returns 400."""
        payload = {"name": "Bad", "tiers": [{"name": "Late", "start_time": "25:00", "price": 100}]}
        response = api_client.put("/api/events/bad/config", payload, format="json")
        assert response.status_code == 400

    def test_rejects_negative_price(self, api_client: APIClient):
        """Given a negative tier price, returns 400."""
        payload = {"name": "Bad", "tiers": [{"name": "Late", "start_time": "22:00", "price": -1}]}
        response = api_client.put("/api/events/bad/config", payload, format="json")
        assert response.status_code == 400

    def test_get_unknown_event(self, api_client: APIClient):
        """Given an unknown event, returns 404 with EVENT_NOT_FOUND."""
        response = api_client.get("/api/events/missing/config")
        assert response.status_code == 404
        assert response.json() == {"code": "EVENT_NOT_FOUND", "message": "Event not found"}


@pytest.mark.django_db
class TestCurrentPrice:
    """Tests for GET /api/events/{id}/price"""

    def test_current_tier(self, api_client: APIClient, configured_event: str):
        """Given a time after peak starts, returns the peak tier."""
        response = api_client.get(f"/api/events/{configured_event}/price", {"time": "23:10"})
        assert response.json() == {"name": "Peak Hours", "start_time": "22:45", "price": 800}

    def test_invalid_time(self, api_client: APIClient, configured_event: str):
        """Given an unparseable time, returns 400 with INVALID_TIME."""
        response = api_client.get(f"/api/events/{configured_event}/price", {"time": "late"})
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_TIME"

    def test_event_without_tiers(self, api_client: APIClient):
        """Given an event without tiers, returns 400 with CONFIGURATION_ERROR."""
        api_client.put("/api/events/empty/config", {"name": "Empty"}, format="json")
        response = api_client.get("/api/events/empty/price", {"time": "22:00"})
        assert response.status_code == 400
        assert response.json()["code"] == "CONFIGURATION_ERROR"


@pytest.mark.django_db
class TestGroupBookingFlow:
    """End-to-end: book, arrive in two batches, settle the surcharge."""

    def test_create_booking(self, booking: dict):
        """Given a new booking, returns 201 with the host first and nobody checked in."""
        assert booking["group_size"] == 4
        assert booking["original_tier"]["price"] == 500
        assert booking["status"] == "active"
        assert booking["members"][0]["name"] == "Ravi (Host)"
        assert booking["checked_in_count"] == 0

    def test_partial_check_in_and_payment(self, api_client: APIClient, booking: dict):
        """Two on time, two late, one surcharge paid: the booking shows the rest outstanding."""
        booking_id = booking["id"]

        first = api_client.post(
            f"/api/bookings/{booking_id}/check-ins", {"member_ids": [1, 2], "check_in_time": "21:40"}, format="json"
        )
        assert [r["surcharge"] for r in first.json()["results"]] == [0, 0]

        second = api_client.post(
            f"/api/bookings/{booking_id}/check-ins", {"member_ids": [3, 4], "check_in_time": "23:10"}, format="json"
        )
        assert second.json()["results"] == [
            {"member_id": 3, "check_in_time": "23:10", "surcharge": 300, "requires_payment": True},
            {"member_id": 4, "check_in_time": "23:10", "surcharge": 300, "requires_payment": True},
        ]

        link = api_client.post(f"/api/bookings/{booking_id}/members/3/payment-link")
        assert link.status_code == 200
        assert link.json() == {"payment_url": f"https://payment.example.com/pay/{booking_id}/3", "amount": 300}

        paid = api_client.post(
            f"/api/bookings/{booking_id}/members/3/payment", {"payment_reference": "pay_abc123"}, format="json"
        )
        assert paid.status_code == 200
        assert paid.json()["surcharge_payment_status"] == "paid"

        detail = api_client.get(f"/api/bookings/{booking_id}").json()
        assert detail["checked_in_count"] == 4
        assert detail["is_fully_checked_in"] is True
        assert detail["outstanding_surcharge"] == 300
        assert [m["surcharge_payment_status"] for m in detail["members"]] == ["none", "none", "paid", "pending"]

    def test_repeat_check_in_returns_no_results(self, api_client: APIClient, booking: dict):
        """Given a repeat and an unknown member, returns an empty result list."""
        url = f"/api/bookings/{booking['id']}/check-ins"
        api_client.post(url, {"member_ids": [1], "check_in_time": "21:40"}, format="json")

        response = api_client.post(url, {"member_ids": [1, 99], "check_in_time": "23:30"}, format="json")

        assert response.status_code == 200
        assert response.json() == {"results": []}

    def test_payment_link_without_surcharge(self, api_client: APIClient, booking: dict):
        """Given a member with no surcharge, returns 400 with NO_SURCHARGE."""
        api_client.post(
            f"/api/bookings/{booking['id']}/check-ins", {"member_ids": [1], "check_in_time": "21:40"}, format="json"
        )
        response = api_client.post(f"/api/bookings/{booking['id']}/members/1/payment-link")
        assert response.status_code == 400
        assert response.json()["code"] == "NO_SURCHARGE"

    def test_payment_for_unknown_member(self, api_client: APIClient, booking: dict):
        """Given a member outside the group, returns 404 with MEMBER_NOT_FOUND."""
        response = api_client.post(
            f"/api/bookings/{booking['id']}/members/9/payment", {"payment_reference": "pay_abc123"}, format="json"
        )
        assert response.status_code == 404
        assert response.json()["code"] == "MEMBER_NOT_FOUND"

    def test_group_too_large(self, api_client: APIClient, configured_event: str):
        """Given a group over the maximum, returns 400 and creates nothing."""
        response = api_client.post(
            f"/api/events/{configured_event}/bookings",
            {"host_name": "Ravi", "group_size": 8, "booking_time": "21:35"},
            format="json",
        )
        assert response.status_code == 400
        assert response.json()["code"] == "GROUP_SIZE_EXCEEDED"
        assert api_client.get(f"/api/events/{configured_event}/bookings").json() == []

    def test_group_booking_disabled(self, api_client: APIClient):
        """Given an event with group booking off, returns 409 with FEATURE_DISABLED."""
        api_client.put(
            "/api/events/solo/config", {**EVENT_CONFIG, "group_booking_enabled": False}, format="json"
        )
        response = api_client.post(
            "/api/events/solo/bookings",
            {"host_name": "Ravi", "group_size": 2, "booking_time": "21:35"},
            format="json",
        )
        assert response.status_code == 409
        assert response.json()["code"] == "FEATURE_DISABLED"

    def test_unknown_booking(self, api_client: APIClient):
        """Given a malformed booking id, returns 404 with BOOKING_NOT_FOUND."""
        response = api_client.get("/api/bookings/not-a-booking")
        assert response.status_code == 404
        assert response.json()["code"] == "BOOKING_NOT_FOUND"


@pytest.mark.django_db
class TestBookingLookup:
    """Tests for QR lookup, listing and closing bookings."""

    def test_lookup_by_qr_code(self, api_client: APIClient, booking: dict):
        """Given the issued QR code, returns the booking."""
        response = api_client.get(f"/api/bookings/qr/{booking['qr_code']}")
        assert response.status_code == 200
        assert response.json()["id"] == booking["id"]

    def test_lookup_by_forged_qr_code(self, api_client: APIClient, booking: dict):
        """Given a forged QR code, returns 400 with INVALID_QR_CODE."""
        response = api_client.get(f"/api/bookings/qr/{booking['id']}:forged")
        assert response.status_code == 400
        assert response.json()["code"] == "INVALID_QR_CODE"

    def test_closed_bookings_leave_event_listing(self, api_client: APIClient, booking: dict, configured_event: str):
        """Given a closed booking, it leaves the listing and rejects check-ins with 409."""
        assert [b["id"] for b in api_client.get(f"/api/events/{configured_event}/bookings").json()] == [booking["id"]]

        closed = api_client.post(f"/api/bookings/{booking['id']}/close")
        assert closed.json()["status"] == "closed"

        assert api_client.get(f"/api/events/{configured_event}/bookings").json() == []
        response = api_client.post(
            f"/api/bookings/{booking['id']}/check-ins", {"member_ids": [1], "check_in_time": "21:40"}, format="json"
        )
        assert response.status_code == 409
        assert response.json()["code"] == "BOOKING_CLOSED"

from datetime import timedelta
from decimal import Decimal

import pytest

from travel_api.domain.entities.booking import Booking


@pytest.fixture
def seeded_bookings(bundle, clock):
    repo = bundle["booking_repo"]
    owners = ["alice@example.com", "bob@example.com", "alice@example.com"]
    for index, email in enumerate(owners):
        booking = Booking(
            id=f"b{index + 1}",
            user_id=f"uid-{email.split('@')[0]}",
            user_email=email,
            item_type="package",
            item_id="pkg500",
            item_title="Trip",
            amount=Decimal("500.00"),
            currency="usd",
            payment_id=f"pi_{index + 1}",
            created_at=clock.now() - timedelta(days=len(owners) - index),
        )
        repo.bookings[booking.id] = booking
        repo.by_payment[booking.payment_id] = booking.id
    return repo


def test_user_bookings_only_own_newest_first(client, alice_headers, seeded_bookings):
    res = client.get("/bookings/user", headers=alice_headers)

    assert res.status_code == 200
    assert [b["_id"] for b in res.json()] == ["b3", "b1"]


def test_admin_lists_all_bookings(client, admin_headers, seeded_bookings):
    res = client.get("/bookings", params={"page": 1, "limit": 2}, headers=admin_headers)

    assert res.status_code == 200
    body = res.json()
    assert [b["_id"] for b in body["bookings"]] == ["b3", "b2"]
    assert body["total"] == 3
    assert body["page"] == 1
    assert body["pages"] == 2


def test_booking_listing_requires_admin(client, alice_headers, seeded_bookings):
    res = client.get("/bookings", headers=alice_headers)

    assert res.status_code == 403
    assert res.json()["error"] == "Forbidden"


def test_admin_gets_booking_by_id(client, admin_headers, seeded_bookings):
    res = client.get("/bookings/b2", headers=admin_headers)

    assert res.status_code == 200
    assert res.json()["userEmail"] == "bob@example.com"


def test_get_booking_unknown_and_malformed(client, admin_headers, seeded_bookings):
    assert client.get("/bookings/zzz", headers=admin_headers).status_code == 404
    assert client.get("/bookings/bad%20id", headers=admin_headers).status_code == 400


def test_owner_deletes_booking(client, alice_headers, seeded_bookings):
    res = client.delete("/bookings/b1", headers=alice_headers)

    assert res.status_code == 200
    assert res.json() == {"message": "Booking removed"}
    assert "b1" not in seeded_bookings.bookings


def test_stranger_cannot_delete_booking(client, token_for, seeded_bookings):
    res = client.delete("/bookings/b1", headers=token_for("mallory@example.com"))

    assert res.status_code == 403
    assert "b1" in seeded_bookings.bookings


def test_admin_deletes_any_booking(client, admin_headers, seeded_bookings):
    res = client.delete("/bookings/b2", headers=admin_headers)

    assert res.status_code == 200
    assert "b2" not in seeded_bookings.bookings


def test_admin_overview(client, admin_headers, seeded_bookings, package, resort):
    res = client.get("/admin/overview", params={"days": 30}, headers=admin_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["totalBookings"] == 3
    assert body["prevBookings"] == 0
    assert body["bookingsChangePercent"] == 100
    assert body["totalUsers"] == 1
    assert body["packagesCount"] == 1
    assert body["resortsCount"] == 1


def test_admin_overview_requires_admin(client, alice_headers):
    assert client.get("/admin/overview", headers=alice_headers).status_code == 403


def test_admin_overview_rejects_out_of_range_days(client, admin_headers):
    huge = client.get("/admin/overview", params={"days": 10**9}, headers=admin_headers)
    zero = client.get("/admin/overview", params={"days": 0}, headers=admin_headers)

    assert huge.status_code == 400
    assert huge.json()["code"] == "VALIDATION_ERROR"
    assert zero.status_code == 400


def test_huge_page_and_limit_are_clamped(client, admin_headers, seeded_bookings):
    res = client.get("/bookings", params={"page": 10**19, "limit": 10**19}, headers=admin_headers)

    assert res.status_code == 200
    body = res.json()
    assert body["bookings"] == []
    assert body["total"] == 3
    assert body["page"] == 100_000
    assert body["pages"] == 1

import hashlib
import uuid

from travel_api.domain.entities.booking import Booking
from travel_api.domain.entities.user import PROFILE_PIC_PLACEHOLDER, UserAccount, normalize_profile_pic
from travel_api.domain.identifiers import candidate_ids, is_valid_id, new_id


def test_new_ids_are_valid_and_unique():
    first, second = new_id(), new_id()

    assert first != second
    assert is_valid_id(first)


def test_malformed_ids_are_rejected():
    assert not is_valid_id("")
    assert not is_valid_id("has space")
    assert not is_valid_id("x" * 65)
    assert not is_valid_id("../etc")


def test_candidate_ids_try_canonical_uuid_first():
    value = str(uuid.UUID("12345678123456781234567812345678"))

    assert candidate_ids(value) == ["12345678123456781234567812345678", value]
    assert candidate_ids("legacy-id") == ["legacy-id"]


def test_profile_pic_fixes_image_host_suffix():
    assert normalize_profile_pic(" https://i.ibb.co.com/abc/me.png ") == "https://i.ibb.co/abc/me.png"


def test_profile_pic_requires_http_url():
    assert normalize_profile_pic("ftp://example.com/me.png") is None
    assert normalize_profile_pic("") is None


def test_profile_falls_back_to_gravatar_then_placeholder():
    user = UserAccount(email=" Alice@Example.com", profile_pic="not-a-url")
    digest = hashlib.md5(b"alice@example.com").hexdigest()

    assert user.resolved_profile_pic == f"https://www.gravatar.com/avatar/{digest}?d=identicon&s=200"
    assert UserAccount(email="").resolved_profile_pic == PROFILE_PIC_PLACEHOLDER


def test_booking_ownership_requires_an_email():
    booking = Booking(
        id="b1",
        user_id=None,
        user_email=None,
        item_type="package",
        item_id="p1",
        item_title="Trip",
        amount=0,
        currency="usd",
        payment_id="pi_1",
    )

    assert not booking.is_owned_by(None)
    assert not booking.is_owned_by("")

from decimal import Decimal

import pytest

from travel_api.domain.constants import MAX_QUANTITY
from travel_api.domain.entities.catalog import Package, Resort
from travel_api.domain.errors import ValidationError
from travel_api.domain.pricing import QuantityParams, expected_minor_amount, parse_quantity, price
from travel_api.domain.value_objects.money import Money


@pytest.mark.parametrize("guests", [1, 2, 3, 7])
def test_package_price_is_per_guest(guests):
    package = Package(id="p1", title="Trip", price=Decimal("500"))

    assert price(package, QuantityParams(guests=guests), "usd").amount == Decimal("500") * guests


@pytest.mark.parametrize("nights", [1, 2, 5])
def test_resort_price_is_per_night(nights):
    resort = Resort(id="r1", name="Resort", location="Coast", price_per_night=Decimal("150"))

    assert price(resort, QuantityParams(nights=nights), "usd").amount == Decimal("150") * nights


@pytest.mark.parametrize("raw", [None, "", "abc", 0, -3, "NaN", True])
def test_missing_or_invalid_quantity_defaults_to_one(raw):
    package = Package(id="p1", title="Trip", price=Decimal("500"))

    assert price(package, QuantityParams(guests=raw), "usd").amount == Decimal("500")


def test_numeric_strings_are_accepted():
    resort = Resort(id="r1", name="Resort", location="Coast", price_per_night=Decimal("99.99"))

    assert expected_minor_amount(resort, QuantityParams(nights="3"), "usd") == 29997


def test_resort_falls_back_to_generic_price():
    resort = Resort(id="r1", name="Resort", location="Coast", price=Decimal("80"))

    assert price(resort, QuantityParams(nights=2), "usd").amount == Decimal("160")


def test_missing_price_is_zero():
    assert price(Package(id="p1", title="Trip"), QuantityParams(guests=4), "usd").is_zero()
    assert price(Resort(id="r1", name="R", location="L"), QuantityParams(), "usd").is_zero()


def test_package_ignores_nights_and_resort_ignores_guests():
    package = Package(id="p1", title="Trip", price=Decimal("500"))
    resort = Resort(id="r1", name="Resort", location="Coast", price_per_night=Decimal("150"))
    params = QuantityParams(guests=2, nights=4)

    assert price(package, params, "usd").amount == Decimal("1000")
    assert price(resort, params, "usd").amount == Decimal("600")


def test_expected_minor_amount_for_two_guests():
    package = Package(id="p1", title="Trip", price=Decimal("500"))

    assert expected_minor_amount(package, QuantityParams(guests=2), "usd") == 100000


def test_minor_units_round_half_up():
    assert Money(amount=Decimal("10.005"), currency_code="usd").to_minor_units() == 1001
    assert Money(amount=Decimal("19.994"), currency_code="usd").to_minor_units() == 1999


def test_money_from_minor_units():
    money = Money.from_minor_units(100000, "USD")

    assert money.amount == Decimal("1000.00")
    assert money.currency_code == "usd"


def test_money_rejects_negative_amounts():
    with pytest.raises(ValueError):
        Money(amount=Decimal("-1"), currency_code="usd")


def test_parse_quantity_truncates_fractions():
    assert parse_quantity("2.7") == 2
    assert parse_quantity(3.0) == 3
    assert parse_quantity(" 4 ") == 4
    assert parse_quantity("Infinity") is None


@pytest.mark.parametrize("raw", ["1e30", 10**19, MAX_QUANTITY + 1, "-1e30"])
def test_out_of_range_quantity_is_rejected(raw):
    with pytest.raises(ValidationError) as excinfo:
        QuantityParams(guests=raw)

    assert excinfo.value.field == "guests"


def test_quantity_at_the_limit_is_accepted():
    assert QuantityParams(nights=MAX_QUANTITY).night_count == MAX_QUANTITY


def test_total_above_the_maximum_charge_is_rejected():
    package = Package(id="p1", title="Villa", price=Decimal("9999999999.99"))

    with pytest.raises(ValidationError) as excinfo:
        expected_minor_amount(package, QuantityParams(guests=MAX_QUANTITY), "usd")

    assert excinfo.value.field == "amount"

from datetime import date
from fractions import Fraction

import pytest

from gledger.amount import Amount, Commodity, CommodityMismatchError


@pytest.fixture
def gbp():
    return Commodity("GBP")


@pytest.fixture
def eur():
    return Commodity("EUR")


def test_new_commodity_defaults():
    commodity = Commodity("USD")
    assert commodity.symbol == "USD"
    assert commodity.precision == 2
    assert commodity.price_history == []
    assert not commodity.has_price_history()


def test_format_with_commodity(gbp):
    amount = Amount(Fraction(10), gbp)
    assert amount.format(True) == "10.00 GBP"
    assert str(amount) == "10.00"


def test_format_without_symbol():
    amount = Amount(Fraction(7), Commodity(""))
    assert amount.format(True) == amount.format(False)


def test_precision_zero_integer(gbp):
    gbp.precision = 0
    assert str(Amount(Fraction(42), gbp)) == "42"


def test_precision_zero_fraction(gbp):
    gbp.precision = 0
    assert str(Amount(Fraction(3, 2), gbp)) == "3/2"


def test_add_subtract_round_trip(gbp):
    a = Amount(Fraction(5), gbp)
    b = Amount(Fraction("2.25"), gbp)
    assert (a + b) - b == a
    assert (a - b) + b == a


@pytest.mark.parametrize("op", [lambda x, y: x + y, lambda x, y: x - y, lambda x, y: x.compare(y)])
def test_mismatched_commodities_raise(gbp, eur, op):
    with pytest.raises(CommodityMismatchError):
        op(Amount(1, gbp), Amount(1, eur))


def test_equality_uses_symbol(gbp, eur):
    assert Amount(1, gbp) == Amount(1, Commodity("GBP"))
    assert not Amount(1, gbp) == Amount(1, eur)
    assert not Amount(1, gbp) == Amount(2, gbp)


def test_multiply_divide_round_trip(gbp):
    a = Amount(Fraction(7, 3), gbp)
    assert a.multiply(Fraction(5)).divide(Fraction(5)) == a
    assert a.multiply(0.5).multiply(2) == a
    assert a.divide(0.25).multiply(0.25) == a


def test_divide_by_zero(gbp):
    a = Amount(1, gbp)
    with pytest.raises(ZeroDivisionError):
        a.divide(Fraction(0))
    with pytest.raises(ZeroDivisionError):
        a.divide(0.0)


def test_negate_and_abs(gbp):
    a = Amount(Fraction(3), gbp)
    assert -(-a) == a
    assert (-a).is_negative()
    assert a.is_positive()
    assert abs(-a) == a


def test_compare(gbp):
    small = Amount(1, gbp)
    big = Amount(2, gbp)
    assert small.compare(big) == -1
    assert big.compare(small) == 1
    assert small.compare(small.copy()) == 0


def test_from_string(gbp):
    assert Amount.from_string("1/3", gbp).number == Fraction(1, 3)
    assert Amount.from_string("2.5", gbp) == Amount.from_float(2.5, gbp)


@pytest.mark.parametrize("text", ["abc", "", " 1", "1/0"])
def test_from_string_invalid(gbp, text):
    with pytest.raises(ValueError, match="invalid number format"):
        Amount.from_string(text, gbp)


def test_from_float_round_trip(gbp):
    assert float(Amount.from_float(2.5, gbp)) == 2.5
    assert Amount.from_float(0.1, gbp).number == Fraction(0.1)


def test_zero(gbp):
    zero = Amount.zero(gbp)
    assert zero.is_zero()
    assert not zero.is_positive()
    assert not zero.is_negative()


def test_copy_is_independent(gbp):
    a = Amount(Fraction(4), gbp)
    b = a.copy()
    assert b == a
    b.number = Fraction(9)
    assert a.number == Fraction(4)


def test_convert_to(gbp, eur):
    a = Amount(Fraction(3), gbp)
    converted = a.convert_to(eur, Fraction(2))
    assert converted.commodity is eur
    assert converted.divide(2).number == a.number


def test_round_to_precision_third(gbp):
    rounded = Amount(Fraction(1, 3), gbp).round_to_precision()
    assert (rounded.number * 100).denominator == 1
    assert abs(rounded.number - Fraction(1, 3)) <= Fraction(1, 200)


def test_round_half_away_from_zero(gbp):
    positive = Amount(Fraction("0.125"), gbp).round_to_precision()
    assert positive.number == Fraction("0.13")
    negative = Amount(Fraction("-0.125"), gbp).round_to_precision()
    assert negative == -positive


def test_round_precision_zero_is_copy(gbp):
    gbp.precision = 0
    a = Amount(Fraction(5, 7), gbp)
    assert a.round_to_precision() == a


def test_add_price_keeps_dates_ordered(gbp):
    aaa = Commodity("AAA")
    aaa.add_price(date(2020, 3, 1), Amount(3, gbp))
    aaa.add_price(date(2020, 1, 1), Amount(1, gbp))
    aaa.add_price(date(2020, 2, 1), Amount(2, gbp))
    dates = [point.date for point in aaa.price_history]
    assert dates == sorted(dates)
    assert aaa.has_price_history()


def test_add_price_same_day_replaces(gbp):
    aaa = Commodity("AAA")
    aaa.add_price(date(2020, 1, 1), Amount(1, gbp))
    aaa.add_price(date(2020, 1, 1), Amount(5, gbp))
    assert len(aaa.price_history) == 1
    assert aaa.get_latest_price("GBP") == Amount(5, gbp)


def test_add_price_same_day_orders_by_target(gbp, eur):
    aaa = Commodity("AAA")
    aaa.add_price(date(2020, 1, 1), Amount(1, gbp))
    aaa.add_price(date(2020, 1, 1), Amount(1, eur))
    symbols = [point.amount.commodity.symbol for point in aaa.price_history]
    assert symbols == ["EUR", "GBP"]


def test_get_price_at(gbp):
    aaa = Commodity("AAA")
    first = Amount(1, gbp)
    second = Amount(2, gbp)
    aaa.add_price(date(2020, 1, 1), first)
    aaa.add_price(date(2020, 2, 1), second)
    assert aaa.get_price_at(date(2020, 1, 15), "GBP") is first
    assert aaa.get_price_at(date(2020, 2, 1), "GBP") is second
    assert aaa.get_price_at(date(2019, 12, 31), "GBP") is None
    assert aaa.get_price_at(date(2020, 6, 1), "EUR") is None


def test_get_latest_price(gbp, eur):
    aaa = Commodity("AAA")
    aaa.add_price(date(2020, 1, 1), Amount(1, gbp))
    latest = Amount(2, gbp)
    aaa.add_price(date(2020, 2, 1), latest)
    aaa.add_price(date(2020, 3, 1), Amount(9, eur))
    assert aaa.get_latest_price("GBP") is latest
    assert aaa.get_latest_price("USD") is None


def test_format_number(gbp):
    assert gbp.format_number(Fraction(10)) == "10.00"
    gbp.format = "#,##0.00"
    assert gbp.format_number(Fraction(10)) == "#,##0.00"


def test_format_number_precision_zero(gbp):
    gbp.precision = 0
    assert gbp.format_number(Fraction(3, 2)) == str(Amount(Fraction(3, 2), gbp))


def test_commodity_copy_is_deep(gbp):
    aaa = Commodity("AAA")
    aaa.precision = 4
    aaa.add_price(date(2020, 1, 1), Amount(1, gbp))
    clone = aaa.copy()
    assert clone.symbol == aaa.symbol
    assert clone.precision == aaa.precision
    assert clone.get_latest_price("GBP") == aaa.get_latest_price("GBP")
    clone.add_price(date(2021, 1, 1), Amount(2, gbp))
    assert len(aaa.price_history) == 1
    assert len(clone.price_history) == 2
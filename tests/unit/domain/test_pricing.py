import pytest

from storefront_client.domain.value_objects.pricing import (
    format_money,
    line_total,
    original_price_from_discount,
    parse_price,
    price_from_original,
)


def test_original_price_from_discount():
    assert original_price_from_discount(80.0, 20) == pytest.approx(100.0)


def test_price_from_original():
    assert price_from_original(100.0, 25) == pytest.approx(75.0)


@pytest.mark.parametrize("discount", [5, 12.5, 33, 50, 99])
def test_discount_formulas_are_inverse(discount):
    original = original_price_from_discount(42.0, discount)
    assert price_from_original(original, discount) == pytest.approx(42.0)


@pytest.mark.parametrize("discount", [None, 0])
def test_no_discount_returns_price(discount):
    assert original_price_from_discount(15.0, discount) == 15.0
    assert price_from_original(15.0, discount) == 15.0


@pytest.mark.parametrize("discount", [100, 150, -1])
def test_out_of_range_discount_is_rejected(discount):
    with pytest.raises(ValueError):
        original_price_from_discount(10.0, discount)


def test_parse_price_tolerates_strings_and_blanks():
    assert parse_price("19.99") == 19.99
    assert parse_price(7) == 7.0
    assert parse_price(None) == 0.0
    assert parse_price("") == 0.0
    assert parse_price("abc") == 0.0


def test_line_total_and_format():
    assert line_total(2.5, 4) == 10.0
    assert format_money(10) == "$10.00"

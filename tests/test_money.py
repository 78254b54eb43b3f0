"""Tests for money helpers and log sanitizers"""
from decimal import Decimal

import pytest

from storefront.logging import sanitize_id_for_logging, sanitize_string_for_logging
from storefront.services.money import (
    floor_money,
    to_decimal,
    to_minor_units,
    to_storage_number,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        (None, Decimal("0")),
        (0.1, Decimal("0.1")),
        ("45.50", Decimal("45.50")),
        ("abc", Decimal("0")),
    ],
)
def test_to_decimal(value, expected):
    assert to_decimal(value) == expected


def test_floor_money_truncates_down():
    assert floor_money("46.99") == Decimal("46")
    assert floor_money("-0.5") == Decimal("-1")


def test_to_minor_units():
    assert to_minor_units(102) == 10200
    assert to_minor_units("46.41") == 4600


def test_to_storage_number():
    assert to_storage_number(Decimal("204.0")) == 204
    assert isinstance(to_storage_number(Decimal("204.0")), int)
    assert to_storage_number(Decimal("147.5")) == 147.5


def test_sanitize_id_for_logging():
    assert sanitize_id_for_logging(None) == "N/A"
    assert sanitize_id_for_logging("order-123456789") == "order-12"
    assert "\n" not in sanitize_id_for_logging("a\nb")


def test_sanitize_string_for_logging():
    assert sanitize_string_for_logging("evt\r\nforged") == "evt\\r\\nforged"
    assert sanitize_string_for_logging("x" * 60).endswith("...")

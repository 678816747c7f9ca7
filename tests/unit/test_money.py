"""Unit tests for cents conversion"""

from decimal import Decimal
from credit_manager.utils.money import from_cents, round_half_up_div, to_cents


def test_to_cents_avoids_float_drift():
    assert to_cents(0.1) == 10
    assert to_cents(1234.56) == 123_456
    assert to_cents(Decimal("100000")) == 10_000_000
    assert to_cents("19.99") == 1_999


def test_from_cents_renders_decimal_number():
    assert from_cents(3_333_333) == 33333.33
    assert from_cents(0) == 0.0
    assert from_cents(-150) == -1.5


def test_round_half_up_div():
    assert round_half_up_div(10_000_000, 3) == 3_333_333
    assert round_half_up_div(5, 2) == 3
    assert round_half_up_div(5, 3) == 2
    assert round_half_up_div(4, 3) == 1

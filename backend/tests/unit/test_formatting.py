"""Unit tests for money/count display formatting."""

from barbershop.presentation.formatting import MASK, format_count, format_currency


def test_format_currency_two_decimals():
    assert format_currency(25) == "R$ 25.00"
    assert format_currency(60.5, symbol="US$") == "US$ 60.50"


def test_privacy_masks_values():
    assert format_currency(25.0, privacy=True) == MASK
    assert format_count(3, privacy=True) == MASK
    assert format_count(3) == "3"

"""
Quote calculator tests: rate lookup, signature fee, 13% tax, half-up rendering.
"""

import pytest

from swiftship.calculator import (
    QuoteCalculator,
    calculate_quote,
    format_amount,
    get_quote,
)
from swiftship.models import ParcelType, RateTier
from swiftship.schemas import FormInput
from swiftship.validator import UserInputError


def _form(parcel_type, tier, signature=False, weight="1"):
    return FormInput(
        sending_address="A",
        destination_address="B",
        parcel_type=parcel_type,
        parcel_weight=weight,
        selected_rate=tier,
        signature_option=signature,
    )


def test_package_standard_no_signature():
    result = calculate_quote(_form(ParcelType.PACKAGE, RateTier.STANDARD))
    assert result.subtotal == "12.99"
    assert result.tax == "1.69"
    assert result.total == "14.68"
    assert result.signature_cost == 0.0


def test_letter_priority_with_signature():
    result = calculate_quote(_form(ParcelType.LETTER, RateTier.PRIORITY, signature=True))
    assert result.subtotal == "16.99"
    assert result.tax == "2.21"
    assert result.total == "19.20"
    assert result.rate_price == 14.99
    assert result.signature_cost == 2.00


def test_full_submission_end_to_end(valid_form):
    result = get_quote(valid_form)
    assert (result.subtotal, result.tax, result.total) == ("18.99", "2.47", "21.46")


def test_result_echoes_input(valid_form):
    result = get_quote(valid_form)
    assert result.sending_address == "A"
    assert result.destination_address == "B"
    assert result.parcel_type == ParcelType.PACKAGE
    assert result.parcel_weight == "10"
    assert result.selected_rate == RateTier.XPRESS
    assert result.signature_option is False


def test_calculator_is_idempotent(valid_form):
    assert calculate_quote(valid_form) == calculate_quote(valid_form)


@pytest.mark.parametrize("parcel_type,tier,total", [
    (ParcelType.PACKAGE, RateTier.PRIORITY, "28.24"),
    (ParcelType.LETTER, RateTier.STANDARD, "5.64"),
    (ParcelType.LETTER, RateTier.XPRESS, "11.29"),
])
def test_totals_per_tier(parcel_type, tier, total):
    assert calculate_quote(_form(parcel_type, tier)).total == total


def test_get_quote_validates_first():
    with pytest.raises(UserInputError, match="Please select a rate"):
        get_quote(_form(ParcelType.PACKAGE, None))


def test_format_amount_rounds_half_up():
    assert format_amount(1.6887) == "1.69"
    assert format_amount(2.675) == "2.68"
    assert format_amount(0.125) == "0.13"
    assert format_amount(19.2) == "19.20"
    assert format_amount(16.990000000000002) == "16.99"


def test_calculator_constants():
    assert QuoteCalculator.SIGNATURE_COST == 2.00
    assert QuoteCalculator.TAX_RATE == 0.13

"""
Quote calculator: rate lookup, signature fee, tax.

Pure math on a FormInput that already passed validation:
    subtotal = rate + signature fee
    tax      = subtotal * 13%
    total    = subtotal + tax
Full float precision throughout; rounding happens only when rendering.
"""

import logging
from decimal import Decimal, ROUND_HALF_UP

from .rates import get_rate
from .schemas import FormInput, QuoteResult
from .validator import validate_form

logger = logging.getLogger(__name__)

CENTS = Decimal("0.01")


def format_amount(value: float) -> str:
    """Render a currency amount to exactly 2 decimals, rounding half up."""
    # str() gives the shortest repr, so 2.675 rounds to 2.68 rather than 2.67
    return str(Decimal(str(value)).quantize(CENTS, rounding=ROUND_HALF_UP))


class QuoteCalculator:
    """Builds a QuoteResult. No error conditions once validation has passed."""

    SIGNATURE_COST = 2.00
    TAX_RATE = 0.13

    def calculate(self, form: FormInput) -> QuoteResult:
        rate_price = get_rate(form.parcel_type, form.selected_rate)
        signature_cost = self.SIGNATURE_COST if form.signature_option else 0.0

        subtotal = rate_price + signature_cost
        tax = subtotal * self.TAX_RATE
        total = subtotal + tax

        return QuoteResult(
            sending_address=form.sending_address,
            destination_address=form.destination_address,
            parcel_type=form.parcel_type,
            parcel_weight=form.parcel_weight,
            selected_rate=form.selected_rate,
            signature_option=form.signature_option,
            rate_price=rate_price,
            signature_cost=signature_cost,
            subtotal=format_amount(subtotal),
            tax=format_amount(tax),
            total=format_amount(total),
        )


_calculator = QuoteCalculator()


def calculate_quote(form: FormInput) -> QuoteResult:
    return _calculator.calculate(form)


def get_quote(form: FormInput) -> QuoteResult:
    """Validate, then calculate. Raises UserInputError on the first bad field."""
    validate_form(form)
    result = _calculator.calculate(form)
    logger.info(
        "Quoted %s/%s (signature=%s): total $%s",
        result.parcel_type.value, result.selected_rate.value,
        result.signature_option, result.total,
    )
    return result

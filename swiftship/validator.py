"""
Form validator: decides whether a FormInput can be quoted.

Checks run in a fixed order and stop at the first failure, so the user
only ever sees one message. The order determines which message wins
when several fields are wrong at once.
"""

import math
from typing import Optional

from .models import ParcelType
from .schemas import FormInput


class UserInputError(ValueError):
    """A form field is missing or out of policy. Fix the field and resubmit."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class FormValidator:
    """Ordered, short-circuiting checks over a FormInput. Holds no state."""

    PACKAGE_MAX_WEIGHT_LBS = 44.0
    LETTER_MAX_WEIGHT_LBS = 1.1

    MISSING_ADDRESSES = "Please enter both addresses"
    MISSING_PARCEL_TYPE = "Please select a parcel type"
    MISSING_WEIGHT = "Please enter parcel weight"
    INVALID_WEIGHT = "Please enter a valid parcel weight"
    PACKAGE_TOO_HEAVY = "Package weight cannot exceed 44 lbs"
    LETTER_TOO_HEAVY = "Letter weight cannot exceed 1.1 lbs"
    MISSING_RATE = "Please select a rate"

    def validate(self, form: FormInput) -> None:
        """Raises UserInputError with the first applicable message."""
        error = self.first_error(form)
        if error:
            raise UserInputError(error)

    def first_error(self, form: FormInput) -> Optional[str]:
        if not form.sending_address or not form.destination_address:
            return self.MISSING_ADDRESSES

        if not form.parcel_type:
            return self.MISSING_PARCEL_TYPE

        if not form.parcel_weight:
            return self.MISSING_WEIGHT

        weight = self.parse_weight(form.parcel_weight)
        if weight is None:
            return self.INVALID_WEIGHT

        if form.parcel_type == ParcelType.PACKAGE and weight > self.PACKAGE_MAX_WEIGHT_LBS:
            return self.PACKAGE_TOO_HEAVY

        if form.parcel_type == ParcelType.LETTER and weight > self.LETTER_MAX_WEIGHT_LBS:
            return self.LETTER_TOO_HEAVY

        if not form.selected_rate:
            return self.MISSING_RATE

        return None

    def parse_weight(self, value: str) -> Optional[float]:
        """
        Parse the weight text. Returns None for anything that is not a
        finite, positive number ("abc", "nan", "inf", "0", "-3").
        """
        try:
            weight = float(str(value).strip())
        except (ValueError, TypeError):
            return None
        if not math.isfinite(weight) or weight <= 0:
            return None
        return weight


_validator = FormValidator()


def validate_form(form: FormInput) -> None:
    _validator.validate(form)


def find_validation_error(form: FormInput) -> Optional[UserInputError]:
    """Like validate_form, but returns the error instead of raising it."""
    message = _validator.first_error(form)
    return UserInputError(message) if message else None

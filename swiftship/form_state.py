"""
Form session: the one FormInput a user is editing.

Each input event on the screen maps to one method here. The session is
owned by a single screen; validation and pricing only ever see a
snapshot, never the live object.
"""

import logging
from typing import Optional

from .calculator import get_quote
from .models import ParcelType, RateTier
from .presenters.base import Presenter
from .rates import rate_options
from .schemas import FormInput
from .validator import UserInputError

logger = logging.getLogger(__name__)


class ShippingForm:
    """Holds the six form fields for one session."""

    def __init__(self, form: Optional[FormInput] = None):
        self._form = form.model_copy() if form else FormInput()

    # --- Input events ---

    def set_sending_address(self, value: str) -> None:
        self._form.sending_address = value

    def set_destination_address(self, value: str) -> None:
        self._form.destination_address = value

    def select_parcel_type(self, parcel_type) -> None:
        # selected_rate is kept; its price follows the new parcel type
        self._form.parcel_type = ParcelType(parcel_type)

    def set_parcel_weight(self, value: str) -> None:
        self._form.parcel_weight = value

    def select_rate(self, tier) -> None:
        self._form.selected_rate = RateTier(tier)

    def toggle_signature(self) -> bool:
        self._form.signature_option = not self._form.signature_option
        return self._form.signature_option

    def reset(self) -> None:
        self._form = FormInput()

    # --- Reads ---

    def snapshot(self) -> FormInput:
        """Independent copy of the current field values."""
        return self._form.model_copy()

    def rate_options(self) -> list:
        """Tier choices for the selected parcel type. Empty until one is picked."""
        if self._form.parcel_type is None:
            return []
        return rate_options(self._form.parcel_type)

    # --- Submit ---

    def submit(self, presenter: Presenter) -> dict:
        """
        The "Calculate Shipping" action: validate, price, and hand the
        outcome to the presenter. Returns the presenter payload.
        """
        return present_quote(self.snapshot(), presenter)


def present_quote(form: FormInput, presenter: Presenter) -> dict:
    """Run the core on a snapshot and render the first error or the quote."""
    try:
        result = get_quote(form)
    except UserInputError as e:
        logger.info("Quote rejected: %s", e.message)
        return presenter.show_error(e.message)
    return presenter.show_quote(result)

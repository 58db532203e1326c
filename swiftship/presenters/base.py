"""
Abstract base class for presenters.

Input: an error message string, or a QuoteResult
Output: a payload dict the client renders as-is
"""

from abc import ABC, abstractmethod

from ..calculator import QuoteCalculator, format_amount
from ..models import RATE_TIER_LABELS
from ..rates import format_price
from ..schemas import QuoteResult


class Presenter(ABC):
    """All presentation variants inherit from this."""

    ERROR_TITLE = "Error"
    SUMMARY_TITLE = "SwiftShip Order Summary"
    CLOSE_LABEL = "Close"

    @abstractmethod
    def show_error(self, message: str) -> dict:
        """Render one validation message verbatim."""
        pass

    @abstractmethod
    def show_quote(self, result: QuoteResult) -> dict:
        """Render the order summary for a computed quote."""
        pass

    # --- Helpers shared by all presenters ---

    def detail_rows(self, result: QuoteResult) -> list:
        """
        Labeled fields in display order, up to the signature line:
        From, To, Type, Weight, Rate, optional Signature Option.
        """
        rate_label = RATE_TIER_LABELS[result.selected_rate]
        rows = [
            ("From", result.sending_address),
            ("To", result.destination_address),
            ("Type", result.parcel_type.value.capitalize()),
            ("Weight", f"{result.parcel_weight} lbs"),
            ("Rate", f"{rate_label} ({format_price(result.rate_price)})"),
        ]
        if result.signature_option:
            rows.append(("Signature Option", f"+{format_price(result.signature_cost)}"))
        return rows

    def charge_rows(self, result: QuoteResult) -> list:
        """Subtotal, Tax and Total rows."""
        return [
            ("Subtotal", f"${result.subtotal}"),
            (f"Tax ({self.tax_percent_label()})", f"${result.tax}"),
            ("Total", f"${result.total}"),
        ]

    def summary_rows(self, result: QuoteResult) -> list:
        return self.detail_rows(result) + self.charge_rows(result)

    def tax_percent_label(self) -> str:
        # 0.13 -> "13%"
        pct = format_amount(QuoteCalculator.TAX_RATE * 100).rstrip("0").rstrip(".")
        return f"{pct}%"

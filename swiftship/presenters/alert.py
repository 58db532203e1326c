"""
Alert presenter: a title, a plain-text message and one button,
the shape a native alert dialog takes.
"""

from ..schemas import QuoteResult
from .base import Presenter


class AlertPresenter(Presenter):

    def show_error(self, message: str) -> dict:
        return self._alert(self.ERROR_TITLE, message)

    def show_quote(self, result: QuoteResult) -> dict:
        lines = [f"{label}: {value}" for label, value in self.detail_rows(result)]
        subtotal, tax, total = self.charge_rows(result)
        # Blank line before Subtotal and before Total
        lines.append("")
        lines.append(f"{subtotal[0]}: {subtotal[1]}")
        lines.append(f"{tax[0]}: {tax[1]}")
        lines.append("")
        lines.append(f"{total[0]}: {total[1]}")
        return self._alert(self.SUMMARY_TITLE, "\n".join(lines))

    def _alert(self, title: str, message: str) -> dict:
        return {
            "kind": "alert",
            "title": title,
            "message": message,
            "buttons": [{"text": self.CLOSE_LABEL, "style": "default"}],
        }

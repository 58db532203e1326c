"""
Modal presenter: an in-app overlay with labeled rows.

The Total row is pulled out of the row list so the overlay can
highlight it.
"""

from ..schemas import QuoteResult
from .base import Presenter


class ModalPresenter(Presenter):

    def show_error(self, message: str) -> dict:
        return {
            "kind": "modal",
            "visible": True,
            "variant": "error",
            "title": self.ERROR_TITLE,
            "message": message,
            "close_label": self.CLOSE_LABEL,
        }

    def show_quote(self, result: QuoteResult) -> dict:
        rows = self.summary_rows(result)
        total_label, total_value = rows.pop()
        return {
            "kind": "modal",
            "visible": True,
            "variant": "quote",
            "title": self.SUMMARY_TITLE,
            "rows": [{"label": label, "value": value} for label, value in rows],
            "total": {"label": total_label, "value": total_value},
            "close_label": self.CLOSE_LABEL,
        }

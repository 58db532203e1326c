"""
Quote API: the "Calculate Shipping" button.

POST /api/quote          validate + price, return the QuoteResult (422 on bad input)
POST /api/quote/present  same, rendered by the alert or modal presenter
"""

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from ..calculator import get_quote
from ..config import settings
from ..form_state import present_quote
from ..presenters.registry import get_presenter
from ..schemas import FormInput, QuoteResult
from ..validator import UserInputError

router = APIRouter(prefix="/quote", tags=["quote"])


@router.post("", response_model=QuoteResult)
def create_quote(form: FormInput):
    try:
        return get_quote(form)
    except UserInputError as e:
        raise HTTPException(status_code=422, detail=e.message)


@router.post("/present")
def present(form: FormInput, presentation: Optional[str] = Query(None)):
    """
    Returns the presenter payload. Validation errors are payloads too
    (status 200); the client shows them in the same dialog or overlay.
    """
    try:
        presenter = get_presenter(presentation or settings.DEFAULT_PRESENTATION)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return present_quote(form, presenter)

from pydantic import BaseModel
from typing import Optional, List
from .models import ParcelType, RateTier


class FormInput(BaseModel):
    """Snapshot of the six form fields. Everything starts empty/unset."""
    sending_address: str = ""
    destination_address: str = ""
    parcel_type: Optional[ParcelType] = None
    parcel_weight: str = ""  # numeric text, exactly as typed
    selected_rate: Optional[RateTier] = None
    signature_option: bool = False


class QuoteResult(BaseModel):
    sending_address: str
    destination_address: str
    parcel_type: ParcelType
    parcel_weight: str
    selected_rate: RateTier
    signature_option: bool
    rate_price: float
    signature_cost: float
    # Rendered to 2 decimals, ready for display
    subtotal: str
    tax: str
    total: str


class RateOption(BaseModel):
    tier: RateTier
    label: str
    price: float
    display_label: str  # "Standard ($12.99)"


class ParcelRates(BaseModel):
    parcel_type: ParcelType
    label: str
    options: List[RateOption] = []


class RateCard(BaseModel):
    parcels: List[ParcelRates] = []
    signature_cost: float
    tax_rate: float

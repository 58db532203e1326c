from fastapi import APIRouter

from ..calculator import QuoteCalculator
from ..models import ParcelType, PARCEL_TYPE_LABELS
from ..rates import rate_options
from ..schemas import ParcelRates, RateCard

router = APIRouter(prefix="/rates", tags=["rates"])


@router.get("/", response_model=RateCard)
def list_rates():
    """Full rate card: every parcel type with its tier prices."""
    return RateCard(
        parcels=[
            ParcelRates(
                parcel_type=parcel_type,
                label=PARCEL_TYPE_LABELS[parcel_type],
                options=rate_options(parcel_type),
            )
            for parcel_type in ParcelType
        ],
        signature_cost=QuoteCalculator.SIGNATURE_COST,
        tax_rate=QuoteCalculator.TAX_RATE,
    )


@router.get("/{parcel_type}", response_model=ParcelRates)
def get_parcel_rates(parcel_type: ParcelType):
    return ParcelRates(
        parcel_type=parcel_type,
        label=PARCEL_TYPE_LABELS[parcel_type],
        options=rate_options(parcel_type),
    )

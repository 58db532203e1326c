"""
Rate table: fixed price per (parcel type, rate tier).

The table is built once at import time and exposed read-only.
Every combination of the two enums must resolve to a price.
"""

from types import MappingProxyType

from .models import ParcelType, RateTier, RATE_TIER_LABELS
from .schemas import RateOption

PACKAGE_RATES = {
    RateTier.STANDARD: 12.99,
    RateTier.XPRESS: 18.99,
    RateTier.PRIORITY: 24.99,
}

LETTER_RATES = {
    RateTier.STANDARD: 4.99,
    RateTier.XPRESS: 9.99,
    RateTier.PRIORITY: 14.99,
}

DEFAULT_PRICES = {
    ParcelType.PACKAGE: PACKAGE_RATES,
    ParcelType.LETTER: LETTER_RATES,
}


def build_rate_table(prices: dict) -> MappingProxyType:
    """
    Flatten {parcel_type: {tier: price}} into a read-only
    {(parcel_type, tier): price} mapping.

    Raises ValueError if any (ParcelType, RateTier) combination is missing.
    """
    table = {}
    missing = []
    for parcel_type in ParcelType:
        tier_prices = prices.get(parcel_type, {})
        for tier in RateTier:
            if tier not in tier_prices:
                missing.append(f"{parcel_type.value}/{tier.value}")
                continue
            table[(parcel_type, tier)] = float(tier_prices[tier])
    if missing:
        raise ValueError(f"Rate table incomplete, missing: {', '.join(missing)}")
    return MappingProxyType(table)


RATE_TABLE = build_rate_table(DEFAULT_PRICES)


def get_rate(parcel_type: ParcelType, tier: RateTier) -> float:
    """Price for one parcel type / tier. Total over the enum product."""
    return RATE_TABLE[(ParcelType(parcel_type), RateTier(tier))]


def format_price(price: float) -> str:
    return f"${price:.2f}"


def rate_options(parcel_type: ParcelType) -> list:
    """The tier choices shown once a parcel type is picked, in display order."""
    options = []
    for tier in RateTier:
        price = get_rate(parcel_type, tier)
        label = RATE_TIER_LABELS[tier]
        options.append(RateOption(
            tier=tier,
            label=label,
            price=price,
            display_label=f"{label} ({format_price(price)})",
        ))
    return options

import enum


# --- Enums: closed sets ---

class ParcelType(str, enum.Enum):
    PACKAGE = "package"
    LETTER = "letter"


class RateTier(str, enum.Enum):
    STANDARD = "standard"
    XPRESS = "xpress"
    PRIORITY = "priority"


# Labels as shown on the form and in the order summary

PARCEL_TYPE_LABELS = {
    ParcelType.PACKAGE: "Package",
    ParcelType.LETTER: "Letter or Document",
}

RATE_TIER_LABELS = {
    RateTier.STANDARD: "Standard",
    RateTier.XPRESS: "Xpress Post",
    RateTier.PRIORITY: "Priority Post",
}

import logging
import re
from typing import Optional

from freight_tracking.schemas import TrackingNumberInfo
from freight_tracking.services.carriers import CARRIER_PREFIXES, SEALINE_CODES

logger = logging.getLogger(__name__)

_STRIP = re.compile(r"[\s-]")

# 4 letters + 6-7 digits + optional check digit
CONTAINER_PATTERN = re.compile(r"^[A-Z]{4}[0-9]{6,7}[0-9]?$")

# Evaluated in order, first hit wins. The lists overlap on purpose:
# container beats B/L beats booking.
BL_PATTERNS = [
    re.compile(r"^[A-Z]{4}[0-9]{9,12}$"),    # standard: 4 letters + 9-12 digits
    re.compile(r"^[A-Z]{2,4}[0-9]{8,15}$"),  # variant: 2-4 letters + 8-15 digits
    re.compile(r"^[0-9]{10,15}$"),           # numeric only
    re.compile(r"^[A-Z]{3}[0-9]{8,12}$"),    # 3 letters + 8-12 digits
]

BOOKING_PATTERNS = [
    re.compile(r"^[A-Z0-9]{6,12}$"),
    re.compile(r"^[A-Z]{2,3}[0-9]{6,10}$"),
]

MIN_UNKNOWN_LENGTH = 6

SEARATES_TYPES = {"container": "CT", "bl": "BL", "booking": "BK"}


def clean_tracking_number(raw) -> str:
    """Trim, uppercase and drop spaces/hyphens. Anything that is not a string is treated as empty."""
    if not isinstance(raw, str):
        return ""
    return _STRIP.sub("", raw.strip().upper())


def detect_shipping_line(prefix: str) -> Optional[str]:
    return CARRIER_PREFIXES.get(prefix)


def _matches_any(patterns, value: str) -> bool:
    return any(p.match(value) for p in patterns)


def classify(raw) -> TrackingNumberInfo:
    """
    Works out what kind of identifier a user typed and which line issued it.

    Never raises: a number that fits no known layout comes back as
    type "unknown", and is only flagged invalid when it is shorter than
    six characters.
    """
    clean = clean_tracking_number(raw)
    prefix = clean[:4]
    shipping_line = detect_shipping_line(prefix)

    if CONTAINER_PATTERN.match(clean):
        kind = "container"
    elif _matches_any(BL_PATTERNS, clean):
        kind = "bl"
    elif _matches_any(BOOKING_PATTERNS, clean):
        kind = "booking"
    else:
        kind = "unknown"

    is_valid = kind != "unknown" or len(clean) >= MIN_UNKNOWN_LENGTH
    logger.debug("Classified %r as %s (line=%s, valid=%s)", clean, kind, shipping_line, is_valid)

    return TrackingNumberInfo(
        type=kind,
        shipping_line=shipping_line,
        prefix=prefix,
        is_valid=is_valid,
    )


def searates_type(info: TrackingNumberInfo) -> Optional[str]:
    """Provider request hint: CT / BL / BK, or None when we could not tell."""
    return SEARATES_TYPES.get(info.type)


def sealine_code(shipping_line: Optional[str]) -> Optional[str]:
    """SCAC for a carrier slug; None for unknown lines and Blue Star, which SeaRates does not cover."""
    return SEALINE_CODES.get(shipping_line) if shipping_line else None

import re

from freight_tracking.schemas import CarrierLink, FallbackOption, TrackingNumberInfo
from freight_tracking.services.carriers import (
    AGGREGATOR_SITES,
    CARRIER_SITES,
    SEARCH_FALLBACK_URL,
    UNKNOWN_CARRIER_NAME,
)

_STRIP = re.compile(r"[\s-]")


def _clean_for_url(number) -> str:
    # Case is kept as typed; carrier sites receive exactly what the user entered.
    if not isinstance(number, str):
        return ""
    return _STRIP.sub("", number.strip())


def resolve(info: TrackingNumberInfo, original_number: str) -> CarrierLink:
    """Carrier display name plus a deep link into that carrier's public tracking page."""
    number = _clean_for_url(original_number)
    site = CARRIER_SITES.get(info.shipping_line) if info.shipping_line else None

    if site is None:
        label = "container" if info.type == "container" else "bill+of+lading"
        return CarrierLink(
            name=UNKNOWN_CARRIER_NAME,
            url=SEARCH_FALLBACK_URL.format(number=number, label=label),
        )

    template = site.container_url if info.type == "container" else site.document_url
    return CarrierLink(name=site.name, url=template.format(number=number))


def fallback_options(info: TrackingNumberInfo, original_number: str) -> list[FallbackOption]:
    """
    Where a user can look next when no live provider had data.

    Unlike resolve(), the number is uppercased here, carrier link included.
    """
    number = _clean_for_url(original_number).upper()
    options = []

    if info.shipping_line in CARRIER_SITES:
        link = resolve(info, number)
        options.append(FallbackOption(name=f"{link.name} Official Website", url=link.url))

    for name, template in AGGREGATOR_SITES:
        options.append(FallbackOption(name=name, url=template.format(number=number)))

    return options

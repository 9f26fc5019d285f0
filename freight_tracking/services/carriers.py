"""
Static carrier reference data.

Adding a shipping line is a data change: register its container-owner
prefixes in CARRIER_PREFIXES and its public tracking pages in CARRIER_SITES.
"""
from typing import NamedTuple


class CarrierSite(NamedTuple):
    name: str
    container_url: str  # used when the number classified as a container
    document_url: str   # used for B/L, booking and unknown numbers


# 4-letter container-owner code -> carrier slug
CARRIER_PREFIXES = {
    # Maersk
    "MAEU": "maersk",
    "MRKU": "maersk",
    "MSKU": "maersk",
    # MSC
    "MSCU": "msc",
    "MEDU": "msc",
    # CMA CGM
    "CMAU": "cma-cgm",
    "CXDU": "cma-cgm",
    # Hapag-Lloyd
    "HLXU": "hapag-lloyd",
    "HLCU": "hapag-lloyd",
    "HPLU": "hapag-lloyd",
    # COSCO
    "COSU": "cosco",
    "CBHU": "cosco",
    # Evergreen
    "EVRU": "evergreen",
    "EGHU": "evergreen",
    "EVGU": "evergreen",
    # OOCL
    "OOLU": "oocl",
    "OOCU": "oocl",
    # ONE
    "ONEY": "one",
    "ONEU": "one",
    # Blue Star Maritime
    "BMOU": "blue-star",
    # ZIM
    "ZIMU": "zim",
    "ZIMB": "zim",
    # Yang Ming
    "YMLU": "yang-ming",
    "YAMU": "yang-ming",
    "HMMU": "hmm",
    "PILU": "pil",
    "KLNU": "k-line",
    "APLU": "apl",
    "MOLU": "mol",
    "NYKU": "nyk",
    "WHLU": "wan-hai",
    "UASU": "uasc",
    "ARKU": "arkas",
}

_HAPAG_CONTAINER = (
    "https://www.hapag-lloyd.com/en/online-business/track/"
    "track-by-container-solution.html?container={number}"
)

CARRIER_SITES = {
    "maersk": CarrierSite(
        "Maersk",
        "https://www.maersk.com/tracking/{number}",
        "https://www.maersk.com/tracking?number={number}&type=bill-of-lading",
    ),
    "msc": CarrierSite(
        "MSC",
        "https://www.msc.com/track-a-shipment?agencyPath=msc&trackingNumber={number}",
        "https://www.msc.com/track-a-shipment?agencyPath=msc&trackingNumber={number}",
    ),
    "cma-cgm": CarrierSite(
        "CMA CGM",
        "https://www.cma-cgm.com/ebusiness/tracking/search?number={number}",
        "https://www.cma-cgm.com/ebusiness/tracking/search?number={number}",
    ),
    "hapag-lloyd": CarrierSite(
        "Hapag-Lloyd",
        _HAPAG_CONTAINER,
        "https://www.hapag-lloyd.com/en/online-business/track/"
        "track-by-booking-solution.html?booking={number}",
    ),
    "cosco": CarrierSite(
        "COSCO Shipping",
        "https://elines.coscoshipping.com/ebusiness/cargoTracking?trackingType=CONTAINER&number={number}",
        "https://elines.coscoshipping.com/ebusiness/cargoTracking?trackingType=BOOKING&number={number}",
    ),
    "evergreen": CarrierSite(
        "Evergreen Line",
        "https://www.evergreen-line.com/emodal/stpb/stpb_show.do?lang=en&f_cmd=track&f_container_no={number}",
        "https://www.evergreen-line.com/emodal/stpb/stpb_show.do?lang=en&f_cmd=track&f_bl_no={number}",
    ),
    "oocl": CarrierSite(
        "OOCL",
        "https://www.oocl.com/eng/ourservices/eservices/cargotracking/Pages/cargotracking.aspx?ContainerNo={number}",
        "https://www.oocl.com/eng/ourservices/eservices/cargotracking/Pages/cargotracking.aspx?BLNo={number}",
    ),
    "one": CarrierSite(
        "ONE Line",
        "https://ecomm.one-line.com/ecom/CUP_HOM_3301.do?trackingNumber={number}",
        "https://ecomm.one-line.com/ecom/CUP_HOM_3301.do?trackingNumber={number}",
    ),
    "blue-star": CarrierSite(
        "Blue Star Maritime",
        "https://www.bluestarferries.com/en/cargo-tracking?container={number}",
        "https://www.bluestarferries.com/en/cargo-tracking?bl={number}",
    ),
    "zim": CarrierSite(
        "ZIM",
        "https://www.zim.com/tools/track-a-shipment?container={number}",
        "https://www.zim.com/tools/track-a-shipment?bl={number}",
    ),
    "yang-ming": CarrierSite(
        "Yang Ming",
        "https://www.yangming.com/e-service/Track_Trace/track_trace_cargo_tracking.aspx?container={number}",
        "https://www.yangming.com/e-service/Track_Trace/track_trace_cargo_tracking.aspx?bl={number}",
    ),
    "hmm": CarrierSite(
        "HMM",
        "https://www.hmm21.com/cms/business/ebiz/trackTrace/trackTrace/index.jsp?container={number}",
        "https://www.hmm21.com/cms/business/ebiz/trackTrace/trackTrace/index.jsp?bl={number}",
    ),
    "pil": CarrierSite(
        "PIL",
        "https://www.pilship.com/en--/120.html?container={number}",
        "https://www.pilship.com/en--/120.html?bl={number}",
    ),
    "k-line": CarrierSite(
        "K Line",
        "https://www.kline.com/en/service/tracking?container={number}",
        "https://www.kline.com/en/service/tracking?bl={number}",
    ),
    "apl": CarrierSite(
        "APL",
        "https://www.apl.com/ebusiness/tracking?container={number}",
        "https://www.apl.com/ebusiness/tracking?bl={number}",
    ),
    "mol": CarrierSite(
        "MOL",
        "https://www.mol.co.jp/en/service/tracking/?container={number}",
        "https://www.mol.co.jp/en/service/tracking/?bl={number}",
    ),
    "nyk": CarrierSite(
        "NYK Line",
        "https://www2.nyk.com/english/release/cargotracking/?container={number}",
        "https://www2.nyk.com/english/release/cargotracking/?bl={number}",
    ),
    "wan-hai": CarrierSite(
        "Wan Hai Lines",
        "https://www.wanhai-lines.com/service/tracking?container={number}",
        "https://www.wanhai-lines.com/service/tracking?bl={number}",
    ),
    # UASC was absorbed by Hapag-Lloyd; always the container search
    "uasc": CarrierSite("UASC (Hapag-Lloyd)", _HAPAG_CONTAINER, _HAPAG_CONTAINER),
    "arkas": CarrierSite(
        "Arkas Line",
        "https://www.arkasline.com.tr/en/cargo-tracking?container={number}",
        "https://www.arkasline.com.tr/en/cargo-tracking?bl={number}",
    ),
}

UNKNOWN_CARRIER_NAME = "Unknown Shipping Line"

# {label} is "container" for containers and "bill+of+lading" for everything else,
# booking numbers included.
SEARCH_FALLBACK_URL = 'https://www.google.com/search?q="{number}"+{label}+tracking'

AGGREGATOR_SITES = [
    ("Container Tracking", "https://www.track-trace.com/container/{number}"),
    ("SeaRates Container Tracking", "https://www.searates.com/container/tracking/?container={number}"),
]

# carrier slug -> SCAC the SeaRates API expects as its `sealine` hint
SEALINE_CODES = {
    "maersk": "MAEU",
    "msc": "MSCU",
    "cma-cgm": "CMDU",
    "hapag-lloyd": "HLCU",
    "cosco": "COSU",
    "evergreen": "EGLV",
    "oocl": "OOLU",
    "one": "ONEY",
    "zim": "ZIMU",
    "yang-ming": "YMLU",
    "hmm": "HDMU",
    "pil": "PCIU",
    "k-line": "KKLU",
    "apl": "APLU",
    "mol": "MOLU",
    "nyk": "NYKU",
    "wan-hai": "WHLC",
    "uasc": "UASC",
    "arkas": "ARKU",
}

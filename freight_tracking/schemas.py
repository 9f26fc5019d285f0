# schemas.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional, Any, Literal

TrackingNumberType = Literal["container", "bl", "booking", "unknown"]

EventType = Literal[
    "vessel-departure",
    "vessel-arrival",
    "gate",
    "load",
    "cargo-received",
    "customs-cleared",
    "event",
]


class CamelModel(BaseModel):
    """Snake_case in Python, camelCase on the wire (what the UI reads)."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TrackingNumberInfo(CamelModel):
    type: TrackingNumberType
    shipping_line: Optional[str] = None
    prefix: str
    is_valid: bool


class CarrierLink(CamelModel):
    name: str
    url: str


class FallbackOption(CamelModel):
    name: str
    url: str
    type: Literal["website", "api"] = "website"


class TrackingEvent(CamelModel):
    type: EventType = "event"
    status: str = "N/A"
    location: str = "N/A"
    timestamp: str = Field(..., description="ISO-8601 UTC instant, the only sort key")
    date: str
    time: str
    description: Optional[str] = None
    vessel: Optional[str] = None
    voyage: Optional[str] = None


class TimelineLocation(CamelModel):
    location: str
    terminal: Optional[str] = None
    events: list[TrackingEvent] = Field(default_factory=list)


class ShipmentDetails(CamelModel):
    packages: str = "N/A"
    volume: str = "N/A"
    pieces: str = "N/A"
    shipment_type: str = "N/A"
    special_instructions: str = "N/A"
    dimensions: str = "N/A"


class TrackingData(CamelModel):
    shipment_number: str = "N/A"
    status: str = "N/A"
    carrier: str = "N/A"
    container_number: str = "N/A"
    container_type: str = "N/A"
    weight: str = "N/A"
    origin: str = "N/A"
    destination: str = "N/A"
    pol: str = "N/A"
    pod: str = "N/A"
    estimated_arrival: str = "N/A"
    estimated_departure: str = "N/A"
    last_location: str = "N/A"
    details: ShipmentDetails = Field(default_factory=ShipmentDetails)
    documents: list[dict[str, Any]] = Field(default_factory=list)
    timeline: list[TimelineLocation] = Field(default_factory=list)
    raw: Any = None


class TrackingResult(CamelModel):
    success: bool
    data: Optional[TrackingData] = None
    error: Optional[str] = None
    source: str
    is_live_data: bool = False
    scraped_at: Optional[str] = None
    fallback_options: list[FallbackOption] = Field(default_factory=list)


class ShippingTrackingRequest(CamelModel):
    tracking_number: Optional[str] = Field(None, description="Container, B/L or booking number")
    booking_type: Optional[str] = None


class ShippingTrackingResponse(CamelModel):
    container_number: str
    tracking_number_type: TrackingNumberType
    prefix: str
    shipping_line_key: Optional[str] = None
    shipping_line: str
    tracking_url: str
    booking_type: Optional[str] = None
    message: str
    fallback_options: list[FallbackOption] = Field(default_factory=list)
    is_real_data: bool = False


class ProviderStatus(CamelModel):
    name: str
    available: bool
    priority: int
    supported_carriers: list[str] = Field(default_factory=lambda: ["*"])


class ProviderStatusResponse(CamelModel):
    success: bool = True
    providers: list[ProviderStatus] = Field(default_factory=list)
    total_providers: int = 0
    available_providers: int = 0


class ProviderTrackingRequest(CamelModel):
    tracking_number: Optional[str] = None
    preferred_provider: Optional[str] = None
    carrier_hint: Optional[str] = Field(None, description="Carrier slug, e.g. 'maersk'")
    shipment_type: Optional[Literal["ocean", "air", "lcl"]] = None
    force_update: bool = False

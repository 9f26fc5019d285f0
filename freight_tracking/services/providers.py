"""
Priority-ordered registry of live tracking providers.

A request goes to the preferred provider first (when named and available),
then to every other available provider in priority order, until one returns
data. Providers are plain callables so another data source is one more
TrackingProvider entry.
"""
import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

from freight_tracking.schemas import ProviderStatus, TrackingResult
from freight_tracking.services.classifier import (
    classify,
    clean_tracking_number,
    sealine_code,
    searates_type,
)
from freight_tracking.services.searates import SeaRatesService

logger = logging.getLogger(__name__)

ALL_CARRIERS = "*"
NO_PROVIDER_ERROR = "Unable to track shipment with any available provider"


@dataclass
class TrackingRequest:
    tracking_number: str
    carrier_hint: Optional[str] = None  # carrier slug
    shipment_type: Optional[str] = None  # ocean / air / lcl
    force_update: bool = False


@dataclass
class TrackingProvider:
    name: str
    priority: int
    is_available: Callable[[], bool]
    track: Callable[[TrackingRequest], TrackingResult]
    supported_carriers: list[str] = field(default_factory=lambda: [ALL_CARRIERS])

    def supports(self, carrier_hint: Optional[str]) -> bool:
        if not carrier_hint or ALL_CARRIERS in self.supported_carriers:
            return True
        return carrier_hint in self.supported_carriers


def searates_provider(service: SeaRatesService, priority: int = 1) -> TrackingProvider:
    def track(request: TrackingRequest) -> TrackingResult:
        if request.shipment_type == "air":
            type_hint = None
        elif request.shipment_type in ("ocean", "lcl"):
            type_hint = "CT"
        else:
            type_hint = searates_type(classify(request.tracking_number))

        return service.track(
            request.tracking_number,
            sealine=sealine_code(request.carrier_hint),
            type=type_hint,
            force_update=request.force_update,
            include_route=True,
            include_ais=True,
        )

    return TrackingProvider(
        name="SeaRates",
        priority=priority,
        is_available=service.is_available,
        track=track,
    )


class MultiProviderTrackingService:
    def __init__(self, providers: Optional[list[TrackingProvider]] = None):
        if providers is None:
            providers = [searates_provider(SeaRatesService())]
        self.providers = sorted(providers, key=lambda p: p.priority)

    def _find(self, name: Optional[str]) -> Optional[TrackingProvider]:
        return next((p for p in self.providers if p.name == name), None) if name else None

    def _attempt(self, provider: TrackingProvider, request: TrackingRequest) -> Optional[TrackingResult]:
        logger.info("Attempting tracking with %s...", provider.name)
        try:
            result = provider.track(request)
        except Exception:
            logger.exception("Provider %s threw an unexpected error", provider.name)
            return None

        if result.success and result.data:
            logger.info("Tracking successful with %s", provider.name)
            return result.model_copy(update={"source": provider.name, "is_live_data": True})

        logger.warning("Provider %s returned no data: %s", provider.name, result.error or "no error message")
        return None

    def track_shipment(self, tracking_number: str, preferred_provider: Optional[str] = None,
                       carrier_hint: Optional[str] = None, shipment_type: Optional[str] = None,
                       force_update: bool = False) -> TrackingResult:
        """
        Try providers until one has data. The carrier hint defaults to the
        line detected from the number's prefix.
        """
        clean = clean_tracking_number(tracking_number)
        request = TrackingRequest(
            tracking_number=clean,
            carrier_hint=carrier_hint or classify(clean).shipping_line,
            shipment_type=shipment_type,
            force_update=force_update,
        )

        preferred = self._find(preferred_provider)
        if preferred and preferred.is_available():
            result = self._attempt(preferred, request)
            if result:
                return result

        for provider in self.providers:
            if provider is preferred:
                continue
            if not provider.is_available():
                logger.info("Provider %s is not available. Skipping.", provider.name)
                continue
            if not provider.supports(request.carrier_hint):
                logger.info("Provider %s does not support carrier %s. Skipping.", provider.name, request.carrier_hint)
                continue
            result = self._attempt(provider, request)
            if result:
                return result

        logger.error("All tracking providers failed for %s", tracking_number)
        return TrackingResult(success=False, error=NO_PROVIDER_ERROR, source="none")

    def get_provider_status(self) -> list[ProviderStatus]:
        return [
            ProviderStatus(
                name=p.name,
                available=p.is_available(),
                priority=p.priority,
                supported_carriers=list(p.supported_carriers),
            )
            for p in self.providers
        ]

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, Query
from freight_tracking.schemas import (
    ProviderStatusResponse,
    ProviderTrackingRequest,
    ShippingTrackingRequest,
    ShippingTrackingResponse,
    TrackingResult,
)
from freight_tracking.services.classifier import classify
from freight_tracking.services.resolver import resolve, fallback_options
from freight_tracking.services.providers import MultiProviderTrackingService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Tracking"])
tracking_engine = MultiProviderTrackingService()

INVALID_NUMBER_MESSAGE = (
    "Invalid tracking number format. Please check your container number or Bill of Lading number."
)

TYPE_LABELS = {"container": "Container", "bl": "Bill of Lading"}


def _resolve_tracking(tracking_number: Optional[str], booking_type: Optional[str] = None) -> ShippingTrackingResponse:
    if not tracking_number or not tracking_number.strip():
        raise HTTPException(status_code=400, detail="Tracking number is required")

    logger.info("Processing tracking request for: %s", tracking_number)
    info = classify(tracking_number)
    if not info.is_valid:
        raise HTTPException(status_code=400, detail=INVALID_NUMBER_MESSAGE)

    link = resolve(info, tracking_number)
    label = TYPE_LABELS.get(info.type, "Booking")

    return ShippingTrackingResponse(
        container_number=tracking_number,
        tracking_number_type=info.type,
        prefix=info.prefix,
        shipping_line_key=info.shipping_line,
        shipping_line=link.name,
        tracking_url=link.url,
        booking_type=booking_type,
        message=f"{label} tracking information resolved.",
        fallback_options=fallback_options(info, tracking_number),
        is_real_data=False,
    )


@router.post("/shipping-tracking", response_model=ShippingTrackingResponse, response_model_by_alias=True)
def shipping_tracking(request: ShippingTrackingRequest):
    try:
        return _resolve_tracking(request.tracking_number, request.booking_type)
    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Shipping tracking error")
        raise HTTPException(status_code=500, detail=str(e))


@router.get("/shipping-tracking", response_model=ShippingTrackingResponse, response_model_by_alias=True)
def shipping_tracking_lookup(tracking_number: Optional[str] = Query(None, alias="trackingNumber")):
    return _resolve_tracking(tracking_number)


def _not_found(tracking_number: str, result: TrackingResult, default_error: str):
    options = fallback_options(classify(tracking_number), tracking_number)
    return HTTPException(status_code=404, detail={
        "error": result.error or default_error,
        "fallbackOptions": [o.model_dump(by_alias=True) for o in options],
    })


@router.get("/track/searates/{tracking_number}", response_model=TrackingResult, response_model_by_alias=True)
def get_searates(tracking_number: str):
    result = tracking_engine.track_shipment(tracking_number, preferred_provider="SeaRates")
    if not result.success:
        raise _not_found(tracking_number, result, "SeaRates Asset Not Found")
    return result


@router.get("/tracking-providers", response_model=ProviderStatusResponse, response_model_by_alias=True)
def provider_status():
    providers = tracking_engine.get_provider_status()
    return ProviderStatusResponse(
        providers=providers,
        total_providers=len(providers),
        available_providers=sum(1 for p in providers if p.available),
    )


@router.post("/tracking-providers", response_model=TrackingResult, response_model_by_alias=True)
def track_with_providers(request: ProviderTrackingRequest):
    if not request.tracking_number or not request.tracking_number.strip():
        raise HTTPException(status_code=400, detail="Tracking number is required")
    try:
        result = tracking_engine.track_shipment(
            request.tracking_number,
            preferred_provider=request.preferred_provider,
            carrier_hint=request.carrier_hint,
            shipment_type=request.shipment_type,
            force_update=request.force_update,
        )
    except Exception as e:
        logger.exception("Multi-provider tracking error")
        raise HTTPException(status_code=500, detail=str(e))
    if not result.success:
        raise _not_found(request.tracking_number, result, "Shipment Not Found")
    return result

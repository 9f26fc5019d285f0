import logging
import os
import requests
from datetime import datetime, timezone
from dotenv import load_dotenv
from pathlib import Path
from typing import Any, Callable, Optional
import dateutil.parser

from freight_tracking.schemas import (
    ShipmentDetails,
    TimelineLocation,
    TrackingData,
    TrackingEvent,
    TrackingResult,
)

# Institutional Path Management
env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://api.searates.com/tracking/v2"
SOURCE = "SeaRates"
NA = "N/A"

# DEPA/ARRI only count as vessel moves on the sea leg; on rail/truck legs they stay generic.
SEA_EVENT_TYPES = {
    "DEPA": "vessel-departure",
    "ARRI": "vessel-arrival",
}

EVENT_TYPES = {
    "GTOT": "gate",
    "GTIN": "gate",
    "LOAD": "load",
    "RECE": "cargo-received",
    "CUSR": "customs-cleared",
    "DISC": "event",
}

SHIPMENT_TYPES = {
    "CT": "Container",
    "BL": "Bill of Lading",
    "BK": "Booking",
}

Clock = Callable[[], datetime]


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


# ============================================================================
# Field helpers
# ============================================================================

def _text(value: Any) -> str:
    if value is None or value == "":
        return NA
    return str(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None or value == "":
        return None
    return str(value)


def _as_dict(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _as_list(value: Any) -> list:
    return value if isinstance(value, list) else []


_KEY_TYPES = (str, int)


def _index_by_id(items: Any) -> dict:
    return {
        item["id"]: item for item in _as_list(items)
        if isinstance(item, dict) and isinstance(item.get("id"), _KEY_TYPES)
    }


def _lookup(table: dict, key: Any) -> Any:
    return table.get(key) if isinstance(key, _KEY_TYPES) else None


# Two defaults that differ in every date part: if the parse depends on which
# one is used, the string did not carry a full calendar date.
_DEFAULT_A = datetime(2000, 1, 1)
_DEFAULT_B = datetime(2001, 2, 2)


def _parse_full_date(value: str) -> datetime:
    try:
        return dateutil.parser.isoparse(value)
    except ValueError:
        pass
    dt = dateutil.parser.parse(value, default=_DEFAULT_A)
    if dt.date() != dateutil.parser.parse(value, default=_DEFAULT_B).date():
        raise ValueError(f"incomplete date: {value!r}")
    return dt


def _parse_date(value: Any) -> Optional[datetime]:
    """
    Provider dates arrive as ISO strings, usually without an offset. Naive values are UTC.

    Partial dates ("15", "July") and instants that cannot be expressed in UTC
    are treated as missing.
    """
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        dt = _parse_full_date(value)
        if dt.tzinfo is None:
            return dt.replace(tzinfo=timezone.utc)
        return dt.astimezone(timezone.utc)
    except (ValueError, OverflowError):
        logger.debug("Unparseable provider date: %r", value)
        return None


def _iso(dt: datetime) -> str:
    return dt.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _display_date(dt: datetime) -> str:
    return f"{dt.month}/{dt.day}/{dt.year}"


def _display_time(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    meridiem = "AM" if dt.hour < 12 else "PM"
    return f"{hour}:{dt.minute:02d}:{dt.second:02d} {meridiem}"


def _iso_or_raw(value: Any) -> str:
    dt = _parse_date(value)
    return _iso(dt) if dt else _text(value)


def _location_label(location: Optional[dict]) -> str:
    if not location:
        return NA
    parts = [p for p in (location.get("name"), location.get("country")) if p]
    return ", ".join(str(p) for p in parts) if parts else NA


def classify_event(event_code: Any, transport_type: Any) -> str:
    code = event_code.upper() if isinstance(event_code, str) else ""
    if code in SEA_EVENT_TYPES:
        return SEA_EVENT_TYPES[code] if transport_type == "sea" else "event"
    return EVENT_TYPES.get(code, "event")


# ============================================================================
# Normalization
# ============================================================================

def _unwrap(payload: Any) -> dict:
    """Accept both the bare data object and the API envelope {status, message, data}."""
    body = _as_dict(payload)
    if "metadata" not in body and isinstance(body.get("data"), dict):
        return body["data"]
    return body


def _build_timeline(data: dict, locations: dict, facilities: dict, vessels: dict,
                    clock: Clock) -> list[TimelineLocation]:
    grouped: dict[str, list[tuple[datetime, TrackingEvent, Optional[str]]]] = {}

    for container in _as_list(data.get("containers")):
        if not isinstance(container, dict):
            continue
        for event in _as_list(container.get("events")):
            if not isinstance(event, dict):
                continue

            location = _lookup(locations, event.get("location"))
            facility = _lookup(facilities, event.get("facility"))
            vessel = _lookup(vessels, event.get("vessel"))

            when = _parse_date(event.get("date"))
            if when is None:
                when = clock()
                when = when.replace(tzinfo=timezone.utc) if when.tzinfo is None else when.astimezone(timezone.utc)

            location_name = _location_label(location)
            description = _optional_text(event.get("description"))

            tracking_event = TrackingEvent(
                type=classify_event(event.get("event_code"), event.get("type")),
                status=_text(description or event.get("status") or event.get("event_code")),
                location=location_name,
                timestamp=_iso(when),
                date=_display_date(when),
                time=_display_time(when),
                description=description,
                vessel=_optional_text(vessel.get("name")) if vessel else None,
                voyage=_optional_text(event.get("voyage")),
            )
            terminal = _optional_text(facility.get("name")) if facility else None
            grouped.setdefault(location_name, []).append((when, tracking_event, terminal))

    blocks = []
    for location_name, entries in grouped.items():
        entries.sort(key=lambda entry: entry[0])
        terminal = next((t for _, _, t in entries if t), None)
        blocks.append((entries[0][0], TimelineLocation(
            location=location_name,
            terminal=terminal,
            events=[e for _, e, _ in entries],
        )))

    # Groups ordered by their earliest event, not by the latest one.
    blocks.sort(key=lambda block: block[0])
    return [block for _, block in blocks]


def normalize(payload: Any, clock: Optional[Clock] = None) -> TrackingData:
    """
    Reshape a SeaRates tracking payload into TrackingData.

    The payload carries parallel arrays (locations, facilities, vessels)
    that events reference by id. Every container's events are resolved
    against those, grouped by location, then ordered twice: events inside
    a location by time, and locations by their earliest event.

    Missing fields come back as "N/A" or empty lists. Events without a
    usable date are stamped with clock() so they still sort. The input is
    kept untouched under `raw`.
    """
    clock = clock or _utc_now
    data = _unwrap(payload)

    locations = _index_by_id(data.get("locations"))
    facilities = _index_by_id(data.get("facilities"))
    vessels = _index_by_id(data.get("vessels"))

    metadata = _as_dict(data.get("metadata"))
    route = _as_dict(data.get("route"))
    containers = [c for c in _as_list(data.get("containers")) if isinstance(c, dict)]
    first_container = containers[0] if containers else {}

    def route_location(leg: str) -> str:
        return _location_label(_lookup(locations, _as_dict(route.get(leg)).get("location")))

    pol_leg = _as_dict(route.get("pol"))
    pod_leg = _as_dict(route.get("pod"))

    timeline = _build_timeline(data, locations, facilities, vessels, clock)

    last_location = NA
    if timeline and timeline[-1].events:
        last_location = timeline[-1].events[-1].location

    return TrackingData(
        shipment_number=_text(metadata.get("number")),
        status=_text(metadata.get("status")),
        carrier=_text(metadata.get("sealine_name") or metadata.get("sealine")),
        container_number=_text(first_container.get("number")),
        container_type=_text(first_container.get("size_type") or first_container.get("iso_code")),
        weight=_text(first_container.get("weight")),
        origin=route_location("prepol"),
        destination=route_location("postpod"),
        pol=route_location("pol"),
        pod=route_location("pod"),
        estimated_arrival=_iso_or_raw(pod_leg.get("date") or pod_leg.get("predictive_eta")),
        estimated_departure=_iso_or_raw(pol_leg.get("date")),
        last_location=last_location,
        details=ShipmentDetails(
            packages=_text(metadata.get("packages")),
            volume=_text(metadata.get("volume")),
            pieces=_text(metadata.get("pieces")),
            shipment_type=_lookup(SHIPMENT_TYPES, metadata.get("type")) or NA,
        ),
        documents=[],
        timeline=timeline,
        raw=payload,
    )


# ============================================================================
# Provider wrapper
# ============================================================================

DEFAULT_TIMEOUT = 30.0


def _timeout_from_env() -> float:
    raw = os.getenv("SEARATES_TIMEOUT")
    if raw is None or not raw.strip():
        return DEFAULT_TIMEOUT
    try:
        timeout = float(raw)
    except ValueError:
        timeout = 0
    if not 0 < timeout < float("inf"):
        logger.warning("Ignoring SEARATES_TIMEOUT=%r, using %ss", raw, DEFAULT_TIMEOUT)
        return DEFAULT_TIMEOUT
    return timeout


class SeaRatesService:
    def __init__(self):
        self.api_key = os.getenv("SEARATES_API_KEY")
        self.base_url = os.getenv("SEARATES_BASE_URL", DEFAULT_BASE_URL)
        self.timeout = _timeout_from_env()
        if not self.api_key:
            logger.warning("SEARATES_API_KEY is not set; SeaRates tracking is disabled.")

    def is_available(self) -> bool:
        return bool(self.api_key)

    def _failure(self, error: str) -> TrackingResult:
        return TrackingResult(success=False, error=error, source=SOURCE)

    def track(self, tracking_number: str, sealine: Optional[str] = None, type: Optional[str] = None,
              force_update: bool = False, include_route: bool = False,
              include_ais: bool = False) -> TrackingResult:
        """Fetches live sea-freight tracking and returns it normalized."""
        if not self.api_key:
            return self._failure("SeaRates API key not configured.")

        params = {"api_key": self.api_key, "number": tracking_number}
        if force_update:
            params["force_update"] = "true"
        if include_route:
            params["include_route"] = "true"
        if include_ais:
            params["include_ais"] = "true"
        if sealine:
            params["sealine"] = sealine
        if type:
            params["type"] = type

        logger.info("Calling SeaRates for %s (type=%s, sealine=%s)", tracking_number, type, sealine)

        try:
            response = requests.get(self.base_url, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error("SeaRates request failed for %s: %s", tracking_number, e)
            return self._failure(f"Failed to reach SeaRates: {e}")

        try:
            body = response.json()
        except ValueError:
            body = None

        if response.status_code != 200:
            message = body.get("message") if isinstance(body, dict) else None
            logger.warning("SeaRates API error: %s | %s", response.status_code, message)
            return self._failure(f"SeaRates API error: {response.status_code} - {message or 'Unknown error'}")

        if not isinstance(body, dict):
            return self._failure("SeaRates returned an unreadable response.")

        if body.get("status", "success") != "success":
            return self._failure(f"SeaRates API error: {body.get('message') or body.get('status')}")

        data = _unwrap(body)
        if not _as_list(data.get("containers")):
            return self._failure("No tracking information found from SeaRates.")

        tracking = normalize(body)
        updated = _parse_date(_as_dict(data.get("metadata")).get("updated_at")) or _utc_now()

        return TrackingResult(
            success=True,
            data=tracking,
            source=f"{SOURCE} API",
            is_live_data=True,
            scraped_at=_iso(updated),
        )

"""Pytest configuration and fixtures for freight tracking tests."""
import pytest
from datetime import datetime, timezone


FIXED_NOW = datetime(2025, 9, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def fixed_clock():
    """Clock used for events the provider sent without a date."""
    return lambda: FIXED_NOW


@pytest.fixture
def searates_payload():
    """
    Two containers whose events interleave across Shanghai, Singapore and Rotterdam.

    Bare data object, the shape found under `data` in a SeaRates reply.
    """
    return {
        "metadata": {
            "type": "CT",
            "number": "MSCU1234567",
            "sealine": "MSCU",
            "sealine_name": "MSC",
            "status": "IN_TRANSIT",
            "updated_at": "2025-08-04 10:00:00",
        },
        "locations": [
            {"id": 1, "name": "Shanghai", "country": "China", "locode": "CNSHA"},
            {"id": 2, "name": "Singapore", "country": "Singapore", "locode": "SGSIN"},
            {"id": 3, "name": "Rotterdam", "country": "Netherlands", "locode": "NLRTM"},
        ],
        "facilities": [
            {"id": 10, "name": "Yangshan Deep Water Port"},
            {"id": 30, "name": "APM Terminals Maasvlakte II"},
        ],
        "vessels": [
            {"id": 100, "name": "MSC OSCAR", "imo": 9703291},
        ],
        "route": {
            "prepol": {"location": 1, "date": "2025-07-01 08:00:00", "actual": True},
            "pol": {"location": 1, "date": "2025-07-03 18:00:00", "actual": True},
            "pod": {"location": 3, "date": None, "actual": False, "predictive_eta": "2025-08-01 06:00:00"},
            "postpod": {"location": 3, "date": None, "actual": False},
        },
        "containers": [
            {
                "number": "MSCU1234567",
                "iso_code": "45G1",
                "size_type": "40' High Cube",
                "status": "IN_TRANSIT",
                "events": [
                    {"location": 1, "facility": 10, "description": "Gate in", "event_code": "GTIN",
                     "type": "land", "date": "2025-07-01 08:00:00"},
                    {"location": 1, "facility": 10, "description": "Loaded", "event_code": "LOAD",
                     "type": "sea", "date": "2025-07-03 10:00:00", "vessel": 100, "voyage": "MS2401E"},
                    {"location": 1, "facility": 10, "description": "Vessel departure", "event_code": "DEPA",
                     "type": "sea", "date": "2025-07-03 18:00:00", "vessel": 100, "voyage": "MS2401E"},
                    {"location": 3, "facility": 30, "description": "Vessel arrival", "event_code": "ARRI",
                     "type": "sea", "date": "2025-08-01 06:00:00", "vessel": 100, "voyage": "MS2401E"},
                ],
            },
            {
                "number": "MSCU7654321",
                "iso_code": "45G1",
                "events": [
                    {"location": 1, "description": "Gate in", "event_code": "GTIN",
                     "type": "land", "date": "2025-07-02 09:00:00"},
                    {"location": 2, "description": "Discharged", "event_code": "DISC",
                     "type": "sea", "date": "2025-07-15 12:00:00", "vessel": 100},
                    {"location": 2, "description": "Loaded", "event_code": "LOAD",
                     "type": "sea", "date": "2025-07-16 14:30:00"},
                    {"location": 3, "facility": 30, "description": "Discharged", "event_code": "DISC",
                     "type": "sea", "date": "2025-08-02 07:00:00"},
                    {"location": 3, "facility": 30, "description": "Customs released", "event_code": "CUSR",
                     "type": "land", "date": "2025-08-04 09:15:00"},
                ],
            },
        ],
    }


@pytest.fixture
def searates_envelope(searates_payload):
    """The payload as the API actually returns it."""
    return {"status": "success", "message": "OK", "data": searates_payload}

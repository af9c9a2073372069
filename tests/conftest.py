"""Shared fixtures: sample API payloads and an isolated environment."""

import pytest


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep settings away from the developer's .env files and env vars."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    for name in ("COURIER_TRACK_LOG_LEVEL", "COURIER_TRACK_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    return tmp_path


@pytest.fixture
def dhl_payload():
    return {
        "slug": "dhl",
        "name": "DHL Express",
        "phone": "+1 800 225 5345",
        "other_name": "DHL International",
        "web_url": "http://www.dhl.com/",
        "required_fields": [],
        "optional_fields": ["tracking_origin_country"],
        "default_language": "en",
        "support_languages": ["en", "de"],
        "service_from_country_iso3": ["DEU", "USA"],
    }


@pytest.fixture
def fedex_payload():
    return {
        "slug": "fedex",
        "name": "FedEx",
        "phone": "+1 800 247 4747",
        "other_name": "Federal Express",
        "web_url": "http://www.fedex.com/",
        "required_fields": [],
        "optional_fields": [],
        "default_language": "en",
        "support_languages": ["en"],
        "service_from_country_iso3": ["USA"],
    }


@pytest.fixture
def courier_list_payload(dhl_payload, fedex_payload):
    return {"total": 2, "couriers": [dhl_payload, fedex_payload]}


@pytest.fixture
def detect_list_payload(dhl_payload, fedex_payload):
    return {
        "total": 2,
        "tracking": [
            {
                "tracking_number": "1234567890",
                "slug": "dhl",
                "tracking_origin_country": "DEU",
            }
        ],
        "couriers": [dhl_payload, fedex_payload],
    }

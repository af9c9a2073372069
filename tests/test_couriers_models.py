"""Tests for the couriers resource models."""

import pytest
from pydantic import ValidationError

from core.domain.couriers import (
    Courier,
    CourierDetectList,
    CourierDetectRequest,
    CourierDetectTracking,
    CourierList,
    CourierTracking,
)
from core.domain.errors import ErrorKind, InvalidTrackingNumberError

# ============================================================================
# CourierDetectRequest construction
# ============================================================================


@pytest.mark.parametrize("tracking_number", ["1234567890", "a", " ", "RR123456785CN", "ñ-😀"])
def test_detect_request_accepts_any_non_empty_tracking_number(tracking_number):
    request = CourierDetectRequest({"tracking_number": tracking_number})

    assert request.tracking.tracking_number == tracking_number


def test_detect_request_keeps_slug_list():
    request = CourierDetectRequest({"tracking_number": "1234567890", "slug": ["dhl", "fedex"]})

    assert request.tracking.slug == ["dhl", "fedex"]


def test_detect_request_accepts_model_instance_and_keyword():
    tracking = CourierDetectTracking(tracking_number="1234567890", tracking_postal_code="10115")

    positional = CourierDetectRequest(tracking)
    keyword = CourierDetectRequest(tracking=tracking)

    assert positional.tracking == tracking
    assert keyword == positional


def test_detect_request_without_tracking_raises_synchronously():
    with pytest.raises(InvalidTrackingNumberError) as excinfo:
        CourierDetectRequest(None)

    assert excinfo.value.kind is ErrorKind.CONSTRUCTOR_INVALID_TRACKING_NUMBER
    assert excinfo.value.data is None


def test_detect_request_with_no_arguments_raises():
    with pytest.raises(InvalidTrackingNumberError):
        CourierDetectRequest()


@pytest.mark.parametrize(
    "tracking",
    [
        {"tracking_number": ""},
        {"tracking_number": None},
        {"tracking_number": 12345},
        {"tracking_number": ["1234567890"]},
        {"slug": "dhl"},
        {},
    ],
)
def test_detect_request_rejects_missing_or_empty_tracking_number(tracking):
    with pytest.raises(InvalidTrackingNumberError) as excinfo:
        CourierDetectRequest(tracking)

    assert excinfo.value.data == tracking
    assert excinfo.value.message == "Invalid Tracking Number"


def test_detect_request_rejects_model_with_empty_tracking_number():
    tracking = CourierDetectTracking(tracking_number="")

    with pytest.raises(InvalidTrackingNumberError) as excinfo:
        CourierDetectRequest(tracking)

    assert excinfo.value.data is tracking


def test_invalid_tracking_number_is_not_a_pydantic_validation_error():
    with pytest.raises(InvalidTrackingNumberError) as excinfo:
        CourierDetectRequest.model_validate({"tracking": {"tracking_number": ""}})

    assert not isinstance(excinfo.value, ValidationError)


def test_detect_request_model_validate_uses_same_rule():
    request = CourierDetectRequest.model_validate({"tracking": {"tracking_number": "1234567890"}})

    assert request.tracking.tracking_number == "1234567890"


def test_detect_request_is_frozen():
    request = CourierDetectRequest({"tracking_number": "1234567890"})

    with pytest.raises(ValidationError):
        request.tracking = CourierDetectTracking(tracking_number="other")


# ============================================================================
# Slug normalization
# ============================================================================


@pytest.mark.parametrize(
    ("slug", "expected"),
    [
        (None, []),
        ("dhl", ["dhl"]),
        ("dhl, fedex,,", ["dhl", "fedex"]),
        (["dhl", " fedex ", ""], ["dhl", "fedex"]),
    ],
)
def test_slugs_normalizes_string_and_list(slug, expected):
    tracking = CourierDetectTracking(tracking_number="1", slug=slug)

    assert tracking.slugs() == expected


def test_single_slug_string_is_kept_on_the_wire():
    tracking = CourierDetectTracking(tracking_number="1", slug="dhl,fedex")

    assert tracking.slug == "dhl,fedex"


# ============================================================================
# Response shapes
# ============================================================================


def test_courier_null_lists_become_empty(dhl_payload):
    payload = {**dhl_payload, "required_fields": None, "support_languages": None}

    courier = Courier.model_validate(payload)

    assert courier.required_fields == []
    assert courier.support_languages == []


def test_courier_ignores_unknown_keys(dhl_payload):
    courier = Courier.model_validate({**dhl_payload, "logo": "https://example.invalid/dhl.png"})

    assert courier.slug == "dhl"
    assert not hasattr(courier, "logo")


def test_courier_requires_slug(dhl_payload):
    payload = {k: v for k, v in dhl_payload.items() if k != "slug"}

    with pytest.raises(ValidationError):
        Courier.model_validate(payload)


def test_courier_list_preserves_order_and_total(courier_list_payload):
    result = CourierList.model_validate(courier_list_payload)

    assert result.total == 2
    assert [c.slug for c in result.couriers] == ["dhl", "fedex"]


def test_courier_list_total_is_not_checked_against_length(dhl_payload):
    result = CourierList.model_validate({"total": 700, "couriers": [dhl_payload]})

    assert result.total == 700
    assert len(result.couriers) == 1


@pytest.mark.parametrize("payload", [{}, {"total": 1}, {"couriers": []}])
def test_courier_list_requires_total_and_couriers(payload):
    with pytest.raises(ValidationError):
        CourierList.model_validate(payload)


def test_detect_list_requires_tracking(dhl_payload):
    with pytest.raises(ValidationError):
        CourierDetectList.model_validate({"total": 1, "couriers": [dhl_payload]})


def test_detect_list_wraps_single_tracking_object(dhl_payload):
    result = CourierDetectList.model_validate(
        {"total": 1, "tracking": {"tracking_number": "123", "slug": "dhl"}, "couriers": [dhl_payload]}
    )

    assert result.tracking == [CourierTracking(tracking_number="123", slug="dhl")]


def test_detect_list_defaults_to_empty():
    result = CourierDetectList.model_validate({"total": 0, "tracking": None, "couriers": None})

    assert result.tracking == []
    assert result.couriers == []

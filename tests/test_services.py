# tests/test_services.py
import pytest

from platerecognizer.domain import services
from platerecognizer.domain.requests import RecognitionRequest


@pytest.mark.parametrize("base, relative", [
    ("https://host/v1", "/plate-reader"),
    ("https://host/v1/", "plate-reader"),
    ("https://host/v1/", "/plate-reader"),
    ("https://host/v1//", "//plate-reader"),
])
def test_combine_urls_uses_single_separator(base, relative):
    assert services.combine_urls(base, relative) == "https://host/v1/plate-reader"


def test_combine_urls_empty_relative_returns_base_unchanged():
    assert services.combine_urls("https://host/v1", "") == "https://host/v1"
    assert services.combine_urls("https://host/v1/", "") == "https://host/v1/"


def test_resolve_regions_absent_uses_defaults_in_order():
    assert services.resolve_regions(None, ("us-ca", "za")) == ["us-ca", "za"]


def test_resolve_regions_explicit_empty_overrides_defaults():
    assert services.resolve_regions((), ("za",)) == []


def test_resolve_regions_no_defaults():
    assert services.resolve_regions(None, None) == []


def test_build_form_data_minimal_request_has_no_optional_fields():
    request = RecognitionRequest.from_bytes(b"img")
    assert services.build_form_data(request) == {}


def test_build_form_data_all_fields():
    request = RecognitionRequest.from_bytes(
        b"img", regions=["za", "us-ca"], mmc=True, camera_id="cam-7",
    )
    data = services.build_form_data(request, default_regions=("gb",))
    assert data == {"mmc": "true", "regions": ["za", "us-ca"], "camera_id": "cam-7"}


def test_build_form_data_skips_empty_camera_id():
    request = RecognitionRequest.from_bytes(b"img", camera_id="")
    assert "camera_id" not in services.build_form_data(request)


def test_build_form_data_does_not_touch_request():
    request = RecognitionRequest.from_bytes(b"img")
    services.build_form_data(request, default_regions=("za",))
    assert request.regions is None

from __future__ import annotations

import pytest

from conftest import FakeTransport
from geocoding_api.countries import CountryRegistry
from geocoding_api.errors import (
    InvalidFormat,
    NoResults,
    RequestUnsuccessful,
    TransportFailure,
    UnknownCountry,
)
from geocoding_api.geocoders import Geocode
from geocoding_api.models import GeocodingResponse
from geocoding_api.request_builder import RegionBias
from geocoding_api.settings import settings

BASE_URL = "https://maps.googleapis.com/maps/api/geocode/json"


def make_geocode(transport: FakeTransport, api_key: str = "foo") -> Geocode:
    return Geocode(
        api_key=api_key,
        transport=transport,
        countries=CountryRegistry(language="en"),
        base_url=BASE_URL,
        default_language="en-GB",
    )


def test_exposes_its_api_key():
    assert make_geocode(FakeTransport(), api_key="something").api_key == "something"


def test_api_key_falls_back_to_settings(monkeypatch):
    monkeypatch.setattr(settings, "api_key", "from-env")

    assert Geocode(transport=FakeTransport()).api_key == "from-env"


def test_missing_api_key_is_rejected(monkeypatch):
    monkeypatch.setattr(settings, "api_key", None)

    with pytest.raises(ValueError):
        Geocode(transport=FakeTransport())


def test_by_address_with_country_bias(tunbridge_wells_payload):
    transport = FakeTransport(tunbridge_wells_payload)

    coordinates = make_geocode(transport).by_address(
        "25 Old Gardens Close Tunbridge Wells TN2 5ND", "gb"
    )

    assert transport.urls == [
        f"{BASE_URL}?key=foo"
        "&address=25%20Old%20Gardens%20Close%20Tunbridge%20Wells%20TN2%205ND"
        "&language=en-GB&region=uk"
    ]
    assert coordinates.address.street_address == "25 Old Gardens Close"
    assert coordinates.latitude == 51.1172303


def test_by_address_without_bias_sends_no_region(tunbridge_wells_payload):
    transport = FakeTransport(tunbridge_wells_payload)

    make_geocode(transport).by_address("Les Houches")

    assert transport.urls == [f"{BASE_URL}?key=foo&address=Les%20Houches&language=en-GB"]


@pytest.mark.parametrize(
    "code, error",
    [("United Kingdom", InvalidFormat), ("yz", UnknownCountry)],
)
def test_invalid_country_fails_before_any_request(code, error):
    transport = FakeTransport()

    with pytest.raises(error):
        make_geocode(transport).by_address("ignored", code)

    assert transport.urls == []


def test_unsuccessful_status_raises():
    transport = FakeTransport(
        {"status": "REQUEST_DENIED", "error_message": "The provided API key is invalid.", "results": []}
    )

    with pytest.raises(RequestUnsuccessful) as excinfo:
        make_geocode(transport).by_address("anywhere")

    assert excinfo.value.status == "REQUEST_DENIED"
    assert str(excinfo.value) == "REQUEST_DENIED: The provided API key is invalid."


def test_successful_status_without_results_raises_no_results():
    transport = FakeTransport({"status": "OK", "results": []})

    with pytest.raises(NoResults):
        make_geocode(transport).by_address("nowhere")


def test_transport_failure_propagates():
    transport = FakeTransport(error=TransportFailure("HTTP 503: Service Unavailable", status_code=503))

    with pytest.raises(TransportFailure) as excinfo:
        make_geocode(transport).by_address("anywhere", "FR")

    assert excinfo.value.status_code == 503
    assert len(transport.urls) == 1


def test_by_postcode_appends_the_country_name(tunbridge_wells_payload):
    transport = FakeTransport(tunbridge_wells_payload)

    make_geocode(transport).by_postcode("SW1E 5ND", "gb")

    assert transport.urls == [
        f"{BASE_URL}?key=foo&address=SW1E%205ND%20United%20Kingdom&language=en-GB&region=uk"
    ]


def test_by_postcode_validates_the_country():
    transport = FakeTransport()

    with pytest.raises(InvalidFormat):
        make_geocode(transport).by_postcode("07001", "Spain")

    assert transport.urls == []


@pytest.mark.parametrize(
    "lat, long, expected",
    [
        (" 43.549543 ", "7.014364 ", "43.549543%2C7.014364"),
        (43.549543, 7.014364, "43.549543%2C7.014364"),
        ("50.88916732998306", "-0.5768395884825535", "50.88916732998306%2C-0.5768395884825535"),
    ],
)
def test_by_lat_long_joins_without_spaces(tunbridge_wells_payload, lat, long, expected):
    transport = FakeTransport(tunbridge_wells_payload)

    make_geocode(transport).by_lat_long(lat, long)

    assert transport.urls == [f"{BASE_URL}?key=foo&latlng={expected}&language=en-GB"]


def test_by_lat_long_with_country_bias(tunbridge_wells_payload):
    transport = FakeTransport(tunbridge_wells_payload)

    make_geocode(transport).by_lat_long("39.513047", "2.538872", "ES")

    assert transport.urls[0].endswith("&region=es")


def test_call_returns_the_raw_envelope():
    transport = FakeTransport({"status": "ZERO_RESULTS", "results": []})
    geocode = make_geocode(transport)

    response = geocode({"address": "X", "region": "uk"}, "fr")

    assert isinstance(response, GeocodingResponse)
    assert response.status == "ZERO_RESULTS"
    assert transport.urls == [f"{BASE_URL}?key=foo&address=X&region=fr&language=en-GB"]


def test_call_with_no_bias_drops_region():
    transport = FakeTransport()

    make_geocode(transport)({"address": "X", "region": "uk"})

    assert transport.urls == [f"{BASE_URL}?key=foo&address=X&language=en-GB"]


def test_create_url_leaves_region_alone_by_default():
    geocode = make_geocode(FakeTransport())

    assert geocode.create_url({"address": "X", "region": "uk"}) == (
        f"{BASE_URL}?key=foo&address=X&region=uk&language=en-GB"
    )
    assert geocode.create_url({"address": "X", "region": "uk"}, RegionBias.none()) == (
        f"{BASE_URL}?key=foo&address=X&language=en-GB"
    )


def test_unsuccessful_error_matches_envelope_error_info():
    payload = {"status": "UNKNOWN_ERROR", "error_message": "Something went wrong", "results": []}
    geocode = make_geocode(FakeTransport(payload))

    with pytest.raises(RequestUnsuccessful) as excinfo:
        geocode.by_address("anywhere")

    envelope = geocode.normalizer.parse_envelope(payload)
    assert excinfo.value.error_info == envelope.error_info == "UNKNOWN_ERROR: Something went wrong"


def test_context_manager_closes_the_transport(tunbridge_wells_payload):
    transport = FakeTransport(tunbridge_wells_payload)

    with make_geocode(transport) as geocode:
        geocode.by_lat_long("51.1172303", "0.2635245")
        assert transport.closed is False

    assert transport.closed is True


def test_close_delegates_to_the_transport():
    transport = FakeTransport()

    make_geocode(transport).close()

    assert transport.closed is True

"""
Unit tests for the Google Places client. No network: requests go to a stub session.
"""

import pytest
import requests

from errors import ExternalApiError, ServiceUnavailable
from fakes import FakeResponse, StubSession
from models.location import FieldType, LatLng
from places_api.places_client import PlacesClient, maps_search_url

PARIS_PAYLOAD = {
    "status": "OK",
    "predictions": [
        {
            "description": "Paris, France",
            "structured_formatting": {"main_text": "Paris"},
            "terms": [{"offset": 0, "value": "Paris"}, {"offset": 7, "value": "France"}],
        },
        {
            "description": "Paris, TX, USA",
            "structured_formatting": {"main_text": "Paris"},
            "terms": [
                {"offset": 0, "value": "Paris"},
                {"offset": 7, "value": "TX"},
                {"offset": 11, "value": "USA"},
            ],
        },
    ],
}


def make_client(*responses):
    session = StubSession(*responses)
    return PlacesClient("test-key", session=session), session


class TestSuggest:
    def test_returns_candidates_in_service_order(self):
        client, session = make_client(FakeResponse(PARIS_PAYLOAD))

        candidates = client.suggest("Paris", FieldType.CITY)

        assert [c.description for c in candidates] == ["Paris, France", "Paris, TX, USA"]
        assert candidates[1].terms[-1].value == "USA"

    def test_sends_input_key_and_type(self):
        client, session = make_client(FakeResponse(PARIS_PAYLOAD))

        client.suggest("Île-de-France", FieldType.STATE)

        method, url, kwargs = session.requests[0]
        assert method == "GET"
        assert url == client.autocomplete_url
        assert kwargs["params"] == {
            "input": "Île-de-France",
            "type": "administrative_area_level_1",
            "key": "test-key",
        }
        assert kwargs["timeout"] == client.timeout

    def test_zero_results_is_empty_not_error(self):
        client, _ = make_client(FakeResponse({"status": "ZERO_RESULTS", "predictions": []}))
        assert client.suggest("zzzz", FieldType.COUNTRY) == []

    @pytest.mark.parametrize("status", ["INVALID_REQUEST", "OVER_QUERY_LIMIT", "REQUEST_DENIED", "UNKNOWN_ERROR"])
    def test_error_status_raises_external_api_error(self, status):
        client, _ = make_client(FakeResponse({"status": status, "predictions": []}))
        with pytest.raises(ExternalApiError) as exc_info:
            client.suggest("Paris", FieldType.CITY)
        assert exc_info.value.code == status

    def test_transport_failure_raises_service_unavailable(self):
        client, _ = make_client(requests.exceptions.ConnectionError("boom"))
        with pytest.raises(ServiceUnavailable):
            client.suggest("Paris", FieldType.CITY)

    def test_unreadable_body_raises_service_unavailable(self):
        client, _ = make_client(FakeResponse(status_code=502, invalid_json=True))
        with pytest.raises(ServiceUnavailable):
            client.suggest("Paris", FieldType.CITY)

    def test_complete_address_uses_first_description(self):
        client, session = make_client(FakeResponse(PARIS_PAYLOAD))
        assert client.complete_address("Paris") == "Paris, France"
        assert session.requests[0][2]["params"]["type"] == "address"

    def test_complete_address_none_when_no_match(self):
        client, _ = make_client(FakeResponse({"status": "ZERO_RESULTS", "predictions": []}))
        assert client.complete_address("nowhere") is None


class TestGeolocation:
    def test_geolocate_posts_empty_json(self):
        client, session = make_client(FakeResponse({"location": {"lat": 48.85, "lng": 2.35}, "accuracy": 20}))

        location = client.geolocate()

        assert location == LatLng(lat=48.85, lng=2.35)
        method, url, kwargs = session.requests[0]
        assert method == "POST"
        assert kwargs["json"] == {}
        assert kwargs["params"] == {"key": "test-key"}

    def test_geolocate_error_body_raises(self):
        client, _ = make_client(
            FakeResponse(
                {"error": {"code": 403, "message": "API key not valid", "status": "PERMISSION_DENIED"}},
                status_code=403,
            )
        )
        with pytest.raises(ExternalApiError) as exc_info:
            client.geolocate()
        assert exc_info.value.code == "PERMISSION_DENIED"
        assert "API key not valid" in exc_info.value.message

    def test_reverse_geocode_sends_latlng(self):
        client, session = make_client(
            FakeResponse({"status": "OK", "results": [{"address_components": []}]})
        )

        results = client.reverse_geocode(LatLng(lat=1.5, lng=-2.25))

        assert results == [{"address_components": []}]
        assert session.requests[0][2]["params"]["latlng"] == "1.5,-2.25"

    def test_reverse_geocode_zero_results(self):
        client, _ = make_client(FakeResponse({"status": "ZERO_RESULTS", "results": []}))
        assert client.reverse_geocode(LatLng(lat=0.0, lng=0.0)) == []


class TestClientLifecycle:
    def test_empty_key_rejected(self):
        with pytest.raises(ValueError):
            PlacesClient("")

    def test_context_manager_closes_session(self):
        client, session = make_client()
        with client:
            pass
        assert session.closed


class TestMapsSearchUrl:
    def test_spaces_become_plus(self):
        url = maps_search_url("1600 Amphitheatre Pkwy")
        assert url == "https://www.google.com/maps/search/?api=1&query=1600+Amphitheatre+Pkwy"

    def test_none_for_empty_address(self):
        assert maps_search_url(None) is None
        assert maps_search_url("") is None

from typing import Any, Dict, List, Optional
from urllib.parse import quote_plus

import requests

from configuration import Configuration as Config
from errors import ExternalApiError, ServiceUnavailable
from loggers.places_api_logger import places_api_logger as logger
from models.enums import ApiStatus
from models.location import Candidate, FieldType, LatLng


# ----------------------------
# Google Places / Geocoding / Geolocation client
# ----------------------------
class PlacesClient:
    """
    Thin blocking client over the Google endpoints used by the resolver:
      - Places Autocomplete (suggest / complete_address)
      - Geocoding (reverse_geocode)
      - Geolocation (geolocate)

    Every call is a single request. Nothing is retried or cached: a transport
    failure raises ServiceUnavailable, a non-success status raises ExternalApiError.
    """

    def __init__(
        self,
        api_key: str,
        *,
        autocomplete_url: str = Config.places_autocomplete_url,
        geocoding_url: str = Config.geocoding_url,
        geolocation_url: str = Config.geolocation_url,
        user_agent: str = Config.user_agent,
        timeout_seconds: int = Config.request_timeout_seconds,
        session: Optional[requests.Session] = None,
    ) -> None:
        if not api_key:
            raise ValueError("api_key must be non-empty")
        self.api_key = api_key
        self.autocomplete_url = autocomplete_url
        self.geocoding_url = geocoding_url
        self.geolocation_url = geolocation_url
        self.timeout = int(timeout_seconds)

        self.session = session if session is not None else requests.Session()
        self.session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )

    def close(self) -> None:
        self.session.close()

    def __enter__(self) -> "PlacesClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # ----------------------------
    # Transport
    # ----------------------------

    def _send(self, method: str, url: str, **kwargs) -> requests.Response:
        try:
            return self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.exceptions.RequestException as e:
            logger.error(f"{method} {url} failed: {e.__class__.__name__}")
            raise ServiceUnavailable(f"Could not reach {url}", cause=e) from e

    @staticmethod
    def _read_json(resp: requests.Response) -> Dict[str, Any]:
        try:
            payload = resp.json()
        except ValueError as e:
            logger.error(f"Unreadable response body (HTTP {resp.status_code})")
            raise ServiceUnavailable(f"Unreadable response (HTTP {resp.status_code})", cause=e) from e
        if not isinstance(payload, dict):
            raise ServiceUnavailable(f"Unexpected response body (HTTP {resp.status_code})")
        return payload

    def _get_with_status(self, url: str, params: Dict[str, Any]) -> Dict[str, Any]:
        """GET a Google web-service endpoint and decode its `status` field."""
        params = dict(params, key=self.api_key)
        resp = self._send("GET", url, params=params)
        payload = self._read_json(resp)

        raw_status = payload.get("status")
        status = ApiStatus.decode(raw_status)
        if not status.is_success:
            logger.error(f"Google API returned status {raw_status!r}: {payload.get('error_message', '')}")
        status.raise_for_status(raw_status)
        if status is ApiStatus.ZERO_RESULTS:
            logger.info("No results found for the given input.")
        return payload

    # ----------------------------
    # Places Autocomplete
    # ----------------------------

    def suggest(self, text: str, field_type: FieldType) -> List[Candidate]:
        """
        Candidates for `text` restricted to `field_type`, in the service's own order.
        ZERO_RESULTS yields an empty list.
        """
        payload = self._get_with_status(
            self.autocomplete_url,
            {"input": text, "type": field_type.api_type},
        )
        candidates = [
            Candidate.from_prediction(item)
            for item in payload.get("predictions") or []
            if isinstance(item, dict)
        ]
        logger.info(f"suggest({text!r}, {field_type.api_type}) -> {len(candidates)} candidate(s)")
        return candidates

    def complete_address(self, partial_address: str) -> Optional[str]:
        """Full description of the best `address` suggestion, or None."""
        candidates = self.suggest(partial_address, FieldType.ADDRESS)
        if not candidates:
            return None
        return candidates[0].description

    # ----------------------------
    # Geocoding / Geolocation
    # ----------------------------

    def reverse_geocode(self, location: LatLng) -> List[Dict[str, Any]]:
        payload = self._get_with_status(
            self.geocoding_url,
            {"latlng": f"{location.lat},{location.lng}"},
        )
        results = payload.get("results") or []
        return [r for r in results if isinstance(r, dict)]

    def geolocate(self) -> LatLng:
        """Approximate position of this host, as reported by the Geolocation API."""
        resp = self._send(
            "POST",
            self.geolocation_url,
            params={"key": self.api_key},
            json={},
        )
        payload = self._read_json(resp)

        if resp.status_code != 200:
            error = payload.get("error") if isinstance(payload.get("error"), dict) else None
            if error is not None:
                code = str(error.get("status") or error.get("code") or resp.status_code)
                message = str(error.get("message") or "Unknown error")
                logger.error(f"Error from Geolocation API: {message}")
                raise ExternalApiError(code, f"Error from Geolocation API: {message}")
            logger.error(f"Unexpected response from Geolocation API (HTTP {resp.status_code})")
            raise ExternalApiError(str(resp.status_code), "Unexpected response from Geolocation API")

        loc = payload.get("location") if isinstance(payload.get("location"), dict) else {}
        try:
            return LatLng(lat=float(loc["lat"]), lng=float(loc["lng"]))
        except (KeyError, TypeError, ValueError) as e:
            raise ServiceUnavailable("Geolocation response has no usable location", cause=e) from e


def maps_search_url(address: Optional[str], base_url: str = Config.maps_search_url) -> Optional[str]:
    if not address:
        return None
    return f"{base_url}?api=1&query={quote_plus(address)}"

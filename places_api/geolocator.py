from typing import Any, Dict, Iterable, List, Optional

from loggers.places_api_logger import places_api_logger as logger
from models.location import FieldType, LatLng, LocationRecord
from places_api.places_client import PlacesClient


# Geocoding component types whose long_name is appended to the address
ADDRESS_COMPONENT_TYPES = frozenset(
    ["street_address", "route", "neighborhood", "sublocality", "street_number"]
)


# ----------------------------
# Transform Geocoding result -> LocationRecord
# ----------------------------

def _apply_component(record: LocationRecord, types: Iterable[str], long_name: str) -> None:
    for component_type in types:
        if component_type in ADDRESS_COMPONENT_TYPES:
            record.append_address(long_name)
            continue
        field_type = FieldType.from_api_type(component_type)
        if field_type is not None:
            record.set(field_type, long_name)


def _compile_location_record(record: LocationRecord, geocoding_result: Dict[str, Any]) -> LocationRecord:
    """
    Replace the contents of `record` with the address components of one
    Geocoding result. Component order is preserved, so address fragments
    accumulate in the order Google lists them.
    """
    components = geocoding_result.get("address_components")
    if not isinstance(components, list):
        components = []

    record.clear()
    for component in components:
        if not isinstance(component, dict):
            continue
        long_name = str(component.get("long_name", "") or "")
        types = component.get("types") if isinstance(component.get("types"), list) else []
        if long_name:
            _apply_component(record, types, long_name)
    return record


# ----------------------------
# Entry point
# ----------------------------

def use_current_location(client: PlacesClient, record: LocationRecord) -> Optional[LatLng]:
    """
    Geolocate this host, reverse-geocode the position and reset `record` from
    the first result. Returns the coordinates used, or None when Google had no
    address for them (the record is left untouched in that case).
    """
    logger.info("Fetching current location")
    location = client.geolocate()
    logger.info(f"Coordinates: {location.lat}, {location.lng}")

    results: List[Dict[str, Any]] = client.reverse_geocode(location)
    if not results:
        logger.info("No results found for the current location.")
        return None

    _compile_location_record(record, results[0])
    logger.info("Location information updated from current location")
    return location

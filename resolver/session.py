"""
One interactive session: the location record plus everything that fills it.

Created once by main() and passed around explicitly; nothing here is global.
"""
from typing import Callable, Optional

import utils
from configuration import Configuration as Config
from errors import ExternalApiError, ServiceUnavailable, UnsupportedOperation
from loggers.main_logger import main_logger as logger
from models.location import FieldType, LocationRecord
from places_api import geolocator
from places_api.places_client import PlacesClient, maps_search_url
from resolver.backfill import backfill
from resolver.field_resolver import FieldResolver, Resolution
from tools import browser
from tools.console import Console


class LocationSession:
    def __init__(
        self,
        client: PlacesClient,
        console: Console,
        record: Optional[LocationRecord] = None,
        open_url: Callable[[str], None] = browser.open_in_browser,
    ) -> None:
        self.client = client
        self.console = console
        self.record = record if record is not None else LocationRecord(separator=Config.address_separator)
        self.resolver = FieldResolver(client, console)
        self.open_url = open_url

    # ----------------------------
    # Field resolution
    # ----------------------------

    def prompt_field(self, field_type: FieldType) -> Optional[Resolution]:
        text = self.console.read_text(f"Please enter the {field_type.label.lower()}")
        logger.info(f"Received {field_type.key} {text!r} from user")
        return self.resolve_field(field_type, text)

    def resolve_field(self, field_type: FieldType, text: str) -> Optional[Resolution]:
        """
        Resolve one field and write it. Returns None when the lookup failed;
        the field is left as it was and the operator is told why.
        """
        try:
            resolution = self.resolver.resolve(field_type, text)
        except (ServiceUnavailable, ExternalApiError) as e:
            logger.error(f"Resolution of {field_type.key} aborted: {e}")
            self._report(e)
            return None

        self.record.write(field_type, resolution.value)
        if not resolution.is_verbatim:
            backfill(self.client, self.record, field_type, resolution.candidate.terms)
        return resolution

    # ----------------------------
    # Record management
    # ----------------------------

    def clear(self) -> None:
        self.record.clear()
        logger.info("Cleared all location information")
        self.console.show("All location information has been cleared.")

    def use_current_location(self) -> None:
        try:
            location = geolocator.use_current_location(self.client, self.record)
        except (ServiceUnavailable, ExternalApiError) as e:
            logger.error(f"Current location lookup failed: {e}")
            self._report(e)
            return
        if location is None:
            self.console.show("No address found for the current location.")
        else:
            self.console.show(f"Location updated from coordinates {location.lat}, {location.lng}.")

    def pinpoint_on_map(self) -> Optional[str]:
        """Open the record's best full address in Google Maps. Returns the URL opened."""
        query = utils.join_non_empty(
            [self.record.address, self.record.city, self.record.state, self.record.country],
            Config.address_separator,
        )
        if not query:
            self.console.show(
                "Insufficient location data. Please provide at least one address component first."
            )
            return None

        try:
            complete_address = self.client.complete_address(query)
        except (ServiceUnavailable, ExternalApiError) as e:
            logger.error(f"Address completion failed for {query!r}: {e}")
            self._report(e)
            return None
        if complete_address is None:
            self.console.show("Complete address could not be found. Please try again.")
            return None

        url = maps_search_url(complete_address)
        try:
            self.open_url(url)
        except UnsupportedOperation as e:
            self.console.show(f"Cannot open Google Maps: {e}")
            self.console.show(url)
            return None
        return url

    def show_record(self) -> None:
        self.console.show_lines(self.record.lines(), title="Current Location Information:")

    def _report(self, error: Exception) -> None:
        if isinstance(error, ExternalApiError):
            self.console.show(f"An error occurred with the Google API: {error.message} ({error.code})")
        else:
            self.console.show(f"Error occurred while making API call: {error}")

from root import get_project_root
import logging
import os
import utils
from pathlib import Path

p = Path(__file__).resolve()


class Configuration:
    # DIRECTORIES
    root_dir = get_project_root()
    log_dir = Path(root_dir, "logs")

    # PROJECT SETUP
    utils.load_env_file(Path(root_dir, ".env"))
    google_api_key = os.getenv("GOOGLE_API_KEY", "").strip()

    # GOOGLE API PROPERTIES
    places_autocomplete_url = "https://maps.googleapis.com/maps/api/place/autocomplete/json"
    geocoding_url = "https://maps.googleapis.com/maps/api/geocode/json"
    geolocation_url = "https://www.googleapis.com/geolocation/v1/geolocate"
    maps_search_url = "https://www.google.com/maps/search/"
    user_agent = "location-resolver/1.0"
    request_timeout_seconds = 30
    proxies = {"http": "", "https": ""}

    # RESOLVER PROPERTIES
    postal_index_confirm_threshold = 5
    address_separator = ", "

    # LOGGING PROPERTIES
    main_log_file_name = "main.log"
    places_api_log_file_name = "places_api.log"
    console_log_level = utils.read_log_level("LOCATION_CONSOLE_LOG_LEVEL", logging.WARNING)

from configuration import Configuration as Config
from loggers.main_logger import main_logger as logger
from models.enums import MenuChoice
from models.location import FieldType
from pathlib import Path
from places_api.places_client import PlacesClient
from resolver.session import LocationSession
from tools.console import Console

p = Path(__file__).resolve()

FIELD_CHOICES = {
    MenuChoice.COUNTRY: FieldType.COUNTRY,
    MenuChoice.STATE: FieldType.STATE,
    MenuChoice.CITY: FieldType.CITY,
    MenuChoice.ADDRESS: FieldType.ADDRESS,
    MenuChoice.POSTAL_CODE: FieldType.POSTAL_CODE,
}

MENU_LINES = [
    "1. Country",
    "2. State",
    "3. City",
    "4. Address",
    "5. Postal code",
    "6. Use Current Location",
    "7. Clear",
    "8. Pinpoint on Google Maps",
    "9. Exit",
]


def process_choice(session: LocationSession, choice: int) -> bool:
    """Run one menu action. Returns False when the operator chose to exit."""
    try:
        menu_choice = MenuChoice(choice)
    except ValueError:
        session.console.show("Invalid choice. Please try again.")
        return True

    if menu_choice is MenuChoice.EXIT:
        return False
    if menu_choice in FIELD_CHOICES:
        session.prompt_field(FIELD_CHOICES[menu_choice])
    elif menu_choice is MenuChoice.USE_CURRENT_LOCATION:
        session.use_current_location()
    elif menu_choice is MenuChoice.CLEAR:
        session.clear()
    elif menu_choice is MenuChoice.PINPOINT:
        session.pinpoint_on_map()
    return True


def run(session: LocationSession) -> None:
    console = session.console
    while True:
        console.show_lines(MENU_LINES, title="Please enter the index of your choice:")
        choice = console.read_int("Enter your choice")
        if not process_choice(session, choice):
            logger.info("Exiting the program...")
            break
        session.show_record()


def main() -> None:
    if not Config.google_api_key:
        raise SystemExit("ERROR: GOOGLE_API_KEY is not set.")

    with PlacesClient(Config.google_api_key) as client:
        session = LocationSession(client=client, console=Console())
        try:
            run(session)
        except (KeyboardInterrupt, EOFError):
            logger.info("Input closed, exiting")
            session.console.show("")


if __name__ == "__main__":
    main()

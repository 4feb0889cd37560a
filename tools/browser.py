import webbrowser

from errors import UnsupportedOperation
from loggers.main_logger import main_logger as logger


def open_in_browser(url: str) -> None:
    """Open `url` in the operator's default browser."""
    try:
        browser = webbrowser.get()
    except webbrowser.Error:
        logger.error("No web browser is available on this system.")
        raise UnsupportedOperation("No web browser is available on this system.") from None

    if not browser.open(url):
        logger.error(f"Browser refused to open URL: {url}")
        raise UnsupportedOperation(f"Could not open {url} in a browser.")
    logger.info(f"Opened URL in browser: {url}")

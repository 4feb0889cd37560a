from enum import Enum, IntEnum

from errors import ExternalApiError


class ApiStatus(Enum):
    OK = "OK"
    ZERO_RESULTS = "ZERO_RESULTS"
    INVALID_REQUEST = "INVALID_REQUEST"
    OVER_QUERY_LIMIT = "OVER_QUERY_LIMIT"
    REQUEST_DENIED = "REQUEST_DENIED"
    UNKNOWN_ERROR = "UNKNOWN_ERROR"
    OTHER = "OTHER"

    @classmethod
    def decode(cls, raw) -> "ApiStatus":
        if raw is None or raw == "":
            return cls.UNKNOWN_ERROR
        try:
            return cls(str(raw))
        except ValueError:
            return cls.OTHER

    @property
    def is_success(self) -> bool:
        return self in (ApiStatus.OK, ApiStatus.ZERO_RESULTS)

    def raise_for_status(self, raw=None) -> None:
        """Raise ExternalApiError for every status that is not OK / ZERO_RESULTS."""
        if self.is_success:
            return
        code = self.value if self is not ApiStatus.OTHER else str(raw)
        raise ExternalApiError(code, _STATUS_MESSAGES[self])


_STATUS_MESSAGES = {
    ApiStatus.INVALID_REQUEST: "Invalid request sent to Google API.",
    ApiStatus.OVER_QUERY_LIMIT: "Over query limit. Check your API key and billing status.",
    ApiStatus.REQUEST_DENIED: "Request denied by Google API.",
    ApiStatus.UNKNOWN_ERROR: "Unknown error from Google API.",
    ApiStatus.OTHER: "Unhandled status code from Google API.",
}


class MenuChoice(IntEnum):
    COUNTRY = 1
    STATE = 2
    CITY = 3
    ADDRESS = 4
    POSTAL_CODE = 5
    USE_CURRENT_LOCATION = 6
    CLEAR = 7
    PINPOINT = 8
    EXIT = 9

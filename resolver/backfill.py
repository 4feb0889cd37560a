from typing import List, Sequence

from errors import ExternalApiError, ServiceUnavailable
from loggers.main_logger import main_logger as logger
from models.location import FieldType, LocationRecord, Term
from places_api.places_client import PlacesClient


def term_matches(client: PlacesClient, value: str, field_type: FieldType) -> bool:
    """
    True when Google's top suggestion for `value` as `field_type` contains
    `value` (case-insensitive). Containment, not equality: "CA" matches "California".
    """
    if not value:
        return False
    candidates = client.suggest(value, field_type)
    if not candidates:
        return False
    return value.lower() in candidates[0].main_text.lower()


def _fill_ancestor(
    client: PlacesClient,
    record: LocationRecord,
    terms: List[Term],
    ancestor: FieldType,
) -> bool:
    # last term first; the first hit wins and is consumed
    for i in range(len(terms) - 1, -1, -1):
        value = terms[i].value
        if term_matches(client, value, ancestor):
            record.set(ancestor, value)
            del terms[i]
            logger.info(f"Backfilled {ancestor.key} = {value!r}")
            return True
    logger.info(f"No term validated as {ancestor.key}")
    return False


def backfill(
    client: PlacesClient,
    record: LocationRecord,
    resolved: FieldType,
    terms: Sequence[Term],
) -> List[FieldType]:
    """
    Derive the unset ancestors of `resolved` (country, then state, then city)
    from the selected candidate's terms. Best effort: an ancestor that no term
    validates stays unset, and a lookup error ends the remaining attempts
    without being raised. Returns the fields that were filled.
    """
    remaining = list(terms)
    filled: List[FieldType] = []

    for ancestor in resolved.ancestors:
        if record.is_set(ancestor):
            continue
        try:
            if _fill_ancestor(client, record, remaining, ancestor):
                filled.append(ancestor)
        except (ServiceUnavailable, ExternalApiError) as e:
            logger.warning(f"Backfill stopped at {ancestor.key} after {resolved.key} selection: {e}")
            break

    return filled

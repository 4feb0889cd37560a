"""
Disambiguation loop for a single location field.

The operator's text is sent to Places Autocomplete. No candidates resolves the
field to the text itself. Otherwise the candidates are listed and each reply
is either an index into that list or a new search. Postal codes are numeric,
so small numbers typed for a postal code are confirmed before being read as
an index.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence

import utils
from configuration import Configuration as Config
from loggers.main_logger import main_logger as logger
from models.location import Candidate, FieldType
from places_api.places_client import PlacesClient
from tools.console import Console

SELECTION_PROMPT = "Enter index or continue searching"
INDEX_CONFIRM_PROMPT = "Is this an index value?"


@dataclass(frozen=True)
class Resolution:
    field_type: FieldType
    value: str
    candidate: Optional[Candidate] = None

    @property
    def is_verbatim(self) -> bool:
        return self.candidate is None


class FieldResolver:
    def __init__(
        self,
        client: PlacesClient,
        console: Console,
        postal_index_threshold: int = Config.postal_index_confirm_threshold,
    ) -> None:
        self.client = client
        self.console = console
        self.postal_index_threshold = postal_index_threshold

    def resolve(self, field_type: FieldType, text: str) -> Resolution:
        """
        Run the loop until the field has exactly one value.

        ServiceUnavailable / ExternalApiError from the client propagate; the
        caller decides what the operator sees.
        """
        candidates = self._search(text, field_type)
        if candidates is None:
            return self._verbatim(field_type, text)

        while True:
            reply = self.console.read_text(SELECTION_PROMPT)
            index = utils.parse_index(reply)

            if index is not None and self._is_index(field_type, index):
                picked = self._pick(candidates, index)
                if picked is not None:
                    logger.info(f"Selected {field_type.key} candidate {index}: {picked.main_text!r}")
                    return Resolution(field_type=field_type, value=picked.main_text, candidate=picked)
                self.console.show("Invalid index. Please try again.")
                logger.info(f"Index {index} out of range for {len(candidates)} candidate(s)")
                continue

            # anything else is a new search with the reply as text
            found = self._search(reply, field_type)
            if found is None:
                return self._verbatim(field_type, reply)
            candidates = found

    def _is_index(self, field_type: FieldType, index: int) -> bool:
        if field_type is not FieldType.POSTAL_CODE:
            return True
        if index > self.postal_index_threshold:
            return False
        return self.console.confirm(INDEX_CONFIRM_PROMPT)

    @staticmethod
    def _pick(candidates: Sequence[Candidate], index: int) -> Optional[Candidate]:
        if 1 <= index <= len(candidates):
            return candidates[index - 1]
        return None

    def _search(self, text: str, field_type: FieldType) -> Optional[List[Candidate]]:
        """Query and list the candidates; None when there are none."""
        candidates = self.client.suggest(text, field_type)
        if not candidates:
            return None
        self.console.show_candidates(candidates)
        return candidates

    @staticmethod
    def _verbatim(field_type: FieldType, text: str) -> Resolution:
        logger.info(f"No candidates for {field_type.key} {text!r}; keeping input as typed")
        return Resolution(field_type=field_type, value=text)

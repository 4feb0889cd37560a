from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Dict, List, Optional, Tuple


# ----------------------------
# Field types and the Google "type" token for each
# ----------------------------

class FieldType(Enum):
    COUNTRY = ("country", "country", "Country")
    STATE = ("state", "administrative_area_level_1", "State")
    CITY = ("city", "locality", "City")
    ADDRESS = ("address", "address", "Address")
    POSTAL_CODE = ("postal_code", "postal_code", "Postal code")

    def __init__(self, key: str, api_type: str, label: str) -> None:
        self.key = key
        self.api_type = api_type
        self.label = label

    @classmethod
    def from_api_type(cls, api_type: str) -> Optional[FieldType]:
        """Reverse lookup used for hierarchy fields only; address is a leaf and never maps back."""
        for ft in HIERARCHY:
            if ft.api_type == api_type:
                return ft
        if api_type == cls.POSTAL_CODE.api_type:
            return cls.POSTAL_CODE
        return None

    @property
    def ancestors(self) -> Tuple[FieldType, ...]:
        return ANCESTORS[self]


# coarse to fine
HIERARCHY: Tuple[FieldType, ...] = (FieldType.COUNTRY, FieldType.STATE, FieldType.CITY)

ANCESTORS: Dict[FieldType, Tuple[FieldType, ...]] = {
    FieldType.COUNTRY: (),
    FieldType.STATE: (FieldType.COUNTRY,),
    FieldType.CITY: (FieldType.COUNTRY, FieldType.STATE),
    FieldType.ADDRESS: (FieldType.COUNTRY, FieldType.STATE, FieldType.CITY),
    FieldType.POSTAL_CODE: (FieldType.COUNTRY, FieldType.STATE, FieldType.CITY),
}


# ----------------------------
# Suggestion results
# ----------------------------

@dataclass(frozen=True)
class Term:
    value: str
    offset: int = 0


@dataclass(frozen=True)
class Candidate:
    description: str
    main_text: str
    terms: Tuple[Term, ...] = ()

    @classmethod
    def from_prediction(cls, prediction: dict) -> Candidate:
        description = str(prediction.get("description", "") or "")
        formatting = prediction.get("structured_formatting")
        main_text = ""
        if isinstance(formatting, dict):
            main_text = str(formatting.get("main_text", "") or "")
        terms = []
        for raw in prediction.get("terms") or []:
            if not isinstance(raw, dict):
                continue
            try:
                offset = int(raw.get("offset", 0) or 0)
            except (TypeError, ValueError):
                offset = 0
            terms.append(Term(value=str(raw.get("value", "") or ""), offset=offset))
        if not main_text:
            main_text = terms[0].value if terms else description
        return cls(description=description, main_text=main_text, terms=tuple(terms))


@dataclass(frozen=True)
class LatLng:
    lat: float
    lng: float


# ----------------------------
# The record being filled in
# ----------------------------

@dataclass
class LocationRecord:
    country: Optional[str] = None
    state: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    postal_code: Optional[str] = None

    separator: str = field(default=", ", repr=False, compare=False)

    def get(self, field_type: FieldType) -> Optional[str]:
        return getattr(self, field_type.key)

    def is_set(self, field_type: FieldType) -> bool:
        return self.get(field_type) is not None

    def set(self, field_type: FieldType, value: str) -> None:
        """Overwrite a field; use write() for the address-aware variant."""
        setattr(self, field_type.key, value)

    def write(self, field_type: FieldType, value: str) -> None:
        """Store a resolved value. Address accumulates, every other field is replaced."""
        if field_type is FieldType.ADDRESS:
            self.append_address(value)
        else:
            self.set(field_type, value)

    def append_address(self, fragment: str) -> None:
        if not self.address:
            self.address = fragment
        else:
            self.address = f"{self.address}{self.separator}{fragment}"

    def clear(self) -> None:
        for ft in FieldType:
            setattr(self, ft.key, None)

    def is_empty(self) -> bool:
        return all(self.get(ft) is None for ft in FieldType)

    def as_dict(self) -> Dict[str, Optional[str]]:
        return {f.name: getattr(self, f.name) for f in fields(self) if f.compare}

    def lines(self, unset: str = "Not set") -> List[str]:
        return [f"{ft.label}: {self.get(ft) or unset}" for ft in FieldType]

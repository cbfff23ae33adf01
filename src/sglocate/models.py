"""Typed query and result models for sglocate."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from sglocate.exceptions import InvalidSearchValue

# LocationRecord attribute -> wire/persisted key
_WIRE_KEYS = {
    "address": "address",
    "latitude": "latitude",
    "longitude": "longitude",
    "zip_code": "zipCode",
    "block_no": "blockNo",
    "road_name": "roadName",
    "building": "building",
}


def parse_page(raw: Any) -> int:
    """
    Coerce a raw page value to a page number, falling back to 1.

    Missing, non-numeric and non-positive values all mean "first page".
    """
    if isinstance(raw, bool):
        return 1
    try:
        page = int(raw)
    except (TypeError, ValueError):
        return 1
    return page if page >= 1 else 1


def _parse_coordinate(raw: Any) -> Optional[float]:
    """Parse an upstream coordinate string; None if malformed or non-finite."""
    try:
        value = float(raw)
    except (TypeError, ValueError):
        return None
    return value if math.isfinite(value) else None


def _optional_text(raw: Any) -> Optional[str]:
    return None if raw is None else str(raw)


@dataclass(frozen=True)
class SearchQuery:
    """A single search value and page, built fresh for every call."""

    search_value: str
    page: int = 1

    def __post_init__(self) -> None:
        if not isinstance(self.search_value, str) or not self.search_value.strip():
            raise InvalidSearchValue(self.search_value)
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")


@dataclass(frozen=True)
class LocationRecord:
    """One normalised OneMap search hit."""

    address: str
    latitude: Optional[float] = None     # WGS84, None if upstream value unparseable
    longitude: Optional[float] = None    # WGS84, None if upstream value unparseable
    zip_code: Optional[str] = None
    block_no: Optional[str] = None
    road_name: Optional[str] = None
    building: Optional[str] = None

    @property
    def has_coordinates(self) -> bool:
        return self.latitude is not None and self.longitude is not None

    @classmethod
    def from_upstream(cls, hit: Mapping[str, Any]) -> LocationRecord:
        """
        Build a record from one raw OneMap result object.

        OneMap is not consistent about key casing, so keys are matched
        case-insensitively. Optional fields keep upstream's own presence:
        a missing key stays None, and a value such as "NIL" is kept as-is.
        """
        fields = {str(key).upper(): value for key, value in hit.items()}
        return cls(
            address=str(fields.get("ADDRESS") or ""),
            latitude=_parse_coordinate(fields.get("LATITUDE")),
            longitude=_parse_coordinate(fields.get("LONGITUDE")),
            zip_code=_optional_text(fields.get("POSTAL")),
            block_no=_optional_text(fields.get("BLK_NO")),
            road_name=_optional_text(fields.get("ROAD_NAME")),
            building=_optional_text(fields.get("BUILDING")),
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> LocationRecord:
        """Inverse of to_dict(), used when reading saved result files."""
        kwargs = {
            attr: data[key] for attr, key in _WIRE_KEYS.items() if key in data
        }
        return cls(**kwargs)

    def to_dict(self) -> dict:
        """Convert to a plain dictionary (useful for JSON serialisation)."""
        return {
            key: getattr(self, attr)
            for attr, key in _WIRE_KEYS.items()
            if getattr(self, attr) is not None
        }


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of one search: either the matching records or a failure reason.

    An empty, successful outcome means OneMap genuinely found nothing;
    a failed outcome carries the reason in ``error``.
    """

    query: Optional[SearchQuery]
    records: tuple[LocationRecord, ...] = ()
    found: int = 0
    page: int = 1
    total_pages: int = 0
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def failure(
        cls, query: Optional[SearchQuery], reason: str, page: int = 1
    ) -> SearchOutcome:
        return cls(query=query, page=page, error=reason)

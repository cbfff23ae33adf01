"""sglocate — Singapore postal code and address lookup via OneMap."""

__version__ = "1.0.0"

from sglocate.client import SearchGateway
from sglocate.exceptions import (
    InvalidSearchValue,
    SGLocateError,
    UpstreamError,
)
from sglocate.models import LocationRecord, SearchOutcome, SearchQuery

__all__ = [
    "SearchGateway",
    "LocationRecord",
    "SearchOutcome",
    "SearchQuery",
    "SGLocateError",
    "InvalidSearchValue",
    "UpstreamError",
]

"""SearchGateway — the main entry point for the library."""

from __future__ import annotations

import logging
from typing import Any, Optional

import requests

from sglocate.config import Settings
from sglocate.exceptions import SGLocateError, UpstreamError
from sglocate.models import LocationRecord, SearchOutcome, SearchQuery, parse_page

logger = logging.getLogger(__name__)


def _as_int(raw: Any, default: int = 0) -> int:
    try:
        return int(raw)
    except (TypeError, ValueError):
        return default


class SearchGateway:
    """
    Singapore address search over the OneMap API.

    A postal code and a free-text address go through the same search:
    OneMap accepts either in its single search field. The gateway keeps
    no state between calls. Configuration is passed in, never read
    from the environment here.
    """

    def __init__(
        self,
        api_url: str,
        api_key: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        self._api_url = api_url
        self._api_key = api_key
        self._timeout = timeout
        self._session = session

    @classmethod
    def from_settings(
        cls, settings: Settings, session: Optional[requests.Session] = None
    ) -> SearchGateway:
        return cls(
            api_url=settings.ONEMAP_API_URL,
            api_key=settings.ONEMAP_API_KEY,
            timeout=settings.ONEMAP_TIMEOUT,
            session=session,
        )

    # ── Public API ────────────────────────────────────────────────

    def search(self, search_value: str, page: int = 1) -> list[LocationRecord]:
        """
        Return the records matching *search_value* on the given page.

        Never raises. An upstream failure yields an empty list, exactly
        like a search with no matches; use lookup() to tell them apart.
        """
        return list(self.lookup(search_value, page).records)

    def lookup(self, search_value: str, page: int = 1) -> SearchOutcome:
        """
        Search OneMap and return a SearchOutcome.

        A missing, non-numeric or non-positive page means page 1.
        Failures (empty search value, transport error, bad status or
        payload) are logged and reported through ``outcome.error``
        instead of being raised.
        """
        page = parse_page(page)
        try:
            query = SearchQuery(search_value, page)
        except (SGLocateError, TypeError, ValueError) as exc:
            logger.error(f"Rejected OneMap search {search_value!r}: {exc}")
            return SearchOutcome.failure(None, str(exc))

        try:
            payload = self._fetch(query)
        except UpstreamError as exc:
            logger.error(f"Error fetching data from OneMap API: {exc.reason}")
            return SearchOutcome.failure(query, exc.reason, page=query.page)

        outcome = self._normalise(query, payload)
        logger.info(
            f"OneMap search '{query.search_value}' page {query.page}: "
            f"{len(outcome.records)} result(s) of {outcome.found} found"
        )
        return outcome

    # ── Private helpers ───────────────────────────────────────────

    def _build_request(self, query: SearchQuery) -> tuple[dict, dict]:
        """Return (params, headers) for a OneMap search request."""
        params = {
            "searchVal": query.search_value,
            "returnGeom": "Y",
            "getAddrDetails": "Y",
            "pageNum": query.page,
        }
        headers = {}
        if self._api_key:
            headers["Authorization"] = self._api_key
        return params, headers

    def _fetch(self, query: SearchQuery) -> dict:
        """
        Issue the GET request and return the decoded JSON object.

        Raises UpstreamError on any transport, status or payload problem.
        """
        params, headers = self._build_request(query)
        get = self._session.get if self._session is not None else requests.get
        logger.debug(f"Calling OneMap API with params: {params}")
        try:
            response = get(
                self._api_url,
                params=params,
                headers=headers,
                timeout=self._timeout,
            )
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as exc:
            raise UpstreamError(self._api_url, str(exc)) from exc
        except ValueError as exc:
            # JSON decoding failures that requests did not wrap
            raise UpstreamError(self._api_url, f"invalid JSON: {exc}") from exc

        if not isinstance(payload, dict):
            raise UpstreamError(
                self._api_url,
                f"expected a JSON object, got {type(payload).__name__}",
            )
        return payload

    def _normalise(self, query: SearchQuery, payload: dict) -> SearchOutcome:
        """Map a OneMap payload onto a successful SearchOutcome."""
        found = _as_int(payload.get("found"))
        total_pages = _as_int(payload.get("totalNumPages"))
        page = _as_int(payload.get("pageNum"), default=query.page) or query.page
        hits = payload.get("results") or []

        if found <= 0 or not isinstance(hits, list) or not hits:
            return SearchOutcome(
                query=query, found=max(found, 0), page=page, total_pages=total_pages
            )

        records = []
        for hit in hits:
            if not isinstance(hit, dict):
                logger.warning(f"Skipping malformed OneMap hit: {hit!r}")
                continue
            records.append(LocationRecord.from_upstream(hit))

        return SearchOutcome(
            query=query,
            records=tuple(records),
            found=found,
            page=page,
            total_pages=total_pages,
        )

"""Photo search against the Macaulay Library search API.

Each query runs inside its own ``MediaSearchSession``: a fresh cookie-carrying
HTTP session that visits the search front door, issues one API request, and
is closed on the way out whether or not the request succeeded.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import requests
from pydantic import ValidationError
from urllib3.util.retry import Retry

from macaulay_bot.datasources.macaulay.client import (
    DEAD_TAG,
    MEDIA_TYPE,
    SEARCH_API,
    SEARCH_HOME,
    SORT_ORDER,
)
from macaulay_bot.schemas import MediaResult
from macaulay_bot.services.http import BROWSER_USER_AGENT, DEFAULT_TIMEOUT, create_session

logger = logging.getLogger(__name__)

#: One try per request: a timeout or error becomes a failed query, not a retry.
SCRAPE_RETRY = Retry(total=0, raise_on_status=False)

# =============================================================================
# Tag filtering
# =============================================================================


def is_dead(tags: Any) -> bool:
    """True if a result's tags mark it as a dead animal.

    Tags arrive either as a list of strings or as a single string.
    """
    if isinstance(tags, list):
        return any(isinstance(tag, str) and DEAD_TAG in tag.lower() for tag in tags)
    if isinstance(tags, str):
        return DEAD_TAG in tags.lower()
    return False


def filter_dead(records: list[Any]) -> list[Any]:
    """Drop raw records whose tags mark them as dead."""
    return [r for r in records if not (isinstance(r, dict) and is_dead(r.get("tags")))]


# =============================================================================
# Results
# =============================================================================


@dataclass
class MediaSearchResult:
    """Filtered photo results for one query, in API order."""

    results: list[MediaResult] = field(default_factory=list)
    removed_dead: int = 0

    @property
    def asset_ids(self) -> list[int]:
        return [r.asset_id for r in self.results]

    def get_asset_details(self, asset_id: int) -> MediaResult | None:
        """Look up the full record for an asset id from this query."""
        for result in self.results:
            if result.asset_id == asset_id:
                return result
        return None

    @classmethod
    def from_records(cls, records: list[Any]) -> MediaSearchResult:
        """Filter dead-tagged records and parse the rest.

        Records without an integer ``assetId`` are skipped.
        """
        kept = filter_dead(records)
        results = []
        for record in kept:
            if not isinstance(record, dict):
                continue
            try:
                results.append(MediaResult.model_validate(record))
            except ValidationError:
                continue
        return cls(results=results, removed_dead=len(records) - len(kept))


# =============================================================================
# Session
# =============================================================================


class MediaSearchSession:
    """A short-lived scrape session for a single search query.

    Use as a context manager so the underlying HTTP session is always closed::

        with MediaSearchSession() as media:
            found = media.query("gybtes1")
    """

    def __init__(
        self,
        timeout: float = DEFAULT_TIMEOUT,
        session_factory: Callable[..., requests.Session] | None = None,
    ) -> None:
        self.timeout = timeout
        self._session_factory = session_factory or create_session
        self._http: requests.Session | None = None

    def __enter__(self) -> MediaSearchSession:
        self._http = self._session_factory(
            retry=SCRAPE_RETRY, timeout=self.timeout, user_agent=BROWSER_USER_AGENT
        )
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    @property
    def http(self) -> requests.Session:
        if self._http is None:
            msg = "MediaSearchSession used outside of a 'with' block"
            raise RuntimeError(msg)
        return self._http

    def establish(self) -> None:
        """Visit the search front door so the API will accept our cookies."""
        logger.debug("Visiting main site to establish session...")
        resp = self.http.get(SEARCH_HOME)
        resp.raise_for_status()

    def fetch(self, taxon_code: str, *, include_child_taxa: bool = False) -> Any:
        """Raw JSON from the search API for a taxon code."""
        params: dict[str, str] = {
            "taxonCode": taxon_code,
            "mediaType": MEDIA_TYPE,
            "sort": SORT_ORDER,
        }
        if include_child_taxa:
            params["includeChildTaxa"] = "true"
        resp = self.http.get(SEARCH_API, params=params)
        resp.raise_for_status()
        return resp.json()

    def query(
        self, taxon_code: str, *, include_child_taxa: bool = False
    ) -> MediaSearchResult | None:
        """
        Establish the session and run one photo search.

        Args:
            taxon_code: Macaulay/eBird taxon code (e.g. ``"gybtes1"``).
            include_child_taxa: Roll subspecies into the query. Needed for
                mammal searches; breaks direct bird species searches.

        Returns:
            Dead-filtered results, or None if the session could not be
            established, the request failed, or the payload was not a list.
        """
        try:
            self.establish()
            data = self.fetch(taxon_code, include_child_taxa=include_child_taxa)
        except (requests.RequestException, ValueError) as exc:
            logger.warning("Error searching Macaulay Library for %s: %s", taxon_code, exc)
            return None

        if not isinstance(data, list):
            logger.warning("Unexpected search payload for %s: %s", taxon_code, type(data).__name__)
            return None

        found = MediaSearchResult.from_records(data)
        logger.info(
            "Found %d assets for %s (filtered out %d tagged '%s')",
            len(found.results),
            taxon_code,
            found.removed_dead,
            DEAD_TAG,
        )
        return found


def search_media(
    taxon_code: str,
    *,
    include_child_taxa: bool = False,
    timeout: float = DEFAULT_TIMEOUT,
) -> MediaSearchResult | None:
    """Run one photo search in a fresh session (see ``MediaSearchSession.query``)."""
    logger.info("Searching Macaulay Library media for taxon: %s", taxon_code)
    with MediaSearchSession(timeout=timeout) as media:
        return media.query(taxon_code, include_child_taxa=include_child_taxa)

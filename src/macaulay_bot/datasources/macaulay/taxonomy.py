"""Name lookup against the Macaulay taxonomy endpoint.

The endpoint takes free text and returns an ordered list of descriptors::

    [{"name": "Walrus - Odobenus rosmarus", "code": "walrus1,species,..."}, ...]

Results mix species, subspecies, families and other categories, so the best
candidate for a requested rank is picked heuristically.
"""

from __future__ import annotations

import logging
from typing import Any

import requests

from macaulay_bot.datasources.macaulay.client import TAXONOMY_API, TAXONOMY_KEY
from macaulay_bot.schemas import TaxonomyMatch, TaxonRank
from macaulay_bot.services.http import session

logger = logging.getLogger(__name__)


def fetch_taxonomy(search_term: str) -> Any:
    """GET the taxonomy endpoint for a free-text query. Returns raw JSON."""
    params = {
        "key": TAXONOMY_KEY,
        "taxaLocale": "en_US",
        "sortByHasMedia": "true",
        "sortByCategory": "false",
        "q": search_term,
    }
    resp = session.get(TAXONOMY_API, params=params)
    resp.raise_for_status()
    return resp.json()


def parse_candidates(data: Any) -> list[TaxonomyMatch] | None:
    """Parse descriptors into matches, keeping upstream order.

    Returns None if the payload is not a list. Descriptors without a taxon
    code are dropped.
    """
    if not isinstance(data, list):
        return None
    matches = []
    for item in data:
        if not isinstance(item, dict):
            continue
        match = TaxonomyMatch.from_descriptor(item)
        if match is not None:
            matches.append(match)
    return matches


def find_best_match(
    candidates: list[TaxonomyMatch], search_term: str, rank: TaxonRank
) -> TaxonomyMatch | None:
    """
    Pick the candidate that best fits the search term and rank.

    Priority (first hit wins):
      1. scientific name contains the search term and the rank matches
      2. the rank matches
      3. the first candidate, whatever its rank
    """
    if not candidates:
        return None

    term = search_term.strip().lower()
    for candidate in candidates:
        if candidate.rank == rank and term in candidate.scientific_name.lower():
            return candidate

    for candidate in candidates:
        if candidate.rank == rank:
            return candidate

    return candidates[0]


def resolve_taxon(search_term: str, rank: TaxonRank = TaxonRank.SPECIES) -> TaxonomyMatch | None:
    """Look up a name and return the best match, or None on any failure."""
    logger.info("Getting taxon code for %s: %s", rank, search_term)
    try:
        data = fetch_taxonomy(search_term)
    except (requests.RequestException, ValueError) as exc:
        logger.warning("Taxonomy lookup failed for %s: %s", search_term, exc)
        return None

    candidates = parse_candidates(data)
    if not candidates:
        logger.info("No taxonomy results found for: %s", search_term)
        return None

    match = find_best_match(candidates, search_term, rank)
    if match is not None:
        logger.debug(
            "Matched %r to %s (%s, %s)", search_term, match.taxon_code, match.rank, match.scientific_name
        )
    return match

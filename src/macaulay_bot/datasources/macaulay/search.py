"""Name-based photo search: taxonomy lookup followed by a media query."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from macaulay_bot.datasources.macaulay.media import MediaSearchResult, search_media
from macaulay_bot.datasources.macaulay.taxonomy import resolve_taxon
from macaulay_bot.schemas import TaxonomyMatch, TaxonRank
from macaulay_bot.services.http import DEFAULT_TIMEOUT

logger = logging.getLogger(__name__)


@dataclass
class TaxonSearchResult:
    """Photos found for a looked-up taxon."""

    match: TaxonomyMatch
    rank: TaxonRank
    media: MediaSearchResult

    @property
    def asset_ids(self) -> list[int]:
        return self.media.asset_ids


def search_by_taxonomy(
    search_term: str,
    rank: TaxonRank = TaxonRank.SPECIES,
    *,
    timeout: float = DEFAULT_TIMEOUT,
) -> TaxonSearchResult | None:
    """
    Resolve a scientific or family name to a taxon code, then search photos.

    Child taxa are always included, so a species query also returns its
    subspecies and a family query returns everything beneath it.

    Returns:
        The match and its (non-empty) photo results, or None if the name
        could not be resolved or no usable photos came back.
    """
    match = resolve_taxon(search_term, rank)
    if match is None:
        return None

    logger.info("Using taxon code %s to search Macaulay Library", match.taxon_code)
    media = search_media(match.taxon_code, include_child_taxa=True, timeout=timeout)
    if media is None or not media.results:
        return None

    return TaxonSearchResult(match=match, rank=rank, media=media)

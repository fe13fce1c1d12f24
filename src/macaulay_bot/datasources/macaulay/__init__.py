"""Macaulay Library data source.

Public API:
  - client: endpoint URLs, ``asset_url``
  - media: MediaSearchSession, MediaSearchResult, search_media, is_dead
  - taxonomy: resolve_taxon, find_best_match, parse_candidates
  - search: TaxonSearchResult, search_by_taxonomy
"""

from macaulay_bot.datasources.macaulay.client import asset_url
from macaulay_bot.datasources.macaulay.media import (
    MediaSearchResult,
    MediaSearchSession,
    filter_dead,
    is_dead,
    search_media,
)
from macaulay_bot.datasources.macaulay.search import TaxonSearchResult, search_by_taxonomy
from macaulay_bot.datasources.macaulay.taxonomy import (
    find_best_match,
    parse_candidates,
    resolve_taxon,
)

__all__ = [
    "MediaSearchResult",
    "MediaSearchSession",
    "TaxonSearchResult",
    "asset_url",
    "filter_dead",
    "find_best_match",
    "is_dead",
    "parse_candidates",
    "resolve_taxon",
    "search_by_taxonomy",
    "search_media",
]

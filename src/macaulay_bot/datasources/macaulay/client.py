"""Macaulay Library endpoint URLs and shared constants.

The library has no developer API. The public search page's JSON endpoint only
answers requests that carry the cookies set by a visit to the search front
door, so every media query is a two-step scrape. Only public search metadata
is read (never the media itself) and only at very low volume.
"""

SEARCH_HOME = "https://search.macaulaylibrary.org/"
SEARCH_API = "https://search.macaulaylibrary.org/api/v2/search"

TAXONOMY_API = "https://taxonomy.api.macaulaylibrary.org/ws5.0/taxonomy-all"
TAXONOMY_KEY = "PUB5447877383"  # public key used by the search page itself

ASSET_URL = "https://macaulaylibrary.org/asset/{asset_id}/embed"

MEDIA_TYPE = "photo"
SORT_ORDER = "rating_rank_desc"

# Substring (case-insensitive) that marks carcass/roadkill photos in tags.
DEAD_TAG = "dead"


def asset_url(asset_id: int) -> str:
    """Embed page URL for an asset."""
    return ASSET_URL.format(asset_id=asset_id)

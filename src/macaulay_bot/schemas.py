"""
Domain models for macaulay-bot.

Pydantic models for data from the Macaulay Library endpoints and for the
link card attached to each post. These define the canonical schema - the
datasource modules normalize raw JSON to these.
"""

from __future__ import annotations

import re
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt

# =============================================================================
# Taxonomy
# =============================================================================


class TaxonRank(StrEnum):
    """Taxonomic ranks the resolver knows how to search for or accept.

    The Macaulay taxonomy also returns categories such as ``issf``, ``hybrid``
    and ``spuh``; those are carried around as plain strings and are never
    usable as a final result.
    """

    SPECIES = "species"
    SUBSPECIES = "subspecies"
    FAMILY = "family"


# "Common -Scientific" and other odd spacing around the separator. The
# scientific part must look like a Latin name so hyphenated common names
# ("Black-tailed Deer") are not split.
_LOOSE_NAME = re.compile(r"^(?P<common>.*?)\s*-\s*(?P<scientific>[A-Z][a-z]+(?: [a-z]+)*)$")


class TaxonomyMatch(BaseModel):
    """A candidate taxon from the name-search endpoint, parsed once.

    The endpoint packs ``<taxonCode>,<rank>,...`` into its ``code`` field and
    ``<common> - <scientific>`` into its ``name`` field.
    """

    taxon_code: str
    rank: str
    scientific_name: str = ""
    common_name: str = ""

    @classmethod
    def from_descriptor(cls, descriptor: dict[str, Any]) -> TaxonomyMatch | None:
        """Parse a raw ``{"name": ..., "code": ...}`` descriptor.

        Returns None when the code carries no taxon code.
        """
        code = descriptor.get("code")
        if not isinstance(code, str):
            return None
        parts = [p.strip() for p in code.split(",")]
        if not parts[0]:
            return None

        name = descriptor.get("name")
        name = name if isinstance(name, str) else ""
        common, _, scientific = name.partition(" - ")
        if not scientific:
            loose = _LOOSE_NAME.match(name.strip())
            common, scientific = (loose["common"], loose["scientific"]) if loose else (name, "")

        return cls(
            taxon_code=parts[0],
            rank=parts[1] if len(parts) > 1 else "",
            scientific_name=scientific.strip(),
            common_name=common.strip(),
        )


# =============================================================================
# Media search results
# =============================================================================


class MediaTaxonomy(BaseModel):
    """Taxonomy embedded in a Macaulay search result."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    sci_name: str | None = Field(default=None, alias="sciName")
    com_name: str | None = Field(default=None, alias="comName")
    category: str | None = None


class MediaResult(BaseModel):
    """One photo record returned by the Macaulay search API."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    asset_id: StrictInt = Field(..., alias="assetId")
    taxonomy: MediaTaxonomy | None = None
    tags: list[Any] | str | None = None


# =============================================================================
# Link card
# =============================================================================


DEFAULT_CARD_TITLE = "Macaulay Library"
DEFAULT_CARD_DESCRIPTION = "Click through for attribution."


class PageMetadata(BaseModel):
    """Title/description/thumbnail scraped from an asset page for a link card."""

    uri: str
    title: str = DEFAULT_CARD_TITLE
    description: str = DEFAULT_CARD_DESCRIPTION
    thumb_url: str | None = None

"""Decide whether a search result shows one specific species.

Family-level searches return a mix of species, subspecies, family-only and
other records. Only species and subspecies records are kept; subspecies are
folded into their parent species (``Odobenus rosmarus rosmarus`` becomes
``Odobenus rosmarus``).
"""

from __future__ import annotations

from dataclasses import dataclass

from macaulay_bot.schemas import MediaResult, TaxonRank

USABLE_RANKS = frozenset({TaxonRank.SPECIES, TaxonRank.SUBSPECIES})


@dataclass(frozen=True)
class Classification:
    """Outcome of classifying one result."""

    usable: bool
    scientific_name: str | None = None
    common_name: str | None = None
    rank: str | None = None

    @property
    def is_subspecies(self) -> bool:
        return self.rank == TaxonRank.SUBSPECIES


def normalize_scientific_name(sci_name: str) -> str:
    """Genus + species from a (possibly trinomial) scientific name."""
    parts = sci_name.split()
    if len(parts) >= 2:
        return f"{parts[0]} {parts[1]}"
    return sci_name.strip()


def classify(result: MediaResult, target_scientific_name: str | None = None) -> Classification:
    """
    Classify a result's embedded taxonomy.

    Args:
        result: A photo record from the search API.
        target_scientific_name: When given, a subspecies is only usable if it
            belongs to this species (``Genus species`` or ``Genus_species``).

    Returns:
        Classification with names normalized to species level.
    """
    taxonomy = result.taxonomy
    if taxonomy is None:
        return Classification(usable=False)

    rank = taxonomy.category
    sci_name = (taxonomy.sci_name or "").strip()
    if not sci_name:
        return Classification(usable=False, common_name=taxonomy.com_name, rank=rank)

    if rank == TaxonRank.SPECIES:
        return Classification(True, sci_name, taxonomy.com_name, rank)

    if rank == TaxonRank.SUBSPECIES:
        normalized = normalize_scientific_name(sci_name)
        usable = True
        if target_scientific_name:
            target = target_scientific_name.replace("_", " ", 1).strip()
            usable = normalized == target or sci_name.startswith(target + " ")
        return Classification(usable, normalized, taxonomy.com_name, rank)

    return Classification(False, sci_name, taxonomy.com_name, rank)

"""
Turn a randomly drawn (or requested) species into one verified photo.

The Macaulay Library has no stable per-species lookup, so resolution walks a
fallback ladder for each candidate:

    SEARCHING_SPECIES  -> search the species by scientific name
    SEARCHING_FAMILY   -> search its family, keep only species-specific photos
    RESOLVED           -> a non-empty pool of asset ids exists
    EXHAUSTED          -> the attempt budget ran out

Birds skip the ladder: they are searched directly by taxon code, which works
reliably for the bird list.

Once a pool exists one asset is picked at random, its taxonomy is checked
again, and the reference record for the species it actually shows is looked
up (family fallback often surfaces a sibling species).
"""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import StrEnum

from macaulay_bot.datasources.macaulay.client import asset_url
from macaulay_bot.datasources.macaulay.media import MediaSearchResult, search_media
from macaulay_bot.datasources.macaulay.search import TaxonSearchResult, search_by_taxonomy
from macaulay_bot.reference.records import BirdRecord, MammalRecord, find_bird, find_mammal
from macaulay_bot.resolution.classifier import Classification, classify
from macaulay_bot.resolution.errors import (
    ExhaustedError,
    IntegrityError,
    ResolutionError,
    TaxonNotFoundError,
)
from macaulay_bot.resolution.sampler import sample_bird, sample_mammal
from macaulay_bot.schemas import MediaTaxonomy, TaxonRank

logger = logging.getLogger(__name__)

BIRD_MAX_ATTEMPTS = 3
MAMMAL_MAX_ATTEMPTS = 5
RETRY_DELAY_SECONDS = 5.0

TaxonSearch = Callable[[str, TaxonRank], TaxonSearchResult | None]
CodeSearch = Callable[..., MediaSearchResult | None]


class ResolutionState(StrEnum):
    SEARCHING_SPECIES = "searching_species"
    SEARCHING_FAMILY = "searching_family"
    RESOLVED = "resolved"
    EXHAUSTED = "exhausted"


@dataclass
class FallbackAttempt:
    """Progress through the fallback ladder for the current run."""

    number: int = 0
    state: ResolutionState = ResolutionState.SEARCHING_SPECIES
    candidate: MammalRecord | BirdRecord | None = None
    pool: list[int] = field(default_factory=list)
    search: MediaSearchResult | None = None

    def start(self, candidate: MammalRecord | BirdRecord) -> None:
        self.number += 1
        self.state = ResolutionState.SEARCHING_SPECIES
        self.candidate = candidate
        self.pool = []
        self.search = None

    def accept(self, pool: list[int], search: MediaSearchResult) -> None:
        self.state = ResolutionState.RESOLVED
        self.pool = pool
        self.search = search

    def resolved_search(self) -> MediaSearchResult:
        """The search behind the accepted pool."""
        if self.state is not ResolutionState.RESOLVED or self.search is None or not self.pool:
            msg = f"Attempt {self.number} has no photo pool to select from"
            raise ResolutionError(msg)
        return self.search


@dataclass(frozen=True)
class ResolvedAsset:
    """A verified species-specific photo and the reference data to show with it."""

    asset_id: int
    taxonomy: MediaTaxonomy
    classification: Classification
    record: MammalRecord | BirdRecord
    sampled: MammalRecord | BirdRecord
    record_matched: bool = True
    attempts: int = 1

    @property
    def rank(self) -> str | None:
        return self.classification.rank

    @property
    def scientific_name(self) -> str | None:
        """Species-level scientific name of what the photo shows."""
        return self.classification.scientific_name

    @property
    def url(self) -> str:
        return asset_url(self.asset_id)


def species_pool(
    found: TaxonSearchResult | MediaSearchResult | None, target: str | None = None
) -> list[int]:
    """Asset ids from a search whose taxonomy is species-specific."""
    if found is None:
        return []
    media = found.media if isinstance(found, TaxonSearchResult) else found
    return [r.asset_id for r in media.results if classify(r, target).usable]


class FallbackResolutionEngine:
    """
    Drives species -> family fallback searches until a photo is found.

    All collaborators are injectable so runs can be simulated without network
    access or real waiting.
    """

    def __init__(
        self,
        *,
        taxon_search: TaxonSearch | None = None,
        code_search: CodeSearch | None = None,
        sleep: Callable[[float], None] | None = None,
        rng: random.Random | None = None,
        retry_delay: float = RETRY_DELAY_SECONDS,
        mammal_attempts: int = MAMMAL_MAX_ATTEMPTS,
        bird_attempts: int = BIRD_MAX_ATTEMPTS,
    ) -> None:
        self.taxon_search = taxon_search or search_by_taxonomy
        self.code_search = code_search or search_media
        self.sleep = sleep or time.sleep
        self.rng = rng or random.Random()
        self.retry_delay = retry_delay
        self.mammal_attempts = mammal_attempts
        self.bird_attempts = bird_attempts

    # ------------------------------------------------------------------
    # Ladder steps
    # ------------------------------------------------------------------

    def _search_species(self, attempt: FallbackAttempt, mammal: MammalRecord) -> None:
        name = mammal.formatted_sci_name
        logger.info("Searching species %s", name)
        found = self.taxon_search(name, TaxonRank.SPECIES)
        pool = species_pool(found, target=name)
        if found is not None and pool:
            logger.info("Found %d media assets for species %s", len(pool), name)
            attempt.accept(pool, found.media)
        else:
            logger.info("No media found for %s, trying family search...", mammal.common_name)
            attempt.state = ResolutionState.SEARCHING_FAMILY

    def _search_family(
        self, attempt: FallbackAttempt, mammal: MammalRecord, target: str | None
    ) -> None:
        found = self.taxon_search(mammal.family, TaxonRank.FAMILY)
        if found is None:
            logger.info("No media found for family %s", mammal.family)
            return
        logger.info(
            "Found %d media assets for family %s, checking for species-specific images...",
            len(found.asset_ids),
            mammal.family,
        )
        pool = species_pool(found, target=target)
        if pool:
            logger.info("Found %d species-specific images in family results", len(pool))
            attempt.accept(pool, found.media)
        else:
            logger.info("No species-specific images found in family %s results", mammal.family)

    # ------------------------------------------------------------------
    # Final selection
    # ------------------------------------------------------------------

    def _select(self, attempt: FallbackAttempt) -> tuple[int, MediaTaxonomy, Classification]:
        search = attempt.resolved_search()
        asset_id = self.rng.choice(attempt.pool)
        logger.info("Selected asset ID: %d", asset_id)

        details = search.get_asset_details(asset_id)
        taxonomy = details.taxonomy if details is not None else None
        verdict = classify(details) if details is not None else Classification(usable=False)
        if taxonomy is None or not verdict.usable:
            raise IntegrityError(asset_id, taxonomy.category if taxonomy else None)

        logger.info("Selected asset taxonomy: %s (%s)", taxonomy.sci_name, taxonomy.category)
        return asset_id, taxonomy, verdict

    # ------------------------------------------------------------------
    # Modes
    # ------------------------------------------------------------------

    def resolve_single(self, records: list[MammalRecord], sci_name: str) -> ResolvedAsset:
        """
        Resolve one named mammal. Species and family tiers are each tried
        once, with family results pinned to the requested species.
        """
        mammal = find_mammal(records, sci_name)
        if mammal is None:
            raise TaxonNotFoundError(sci_name)
        logger.info("Using test species: %s - Family: %s", mammal.display_name, mammal.family)

        attempt = FallbackAttempt()
        attempt.start(mammal)
        self._search_species(attempt, mammal)
        if attempt.state is ResolutionState.SEARCHING_FAMILY:
            self._search_family(attempt, mammal, target=mammal.formatted_sci_name)
        if attempt.state is not ResolutionState.RESOLVED:
            attempt.state = ResolutionState.EXHAUSTED
            raise ExhaustedError(1, f"No usable media found for test species {sci_name}")

        return self._finish_mammal(attempt, records, mammal)

    def resolve_mammal(self, records: list[MammalRecord]) -> ResolvedAsset:
        """Sampling mode: draw mammals until one resolves or attempts run out."""
        attempt = FallbackAttempt()
        while attempt.number < self.mammal_attempts:
            mammal = sample_mammal(records, self.rng)
            attempt.start(mammal)
            logger.info(
                "Attempt %d: selected mammal %s - Family: %s",
                attempt.number,
                mammal.display_name,
                mammal.family,
            )

            self._search_species(attempt, mammal)
            if attempt.state is ResolutionState.SEARCHING_FAMILY:
                self._search_family(attempt, mammal, target=None)
            if attempt.state is ResolutionState.RESOLVED:
                return self._finish_mammal(attempt, records, mammal)

            if attempt.number < self.mammal_attempts:
                logger.info("Waiting %.0f seconds before trying again...", self.retry_delay)
                self.sleep(self.retry_delay)

        attempt.state = ResolutionState.EXHAUSTED
        raise ExhaustedError(attempt.number)

    def resolve_bird(self, records: list[BirdRecord]) -> ResolvedAsset:
        """Sampling mode for birds: direct taxon-code search, no family fallback."""
        attempt = FallbackAttempt()
        while attempt.number < self.bird_attempts:
            bird = sample_bird(records, self.rng)
            attempt.start(bird)
            logger.info(
                "Attempt %d: selected bird %s - Code: %s",
                attempt.number,
                bird.display_name,
                bird.species_code,
            )

            found = self.code_search(bird.species_code, include_child_taxa=False)
            if found is not None and found.results:
                logger.info("Found %d media assets", len(found.results))
                attempt.accept(found.asset_ids, found)
                return self._finish_bird(attempt, records, bird)
            logger.info("No media found for %s, trying another bird...", bird.english_name)

        attempt.state = ResolutionState.EXHAUSTED
        raise ExhaustedError(attempt.number)

    # ------------------------------------------------------------------
    # Record matching
    # ------------------------------------------------------------------

    def _finish_mammal(
        self, attempt: FallbackAttempt, records: list[MammalRecord], sampled: MammalRecord
    ) -> ResolvedAsset:
        asset_id, taxonomy, verdict = self._select(attempt)
        record, matched = sampled, True
        if verdict.scientific_name != sampled.formatted_sci_name:
            found = find_mammal(records, verdict.scientific_name or "")
            if found is not None:
                logger.info("Found matching reference data for image species: %s", found.common_name)
                record = found
            else:
                # Distribution data will describe the sampled species, not the photo.
                logger.warning(
                    "No reference data for image species %s, using original selection %s",
                    verdict.scientific_name,
                    sampled.formatted_sci_name,
                )
                matched = False
        return ResolvedAsset(asset_id, taxonomy, verdict, record, sampled, matched, attempt.number)

    def _finish_bird(
        self, attempt: FallbackAttempt, records: list[BirdRecord], sampled: BirdRecord
    ) -> ResolvedAsset:
        asset_id, taxonomy, verdict = self._select(attempt)
        record, matched = sampled, True
        if verdict.scientific_name != sampled.scientific_name:
            found = find_bird(records, verdict.scientific_name or "")
            if found is not None:
                record = found
            else:
                matched = False
        return ResolvedAsset(asset_id, taxonomy, verdict, record, sampled, matched, attempt.number)


# =============================================================================
# Convenience wrappers
# =============================================================================


def resolve_mammal(
    records: list[MammalRecord], test_species: str | None = None, **engine_kwargs: object
) -> ResolvedAsset:
    """Resolve a mammal photo, either sampled or for a named species."""
    engine = FallbackResolutionEngine(**engine_kwargs)  # type: ignore[arg-type]
    if test_species:
        return engine.resolve_single(records, test_species)
    return engine.resolve_mammal(records)


def resolve_bird(records: list[BirdRecord], **engine_kwargs: object) -> ResolvedAsset:
    """Resolve a sampled bird photo."""
    engine = FallbackResolutionEngine(**engine_kwargs)  # type: ignore[arg-type]
    return engine.resolve_bird(records)

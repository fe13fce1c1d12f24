"""Taxon -> photo resolution.

Public API:
  - sampler: sample_bird, sample_mammal, is_overrepresented
  - classifier: classify, normalize_scientific_name, Classification
  - engine: FallbackResolutionEngine, ResolvedAsset, resolve_bird, resolve_mammal
  - errors: ResolutionError, ExhaustedError, IntegrityError, TaxonNotFoundError
"""

from macaulay_bot.resolution.classifier import Classification, classify, normalize_scientific_name
from macaulay_bot.resolution.engine import (
    FallbackAttempt,
    FallbackResolutionEngine,
    ResolutionState,
    ResolvedAsset,
    resolve_bird,
    resolve_mammal,
)
from macaulay_bot.resolution.errors import (
    ExhaustedError,
    IntegrityError,
    ResolutionError,
    TaxonNotFoundError,
)
from macaulay_bot.resolution.sampler import is_overrepresented, sample_bird, sample_mammal

__all__ = [
    "Classification",
    "ExhaustedError",
    "FallbackAttempt",
    "FallbackResolutionEngine",
    "IntegrityError",
    "ResolutionError",
    "ResolutionState",
    "ResolvedAsset",
    "TaxonNotFoundError",
    "classify",
    "is_overrepresented",
    "normalize_scientific_name",
    "resolve_bird",
    "resolve_mammal",
    "sample_bird",
    "sample_mammal",
]

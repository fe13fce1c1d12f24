"""Errors that abort a resolution run.

Transient upstream problems never show up here: the datasource layer turns
them into ``None`` and the engine moves on to the next tier or attempt.
"""

from __future__ import annotations


class ResolutionError(RuntimeError):
    """Base class for failures surfaced to the caller."""


class ExhaustedError(ResolutionError):
    """Every tier and attempt came back without a usable photo."""

    def __init__(self, attempts: int, detail: str | None = None) -> None:
        self.attempts = attempts
        msg = detail or f"Failed to find species-specific media after {attempts} attempts"
        super().__init__(msg)


class IntegrityError(ResolutionError):
    """The selected asset is not species-specific after all."""

    def __init__(self, asset_id: int, category: str | None) -> None:
        self.asset_id = asset_id
        self.category = category
        super().__init__(f"Selected asset {asset_id} is not species-specific. Category: {category}")


class TaxonNotFoundError(ResolutionError):
    """A requested species is not in the reference list."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Species {name} not found in reference data")

"""Bird and mammal reference lists loaded from flat CSV exports.

Birds come from the AviList checklist export, mammals from the Mammal
Diversity Database (MDD) export. Both files are read positionally: the
first eight columns, in the order listed on each record class.
"""

from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path  # noqa: TC003


class ReferenceDataError(RuntimeError):
    """A reference CSV is missing or contains no usable rows."""


@dataclass(frozen=True)
class BirdRecord:
    """One AviList species row."""

    order: str
    family: str
    family_english_name: str
    scientific_name: str
    english_name: str
    range: str
    iucn_category: str
    species_code: str

    @property
    def display_name(self) -> str:
        return f"{self.english_name} ({self.scientific_name})"


@dataclass(frozen=True)
class MammalRecord:
    """One MDD species row. ``sci_name`` uses ``Genus_species`` form."""

    sci_name: str
    common_name: str
    order: str
    family: str
    continent_distribution: str
    biogeographic_realm: str
    iucn_status: str
    distribution_notes: str

    @property
    def formatted_sci_name(self) -> str:
        """``Genus species`` form used by the Macaulay taxonomy."""
        return self.sci_name.replace("_", " ", 1)

    @property
    def display_name(self) -> str:
        return f"{self.common_name} ({self.formatted_sci_name})"


# =============================================================================
# Loading
# =============================================================================


def _read_rows(path: Path) -> list[list[str]]:
    """Read data rows, dropping blank lines and rows shorter than the header."""
    if not path.exists():
        msg = f"CSV file not found at: {path}"
        raise ReferenceDataError(msg)

    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.reader(f)
        header = next(reader, None)
        if header is None:
            return []
        rows = []
        for row in reader:
            if not any(cell.strip() for cell in row):
                continue
            if len(row) < len(header):
                continue
            rows.append([cell.strip() for cell in row])
    return rows


def load_birds(path: Path) -> list[BirdRecord]:
    """Load the AviList species export."""
    records = [BirdRecord(*row[:8]) for row in _read_rows(path)]
    if not records:
        msg = f"No bird records found in CSV file: {path}"
        raise ReferenceDataError(msg)
    return records


def load_mammals(path: Path) -> list[MammalRecord]:
    """Load the MDD species export."""
    records = [MammalRecord(*row[:8]) for row in _read_rows(path)]
    if not records:
        msg = f"No mammal records found in CSV file: {path}"
        raise ReferenceDataError(msg)
    return records


def find_mammal(records: list[MammalRecord], sci_name: str) -> MammalRecord | None:
    """Exact lookup by ``Genus_species`` (a ``Genus species`` name also works)."""
    key = sci_name.replace(" ", "_", 1)
    for record in records:
        if record.sci_name == key:
            return record
    return None


def find_bird(records: list[BirdRecord], scientific_name: str) -> BirdRecord | None:
    """Exact lookup by scientific name."""
    for record in records:
        if record.scientific_name == scientific_name:
            return record
    return None

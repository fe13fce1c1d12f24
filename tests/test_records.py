"""Tests for reference CSV loading."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from macaulay_bot.reference import iucn_label
from macaulay_bot.reference.records import (
    ReferenceDataError,
    find_bird,
    find_mammal,
    load_birds,
    load_mammals,
)
from tests.factories import bird, mammal

if TYPE_CHECKING:
    from pathlib import Path

BIRD_CSV = """Order,Family,Family_English_name,Scientific_name,English_name_AviList,Range,IUCN_Red_List_Category,Species_code_Cornell_Lab
Passeriformes,Cettiidae,Bush Warblers,Tesia everetti,Russet-capped Tesia,"Flores, Sumbawa",LC,gybtes1

Struthioniformes,Struthionidae,Ostriches,Struthio camelus,Common Ostrich,Africa,LC,ostric2
Passeriformes,Cettiidae,Bush Warblers,Tesia short
"""

MAMMAL_CSV = """sciName,mainCommonName,order,family,continentDistribution,biogeographicRealm,iucnStatus,distributionNotes
Odobenus_rosmarus,Walrus,Carnivora,Odobenidae,North America|Europe,Nearctic|Palearctic,VU,"Arctic seas, coasts"
Mus_musculus,House Mouse,Rodentia,Muridae,Asia,Palearctic,LC,
"""


class TestLoadBirds:
    def test_parses_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "birds.csv"
        path.write_text(BIRD_CSV)
        birds = load_birds(path)
        assert len(birds) == 2
        assert birds[0].scientific_name == "Tesia everetti"
        assert birds[0].species_code == "gybtes1"

    def test_quoted_field_keeps_commas(self, tmp_path: Path) -> None:
        path = tmp_path / "birds.csv"
        path.write_text(BIRD_CSV)
        assert load_birds(path)[0].range == "Flores, Sumbawa"

    def test_short_and_blank_rows_skipped(self, tmp_path: Path) -> None:
        path = tmp_path / "birds.csv"
        path.write_text(BIRD_CSV)
        names = [b.scientific_name for b in load_birds(path)]
        assert "Tesia short" not in names

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ReferenceDataError, match="not found"):
            load_birds(tmp_path / "nope.csv")

    def test_header_only(self, tmp_path: Path) -> None:
        path = tmp_path / "birds.csv"
        path.write_text(BIRD_CSV.splitlines()[0] + "\n")
        with pytest.raises(ReferenceDataError, match="No bird records"):
            load_birds(path)


class TestLoadMammals:
    def test_parses_rows(self, tmp_path: Path) -> None:
        path = tmp_path / "mammals.csv"
        path.write_text(MAMMAL_CSV)
        mammals = load_mammals(path)
        assert [m.sci_name for m in mammals] == ["Odobenus_rosmarus", "Mus_musculus"]
        assert mammals[0].distribution_notes == "Arctic seas, coasts"
        assert mammals[1].distribution_notes == ""

    def test_empty_file(self, tmp_path: Path) -> None:
        path = tmp_path / "mammals.csv"
        path.write_text("")
        with pytest.raises(ReferenceDataError):
            load_mammals(path)


class TestLookups:
    def test_formatted_sci_name(self) -> None:
        assert mammal(sci_name="Odobenus_rosmarus").formatted_sci_name == "Odobenus rosmarus"

    def test_find_mammal_underscore_or_space(self) -> None:
        records = [mammal(), mammal(sci_name="Mus_musculus", common_name="House Mouse")]
        assert find_mammal(records, "Mus_musculus") == records[1]
        assert find_mammal(records, "Mus musculus") == records[1]
        assert find_mammal(records, "Mus spretus") is None

    def test_find_bird(self) -> None:
        records = [bird(), bird(scientific_name="Struthio camelus", english_name="Common Ostrich")]
        assert find_bird(records, "Struthio camelus") == records[1]
        assert find_bird(records, "Tesia olivea") is None


class TestIucnLabel:
    def test_known_codes(self) -> None:
        assert iucn_label("VU") == "Vulnerable"
        assert iucn_label("lc") == "Least Concern"

    def test_unknown_code(self) -> None:
        assert iucn_label("XX") == "Unknown"
        assert iucn_label("") == "Unknown"

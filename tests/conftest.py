"""Shared fixtures for the test suite."""

from __future__ import annotations

import pytest

from macaulay_bot.reference.records import BirdRecord, MammalRecord
from tests.factories import bird, mammal


@pytest.fixture
def walrus() -> MammalRecord:
    return mammal()


@pytest.fixture
def tesia() -> BirdRecord:
    return bird()

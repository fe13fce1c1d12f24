"""Random species selection from the reference lists."""

from __future__ import annotations

import logging
import random
from typing import TypeVar

from macaulay_bot.reference.bias import (
    MAX_REROLLS,
    OVERREPRESENTED_FAMILIES,
    OVERREPRESENTED_ORDERS,
)
from macaulay_bot.reference.records import BirdRecord, MammalRecord, ReferenceDataError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _draw(records: list[T], rng: random.Random) -> T:
    if not records:
        msg = "Cannot sample from an empty reference list"
        raise ReferenceDataError(msg)
    return records[rng.randrange(len(records))]


def _group(record: MammalRecord) -> str:
    if record.family in OVERREPRESENTED_FAMILIES:
        return f"family {record.family}"
    return f"order {record.order}"


def is_overrepresented(record: MammalRecord) -> bool:
    """Rodent/shrew families and bats."""
    return record.family in OVERREPRESENTED_FAMILIES or record.order in OVERREPRESENTED_ORDERS


def sample_bird(records: list[BirdRecord], rng: random.Random | None = None) -> BirdRecord:
    """Uniform draw; birds have no bias correction."""
    return _draw(records, rng or random.Random())


def sample_mammal(
    records: list[MammalRecord],
    rng: random.Random | None = None,
    *,
    max_rerolls: int = MAX_REROLLS,
) -> MammalRecord:
    """
    Uniform draw, redrawn up to ``max_rerolls`` times while it lands on an
    overrepresented group. The last draw is kept even if it is still one.
    """
    rng = rng or random.Random()
    selected = _draw(records, rng)
    rerolls = 0
    while is_overrepresented(selected):
        if rerolls >= max_rerolls:
            logger.info(
                "Keeping %s from %s after %d re-rolls",
                selected.common_name,
                _group(selected),
                max_rerolls,
            )
            break
        rerolls += 1
        logger.info(
            "Re-rolling selection (%d/%d): %s is from %s",
            rerolls,
            max_rerolls,
            selected.common_name,
            _group(selected),
        )
        selected = _draw(records, rng)
    return selected

"""Post text for a resolved bird or mammal photo.

Layout::

    <Common name> (<Scientific name>)

    Family <Family> [(<Family English name>)]
    Range: <range>            # only when it fits
    IUCN status: <label>      # only when it fits

Bluesky posts are limited to 300 characters.
"""

from __future__ import annotations

import re

from macaulay_bot.reference.iucn import iucn_label
from macaulay_bot.reference.records import BirdRecord, MammalRecord
from macaulay_bot.renderers import render_template
from macaulay_bot.resolution.engine import ResolvedAsset

MAX_POST_LENGTH = 300
# Mammal ranges leave extra headroom (distribution strings run long).
MAMMAL_RANGE_LIMIT = 280

_REGIONAL_QUALIFIER = re.compile(r"\s+(Atlantic|Pacific|Eastern|Western|Northern|Southern)\s+", re.I)
_CONTINENT_SUFFIX = re.compile(r"\s*\(Continent\)\s*")


class PostTooLongError(ValueError):
    """Rendered text exceeds the post length limit."""


def _finish(text: str, range_text: str, footer: str, range_limit: int) -> str:
    if range_text and len(range_text) + len(text) + len(footer) < range_limit:
        text += f"Range: {range_text}\n"
    if len(text) + len(footer) < MAX_POST_LENGTH:
        text += footer
    if len(text) > MAX_POST_LENGTH:
        msg = f"Generated post text exceeds {MAX_POST_LENGTH} characters limit"
        raise PostTooLongError(msg)
    return text


def build_bird_post(bird: BirdRecord) -> str:
    """Post text for a bird, from its reference record."""
    text = render_template(
        "bird_header.txt.j2",
        english_name=bird.english_name,
        scientific_name=bird.scientific_name,
        family=bird.family,
        family_english_name=bird.family_english_name,
    )
    footer = f"IUCN status: {iucn_label(bird.iucn_category)}"
    return _finish(text, bird.range, footer, MAX_POST_LENGTH)


def mammal_distribution(mammal: MammalRecord) -> str:
    """Biogeographic realms, with continents appended when there are few."""
    if not mammal.biogeographic_realm:
        return ""
    realms = ", ".join(r.strip() for r in mammal.biogeographic_realm.split("|"))
    if mammal.continent_distribution:
        continents = [
            _CONTINENT_SUFFIX.sub("", c.strip()) for c in mammal.continent_distribution.split("|")
        ]
        if len(continents) <= 3:
            realms += f" ({', '.join(continents)})"
    return realms


def mammal_display_names(resolved: ResolvedAsset) -> tuple[str, str]:
    """(common, scientific) names for what the photo shows, at species level."""
    taxonomy = resolved.taxonomy
    sci_name = resolved.scientific_name or taxonomy.sci_name or ""
    com_name = taxonomy.com_name or ""
    if resolved.classification.is_subspecies:
        record = resolved.record
        if isinstance(record, MammalRecord) and record.common_name:
            com_name = record.common_name
        else:
            com_name = _REGIONAL_QUALIFIER.sub("", com_name, count=1)
    return com_name, sci_name


def build_mammal_post(resolved: ResolvedAsset) -> str:
    """Post text for a mammal photo; distribution comes from the matched record."""
    mammal = resolved.record
    if not isinstance(mammal, MammalRecord):
        msg = "build_mammal_post needs a mammal reference record"
        raise TypeError(msg)

    common_name, scientific_name = mammal_display_names(resolved)
    text = render_template(
        "mammal_header.txt.j2",
        common_name=common_name,
        scientific_name=scientific_name,
        family=mammal.family,
    )
    footer = f"IUCN status: {iucn_label(mammal.iucn_status)}"
    return _finish(text, mammal_distribution(mammal), footer, MAMMAL_RANGE_LIMIT)

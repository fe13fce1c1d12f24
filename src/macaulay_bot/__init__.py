"""Macaulay Bot - daily bird and mammal photos from the Macaulay Library.

Architecture::

    reference/     Species lists (CSV), IUCN labels, sampling bias sets
    datasources/   Macaulay taxonomy lookup + photo search, link-card scraping
    resolution/    Sampling, taxonomy classification, species -> family fallback
    renderers/     Pure data -> post text (Jinja2 templates)
    flows/         Prefect orchestration (resolve, render, publish)
    services/      Shared utilities (HTTP client with retry, Bluesky client)

Data flow: reference -> resolution (datasources) -> renderers -> services/bluesky
"""

__version__ = "0.1.0"
__author__ = "Michael Howden"

from macaulay_bot.config import Settings

__all__ = ["Settings", "__version__"]

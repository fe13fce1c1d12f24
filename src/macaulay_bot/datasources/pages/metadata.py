"""Title, description and thumbnail for a link card.

Reads ``<title>``, ``<meta name="description">`` and ``og:image`` from the
asset's embed page. Macaulay descriptions put the photographer credit after
a copyright sign; everything before it is dropped.
"""

from __future__ import annotations

import logging

import requests
from bs4 import BeautifulSoup

from macaulay_bot.schemas import DEFAULT_CARD_DESCRIPTION, DEFAULT_CARD_TITLE, PageMetadata
from macaulay_bot.services.http import session

logger = logging.getLogger(__name__)


def _meta_content(soup: BeautifulSoup, **attrs: str) -> str | None:
    tag = soup.find("meta", attrs=attrs)
    if tag is None:
        return None
    content = tag.get("content")
    if not isinstance(content, str) or not content.strip():
        return None
    return content.strip()


def parse_page_metadata(html: str, url: str) -> PageMetadata:
    """Build a card from page HTML. Missing fields fall back to defaults."""
    soup = BeautifulSoup(html, "html.parser")

    title = DEFAULT_CARD_TITLE
    if soup.title is not None and soup.title.string and soup.title.string.strip():
        title = soup.title.string.strip()

    description = _meta_content(soup, name="description") or DEFAULT_CARD_DESCRIPTION
    copyright_at = description.find("©")
    if copyright_at != -1:
        description = description[copyright_at:]

    return PageMetadata(
        uri=url,
        title=title,
        description=description,
        thumb_url=_meta_content(soup, property="og:image"),
    )


def fetch_page_metadata(url: str) -> PageMetadata:
    """Fetch a page and parse its card metadata; defaults on any failure."""
    try:
        resp = session.get(url)
        resp.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Failed to fetch page metadata for %s: %s", url, exc)
        return PageMetadata(uri=url)
    return parse_page_metadata(resp.text, url)

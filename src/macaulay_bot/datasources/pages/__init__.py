"""Link-card metadata scraped from a web page.

Public API:
  - metadata: fetch_page_metadata, parse_page_metadata
"""

from macaulay_bot.datasources.pages.metadata import fetch_page_metadata, parse_page_metadata

__all__ = ["fetch_page_metadata", "parse_page_metadata"]

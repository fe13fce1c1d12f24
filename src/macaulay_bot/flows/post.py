"""
Prefect flow for generating and publishing one species post.

Run locally (dry run, no Bluesky credentials needed):
    python -m macaulay_bot.flows.post

Run with Prefect dashboard:
    prefect server start &
    python -m macaulay_bot.flows.post
"""

from __future__ import annotations

from typing import Any

from prefect import flow, task

from macaulay_bot.config import get_settings
from macaulay_bot.datasources.pages import fetch_page_metadata
from macaulay_bot.reference.records import load_birds, load_mammals
from macaulay_bot.renderers.post import build_bird_post, build_mammal_post
from macaulay_bot.resolution.engine import resolve_bird, resolve_mammal
from macaulay_bot.schemas import PageMetadata
from macaulay_bot.services.bluesky import BlueskyClient, BlueskyError


@task(name="generate-bird-post")
def generate_bird_post() -> tuple[str, str, int]:
    """Resolve a random bird photo. Returns (text, asset url, asset id)."""
    settings = get_settings()
    print("Loading bird data from CSV...")
    birds = load_birds(settings.bird_csv_path)
    print(f"Loaded {len(birds)} bird records")

    resolved = resolve_bird(birds)
    return build_bird_post(resolved.record), resolved.url, resolved.asset_id  # type: ignore[arg-type]


@task(name="generate-mammal-post")
def generate_mammal_post(test_species: str | None = None) -> tuple[str, str, int]:
    """Resolve a random (or named) mammal photo. Returns (text, asset url, asset id)."""
    settings = get_settings()
    print("Loading mammal data from CSV...")
    mammals = load_mammals(settings.mammal_csv_path)
    print(f"Loaded {len(mammals)} mammal records")

    resolved = resolve_mammal(
        mammals, test_species=test_species, retry_delay=settings.retry_delay_seconds
    )
    return build_mammal_post(resolved), resolved.url, resolved.asset_id


@task(name="fetch-card")
def fetch_card(url: str) -> PageMetadata:
    """Fetch link card metadata for the asset page."""
    return fetch_page_metadata(url)


def publish(client: BlueskyClient, text: str, card: PageMetadata) -> dict[str, Any]:
    """Upload the thumbnail (if any) and create the post."""
    thumb = client.upload_image(card.thumb_url) if card.thumb_url else None
    return client.post(text, card, thumb=thumb)


def login() -> BlueskyClient:
    """Log in with credentials from settings."""
    settings = get_settings()
    if not settings.bluesky_username or settings.bluesky_password is None:
        msg = "BLUESKY_USERNAME and BLUESKY_PASSWORD must be set to post"
        raise BlueskyError(msg)
    client = BlueskyClient(settings.bluesky_service)
    print("Logging in to Bluesky...")
    client.login(settings.bluesky_username, settings.bluesky_password.get_secret_value())
    return client


@flow(name="post-taxon", log_prints=True)
def post_taxon(
    mammals: bool = False,
    dry_run: bool = False,
    test_species: str | None = None,
) -> dict[str, Any]:
    """
    Generate one post and (unless dry run) publish it.

    Logs in before doing any searching so bad credentials fail fast.
    """
    client = None if dry_run else login()

    print(f"Generating {'mammal' if mammals else 'bird'} post...")
    if mammals:
        text, url, asset_id = generate_mammal_post(test_species)
    else:
        text, url, asset_id = generate_bird_post()

    print("Fetching page metadata for link card...")
    card = fetch_card(url)

    print("\n--- Post content ---")
    print(text)
    print("--- End of post ---\n")

    result: dict[str, Any] = {"asset_id": asset_id, "text": text, "uri": url, "posted": False}
    if client is None:
        print("Dry run completed. Above is what would be posted to Bluesky.")
        return result

    print("Posting to Bluesky...")
    created = publish(client, text, card)
    result["posted"] = True
    result["post_uri"] = created.get("uri")
    print("Successfully posted to Bluesky!")
    return result


if __name__ == "__main__":
    result = post_taxon(dry_run=True)
    print(f"Flow complete: {result}")

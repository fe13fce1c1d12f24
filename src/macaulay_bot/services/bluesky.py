"""
Bluesky client over the AT Protocol XRPC HTTP API.

Only the three calls the bot needs: create a session, upload a thumbnail
blob, and create a post record with an external link card.

API docs: https://docs.bsky.app/docs/category/http-reference
"""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

import requests

from macaulay_bot.schemas import PageMetadata
from macaulay_bot.services.http import session as default_session

logger = logging.getLogger(__name__)

DEFAULT_SERVICE = "https://bsky.social"
POST_COLLECTION = "app.bsky.feed.post"
EXTERNAL_EMBED = "app.bsky.embed.external"


class BlueskyError(RuntimeError):
    """Login or posting failed."""


class BlueskyClient:
    """Minimal authenticated Bluesky client."""

    def __init__(
        self, service: str = DEFAULT_SERVICE, session: requests.Session | None = None
    ) -> None:
        self.service = service.rstrip("/")
        self.session = session or default_session
        self.did: str | None = None
        self._access_jwt: str | None = None

    def _url(self, method: str) -> str:
        return f"{self.service}/xrpc/{method}"

    def _auth_headers(self) -> dict[str, str]:
        if self._access_jwt is None:
            msg = "Not logged in to Bluesky"
            raise BlueskyError(msg)
        return {"Authorization": f"Bearer {self._access_jwt}"}

    @property
    def logged_in(self) -> bool:
        return self._access_jwt is not None

    def login(self, identifier: str, password: str) -> None:
        """com.atproto.server.createSession"""
        try:
            resp = self.session.post(
                self._url("com.atproto.server.createSession"),
                json={"identifier": identifier, "password": password},
            )
        except requests.RequestException as exc:
            msg = f"Bluesky login failed: {exc}"
            raise BlueskyError(msg) from exc
        if not resp.ok:
            msg = f"Bluesky login failed with status: {resp.status_code}"
            raise BlueskyError(msg)
        try:
            data: dict[str, Any] = resp.json()
            access_jwt, did = data["accessJwt"], data["did"]
        except (KeyError, TypeError, ValueError) as exc:
            msg = "Bluesky login failed: unexpected session response"
            raise BlueskyError(msg) from exc
        self._access_jwt = access_jwt
        self.did = did
        logger.info("Logged in to Bluesky as %s", data.get("handle", self.did))

    def upload_image(self, image_url: str, mime_type: str = "image/jpeg") -> dict[str, Any] | None:
        """Download an image and upload it as a blob. None on any failure."""
        logger.info("Uploading thumbnail from: %s", image_url)
        try:
            image = self.session.get(image_url)
            image.raise_for_status()
            resp = self.session.post(
                self._url("com.atproto.repo.uploadBlob"),
                data=image.content,
                headers={**self._auth_headers(), "Content-Type": mime_type},
            )
            resp.raise_for_status()
            blob: dict[str, Any] = resp.json()["blob"]
        except (requests.RequestException, BlueskyError, KeyError, ValueError) as exc:
            logger.warning("Failed to upload thumbnail: %s", exc)
            return None
        return blob

    def post(
        self, text: str, card: PageMetadata, thumb: dict[str, Any] | None = None
    ) -> dict[str, Any]:
        """Create a post with an external link card. Returns ``{uri, cid}``."""
        external: dict[str, Any] = {
            "uri": card.uri,
            "title": card.title,
            "description": card.description,
        }
        if thumb:
            external["thumb"] = thumb

        record = {
            "$type": POST_COLLECTION,
            "text": text,
            "createdAt": datetime.now(UTC).isoformat().replace("+00:00", "Z"),
            "embed": {"$type": EXTERNAL_EMBED, "external": external},
        }
        headers = self._auth_headers()
        try:
            resp = self.session.post(
                self._url("com.atproto.repo.createRecord"),
                json={"repo": self.did, "collection": POST_COLLECTION, "record": record},
                headers=headers,
            )
        except requests.RequestException as exc:
            msg = f"Bluesky post failed: {exc}"
            raise BlueskyError(msg) from exc
        if not resp.ok:
            msg = f"Bluesky post failed with status: {resp.status_code}"
            raise BlueskyError(msg)
        try:
            result: dict[str, Any] = resp.json()
        except ValueError as exc:
            msg = "Bluesky post failed: unexpected response"
            raise BlueskyError(msg) from exc
        return result

"""Inbound webhook endpoint for Hugging Face Hub events."""

import hmac
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from repo_relay.adapters.hub import HubClient
from repo_relay.adapters.notifications import DiscordNotifier
from repo_relay.config import Settings
from repo_relay.core import RepoEvent
from repo_relay.use_cases import RelayService

logger = logging.getLogger(__name__)

SECRET_HEADER = "X-Webhook-Secret"


def build_service(settings: Settings) -> RelayService:
    if not settings.discord_webhook_url:
        raise ValueError("DISCORD_WEBHOOK_URL is not set")
    return RelayService(
        source=HubClient(base_url=settings.hub_url, timeout=settings.hub.timeout),
        notification_service=DiscordNotifier(
            settings.discord_webhook_url, timeout=settings.delivery.timeout
        ),
    )


def _secret_matches(expected: Optional[str], provided: Optional[str]) -> bool:
    if not expected:
        return True
    if provided is None:
        return False
    return hmac.compare_digest(expected.encode("utf-8"), provided.encode("utf-8"))


def create_app(settings: Settings, service: Optional[RelayService] = None) -> FastAPI:
    """Build the webhook application.

    Every authenticated request is answered 200 OK, whatever happens to
    the event, so the Hub never retries a delivery.
    """
    relay = service or build_service(settings)
    app = FastAPI(title="repo-relay")

    @app.get("/health")
    async def health() -> dict:
        return {"status": "ok"}

    @app.post("/")
    async def hub_webhook(request: Request) -> PlainTextResponse:
        if not _secret_matches(settings.webhook_secret, request.headers.get(SECRET_HEADER)):
            return PlainTextResponse("Unauthorized", status_code=401)

        try:
            event = RepoEvent.from_payload(await request.json())
        except ValueError as e:
            logger.warning("Rejected webhook payload: %s", e)
            return PlainTextResponse("OK")

        try:
            outcome = await relay.handle(event)
            logger.info("%s: %s", event.repo_id, outcome.value)
        except Exception:
            logger.exception("Error processing webhook for %s", event.repo_id)

        return PlainTextResponse("OK")

    return app

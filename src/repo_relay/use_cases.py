"""Business logic use cases."""

import logging
from datetime import datetime
from typing import Optional

from repo_relay.core import (
    DeliveryError,
    MetadataEnricher,
    MetadataFetchError,
    NotificationDocument,
    NotificationService,
    RelayOutcome,
    RepoEvent,
    SubjectSource,
    compose,
    is_relevant,
)

logger = logging.getLogger(__name__)


class RelayService:
    """Service for turning Hub repository events into chat notifications."""

    def __init__(
        self,
        source: SubjectSource,
        notification_service: Optional[NotificationService] = None,
    ) -> None:
        self.enricher = MetadataEnricher(source)
        self.notification_service = notification_service

    async def build_notification(
        self, event: RepoEvent, now: Optional[datetime] = None
    ) -> NotificationDocument:
        """Enrich an event and compose its notification without sending it."""
        enrichment = await self.enricher.enrich(event)
        return compose(event, enrichment, now=now)

    async def handle(self, event: RepoEvent) -> RelayOutcome:
        """Process one event end to end.

        Nothing is retried: a failed metadata fetch or delivery is logged
        and reported as FAILED.
        """
        if not event.is_repo_creation:
            logger.debug("Ignoring %s/%s event for %s", event.scope, event.action, event.repo_id)
            return RelayOutcome.IGNORED

        if not is_relevant(event.repo_id):
            logger.info("Filtered out %s", event.repo_id)
            return RelayOutcome.FILTERED

        if self.notification_service is None:
            raise ValueError("No notification service configured")

        try:
            document = await self.build_notification(event)
        except MetadataFetchError as e:
            logger.error("Enrichment failed for %s: %s", event.repo_id, e)
            return RelayOutcome.FAILED

        try:
            await self.notification_service.send(document)
        except DeliveryError as e:
            logger.error("Delivery failed for %s: %s", event.repo_id, e)
            return RelayOutcome.FAILED

        return RelayOutcome.DELIVERED

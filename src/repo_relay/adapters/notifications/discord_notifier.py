"""Discord notification adapter."""

import logging
from typing import Optional

import httpx

from repo_relay.core import DeliveryError, NotificationDocument, NotificationService

logger = logging.getLogger(__name__)


class DiscordNotifier(NotificationService):
    """Send notifications to Discord via webhook."""
    
    def __init__(
        self,
        webhook_url: str,
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        """Initialize Discord notifier.
        
        Args:
            webhook_url: Discord webhook URL
            timeout: Seconds to wait for Discord before giving up
            transport: Optional httpx transport, used by tests
        """
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.transport = transport
    
    async def send(self, document: NotificationDocument) -> None:
        """POST the document as a single embed.
        
        Raises:
            DeliveryError: on a transport error or non-success status
        """
        payload = document.to_payload()
        
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.post(self.webhook_url, json=payload)
            except httpx.HTTPError as e:
                raise DeliveryError(f"Discord webhook unreachable: {e}") from e
        
        if not response.is_success:
            raise DeliveryError(
                f"Discord webhook failed: {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )
        logger.info("Delivered notification for %s", document.title)

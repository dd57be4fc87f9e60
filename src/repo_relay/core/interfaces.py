"""Core interfaces for adapters."""

from abc import ABC, abstractmethod
from typing import Any, Optional

from repo_relay.core.entities import NotificationDocument


class SubjectSource(ABC):
    """Interface for fetching repository metadata and documentation."""
    
    @abstractmethod
    async def fetch_metadata(self, api_url: str) -> dict[str, Any]:
        """Fetch the repository's metadata document.
        
        Raises:
            MetadataFetchError: on any network, status or parse failure
        """
        pass
    
    @abstractmethod
    async def fetch_readme(self, repo_id: str) -> Optional[str]:
        """Fetch README text, or None when the repository has none."""
        pass


class NotificationService(ABC):
    """Interface for delivering notifications."""
    
    @abstractmethod
    async def send(self, document: NotificationDocument) -> None:
        """Deliver a notification.
        
        Raises:
            DeliveryError: if the target rejected it or was unreachable
        """
        pass

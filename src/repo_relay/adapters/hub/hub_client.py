"""Hugging Face Hub client for repository metadata and model cards."""

import logging
from typing import Any, Optional

import httpx

from repo_relay.core import MetadataFetchError, SubjectSource

logger = logging.getLogger(__name__)


class HubClient(SubjectSource):
    """Fetch repository metadata and README text from the Hub."""
    
    def __init__(
        self,
        base_url: str = "https://huggingface.co",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.transport = transport
    
    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            transport=self.transport,
        )
    
    def readme_url(self, repo_id: str) -> str:
        return f"{self.base_url}/{repo_id}/raw/main/README.md"
    
    async def fetch_metadata(self, api_url: str) -> dict[str, Any]:
        """Fetch the repository's API document."""
        async with self._client() as client:
            try:
                response = await client.get(api_url)
                response.raise_for_status()
            except httpx.HTTPError as e:
                raise MetadataFetchError(f"Metadata request failed for {api_url}: {e}") from e
        
        try:
            metadata = response.json()
        except ValueError as e:
            raise MetadataFetchError(f"Metadata for {api_url} is not valid JSON") from e
        
        if not isinstance(metadata, dict):
            raise MetadataFetchError(f"Metadata for {api_url} is not a JSON object")
        return metadata
    
    async def fetch_readme(self, repo_id: str) -> Optional[str]:
        """Fetch README.md from the main branch; None unless it answers 200."""
        url = self.readme_url(repo_id)
        async with self._client() as client:
            try:
                response = await client.get(url)
            except httpx.HTTPError as e:
                logger.warning("README request failed for %s: %s", repo_id, e)
                return None
        
        if response.status_code != 200:
            logger.debug("README for %s answered HTTP %d", repo_id, response.status_code)
            return None
        return response.text

"""Merge fetched metadata and README into notification fields."""

import asyncio
import logging
from typing import Any, Optional

from repo_relay.core.entities import Enrichment, RepoEvent
from repo_relay.core.interfaces import SubjectSource
from repo_relay.core.markdown import summarize
from repo_relay.core.numbers import abbreviate

logger = logging.getLogger(__name__)


def lookup(document: Any, *path: str) -> Optional[Any]:
    """Follow a key path through nested dicts; None if any step is missing."""
    current = document
    for key in path:
        if not isinstance(current, dict) or key not in current:
            return None
        current = current[key]
    return current


class MetadataEnricher:
    """Fetch metadata and README for a repository and derive display fields."""
    
    def __init__(self, source: SubjectSource) -> None:
        self.source = source
    
    async def enrich(self, event: RepoEvent) -> Enrichment:
        """Fetch both documents concurrently and merge them.
        
        Raises:
            MetadataFetchError: if the metadata document is unavailable.
                A missing README never fails enrichment.
        """
        tasks = (
            asyncio.create_task(self.source.fetch_metadata(event.api_url)),
            asyncio.create_task(self.source.fetch_readme(event.repo_id)),
        )
        try:
            metadata, readme = await asyncio.gather(*tasks)
        except BaseException:
            # Don't leave the other fetch running after a failure
            for task in tasks:
                task.cancel()
            raise
        
        if readme is None:
            logger.info("No README for %s", event.repo_id)
        
        total = lookup(metadata, "safetensors", "total")
        parameters = None
        if isinstance(total, (int, float)) and not isinstance(total, bool):
            parameters = abbreviate(total)
        
        license_name = lookup(metadata, "cardData", "license")
        
        return Enrichment(
            description=summarize(readme),
            parameters=parameters,
            license=str(license_name) if license_name is not None else None,
        )

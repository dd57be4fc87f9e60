"""Core domain layer."""

from repo_relay.core.composer import accent_color, compose
from repo_relay.core.enricher import MetadataEnricher
from repo_relay.core.entities import (
    EmbedField,
    Enrichment,
    Footer,
    NotificationDocument,
    RelayOutcome,
    RepoEvent,
)
from repo_relay.core.errors import DeliveryError, MetadataFetchError, RelayError
from repo_relay.core.filters import DENYLIST, is_relevant
from repo_relay.core.interfaces import NotificationService, SubjectSource
from repo_relay.core.markdown import summarize
from repo_relay.core.numbers import abbreviate

__all__ = [
    "RepoEvent",
    "Enrichment",
    "EmbedField",
    "Footer",
    "NotificationDocument",
    "RelayOutcome",
    "RelayError",
    "MetadataFetchError",
    "DeliveryError",
    "SubjectSource",
    "NotificationService",
    "MetadataEnricher",
    "DENYLIST",
    "is_relevant",
    "abbreviate",
    "summarize",
    "compose",
    "accent_color",
]

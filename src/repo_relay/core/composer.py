"""Assemble the outbound notification from an event and its enrichment."""

from datetime import datetime, timezone
from types import MappingProxyType
from typing import Optional

from repo_relay.core.entities import (
    EmbedField,
    Enrichment,
    Footer,
    NotificationDocument,
    RepoEvent,
)

TYPE_COLORS = MappingProxyType({
    "model": 0xFF9D00,    # orange
    "dataset": 0x00D1FF,  # blue
    "space": 0xFF006E,    # pink
})
DEFAULT_COLOR = 0x808080

FOOTER = Footer(
    text="Hugging Face",
    icon_url="https://huggingface.co/front/assets/huggingface_logo-noborder.svg",
)


def accent_color(repo_type: str) -> int:
    return TYPE_COLORS.get(repo_type, DEFAULT_COLOR)


def _type_label(repo_type: str) -> str:
    return repo_type[:1].upper() + repo_type[1:]


def compose(
    event: RepoEvent,
    enrichment: Enrichment,
    now: Optional[datetime] = None,
) -> NotificationDocument:
    """Build the notification for an accepted event.
    
    Fields are always ordered Type, Parameters, License; the last two
    only when known.
    """
    fields = [EmbedField("Type", _type_label(event.repo_type))]
    if enrichment.parameters is not None:
        fields.append(EmbedField("Parameters", enrichment.parameters))
    if enrichment.license is not None:
        fields.append(EmbedField("License", enrichment.license))
    
    return NotificationDocument(
        title=event.repo_id,
        description=enrichment.description,
        color=accent_color(event.repo_type),
        url=event.web_url,
        timestamp=now or datetime.now(timezone.utc),
        footer=FOOTER,
        fields=tuple(fields),
    )

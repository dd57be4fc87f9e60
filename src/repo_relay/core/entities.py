"""Core domain entities."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional


class RelayOutcome(str, Enum):
    """What happened to one inbound event."""

    IGNORED = "ignored"
    FILTERED = "filtered"
    DELIVERED = "delivered"
    FAILED = "failed"


def _require(mapping: Any, key: str, kind: type, where: str) -> Any:
    if not isinstance(mapping, dict):
        raise ValueError(f"Expected object at {where}")
    value = mapping.get(key)
    if not isinstance(value, kind):
        raise ValueError(f"Missing or invalid field: {where}.{key}")
    return value


@dataclass(frozen=True)
class RepoEvent:
    """Repository event delivered by a Hub webhook."""

    scope: str
    action: str
    repo_type: str
    repo_id: str
    private: bool
    web_url: str
    api_url: str
    tags: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.repo_id:
            raise ValueError("Repository id cannot be empty")

    @property
    def is_repo_creation(self) -> bool:
        return self.scope == "repo" and self.action == "create"

    @classmethod
    def from_payload(cls, payload: Any) -> "RepoEvent":
        """Build an event from the webhook JSON body.

        Raises:
            ValueError: if a required field is missing or has the wrong type
        """
        event = _require(payload, "event", dict, "$")
        repo = _require(payload, "repo", dict, "$")
        url = _require(repo, "url", dict, "$.repo")

        tags = repo.get("tags") or []
        if not isinstance(tags, list):
            raise ValueError("Missing or invalid field: $.repo.tags")

        return cls(
            scope=_require(event, "scope", str, "$.event"),
            action=_require(event, "action", str, "$.event"),
            repo_type=_require(repo, "type", str, "$.repo"),
            repo_id=_require(repo, "name", str, "$.repo"),
            private=bool(repo.get("private", False)),
            web_url=_require(url, "web", str, "$.repo.url"),
            api_url=_require(url, "api", str, "$.repo.url"),
            tags=tuple(str(tag) for tag in tags),
        )


@dataclass(frozen=True)
class Enrichment:
    """Fields derived from the fetched metadata and README."""

    description: str
    parameters: Optional[str] = None
    license: Optional[str] = None


@dataclass(frozen=True)
class EmbedField:
    name: str
    value: str
    inline: bool = True


@dataclass(frozen=True)
class Footer:
    text: str
    icon_url: str


@dataclass(frozen=True)
class NotificationDocument:
    """Outbound chat message, rendered as a single Discord embed."""

    title: str
    description: str
    color: int
    url: str
    timestamp: datetime
    footer: Footer
    fields: tuple[EmbedField, ...] = field(default_factory=tuple)

    def to_payload(self) -> dict[str, Any]:
        """Serialize into a Discord webhook body."""
        embed = {
            "title": self.title,
            "description": self.description,
            "color": self.color,
            "fields": [
                {"name": f.name, "value": f.value, "inline": f.inline}
                for f in self.fields
            ],
            "url": self.url,
            "timestamp": self.timestamp.isoformat(),
            "footer": {
                "text": self.footer.text,
                "icon_url": self.footer.icon_url,
            },
        }
        return {"embeds": [embed]}

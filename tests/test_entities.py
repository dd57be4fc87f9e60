"""Tests for core entities."""

from dataclasses import FrozenInstanceError
from datetime import datetime, timezone

import pytest

from repo_relay.core import EmbedField, Footer, NotificationDocument, RepoEvent


def test_event_from_payload(hub_payload) -> None:
    """Test parsing a Hub webhook body."""
    event = RepoEvent.from_payload(hub_payload)
    
    assert event.scope == "repo"
    assert event.action == "create"
    assert event.repo_type == "model"
    assert event.repo_id == "acme/small-model"
    assert event.private is False
    assert event.web_url == "https://huggingface.co/acme/small-model"
    assert event.api_url == "https://huggingface.co/api/models/acme/small-model"
    assert event.tags == ("transformers", "text-generation")
    assert event.is_repo_creation


def test_event_without_tags(hub_payload) -> None:
    del hub_payload["repo"]["tags"]
    
    assert RepoEvent.from_payload(hub_payload).tags == ()


def test_event_other_action(hub_payload) -> None:
    hub_payload["event"]["action"] = "update"
    
    assert not RepoEvent.from_payload(hub_payload).is_repo_creation


def test_event_validation(hub_payload) -> None:
    """Test missing or mistyped fields."""
    with pytest.raises(ValueError, match="Expected object"):
        RepoEvent.from_payload(["not", "an", "object"])
    
    del hub_payload["repo"]["url"]["api"]
    with pytest.raises(ValueError, match=r"\$\.repo\.url\.api"):
        RepoEvent.from_payload(hub_payload)


def test_event_validation_bad_tags(hub_payload) -> None:
    hub_payload["repo"]["tags"] = "gguf"
    
    with pytest.raises(ValueError, match="tags"):
        RepoEvent.from_payload(hub_payload)


def test_event_empty_id(hub_payload) -> None:
    hub_payload["repo"]["name"] = ""
    
    with pytest.raises(ValueError, match="Repository id cannot be empty"):
        RepoEvent.from_payload(hub_payload)


def test_event_is_immutable(event) -> None:
    with pytest.raises(FrozenInstanceError):
        event.repo_id = "other/model"


def test_document_to_payload() -> None:
    """Test Discord serialization."""
    document = NotificationDocument(
        title="acme/small-model",
        description="Card...",
        color=0xFF9D00,
        url="https://huggingface.co/acme/small-model",
        timestamp=datetime(2025, 11, 27, 12, 0, tzinfo=timezone.utc),
        footer=Footer(text="Hugging Face", icon_url="https://hf.co/logo.svg"),
        fields=(EmbedField("Type", "Model"), EmbedField("License", "mit")),
    )
    
    payload = document.to_payload()
    
    assert list(payload) == ["embeds"]
    embed = payload["embeds"][0]
    assert embed["title"] == "acme/small-model"
    assert embed["description"] == "Card..."
    assert embed["color"] == 0xFF9D00
    assert embed["url"] == "https://huggingface.co/acme/small-model"
    assert embed["timestamp"] == "2025-11-27T12:00:00+00:00"
    assert embed["footer"] == {"text": "Hugging Face", "icon_url": "https://hf.co/logo.svg"}
    assert embed["fields"] == [
        {"name": "Type", "value": "Model", "inline": True},
        {"name": "License", "value": "mit", "inline": True},
    ]

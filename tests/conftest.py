"""Shared fixtures."""

import pytest

from repo_relay.core import RepoEvent


@pytest.fixture
def hub_payload() -> dict:
    """Webhook body as sent by the Hub for a new model repository."""
    return {
        "event": {"action": "create", "scope": "repo"},
        "repo": {
            "type": "model",
            "name": "acme/small-model",
            "id": "6650f0c1d2e3f4a5b6c7d8e9",
            "private": False,
            "url": {
                "web": "https://huggingface.co/acme/small-model",
                "api": "https://huggingface.co/api/models/acme/small-model",
            },
            "owner": {"id": "6650f0c1d2e3f4a5b6c7d8e0"},
            "tags": ["transformers", "text-generation"],
        },
        "webhook": {"id": "6650f0c1d2e3f4a5b6c7d8ea", "version": 3},
    }


@pytest.fixture
def event(hub_payload) -> RepoEvent:
    return RepoEvent.from_payload(hub_payload)

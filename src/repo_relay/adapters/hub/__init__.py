"""Hugging Face Hub adapters."""

from repo_relay.adapters.hub.hub_client import HubClient

__all__ = ["HubClient"]

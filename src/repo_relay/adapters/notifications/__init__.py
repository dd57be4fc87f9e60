"""Notification adapters."""

from repo_relay.adapters.notifications.discord_notifier import DiscordNotifier

__all__ = ["DiscordNotifier"]

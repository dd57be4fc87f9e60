"""Relay new Hugging Face Hub repositories to a Discord channel."""

__version__ = "0.1.0"

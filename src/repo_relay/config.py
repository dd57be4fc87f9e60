"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class HubConfig:
    """Hugging Face Hub settings."""
    base_url: str = "https://huggingface.co"
    timeout: float = 30.0


@dataclass
class DeliveryConfig:
    """Chat webhook settings."""
    timeout: float = 30.0


@dataclass
class ServerConfig:
    """Inbound webhook server settings."""
    host: str = "0.0.0.0"
    port: int = 8000


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "INFO"


@dataclass
class Settings:
    """Application settings."""

    # Secrets (from environment only)
    discord_webhook_url: Optional[str] = None
    webhook_secret: Optional[str] = None

    # Config sections
    hub: HubConfig = field(default_factory=HubConfig)
    delivery: DeliveryConfig = field(default_factory=DeliveryConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def hub_url(self) -> str:
        return self.hub.base_url.rstrip("/")

    @property
    def log_level(self) -> str:
        return self.logging.level.upper()


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(
        discord_webhook_url=os.getenv("DISCORD_WEBHOOK_URL") or None,
        webhook_secret=os.getenv("HF_WEBHOOK_SECRET") or None,
    )

    sections = {
        "hub": settings.hub,
        "delivery": settings.delivery,
        "server": settings.server,
        "logging": settings.logging,
    }
    for name, section in sections.items():
        for key, value in (config.get(name) or {}).items():
            if not hasattr(section, key):
                raise ValueError(f"Unknown config key: {name}.{key}")
            setattr(section, key, value)

    env_log_level = os.getenv("REPO_RELAY_LOG_LEVEL")
    if env_log_level:
        settings.logging.level = env_log_level

    return settings

"""CLI entry point for repo relay."""

import asyncio
import json
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from repo_relay.adapters.hub import HubClient
from repo_relay.config import Settings, get_settings
from repo_relay.core import MetadataFetchError, RelayOutcome, RepoEvent, is_relevant
from repo_relay.log import setup_logging
from repo_relay.server import build_service, create_app
from repo_relay.use_cases import RelayService

cli = typer.Typer(help="Relay new Hugging Face repositories to Discord.")


@cli.command()
def serve(
    host: Optional[str] = typer.Option(None, help="Bind address (default from config)"),
    port: Optional[int] = typer.Option(None, help="Bind port (default from config)"),
    config: Path = typer.Option(Path("config.yaml"), help="YAML config file"),
) -> None:
    """Run the webhook server."""
    settings = get_settings(config)
    setup_logging(settings.log_level)
    web_app = create_app(settings)
    uvicorn.run(
        web_app,
        host=host or settings.server.host,
        port=port or settings.server.port,
        log_level=settings.log_level.lower(),
    )


def synthetic_event(settings: Settings, repo_id: str, repo_type: str) -> RepoEvent:
    """Build a repo-create event for an existing Hub repository."""
    return RepoEvent(
        scope="repo",
        action="create",
        repo_type=repo_type,
        repo_id=repo_id,
        private=False,
        web_url=f"{settings.hub_url}/{repo_id}",
        api_url=f"{settings.hub_url}/api/{repo_type}s/{repo_id}",
    )


@cli.command()
def announce(
    repo_id: str = typer.Argument(..., help="Repository id, e.g. acme/small-model"),
    repo_type: str = typer.Option("model", "--repo-type", help="model, dataset or space"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Print the payload instead of sending it"),
    config: Path = typer.Option(Path("config.yaml"), help="YAML config file"),
) -> None:
    """Announce one repository as if the Hub had just reported it."""
    settings = get_settings(config)
    setup_logging(settings.log_level)
    if not asyncio.run(async_announce(settings, repo_id, repo_type, dry_run)):
        raise typer.Exit(code=1)


async def async_announce(settings: Settings, repo_id: str, repo_type: str, dry_run: bool) -> bool:
    """Async implementation of announce command."""
    event = synthetic_event(settings, repo_id, repo_type)

    if not is_relevant(repo_id):
        print(f"🚫 {repo_id} matches the denylist, skipped")
        return True

    if dry_run:
        service = RelayService(
            source=HubClient(base_url=settings.hub_url, timeout=settings.hub.timeout)
        )
        try:
            document = await service.build_notification(event)
        except MetadataFetchError as e:
            print(f"⚠️  {e}")
            return False
        print(json.dumps(document.to_payload(), indent=2, ensure_ascii=False))
        return True

    if not settings.discord_webhook_url:
        print("✗ DISCORD_WEBHOOK_URL - not set")
        return False

    outcome = await build_service(settings).handle(event)
    if outcome == RelayOutcome.DELIVERED:
        print(f"✓ {repo_id} sent to Discord")
    else:
        print(f"⚠️  {repo_id}: {outcome.value}")
    return outcome == RelayOutcome.DELIVERED


def app() -> None:
    """CLI entry point."""
    cli()


if __name__ == "__main__":
    app()

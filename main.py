from __future__ import annotations

import asyncio
import logging

import typer

from credentials import credential_source_for
from formatting import format_usage_message
from settings import BACKENDS, PluginSettings, parse_backend
from usage import fetch_usage

app = typer.Typer(
    name="copilot-usage",
    help="Show the remaining GitHub Copilot premium request quota.",
    no_args_is_help=False,
)

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")
    if verbose:
        logger.info("Verbose logging enabled")


async def _show(settings: PluginSettings) -> int:
    source = credential_source_for(settings)
    credentials = await source.resolve()
    if credentials is None:
        logger.error(source.missing_message)
        return 1

    usage = await fetch_usage(settings, credentials)
    if usage is None:
        logger.error("Failed to fetch quota")
        return 1

    if usage.unlimited:
        typer.echo("Premium requests are unlimited on this plan")
        return 0

    typer.echo(format_usage_message(usage))
    return 0


@app.callback()
def main() -> None:
    """Copilot premium request usage."""


@app.command()
def show(
    backend: str | None = typer.Option(
        None,
        "--backend",
        "-b",
        help=f"Quota source, one of: {', '.join(BACKENDS)}",
    ),
    verbose: bool = typer.Option(
        False, "--verbose", "-v", help="Enable verbose logging"
    ),
) -> None:
    _setup_logging(verbose)

    settings = PluginSettings.from_env()
    if backend is not None:
        settings.backend = parse_backend(backend)
    logger.debug("Using %s backend", settings.backend)

    exit_code = asyncio.run(_show(settings))
    if exit_code:
        raise typer.Exit(code=exit_code)


def run() -> None:
    app()


if __name__ == "__main__":
    run()

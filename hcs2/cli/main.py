# hcs2/cli/main.py
"""
CLI for creating HCS-2 topics and submitting HCS-2 messages to them.
"""

import logging
from pathlib import Path
from typing import Callable, Optional

import typer
from rich.console import Console
from rich.markup import escape

from hcs2.config import Settings, load_env_file
from hcs2.errors import ConfigurationError, HCS2Error
from hcs2.flows.create_topic import run_create_topic
from hcs2.flows.submit_message import run_submit_message
from hcs2.log import configure_logging
from hcs2.network import LedgerGateway, create_gateway
from hcs2.prompts import RichPrompter

app = typer.Typer(
    name="hcs2",
    help="Create HCS-2 topics and submit HCS-2 messages on a Hedera network",
    add_completion=False,
    no_args_is_help=True,
)

console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def main(
    env_file: Optional[Path] = typer.Option(
        None,
        "--env-file",
        help="Path to a .env file (default: ./.env if present; set variables win)",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
):
    """Interactive HCS-2 topic tools."""
    configure_logging(verbose)
    if load_env_file(env_file):
        logger.debug("Loaded environment from %s", env_file or ".env")


def load_settings() -> Settings:
    """Validate the environment before the first prompt; exit 1 on failure."""
    try:
        return Settings.from_env()
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        console.print("[yellow]Set OPERATOR_ID, OPERATOR_PRIVATE_KEY and HEDERA_NETWORK "
                      "(environment or .env file).[/]")
        raise typer.Exit(1)


def open_gateway(settings: Settings) -> LedgerGateway:
    try:
        return create_gateway(settings)
    except ConfigurationError as e:
        console.print(f"[red]{escape(str(e))}[/]")
        raise typer.Exit(1)


def _run(flow: Callable) -> None:
    settings = load_settings()
    gateway = open_gateway(settings)

    exit_code = 0
    try:
        with gateway:
            flow(RichPrompter(console), gateway, console)
    except HCS2Error as e:
        # unsupported operation and other fatal usage errors
        console.print(f"[red]{escape(str(e))}[/]")
        exit_code = 1
    except Exception as e:
        # printed, not fatal: exit status stays 0
        logger.debug("Unexpected failure", exc_info=True)
        console.print(f"[red]An unexpected error occurred: {escape(str(e) or type(e).__name__)}[/]")

    if exit_code:
        raise typer.Exit(exit_code)


@app.command("create-topic")
def create_topic():
    """Create a non-indexed HCS-2 topic (memo hcs-2:1:<ttl>), optionally with a new submit key."""
    _run(run_create_topic)


@app.command("submit-message")
def submit_message():
    """Submit a register/delete/update/migrate message to an HCS-2 topic."""
    _run(run_submit_message)


if __name__ == "__main__":
    app()

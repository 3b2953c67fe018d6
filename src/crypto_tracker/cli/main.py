"""CLI for crypto balance tracker."""

import asyncio
import json
import logging
from datetime import datetime
from enum import StrEnum
from pathlib import Path

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.table import Table
from rich.traceback import install

from crypto_tracker.config import AppSettings
from crypto_tracker.core.aggregator import get_portfolio_balance
from crypto_tracker.core.errors import ConfigurationInvalidError
from crypto_tracker.core.models import PortfolioResult
from crypto_tracker.data import (
    GENERATOR_URL,
    REFRESH_INTERVAL_KEY,
    SettingsStore,
    load_configuration_text,
    save_configuration_text,
)

# Install rich traceback handler
install(show_locals=False)

app = typer.Typer(
    name="crypto-tracker",
    help="Show the combined fiat value of your crypto wallets",
    add_completion=False,
)

console = Console()
err_console = Console(stderr=True)

HOME_HELP = "Data directory holding crypto-track.json and settings.yaml"


class OutputFormat(StrEnum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def _configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True, show_path=debug)],
        force=True,
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if debug else logging.WARNING)


@app.command()
def balance(
    format: OutputFormat = typer.Option(
        OutputFormat.TABLE,
        "--format",
        "-f",
        help="Output format",
    ),
    home: Path | None = typer.Option(None, "--home", help=HOME_HELP),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
) -> None:
    """
    Fetch every configured wallet once and print the total.

    Examples:

        # Print the total as a table
        crypto-tracker balance

        # Output as JSON
        crypto-tracker balance --format json
    """
    _configure_logging(debug)
    settings = AppSettings.from_env(home)

    if format == OutputFormat.JSON:
        result = asyncio.run(get_portfolio_balance(settings))
        _output_json(result)
    else:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=err_console,
            transient=True,
        ) as progress:
            progress.add_task("Fetching wallet balances...", total=None)
            result = asyncio.run(get_portfolio_balance(settings))
        _output_table(result)

    if result.successful_wallets == 0:
        raise typer.Exit(code=1)


@app.command()
def watch(
    interval: int | None = typer.Option(
        None,
        "--interval",
        "-i",
        min=1,
        help="Seconds between refreshes (default: refresh-interval setting)",
    ),
    count: int | None = typer.Option(None, "--count", "-n", min=1, help="Stop after this many refreshes"),
    home: Path | None = typer.Option(None, "--home", help=HOME_HELP),
    debug: bool = typer.Option(False, "--debug", "-d", help="Enable debug output"),
) -> None:
    """Refresh the total periodically until interrupted."""
    _configure_logging(debug)
    settings = AppSettings.from_env(home)

    if interval is None:
        interval = SettingsStore(settings.settings_path).get_int(REFRESH_INTERVAL_KEY)

    if debug:
        console.print(f"[dim]Refreshing every {interval}s[/dim]")

    try:
        asyncio.run(_watch(settings, interval, count))
    except KeyboardInterrupt:
        console.print("\n[yellow]Stopped[/yellow]")


async def _watch(settings: AppSettings, interval: int, count: int | None) -> None:
    refreshes = 0
    while True:
        result = await get_portfolio_balance(settings)
        timestamp = datetime.now().strftime("%H:%M:%S")
        style = "bold green" if result.successful_wallets else "yellow"
        console.print(f"[dim]{timestamp}[/dim] [{style}]{escape(result.formatted_text)}[/{style}]")

        refreshes += 1
        if count is not None and refreshes >= count:
            return
        await asyncio.sleep(interval)


@app.command()
def show_config(
    home: Path | None = typer.Option(None, "--home", help=HOME_HELP),
) -> None:
    """Print the wallet configuration document."""
    settings = AppSettings.from_env(home)
    text, complete = load_configuration_text(settings.config_path)
    typer.echo(text)

    if not complete:
        err_console.print(
            "[yellow]Your crypto-track.json (the cryptocurrency config) is empty or invalid. "
            "You can generate a new one at:[/yellow]"
        )
        err_console.print(GENERATOR_URL, style="cyan")


@app.command()
def save_config(
    source: typer.FileText = typer.Argument(..., help="JSON file to save, or '-' for stdin"),
    home: Path | None = typer.Option(None, "--home", help=HOME_HELP),
) -> None:
    """
    Validate and save a wallet configuration document.

    The document is written to crypto-track.json and backed up in settings.yaml.

    Example document:

        [{"CURRENCY": "usd", "SYMBOLS": "$"},
         {"WALLET_ADDRESS": "1A1z...", "SHORTNAME": "btc", "FULLNAME": "bitcoin"}]
    """
    settings = AppSettings.from_env(home)
    store = SettingsStore(settings.settings_path)

    try:
        complete = save_configuration_text(source.read(), settings.config_path, store)
    except ConfigurationInvalidError as e:
        err_console.print(f"[bold red]Error saving JSON configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)
    except OSError as e:
        err_console.print(f"[bold red]Error writing configuration:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=1)

    console.print(f"[green]✓ Saved configuration to[/green] {settings.config_path}")
    if not complete:
        err_console.print("[yellow]Configuration needs a currency header and at least one wallet[/yellow]")
        err_console.print(GENERATOR_URL, style="cyan")


@app.command()
def config_path(
    home: Path | None = typer.Option(None, "--home", help=HOME_HELP),
) -> None:
    """Show where configuration and settings are stored."""
    settings = AppSettings.from_env(home)

    table = Table(title="Files", show_header=True, header_style="bold magenta")
    table.add_column("File", style="cyan")
    table.add_column("Path", style="green")
    table.add_column("Exists", style="yellow")

    for label, path in (("Configuration", settings.config_path), ("Settings", settings.settings_path)):
        table.add_row(label, str(path), "✓" if path.exists() else "-")

    console.print(table)


def _output_table(result: PortfolioResult) -> None:
    """Output portfolio result as rich table."""
    if not result.successful_wallets:
        console.print(f"\n[yellow]{escape(result.formatted_text)}[/yellow]")
        return

    summary_table = Table(show_header=False, box=None)
    summary_table.add_column("Label", style="bold")
    summary_table.add_column("Value", style="bold green")

    summary_table.add_row("Total Value:", escape(result.formatted_text))
    summary_table.add_row("Wallets:", f"{result.successful_wallets}/{result.total_wallets}")

    console.print("\n")
    console.print(summary_table)
    console.print("\n")


def _output_json(result: PortfolioResult) -> None:
    """Output portfolio result as JSON."""
    data = result.model_dump(mode="json")
    typer.echo(json.dumps(data, indent=2))


if __name__ == "__main__":
    app()

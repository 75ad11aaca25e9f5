"""Command-line interface for soage."""

import asyncio
from collections.abc import Awaitable
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from soage import ProfileLookup, ServiceConfig, save_json, __version__
from soage.exceptions import InvalidFormatError, ProfileNotFoundError, UpstreamError
from soage.logging import configure_logging
from soage.models.result import LookupResult

app = typer.Typer(
    name="soage",
    help="Stack Overflow user age checker",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"soage version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
):
    """soage - Stack Overflow user age checker."""
    pass


@app.command()
def user(
    username: str = typer.Argument(..., help="Stack Overflow display name"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save the JSON payload to this file"
    ),
):
    """Look up users by display name (up to 5 matches)."""
    lookup = _make_lookup()
    result = _run(lookup.lookup_username(username))
    _show(result, output)


@app.command("id")
def by_id(
    user_id: str = typer.Argument(..., help="Numeric Stack Overflow user id"),
    output: Optional[Path] = typer.Option(
        None, "--output", "-o", help="Save the JSON payload to this file"
    ),
):
    """Look up a single user by numeric id."""
    lookup = _make_lookup()
    result = _run(lookup.lookup_id(user_id))
    _show(result, output)


@app.command()
def serve(
    host: Optional[str] = typer.Option(None, "--host", help="Bind address"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="Listen port"),
):
    """Run the HTTP API."""
    import uvicorn

    config = ServiceConfig()
    uvicorn.run(
        "soage.api:app",
        host=host or config.host,
        port=port or config.port,
    )


def _make_lookup() -> ProfileLookup:
    config = ServiceConfig()
    configure_logging(config)
    return ProfileLookup(config)


def _run(coro: Awaitable[LookupResult]) -> LookupResult:
    """Run a lookup, turning soage errors into a red message and exit code."""
    try:
        return asyncio.run(coro)
    except (InvalidFormatError, ProfileNotFoundError) as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)
    except UpstreamError as e:
        console.print(f"[red]Stack Exchange API error: {e.message}[/red]")
        if e.details:
            console.print(f"[dim]{e.details}[/dim]")
        raise typer.Exit(2)


def _show(result: LookupResult, output: Path | None) -> None:
    if result.is_multiple:
        _print_candidates(result)
    else:
        _print_profile_table(result)

    if output:
        path = save_json(result, output)
        console.print(f"[dim]Saved to {path}[/dim]")


def _print_profile_table(result: LookupResult):
    """Print a single profile as table."""
    p = result.profile

    table = Table(title=p.username, show_header=False)
    table.add_column("Field", style="dim")
    table.add_column("Value")

    table.add_row("User ID", p.user_id)
    table.add_row("Created", p.estimated_creation_date)
    table.add_row("Account Age", f"{p.account_age} ({p.age_days:,} days)")
    table.add_row("Reputation", f"{int(p.followers):,}")
    table.add_row("Badges", f"{p.total_posts:,}")
    table.add_row("Verified", p.verified)
    table.add_row("Location", p.region)
    table.add_row("Profile", p.profile_link)

    console.print(table)


def _print_candidates(result: LookupResult):
    """Print all matches of an ambiguous username search."""
    table = Table(title=f"{len(result.users)} users matching '{result.query}'")
    table.add_column("User ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Account Age")
    table.add_column("Reputation", justify="right")
    table.add_column("Profile", style="dim")

    for p in result.users:
        table.add_row(
            p.user_id,
            p.username,
            p.account_age,
            f"{int(p.followers):,}",
            p.profile_link,
        )

    console.print(table)
    console.print(f"[yellow]{result.note}[/yellow]")


if __name__ == "__main__":
    app()

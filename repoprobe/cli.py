"""CLI commands for repoprobe."""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from repoprobe.control import RemoteRepositoryControl
from repoprobe.errors import RepositoryError
from repoprobe.models.config import DeployEnvironment
from repoprobe.repository import Repository
from repoprobe.vcs.base import StatusContext

console = Console()


def get_repository(path: str) -> Repository:
    return Repository(path, environment=DeployEnvironment.from_env())


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Show debug logs")
def main(verbose: bool) -> None:
    """repoprobe - Inspect the repository a deploy runs against."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@main.command()
@click.argument("path", default=".")
@click.option("--timeout", "-t", type=float, default=None, help="Status scan timeout in seconds")
@click.pass_context
def status(ctx: click.Context, path: str, timeout: float | None) -> None:
    """Check if the working tree has uncommitted changes."""
    repo = get_repository(path)
    try:
        clean = repo.is_clean(StatusContext(timeout=timeout))
    except RepositoryError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)

    if clean:
        console.print("[green]clean[/green]")
    else:
        console.print("[yellow]dirty[/yellow]")


@main.command()
@click.argument("path", default=".")
@click.pass_context
def sha(ctx: click.Context, path: str) -> None:
    """Print the SHA of the current commit."""
    repo = get_repository(path)
    try:
        commit = repo.get_sha()
    except RepositoryError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        ctx.exit(1)

    click.echo(commit)


@main.command()
@click.argument("url")
def anonymize(url: str) -> None:
    """Print a repository URL without its credentials."""
    click.echo(get_repository(url).get_anonymized_repo())


@main.command()
@click.argument("first")
@click.argument("second")
def compare(first: str, second: str) -> None:
    """Check whether two locations point to the same repository."""
    same = get_repository(first).is_equal(get_repository(second))
    if same:
        console.print("[green]same repository[/green]")
    else:
        console.print("[yellow]different repositories[/yellow]")


@main.command()
@click.argument("path", default=".")
def info(path: str) -> None:
    """Show everything known about a repository."""
    repo = get_repository(path)

    table = Table(title="Repository")
    table.add_column("Property", style="cyan")
    table.add_column("Value")

    mode = "remote" if isinstance(repo.control, RemoteRepositoryControl) else "local"
    table.add_row("Control", mode)
    table.add_row("Location", escape(repo.get_anonymized_repo()) or "[dim]unknown[/dim]")
    table.add_row("Canonical", str(repo.is_canonical()))

    checks = [
        ("Clean", lambda: str(repo.is_clean())),
        ("Commit", repo.get_sha),
        ("Tree", repo.get_tree_sha),
    ]
    for label, check in checks:
        try:
            value = check() or "[dim]unknown[/dim]"
        except RepositoryError as e:
            value = f"[red]{escape(str(e))}[/red]"
        table.add_row(label, value)

    console.print(table)


if __name__ == "__main__":
    main()

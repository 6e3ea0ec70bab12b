"""CLI entry point for golden image comparison."""

from __future__ import annotations

import asyncio
import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from goldens.comparator.base import get_test_uri
from goldens.comparator.local_file import LocalFileComparator
from goldens.comparator.pixel_engine import compare_lists
from goldens.errors import ImageDecodeError
from goldens.reporter.failure_artifacts import write_failure_artifacts

console = Console()


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """Golden image comparison tools"""
    setup_logging(verbose)


@cli.command()
@click.argument("test", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("master", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--out-dir", "-o", type=click.Path(file_okay=False, path_type=Path), help="Write diff images here")
def compare(test: Path, master: Path, out_dir: Path | None) -> None:
    """Compare TEST against the golden MASTER image."""
    try:
        result = compare_lists(test.read_bytes(), master.read_bytes())
    except ImageDecodeError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(2)

    if result.passed:
        console.print("[green]Images match[/green]")
        return

    console.print(f"[red]{result.error}[/red]")
    if out_dir and result.diffs:
        written = write_failure_artifacts(result, out_dir, test.stem)
        table = Table(title="Diff Images")
        table.add_column("Artifact", style="bold")
        table.add_column("Path")
        for name, path in written.items():
            table.add_row(name, f"[blue]{path}[/blue]")
        console.print(table)
    sys.exit(1)


@cli.command()
@click.argument("key")
@click.option("--version", "-n", "version", type=click.IntRange(min=0), default=None, help="Golden version number")
def uri(key: str, version: int | None) -> None:
    """Print the golden locator for KEY at an optional version."""
    click.echo(get_test_uri(key, version))


@cli.command()
@click.argument("test", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.argument("golden")
@click.option("--golden-dir", "-d", default=".", type=click.Path(file_okay=False, path_type=Path), help="Base directory for goldens")
def update(test: Path, golden: str, golden_dir: Path) -> None:
    """Store TEST as the new GOLDEN file."""
    comparator = LocalFileComparator(golden_dir)
    asyncio.run(comparator.update(golden, test.read_bytes()))
    console.print(f"[green]Updated golden:[/green] {comparator.resolve(golden)}")


if __name__ == "__main__":
    cli()

"""Main CLI interface for PomScope."""

import asyncio
import time
from pathlib import Path
from typing import List, Optional
import typer
from rich.console import Console
from rich.panel import Panel

from ..core.models import ExtractConfig, PomFile
from ..core.pipeline import extract_all_package_files
from ..output.formatters import ConsoleFormatter, JSONFormatter
from ..sources.http import HttpFileSource
from ..sources.local import LocalFileSource
from ..utils.logging import setup_logging, get_logger
from ..utils.path_utils import find_pom_files

app = typer.Typer(
    name="pomscope",
    help="Extract Maven dependencies and resolve their versions across multi-module projects",
    add_completion=False
)

console = Console()
logger = get_logger("CLI")


def _report(packages: List[PomFile], elapsed: float, output: Optional[Path]) -> None:
    ConsoleFormatter(console).format_results(packages, elapsed)

    if output:
        json_formatter = JSONFormatter(output)
        json_formatter.save_results(json_formatter.format_results(packages))
        console.print(f"[green]Results saved to: {output}[/green]")


@app.command()
def extract(
    path: Path = typer.Argument(
        Path("."),
        help="Path to the Maven project directory"
    ),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for JSON results"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
    ignore_patterns: Optional[List[str]] = typer.Option(
        None,
        "--ignore",
        help="Additional ignore patterns"
    ),
    registry: Optional[str] = typer.Option(
        None,
        "--registry",
        help="Default registry URL for every dependency"
    ),
    concurrency: Optional[int] = typer.Option(
        None,
        "--concurrency",
        help="Maximum number of files read at once"
    )
) -> None:
    """Extract and resolve dependencies of a local Maven project."""
    setup_logging(verbose=verbose)

    if not path.exists():
        console.print(f"[red]Error: Path does not exist: {path}[/red]")
        raise typer.Exit(1)

    try:
        config = ExtractConfig.from_env(
            default_registry_url=registry,
            max_concurrent=concurrency
        )

        pom_files = find_pom_files(path, ignore_patterns)
        if not pom_files:
            console.print("[yellow]No pom.xml files found[/yellow]")
            return

        console.print(f"Found {len(pom_files)} descriptor files in {path}")

        start_time = time.perf_counter()
        packages = asyncio.run(
            extract_all_package_files(config, pom_files, LocalFileSource(path))
        )
        elapsed = time.perf_counter() - start_time

        _report(packages, elapsed, output)

    except Exception as e:
        logger.error(f"Extraction failed: {e}")
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def fetch(
    base_url: str = typer.Argument(..., help="Base URL the descriptor paths are relative to"),
    files: List[str] = typer.Argument(..., help="Descriptor paths, e.g. pom.xml core/pom.xml"),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        "-o",
        help="Output file for JSON results"
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose logging"
    ),
    registry: Optional[str] = typer.Option(
        None,
        "--registry",
        help="Default registry URL for every dependency"
    )
) -> None:
    """Extract and resolve dependencies of descriptors served over HTTP."""
    setup_logging(verbose=verbose)

    async def run(config: ExtractConfig) -> List[PomFile]:
        async with HttpFileSource(base_url) as source:
            return await extract_all_package_files(config, files, source)

    try:
        config = ExtractConfig.from_env(default_registry_url=registry)

        start_time = time.perf_counter()
        packages = asyncio.run(run(config))
        elapsed = time.perf_counter() - start_time

        _report(packages, elapsed, output)

    except Exception as e:
        logger.error(f"Fetch failed: {e}")
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(1)


@app.command()
def info() -> None:
    """Show PomScope information."""
    config = ExtractConfig.from_env()

    console.print(Panel.fit(
        "[bold blue]PomScope[/bold blue]\n"
        "Extracts dependencies from Maven pom.xml files and resolves\n"
        "${property} versions along parent chains",
        title="Information"
    ))
    console.print(f"\n[bold]Default registry:[/bold] {config.default_registry_url}")
    console.print(f"[bold]Max concurrent reads:[/bold] {config.max_concurrent}")


def main() -> None:
    """Main entry point for PomScope CLI."""
    app()


if __name__ == "__main__":
    main()

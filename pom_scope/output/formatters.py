"""Output formatters for PomScope results."""

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from ..core.models import PomFile, SkipReason
from ..utils.logging import get_logger

_SKIP_STYLES = {
    SkipReason.NAME_PLACEHOLDER: "red",
    SkipReason.VERSION_PLACEHOLDER: "yellow",
    SkipReason.NOT_A_VERSION: "magenta",
}


def summarize(packages: List[PomFile]) -> Dict[str, Any]:
    """Count files, dependencies and skipped dependencies.

    Args:
        packages: Resolved file results

    Returns:
        Summary counters
    """
    skip_counts: Dict[str, int] = {}
    for pkg in packages:
        for dep in pkg.skipped_dependencies():
            skip_counts[dep.skip_reason.value] = skip_counts.get(dep.skip_reason.value, 0) + 1

    return {
        "package_files": len(packages),
        "total_dependencies": sum(len(pkg.dependencies) for pkg in packages),
        "skipped_dependencies": sum(skip_counts.values()),
        "skip_reasons": skip_counts,
    }


class ConsoleFormatter:
    """Rich console formatter for PomScope output."""

    def __init__(self, console: Optional[Console] = None) -> None:
        """Initialize the console formatter.

        Args:
            console: Rich console instance
        """
        self.console = console or Console()

    def format_results(self, packages: List[PomFile], elapsed: Optional[float] = None) -> None:
        """Display one table per descriptor followed by a summary.

        Args:
            packages: Resolved file results
            elapsed: Extraction time in seconds
        """
        for pkg in packages:
            if pkg.dependencies:
                self.console.print(self._create_file_table(pkg))
            else:
                self.console.print(f"[dim]{pkg.file_id}: no dependencies[/dim]")

        self.console.print(self._create_summary_panel(packages, elapsed))

    def _create_file_table(self, pkg: PomFile) -> Table:
        """Create the dependency table of one descriptor.

        Args:
            pkg: File result

        Returns:
            Rich table with the file's dependencies
        """
        title = pkg.file_id or "pom.xml"
        if pkg.parent_file_id:
            title += f" (parent: {pkg.parent_file_id})"

        table = Table(title=title)
        table.add_column("Dependency", style="cyan", no_wrap=True)
        table.add_column("Version", style="blue")
        table.add_column("Line", style="dim", justify="right")
        table.add_column("Property", style="green")
        table.add_column("Status")

        for dep in pkg.dependencies:
            if dep.skip_reason is None:
                status = Text("ok", style="green")
            else:
                status = Text(dep.skip_reason.value, style=_SKIP_STYLES[dep.skip_reason])

            table.add_row(
                Text(dep.group_artifact),
                Text(dep.current_value),
                str(dep.source_position) if dep.source_position is not None else "",
                dep.group_name or "",
                status,
            )

        return table

    def _create_summary_panel(self, packages: List[PomFile], elapsed: Optional[float]) -> Panel:
        summary = summarize(packages)

        lines = [
            f"• Descriptors: {summary['package_files']}",
            f"• Dependencies: {summary['total_dependencies']}",
            f"• Skipped: {summary['skipped_dependencies']}",
        ]
        for reason, count in sorted(summary["skip_reasons"].items()):
            lines.append(f"    {reason}: {count}")
        if elapsed is not None:
            lines.append(f"• Time: {elapsed:.2f}s")

        style = "yellow" if summary["skipped_dependencies"] else "green"
        return Panel("\n".join(lines), title="Extraction Summary", style=style)


class JSONFormatter:
    """JSON formatter for PomScope output."""

    def __init__(self, output_file: Optional[Path] = None) -> None:
        """Initialize the JSON formatter.

        Args:
            output_file: Optional output file path
        """
        self.output_file = output_file
        self.logger = get_logger("JSONFormatter")

    def format_results(
        self,
        packages: List[PomFile],
        metadata: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Format resolved files as JSON data.

        Args:
            packages: Resolved file results
            metadata: Optional additional metadata

        Returns:
            Formatted JSON data
        """
        result = {
            "summary": {
                **summarize(packages),
                "timestamp": datetime.now().isoformat(),
            },
            "packageFiles": [pkg.to_dict() for pkg in packages],
        }

        if metadata:
            result["metadata"] = metadata

        return result

    def save_results(
        self,
        results: Dict[str, Any],
        output_file: Optional[Path] = None
    ) -> None:
        """Save results to JSON file.

        Args:
            results: Results dictionary
            output_file: Output file path (uses instance default if None)
        """
        file_path = output_file or self.output_file
        if not file_path:
            raise ValueError("No output file specified")

        try:
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump(results, f, indent=2, ensure_ascii=False)

            self.logger.info(f"Results saved to {file_path}")
        except IOError as e:
            self.logger.error(f"Failed to save results to {file_path}: {e}")
            raise

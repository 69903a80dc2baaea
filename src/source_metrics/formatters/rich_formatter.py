"""Rich terminal formatter."""

import io
from typing import Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from ..models import AnalysisReport, LengthDistribution
from .base import BaseFormatter


def _complexity_label(score: float) -> str:
    if score >= 50:
        return "[red bold]very high[/red bold]"
    elif score >= 20:
        return "[red]high[/red]"
    elif score >= 10:
        return "[yellow]moderate[/yellow]"
    else:
        return "[green]low[/green]"


class RichFormatter(BaseFormatter):
    """Summary panel followed by tables for each report section."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def render(self, report: AnalysisReport) -> None:
        self._render_to(self.console, report)

    def format(self, report: AnalysisReport) -> str:
        buffer = io.StringIO()
        self._render_to(Console(file=buffer, width=100, no_color=True), report)
        return buffer.getvalue()

    def _render_to(self, console: Console, report: AnalysisReport) -> None:
        self._print_summary(console, report)
        self._print_code_metrics(console, report)
        self._print_lengths(console, report)
        self._print_files(console, report)
        self._print_skipped(console, report)

    def _print_summary(self, console: Console, report: AnalysisReport) -> None:
        s = report.summary
        lines = [
            f"Files: [bold]{s.total_files}[/bold] "
            f"({s.files_analyzed} analyzed, {s.files_skipped} skipped)",
            f"Language: {s.primary_language}",
            f"Lines: {s.total_lines} total, {s.lines_of_code} code, {s.comment_ratio}% comments",
            f"Methods: {s.total_methods}  Classes: {s.total_classes}  Modules: {s.total_modules}",
            f"Complexity: {s.complexity_score} ({_complexity_label(s.complexity_score)})",
            f"Average file size: {s.average_file_size}",
        ]
        if s.most_common_extension:
            lines.append(f"Most common extension: {s.most_common_extension}")
        if s.largest_directory:
            lines.append(f"Largest directory: {escape(s.largest_directory)}")
        console.print(
            Panel("\n".join(lines), title="[bold cyan]Source Metrics[/bold cyan]", expand=False)
        )

    def _print_code_metrics(self, console: Console, report: AnalysisReport) -> None:
        loc = report.code_metrics.lines_of_code
        complexity = report.complexity_analysis.cyclomatic_complexity
        nesting = report.complexity_analysis.nesting_depth
        density = report.code_metrics.method_density

        table = Table(title="Code Metrics", show_header=True, header_style="bold")
        table.add_column("Metric")
        table.add_column("Value", justify="right")
        table.add_row("Code lines", str(loc.code_lines))
        table.add_row("Comment lines", str(loc.comment_lines))
        table.add_row("Blank lines", str(loc.blank_lines))
        table.add_row("Total complexity", str(complexity.total_complexity))
        table.add_row("Max nesting depth", str(nesting.max_nesting_depth))
        table.add_row("Average nesting depth", str(nesting.average_nesting_depth))
        table.add_row("Methods per 100 lines", str(density.methods_per_line))
        console.print(table)

    def _print_lengths(self, console: Console, report: AnalysisReport) -> None:
        table = Table(title="Block Lengths", show_header=True, header_style="bold")
        for column in ("Kind", "Count", "Avg", "Min", "Median", "Max"):
            table.add_column(column, justify="left" if column == "Kind" else "right")

        def row(label: str, dist: LengthDistribution) -> None:
            table.add_row(
                label,
                str(dist.count),
                str(dist.average),
                str(dist.minimum),
                str(dist.median),
                str(dist.maximum),
            )

        row("Methods", report.complexity_analysis.method_length_distribution)
        row("Classes", report.complexity_analysis.class_size_distribution)
        console.print(table)

    def _print_files(self, console: Console, report: AnalysisReport) -> None:
        largest = report.file_analysis.largest_files
        if not largest:
            return
        table = Table(title="Largest Files", show_header=True, header_style="bold")
        table.add_column("File")
        table.add_column("KB", justify="right")
        for f in largest:
            table.add_row(escape(f.path), str(f.size_kb))
        console.print(table)

    def _print_skipped(self, console: Console, report: AnalysisReport) -> None:
        for skipped in report.skipped_files:
            console.print(f"[yellow]Skipped[/yellow] {escape(skipped.path)}: {escape(skipped.reason)}")

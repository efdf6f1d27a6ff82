"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages. Messages go to stderr so that JSON
written to stdout stays machine-readable.
"""


from rich.console import Console
from rich.table import Table
from rich.text import Text

from figsync.domain.records import ExportSummary, FileInfo
from figsync.utils.logging import ExportStats

console = Console(stderr=True)

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]figsync[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator."""
    console.print(f"\n{SYM_STEP} {message}")


def print_source(name: str, file_key: str | None, source: str) -> None:
    """Print where the document was loaded from.

    Args:
        name: Document display name
        file_key: Document identifier, if known
        source: Snapshot path or "REST API"
    """
    line = Text("  ")
    line.append(name, style="bold")
    if file_key:
        line.append(f" ({file_key})")
    console.print(line)
    console.print(f"  {SYM_DOT} {source}")


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    elif seconds < 60:
        return f"{seconds:.1f}s"
    else:
        mins = int(seconds // 60)
        secs = seconds % 60
        return f"{mins}m {secs:.1f}s"


def print_export_summary(
    summary: ExportSummary,
    stats: ExportStats | None = None,
    output_path: str | None = None,
) -> None:
    """Print the result of an export.

    Args:
        summary: Counts of exported records
        stats: Run statistics, if collected
        output_path: Written file, None when printed to stdout
    """
    time_str = _format_time(stats.duration_seconds) if stats else ""
    suffix = f" in {time_str}" if time_str else ""
    console.print(f"\n[bold green]{SYM_OK} Export complete[/bold green]{suffix}")

    if output_path:
        line = Text("  ")
        line.append(output_path, style="bold")
        console.print(line)

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Kind")
    table.add_column("Count", justify="right")
    table.add_row("Components", str(summary.component_count))
    table.add_row("Color styles", str(summary.color_style_count))
    table.add_row("Text styles", str(summary.text_style_count))
    table.add_row("Effect styles", str(summary.effect_style_count))
    console.print(table)

    if stats is None:
        return
    warnings = stats.unresolved_style_refs + stats.unresolved_components + stats.dropped_variant_segments
    if warnings:
        console.print(
            f"  [yellow]{stats.unresolved_style_refs} unresolved styles {SYM_DOT} "
            f"{stats.unresolved_components} unresolved components {SYM_DOT} "
            f"{stats.dropped_variant_segments} dropped variant segments[/yellow]"
        )
    if stats.avg_component_time_ms is not None:
        console.print(f"  {stats.avg_component_time_ms:.1f}ms avg per component")


def print_file_info(info: FileInfo) -> None:
    """Print the file info query result."""
    table = Table(title=info.file_name or "Untitled", show_header=False, title_justify="left")
    table.add_column("Field")
    table.add_column("Value", justify="right")
    table.add_row("File key", info.file_key)
    table.add_row("Pages", str(info.page_count))
    table.add_row("Components", str(info.component_count))
    table.add_row("Color styles", str(info.color_style_count))
    table.add_row("Text styles", str(info.text_style_count))
    table.add_row("Effect styles", str(info.effect_style_count))
    table.add_row("Selected", str(info.selection_count))
    console.print(table)


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

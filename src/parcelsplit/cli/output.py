"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with tables and formatted messages.
"""

from rich.console import Console
from rich.table import Table
from rich.text import Text

from parcelsplit.domain import Extent, SplitDirection, SplitResult, SplitShares

console = Console()

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
    console.print(f"\n[bold]Parcel Splitter[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_parcel_info(
    polygon_path: str,
    vertex_count: int,
    pixel_area: float,
    extent: Extent,
) -> None:
    """Print parcel polygon information.

    Args:
        polygon_path: Path to the polygon file
        vertex_count: Number of polygon vertices
        pixel_area: Polygon area in native pixels
        extent: Native image size
    """
    # Use Text to safely handle paths with special characters
    line1 = Text("  ")
    line1.append(polygon_path)
    line1.append(f" ({vertex_count} vertices)")
    console.print(line1)
    console.print(
        f"  {extent.width:g}x{extent.height:g} px image {SYM_DOT} "
        f"polygon area {pixel_area:,.0f} px²"
    )


def print_split_result(
    result: SplitResult,
    shares: SplitShares,
    direction: SplitDirection,
    total_area: float,
    unit: str,
) -> None:
    """Print the two sides of a split as a table.

    Args:
        result: Evaluated split
        shares: Percentages for the result
        direction: Split orientation
        total_area: Nominal parcel area
        unit: Area unit label
    """
    table = Table(title=f"Split Results ({direction.value})", title_justify="left")
    table.add_column("Side")
    table.add_column(f"Area ({unit})", justify="right")
    table.add_column("Share", justify="right")
    table.add_row(result.label1, f"{result.area1:.2f}", f"{shares.percent1:.1f}%")
    table.add_row(result.label2, f"{result.area2:.2f}", f"{shares.percent2:.1f}%")
    console.print(table)

    console.print(f"  Total defined area input: {total_area:.2f} {unit}")
    if shares.has_precision_note:
        console.print(
            f"  [yellow]Note: total split area ({result.total:.2f}) differs slightly "
            "from initial input due to calculation precision.[/yellow]"
        )


def print_no_split() -> None:
    """Print notice for a split that could not be computed."""
    console.print("  No split could be computed for this polygon and line.")


def print_success(message: str) -> None:
    """Print a success line."""
    console.print(f"\n[bold green]{SYM_OK} {message}[/bold green]")


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

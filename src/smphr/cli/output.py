"""Rich console output helpers for the CLI.

This module provides user-friendly console output using Rich library
with formatted messages.
"""

from rich.console import Console
from rich.text import Text

console = Console()

# Unicode symbols for consistent visual language
SYM_STEP = "▸"  # Step indicator
SYM_OK = "✓"  # Success
SYM_ERR = "✗"  # Error
SYM_WARN = "!"  # Warning
SYM_DOT = "·"  # Separator/secondary info


def print_header(version: str) -> None:
    """Print application header.

    Args:
        version: Application version string
    """
    console.print(f"\n[bold]Smphr[/bold] v{version}")
    console.print("─" * 44)


def print_step(message: str) -> None:
    """Print a processing step indicator.

    Args:
        message: Step description message
    """
    console.print(f"\n{SYM_STEP} {message}")


def print_render_info(width: int, height: int, columns: int, rows: int) -> None:
    """Print canvas information.

    Args:
        width: Image width in pixels
        height: Image height in pixels
        columns: Figures per row
        rows: Number of rows
    """
    console.print(
        f"  {width}x{height} px {SYM_DOT} {columns} figures per row {SYM_DOT} {rows} rows"
    )


def print_skipped(chars: list[str], verbose: bool) -> None:
    """Print the characters that produced no figure.

    Args:
        chars: Skipped characters, in text order
        verbose: Whether to list every character
    """
    console.print(f"  [yellow]{SYM_WARN} {len(chars)} characters skipped[/yellow]")
    if verbose and chars:
        console.print(f"  {' '.join(repr(c) for c in chars[:20])}")
        if len(chars) > 20:
            console.print(f"  {SYM_DOT}{SYM_DOT}{SYM_DOT} (+{len(chars) - 20} more)")


def print_truncated() -> None:
    """Print the vertical overflow notice."""
    console.print(
        f"  [yellow]{SYM_WARN} Vertical overflow[/yellow] {SYM_DOT} the input text was cut"
    )


def _format_time(seconds: float) -> str:
    """Format seconds into human-readable time string."""
    if seconds < 1:
        return f"{seconds * 1000:.0f}ms"
    return f"{seconds:.1f}s"


def print_success(
    output_path: str,
    total_time_s: float,
    drawn: int,
    blank: int,
    skipped: int,
) -> None:
    """Print success message with summary.

    Args:
        output_path: Path to output file
        total_time_s: Total render time in seconds
        drawn: Number of figures drawn
        blank: Number of blank cells (spaces and newlines)
        skipped: Number of skipped characters
    """
    time_str = _format_time(total_time_s)

    console.print(f"\n[bold green]{SYM_OK} Complete[/bold green] in {time_str}")

    line = Text("  ")
    line.append(output_path, style="bold")
    console.print(line)

    skipped_style = "yellow" if skipped > 0 else "green"
    console.print(
        f"  {drawn} figures {SYM_DOT} {blank} blanks {SYM_DOT} "
        f"[{skipped_style}]{skipped} skipped[/{skipped_style}]"
    )


def print_error(message: str, details: str | None = None) -> None:
    """Print error message.

    Args:
        message: Main error message
        details: Optional detailed error information
    """
    console.print(f"\n[bold red]{SYM_ERR} Error:[/bold red] {message}")
    if details:
        console.print(f"  {details}")

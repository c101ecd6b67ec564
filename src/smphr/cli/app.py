"""CLI application entry point for smphr.

This module provides the main CLI interface using Typer.
"""

from pathlib import Path
from typing import Annotated

import typer

from smphr import __version__
from smphr.cli.output import (
    console,
    print_error,
    print_header,
    print_render_info,
    print_skipped,
    print_step,
    print_success,
    print_truncated,
)
from smphr.config import CanvasConfig, LoggingConfig, SmphrSettings
from smphr.config.settings import DEFAULT_HEIGHT, DEFAULT_WIDTH
from smphr.core import render_text, validate_text
from smphr.core.anatomy import CELL_HEIGHT, CELL_WIDTH
from smphr.exceptions import ImageSaveError, SmphrError
from smphr.io import ImageWriter
from smphr.utils import RenderLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="smphr",
    help="Generate semaphore images from text.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Smphr[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def render(
    path: Annotated[
        Path,
        typer.Argument(
            help="Path of output image to be written",
            show_default=False,
        ),
    ],
    data: Annotated[
        str,
        typer.Argument(
            help="The text to be translated in semaphore",
            show_default=False,
        ),
    ],
    height: Annotated[
        int,
        typer.Option(
            "--height",
            "-h",
            help="Output image height in pixels (at least 1, invalid values are rejected)",
            min=1,
        ),
    ] = DEFAULT_HEIGHT,
    width: Annotated[
        int,
        typer.Option(
            "--width",
            "-w",
            help="Output image width in pixels (at least 1, invalid values are rejected)",
            min=1,
        ),
    ] = DEFAULT_WIDTH,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Render a text as a picture of semaphore flag figures.

    Each letter becomes a figure holding two flags; spaces and newlines leave
    an empty cell. Figures wrap to a new row at the right edge of the image,
    and text that does not fit vertically is cut.

    Example:
        smphr hello.png "hello world"
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    settings = SmphrSettings(
        canvas=CanvasConfig(width=width, height=height),
        logging=LoggingConfig(
            log_file=log_file,
            log_level=log_level if not quiet else "ERROR",
        ),
    )

    try:
        validate_text(data)

        logger = configure_logging(
            log_file=settings.logging.log_file,
            console_level=settings.logging.log_level,
            file_level=settings.logging.file_log_level,
            quiet=quiet,
        )

        if not quiet:
            print_header(__version__)
            print_step("Rendering")
            print_render_info(
                width=settings.canvas.width,
                height=settings.canvas.height,
                columns=max(settings.canvas.width // CELL_WIDTH, 1),
                rows=max(settings.canvas.height // CELL_HEIGHT, 1),
            )

        result = render_text(
            settings.canvas.width,
            settings.canvas.height,
            data,
            render_logger=RenderLogger(logger),
        )

        if not quiet:
            if result.skipped_chars:
                print_skipped(result.skipped_chars, verbose)
            if result.truncated:
                print_truncated()
            print_step("Saving")

        ImageWriter(path).save(result.canvas)

        if not quiet:
            print_success(
                output_path=str(path),
                total_time_s=result.stats.duration_seconds,
                drawn=result.stats.drawn_count,
                blank=result.stats.blank_count,
                skipped=result.stats.skipped_count,
            )

    except ImageSaveError as e:
        print_error(
            f"Could not write output file: {e.reason}",
            details=f"Check that '{path.parent}' exists and is writable.",
        )
        raise typer.Exit(code=1)
    except SmphrError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

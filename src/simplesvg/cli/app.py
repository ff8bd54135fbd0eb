"""CLI application entry point for simplesvg.

This module provides the main CLI interface using Typer.
"""

import sys
from pathlib import Path
from typing import Annotated

import typer

from simplesvg import __version__
from simplesvg.cli.output import (
    console,
    print_error,
    print_header,
    print_palette,
    print_scene_info,
    print_step,
    print_success,
)
from simplesvg.config import (
    LayoutConfig,
    LoggingConfig,
    OriginName,
    OutputConfig,
    SimpleSvgSettings,
)
from simplesvg.core import SceneRenderer
from simplesvg.exceptions import (
    DocumentSaveError,
    SceneFormatError,
    SceneLoadError,
    SimpleSvgError,
)
from simplesvg.io import DocumentWriter, Scene

# Create the Typer app
app = typer.Typer(
    name="simplesvg",
    help="Render JSON scene descriptions to SVG 1.1 documents.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]simplesvg[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
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
    """Render JSON scene descriptions to SVG 1.1 documents."""


@app.command()
def render(
    scene: Annotated[
        Path,
        typer.Argument(
            help="Path to a JSON scene file",
            show_default=False,
        ),
    ],
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: {scene}.svg)",
        ),
    ] = None,
    origin: Annotated[
        OriginName,
        typer.Option(
            "--origin",
            help="Origin corner used when the scene has no layout",
            case_sensitive=False,
        ),
    ] = OriginName.BOTTOM_LEFT,
    scale: Annotated[
        float,
        typer.Option(
            "--scale",
            "-s",
            help="Layout scale used when the scene has no layout",
        ),
    ] = 1.0,
    apply_layout: Annotated[
        bool,
        typer.Option(
            "--apply-layout",
            help="Translate shape coordinates through the layout",
        ),
    ] = False,
    stdout: Annotated[
        bool,
        typer.Option(
            "--stdout",
            help="Print the SVG instead of writing a file",
        ),
    ] = False,
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
) -> None:
    """Render a JSON scene to an SVG file.

    Example:
        simplesvg render drawing.json -o drawing.svg
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if scale <= 0:
        print_error(f"Invalid scale: {scale:g}", details="Scale must be greater than zero.")
        raise typer.Exit(code=1)

    if not scene.is_file():
        print_error(
            f"Scene file not found: {scene}",
            details=f"The file '{scene}' does not exist or is not a file.",
        )
        raise typer.Exit(code=1)

    settings = SimpleSvgSettings(
        layout=LayoutConfig(origin=origin, scale=scale),
        output=OutputConfig(apply_layout=apply_layout),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )

    try:
        renderer = SceneRenderer(settings)

        if stdout:
            sys.stdout.write(renderer.render_text(scene))
            return

        def on_scene_loaded(parsed: Scene, layout: LayoutConfig) -> None:
            print_scene_info(
                scene_path=str(scene),
                shape_count=len(parsed.shapes),
                origin=layout.origin.value,
                scale=layout.scale,
            )
            print_step("Rendering")

        if not quiet:
            print_header(__version__)
            print_step("Loading scene")

        output_path = output or DocumentWriter.get_output_path(scene)
        stats = renderer.render(
            scene,
            output_path,
            scene_callback=None if quiet else on_scene_loaded,
        )

        if not quiet:
            print_success(
                output_path=str(output_path),
                size_bytes=stats.bytes_written,
                total_time_s=stats.duration_seconds,
                shapes_by_kind=stats.shapes_by_kind,
            )

    except SceneLoadError as e:
        print_error(f"Could not load scene: {e.reason}")
        raise typer.Exit(code=1)
    except SceneFormatError as e:
        print_error("Invalid scene", details=e.details)
        raise typer.Exit(code=1)
    except DocumentSaveError as e:
        print_error(f"Could not save document: {e.reason}")
        raise typer.Exit(code=1)
    except SimpleSvgError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def palette() -> None:
    """List the named colors available in scenes."""
    print_palette()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

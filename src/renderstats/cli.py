"""
CLI entry point for renderstats.

This module provides the Typer-based command-line interface.

Commands:
    summarize   Print the statistics summary for a geometry result
    categories  List the summary categories that can be requested

Architecture Note:
    The CLI only parses arguments and loads input documents. Reporting is
    done by RenderStatistic, so the same summary can be produced
    programmatically without the CLI.
"""

import json
import traceback
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from renderstats import __version__
from renderstats.config import ReportConfig, build_caches, load_config
from renderstats.engine import RenderStatistic
from renderstats.errors import RenderStatsError
from renderstats.logging_config import setup_logging
from renderstats.schema import Camera, Category, load_camera, load_geometry

app = typer.Typer(
    name="renderstats",
    help="Summarize computed geometry: shape metrics, caches, timing and camera.",
    add_completion=False,
    no_args_is_help=True,
)

# stdout may carry the JSON summary, so messages go to stderr
console = Console()
err_console = Console(stderr=True)

CATEGORY_HELP = {
    Category.ALL: "Every category",
    Category.GEOMETRY: "Shape metrics: dimensions, convexity, facet and vertex counts",
    Category.BOUNDING_BOX: "Bounding box min, max and size",
    Category.AREA: "Area of 2D objects (log output)",
    Category.CAMERA: "Camera translation, rotation, distance and field of view",
    Category.CACHE: "Cache entries, bytes used and capacity",
    Category.TIME: "Total rendering time",
}


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold]renderstats[/bold] version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        Optional[bool],
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """
    renderstats - Statistics summaries for computed geometry.
    """
    pass


def parse_camera_argument(value: str) -> list[float]:
    """
    Parse a ``tx,ty,tz,rx,ry,rz,distance`` camera argument.

    Raises:
        ValueError: If a component is not a number
    """
    try:
        return [float(part) for part in value.split(",")]
    except ValueError as e:
        msg = f"Invalid camera argument: {value}"
        raise ValueError(msg) from e


@app.command()
def summarize(
    geometry_path: Annotated[
        Optional[Path],
        typer.Argument(
            help="Geometry result file (YAML or JSON). Omit for a report without geometry.",
            exists=True,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    summary: Annotated[
        Optional[list[str]],
        typer.Option(
            "--summary",
            "-s",
            help="Category to report (repeatable): all, geometry, bounding_box, area, camera, cache, time.",
        ),
    ] = None,
    summary_file: Annotated[
        Optional[str],
        typer.Option(
            "--summary-file",
            help="Write a JSON summary to this file, or '-' for stdout. Default: log output.",
        ),
    ] = None,
    camera: Annotated[
        Optional[str],
        typer.Option(
            "--camera",
            help="Camera as tx,ty,tz,rx,ry,rz,distance.",
        ),
    ] = None,
    camera_file: Annotated[
        Optional[Path],
        typer.Option(
            "--camera-file",
            help="Camera document (YAML or JSON).",
            exists=True,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    fov: Annotated[
        Optional[float],
        typer.Option(
            "--fov",
            help="Camera field of view in degrees.",
        ),
    ] = None,
    config_path: Annotated[
        Optional[Path],
        typer.Option(
            "--config",
            "-c",
            help="Config YAML with default categories, destination and cache sizes.",
            exists=True,
            readable=True,
            resolve_path=True,
        ),
    ] = None,
    log_file: Annotated[
        Optional[str],
        typer.Option(
            "--log-file",
            help="Also write log output to this file.",
        ),
    ] = None,
    rich: Annotated[
        bool,
        typer.Option(
            "--rich",
            help="Decorate log output with Rich (level column and colors).",
        ),
    ] = False,
    debug: Annotated[
        bool,
        typer.Option(
            "--debug",
            help="Enable debug mode with full error tracebacks.",
        ),
    ] = False,
) -> None:
    """
    Print the statistics summary for a geometry result.

    Without --summary-file the summary goes to the log, where cache and
    timing are always shown. With --summary-file only the requested
    categories are written as JSON.

    Example:
        $ renderstats summarize cube.yaml -s geometry -s bounding_box --summary-file -
    """
    try:
        config = load_config(config_path) if config_path else ReportConfig()
        requested = summary if summary else config.categories
        destination = summary_file if summary_file is not None else config.destination

        setup_logging(log_file=log_file, rich_output=rich)

        stats = RenderStatistic(
            caches=build_caches(config),
            nef_backend=config.nef_backend,
            indent=config.indent,
        )
        stats.start()

        geometry = load_geometry(geometry_path) if geometry_path else None
        view = _resolve_camera(camera, camera_file, fov)

        stats.print_all(geometry, view, requested, destination)
    except RenderStatsError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        raise typer.Exit(code=1)
    except ValueError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]", highlight=False)
        if debug:
            err_console.print(f"[dim]{escape(traceback.format_exc())}[/dim]")
        raise typer.Exit(code=1)


def _resolve_camera(camera: str | None, camera_file: Path | None, fov: float | None) -> Camera:
    if camera_file is not None:
        view = load_camera(camera_file)
        if fov is not None:
            view = view.model_copy(update={"fov": fov})
        return view
    if camera is not None:
        return Camera.from_arguments(parse_camera_argument(camera), fov=fov)
    if fov is not None:
        return Camera(fov=fov)
    return Camera()


@app.command()
def categories(
    json_output: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Output results in JSON format.",
        ),
    ] = False,
) -> None:
    """
    List the summary categories that can be requested.

    Example:
        $ renderstats categories
    """
    if json_output:
        print(json.dumps({
            "categories": [category.value for category in Category],
        }, indent=2))
        return

    table = Table(title="Summary Categories", show_header=True, header_style="bold")
    table.add_column("Name", style="cyan")
    table.add_column("Description")
    for category in Category:
        table.add_row(category.value, CATEGORY_HELP[category])
    console.print(table)


if __name__ == "__main__":
    app()

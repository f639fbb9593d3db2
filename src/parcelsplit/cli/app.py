"""CLI application entry point for parcelsplit.

This module provides the main CLI interface using Typer.
"""

import json
import math
from pathlib import Path
from typing import Annotated

import typer
from pydantic import ValidationError

from parcelsplit import __version__
from parcelsplit.cli.output import (
    console,
    print_error,
    print_header,
    print_no_split,
    print_parcel_info,
    print_split_result,
    print_step,
    print_success,
)
from parcelsplit.config import (
    LoggingConfig,
    ParcelSplitSettings,
    SplitConfig,
    get_default_settings,
)
from parcelsplit.core import evaluate_split, polygon_area, split_shares
from parcelsplit.domain import Extent, SplitDirection, SplitSpec
from parcelsplit.exceptions import ImageLoadError, ParcelSplitError, PolygonFileError
from parcelsplit.io import read_image_extent, read_polygon
from parcelsplit.utils import configure_logging

# Create the Typer app
app = typer.Typer(
    name="parcelsplit",
    help="Divide a parcel's known area along a vertical or horizontal split line.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Parcel Splitter[/bold blue] v{__version__}")
        raise typer.Exit()


@app.command()
def split(
    polygon_file: Annotated[
        Path,
        typer.Argument(
            help="JSON file with the parcel polygon in native image coordinates",
            show_default=False,
        ),
    ],
    at: Annotated[
        float,
        typer.Option(
            "--at",
            help="Split line position (x for vertical, y for horizontal)",
            show_default=False,
        ),
    ],
    area: Annotated[
        float | None,
        typer.Option(
            "--area",
            "-a",
            help="Known real-world area of the parcel [default: 1264]",
        ),
    ] = None,
    direction: Annotated[
        str | None,
        typer.Option(
            "--direction",
            "-d",
            help="Split direction (vertical|horizontal) [default: vertical]",
        ),
    ] = None,
    image: Annotated[
        Path | None,
        typer.Option(
            "--image",
            "-i",
            help="Parcel image; its native size is used as the extent",
        ),
    ] = None,
    width: Annotated[
        float | None,
        typer.Option(
            "--width",
            help="Native image width (instead of --image)",
        ),
    ] = None,
    height: Annotated[
        float | None,
        typer.Option(
            "--height",
            help="Native image height (instead of --image)",
        ),
    ] = None,
    unit: Annotated[
        str | None,
        typer.Option(
            "--unit",
            help="Area unit label [default: sq m]",
        ),
    ] = None,
    as_json: Annotated[
        bool,
        typer.Option(
            "--json",
            help="Print the result as JSON",
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
        str | None,
        typer.Option(
            "--log-level",
            help="Log file level (DEBUG|INFO|WARNING|ERROR) [default: WARNING]",
        ),
    ] = None,
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
    """Split a parcel polygon along a straight line and report both areas.

    The polygon's known area is divided in proportion to the pixel areas
    on either side of the line.

    Example:
        parcelsplit parcel.json --image parcel.png --area 1264 --at 420
    """
    defaults = get_default_settings()

    try:
        split_direction = (
            SplitDirection(direction.lower())
            if direction is not None
            else defaults.split.direction
        )
    except ValueError:
        print_error(
            f"Invalid direction: {direction}",
            details="Valid values: vertical, horizontal",
        )
        raise typer.Exit(code=1)

    total_area = defaults.split.total_area if area is None else area
    if not math.isfinite(total_area) or total_area <= 0:
        print_error(f"Invalid area: {total_area}", details="The parcel area must be positive.")
        raise typer.Exit(code=1)

    if image is None and (width is None or height is None):
        print_error(
            "No image extent given",
            details="Pass --image, or both --width and --height.",
        )
        raise typer.Exit(code=1)

    if image is None and not all(math.isfinite(v) and v > 0 for v in (width, height)):
        print_error(
            f"Invalid extent: {width}x{height}",
            details="Width and height must be positive numbers.",
        )
        raise typer.Exit(code=1)

    try:
        logging_config = LoggingConfig(
            log_file=log_file,
            log_level=log_level.upper() if log_level is not None else defaults.logging.log_level,
        )
    except ValidationError:
        print_error(
            f"Invalid log level: {log_level}",
            details="Valid values: DEBUG, INFO, WARNING, ERROR",
        )
        raise typer.Exit(code=1)

    settings = ParcelSplitSettings(
        split=SplitConfig(
            total_area=total_area,
            direction=split_direction,
            area_unit=unit if unit is not None else defaults.split.area_unit,
        ),
        logging=logging_config,
    )

    logger = None
    if settings.logging.log_file is not None:
        logger = configure_logging(
            log_file=settings.logging.log_file,
            file_level=settings.logging.log_level,
            quiet=True,
        )

    unit = settings.split.area_unit
    show = not quiet and not as_json

    try:
        if show:
            print_header(__version__)
            print_step("Loading parcel")

        if image is not None:
            extent = read_image_extent(image)
        else:
            extent = Extent(width, height)

        polygon = read_polygon(polygon_file)
        if len(polygon) < 3:
            print_error(
                f"Polygon has {len(polygon)} vertices",
                details="At least three vertices are needed to define a parcel.",
            )
            raise typer.Exit(code=1)

        if show:
            print_parcel_info(
                polygon_path=str(polygon_file),
                vertex_count=len(polygon),
                pixel_area=polygon_area(polygon),
                extent=extent,
            )
            print_step("Splitting")

        limit = extent.width if split_direction is SplitDirection.VERTICAL else extent.height
        coordinate = max(0.0, min(at, limit))
        spec = SplitSpec(split_direction, coordinate)

        result = evaluate_split(polygon, settings.split.total_area, spec, extent)
        shares = split_shares(result, settings.split.total_area)
        if logger is not None:
            logger.info(
                "Split evaluated",
                direction=split_direction.value,
                coordinate=coordinate,
                area1=round(result.area1, 2),
                area2=round(result.area2, 2),
            )

        if as_json:
            payload = result.to_dict()
            payload["percent1"] = shares.percent1
            payload["percent2"] = shares.percent2
            payload["direction"] = split_direction.value
            payload["coordinate"] = coordinate
            console.print_json(json.dumps(payload))
            return

        if quiet:
            console.print(f"{result.label1}: {result.area1:.2f} {unit}")
            console.print(f"{result.label2}: {result.area2:.2f} {unit}")
            return

        if result.is_empty:
            print_no_split()
        else:
            print_split_result(result, shares, split_direction, settings.split.total_area, unit)
        print_success("Done")

    except ImageLoadError as e:
        print_error(f"Could not load image: {e.reason}")
        raise typer.Exit(code=1)
    except PolygonFileError as e:
        print_error(f"Could not read polygon: {e.reason}")
        raise typer.Exit(code=1)
    except ParcelSplitError as e:
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

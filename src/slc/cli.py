"""Command line entry points for `rowslc` and `colslc`."""

from typing import Annotated

import typer
from loguru import logger

from slc import __version__
from slc.configuration import SliceConfig, SliceMode
from slc.errors import SliceError
from slc.slicers import SLICERS, SliceStats
from slc.source import open_sink, open_source
from slc.utils import Profiler, configure_logging

rowslc_app = typer.Typer(add_completion=False, help="Select rows (lines) of text by position.")
colslc_app = typer.Typer(add_completion=False, help="Select whitespace-delimited columns of text by position.")

PathArgument = Annotated[
    str | None,
    typer.Argument(help="Path to input file. Reads standard input when omitted or '-'.", show_default=False),
]
FiltersOption = Annotated[
    list[str] | None,
    typer.Option(
        "-f",
        "--filters",
        help="Filters to be applied: N, N:M, N:, :M or ':'. Repeat to select the union.",
        show_default=False,
    ),
]
VerboseOption = Annotated[bool, typer.Option("-v", "--verbose", help="Log progress to standard error.")]


def _version_callback(prog: str):  # noqa: ANN202
    def callback(value: bool) -> None:  # noqa: FBT001
        if value:
            typer.echo(f"{prog} {__version__}")
            raise typer.Exit

    return callback


def run(config: SliceConfig) -> SliceStats:
    """Slice the configured source to standard output.

    Args:
        config (SliceConfig): The validated options for the run.

    Returns:
        SliceStats: The number of lines read and written.
    """
    slicer = SLICERS[config.mode](config.filters)
    logger.debug(f"Running {type(slicer).__name__} on {config.source}")

    with Profiler(f"slice-{config.mode.value}"), open_source(config.source) as reader, open_sink() as writer:
        return slicer.slice(reader, writer)


def _main(mode: SliceMode, path: str | None, filters: list[str] | None, *, verbose: bool) -> None:
    try:
        config = SliceConfig.load(mode, path, filters, verbose=verbose)
        configure_logging(verbose=config.verbose)
        run(config)
    except SliceError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc


@rowslc_app.command()
def rowslc(
    path: PathArgument = None,
    filters: FiltersOption = None,
    verbose: VerboseOption = False,  # noqa: FBT002
    version: Annotated[  # noqa: ARG001, FBT002
        bool,
        typer.Option("--version", callback=_version_callback("rowslc"), is_eager=True, help="Show the version."),
    ] = False,
) -> None:
    """Print the lines of PATH whose line numbers match the filters."""
    _main(SliceMode.ROWS, path, filters, verbose=verbose)


@colslc_app.command()
def colslc(
    path: PathArgument = None,
    filters: FiltersOption = None,
    verbose: VerboseOption = False,  # noqa: FBT002
    version: Annotated[  # noqa: ARG001, FBT002
        bool,
        typer.Option("--version", callback=_version_callback("colslc"), is_eager=True, help="Show the version."),
    ] = False,
) -> None:
    """Print the columns of each line of PATH whose positions match the filters."""
    _main(SliceMode.COLUMNS, path, filters, verbose=verbose)

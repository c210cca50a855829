"""CLI entrypoint for splitting NZB files."""

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.markup import escape

from .config import SplitSettings, load_settings
from .errors import ConstraintViolation, InvalidArgument, ParseError
from .logging_setup import configure_logging
from .models import Manifest
from .orchestrator import SplitConstraint, split_manifest, write_parts
from .parser import parse_manifest_file
from .sizes import format_size, parse_size

console = Console()
app = typer.Typer(
    help="Split an NZB file into smaller NZB files by size or by count.",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.command()
def split(  # noqa: PLR0913
    nzb_file: Annotated[
        Path,
        typer.Argument(..., help="NZB file to split.", show_default=False),
    ],
    max_split_size: Annotated[
        str | None,
        typer.Option(
            "--max-split-size",
            "-s",
            help="Maximum size of each part, e.g. 500M or 2GB.",
        ),
    ] = None,
    number: Annotated[
        int | None,
        typer.Option("--number", "-n", help="Split into exactly this many parts."),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", "-o", help="Directory for the split parts."),
    ] = None,
    zero_padding: Annotated[
        int | None,
        typer.Option("--zero-padding", "-p", min=0, help="Zero-pad part numbers to this many digits."),
    ] = None,
    config_path: Annotated[
        str | None,
        typer.Option("--config", "-c", help="Path to an optional nzbsplit.yml settings file."),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Print information about the split NZB files."),
    ] = False,
) -> None:
    """Split NZB_FILE by maximum part size (-s) or by number of parts (-n)."""
    configure_logging(verbose)

    if not nzb_file.is_file():
        raise typer.BadParameter(f"Unable to find the NZB file at {nzb_file}", param_hint="'NZB_FILE'")
    constraint = _constraint(max_split_size, number)
    settings = _settings(config_path, output_dir, zero_padding)

    try:
        manifest = parse_manifest_file(nzb_file)
    except ParseError as exc:
        console.print(f"[bold red]Cannot read NZB[/]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    if verbose:
        _print_source_summary(nzb_file, manifest)

    try:
        parts = split_manifest(manifest, constraint)
    except ConstraintViolation as exc:
        console.print(f"[bold red]Cannot split[/]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    try:
        written = write_parts(parts, nzb_file, settings)
    except OSError as exc:
        console.print(f"[bold red]Write failed[/]: {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    console.print(
        "[bold green]Split[/]: "
        f"wrote {len(written)} part(s) to {escape(str(settings.output_dir))}"
    )


def _constraint(max_split_size: str | None, number: int | None) -> SplitConstraint:
    max_size: int | None = None
    if max_split_size is not None:
        try:
            max_size = parse_size(max_split_size)
        except InvalidArgument as exc:
            raise typer.BadParameter(str(exc), param_hint="'--max-split-size'") from exc
    try:
        return SplitConstraint.build(max_size=max_size, count=number)
    except InvalidArgument as exc:
        raise typer.BadParameter(
            f"{exc} Use --max-split-size or --number (see --help).",
            param_hint="'--max-split-size' / '--number'",
        ) from exc


def _settings(config_path: str | None, output_dir: Path | None, zero_padding: int | None) -> SplitSettings:
    try:
        settings = load_settings(config_path)
    except FileNotFoundError as exc:
        raise typer.BadParameter(f"Config file not found: {config_path}", param_hint="'--config'") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="'--config'") from exc

    overrides: dict[str, object] = {}
    if output_dir is not None:
        overrides["output_dir"] = output_dir
    if zero_padding is not None:
        overrides["zero_padding"] = zero_padding
    return settings.model_copy(update=overrides)


def _print_source_summary(nzb_file: Path, manifest: Manifest) -> None:
    console.print(
        "[bold blue]Source[/]: "
        f"{escape(nzb_file.name)} contains {len(manifest.files)} file(s) "
        f"totalling {format_size(manifest.total_size)}; "
        f"largest file {format_size(manifest.largest_file_size)}"
    )

"""
Main CLI application.

Entry point for csvrecord command.
"""

from __future__ import annotations

import logging
from pathlib import Path  # noqa: TC003
from typing import Annotated

import typer

import csvrecord
from csvrecord.cli.context import CliContext, DialectOverrides, ExitCode
from csvrecord.cli.output import OutputAdapter, OutputFormat, get_output_adapter
from csvrecord.core.parser import Dialect, DialectConfigError, RecordParseError, parse

# Create main app
app = typer.Typer(
    name="csvrecord",
    help="Parse single CSV/TSV records under a configurable dialect",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"csvrecord {csvrecord.__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Parse single CSV/TSV records under a configurable dialect."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


# =============================================================================
# Shared option handling
# =============================================================================

DialectOption = Annotated[
    str | None,
    typer.Option("--dialect", "-d", help="Dialect name (csv, tsv or one from --config)"),
]
ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="YAML file with additional dialects"),
]
FormatOption = Annotated[
    str,
    typer.Option("--format", "-f", help="Output format: terminal, json"),
]


def _get_adapter(format: str, color: bool = True) -> OutputAdapter:
    try:
        return get_output_adapter(OutputFormat(format), color=color)
    except ValueError:
        typer.echo(f"Unknown format: {format}", err=True)
        typer.echo("Available formats: terminal, json", err=True)
        raise typer.Exit(ExitCode.USAGE) from None


def _resolve_dialect(ctx: CliContext, overrides: DialectOverrides | None = None) -> Dialect:
    try:
        return ctx.get_dialect(overrides)
    except KeyError:
        name = ctx.resolved_dialect_name()
        typer.echo(f"Dialect not found: {name}", err=True)
        typer.echo("Available dialects:", err=True)
        for known in sorted(ctx.known_dialects()):
            typer.echo(f"  - {known}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None
    except DialectConfigError as e:
        typer.echo(f"Invalid dialect configuration: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None


# =============================================================================
# Parse Command
# =============================================================================


@app.command("parse")
def parse_command(
    record: Annotated[str, typer.Argument(help="One complete record (use -- before records starting with '-')")],
    dialect: DialectOption = None,
    config: ConfigOption = None,
    separator: Annotated[
        str | None,
        typer.Option("--separator", "-s", help="Separator character (or alias: tab, comma, ...)"),
    ] = None,
    quote: Annotated[
        str | None,
        typer.Option("--quote", "-q", help="Quote character"),
    ] = None,
    no_quote: Annotated[
        bool,
        typer.Option("--no-quote", help="Disable quoting"),
    ] = False,
    escape: Annotated[
        str | None,
        typer.Option("--escape", "-e", help="Escape character"),
    ] = None,
    empty_value: Annotated[
        str | None,
        typer.Option("--empty-value", help="Substitute for absent (zero-length unquoted) fields"),
    ] = None,
    trim: Annotated[
        bool,
        typer.Option("--trim", help="Trim whitespace around fields"),
    ] = False,
    single_quote: Annotated[
        bool,
        typer.Option("--single-quote", help="Tolerate unescaped quotes inside quoted fields"),
    ] = False,
    format: FormatOption = "terminal",
    color: Annotated[
        bool,
        typer.Option("--color/--no-color", help="Enable/disable colored output"),
    ] = True,
) -> None:
    """Parse one record and print its fields."""
    adapter = _get_adapter(format, color=color)

    ctx = CliContext(dialect_name=dialect, config_file=config)
    overrides = DialectOverrides(
        separator=separator,
        quote=quote,
        no_quote=no_quote,
        escape=escape,
        empty_value=empty_value,
        trim=trim or None,
        single_quote=single_quote or None,
    )
    resolved = _resolve_dialect(ctx, overrides)

    try:
        fields = parse(resolved, record)
    except RecordParseError as e:
        typer.echo(adapter.render_error(e, record))
        raise typer.Exit(ExitCode.PARSE_ERROR) from None

    typer.echo(adapter.render_fields(fields, resolved))


# =============================================================================
# Describe Command
# =============================================================================


@app.command()
def describe(
    dialect: DialectOption = None,
    config: ConfigOption = None,
) -> None:
    """Print the settings of a dialect."""
    ctx = CliContext(dialect_name=dialect, config_file=config)
    typer.echo(str(_resolve_dialect(ctx)))


# =============================================================================
# Dialects Command
# =============================================================================


@app.command()
def dialects(
    config: ConfigOption = None,
    format: FormatOption = "terminal",
) -> None:
    """List all known dialects."""
    adapter = _get_adapter(format, color=False)
    ctx = CliContext(config_file=config)

    try:
        known = ctx.known_dialects()
    except DialectConfigError as e:
        typer.echo(f"Invalid dialect configuration: {e}", err=True)
        raise typer.Exit(ExitCode.CONFIG) from None

    typer.echo(adapter.render_dialects(known))


if __name__ == "__main__":
    app()

"""Main CLI application entry point.

Defines the Typer application: a single command that prunes one
dependency tree and prints a report.
"""

from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from nodeprune import __version__
from nodeprune.cli.display import print_report, print_report_json
from nodeprune.config import ConfigError, load_config
from nodeprune.core.log import configure_logging
from nodeprune.core.theme import use_colors
from nodeprune.engine import Pruner
from nodeprune.utils.formatting import apply_theme, err_console, print_error

app = typer.Typer(
    name="nodeprune",
    help="Remove unnecessary files from node_modules and other dependency trees.",
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


class OutputFormat(str, Enum):
    """Output format options for the report."""

    TABLE = "table"
    JSON = "json"


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"nodeprune version {__version__}")
        raise typer.Exit()


@app.command()
def main(
    directory: Annotated[
        Path | None,
        typer.Argument(
            help="Directory to prune. Defaults to node_modules or the configured directory.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Verbose log output."),
    ] = False,
    include: Annotated[
        list[str] | None,
        typer.Option(
            "--include",
            "-i",
            help="Pattern that should always be pruned in addition to the defaults. "
            "Can be specified multiple times.",
        ),
    ] = None,
    exclude: Annotated[
        list[str] | None,
        typer.Option(
            "--exclude",
            "-e",
            help="Glob of files that should not be pruned. Can be specified multiple times.",
        ),
    ] = None,
    workers: Annotated[
        int | None,
        typer.Option("--workers", "-w", min=1, help="Number of deletion workers."),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Report what would be removed without removing it."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to a TOML config file."),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Report format.", case_sensitive=False),
    ] = OutputFormat.TABLE,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
) -> None:
    """Prune unnecessary files from a dependency tree."""
    log = configure_logging(verbose, console=err_console)

    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=2) from e

    if config.colors:
        apply_theme(use_colors(config.colors))

    try:
        options = config.to_options(
            directory=str(directory) if directory is not None else None,
            include=include or (),
            exclude=exclude or (),
            workers=workers,
            dry_run=dry_run,
            verbose=verbose,
        )
        pruner = Pruner(options, log=log)
    except ValueError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=2) from e

    result = pruner.prune()

    if result.error is not None:
        print_error(escape(str(result.error)))

    if output_format == OutputFormat.JSON:
        print_report_json(result)
    else:
        print_report(result)

    if not result.success:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()

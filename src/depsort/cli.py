"""Command-line interface for depsort."""

import json
from pathlib import Path
from typing import Any

import structlog
import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from structlog.contextvars import bound_contextvars

from .config import DepsortConfig, load_config
from .core.concat import concatenate_files
from .core.ordering import sort_files, sort_records
from .core.patterns import expand_patterns
from .dependency.dot import records_to_dot
from .dependency.extractor import extract_dependencies
from .models.manifest import load_manifest
from .models.record import DependencyRecord
from .observability import configure_logging
from .utils.exceptions import CircularDependencyError, DepsortError

app = typer.Typer(
    name="depsort",
    help="depsort - Order build files so each follows the file it depends on",
    add_completion=False,
)

console = Console()
# Diagnostics go to stderr so stdout holds only command output
err_console = Console(stderr=True)
logger = structlog.get_logger(__name__)

PATTERNS_HELP = "Glob patterns (default: sources.patterns from config)"
CONFIG_HELP = "Configuration file (YAML)"
LOG_LEVEL_HELP = "Log verbosity: DEBUG, INFO, WARNING, ERROR"


def _setup(config_file: Path | None, log_level: str | None) -> DepsortConfig:
    """Load configuration and configure logging for a command."""
    try:
        config = load_config(config_file)
    except (DepsortError, FileNotFoundError) as e:
        err_console.print(f"[red]ERROR: {escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    configure_logging(
        level=log_level or config.logging.level,
        json_logs=config.logging.json_logs,
        log_file=config.logging.file,
    )
    return config


def _resolve_patterns(patterns: list[str] | None, config: DepsortConfig) -> list[str]:
    resolved = list(patterns or []) or list(config.sources.patterns)
    if not resolved:
        err_console.print("[red]ERROR: No patterns given and none configured[/red]")
        raise typer.Exit(code=1)
    return resolved


def _report_cycle(error: CircularDependencyError) -> None:
    err_console.print(f"\n[bold red]ERROR:[/bold red] {escape(str(error))}")

    table = Table(title="Unresolved Records")
    table.add_column("Key", style="cyan")
    table.add_column("Depends On", style="yellow")
    table.add_column("Payload", style="white")

    for record in error.records:
        table.add_row(
            escape(record.key),
            escape(str(record.depends_on)),
            _format_payload(record.payload),
        )

    err_console.print(table)


def _format_payload(payload: Any) -> str:
    return "" if payload is None else escape(str(payload))


def _record_to_dict(record: DependencyRecord) -> dict[str, Any]:
    return {"key": record.key, "depends_on": record.depends_on, "payload": record.payload}


@app.command()
def sort(
    patterns: list[str] | None = typer.Argument(None, help=PATTERNS_HELP),
    output_file: Path | None = typer.Option(
        None, "--output", "-o", help="Write the ordered list to a file instead of stdout"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    log_level: str | None = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
) -> None:
    """
    Print the files matched by PATTERNS in dependency order.

    A file named Bar.Foo.js depends on Foo and is listed after Foo.js.

    Examples:
        depsort sort "src/*.js"
        depsort sort "lib/*.js" "src/**/*.js" --json
        depsort sort "css/*.css" -o build/order.txt
    """
    config = _setup(config_file, log_level)
    resolved = _resolve_patterns(patterns, config)

    with bound_contextvars(command="sort"):
        try:
            ordered = sort_files(resolved, recursive=config.sources.recursive)
        except CircularDependencyError as e:
            _report_cycle(e)
            raise typer.Exit(code=1) from e

        if not ordered and not as_json:
            err_console.print("[yellow]WARNING: No files matched[/yellow]")

        text = json.dumps(ordered) if as_json else "\n".join(ordered)

        if output_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(text + "\n" if text else "", encoding=config.output.encoding)
            err_console.print(f"[green]Wrote {len(ordered)} paths to {output_file}[/green]")
        elif as_json or ordered:
            typer.echo(text)

        logger.info("Sorted files", file_count=len(ordered))


@app.command()
def records(
    manifest: Path = typer.Argument(..., help="Record manifest (JSON or YAML)"),
    as_json: bool = typer.Option(False, "--json", help="Print a JSON array"),
    config_file: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    log_level: str | None = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
) -> None:
    """
    Order the dependency records listed in MANIFEST.

    Each entry has a key, an optional depends_on and an optional payload.

    Examples:
        depsort records deps.yaml
        depsort records deps.json --json
    """
    _setup(config_file, log_level)

    with bound_contextvars(command="records", manifest=str(manifest)):
        try:
            ordered = sort_records(load_manifest(manifest))
        except CircularDependencyError as e:
            _report_cycle(e)
            raise typer.Exit(code=1) from e
        except (DepsortError, FileNotFoundError) as e:
            err_console.print(f"[red]ERROR: {escape(str(e))}[/red]")
            raise typer.Exit(code=1) from e

        if as_json:
            typer.echo(json.dumps([_record_to_dict(r) for r in ordered], default=str))
            return

        table = Table(title=f"Dependency Order ({len(ordered)} records)")
        table.add_column("#", style="dim", justify="right")
        table.add_column("Key", style="cyan")
        table.add_column("Depends On", style="yellow")
        table.add_column("Payload", style="green")

        for position, record in enumerate(ordered, start=1):
            table.add_row(
                str(position),
                escape(record.key),
                escape(record.depends_on) if record.depends_on is not None else "-",
                _format_payload(record.payload),
            )

        console.print(table)


@app.command()
def concat(
    patterns: list[str] | None = typer.Argument(None, help=PATTERNS_HELP),
    output_file: Path = typer.Option(..., "--output", "-o", help="Combined output file"),
    separator: str | None = typer.Option(
        None, "--separator", help="Text placed between files (default: newline)"
    ),
    config_file: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    log_level: str | None = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
) -> None:
    """
    Combine the files matched by PATTERNS into one file, in dependency order.

    Examples:
        depsort concat "src/*.js" -o dist/app.js
        depsort concat "css/*.css" -o dist/site.css --separator ""
    """
    config = _setup(config_file, log_level)
    resolved = _resolve_patterns(patterns, config)

    with bound_contextvars(command="concat", output=str(output_file)):
        try:
            ordered = sort_files(resolved, recursive=config.sources.recursive)
        except CircularDependencyError as e:
            _report_cycle(e)
            raise typer.Exit(code=1) from e

        if not ordered:
            err_console.print("[yellow]WARNING: No files matched, nothing written[/yellow]")
            return

        try:
            count = concatenate_files(
                ordered,
                output_file,
                separator=config.output.separator if separator is None else separator,
                encoding=config.output.encoding,
            )
        except OSError as e:
            err_console.print(f"[red]ERROR: Concatenation failed:[/red] {escape(str(e))}")
            raise typer.Exit(code=1) from e

        err_console.print(f"[green]Combined {count} files into {output_file}[/green]")


@app.command()
def graph(
    patterns: list[str] | None = typer.Argument(None, help=PATTERNS_HELP),
    output_file: Path | None = typer.Option(
        None, "--output", "-o", help="Write DOT to a file instead of stdout"
    ),
    config_file: Path | None = typer.Option(None, "--config", "-c", help=CONFIG_HELP),
    log_level: str | None = typer.Option(None, "--log-level", help=LOG_LEVEL_HELP),
) -> None:
    """
    Output the inferred dependencies of PATTERNS as a Graphviz DOT graph.

    Cycles are drawn rather than rejected.

    Examples:
        depsort graph "src/*.js" | dot -Tpng -o deps.png
        depsort graph "src/*.js" -o deps.dot
    """
    config = _setup(config_file, log_level)
    resolved = _resolve_patterns(patterns, config)

    with bound_contextvars(command="graph"):
        paths = expand_patterns(resolved, recursive=config.sources.recursive)
        dot = records_to_dot(extract_dependencies(paths))

        if output_file:
            output_file.parent.mkdir(parents=True, exist_ok=True)
            output_file.write_text(dot + "\n", encoding="utf-8")
            err_console.print(f"[green]Wrote dependency graph to {output_file}[/green]")
        else:
            typer.echo(dot)


@app.command("init-config")
def init_config(
    path: Path = typer.Argument(Path("depsort.yaml"), help="Where to write the configuration"),
    patterns: list[str] | None = typer.Option(
        None, "--pattern", "-p", help="Source pattern to record (repeatable)"
    ),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing file"),
) -> None:
    """
    Write a configuration file holding the default settings.

    Examples:
        depsort init-config
        depsort init-config build/depsort.yaml -p "lib/*.js" -p "src/**/*.js"
    """
    if path.exists() and not force:
        err_console.print(f"[red]ERROR: {escape(str(path))} already exists (use --force)[/red]")
        raise typer.Exit(code=1)

    config = DepsortConfig()
    config.sources.patterns = list(patterns or [])
    config.to_file(path)
    err_console.print(f"[green]Wrote configuration to {path}[/green]")


if __name__ == "__main__":
    app()

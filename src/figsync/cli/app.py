"""CLI application entry point for figsync.

This module provides the main CLI interface using Typer.
"""

import asyncio
import json
import sys
from pathlib import Path
from typing import Annotated, Any, TextIO

import typer

from figsync import __version__
from figsync.cli.output import (
    console,
    print_error,
    print_export_summary,
    print_file_info,
    print_header,
    print_source,
    print_step,
)
from figsync.config import FigsyncSettings, HostConfig, LoggingConfig, OutputConfig
from figsync.core import ExportOrchestrator, ExportScope, ExportSession
from figsync.core.dispatcher import error_response
from figsync.exceptions import FigsyncError, HostError, SnapshotError
from figsync.host import DesignHost, RestHost
from figsync.io import ExportWriter, load_snapshot, render_document
from figsync.utils import ExportLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="figsync",
    help="Export design-system components and shared styles from a design file as JSON.",
    add_completion=False,
    no_args_is_help=True,
)


SourceArg = Annotated[
    Path | None,
    typer.Argument(
        help="Path to a document snapshot JSON file (omit when using --file-key)",
        show_default=False,
    ),
]
FileKeyOpt = Annotated[
    str | None,
    typer.Option("--file-key", help="Fetch the file with this key from the REST API"),
]
TokenOpt = Annotated[
    str | None,
    typer.Option("--token", envvar="FIGMA_TOKEN", help="REST API access token"),
]
SelectOpt = Annotated[
    list[str] | None,
    typer.Option("--select", help="Node id to treat as selected (REST host, repeatable)"),
]
LogFileOpt = Annotated[
    Path | None,
    typer.Option("--log-file", help="Write detailed logs to file"),
]
LogLevelOpt = Annotated[
    str,
    typer.Option("--log-level", help="Logging level (DEBUG|INFO|WARNING|ERROR)"),
]
QuietOpt = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Minimal console output"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]figsync[/bold blue] v{__version__}")
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
    """Export design-system components and shared styles from a design file."""


def _build_host_config(
    source: Path | None,
    file_key: str | None,
    token: str | None,
    select: list[str] | None,
) -> HostConfig:
    """Validate source options and build the host configuration.

    Raises:
        typer.Exit: If the options do not select exactly one usable source
    """
    if source is not None and file_key is not None:
        print_error("Cannot use a snapshot path and --file-key together")
        raise typer.Exit(code=1)

    if source is None and file_key is None:
        print_error(
            "No document source given",
            details="Pass a snapshot JSON path, or --file-key with --token.",
        )
        raise typer.Exit(code=1)

    if source is not None and not source.is_file():
        print_error(
            f"Snapshot file not found: {source}",
            details=f"The file '{source}' does not exist or is not accessible.",
        )
        raise typer.Exit(code=1)

    if file_key is not None and not token:
        print_error(
            "Missing access token",
            details="Pass --token or set FIGMA_TOKEN to use the REST API.",
        )
        raise typer.Exit(code=1)

    return HostConfig(
        snapshot_path=source,
        file_key=file_key,
        token=token,
        selection_ids=list(select or []),
    )


def open_host(config: HostConfig) -> DesignHost:
    """Open the host a configuration selects.

    Raises:
        SnapshotError: If the snapshot cannot be loaded
        HostQueryError: If the REST file cannot be fetched
    """
    if config.uses_rest:
        return RestHost.connect(
            config.file_key,
            config.token or "",
            selection_ids=config.selection_ids,
            base_url=config.api_base_url,
            timeout=config.request_timeout,
        )
    if config.snapshot_path is None:
        raise ValueError("Host configuration selects no source")
    return load_snapshot(config.snapshot_path)


def _setup_logging(settings: FigsyncSettings, quiet: bool) -> None:
    configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )


def _describe_source(config: HostConfig) -> str:
    if config.uses_rest:
        return "REST API"
    return str(config.snapshot_path)


@app.command()
def export(
    source: SourceArg = None,
    scope: Annotated[
        str,
        typer.Option(
            "--scope",
            "-s",
            help="Export scope (document|selection|tokens)",
        ),
    ] = ExportScope.DOCUMENT.value,
    output: Annotated[
        Path | None,
        typer.Option(
            "--output",
            "-o",
            help="Output path (default: print JSON to stdout)",
        ),
    ] = None,
    indent: Annotated[
        int,
        typer.Option(
            "--indent",
            help="JSON indentation (0 for compact output)",
            min=0,
            max=8,
        ),
    ] = 2,
    file_key: FileKeyOpt = None,
    token: TokenOpt = None,
    select: SelectOpt = None,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    quiet: QuietOpt = False,
) -> None:
    """Export components and shared styles as a JSON document.

    Example:
        figsync export design-snapshot.json -o figma-export.json

    The scope picks what is exported: every top-level component in the
    document, the components in the current selection, or shared styles only.
    """
    try:
        export_scope = ExportScope.parse(scope)
    except FigsyncError as e:
        print_error(str(e), details="Valid values: document, selection, tokens")
        raise typer.Exit(code=1)

    settings = FigsyncSettings(
        host=_build_host_config(source, file_key, token, select),
        output=OutputConfig(output_path=output, indent=indent or None),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    _setup_logging(settings, quiet)
    show_progress = not quiet and output is not None

    if show_progress:
        print_header(__version__)
        print_step("Loading document")

    host = None
    try:
        host = open_host(settings.host)
        if show_progress:
            print_source(host.document_name, host.file_key, _describe_source(settings.host))
            print_step(f"Exporting ({export_scope.value})")

        export_logger = ExportLogger()
        orchestrator = ExportOrchestrator(host, export_logger)
        document = asyncio.run(orchestrator.export(export_scope))

        if settings.output.output_path is None:
            typer.echo(render_document(document, settings.output.indent, settings.output.ensure_ascii))
            return

        writer = ExportWriter(
            settings.output.output_path,
            indent=settings.output.indent,
            ensure_ascii=settings.output.ensure_ascii,
        )
        written = writer.write(document)
        if not quiet:
            print_export_summary(document.summary(), export_logger.stats, str(written))

    except SnapshotError as e:
        print_error(f"Could not load snapshot: {e}")
        raise typer.Exit(code=1)
    except HostError as e:
        print_error(f"Host query failed: {e}")
        raise typer.Exit(code=1)
    except FigsyncError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except typer.Exit:
        raise
    except Exception as e:
        print_error(f"Unexpected error: {e}")
        raise typer.Exit(code=1)
    finally:
        if host is not None:
            host.close()


@app.command()
def info(
    source: SourceArg = None,
    file_key: FileKeyOpt = None,
    token: TokenOpt = None,
    select: SelectOpt = None,
    as_json: Annotated[
        bool,
        typer.Option("--json", help="Print the result as one line of JSON"),
    ] = False,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
    quiet: QuietOpt = False,
) -> None:
    """Show page, component and style counts for a document."""
    settings = FigsyncSettings(
        host=_build_host_config(source, file_key, token, select),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    _setup_logging(settings, quiet)

    host = None
    try:
        host = open_host(settings.host)
        file_info = asyncio.run(ExportOrchestrator(host).info())
    except SnapshotError as e:
        print_error(f"Could not load snapshot: {e}")
        raise typer.Exit(code=1)
    except FigsyncError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    finally:
        if host is not None:
            host.close()

    if as_json:
        typer.echo(json.dumps(file_info.to_dict()))
    else:
        print_file_info(file_info)


async def serve_requests(session: ExportSession, stream_in: TextIO, stream_out: TextIO) -> int:
    """Answer JSON-lines requests until cancel or end of input.

    Each input line holds one request object; each response is written as
    one line. Cancel produces no response and ends the loop.

    Returns:
        Number of requests handled
    """
    handled = 0
    for line in stream_in:
        line = line.strip()
        if not line:
            continue

        response: dict[str, Any] | None
        try:
            request = json.loads(line)
        except json.JSONDecodeError as e:
            response = error_response(f"Invalid request: {e}")
        else:
            if isinstance(request, dict):
                response = await session.handle(request)
            else:
                response = error_response("Invalid request: expected a JSON object")

        handled += 1
        if response is not None:
            stream_out.write(json.dumps(response) + "\n")
            stream_out.flush()
        if session.closed:
            break
    return handled


@app.command()
def serve(
    source: SourceArg = None,
    file_key: FileKeyOpt = None,
    token: TokenOpt = None,
    select: SelectOpt = None,
    log_file: LogFileOpt = None,
    log_level: LogLevelOpt = "WARNING",
) -> None:
    """Answer export requests read as JSON lines from stdin.

    Example request lines:

        {"operation": "export", "scope": "tokens"}
        {"operation": "get-info"}
        {"operation": "cancel"}

    The scope is "document" (the default), "selection" or "tokens". Any other
    scope is answered with an error response rather than a document export.
    """
    settings = FigsyncSettings(
        host=_build_host_config(source, file_key, token, select),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    _setup_logging(settings, quiet=True)

    try:
        host = open_host(settings.host)
    except FigsyncError as e:
        print_error(str(e))
        raise typer.Exit(code=1)

    session = ExportSession(host)
    try:
        asyncio.run(serve_requests(session, sys.stdin, sys.stdout))
    except KeyboardInterrupt:
        raise typer.Exit(code=130) from None  # Standard Unix SIGINT exit code
    finally:
        session.cancel()


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()

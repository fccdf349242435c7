import asyncio
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.logging import RichHandler

from sab_detector.config import load_config
from sab_detector.core.report import print_report
from sab_detector.core.scan import run_scan

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="sab-detector",
    help="Detects usage of SharedArrayBuffer (or another global) in JavaScript sources.",
    no_args_is_help=True,
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)

console = Console(markup=False, emoji=False, highlight=False, soft_wrap=True)
err_console = Console(stderr=True, markup=False, emoji=False, highlight=False, soft_wrap=True)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


@app.command(no_args_is_help=True)
def scan(
    paths: Annotated[
        list[str], typer.Argument(help="Files or directories to scan.", show_default=False)
    ],
    recursive: Annotated[
        bool, typer.Option("--recursive", "-r", help="Recursively list JavaScript files.")
    ] = False,
    target: Annotated[
        str | None, typer.Option("--target", "-t", help="Identifier to look for (default SharedArrayBuffer).")
    ] = None,
    ext: Annotated[
        list[str] | None, typer.Option("--ext", help="Source file extension to include; repeatable (default .js).")
    ] = None,
    language: Annotated[
        str | None, typer.Option(help="Grammar to parse every file with (javascript, typescript, tsx).")
    ] = None,
    jobs: Annotated[int | None, typer.Option("--jobs", "-j", help="Files scanned in parallel.")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log progress to stderr.")] = False,
) -> None:
    """Scan PATHS and report every use of the target identifier."""
    _configure_logging(verbose)
    try:
        config = load_config(
            target_name=target,
            extensions=tuple(ext) if ext else None,
            recursive=recursive,
            language=language,
            max_workers=jobs,
        )
    except ValueError as exc:
        raise typer.BadParameter(str(exc)) from exc

    try:
        report = asyncio.run(run_scan(paths, config))
    except Exception as exc:
        logger.exception("Scan aborted")
        err_console.print(f"Error: {exc}")
        raise typer.Exit(code=1) from exc

    print_report(report, console, err_console)
    raise typer.Exit(code=report.exit_code)


def main() -> None:
    app()

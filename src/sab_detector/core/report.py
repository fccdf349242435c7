import logging

from rich.console import Console

from sab_detector.models import ScanReport, ScanResult

logger = logging.getLogger(__name__)


def render_result(result: ScanResult, target_name: str) -> list[str]:
    """Lines for one successfully scanned file.

    Occurrences without a location are counted in the header but get no
    ``[i]`` line; each one is logged as a warning instead.
    """
    if not result.has_matches:
        return [f"{result.path} is {target_name}-free."]

    lines = [f"{result.path} uses {target_name} ({len(result.occurrences)} times):"]
    for index, occurrence in enumerate(result.occurrences, start=1):
        location = occurrence.location
        if location is None:
            logger.warning("Occurrence %d in %s has no source location", index, result.path)
            continue
        lines.append(f"  [{index}] {location}")
    return lines


def render_failure(result: ScanResult) -> str:
    message = result.error.message if result.error else "unknown error"
    return f"{result.path} could not be scanned: {message}"


def render_summary(report: ScanReport) -> str:
    count = len(report.matching_files)
    if count == 0:
        return f"No files use {report.target_name}."
    return f"{count} files use {report.target_name}."


def print_report(report: ScanReport, console: Console, err_console: Console) -> None:
    """Write the whole report. This is the only place scan output is printed."""
    for failure in report.failures:
        err_console.print(render_failure(failure))
    for result in report.results:
        if result.failed:
            err_console.print(render_failure(result))
            continue
        for line in render_result(result, report.target_name):
            console.print(line)

    console.print(render_summary(report))
    failed = len(report.failed_files)
    if failed:
        err_console.print(f"{failed} files could not be scanned.")

import asyncio
import logging
from collections.abc import Sequence
from pathlib import Path

from sab_detector.config import ScanConfig
from sab_detector.core.discovery import list_source_files
from sab_detector.core.languages import detect_language_from_path, normalize_language
from sab_detector.core.matcher import find_identifiers
from sab_detector.core.parser import parse_source
from sab_detector.errors import FileSystemError, ScanError
from sab_detector.models import ScanFailure, ScanReport, ScanResult, SourceUnit

logger = logging.getLogger(__name__)

_FALLBACK_LANGUAGE = "javascript"


def _language_for(path: Path, language: str | None) -> str:
    if language:
        return normalize_language(language)
    try:
        return detect_language_from_path(path)
    except ValueError:
        logger.debug("No grammar registered for %s, parsing as %s", path, _FALLBACK_LANGUAGE)
        return _FALLBACK_LANGUAGE


def read_source(path: str | Path) -> SourceUnit:
    file_path = Path(path)
    try:
        text = file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise FileSystemError(str(file_path), f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise FileSystemError(str(file_path), exc.strerror or str(exc)) from exc
    return SourceUnit(path=str(file_path), text=text)


def scan_source(
    text: str,
    target_name: str,
    path: str = "<string>",
    language: str = _FALLBACK_LANGUAGE,
) -> ScanResult:
    """Scan in-memory source text. ``ParseError`` propagates to the caller."""
    tree = parse_source(text, path=path, language=language)
    return ScanResult(path=path, occurrences=find_identifiers(tree, target_name))


def scan_file(path: str | Path, target_name: str, language: str | None = None) -> ScanResult:
    """Scan one file, turning read and parse failures into a failed ``ScanResult``."""
    file_path = Path(path)
    try:
        resolved_language = _language_for(file_path, language)
        unit = read_source(file_path)
        result = scan_source(unit.text, target_name, path=unit.path, language=resolved_language)
    except ScanError as exc:
        logger.warning("Failed to scan %s: %s", exc.path, exc.detail)
        return ScanResult(path=str(file_path), error=ScanFailure(kind=exc.kind, message=exc.detail))  # type: ignore[arg-type]
    logger.debug("Scanned %s: %d occurrence(s)", file_path, len(result.occurrences))
    return result


async def scan_files(paths: Sequence[Path], config: ScanConfig) -> list[ScanResult]:
    """Scan files concurrently on worker threads. Results follow the input order."""
    semaphore = asyncio.Semaphore(config.max_workers)

    async def _scan_one(path: Path) -> ScanResult:
        async with semaphore:
            return await asyncio.to_thread(scan_file, path, config.target_name, config.language)

    return list(await asyncio.gather(*(_scan_one(path) for path in paths)))


async def run_scan(paths: Sequence[str | Path], config: ScanConfig) -> ScanReport:
    discovery = list_source_files(paths, recursive=config.recursive, extensions=config.extensions)
    results = await scan_files(discovery.files, config)
    return ScanReport(target_name=config.target_name, results=results, failures=discovery.failures)

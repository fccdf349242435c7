import logging
import os
import stat
from collections.abc import Iterable, Sequence
from pathlib import Path

from sab_detector.errors import FileSystemError
from sab_detector.models import Discovery, ScanFailure, ScanResult

logger = logging.getLogger(__name__)

# Without --recursive, only entries directly inside a directory argument are listed.
_NON_RECURSIVE_MAX_DEPTH = 1


def _is_hidden(name: str) -> bool:
    return name.startswith(".")


def _failure(error: FileSystemError) -> ScanResult:
    return ScanResult(path=error.path, error=ScanFailure(kind="filesystem", message=error.detail))


def _lstat(path: Path) -> os.stat_result:
    try:
        return path.lstat()
    except OSError as exc:
        raise FileSystemError(str(path), exc.strerror or str(exc)) from exc


def _list_dir(path: Path) -> list[str]:
    try:
        return os.listdir(path)
    except OSError as exc:
        raise FileSystemError(str(path), exc.strerror or str(exc)) from exc


def _walk_path(root: Path, recursive: bool) -> tuple[list[Path], list[ScanResult]]:
    files: list[Path] = []
    failures: list[ScanResult] = []
    pending = [(root, 0)]
    while pending:
        path, depth = pending.pop()
        try:
            mode = _lstat(path).st_mode
            if stat.S_ISDIR(mode):
                if not recursive and depth >= _NON_RECURSIVE_MAX_DEPTH:
                    logger.debug("Not descending into %s without --recursive", path)
                    continue
                names = _list_dir(path)
                pending.extend((path / name, depth + 1) for name in names if not _is_hidden(name))
            elif stat.S_ISREG(mode):
                files.append(path)
            else:
                logger.debug("Skipping %s: not a regular file or directory", path)
        except FileSystemError as exc:
            logger.warning("Cannot list %s: %s", exc.path, exc.detail)
            failures.append(_failure(exc))
    return files, failures


def _has_extension(path: Path, extensions: Iterable[str]) -> bool:
    return any(path.name.endswith(ext) for ext in extensions)


def list_source_files(
    paths: Sequence[str | Path],
    recursive: bool = False,
    extensions: Sequence[str] = (".js",),
) -> Discovery:
    """Enumerate candidate source files below the given paths.

    Hidden entries are skipped at every depth below an argument. The returned
    file list is de-duplicated, filtered by extension and sorted by path.
    """
    found: set[Path] = set()
    failures: list[ScanResult] = []
    for raw in paths:
        root = Path(os.path.abspath(raw))
        files, errors = _walk_path(root, recursive)
        found.update(files)
        failures.extend(errors)

    candidates = sorted((p for p in found if _has_extension(p, extensions)), key=str)
    logger.debug("Discovered %d candidate file(s) from %d path(s)", len(candidates), len(paths))
    return Discovery(files=candidates, failures=failures)

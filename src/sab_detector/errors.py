class ScanError(Exception):
    """Base class for failures tied to a single scanned path."""

    kind = "scan"

    def __init__(self, path: str, detail: str) -> None:
        self.path = path
        self.detail = detail
        super().__init__(f"{path}: {detail}")


class FileSystemError(ScanError):
    kind = "filesystem"


class ParseError(ScanError):
    kind = "parse"

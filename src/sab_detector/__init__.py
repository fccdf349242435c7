from sab_detector.config import ScanConfig, load_config
from sab_detector.core.location import format_span
from sab_detector.core.matcher import IdentifierMatcher, find_identifiers
from sab_detector.core.parser import parse_source
from sab_detector.core.scan import run_scan, scan_file, scan_files, scan_source
from sab_detector.core.walker import NodeVisitor, iter_nodes, walk
from sab_detector.errors import FileSystemError, ParseError, ScanError
from sab_detector.models import IdentifierOccurrence, ScanReport, ScanResult, Span, SyntaxNode

__all__ = [
    "FileSystemError",
    "IdentifierMatcher",
    "IdentifierOccurrence",
    "NodeVisitor",
    "ParseError",
    "ScanConfig",
    "ScanError",
    "ScanReport",
    "ScanResult",
    "Span",
    "SyntaxNode",
    "find_identifiers",
    "format_span",
    "iter_nodes",
    "load_config",
    "parse_source",
    "run_scan",
    "scan_file",
    "scan_files",
    "scan_source",
    "walk",
]

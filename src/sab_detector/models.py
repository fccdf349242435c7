from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, computed_field, model_validator

IDENTIFIER_KIND = "Identifier"


class Position(BaseModel):
    """A point in source text: 1-based line, 0-based character column."""

    model_config = ConfigDict(frozen=True)

    line: int
    column: int


class Span(BaseModel):
    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @model_validator(mode="after")
    def _check_order(self) -> "Span":
        if (self.start.line, self.start.column) > (self.end.line, self.end.column):
            raise ValueError(
                f"Span start {self.start.line}:{self.start.column} is after end {self.end.line}:{self.end.column}"
            )
        return self


def format_span(span: Span | None) -> str | None:
    """Render a span as ``line:start-end``, or ``startLine:startCol-endLine:endCol`` across lines.

    Returns ``None`` when the node carries no location.
    """
    if span is None:
        return None
    start, end = span.start, span.end
    if start.line == end.line:
        return f"{start.line}:{start.column}-{end.column}"
    return f"{start.line}:{start.column}-{end.line}:{end.column}"


class SourceUnit(BaseModel):
    model_config = ConfigDict(frozen=True)

    path: str
    text: str


class SyntaxNode(BaseModel):
    kind: str
    grammar_type: str
    name: str | None = None
    span: Span | None = None
    children: list["SyntaxNode"] = []


SyntaxNode.model_rebuild()  # necessary for recursive types


class IdentifierOccurrence(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["Identifier"] = IDENTIFIER_KIND
    name: str
    span: Span | None = None

    @property
    def location(self) -> str | None:
        return format_span(self.span)


class ScanFailure(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["filesystem", "parse"]
    message: str


class ScanResult(BaseModel):
    path: str
    occurrences: list[IdentifierOccurrence] = []
    error: ScanFailure | None = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def has_matches(self) -> bool:
        return len(self.occurrences) > 0

    @property
    def failed(self) -> bool:
        return self.error is not None


class ScanReport(BaseModel):
    target_name: str
    results: list[ScanResult] = []
    failures: list[ScanResult] = []

    @property
    def matching_files(self) -> list[ScanResult]:
        return [r for r in self.results if r.has_matches]

    @property
    def failed_files(self) -> list[ScanResult]:
        return [*self.failures, *(r for r in self.results if r.failed)]

    @property
    def exit_code(self) -> int:
        return 1 if self.matching_files or self.failed_files else 0


class Discovery(BaseModel):
    files: list[Path] = []
    failures: list[ScanResult] = []

from itertools import accumulate
from typing import cast

from tree_sitter import Node
from tree_sitter_language_pack import SupportedLanguage, get_parser

from sab_detector.errors import ParseError
from sab_detector.models import IDENTIFIER_KIND, Position, Span, SyntaxNode

# Grammar types that ESTree would represent as an ``Identifier`` node.
IDENTIFIER_NODE_TYPES: frozenset[str] = frozenset(
    {
        "identifier",
        "property_identifier",
        "shorthand_property_identifier",
        "shorthand_property_identifier_pattern",
        "statement_identifier",
        "type_identifier",
    }
)


class _ColumnMap:
    """Translates tree-sitter byte columns into character columns.

    Non-ASCII lines get a byte-offset to character-offset table, built once.
    """

    def __init__(self, source_bytes: bytes) -> None:
        self._lines = source_bytes.split(b"\n")
        self._ascii = [line.isascii() for line in self._lines]
        self._offsets: dict[int, list[int]] = {}

    def _line_offsets(self, row: int) -> list[int]:
        offsets = self._offsets.get(row)
        if offsets is None:
            # A byte starts a character unless it is a UTF-8 continuation byte.
            starts = (0 if (byte & 0xC0) == 0x80 else 1 for byte in self._lines[row])
            offsets = list(accumulate(starts, initial=0))
            self._offsets[row] = offsets
        return offsets

    def column(self, row: int, byte_column: int) -> int:
        if row >= len(self._lines) or self._ascii[row]:
            return byte_column
        offsets = self._line_offsets(row)
        return offsets[min(byte_column, len(offsets) - 1)]

    def position(self, point: tuple[int, int]) -> Position:
        row, byte_column = point[0], point[1]
        return Position(line=row + 1, column=self.column(row, byte_column))


def _find_syntax_error(root: Node) -> Node | None:
    if not root.has_error:
        return None
    stack = [root]
    while stack:
        node = stack.pop()
        if node.is_error or node.is_missing:
            return node
        stack.extend(child for child in reversed(node.children) if child.has_error or child.is_missing)
    return root


def _describe_error(node: Node, columns: _ColumnMap) -> str:
    where = columns.position(node.start_point)
    if node.is_missing:
        return f"missing '{node.type}' at {where.line}:{where.column}"
    return f"syntax error at {where.line}:{where.column}"


def _to_model(node: Node, columns: _ColumnMap) -> SyntaxNode:
    is_identifier = node.type in IDENTIFIER_NODE_TYPES
    name = node.text.decode("utf-8") if is_identifier and node.text is not None else None
    return SyntaxNode(
        kind=IDENTIFIER_KIND if is_identifier else node.type,
        grammar_type=node.type,
        name=name,
        span=Span(start=columns.position(node.start_point), end=columns.position(node.end_point)),
    )


def parse_source(text: str, path: str = "<string>", language: str = "javascript") -> SyntaxNode:
    """Parse source text into a ``SyntaxNode`` tree rooted at the program node.

    Only named grammar nodes are kept; anonymous keyword and punctuation tokens
    are dropped. Raises ``ParseError`` when the text is not valid in the grammar.
    """
    source_bytes = text.encode("utf-8")
    parser = get_parser(cast(SupportedLanguage, language))
    tree = parser.parse(source_bytes)
    columns = _ColumnMap(source_bytes)

    error_node = _find_syntax_error(tree.root_node)
    if error_node is not None:
        raise ParseError(path, _describe_error(error_node, columns))

    root = _to_model(tree.root_node, columns)
    # Iterative so deeply nested source cannot exhaust the interpreter stack.
    pending = [(tree.root_node, root)]
    while pending:
        ts_node, model = pending.pop()
        for ts_child in ts_node.named_children:
            child = _to_model(ts_child, columns)
            model.children.append(child)
            pending.append((ts_child, child))
    return root

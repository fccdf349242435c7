from collections.abc import Callable, Iterator

from sab_detector.models import SyntaxNode


def iter_nodes(root: SyntaxNode) -> Iterator[SyntaxNode]:
    """Yield every node of the tree once, pre-order, children in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def walk(root: SyntaxNode, enter: Callable[[SyntaxNode], None]) -> None:
    for node in iter_nodes(root):
        enter(node)


class NodeVisitor:
    """Visitor base: ``visit`` dispatches to ``visit_<kind>`` when defined.

    Traversal of children is owned by the walker, so handlers only look at the
    node they are given.
    """

    def visit(self, node: SyntaxNode) -> None:
        handler = getattr(self, f"visit_{node.kind}", self.generic_visit)
        handler(node)

    def generic_visit(self, node: SyntaxNode) -> None:
        return None

    def traverse(self, root: SyntaxNode) -> None:
        walk(root, self.visit)

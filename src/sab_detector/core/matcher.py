from sab_detector.core.walker import NodeVisitor
from sab_detector.models import IdentifierOccurrence, SyntaxNode


class IdentifierMatcher(NodeVisitor):
    """Collects ``Identifier`` nodes whose name equals the target, in visit order.

    Bindings are not resolved: a local that shadows the target still matches.
    """

    def __init__(self, target_name: str) -> None:
        if not target_name:
            raise ValueError("Target name must not be empty.")
        self.target_name = target_name
        self.matches: list[IdentifierOccurrence] = []

    def visit_Identifier(self, node: SyntaxNode) -> None:  # noqa: N802
        if node.name == self.target_name:
            self.matches.append(IdentifierOccurrence(name=node.name, span=node.span))


def find_identifiers(root: SyntaxNode, target_name: str) -> list[IdentifierOccurrence]:
    matcher = IdentifierMatcher(target_name)
    matcher.traverse(root)
    return matcher.matches

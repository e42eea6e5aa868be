"""Parse a C# snippet and pick one node out of it."""

from __future__ import annotations

from docfacts.core.exceptions import NodeNotFoundError
from docfacts.syntax.base import SyntaxKind, SyntaxNode
from docfacts.syntax.csharp import CSharpParser

_NOT_MEMBERS = frozenset(
    {
        SyntaxKind.USING_DIRECTIVE,
        SyntaxKind.EXTERN_ALIAS_DIRECTIVE,
        SyntaxKind.GLOBAL_ATTRIBUTE,
        SyntaxKind.GLOBAL_ATTRIBUTE_LIST,
    }
)


def parse_node(code_text: str, kind: str) -> SyntaxNode:
    """Parse `code_text` and return the first node of `kind` in its first member.

    Meant for fixtures and controlled snippets, not for arbitrary files:
    when no such node exists this raises NodeNotFoundError instead of
    degrading.

    Raises:
        NodeNotFoundError: If the snippet has no member or no node of `kind`.
    """
    tree = CSharpParser().parse_text(code_text)

    members = [c for c in tree.root.child_nodes() if c.kind not in _NOT_MEMBERS]
    if not members:
        raise NodeNotFoundError(f"No declaration found in snippet:\n{code_text}")

    # A file-scoped namespace is followed by, not wrapping, its declarations.
    if members[0].kind == SyntaxKind.FILE_SCOPED_NAMESPACE_DECLARATION:
        scope = members
    else:
        scope = members[:1]

    for member in scope:
        for node in member.descendant_nodes(include_self=True):
            if node.kind == kind:
                return node

    raise NodeNotFoundError(f"No {kind} node found in snippet:\n{code_text}")

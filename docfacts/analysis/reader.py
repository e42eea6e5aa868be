"""Thin accessors over SyntaxNode tokens and trivia."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from docfacts.core.models import SyntaxToken, TokenKind, Trivia, TriviaKind
from docfacts.syntax.base import SyntaxKind, SyntaxNode

# Nodes that only wrap the members of a type.
_MEMBER_CONTAINERS = frozenset({SyntaxKind.DECLARATION_LIST})


def leading_trivia(node: SyntaxNode) -> list[Trivia]:
    return node.leading_trivia()


def child_tokens(node: SyntaxNode, kind: TokenKind | None = None) -> Iterator[SyntaxToken]:
    return _of_kind(node.child_tokens(), kind)


def descendant_tokens(node: SyntaxNode, kind: TokenKind | None = None) -> Iterator[SyntaxToken]:
    return _of_kind(node.descendant_tokens(), kind)


def descendant_nodes(
    node: SyntaxNode, *kinds: str, include_self: bool = False
) -> Iterator[SyntaxNode]:
    """Descendants in document order, optionally restricted to some kinds."""
    for descendant in node.descendant_nodes(include_self=include_self):
        if not kinds or descendant.kind in kinds:
            yield descendant


def first_token(tokens: Iterable[SyntaxToken]) -> SyntaxToken | None:
    return next(iter(tokens), None)


def last_token(tokens: Iterable[SyntaxToken]) -> SyntaxToken | None:
    last = None
    for token in tokens:
        last = token
    return last


def containing_declaration(node: SyntaxNode) -> SyntaxNode | None:
    """The declaration a member belongs to, skipping body containers."""
    parent = node.parent
    while parent is not None and parent.kind in _MEMBER_CONTAINERS:
        parent = parent.parent
    return parent


def documentation_comments(node: SyntaxNode) -> list[Trivia]:
    """`///` comments in the leading trivia of a declaration."""
    return [t for t in node.leading_trivia() if t.kind == TriviaKind.DOCUMENTATION_COMMENT]


def is_documented(node: SyntaxNode) -> bool:
    return bool(documentation_comments(node))


def _of_kind(tokens: Iterable[SyntaxToken], kind: TokenKind | None) -> Iterator[SyntaxToken]:
    for token in tokens:
        if kind is None or token.kind == kind:
            yield token

"""Inline comments and returned identifiers of a member body."""

from __future__ import annotations

from docfacts.core.models import BodyFacts, TriviaKind
from docfacts.syntax.base import SyntaxKind, SyntaxNode

_COMMENT_SLASH = "/"


def extract_line_comments(body: SyntaxNode | None) -> list[str]:
    """Text of every `//` comment in the body, leading slashes stripped.

    Only the leading run of slashes goes, so `//// disabled` reads `disabled`
    and a URL later in the text keeps its `//`.
    """
    if body is None:
        return []

    return [
        trivia.text.lstrip(_COMMENT_SLASH).strip()
        for trivia in body.descendant_trivia()
        if trivia.kind == TriviaKind.SINGLE_LINE_COMMENT
    ]


def extract_return_identifiers(body: SyntaxNode | None) -> list[str]:
    """Identifiers returned as `return name;` by the body's own statements.

    Nested blocks and any other return expression are ignored.
    """
    if body is None:
        return []

    identifiers = []
    for statement in body.child_nodes():
        if statement.kind != SyntaxKind.RETURN_STATEMENT:
            continue
        expression = next(statement.child_nodes(), None)
        if expression is not None and expression.kind == SyntaxKind.IDENTIFIER:
            identifiers.append(expression.text)
    return identifiers


def extract_body_facts(body: SyntaxNode | None) -> BodyFacts:
    return BodyFacts(
        comments=extract_line_comments(body),
        returns=extract_return_identifiers(body),
    )

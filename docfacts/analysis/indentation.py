"""Indentation for a comment block placed before a declaration."""

from __future__ import annotations

import logging

from docfacts.analysis.reader import leading_trivia
from docfacts.core.models import Trivia, TriviaKind
from docfacts.syntax.base import SyntaxNode

logger = logging.getLogger(__name__)

FALLBACK_INDENTATION = Trivia(kind=TriviaKind.WHITESPACE, text=" ")


def get_indentation_trivia(node: SyntaxNode) -> Trivia:
    """Get the trivia to use as the left margin of a comment block.

    Indentation is the last leading trivia of the declaration: it sits right
    before the first token, after any comment lines. A node with no leading
    trivia at all (first token of a file, or a member sharing a line with
    the previous token) gets a single space instead.
    """
    trivia = leading_trivia(node)
    if not trivia:
        logger.warning(
            "No leading trivia, using a single space as indentation:\n%s", node.full_text
        )
        return FALLBACK_INDENTATION

    return trivia[-1]

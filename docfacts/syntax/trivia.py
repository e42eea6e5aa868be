"""Split raw inter-token text into Roslyn-style trivia fragments."""

from __future__ import annotations

import re

from docfacts.core.models import Trivia, TriviaKind

_EOL = r"(?:\r\n|\r|\n)"

# Documentation comments span consecutive `///` lines and own their final newline.
_TRIVIA_RE = re.compile(
    rf"""
    (?P<doc>///(?!/)[^\r\n]*(?:{_EOL}[ \t]*///(?!/)[^\r\n]*)*{_EOL}?)
  | (?P<line>//[^\r\n]*)
  | (?P<block>/\*.*?(?:\*/|\Z))
  | (?P<eol>{_EOL})
  | (?P<ws>[ \t\f\v]+)
  | (?P<directive>\#[^\r\n]*)
  | (?P<skipped>[^\s/\#]+|.)
    """,
    re.VERBOSE | re.DOTALL,
)

_KINDS = {
    "doc": TriviaKind.DOCUMENTATION_COMMENT,
    "line": TriviaKind.SINGLE_LINE_COMMENT,
    "block": TriviaKind.MULTI_LINE_COMMENT,
    "eol": TriviaKind.END_OF_LINE,
    "ws": TriviaKind.WHITESPACE,
    "directive": TriviaKind.DIRECTIVE,
    "skipped": TriviaKind.SKIPPED,
}


def tokenize_trivia(text: str) -> list[Trivia]:
    """Split whitespace/comment text into trivia, in source order."""
    return [
        Trivia(kind=_KINDS[match.lastgroup], text=match.group())
        for match in _TRIVIA_RE.finditer(text)
        if match.lastgroup is not None
    ]


def split_leading_trivia(gap: str, has_previous_token: bool) -> list[Trivia]:
    """Return the trivia in `gap` that leads the next token.

    The previous token keeps everything up to and including the first
    end-of-line trivia as trailing trivia. Line breaks inside a block
    comment do not count. Without a previous token the whole gap is
    leading trivia.
    """
    trivia = tokenize_trivia(gap)
    if not has_previous_token:
        return trivia
    for i, fragment in enumerate(trivia):
        if fragment.kind == TriviaKind.END_OF_LINE or _ends_line(fragment):
            return trivia[i + 1 :]
    return []


def _ends_line(fragment: Trivia) -> bool:
    # Documentation comments own their final end-of-line.
    return fragment.kind == TriviaKind.DOCUMENTATION_COMMENT and fragment.text.endswith(
        ("\n", "\r")
    )


def classify_comment(text: str) -> Trivia:
    """Classify the text of a single comment."""
    if text.startswith("///") and not text.startswith("////"):
        return Trivia(kind=TriviaKind.DOCUMENTATION_COMMENT, text=text)
    if text.startswith("/*"):
        return Trivia(kind=TriviaKind.MULTI_LINE_COMMENT, text=text)
    return Trivia(kind=TriviaKind.SINGLE_LINE_COMMENT, text=text)

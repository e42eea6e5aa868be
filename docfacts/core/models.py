"""Data models for Docfacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any


class TokenKind(Enum):
    """Classification of a syntax token."""

    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    PUNCTUATION = "punctuation"
    LITERAL = "literal"


class TriviaKind(Enum):
    """Classification of a trivia fragment."""

    WHITESPACE = "whitespace"
    END_OF_LINE = "end_of_line"
    SINGLE_LINE_COMMENT = "single_line_comment"
    MULTI_LINE_COMMENT = "multi_line_comment"
    DOCUMENTATION_COMMENT = "documentation_comment"
    DIRECTIVE = "directive"
    SKIPPED = "skipped"


class DeclarationKind(Enum):
    """Declarations that facts can be extracted for."""

    CLASS = "class"
    INTERFACE = "interface"
    STRUCT = "struct"
    ENUM = "enum"
    CONSTRUCTOR = "constructor"
    METHOD = "method"
    PROPERTY = "property"


class FragmentKind(Enum):
    """How a constructor argument contributes to an exception message."""

    LITERAL = "literal"
    INTERPOLATED = "interpolated"
    OTHER = "other"


@dataclass(frozen=True)
class SyntaxToken:
    """A token of the syntax tree."""

    kind: TokenKind
    text: str


@dataclass(frozen=True)
class Trivia:
    """A whitespace or comment fragment attached to a token."""

    kind: TriviaKind
    text: str


@dataclass(frozen=True)
class MessageFragment:
    """One constructor argument, classified for message reconstruction."""

    kind: FragmentKind
    text: str = ""


@dataclass(frozen=True)
class ExceptionDescriptor:
    """An exception thrown at a `throw new X(...)` site."""

    spelled_type: str
    message: str


@dataclass
class DeclarationSignature:
    """Names declared by a class, interface or member."""

    identifier: str
    type_parameters: list[str] = field(default_factory=list)
    parameters: list[str] = field(default_factory=list)
    base_types: list[str] = field(default_factory=list)


@dataclass
class BodyFacts:
    """Narrative hints found in a member body."""

    comments: list[str] = field(default_factory=list)
    returns: list[str] = field(default_factory=list)


@dataclass
class DeclarationFacts:
    """Everything extracted for a single declaration."""

    file: Path | None
    line: int
    kind: DeclarationKind
    signature: DeclarationSignature
    indentation: Trivia
    is_documented: bool = False
    body: BodyFacts = field(default_factory=BodyFacts)
    exceptions: list[ExceptionDescriptor] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-serializable dict."""
        return {
            "file": str(self.file) if self.file else None,
            "line": self.line,
            "kind": self.kind.value,
            "identifier": self.signature.identifier,
            "type_parameters": self.signature.type_parameters,
            "parameters": self.signature.parameters,
            "base_types": self.signature.base_types,
            "indentation": self.indentation.text,
            "is_documented": self.is_documented,
            "comments": self.body.comments,
            "returns": self.body.returns,
            "exceptions": [
                {"type": e.spelled_type, "message": e.message} for e in self.exceptions
            ],
        }


class ExtractStats:
    """Statistics from an extraction run."""

    def __init__(self) -> None:
        self.files: int = 0
        self.declarations: int = 0
        self.skipped: int = 0
        self.with_syntax_errors: int = 0
        self.errors: list[str] = []

    def __repr__(self) -> str:
        return (
            f"ExtractStats(files={self.files}, declarations={self.declarations}, "
            f"skipped={self.skipped}, with_syntax_errors={self.with_syntax_errors}, "
            f"errors={len(self.errors)})"
        )

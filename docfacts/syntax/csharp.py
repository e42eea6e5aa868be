"""Tree-sitter C# frontend implementing the SyntaxNode protocol."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

from docfacts.core.exceptions import ParseError
from docfacts.core.models import SyntaxToken, TokenKind, Trivia, TriviaKind
from docfacts.syntax.base import SyntaxKind
from docfacts.syntax.trivia import classify_comment, split_leading_trivia

logger = logging.getLogger(__name__)

GRAMMAR = "csharp"

_KEYWORD_LEAVES = frozenset({"predefined_type", "implicit_type"})
_DIRECTIVE_PREFIX = "preproc_"


class CSharpParser:
    """Parser for C# source files using tree-sitter."""

    def supports(self, file: Path) -> bool:
        """Check if this parser supports the given file."""
        return file.suffix == ".cs"

    def parse(self, file: Path) -> CSharpSyntaxTree:
        """Parse a C# file into a syntax tree."""
        try:
            text = file.read_text(encoding="utf-8-sig")
        except (OSError, UnicodeDecodeError) as e:
            raise ParseError(f"Cannot read {file}: {e}") from e

        return self.parse_text(text, path=file)

    def parse_text(self, text: str, path: Path | None = None) -> CSharpSyntaxTree:
        """Parse C# source text as a compilation unit.

        Comments, documentation comments included, are kept and surface as
        trivia. Syntax errors do not raise: tree-sitter recovers and the
        tree is flagged with `has_errors`.
        """
        source = text.encode("utf-8")
        # A parser per call keeps concurrent parses independent.
        tree = get_parser(GRAMMAR).parse(source)

        result = CSharpSyntaxTree(tree, source, path)
        if result.has_errors:
            logger.debug("Syntax errors in %s", path or "<snippet>")
        return result


class CSharpSyntaxTree:
    """A parsed compilation unit and the source it came from."""

    def __init__(self, tree: Tree, source: bytes, path: Path | None = None) -> None:
        self._tree = tree
        self.source = source
        self.path = path

    @property
    def root(self) -> CSharpNode:
        return CSharpNode(self._tree.root_node, self)

    @property
    def has_errors(self) -> bool:
        return self._tree.root_node.has_error

    def text(self, start: int, end: int) -> str:
        """Decode the source between two byte offsets."""
        return self.source[start:end].decode("utf-8", errors="replace")

    def token(self, node: Node) -> SyntaxToken:
        """Build a token from a leaf node."""
        return SyntaxToken(kind=_token_kind(node), text=self.text(node.start_byte, node.end_byte))

    def leading_trivia(self, node: Node) -> list[Trivia]:
        """Reconstruct the leading trivia of `node` from the source text."""
        previous_end = _previous_token_end(node)
        gap = self.text(previous_end or 0, node.start_byte)
        return split_leading_trivia(gap, has_previous_token=previous_end is not None)


class CSharpNode:
    """SyntaxNode adapter over a tree-sitter node."""

    __slots__ = ("_node", "_tree")

    def __init__(self, node: Node, tree: CSharpSyntaxTree) -> None:
        self._node = node
        self._tree = tree

    def __repr__(self) -> str:
        return f"CSharpNode({self.kind}, line={self.line})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CSharpNode):
            return NotImplemented
        return self._tree is other._tree and self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> tuple[int, int, str]:
        return (self._node.start_byte, self._node.end_byte, self._node.type)

    @property
    def kind(self) -> str:
        return self._node.type

    @property
    def text(self) -> str:
        return self._tree.text(self._node.start_byte, self._node.end_byte)

    @property
    def full_text(self) -> str:
        return "".join(t.text for t in self.leading_trivia()) + self.text

    @property
    def line(self) -> int:
        return self._node.start_point[0] + 1

    @property
    def parent(self) -> CSharpNode | None:
        parent = self._node.parent
        return CSharpNode(parent, self._tree) if parent is not None else None

    def leading_trivia(self) -> list[Trivia]:
        return self._tree.leading_trivia(self._node)

    def child_tokens(self) -> Iterator[SyntaxToken]:
        for field_name, child in _children_with_fields(self._node):
            if _is_token(child, field_name):
                yield self._tree.token(child)

    def child_nodes(self) -> Iterator[CSharpNode]:
        for field_name, child in _children_with_fields(self._node):
            if not _is_trivia_node(child) and not _is_token(child, field_name):
                yield CSharpNode(child, self._tree)

    def descendant_tokens(self) -> Iterator[SyntaxToken]:
        for _, node in _walk(self._node):
            if not _is_trivia_node(node) and node.child_count == 0:
                yield self._tree.token(node)

    def descendant_nodes(self, include_self: bool = False) -> Iterator[CSharpNode]:
        if include_self:
            yield self
        for field_name, node in _walk(self._node):
            if not _is_trivia_node(node) and not _is_token(node, field_name):
                yield CSharpNode(node, self._tree)

    def descendant_trivia(self) -> Iterator[Trivia]:
        for _, node in _walk(self._node):
            if not _is_trivia_node(node):
                continue
            text = self._tree.text(node.start_byte, node.end_byte)
            if node.type == SyntaxKind.COMMENT:
                yield classify_comment(text)
            else:
                yield Trivia(kind=TriviaKind.DIRECTIVE, text=text.rstrip())

    def field(self, name: str) -> CSharpNode | None:
        child = self._node.child_by_field_name(name)
        return CSharpNode(child, self._tree) if child is not None else None

    def child_by_kind(self, *kinds: str) -> CSharpNode | None:
        for child in self.child_nodes():
            if child.kind in kinds:
                return child
        return None


def _children_with_fields(node: Node) -> Iterator[tuple[str | None, Node]]:
    """Direct children of `node` paired with their grammar field names."""
    cursor = node.walk()
    if not cursor.goto_first_child():
        return
    while True:
        child = cursor.node
        if child is not None:
            yield cursor.field_name, child
        if not cursor.goto_next_sibling():
            break


def _walk(node: Node) -> Iterator[tuple[str | None, Node]]:
    """Pre-order traversal of the descendants of `node`, not entering trivia."""
    stack = list(reversed(list(_children_with_fields(node))))
    while stack:
        field_name, current = stack.pop()
        yield field_name, current
        if not _is_trivia_node(current):
            stack.extend(reversed(list(_children_with_fields(current))))


def _is_trivia_node(node: Node) -> bool:
    """Comments, and directives that fill one line such as `#region` or `#pragma`.

    Multi-line `#if` blocks wrap real declarations and stay in the tree.
    """
    if node.type == SyntaxKind.COMMENT:
        return True
    if not node.type.startswith(_DIRECTIVE_PREFIX):
        return False
    start_row, end_row = node.start_point[0], node.end_point[0]
    return end_row == start_row or (end_row == start_row + 1 and node.end_point[1] == 0)


def _is_token(node: Node, field_name: str | None) -> bool:
    """Leaves owned directly by their parent: keywords, punctuation and declared names."""
    if node.child_count != 0 or _is_trivia_node(node):
        return False
    if not node.is_named:
        return True
    return node.type == SyntaxKind.IDENTIFIER and field_name == "name"


def _token_kind(node: Node) -> TokenKind:
    if node.type == SyntaxKind.IDENTIFIER:
        return TokenKind.IDENTIFIER
    if node.is_named:
        return TokenKind.KEYWORD if node.type in _KEYWORD_LEAVES else TokenKind.LITERAL
    if node.type[:1].isalpha():
        return TokenKind.KEYWORD
    return TokenKind.PUNCTUATION


def _previous_token_end(node: Node) -> int | None:
    """End offset of the last token before `node`, or None at the start of the file.

    Comments and directives in between are left in the gap as trivia.
    """
    current: Node | None = node
    while current is not None:
        sibling = current.prev_sibling
        while sibling is not None and _is_trivia_node(sibling):
            sibling = sibling.prev_sibling
        if sibling is not None:
            return sibling.end_byte
        current = current.parent
    return None

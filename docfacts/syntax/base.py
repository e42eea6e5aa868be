"""Protocol for syntax nodes consumed by the analysis functions."""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docfacts.core.models import SyntaxToken, Trivia


class SyntaxKind:
    """Node kinds the analysis functions look for.

    Values follow the tree-sitter C# grammar, so a frontend built on it can
    report its node types unchanged.
    """

    COMPILATION_UNIT = "compilation_unit"
    USING_DIRECTIVE = "using_directive"
    EXTERN_ALIAS_DIRECTIVE = "extern_alias_directive"
    GLOBAL_ATTRIBUTE = "global_attribute"
    GLOBAL_ATTRIBUTE_LIST = "global_attribute_list"
    NAMESPACE_DECLARATION = "namespace_declaration"
    FILE_SCOPED_NAMESPACE_DECLARATION = "file_scoped_namespace_declaration"

    CLASS_DECLARATION = "class_declaration"
    INTERFACE_DECLARATION = "interface_declaration"
    STRUCT_DECLARATION = "struct_declaration"
    RECORD_DECLARATION = "record_declaration"
    ENUM_DECLARATION = "enum_declaration"
    CONSTRUCTOR_DECLARATION = "constructor_declaration"
    METHOD_DECLARATION = "method_declaration"
    PROPERTY_DECLARATION = "property_declaration"
    DECLARATION_LIST = "declaration_list"

    BASE_LIST = "base_list"
    PRIMARY_CONSTRUCTOR_BASE_TYPE = "primary_constructor_base_type"
    TYPE_PARAMETER_LIST = "type_parameter_list"
    TYPE_PARAMETER = "type_parameter"
    PARAMETER_LIST = "parameter_list"
    PARAMETER = "parameter"

    BLOCK = "block"
    ARROW_EXPRESSION_CLAUSE = "arrow_expression_clause"
    RETURN_STATEMENT = "return_statement"
    THROW_STATEMENT = "throw_statement"
    THROW_EXPRESSION = "throw_expression"

    OBJECT_CREATION_EXPRESSION = "object_creation_expression"
    ARGUMENT_LIST = "argument_list"
    ARGUMENT = "argument"
    INITIALIZER_EXPRESSION = "initializer_expression"
    IDENTIFIER = "identifier"
    STRING_LITERAL = "string_literal"
    VERBATIM_STRING_LITERAL = "verbatim_string_literal"
    RAW_STRING_LITERAL = "raw_string_literal"
    INTERPOLATED_STRING_EXPRESSION = "interpolated_string_expression"

    COMMENT = "comment"


class SyntaxNode(Protocol):
    """Capabilities a frontend node must offer.

    Tokens are the leaves that belong to a node directly (keywords,
    punctuation, declared identifiers). Everything else below a node is a
    child node. Comments are never tokens or nodes; they are trivia.
    """

    @property
    def kind(self) -> str:
        """The node kind, one of the `SyntaxKind` values for known shapes."""
        ...

    @property
    def text(self) -> str:
        """Source text of the node without surrounding trivia."""
        ...

    @property
    def full_text(self) -> str:
        """Source text of the node including its leading trivia."""
        ...

    @property
    def line(self) -> int:
        """1-based line the node starts on."""
        ...

    @property
    def parent(self) -> SyntaxNode | None: ...

    def leading_trivia(self) -> list[Trivia]:
        """Trivia between the previous token's trailing trivia and the node."""
        ...

    def child_tokens(self) -> Iterator[SyntaxToken]: ...

    def child_nodes(self) -> Iterator[SyntaxNode]: ...

    def descendant_tokens(self) -> Iterator[SyntaxToken]: ...

    def descendant_nodes(self, include_self: bool = False) -> Iterator[SyntaxNode]:
        """Descendant nodes in document (pre-)order."""
        ...

    def descendant_trivia(self) -> Iterator[Trivia]:
        """Comment trivia anywhere inside the node."""
        ...

    def field(self, name: str) -> SyntaxNode | None:
        """Child node stored under a named grammar field."""
        ...

    def child_by_kind(self, *kinds: str) -> SyntaxNode | None:
        """First child node whose kind is one of `kinds`."""
        ...

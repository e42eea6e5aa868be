"""Identifier, parameter and base type extraction for declarations."""

from __future__ import annotations

from collections.abc import Callable

from docfacts.analysis.reader import (
    child_tokens,
    containing_declaration,
    descendant_tokens,
    first_token,
    last_token,
)
from docfacts.core.models import DeclarationSignature, TokenKind
from docfacts.syntax.base import SyntaxKind, SyntaxNode

IdentifierStrategy = Callable[[SyntaxNode], str | None]

_BASE_TYPE_OWNERS = frozenset(
    {
        SyntaxKind.CLASS_DECLARATION,
        SyntaxKind.INTERFACE_DECLARATION,
        SyntaxKind.STRUCT_DECLARATION,
        SyntaxKind.RECORD_DECLARATION,
    }
)


def direct_identifier(node: SyntaxNode) -> str | None:
    """First identifier token owned by the node itself."""
    token = first_token(child_tokens(node, TokenKind.IDENTIFIER))
    return token.text if token else None


def descendant_identifier(node: SyntaxNode) -> str | None:
    """Last identifier token anywhere below the node."""
    token = last_token(descendant_tokens(node, TokenKind.IDENTIFIER))
    return token.text if token else None


# Tried in order, first non-blank result wins.
IDENTIFIER_STRATEGIES: tuple[IdentifierStrategy, ...] = (
    direct_identifier,
    descendant_identifier,
)


def find_member_identifier(node: SyntaxNode) -> str:
    """Find the identifier a declaration introduces.

    Simple declarations own their identifier token. For other shapes (a
    field's variable declarator, for instance) the last identifier in the
    node is used.
    """
    for strategy in IDENTIFIER_STRATEGIES:
        identifier = strategy(node)
        if identifier and identifier.strip():
            return identifier
    return ""


def extract_class_name(constructor: SyntaxNode) -> str:
    """Name of a constructor's class, with generic parameters as `Name{T,U}`."""
    identifier = find_member_identifier(constructor)

    declaration = containing_declaration(constructor)
    if declaration is not None and declaration.kind == SyntaxKind.CLASS_DECLARATION:
        type_parameters = declaration.child_by_kind(SyntaxKind.TYPE_PARAMETER_LIST)
        if type_parameters is not None:
            return f"{identifier}{{{','.join(extract_type_params(type_parameters))}}}"

    return identifier


def extract_base_types(declaration: SyntaxNode) -> list[str]:
    """Spelling of each base type, with `<>` turned into `{}`."""
    base_list = declaration.child_by_kind(SyntaxKind.BASE_LIST)
    if base_list is None:
        return []

    base_types = []
    for base_type in base_list.child_nodes():
        if base_type.kind == SyntaxKind.ARGUMENT_LIST:
            continue
        if base_type.kind == SyntaxKind.PRIMARY_CONSTRUCTOR_BASE_TYPE:
            # `record B(int X) : A(X)` lists the type and its arguments together
            base_type = next(base_type.child_nodes(), base_type)
        base_types.append(_normalize_generics(base_type.text))
    return base_types


def extract_params(parameter_list: SyntaxNode | None) -> list[str]:
    return _declared_names(parameter_list, SyntaxKind.PARAMETER)


def extract_type_params(type_parameter_list: SyntaxNode | None) -> list[str]:
    return _declared_names(type_parameter_list, SyntaxKind.TYPE_PARAMETER)


def extract_signature(declaration: SyntaxNode) -> DeclarationSignature:
    """Collect every name a declaration introduces."""
    if declaration.kind == SyntaxKind.CONSTRUCTOR_DECLARATION:
        identifier = extract_class_name(declaration)
    else:
        identifier = find_member_identifier(declaration)

    base_types = []
    if declaration.kind in _BASE_TYPE_OWNERS:
        base_types = extract_base_types(declaration)

    return DeclarationSignature(
        identifier=identifier,
        type_parameters=extract_type_params(
            declaration.child_by_kind(SyntaxKind.TYPE_PARAMETER_LIST)
        ),
        parameters=extract_params(declaration.child_by_kind(SyntaxKind.PARAMETER_LIST)),
        base_types=base_types,
    )


def _declared_names(node_list: SyntaxNode | None, item_kind: str) -> list[str]:
    if node_list is None:
        return []

    names = []
    for item in node_list.child_nodes():
        if item.kind != item_kind:
            continue
        name = find_member_identifier(item)
        if name:
            names.append(name)
    return names


def _normalize_generics(spelling: str) -> str:
    return spelling.replace("<", "{").replace(">", "}").strip()

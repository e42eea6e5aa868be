"""Exception-throw analysis for member bodies."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from docfacts.analysis.literals import decode_string_literal, interpolated_contents
from docfacts.analysis.reader import descendant_nodes
from docfacts.core.models import ExceptionDescriptor, FragmentKind, MessageFragment
from docfacts.syntax.base import SyntaxKind, SyntaxNode

_STRING_LITERALS = frozenset(
    {
        SyntaxKind.STRING_LITERAL,
        SyntaxKind.VERBATIM_STRING_LITERAL,
        SyntaxKind.RAW_STRING_LITERAL,
    }
)

_NOT_A_TYPE = frozenset({SyntaxKind.ARGUMENT_LIST, SyntaxKind.INITIALIZER_EXPRESSION})


def extract_thrown_exceptions(body: SyntaxNode | None) -> Iterator[ExceptionDescriptor]:
    """Yield the exceptions thrown in a body, in source order.

    Throw statements and throw expressions nested in other expressions
    (`x ?? throw new ...`) are found in one document-order pass. Sites that
    do not construct an exception (`throw;`, `throw ex;`) yield nothing.
    """
    if body is None:
        return

    for site in descendant_nodes(body, SyntaxKind.THROW_STATEMENT, SyntaxKind.THROW_EXPRESSION):
        thrown = next(site.child_nodes(), None)
        if thrown is None:
            continue

        exception = extract_exception_from_expression(thrown)
        if exception is not None:
            yield exception


def extract_exception_from_expression(expression: SyntaxNode) -> ExceptionDescriptor | None:
    """Describe `new X(...)`; None for any other thrown expression."""
    # TODO: identify the type of thrown variables, e.g. `throw ex;`
    if expression.kind != SyntaxKind.OBJECT_CREATION_EXPRESSION:
        return None

    type_node = expression.field("type") or next(
        (c for c in expression.child_nodes() if c.kind not in _NOT_A_TYPE), None
    )
    spelled_type = type_node.text.strip() if type_node is not None else ""
    if not spelled_type:
        return None

    arguments = expression.child_by_kind(SyntaxKind.ARGUMENT_LIST)
    if arguments is None:
        return ExceptionDescriptor(spelled_type=spelled_type, message="")

    fragments = (
        classify_argument(_argument_expression(argument))
        for argument in arguments.child_nodes()
        if argument.kind == SyntaxKind.ARGUMENT
    )
    return ExceptionDescriptor(spelled_type=spelled_type, message=reconstruct_message(fragments))


def classify_argument(expression: SyntaxNode | None) -> MessageFragment:
    """Classify a constructor argument by what it adds to a message."""
    if expression is None:
        return MessageFragment(kind=FragmentKind.OTHER)

    if expression.kind in _STRING_LITERALS:
        # throw new Exception("This field is wrong");
        return MessageFragment(
            kind=FragmentKind.LITERAL, text=decode_string_literal(expression.text)
        )

    if expression.kind == SyntaxKind.INTERPOLATED_STRING_EXPRESSION:
        # throw new Exception($"This {field} is wrong");
        return MessageFragment(
            kind=FragmentKind.INTERPOLATED, text=interpolated_contents(expression.text)
        )

    return MessageFragment(kind=FragmentKind.OTHER)


def reconstruct_message(fragments: Iterable[MessageFragment]) -> str:
    """Join fragment texts with single spaces.

    A fragment replaces a message that is still blank; empty fragments and
    arguments of other kinds are skipped.
    """
    message = ""
    for fragment in fragments:
        if fragment.kind == FragmentKind.OTHER or not fragment.text:
            continue

        if not message.strip():
            message = fragment.text
        else:
            message = f"{message} {fragment.text}"

    return message


def _argument_expression(argument: SyntaxNode) -> SyntaxNode | None:
    # The expression follows an optional `name:` and `ref`/`out`/`in`.
    expression = None
    for child in argument.child_nodes():
        expression = child
    return expression

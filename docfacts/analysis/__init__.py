"""
Analysis: pure extraction functions over SyntaxNode declarations.

Components:
    - reader: token and trivia accessors
    - indentation: left margin for a comment block
    - signature: identifiers, type parameters, parameters, base types
    - throws: exceptions thrown in a body and their messages
    - body: inline comments and returned identifiers
    - parsing: single-node parser for fixtures and snippets

Every function here reads the nodes it is given and nothing else, so calls
over the same or different trees can run in parallel. Facts that cannot be
determined are left out of the results; only parse_node raises.
"""

from docfacts.analysis.body import (
    extract_body_facts,
    extract_line_comments,
    extract_return_identifiers,
)
from docfacts.analysis.indentation import FALLBACK_INDENTATION, get_indentation_trivia
from docfacts.analysis.parsing import parse_node
from docfacts.analysis.reader import is_documented
from docfacts.analysis.signature import (
    extract_base_types,
    extract_class_name,
    extract_params,
    extract_signature,
    extract_type_params,
    find_member_identifier,
)
from docfacts.analysis.throws import (
    extract_exception_from_expression,
    extract_thrown_exceptions,
    reconstruct_message,
)

__all__ = [
    "FALLBACK_INDENTATION",
    "extract_base_types",
    "extract_body_facts",
    "extract_class_name",
    "extract_exception_from_expression",
    "extract_line_comments",
    "extract_params",
    "extract_return_identifiers",
    "extract_signature",
    "extract_thrown_exceptions",
    "extract_type_params",
    "find_member_identifier",
    "get_indentation_trivia",
    "is_documented",
    "parse_node",
    "reconstruct_message",
]

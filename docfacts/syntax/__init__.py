"""
Syntax layer: the node capability interface and the C# frontend.

Components:
    - SyntaxNode: Protocol the analysis functions depend on
    - SyntaxKind: Node kind names the analysis functions look for
    - CSharpParser: tree-sitter based parser for C# files
    - CSharpSyntaxTree / CSharpNode: parsed tree and its SyntaxNode adapter

Trivia (whitespace and comments) is not part of the tree-sitter tree; the
frontend rebuilds it from the source text using the Roslyn convention that
a token's trailing trivia ends at the first end-of-line.

Adding a new frontend:
    1. Wrap the parser's nodes in a class implementing SyntaxNode
    2. Report node kinds using the SyntaxKind values
"""

from docfacts.syntax.base import SyntaxKind, SyntaxNode
from docfacts.syntax.csharp import CSharpNode, CSharpParser, CSharpSyntaxTree

__all__ = [
    "CSharpNode",
    "CSharpParser",
    "CSharpSyntaxTree",
    "SyntaxKind",
    "SyntaxNode",
]

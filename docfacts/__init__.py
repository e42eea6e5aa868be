"""
Docfacts: Declaration metadata extraction for C# documentation comments.

Docfacts parses C# source with tree-sitter and extracts the facts a
documentation renderer needs:
- Member identifiers, generic parameters, parameters and base types
- Thrown exceptions with a best-effort message
- Inline comments and simple returned identifiers
- The indentation to align a comment block with its declaration

Usage:
    from docfacts.core.extractor import DeclarationExtractor

    extractor = DeclarationExtractor()
    for facts in extractor.extract_file(Path("Service.cs")):
        print(facts.signature.identifier, facts.exceptions)
"""

__version__ = "0.1.0"

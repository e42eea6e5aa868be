"""
Core module: data models, exceptions, configuration and orchestration.

Models (models.py):
    - DeclarationSignature: Identifier, type parameters, parameters, base types
    - BodyFacts: Inline comments and returned identifiers
    - ExceptionDescriptor: Spelled type and message of a thrown exception
    - DeclarationFacts: Everything extracted for one declaration
    - Trivia/SyntaxToken: Values read from the syntax tree

Exceptions (exceptions.py):
    - DocfactsError: Base exception for all docfacts errors
    - ParseError: Source file could not be read
    - NodeNotFoundError: Snippet has no node of the requested kind
    - ConfigError: Configuration file is missing or invalid

Configuration (config.py):
    - DocfactsConfig: Declaration kinds, excludes, documented members
    - Loaded from --config or the DOCFACTS_CONFIG_FILE environment variable

Extraction (extractor.py):
    - DeclarationExtractor: Walks files and aggregates facts per declaration
"""

from docfacts.core.config import DocfactsConfig, load_config, resolve_config_path
from docfacts.core.exceptions import (
    ConfigError,
    DocfactsError,
    NodeNotFoundError,
    ParseError,
)
from docfacts.core.models import (
    BodyFacts,
    DeclarationFacts,
    DeclarationKind,
    DeclarationSignature,
    ExceptionDescriptor,
    ExtractStats,
    SyntaxToken,
    TokenKind,
    Trivia,
    TriviaKind,
)

__all__ = [
    # Models
    "BodyFacts",
    "DeclarationFacts",
    "DeclarationKind",
    "DeclarationSignature",
    "ExceptionDescriptor",
    "ExtractStats",
    "SyntaxToken",
    "TokenKind",
    "Trivia",
    "TriviaKind",
    # Exceptions
    "DocfactsError",
    "ParseError",
    "NodeNotFoundError",
    "ConfigError",
    # Configuration
    "DocfactsConfig",
    "load_config",
    "resolve_config_path",
]

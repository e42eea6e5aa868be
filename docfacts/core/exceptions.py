"""Docfacts custom exceptions."""


class DocfactsError(Exception):
    """Base exception for Docfacts errors."""


class ParseError(DocfactsError):
    """Error reading or parsing a source file."""


class NodeNotFoundError(DocfactsError):
    """No syntax node of the requested kind exists in a snippet."""


class ConfigError(DocfactsError):
    """Invalid or unreadable configuration."""

"""Extractor that coordinates parsing and per-declaration analysis."""

from __future__ import annotations

import fnmatch
import logging
from collections.abc import Callable
from pathlib import Path

from docfacts.analysis import (
    extract_body_facts,
    extract_signature,
    extract_thrown_exceptions,
    get_indentation_trivia,
    is_documented,
)
from docfacts.core.config import DocfactsConfig
from docfacts.core.exceptions import ParseError
from docfacts.core.models import BodyFacts, DeclarationFacts, DeclarationKind, ExtractStats
from docfacts.syntax import CSharpParser, CSharpSyntaxTree, SyntaxKind, SyntaxNode

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[Path, int, int], None]

DEFAULT_EXCLUDES = [
    "bin",
    "obj",
    ".git",
    ".vs",
    "node_modules",
]

DECLARATION_KINDS = {
    SyntaxKind.CLASS_DECLARATION: DeclarationKind.CLASS,
    SyntaxKind.INTERFACE_DECLARATION: DeclarationKind.INTERFACE,
    SyntaxKind.STRUCT_DECLARATION: DeclarationKind.STRUCT,
    SyntaxKind.ENUM_DECLARATION: DeclarationKind.ENUM,
    SyntaxKind.CONSTRUCTOR_DECLARATION: DeclarationKind.CONSTRUCTOR,
    SyntaxKind.METHOD_DECLARATION: DeclarationKind.METHOD,
    SyntaxKind.PROPERTY_DECLARATION: DeclarationKind.PROPERTY,
}

_BODY_KINDS = (SyntaxKind.BLOCK, SyntaxKind.ARROW_EXPRESSION_CLAUSE)


class DeclarationExtractor:
    """Coordinates file parsing and declaration fact extraction."""

    def __init__(self, config: DocfactsConfig | None = None) -> None:
        """Initialize with a configuration (defaults when omitted)."""
        self._config = config or DocfactsConfig()
        self._kinds = self._config.kinds
        self._parser = CSharpParser()

    def extract_directory(
        self,
        directory: Path,
        exclude_patterns: list[str] | None = None,
        on_progress: ProgressCallback | None = None,
    ) -> tuple[list[DeclarationFacts], ExtractStats]:
        """Extract facts for every C# file in a directory.

        Args:
            directory: Directory to walk
            exclude_patterns: Additional glob patterns to exclude (e.g., "tests/*")
            on_progress: Optional callback for progress updates (file, current, total)

        Returns:
            Facts for all declarations, and statistics for the run. Files that
            cannot be read are recorded in the statistics, not raised.
        """
        all_excludes = DEFAULT_EXCLUDES + self._config.exclude + (exclude_patterns or [])
        stats = ExtractStats()
        results: list[DeclarationFacts] = []

        source_files = sorted(f for f in directory.rglob("*.cs") if f.is_file())
        total_files = len(source_files)

        for i, file in enumerate(source_files):
            relative_path = file.relative_to(directory).as_posix()
            if self._should_exclude(relative_path, all_excludes):
                stats.skipped += 1
            else:
                try:
                    tree = self._parser.parse(file)
                except ParseError as e:
                    stats.errors.append(str(e))
                else:
                    if tree.has_errors:
                        logger.warning("Syntax errors in %s, results may be partial", file)
                        stats.with_syntax_errors += 1
                    declarations = self.extract_tree(tree)
                    results.extend(declarations)
                    stats.declarations += len(declarations)
                    stats.files += 1

            if on_progress:
                on_progress(file, i + 1, total_files)

        return results, stats

    def extract_file(self, file: Path) -> list[DeclarationFacts]:
        """Extract facts for the declarations of a single file.

        Raises:
            ParseError: If the file cannot be read.
        """
        return self.extract_tree(self._parser.parse(file))

    def extract_text(self, text: str) -> list[DeclarationFacts]:
        """Extract facts for the declarations of a source snippet."""
        return self.extract_tree(self._parser.parse_text(text))

    def extract_tree(self, tree: CSharpSyntaxTree) -> list[DeclarationFacts]:
        """Extract facts for every enabled declaration, in document order."""
        results = []
        for node in tree.root.descendant_nodes():
            kind = DECLARATION_KINDS.get(node.kind)
            if kind is None or kind not in self._kinds:
                continue

            documented = is_documented(node)
            if documented and not self._config.include_documented:
                continue

            results.append(self.extract_declaration(node, kind, tree.path, documented))
        return results

    def extract_declaration(
        self,
        node: SyntaxNode,
        kind: DeclarationKind,
        file: Path | None = None,
        documented: bool | None = None,
    ) -> DeclarationFacts:
        """Aggregate all facts for one declaration node."""
        body = node.child_by_kind(*_BODY_KINDS)

        if body is not None and body.kind == SyntaxKind.BLOCK:
            body_facts = extract_body_facts(body)
        else:
            body_facts = BodyFacts()

        return DeclarationFacts(
            file=file,
            line=node.line,
            kind=kind,
            signature=extract_signature(node),
            indentation=get_indentation_trivia(node),
            is_documented=is_documented(node) if documented is None else documented,
            body=body_facts,
            exceptions=list(extract_thrown_exceptions(body)),
        )

    def _should_exclude(self, path: str, patterns: list[str]) -> bool:
        """Check if a path matches any exclusion pattern.

        Excludes:
        - Any path component starting with '.' (hidden files/directories)
        - The whole relative path or any component matching a pattern
        """
        parts = Path(path).parts
        for part in parts:
            if part.startswith("."):
                return True
            for pattern in patterns:
                if fnmatch.fnmatch(part, pattern):
                    return True
        return any(fnmatch.fnmatch(path, pattern) for pattern in patterns)

"""Tests for error handling paths."""

import tempfile
from pathlib import Path

import pytest

from docfacts.core.exceptions import ConfigError, DocfactsError, NodeNotFoundError, ParseError
from docfacts.core.extractor import DeclarationExtractor
from docfacts.syntax.csharp import CSharpParser


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as td:
        yield Path(td)


class TestExceptionHierarchy:
    """Tests for the exception classes."""

    @pytest.mark.parametrize("error", [ParseError, NodeNotFoundError, ConfigError])
    def test_subclasses_docfacts_error(self, error: type[Exception]) -> None:
        assert issubclass(error, DocfactsError)


class TestParserErrors:
    """Tests for parser error handling."""

    def test_parse_syntax_error_recovers(self, temp_dir: Path) -> None:
        """Test that syntax errors flag the tree instead of raising."""
        file_path = temp_dir / "Broken.cs"
        file_path.write_text("class Broken\n{\n    void Run(\n}\n")

        tree = CSharpParser().parse(file_path)

        assert tree.has_errors
        assert tree.path == file_path

    def test_parse_encoding_error(self, temp_dir: Path) -> None:
        """Test that encoding errors raise ParseError."""
        file_path = temp_dir / "BadEncoding.cs"
        file_path.write_bytes(b"\xff\xfe invalid utf-8 \x80\x81")

        with pytest.raises(ParseError) as exc_info:
            CSharpParser().parse(file_path)

        assert "Cannot read" in str(exc_info.value)

    def test_parse_missing_file(self, temp_dir: Path) -> None:
        """Test that a missing file raises ParseError."""
        with pytest.raises(ParseError):
            CSharpParser().parse(temp_dir / "Missing.cs")

    def test_parse_empty_file(self, temp_dir: Path) -> None:
        """Test that empty files parse without error."""
        file_path = temp_dir / "Empty.cs"
        file_path.write_text("")

        tree = CSharpParser().parse(file_path)

        assert not tree.has_errors
        assert list(tree.root.child_nodes()) == []

    def test_byte_order_mark_is_ignored(self, temp_dir: Path) -> None:
        """Test that a UTF-8 BOM does not leak into the first declaration."""
        file_path = temp_dir / "Bom.cs"
        file_path.write_bytes(b"\xef\xbb\xbfclass Foo { }\n")

        tree = CSharpParser().parse(file_path)

        assert not tree.has_errors
        assert next(tree.root.child_nodes()).text == "class Foo { }"

    def test_supports(self) -> None:
        parser = CSharpParser()

        assert parser.supports(Path("Program.cs"))
        assert not parser.supports(Path("script.csx"))
        assert not parser.supports(Path("main.py"))


class TestExtractorErrors:
    """Tests for extractor error handling."""

    def test_unreadable_file_is_recorded(self, temp_dir: Path) -> None:
        """Test that unreadable files are reported in stats, not raised."""
        (temp_dir / "Good.cs").write_text("class Good { }\n")
        (temp_dir / "Bad.cs").write_bytes(b"\xff\xfe\x80\x81")

        results, stats = DeclarationExtractor().extract_directory(temp_dir)

        assert [f.signature.identifier for f in results] == ["Good"]
        assert stats.files == 1
        assert len(stats.errors) == 1
        assert "Bad.cs" in stats.errors[0]

    def test_syntax_errors_are_counted(self, temp_dir: Path) -> None:
        """Test that files with syntax errors still yield facts."""
        (temp_dir / "Broken.cs").write_text("class Broken\n{\n    void Run(\n}\n")

        _, stats = DeclarationExtractor().extract_directory(temp_dir)

        assert stats.with_syntax_errors == 1
        assert stats.files == 1
        assert stats.errors == []

    def test_extract_file_raises_parse_error(self, temp_dir: Path) -> None:
        with pytest.raises(ParseError):
            DeclarationExtractor().extract_file(temp_dir / "Missing.cs")

"""Unit tests for trivia splitting, indentation and documentation detection."""

import logging

import pytest

from docfacts.analysis.indentation import FALLBACK_INDENTATION, get_indentation_trivia
from docfacts.analysis.parsing import parse_node
from docfacts.analysis.reader import documentation_comments, is_documented, leading_trivia
from docfacts.core.models import Trivia, TriviaKind
from docfacts.syntax.base import SyntaxKind
from docfacts.syntax.trivia import classify_comment, split_leading_trivia, tokenize_trivia

NESTED = """namespace Demo
{
    public class Service
    {
        // Runs the service
        public void Run() { }

        /// <summary>
        /// Stops the service.
        /// </summary>
        public void Stop() { }
    }
}
"""


class TestTokenizeTrivia:
    """Tests for splitting raw text into trivia."""

    def test_whitespace_and_comments(self) -> None:
        trivia = tokenize_trivia("    // note\n    ")
        assert trivia == [
            Trivia(TriviaKind.WHITESPACE, "    "),
            Trivia(TriviaKind.SINGLE_LINE_COMMENT, "// note"),
            Trivia(TriviaKind.END_OF_LINE, "\n"),
            Trivia(TriviaKind.WHITESPACE, "    "),
        ]

    def test_documentation_comment_spans_lines(self) -> None:
        trivia = tokenize_trivia("/// <summary>\n    /// Text\n    /// </summary>\n    ")
        assert [t.kind for t in trivia] == [
            TriviaKind.DOCUMENTATION_COMMENT,
            TriviaKind.WHITESPACE,
        ]
        assert trivia[0].text.endswith("</summary>\n")

    def test_four_slashes_is_not_documentation(self) -> None:
        trivia = tokenize_trivia("//// disabled")
        assert trivia == [Trivia(TriviaKind.SINGLE_LINE_COMMENT, "//// disabled")]

    def test_block_comment_and_directive(self) -> None:
        trivia = tokenize_trivia("/* a\nb */\r\n#region Setup\n")
        assert [t.kind for t in trivia] == [
            TriviaKind.MULTI_LINE_COMMENT,
            TriviaKind.END_OF_LINE,
            TriviaKind.DIRECTIVE,
            TriviaKind.END_OF_LINE,
        ]
        assert trivia[1].text == "\r\n"

    def test_empty(self) -> None:
        assert tokenize_trivia("") == []


class TestSplitLeadingTrivia:
    """Tests for dividing a gap between trailing and leading trivia."""

    def test_same_line_gap_belongs_to_previous_token(self) -> None:
        assert split_leading_trivia("  ", has_previous_token=True) == []

    def test_trivia_after_first_newline(self) -> None:
        assert split_leading_trivia(" // tail\n\n    ", has_previous_token=True) == [
            Trivia(TriviaKind.END_OF_LINE, "\n"),
            Trivia(TriviaKind.WHITESPACE, "    "),
        ]

    def test_newline_inside_block_comment_does_not_split(self) -> None:
        """A block comment spanning lines stays whole in the trailing trivia."""
        trivia = split_leading_trivia(" /* a\n   b */\n    ", has_previous_token=True)
        assert trivia == [Trivia(TriviaKind.WHITESPACE, "    ")]

    def test_directive_is_leading_trivia(self) -> None:
        trivia = split_leading_trivia("\n    #region Setup\n    ", has_previous_token=True)
        assert [t.kind for t in trivia] == [
            TriviaKind.WHITESPACE,
            TriviaKind.DIRECTIVE,
            TriviaKind.END_OF_LINE,
            TriviaKind.WHITESPACE,
        ]

    def test_start_of_file(self) -> None:
        assert split_leading_trivia("// header\n", has_previous_token=False) == [
            Trivia(TriviaKind.SINGLE_LINE_COMMENT, "// header"),
            Trivia(TriviaKind.END_OF_LINE, "\n"),
        ]


class TestClassifyComment:
    """Tests for comment classification."""

    @pytest.mark.parametrize(
        ("text", "kind"),
        [
            ("// plain", TriviaKind.SINGLE_LINE_COMMENT),
            ("/// <summary/>", TriviaKind.DOCUMENTATION_COMMENT),
            ("//// four", TriviaKind.SINGLE_LINE_COMMENT),
            ("/* block */", TriviaKind.MULTI_LINE_COMMENT),
        ],
    )
    def test_kinds(self, text: str, kind: TriviaKind) -> None:
        assert classify_comment(text).kind == kind


class TestIndentation:
    """Tests for the indentation of a declaration."""

    def test_nested_member(self) -> None:
        node = parse_node(NESTED, SyntaxKind.METHOD_DECLARATION)
        assert get_indentation_trivia(node) == Trivia(TriviaKind.WHITESPACE, " " * 8)

    def test_member_after_comment(self) -> None:
        node = parse_node(NESTED, SyntaxKind.METHOD_DECLARATION)
        kinds = [t.kind for t in leading_trivia(node)]
        assert TriviaKind.SINGLE_LINE_COMMENT in kinds
        assert kinds[-1] == TriviaKind.WHITESPACE

    def test_class_in_namespace(self) -> None:
        node = parse_node(NESTED, SyntaxKind.CLASS_DECLARATION)
        assert get_indentation_trivia(node).text == "    "

    def test_first_token_of_file_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        node = parse_node("class Foo { }", SyntaxKind.CLASS_DECLARATION)

        with caplog.at_level(logging.WARNING):
            assert get_indentation_trivia(node) == FALLBACK_INDENTATION

        assert "No leading trivia" in caplog.text

    def test_same_line_member_falls_back(self) -> None:
        node = parse_node("class Foo { void Bar() {} }", SyntaxKind.METHOD_DECLARATION)
        assert get_indentation_trivia(node) == Trivia(TriviaKind.WHITESPACE, " ")

    def test_member_after_region(self) -> None:
        """A `#region` line belongs to the leading trivia of the next member."""
        code = "class Foo\n{\n    #region Setup\n    void Bar() { }\n    #endregion\n}\n"
        node = parse_node(code, SyntaxKind.METHOD_DECLARATION)

        assert get_indentation_trivia(node) == Trivia(TriviaKind.WHITESPACE, "    ")
        assert Trivia(TriviaKind.DIRECTIVE, "#region Setup") in leading_trivia(node)

    def test_member_after_pragma(self) -> None:
        code = "class Foo\n{\n    #pragma warning disable CS0618\n    void Bar() { }\n}\n"
        node = parse_node(code, SyntaxKind.METHOD_DECLARATION)

        assert get_indentation_trivia(node).text == "    "
        assert TriviaKind.DIRECTIVE in [t.kind for t in leading_trivia(node)]

    def test_documented_member_in_region(self) -> None:
        code = (
            "class Foo\n{\n    #region Api\n\n"
            "    /// <summary>Runs.</summary>\n    void Run() { }\n\n    #endregion\n}\n"
        )
        node = parse_node(code, SyntaxKind.METHOD_DECLARATION)

        assert is_documented(node)
        assert get_indentation_trivia(node).text == "    "

    def test_member_after_multiline_block_comment(self) -> None:
        code = "class Foo\n{ /* a\n   b */\n    void Bar() { }\n}\n"
        node = parse_node(code, SyntaxKind.METHOD_DECLARATION)

        assert leading_trivia(node) == [Trivia(TriviaKind.WHITESPACE, "    ")]


class TestDocumentation:
    """Tests for documentation comment detection."""

    def test_documented_member(self) -> None:
        code = NESTED.replace("public void Run() { }", "")
        node = parse_node(code, SyntaxKind.METHOD_DECLARATION)

        assert is_documented(node)
        assert "Stops the service." in documentation_comments(node)[0].text
        assert get_indentation_trivia(node).text == " " * 8

    def test_plain_comment_is_not_documentation(self) -> None:
        node = parse_node(NESTED, SyntaxKind.METHOD_DECLARATION)
        assert not is_documented(node)

    def test_documentation_before_attribute(self) -> None:
        code = "class Foo\n{\n    /// <summary>Old.</summary>\n    [Obsolete]\n    void Run() { }\n}\n"
        node = parse_node(code, SyntaxKind.METHOD_DECLARATION)
        assert is_documented(node)

"""Unit tests for string literal decoding."""

import pytest

from docfacts.analysis.literals import decode_string_literal, interpolated_contents


class TestDecodeStringLiteral:
    """Tests for literal values."""

    @pytest.mark.parametrize(
        ("raw", "value"),
        [
            ('"bad value"', "bad value"),
            ('""', ""),
            ('"tab\\there"', "tab\there"),
            ('"quote \\" inside"', 'quote " inside'),
            ('"\\u0041\\x42"', "AB"),
            ('@"C:\\temp"', "C:\\temp"),
            ('@"say ""hi"""', 'say "hi"'),
            ('"bytes"u8', "bytes"),
            ('"""raw "quoted" text"""', 'raw "quoted" text'),
        ],
    )
    def test_values(self, raw: str, value: str) -> None:
        assert decode_string_literal(raw) == value

    def test_multiline_raw_string_is_dedented(self) -> None:
        raw = '"""\n        first\n          second\n        """'
        assert decode_string_literal(raw) == "first\n  second"


class TestInterpolatedContents:
    """Tests for interpolated string contents."""

    @pytest.mark.parametrize(
        ("raw", "contents"),
        [
            ('$"Field {name} is wrong"', "Field {name} is wrong"),
            ('$"{a,5:F2} and {b}"', "{a,5:F2} and {b}"),
            ('$@"Path {dir}\\file"', "Path {dir}\\file"),
            ('@$"Path {dir}"', "Path {dir}"),
            ('$"""Raw {value}"""', "Raw {value}"),
            ('$""', ""),
        ],
    )
    def test_contents(self, raw: str, contents: str) -> None:
        assert interpolated_contents(raw) == contents

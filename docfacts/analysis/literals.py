"""Decoding of C# string literals and interpolated strings."""

from __future__ import annotations

import re

_SIMPLE_ESCAPES = {
    "'": "'",
    '"': '"',
    "\\": "\\",
    "0": "\0",
    "a": "\a",
    "b": "\b",
    "e": "\x1b",
    "f": "\f",
    "n": "\n",
    "r": "\r",
    "t": "\t",
    "v": "\v",
}

_ESCAPE_RE = re.compile(r"\\(u[0-9a-fA-F]{4}|U[0-9a-fA-F]{8}|x[0-9a-fA-F]{1,4}|.)", re.DOTALL)
_INTERPOLATION_START_RE = re.compile(r'(?:\$+@?|@\$+)("+)')
_UTF8_SUFFIXES = ("u8", "U8")


def decode_string_literal(raw: str) -> str:
    """Value of a string literal as written in source.

    Handles regular ("a\\tb"), verbatim (@"a""b") and raw (\"\"\"a\"\"\")
    literals, with or without the UTF-8 `u8` suffix.
    """
    if raw.endswith(_UTF8_SUFFIXES):
        raw = raw[:-2]

    if raw.startswith('@"'):
        return raw[2:-1].replace('""', '"')
    if raw.startswith('"""'):
        return _raw_string_value(raw)
    if raw.startswith('"') and len(raw) >= 2:
        return _ESCAPE_RE.sub(_unescape, raw[1:-1])
    return raw


def interpolated_contents(raw: str) -> str:
    """Text between the delimiters of an interpolated string, holes kept verbatim."""
    match = _INTERPOLATION_START_RE.match(raw)
    if match is None:
        return raw

    closing = match.group(1)
    end = len(raw) - len(closing) if raw.endswith(closing) else len(raw)
    return raw[match.end() : max(end, match.end())]


def _unescape(match: re.Match[str]) -> str:
    escape = match.group(1)
    if escape[0] in "uUx" and len(escape) > 1:
        code_point = int(escape[1:], 16)
        return chr(code_point) if code_point <= 0x10FFFF else match.group()
    return _SIMPLE_ESCAPES.get(escape, escape)


def _raw_string_value(raw: str) -> str:
    quotes = len(raw) - len(raw.lstrip('"'))
    content = raw[quotes:-quotes] if len(raw) >= 2 * quotes else raw[quotes:]
    if "\n" not in content:
        return content

    # Multi-line raw strings drop the delimiter lines and the closing line's indentation.
    lines = content.splitlines()
    if lines[-1].strip():
        indentation, body = "", lines[1:]
    else:
        indentation, body = lines[-1], lines[1:-1]
    return "\n".join(line.removeprefix(indentation) for line in body)

"""Regex-based @import/@require extraction for Sass, Less and Stylus."""

import re
from typing import List


_BLOCK_COMMENT = re.compile(r"/\*.*?\*/", re.DOTALL)
# `//` not preceded by ':' so that url(http://...) survives
_LINE_COMMENT = re.compile(r"(?<![:/\"'])//[^\n]*")
_QUOTED = re.compile(r"""(["'])(.+?)\1""")

_SASS_DIRECTIVE = re.compile(r"@(?:import|use|forward)\s+([^;\n]+)")
_LESS_DIRECTIVE = re.compile(r"""@import\s*(?:\([^)]*\)\s*)?(["'])(.+?)\1""")
_STYLUS_DIRECTIVE = re.compile(r"^\s*@(?:import|require)\s+([^;\n]+)", re.MULTILINE)


def strip_comments(source: str) -> str:
    """Remove block and line comments from stylesheet source."""
    return _LINE_COMMENT.sub("", _BLOCK_COMMENT.sub("", source))


def _split_arguments(value: str) -> List[str]:
    """
    Split the argument list of an import directive into specifiers.

    Quoted arguments win; unquoted ones (indented Sass, Stylus) are split on
    commas. url(...) arguments are dropped.
    """
    if "url(" in value:
        return []

    quoted = [match.group(2) for match in _QUOTED.finditer(value)]
    if quoted:
        return quoted

    return [part.strip() for part in value.split(",") if part.strip()]


def extract_sass(source: str) -> List[str]:
    """Collect @import, @use and @forward targets of a .scss or .sass file."""
    specifiers: List[str] = []
    for match in _SASS_DIRECTIVE.finditer(strip_comments(source)):
        specifiers.extend(_split_arguments(match.group(1)))
    return specifiers


def extract_less(source: str) -> List[str]:
    """Collect @import targets of a .less file, with or without (options)."""
    return [match.group(2) for match in _LESS_DIRECTIVE.finditer(strip_comments(source))]


def extract_stylus(source: str) -> List[str]:
    """Collect @import and @require targets of a .styl file."""
    specifiers: List[str] = []
    for match in _STYLUS_DIRECTIVE.finditer(strip_comments(source)):
        specifiers.extend(_split_arguments(match.group(1)))
    return specifiers

"""Module format detection by file extension and content sniffing."""

import os
from enum import Enum
from typing import Optional

from .javascript import parse_source, sniff_module_type


class ModuleFormat(Enum):
    """Module systems a file can be written in."""

    COMMONJS = "commonjs"
    AMD = "amd"
    ES6 = "es6"
    TYPESCRIPT = "ts"
    SASS = "sass"
    LESS = "less"
    STYLUS = "stylus"
    # Leaf files: plain CSS, JSON, anything without a known extractor
    NONE = "none"

    @property
    def is_stylesheet(self) -> bool:
        return self in (ModuleFormat.SASS, ModuleFormat.LESS, ModuleFormat.STYLUS)

    @property
    def is_script(self) -> bool:
        return self in (
            ModuleFormat.COMMONJS,
            ModuleFormat.AMD,
            ModuleFormat.ES6,
            ModuleFormat.TYPESCRIPT,
        )


JAVASCRIPT_EXTENSIONS = {".js", ".jsx", ".mjs", ".cjs"}
TYPESCRIPT_EXTENSIONS = {".ts", ".tsx", ".mts", ".cts"}

EXTENSION_FORMATS = {
    ".ts": ModuleFormat.TYPESCRIPT,
    ".tsx": ModuleFormat.TYPESCRIPT,
    ".mts": ModuleFormat.TYPESCRIPT,
    ".cts": ModuleFormat.TYPESCRIPT,
    ".scss": ModuleFormat.SASS,
    ".sass": ModuleFormat.SASS,
    ".less": ModuleFormat.LESS,
    ".styl": ModuleFormat.STYLUS,
}

SNIFFED_FORMATS = {
    "es6": ModuleFormat.ES6,
    "amd": ModuleFormat.AMD,
    "commonjs": ModuleFormat.COMMONJS,
    "none": ModuleFormat.COMMONJS,
}


def grammar_for(file_path: str) -> str:
    """Name of the tree-sitter grammar used for a script file."""
    suffix = os.path.splitext(file_path)[1].lower()
    if suffix == ".tsx":
        return "tsx"
    if suffix in TYPESCRIPT_EXTENSIONS:
        return "typescript"
    return "javascript"


def format_for_extension(file_path: str) -> Optional[ModuleFormat]:
    """
    Format implied by the extension alone.

    Returns None for JavaScript files, whose module system has to be sniffed.
    """
    suffix = os.path.splitext(file_path)[1].lower()
    if suffix in JAVASCRIPT_EXTENSIONS:
        return None
    return EXTENSION_FORMATS.get(suffix, ModuleFormat.NONE)


def detect_format(file_path: str, source: Optional[str] = None) -> ModuleFormat:
    """
    Determine the module format of a file.

    Args:
        file_path: Path of the file (only its extension is used).
        source: File contents, needed to tell ES6, AMD and CommonJS apart.
            Without it a JavaScript file is assumed to be CommonJS.

    Returns:
        The detected ModuleFormat.
    """
    known = format_for_extension(file_path)
    if known is not None:
        return known

    if source is None:
        return ModuleFormat.COMMONJS

    try:
        root = parse_source(source, grammar_for(file_path))
    except ValueError:
        return ModuleFormat.COMMONJS

    return SNIFFED_FORMATS[sniff_module_type(root)]

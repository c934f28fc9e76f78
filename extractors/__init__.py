"""Extractors turning file contents into raw import specifiers."""

from .adapter import Extraction, analyze_source, extract
from .definition import ModuleFormat, detect_format

__all__ = [
    "Extraction",
    "ModuleFormat",
    "analyze_source",
    "detect_format",
    "extract",
]

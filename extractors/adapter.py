"""Dispatch a file to the extractor for its module format."""

import logging
from typing import Any, Dict, List, NamedTuple, Optional

from graph.errors import ExtractionError
from .definition import ModuleFormat, SNIFFED_FORMATS, format_for_extension, grammar_for
from .javascript import (
    extract_amd,
    extract_commonjs,
    extract_es6,
    parse_source,
    sniff_module_type,
)
from .stylesheets import extract_less, extract_sass, extract_stylus


logger = logging.getLogger(__name__)


class Extraction(NamedTuple):
    """Format of a file and the raw specifiers found in it."""

    module_format: ModuleFormat
    specifiers: List[str]


STYLESHEET_EXTRACTORS = {
    ModuleFormat.SASS: extract_sass,
    ModuleFormat.LESS: extract_less,
    ModuleFormat.STYLUS: extract_stylus,
}


def _options(extractor_config: Optional[Dict[str, Any]], key: str) -> Dict[str, Any]:
    if not extractor_config:
        return {}
    return extractor_config.get(key) or {}


def analyze_source(
    file_path: str,
    source: str,
    extractor_config: Optional[Dict[str, Any]] = None,
    include_dynamic: bool = False,
) -> Extraction:
    """
    Detect the format of a file and extract its specifiers in one parse.

    Args:
        file_path: Path of the file, used to pick the extractor.
        source: Contents of the file.
        extractor_config: Per-format option bag ({"es6": {...}, "amd": {...}}),
            read but never modified.
        include_dynamic: Collect dynamic import('...') targets too.

    Returns:
        Extraction with the format and the specifiers in source order.

    Raises:
        ExtractionError: If the source cannot be parsed at all.
    """
    module_format = format_for_extension(file_path)

    if module_format in STYLESHEET_EXTRACTORS:
        return Extraction(module_format, STYLESHEET_EXTRACTORS[module_format](source))

    if module_format is ModuleFormat.NONE:
        return Extraction(module_format, [])

    try:
        root = parse_source(source, grammar_for(file_path))
    except ValueError as e:
        raise ExtractionError(file_path, str(e)) from e

    if module_format is ModuleFormat.TYPESCRIPT:
        options = _options(extractor_config, "ts")
        specifiers = extract_es6(
            root,
            mixed_imports=bool(options.get("mixed_imports")),
            include_dynamic=include_dynamic,
            skip_type_imports=bool(options.get("skip_type_imports")),
        )
        return Extraction(module_format, specifiers)

    module_format = SNIFFED_FORMATS[sniff_module_type(root)]
    logger.debug("%s sniffed as %s", file_path, module_format.value)

    if module_format is ModuleFormat.ES6:
        options = _options(extractor_config, "es6")
        specifiers = extract_es6(
            root,
            mixed_imports=bool(options.get("mixed_imports")),
            include_dynamic=include_dynamic,
        )
    elif module_format is ModuleFormat.AMD:
        options = _options(extractor_config, "amd")
        specifiers = extract_amd(root, skip_lazy_loaded=bool(options.get("skip_lazy_loaded")))
    else:
        specifiers = extract_commonjs(root, include_dynamic=include_dynamic)

    return Extraction(module_format, specifiers)


def extract(
    file_path: str,
    source: str,
    extractor_config: Optional[Dict[str, Any]] = None,
    include_dynamic: bool = False,
) -> List[str]:
    """Return the raw specifiers of a file, duplicates and order preserved."""
    return analyze_source(file_path, source, extractor_config, include_dynamic).specifiers

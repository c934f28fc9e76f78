"""Parsers for the configuration files resolvers and the CLI read."""

import json
import logging
import os
import re
import tomllib
from typing import Any, Dict, Optional

import yaml

from extractors.javascript import find_config_object, literal_value, parse_source
from graph.errors import ConfigurationError


logger = logging.getLogger(__name__)

# Strings are matched first so that comment markers inside them survive
_JSON_NOISE = re.compile(
    r'("(?:\\.|[^"\\])*")|//[^\n]*|/\*.*?\*/|,(?=\s*[}\]])',
    re.DOTALL,
)


def strip_json_comments(content: str) -> str:
    """Remove comments and trailing commas from JSON-with-comments text."""
    return _JSON_NOISE.sub(lambda m: m.group(1) or "", content)


def parse_config_file(file_path: str) -> Optional[Any]:
    """
    Parse a configuration file and return its contents.

    JSON (comments and trailing commas allowed), YAML and TOML are chosen
    by extension; JavaScript files are evaluated statically by reading the
    object literal they export. Unknown extensions are tried as JSON, then
    YAML.

    Args:
        file_path: Path to the file to parse.

    Returns:
        Parsed data structure, or None if parsing fails.
    """
    suffix = os.path.splitext(file_path)[1].lower()

    try:
        with open(file_path, encoding="utf-8") as handle:
            content = handle.read()
    except (OSError, UnicodeDecodeError) as e:
        logger.debug("Cannot read config file %s: %s", file_path, e)
        return None

    try:
        if suffix in {".yaml", ".yml"}:
            return yaml.safe_load(content)

        elif suffix == ".toml":
            return tomllib.loads(content)

        elif suffix in {".js", ".cjs", ".mjs"}:
            root = parse_source(content, "javascript")
            node = find_config_object(root)
            if node is None:
                return None
            return literal_value(node, os.path.dirname(os.path.abspath(file_path)))

        else:
            # JSON, tsconfig.json and extensionless rc files
            cleaned = strip_json_comments(content)
            try:
                return json.loads(cleaned)
            except json.JSONDecodeError:
                return yaml.safe_load(cleaned)

    except (ValueError, yaml.YAMLError) as e:
        logger.debug("Cannot parse config file %s: %s", file_path, e)
        return None


def load_config_file(file_path: str, purpose: str = "config") -> Dict[str, Any]:
    """
    Load a configuration file that must contain a mapping.

    Raises:
        ConfigurationError: If the file is missing, unparsable or not a mapping.
    """
    if not os.path.isfile(file_path):
        raise ConfigurationError(f"{purpose} file not found: {file_path}")

    data = parse_config_file(file_path)
    if not isinstance(data, dict):
        raise ConfigurationError(f"Cannot read {purpose} file: {file_path}")

    return data

"""Bundler-style alias tables (webpack `resolve.alias`)."""

import os
from typing import Dict

from .config_files import load_config_file


class AliasResolver:
    """
    Rewrite specifiers through an alias table.

    A key ending in `$` matches the specifier exactly; any other key matches
    the whole specifier or a `key/` prefix. Relative alias targets are taken
    relative to the config file.
    """

    def __init__(self, config_path: str):
        config = load_config_file(config_path, purpose="bundler alias config")
        config_dir = os.path.dirname(os.path.abspath(config_path))

        resolve_section = config.get("resolve")
        table = resolve_section.get("alias") if isinstance(resolve_section, dict) else None
        table = table or config.get("alias")
        if not isinstance(table, dict):
            table = {}

        self.aliases: Dict[str, str] = {}
        for key, target in table.items():
            if not isinstance(target, str):
                continue
            if target.startswith(("./", "../")):
                target = os.path.normpath(os.path.join(config_dir, target))
            self.aliases[key] = target

    def rewrite(self, specifier: str) -> str:
        """Return the aliased specifier, or the specifier unchanged."""
        exact = self.aliases.get(specifier + "$")
        if exact is not None:
            return exact

        for key in sorted(self.aliases, key=len, reverse=True):
            if key.endswith("$"):
                continue
            if specifier == key:
                return self.aliases[key]
            if specifier.startswith(key + "/"):
                return self.aliases[key] + specifier[len(key):]

        return specifier

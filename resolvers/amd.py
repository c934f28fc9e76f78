"""RequireJS (AMD) module resolution driven by a requirejs config file."""

import logging
import os
from typing import Dict, Optional

from .config_files import load_config_file
from .node import NodeResolver
from .resolution import to_file_id


logger = logging.getLogger(__name__)


class RequireJSResolver:
    """
    Resolve AMD specifiers against a RequireJS `baseUrl` and `paths` table.

    Without a config file, the base directory acts as `baseUrl`. Specifiers
    the table cannot place fall back to Node resolution.
    """

    def __init__(
        self,
        directory: str,
        fallback: NodeResolver,
        config_path: Optional[str] = None,
    ):
        self.fallback = fallback
        self.base_url = to_file_id(directory)
        self.paths: Dict[str, str] = {}

        if config_path:
            config = load_config_file(config_path, purpose="RequireJS config")
            config_dir = os.path.dirname(to_file_id(config_path))
            base_url = config.get("baseUrl")
            if isinstance(base_url, str):
                self.base_url = to_file_id(os.path.join(config_dir, base_url))

            for name, target in (config.get("paths") or {}).items():
                # A list of paths means fallbacks; the first one is the local copy
                if isinstance(target, list):
                    target = next((t for t in target if isinstance(t, str)), None)
                if isinstance(target, str):
                    self.paths[name] = target

            logger.debug("RequireJS baseUrl %s with %d path aliases", self.base_url, len(self.paths))

    def resolve(self, specifier: str, containing_file: str) -> Optional[str]:
        """
        Resolve an AMD specifier.

        Loader plugin prefixes (`text!./tpl.html`) are stripped, relative
        specifiers resolve against the containing file and everything else
        goes through the `paths` table under `baseUrl`.
        """
        if "!" in specifier:
            specifier = specifier.split("!", 1)[1]
        if not specifier:
            return None

        if specifier.startswith(("./", "../")):
            candidate = os.path.join(os.path.dirname(containing_file), specifier)
        else:
            candidate = os.path.join(self.base_url, self._apply_paths(specifier))

        return self._load(candidate) or self.fallback.resolve(specifier, containing_file)

    def _apply_paths(self, specifier: str) -> str:
        for prefix in sorted(self.paths, key=len, reverse=True):
            if specifier == prefix or specifier.startswith(prefix + "/"):
                return self.paths[prefix] + specifier[len(prefix):]
        return specifier

    @staticmethod
    def _load(candidate: str) -> Optional[str]:
        if os.path.isfile(candidate):
            return to_file_id(candidate)
        if not candidate.endswith(".js") and os.path.isfile(candidate + ".js"):
            return to_file_id(candidate + ".js")
        return None

"""Node.js module resolution (relative paths, package.json, node_modules)."""

import json
import logging
import os
from typing import Dict, Iterable, List, Optional

from .resolution import is_path_specifier, iter_node_modules, to_file_id


logger = logging.getLogger(__name__)


# Node.js core modules; a `node:` prefix marks any name as core
NODE_BUILTIN_MODULES = frozenset({
    "assert", "async_hooks", "buffer", "child_process", "cluster", "console",
    "constants", "crypto", "dgram", "diagnostics_channel", "dns", "domain",
    "events", "fs", "http", "http2", "https", "inspector", "module", "net",
    "os", "path", "perf_hooks", "process", "punycode", "querystring",
    "readline", "repl", "stream", "string_decoder", "sys", "timers", "tls",
    "trace_events", "tty", "url", "util", "v8", "vm", "wasi",
    "worker_threads", "zlib",
})

# Core subpath modules; any other `name/...` is an ordinary path
NODE_BUILTIN_SUBPATHS = frozenset({
    "assert/strict", "dns/promises", "fs/promises", "inspector/promises",
    "path/posix", "path/win32", "readline/promises", "stream/consumers",
    "stream/promises", "stream/web", "timers/promises", "util/types",
})

DEFAULT_EXTENSIONS = (".js", ".jsx", ".mjs", ".cjs", ".json", ".node")
# ES modules may import TypeScript sources as well
ES_MODULE_EXTENSIONS = DEFAULT_EXTENSIONS + (".ts", ".tsx")


def is_builtin(specifier: str) -> bool:
    """Check if a specifier names a Node.js core module (fs, fs/promises, node:x)."""
    if specifier.startswith("node:"):
        return True
    return specifier in NODE_BUILTIN_MODULES or specifier in NODE_BUILTIN_SUBPATHS


class NodeResolver:
    """
    Resolve specifiers with the Node.js algorithm.

    Relative and absolute specifiers are tried as a file, then as a
    directory. Bare specifiers are looked up in every node_modules directory
    from the containing file upward, then under the base directory.
    """

    def __init__(
        self,
        directory: str,
        entry_field: str = "main",
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ):
        self.directory = to_file_id(directory)
        self.entry_field = entry_field
        self.extensions = tuple(extensions)
        self._package_json_cache: Dict[str, dict] = {}

    def resolve(self, specifier: str, containing_file: str) -> Optional[str]:
        """
        Resolve a specifier to an existing file.

        Args:
            specifier: Raw specifier, e.g. "./b", "lodash", "lodash/get".
            containing_file: Absolute path of the file holding the specifier.

        Returns:
            Absolute path of the file, or None.
        """
        source_dir = os.path.dirname(containing_file)

        if is_path_specifier(specifier):
            return self.load(os.path.join(source_dir, specifier))

        for node_modules in iter_node_modules(source_dir):
            found = self.load(os.path.join(node_modules, specifier))
            if found:
                return found

        return self.load(os.path.join(self.directory, specifier))

    def load(self, target: str) -> Optional[str]:
        return self.load_as_file(target) or self.load_as_directory(target)

    def load_as_file(self, target: str) -> Optional[str]:
        if os.path.isfile(target):
            return to_file_id(target)
        for ext in self.extensions:
            candidate = target + ext
            if os.path.isfile(candidate):
                return to_file_id(candidate)
        return None

    def load_as_directory(self, target: str) -> Optional[str]:
        if not os.path.isdir(target):
            return None

        package = self._read_package_json(os.path.join(target, "package.json"))
        for field in self.entry_fields():
            entry = package.get(field)
            if not isinstance(entry, str) or not entry:
                continue
            entry_path = os.path.join(target, entry)
            found = self.load_as_file(entry_path) or self.load_index(entry_path)
            if found:
                return found

        return self.load_index(target)

    def load_index(self, target: str) -> Optional[str]:
        if not os.path.isdir(target):
            return None
        return self.load_as_file(os.path.join(target, "index"))

    def entry_fields(self) -> List[str]:
        """package.json fields tried in order; the configured one wins."""
        fields = [self.entry_field]
        if "main" not in fields:
            fields.append("main")
        return fields

    def _read_package_json(self, path: str) -> dict:
        if path in self._package_json_cache:
            return self._package_json_cache[path]

        data: dict = {}
        if os.path.isfile(path):
            try:
                with open(path, encoding="utf-8") as handle:
                    loaded = json.load(handle)
                if isinstance(loaded, dict):
                    data = loaded
            except (OSError, ValueError) as e:
                logger.debug("Ignoring unreadable %s: %s", path, e)

        self._package_json_cache[path] = data
        return data

"""TypeScript module resolution: TS extensions plus tsconfig baseUrl/paths."""

import os
from typing import Any, Dict, List, Optional, Tuple, Union

from .config_files import load_config_file
from .node import NodeResolver
from .resolution import is_path_specifier, to_file_id


TS_EXTENSIONS = (".ts", ".tsx", ".d.ts", ".js", ".jsx", ".json")
JS_SOURCE_SUFFIXES = {
    ".js": (".ts", ".tsx", ".d.ts"),
    ".jsx": (".tsx",),
    ".mjs": (".mts",),
    ".cjs": (".cts",),
}


class TypeScriptResolver(NodeResolver):
    """Node resolution with TypeScript extensions and tsconfig path mapping."""

    def __init__(
        self,
        directory: str,
        ts_config: Union[str, Dict[str, Any], None] = None,
        entry_field: str = "main",
    ):
        super().__init__(directory, entry_field=entry_field, extensions=TS_EXTENSIONS)
        self.base_url: Optional[str] = None
        self.paths: List[Tuple[str, List[str]]] = []
        if ts_config:
            self._load_compiler_options(ts_config)

    def _load_compiler_options(self, ts_config: Union[str, Dict[str, Any]]) -> None:
        if isinstance(ts_config, str):
            config_dir = os.path.dirname(to_file_id(ts_config))
            data = load_config_file(ts_config, purpose="tsconfig")
        else:
            config_dir = self.directory
            data = ts_config

        options = data.get("compilerOptions") or {}
        base_url = options.get("baseUrl")
        if isinstance(base_url, str):
            self.base_url = to_file_id(os.path.join(config_dir, base_url))

        paths = options.get("paths") or {}
        paths_base = self.base_url or config_dir
        for pattern, targets in paths.items():
            if isinstance(targets, str):
                targets = [targets]
            self.paths.append(
                (pattern, [os.path.join(paths_base, t) for t in targets if isinstance(t, str)])
            )
        # Longest literal prefix first, as tsc does
        self.paths.sort(key=lambda item: len(item[0].split("*", 1)[0]), reverse=True)

    def resolve(self, specifier: str, containing_file: str) -> Optional[str]:
        if not is_path_specifier(specifier):
            found = self._resolve_mapped(specifier)
            if found:
                return found
        return super().resolve(specifier, containing_file)

    def _resolve_mapped(self, specifier: str) -> Optional[str]:
        for pattern, targets in self.paths:
            if "*" in pattern:
                prefix, suffix = pattern.split("*", 1)
                if not (specifier.startswith(prefix) and specifier.endswith(suffix)):
                    continue
                if len(specifier) < len(prefix) + len(suffix):
                    continue
                star = specifier[len(prefix):len(specifier) - len(suffix)]
            elif pattern == specifier:
                star = ""
            else:
                continue

            for target in targets:
                found = self.load(target.replace("*", star))
                if found:
                    return found

        if self.base_url:
            return self.load(os.path.join(self.base_url, specifier))

        return None

    def load_as_file(self, target: str) -> Optional[str]:
        found = super().load_as_file(target)
        if found:
            return found

        # `import "./b.js"` written against b.ts
        stem, suffix = os.path.splitext(target)
        for replacement in JS_SOURCE_SUFFIXES.get(suffix, ()):
            candidate = stem + replacement
            if os.path.isfile(candidate):
                return to_file_id(candidate)

        return None

    def entry_fields(self) -> List[str]:
        """Declaration entries first, then the configured field and main."""
        fields = ["types", "typings", self.entry_field, "main"]
        return list(dict.fromkeys(fields))

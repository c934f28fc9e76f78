"""Traversal options, normalized once at the API boundary."""

import dataclasses
from collections.abc import MutableMapping
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional, Union

from resolvers.resolution import to_file_id
from .errors import ConfigurationError


# Legacy and camelCase spellings accepted for each option
OPTION_ALIASES = {
    "root": "directory",
    "nonExistent": "non_existent",
    "detective": "extractor_config",
    "extractorConfig": "extractor_config",
    "config": "rjs_config",
    "rjsConfig": "rjs_config",
    "webpack_config": "bundler_alias_config",
    "webpackConfig": "bundler_alias_config",
    "bundlerAliasConfig": "bundler_alias_config",
    "tsConfig": "ts_config",
    "nodeModulesEntryField": "node_modules_entry_field",
}


@dataclass
class TraversalConfig:
    """
    Options of one traversal.

    `visited` and `non_existent` are shared by reference: callers may pass
    the same objects to later traversals to reuse earlier work.
    """

    filename: str
    directory: str
    visited: Dict[str, Any] = field(default_factory=dict)
    non_existent: Dict[str, List[str]] = field(default_factory=dict)
    filter: Optional[Callable[[str, str], bool]] = None
    extractor_config: Dict[str, Any] = field(default_factory=dict)
    rjs_config: Optional[str] = None
    bundler_alias_config: Optional[str] = None
    ts_config: Union[str, Dict[str, Any], None] = None
    node_modules_entry_field: str = "main"
    include_dynamic_imports: bool = False
    is_list_form: bool = False

    @classmethod
    def from_options(cls, options: Optional[Dict[str, Any]] = None, **kwargs: Any) -> "TraversalConfig":
        """
        Build a validated config from keyword options.

        Accepts the aliases in OPTION_ALIASES (`root` for `directory`,
        `detective` for `extractor_config`, ...); the canonical name wins
        when both are given.

        Raises:
            ConfigurationError: If filename or directory is missing, the
                filter is not callable, a cache is not a mapping, or an
                option is unknown.
        """
        merged: Dict[str, Any] = dict(options or {})
        merged.update(kwargs)

        normalized: Dict[str, Any] = {}
        for name, value in merged.items():
            canonical = OPTION_ALIASES.get(name, name)
            if canonical != name and canonical in merged:
                continue
            normalized[canonical] = value

        known = {f.name for f in dataclasses.fields(cls)}
        unknown = sorted(set(normalized) - known)
        if unknown:
            raise ConfigurationError(f"Unknown options: {', '.join(unknown)}")

        if not normalized.get("filename"):
            raise ConfigurationError("filename not given")
        if not normalized.get("directory"):
            raise ConfigurationError("directory not given")

        filter_ = normalized.get("filter")
        if filter_ is not None and not callable(filter_):
            raise ConfigurationError("filter must be a function")

        for cache in ("visited", "non_existent"):
            if normalized.get(cache) is None:
                normalized.pop(cache, None)
            elif not isinstance(normalized[cache], MutableMapping):
                raise ConfigurationError(f"{cache} must be a mapping")

        if normalized.get("extractor_config") is None:
            normalized.pop("extractor_config", None)

        entry_field = normalized.get("node_modules_entry_field", "main")
        if not isinstance(entry_field, str) or not entry_field:
            raise ConfigurationError("node_modules_entry_field must be a package.json field name")

        normalized["filename"] = to_file_id(str(normalized["filename"]))
        normalized["directory"] = to_file_id(str(normalized["directory"]))

        return cls(**normalized)

    def clone(self, **changes: Any) -> "TraversalConfig":
        """Copy of this config sharing its caches and extractor configuration."""
        return dataclasses.replace(self, **changes)

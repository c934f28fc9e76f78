"""Resolver facade dispatching specifiers by module-system family."""

import logging
from typing import Any, Dict, Optional, Union

from extractors.definition import ModuleFormat, detect_format
from .alias import AliasResolver
from .amd import RequireJSResolver
from .node import ES_MODULE_EXTENSIONS, NodeResolver, is_builtin
from .resolution import EXCLUDED, NOT_FOUND, Resolution, is_remote
from .stylesheets import StylesheetResolver
from .typescript import TypeScriptResolver


logger = logging.getLogger(__name__)


class ModuleResolver:
    """
    Map a specifier found in a file to a file on disk.

    Config files (RequireJS, bundler aliases, tsconfig) are loaded once
    when the resolver is built, so a bad config fails early with
    ConfigurationError.
    """

    def __init__(
        self,
        directory: str,
        rjs_config: Optional[str] = None,
        bundler_alias_config: Optional[str] = None,
        ts_config: Union[str, Dict[str, Any], None] = None,
        node_modules_entry_field: str = "main",
    ):
        self.directory = directory
        self.node = NodeResolver(directory, entry_field=node_modules_entry_field)
        self.es_modules = NodeResolver(
            directory, entry_field=node_modules_entry_field, extensions=ES_MODULE_EXTENSIONS,
        )
        self.typescript = TypeScriptResolver(
            directory, ts_config=ts_config, entry_field=node_modules_entry_field,
        )
        self.requirejs = RequireJSResolver(directory, fallback=self.node, config_path=rjs_config)
        self.alias = AliasResolver(bundler_alias_config) if bundler_alias_config else None
        self.stylesheets = StylesheetResolver(directory)

    def resolve(
        self,
        specifier: str,
        containing_file: str,
        module_format: Optional[ModuleFormat] = None,
    ) -> Resolution:
        """
        Resolve one specifier.

        Args:
            specifier: Raw specifier string.
            containing_file: Absolute path of the file it was found in.
            module_format: Format of the containing file; detected from its
                extension when omitted.

        Returns:
            A RESOLVED resolution with an existing absolute path, NOT_FOUND,
            or EXCLUDED for builtin and remote modules. Never raises for a
            specifier that cannot be resolved.
        """
        if module_format is None:
            module_format = detect_format(containing_file)

        if not specifier or not specifier.strip():
            return NOT_FOUND

        if is_remote(specifier):
            logger.debug("Excluding remote %s in %s", specifier, containing_file)
            return EXCLUDED

        if module_format.is_stylesheet:
            if specifier.startswith("sass:"):
                return EXCLUDED
            path = self.stylesheets.resolve(specifier, containing_file, module_format)

        else:
            if is_builtin(specifier):
                logger.debug("Excluding core module %s in %s", specifier, containing_file)
                return EXCLUDED

            if self.alias is not None:
                specifier = self.alias.rewrite(specifier)

            if module_format is ModuleFormat.AMD:
                path = self.requirejs.resolve(specifier, containing_file)
            elif module_format is ModuleFormat.TYPESCRIPT:
                path = self.typescript.resolve(specifier, containing_file)
            elif module_format is ModuleFormat.ES6:
                path = self.es_modules.resolve(specifier, containing_file)
            else:
                path = self.node.resolve(specifier, containing_file)

        if path is None:
            return NOT_FOUND
        return Resolution.found(path)

#!/usr/bin/env python3
"""
deptree CLI

Print the transitive file dependencies of a JavaScript, TypeScript or
stylesheet file as a tree, a list, a graph document or a Mermaid flowchart.
"""

import argparse
import copy
import logging
import os
import sys
from typing import Any, Dict

from exporters import to_ascii, to_json, to_mermaid, tree_to_json
from graph.builder import DependencyTraversal
from graph.config import TraversalConfig
from graph.errors import ConfigurationError
from resolvers import load_config_file


def parse_args(args=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        prog="deptree",
        description="Print the transitive file dependencies of a source file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  deptree src/index.js                     # JSON tree, base directory src/
  deptree -d . src/index.js -l             # Dependency-first list
  deptree src/app.ts -f ascii              # Indented tree
  deptree src/main.js -c require.config.js # Resolve RequireJS aliases
  deptree src/a.js --exclude-node-modules  # Skip third-party files
  deptree src/a.js --config-file deptree.yml
        """,
    )

    # Positional arguments
    parser.add_argument(
        "filename",
        help="Entry file",
    )

    parser.add_argument(
        "-d", "--directory",
        default=None,
        help="Base directory for resolution (default: the entry file's directory)",
    )

    # Output options
    parser.add_argument(
        "-l", "--list-form",
        action="store_true",
        help="Print a flat, dependency-first list (same as --format list)",
    )

    parser.add_argument(
        "-f", "--format",
        choices=["tree", "list", "json", "ascii", "mermaid"],
        default=None,
        help="Output format (default: tree)",
    )

    parser.add_argument(
        "-o", "--output",
        type=str,
        default=None,
        help="Output file (default: stdout)",
    )

    parser.add_argument(
        "--ascii-style",
        choices=["tree", "ascii"],
        default="tree",
        help="ASCII output style: 'tree' (Unicode) or 'ascii' (pure ASCII)",
    )

    parser.add_argument(
        "--orientation",
        choices=["LR", "TD", "TB", "RL", "BT"],
        default="LR",
        help="Mermaid flowchart orientation (default: LR)",
    )

    parser.add_argument(
        "--ignore-missing",
        action="store_true",
        help="Hide unresolved specifiers from ascii, json and mermaid output",
    )

    # Resolution options
    parser.add_argument(
        "-c", "--require-config",
        default=None,
        help="RequireJS config file for AMD path aliases",
    )

    parser.add_argument(
        "-w", "--webpack-config",
        default=None,
        help="Bundler config file with a resolve.alias table",
    )

    parser.add_argument(
        "--ts-config",
        default=None,
        help="tsconfig.json with baseUrl/paths mappings",
    )

    parser.add_argument(
        "--entry-field",
        choices=["main", "module"],
        default=None,
        help="package.json field used as a package's entry point (default: main)",
    )

    # Traversal options
    parser.add_argument(
        "--include-dynamic-imports",
        action="store_true",
        help="Follow dynamic import() targets",
    )

    parser.add_argument(
        "--mixed-imports",
        action="store_true",
        help="Also follow require() calls inside ES modules and TypeScript files",
    )

    parser.add_argument(
        "--exclude-node-modules",
        action="store_true",
        help="Leave files inside node_modules out of the result",
    )

    parser.add_argument(
        "--config-file",
        default=None,
        help="YAML, TOML or JSON file with default traversal options",
    )

    parser.add_argument(
        "--debug",
        action="store_true",
        help="Log traversal details to stderr",
    )

    return parser.parse_args(args)


def exclude_node_modules(file_path: str, containing_file: str) -> bool:
    """Filter rejecting files that live in a node_modules directory."""
    return "node_modules" not in file_path.replace("\\", "/").split("/")


def build_options(parsed) -> Dict[str, Any]:
    """
    Merge config-file defaults with command line flags.

    Raises:
        ConfigurationError: If the config file cannot be read.
    """
    options: Dict[str, Any] = {}
    if parsed.config_file:
        options.update(load_config_file(parsed.config_file, purpose="deptree config"))

    options["filename"] = parsed.filename

    if parsed.directory:
        options["directory"] = parsed.directory
    elif not options.get("directory") and not options.get("root"):
        options["directory"] = os.path.dirname(os.path.abspath(parsed.filename))

    if parsed.require_config:
        options["rjs_config"] = parsed.require_config
    if parsed.webpack_config:
        options["bundler_alias_config"] = parsed.webpack_config
    if parsed.ts_config:
        options["ts_config"] = parsed.ts_config
    if parsed.entry_field:
        options["node_modules_entry_field"] = parsed.entry_field
    if parsed.include_dynamic_imports:
        options["include_dynamic_imports"] = True

    if parsed.mixed_imports:
        extractor_config = copy.deepcopy(options.get("extractor_config") or {})
        for key in ("es6", "ts"):
            extractor_config.setdefault(key, {})["mixed_imports"] = True
        options["extractor_config"] = extractor_config

    if parsed.exclude_node_modules:
        options["filter"] = exclude_node_modules

    return options


def main(args=None):
    """Main entry point."""
    parsed = parse_args(args)

    if parsed.debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(name)s: %(message)s",
            stream=sys.stderr,
        )

    output_format = parsed.format or ("list" if parsed.list_form else "tree")
    non_existent: Dict[str, Any] = {}

    try:
        options = build_options(parsed)
        options["non_existent"] = non_existent
        config = TraversalConfig.from_options(options).clone(
            is_list_form=(output_format == "list"),
        )
        traversal = DependencyTraversal(config)
        result = traversal.run()
    except ConfigurationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    include_missing = not parsed.ignore_missing

    # Generate output
    if output_format == "list":
        output = "\n".join(result)
    elif output_format == "json":
        output = to_json(
            graph=traversal.graph,
            base=config.directory,
            include_missing=include_missing,
        )
    elif output_format == "ascii":
        output = to_ascii(
            tree=result,
            base=config.directory,
            style=parsed.ascii_style,
            missing=non_existent if include_missing else None,
        )
    elif output_format == "mermaid":
        output = to_mermaid(
            graph=traversal.graph,
            base=config.directory,
            orientation=parsed.orientation,
            include_missing=include_missing,
        )
    else:  # tree (default)
        output = tree_to_json(result)

    # Write output
    if parsed.output:
        try:
            with open(parsed.output, "w", encoding="utf-8") as handle:
                handle.write(output + "\n")
            print(f"Output written to: {parsed.output}", file=sys.stderr)
        except OSError as e:
            print(f"Error writing output: {e}", file=sys.stderr)
            return 1
    else:
        print(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())

"""Tests for the dependency traversal."""

import os

import pytest

from graph import builder
from graph.builder import DependencyTraversal, build_list, build_tree
from graph.config import TraversalConfig
from graph.errors import ConfigurationError, ExtractionError


def p(root, rel_path):
    return os.path.join(root, rel_path)


class TestBuildTree:
    """Tests for the nested tree form."""

    def test_missing_entry_returns_empty(self, tmp_path):
        """Test that a nonexistent entry file yields an empty result."""
        missing = str(tmp_path / "nope.js")

        assert build_tree(filename=missing, directory=str(tmp_path)) == {}
        assert build_list(filename=missing, directory=str(tmp_path)) == []

    def test_nested_tree(self, make_files):
        """Test a two-level tree of CommonJS files."""
        root = make_files({
            "a.js": "var b = require('./b');\nvar c = require('./c');\n",
            "b.js": "require('./d');\nrequire('./e');\n",
            "c.js": "require('./f');\nrequire('./g');\n",
            "d.js": "",
            "e.js": "",
            "f.js": "",
            "g.js": "",
        })

        tree = build_tree(filename=p(root, "a.js"), directory=root)

        assert tree == {
            p(root, "a.js"): {
                p(root, "b.js"): {p(root, "d.js"): {}, p(root, "e.js"): {}},
                p(root, "c.js"): {p(root, "f.js"): {}, p(root, "g.js"): {}},
            }
        }

    def test_children_keep_source_order(self, make_files):
        """Test that dependencies appear in the order they are written."""
        root = make_files({
            "a.js": "require('./z');\nrequire('./m');\nrequire('./b');\n",
            "z.js": "",
            "m.js": "",
            "b.js": "",
        })

        tree = build_tree(filename=p(root, "a.js"), directory=root)

        assert list(tree[p(root, "a.js")]) == [p(root, "z.js"), p(root, "m.js"), p(root, "b.js")]

    def test_shared_subtree_is_same_object(self, make_files):
        """Test that a file reached from two parents is shared, not copied."""
        root = make_files({
            "a.js": "require('./b');\nrequire('./c');\n",
            "b.js": "require('./d');\n",
            "c.js": "require('./d');\n",
            "d.js": "require('./e');\n",
            "e.js": "",
        })

        tree = build_tree(filename=p(root, "a.js"), directory=root)
        top = tree[p(root, "a.js")]

        via_b = top[p(root, "b.js")][p(root, "d.js")]
        via_c = top[p(root, "c.js")][p(root, "d.js")]
        assert via_b is via_c
        assert via_b == {p(root, "e.js"): {}}

    def test_cycle_terminates(self, make_files, monkeypatch):
        """Test that a <-> b is expanded once per file and ends in a leaf."""
        root = make_files({
            "a.js": "require('./b');\n",
            "b.js": "require('./a');\n",
        })

        calls = []
        original = DependencyTraversal.get_dependencies

        def counting(self, file_id):
            calls.append(file_id)
            return original(self, file_id)

        monkeypatch.setattr(DependencyTraversal, "get_dependencies", counting)

        tree = build_tree(filename=p(root, "a.js"), directory=root)

        assert tree == {p(root, "a.js"): {p(root, "b.js"): {p(root, "a.js"): {}}}}
        assert len(calls) == 2

    def test_self_reference_is_cycle_leaf(self, make_files):
        """Test that a file requiring itself appears once below itself."""
        root = make_files({"a.js": "require('./a');\n"})
        config = TraversalConfig.from_options(filename=p(root, "a.js"), directory=root)
        traversal = DependencyTraversal(config)

        tree = traversal.run()

        assert tree == {p(root, "a.js"): {p(root, "a.js"): {}}}
        assert traversal.graph.is_cycle_edge(p(root, "a.js"), p(root, "a.js"))
        assert build_list(filename=p(root, "a.js"), directory=root) == [p(root, "a.js")]

    def test_extraction_error_is_leaf(self, make_files, monkeypatch):
        """Test that a file whose source cannot be parsed has no dependencies."""
        root = make_files({
            "a.js": "require('./b');\n",
            "b.js": "require('./c');\n",
            "c.js": "",
        })
        original = builder.analyze_source

        def failing(file_path, source, *args, **kwargs):
            if file_path.endswith("b.js"):
                raise ExtractionError(file_path, "cannot parse")
            return original(file_path, source, *args, **kwargs)

        monkeypatch.setattr(builder, "analyze_source", failing)

        tree = build_tree(filename=p(root, "a.js"), directory=root)

        assert tree == {p(root, "a.js"): {p(root, "b.js"): {}}}

    def test_deep_chain(self, make_files):
        """Test a dependency chain deeper than the recursion limit."""
        depth = 1500
        files = {f"f{i}.js": f"require('./f{i + 1}');\n" for i in range(depth - 1)}
        files[f"f{depth - 1}.js"] = ""
        root = make_files(files)

        result = build_list(filename=p(root, "f0.js"), directory=root)

        assert len(result) == depth
        assert result[0] == p(root, f"f{depth - 1}.js")
        assert result[-1] == p(root, "f0.js")

    def test_unreadable_file_is_leaf(self, make_files):
        """Test that a file that cannot be decoded has no dependencies."""
        root = make_files({
            "a.js": "require('./b');\n",
            "b.js": b"\xff\xfe\x00require('./c')",
            "c.js": "",
        })

        tree = build_tree(filename=p(root, "a.js"), directory=root)

        assert tree == {p(root, "a.js"): {p(root, "b.js"): {}}}

    def test_idempotent(self, make_files):
        """Test that two runs without shared caches give equal results."""
        root = make_files({
            "a.js": "require('./b');\nrequire('./c');\n",
            "b.js": "require('./c');\n",
            "c.js": "require('./a');\n",
        })

        first = build_tree(filename=p(root, "a.js"), directory=root)
        second = build_tree(filename=p(root, "a.js"), directory=root)

        assert first == second

    def test_relative_paths_are_normalized(self, make_files, monkeypatch):
        """Test that filename and directory may be given relative to the cwd."""
        root = make_files({"src/a.js": "require('./b');\n", "src/b.js": ""})
        monkeypatch.chdir(root)

        tree = build_tree(filename="src/a.js", directory="src")

        assert tree == {p(root, "src/a.js"): {p(root, "src/b.js"): {}}}


class TestCaches:
    """Tests for the visited and non_existent caches."""

    def test_visited_short_circuit(self, make_files, monkeypatch):
        """Test that a seeded entry is returned without any extraction."""
        root = make_files({"a.js": "require('./b');\n", "b.js": ""})
        entry = p(root, "a.js")

        def fail(*args, **kwargs):
            raise AssertionError("extraction should not run")

        monkeypatch.setattr(builder, "analyze_source", fail)

        visited = {entry: ["foo", "bar"]}
        tree = build_tree(filename=entry, directory=root, visited=visited)

        assert tree == {entry: ["foo", "bar"]}
        assert tree[entry] is visited[entry]

    def test_visited_empty_seed_skips_entry(self, tmp_path):
        """Test that an empty seeded result is honored even for a missing file."""
        entry = str(tmp_path / "ghost.js")

        tree = build_tree(filename=entry, directory=str(tmp_path), visited={entry: {}})

        assert tree == {entry: {}}

    def test_visited_populated(self, make_files):
        """Test that every traversed file is committed into visited."""
        root = make_files({"a.js": "require('./b');\n", "b.js": ""})
        visited = {}

        tree = build_tree(filename=p(root, "a.js"), directory=root, visited=visited)

        assert set(visited) == {p(root, "a.js"), p(root, "b.js")}
        assert visited[p(root, "b.js")] is tree[p(root, "a.js")][p(root, "b.js")]

    def test_visited_reused_across_calls(self, make_files, monkeypatch):
        """Test that a shared visited cache skips files already expanded."""
        root = make_files({
            "a.js": "require('./shared');\n",
            "b.js": "require('./shared');\n",
            "shared.js": "require('./leaf');\n",
            "leaf.js": "",
        })
        visited = {}
        build_tree(filename=p(root, "a.js"), directory=root, visited=visited)

        calls = []
        original = DependencyTraversal.get_dependencies

        def counting(self, file_id):
            calls.append(file_id)
            return original(self, file_id)

        monkeypatch.setattr(DependencyTraversal, "get_dependencies", counting)
        tree = build_tree(filename=p(root, "b.js"), directory=root, visited=visited)

        assert calls == [p(root, "b.js")]
        assert tree[p(root, "b.js")][p(root, "shared.js")] == {p(root, "leaf.js"): {}}

    def test_non_existent_recorded(self, make_files):
        """Test that unresolved specifiers are recorded per file."""
        root = make_files({
            "a.js": "require('./missing1');\nrequire('./b');\nrequire('./missing2');\n",
            "b.js": "",
        })
        non_existent = {}

        tree = build_tree(filename=p(root, "a.js"), directory=root, non_existent=non_existent)

        assert tree == {p(root, "a.js"): {p(root, "b.js"): {}}}
        assert non_existent == {p(root, "a.js"): ["./missing1", "./missing2"]}

    def test_non_existent_extended_without_duplicates(self, make_files):
        """Test that an existing entry is extended rather than replaced."""
        root = make_files({"a.js": "require('./missing1');\nrequire('./missing2');\n"})
        non_existent = {p(root, "a.js"): ["./missing1"]}

        build_tree(filename=p(root, "a.js"), directory=root, nonExistent=non_existent)

        assert non_existent[p(root, "a.js")] == ["./missing1", "./missing2"]

    def test_builtins_are_not_missing(self, make_files):
        """Test that Node core modules are skipped silently."""
        root = make_files({
            "a.js": "require('fs');\nrequire('node:path');\nrequire('fs/promises');\n",
        })
        non_existent = {}

        tree = build_tree(filename=p(root, "a.js"), directory=root, non_existent=non_existent)

        assert tree == {p(root, "a.js"): {}}
        assert non_existent == {}


class TestFilter:
    """Tests for the caller-supplied filter."""

    def test_filter_excludes_file(self, make_files):
        """Test that rejected files appear nowhere."""
        root = make_files({
            "a.js": "require('./b');\nrequire('./c');\n",
            "b.js": "require('./d');\n",
            "c.js": "",
            "d.js": "",
        })

        tree = build_tree(
            filename=p(root, "a.js"),
            directory=root,
            filter=lambda path, parent: not path.endswith("b.js"),
        )

        assert tree == {p(root, "a.js"): {p(root, "c.js"): {}}}

    def test_filter_receives_containing_file(self, make_files):
        """Test the filter's arguments."""
        root = make_files({"a.js": "require('./b');\n", "b.js": ""})
        seen = []

        def record(path, parent):
            seen.append((path, parent))
            return True

        build_tree(filename=p(root, "a.js"), directory=root, filter=record)

        assert seen == [(p(root, "b.js"), p(root, "a.js"))]

    def test_filter_must_be_callable(self, make_files):
        """Test that a non-callable filter is a configuration error."""
        root = make_files({"a.js": ""})

        with pytest.raises(ConfigurationError, match="filter"):
            build_tree(filename=p(root, "a.js"), directory=root, filter="nope")


class TestBuildList:
    """Tests for the flat list form."""

    def test_dependencies_come_first(self, make_files):
        """Test the post-order list of a diamond."""
        root = make_files({
            "a.js": "require('./b');\nrequire('./c');\n",
            "b.js": "require('./d');\n",
            "c.js": "require('./d');\n",
            "d.js": "",
        })

        result = build_list(filename=p(root, "a.js"), directory=root)

        assert result == [p(root, "d.js"), p(root, "b.js"), p(root, "c.js"), p(root, "a.js")]

    def test_cycle_list(self, make_files):
        """Test that a cycle lists each file once."""
        root = make_files({"a.js": "require('./b');\n", "b.js": "require('./a');\n"})

        result = build_list(filename=p(root, "a.js"), directory=root)

        assert result == [p(root, "b.js"), p(root, "a.js")]

    def test_lazy_commonjs_require_included(self, make_files):
        """Test that a require() inside a function body is followed."""
        root = make_files({
            "foo.js": "module.exports = function() {\n  return require('./bar');\n};\n",
            "bar.js": "",
        })

        result = build_list(filename=p(root, "foo.js"), directory=root)

        assert result == [p(root, "bar.js"), p(root, "foo.js")]

    def test_es6_require_needs_mixed_imports(self, make_files):
        """Test that require() in an ES module is only followed with mixed imports."""
        root = make_files({
            "foo.js": "export default function() {\n  const bar = require('./bar');\n}\n",
            "bar.js": "",
        })

        plain = build_list(filename=p(root, "foo.js"), directory=root)
        mixed = build_list(
            filename=p(root, "foo.js"),
            directory=root,
            detective={"es6": {"mixed_imports": True}},
        )

        assert plain == [p(root, "foo.js")]
        assert mixed == [p(root, "bar.js"), p(root, "foo.js")]

    def test_dynamic_imports_opt_in(self, make_files):
        """Test that import() targets are only followed on request."""
        root = make_files({
            "foo.js": "import a from './a';\nconst load = () => import('./b');\n",
            "a.js": "",
            "b.js": "",
        })

        default = build_list(filename=p(root, "foo.js"), directory=root)
        dynamic = build_list(
            filename=p(root, "foo.js"),
            directory=root,
            include_dynamic_imports=True,
        )

        assert default == [p(root, "a.js"), p(root, "foo.js")]
        assert dynamic == [p(root, "a.js"), p(root, "b.js"), p(root, "foo.js")]


class TestModuleFormats:
    """Tests for each supported module format."""

    def test_amd(self, make_files):
        """Test AMD dependency arrays and inner require calls."""
        root = make_files({
            "a.js": (
                "define(['./b', 'require'], function(b, require) {\n"
                "  var c = require('./c');\n"
                "});\n"
            ),
            "b.js": "",
            "c.js": "",
        })

        tree = build_tree(filename=p(root, "a.js"), directory=root)
        eager = build_tree(
            filename=p(root, "a.js"),
            directory=root,
            detective={"amd": {"skip_lazy_loaded": True}},
        )

        assert tree == {p(root, "a.js"): {p(root, "b.js"): {}, p(root, "c.js"): {}}}
        assert eager == {p(root, "a.js"): {p(root, "b.js"): {}}}

    def test_es6_and_jsx(self, make_files):
        """Test ES imports from a JSX file, including a package."""
        root = make_files({
            "app.jsx": (
                "import React from 'react';\n"
                "import Button from './button';\n"
                "export default () => <Button />;\n"
            ),
            "button.jsx": "export default function Button() { return <b />; }\n",
            "node_modules/react/package.json": '{"main": "index.js"}',
            "node_modules/react/index.js": "",
        })

        tree = build_tree(filename=p(root, "app.jsx"), directory=root)

        assert tree == {
            p(root, "app.jsx"): {
                p(root, "node_modules/react/index.js"): {},
                p(root, "button.jsx"): {},
            }
        }

    def test_bare_specifier_falls_back_to_directory(self, make_files):
        """Test that `import b from "b"` finds b.js under the base directory."""
        root = make_files({
            "src/a.js": 'import b from "b";\n',
            "b.js": "",
        })

        tree = build_tree(filename=p(root, "src/a.js"), directory=root)

        assert tree == {p(root, "src/a.js"): {p(root, "b.js"): {}}}

    def test_es6_imports_typescript_sources(self, make_files):
        """Test that ES modules find .ts and .tsx files without an extension."""
        root = make_files({
            "a.js": "import b from './b';\nimport C from './c';\nexport default b;\n",
            "b.ts": "",
            "c.tsx": "",
        })
        non_existent = {}

        tree = build_tree(filename=p(root, "a.js"), directory=root, non_existent=non_existent)

        assert tree == {p(root, "a.js"): {p(root, "b.ts"): {}, p(root, "c.tsx"): {}}}
        assert non_existent == {}

    def test_commonjs_skips_typescript_extensions(self, make_files):
        root = make_files({"a.js": "require('./b');\n", "b.ts": ""})
        non_existent = {}

        tree = build_tree(filename=p(root, "a.js"), directory=root, non_existent=non_existent)

        assert tree == {p(root, "a.js"): {}}
        assert non_existent == {p(root, "a.js"): ["./b"]}

    def test_core_module_names_as_path_segments(self, make_files):
        """Test that util/..., events/... are project files, not core modules."""
        root = make_files({
            "amd.js": "define(['util/strings', 'events/bus'], function(s, b) {});\n",
            "cjs.js": "require('util/helpers');\nrequire('fs/promises');\n",
            "util/strings.js": "",
            "util/helpers.js": "",
            "events/bus.js": "",
        })
        non_existent = {}

        amd = build_tree(filename=p(root, "amd.js"), directory=root, non_existent=non_existent)
        cjs = build_tree(filename=p(root, "cjs.js"), directory=root, non_existent=non_existent)

        assert amd == {p(root, "amd.js"): {p(root, "util/strings.js"): {}, p(root, "events/bus.js"): {}}}
        assert cjs == {p(root, "cjs.js"): {p(root, "util/helpers.js"): {}}}
        assert non_existent == {}

    def test_typescript(self, make_files):
        """Test TypeScript imports, type-only imports and import-require."""
        root = make_files({
            "a.ts": (
                "import { B } from './b';\n"
                "import type { C } from './c';\n"
                "import d = require('./d');\n"
            ),
            "b.ts": "",
            "c.ts": "",
            "d.ts": "",
        })

        tree = build_tree(filename=p(root, "a.ts"), directory=root)
        values_only = build_tree(
            filename=p(root, "a.ts"),
            directory=root,
            detective={"ts": {"skip_type_imports": True}},
        )

        assert list(tree[p(root, "a.ts")]) == [p(root, "b.ts"), p(root, "c.ts"), p(root, "d.ts")]
        assert list(values_only[p(root, "a.ts")]) == [p(root, "b.ts"), p(root, "d.ts")]

    def test_typescript_js_extension_maps_to_source(self, make_files):
        """Test that `./b.js` in a TypeScript file resolves to b.ts."""
        root = make_files({"a.ts": "import { b } from './b.js';\n", "b.ts": ""})

        tree = build_tree(filename=p(root, "a.ts"), directory=root)

        assert tree == {p(root, "a.ts"): {p(root, "b.ts"): {}}}

    def test_sass(self, make_files):
        """Test Sass imports with partials and built-in modules."""
        root = make_files({
            "main.scss": (
                '@import "variables", "mixins";\n'
                "@use 'sub/theme';\n"
                '@use "sass:math";\n'
            ),
            "_variables.scss": "",
            "mixins.scss": "",
            "sub/_theme.scss": "",
        })
        non_existent = {}

        tree = build_tree(filename=p(root, "main.scss"), directory=root, non_existent=non_existent)

        assert list(tree[p(root, "main.scss")]) == [
            p(root, "_variables.scss"),
            p(root, "mixins.scss"),
            p(root, "sub/_theme.scss"),
        ]
        assert non_existent == {}

    def test_less(self, make_files):
        """Test Less imports, including plain CSS."""
        root = make_files({
            "main.less": '@import (reference) "b";\n@import "c.css";\n',
            "b.less": "",
            "c.css": "",
        })

        tree = build_tree(filename=p(root, "main.less"), directory=root)

        assert tree == {p(root, "main.less"): {p(root, "b.less"): {}, p(root, "c.css"): {}}}

    def test_stylus(self, make_files):
        """Test Stylus @import and @require."""
        root = make_files({
            "main.styl": '@import "b"\n@require "c"\n',
            "b.styl": "",
            "c/index.styl": "",
        })

        tree = build_tree(filename=p(root, "main.styl"), directory=root)

        assert tree == {p(root, "main.styl"): {p(root, "b.styl"): {}, p(root, "c/index.styl"): {}}}


class TestResolutionOptions:
    """Tests for the resolution-related options."""

    def test_requirejs_paths_alias(self, make_files):
        """Test that a RequireJS paths entry maps a module name to a file."""
        root = make_files({
            "a.js": "define(['F'], function(F) { return F; });\n",
            "lodizzle.js": "",
            "config.js": "requirejs.config({\n  baseUrl: '.',\n  paths: { F: './lodizzle' }\n});\n",
        })

        tree = build_tree(filename=p(root, "a.js"), directory=root, config=p(root, "config.js"))

        assert tree == {p(root, "a.js"): {p(root, "lodizzle.js"): {}}}

    def test_bundler_alias(self, make_files):
        """Test a webpack resolve.alias table in a JavaScript config."""
        root = make_files({
            "a.js": "require('@lib/util');\n",
            "src/lib/util.js": "",
            "webpack.config.js": (
                "const path = require('path');\n"
                "module.exports = {\n"
                "  resolve: { alias: { '@lib': path.resolve(__dirname, 'src/lib') } },\n"
                "};\n"
            ),
        })

        tree = build_tree(
            filename=p(root, "a.js"),
            directory=root,
            webpack_config=p(root, "webpack.config.js"),
        )

        assert tree == {p(root, "a.js"): {p(root, "src/lib/util.js"): {}}}

    def test_tsconfig_paths(self, make_files):
        """Test tsconfig baseUrl and wildcard paths."""
        root = make_files({
            "a.ts": "import { b } from '@app/b';\n",
            "src/b.ts": "",
            "tsconfig.json": (
                "{\n"
                "  // path mapping\n"
                '  "compilerOptions": {"baseUrl": ".", "paths": {"@app/*": ["src/*"]},},\n'
                "}\n"
            ),
        })

        tree = build_tree(filename=p(root, "a.ts"), directory=root, ts_config=p(root, "tsconfig.json"))

        assert tree == {p(root, "a.ts"): {p(root, "src/b.ts"): {}}}

    def test_entry_field(self, make_files):
        """Test choosing the package.json module field over main."""
        root = make_files({
            "a.js": "require('pkg');\n",
            "node_modules/pkg/package.json": '{"main": "main.js", "module": "module.js"}',
            "node_modules/pkg/main.js": "",
            "node_modules/pkg/module.js": "",
        })

        by_main = build_tree(filename=p(root, "a.js"), directory=root)
        by_module = build_tree(
            filename=p(root, "a.js"),
            directory=root,
            node_modules_entry_field="module",
        )

        assert list(by_main[p(root, "a.js")]) == [p(root, "node_modules/pkg/main.js")]
        assert list(by_module[p(root, "a.js")]) == [p(root, "node_modules/pkg/module.js")]

    def test_missing_config_file(self, make_files):
        """Test that an unreadable RequireJS config fails before traversal."""
        root = make_files({"a.js": ""})

        with pytest.raises(ConfigurationError):
            build_tree(filename=p(root, "a.js"), directory=root, config=p(root, "nope.js"))


class TestTraversalConfig:
    """Tests for option validation."""

    def test_filename_required(self, tmp_path):
        with pytest.raises(ConfigurationError, match="filename"):
            build_tree(directory=str(tmp_path))

    def test_directory_required(self, tmp_path):
        with pytest.raises(ConfigurationError, match="directory"):
            build_tree(filename=str(tmp_path / "a.js"))

    def test_unknown_option(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Unknown"):
            build_tree(filename=str(tmp_path / "a.js"), directory=str(tmp_path), colour="red")

    def test_cache_must_be_mapping(self, tmp_path):
        with pytest.raises(ConfigurationError, match="visited"):
            build_tree(filename=str(tmp_path / "a.js"), directory=str(tmp_path), visited=[])

    def test_root_alias(self, make_files):
        """Test that `root` is accepted in place of `directory`."""
        root = make_files({"a.js": "require('./b');\n", "b.js": ""})

        tree = build_tree({"filename": p(root, "a.js"), "root": root})

        assert tree == {p(root, "a.js"): {p(root, "b.js"): {}}}

    def test_canonical_name_wins(self, tmp_path):
        """Test that `directory` beats `root` when both are given."""
        config = TraversalConfig.from_options(
            filename=str(tmp_path / "a.js"),
            directory=str(tmp_path / "real"),
            root=str(tmp_path / "legacy"),
        )

        assert config.directory == str(tmp_path / "real")

    def test_clone_keeps_extractor_config(self, tmp_path):
        """Test that a clone keeps the extractor configuration and caches."""
        config = TraversalConfig.from_options(
            filename=str(tmp_path / "a.js"),
            directory=str(tmp_path),
            detective={"amd": {"skip_lazy_loaded": True}},
        )

        clone = config.clone(filename=str(tmp_path / "b.js"))

        assert clone.extractor_config == {"amd": {"skip_lazy_loaded": True}}
        assert clone.visited is config.visited
        assert clone.non_existent is config.non_existent
        assert clone.filename == str(tmp_path / "b.js")

    def test_graph_records_cycle_edge(self, make_files):
        """Test that the traversal graph flags the edge closing a cycle."""
        root = make_files({"a.js": "require('./b');\n", "b.js": "require('./a');\n"})
        config = TraversalConfig.from_options(filename=p(root, "a.js"), directory=root)

        traversal = DependencyTraversal(config)
        traversal.run()

        assert traversal.graph.is_cycle_edge(p(root, "b.js"), p(root, "a.js"))
        assert not traversal.graph.is_cycle_edge(p(root, "a.js"), p(root, "b.js"))
        assert traversal.graph.get_roots() == set()

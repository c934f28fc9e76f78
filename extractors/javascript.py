"""Specifier extraction for JavaScript and TypeScript sources via tree-sitter."""

import os
from typing import Any, Dict, Iterator, List, Optional

import tree_sitter_javascript
import tree_sitter_typescript
from tree_sitter import Language, Node, Parser


GRAMMARS = {
    "javascript": Language(tree_sitter_javascript.language()),
    "typescript": Language(tree_sitter_typescript.language_typescript()),
    "tsx": Language(tree_sitter_typescript.language_tsx()),
}

# AMD pseudo-dependencies that never name a file
AMD_MAGIC_MODULES = {"require", "exports", "module"}

FUNCTION_NODE_TYPES = {
    "function",
    "function_expression",
    "function_declaration",
    "arrow_function",
    "method_definition",
    "generator_function",
    "generator_function_declaration",
}

_parser_cache: Dict[str, Parser] = {}


def parse_source(source: str, grammar: str = "javascript") -> Node:
    """
    Parse source text and return the root node of its syntax tree.

    tree-sitter recovers from syntax errors, so this only fails when the
    text cannot be handed to the parser at all (ValueError).
    """
    parser = _parser_cache.get(grammar)
    if parser is None:
        parser = Parser(GRAMMARS[grammar])
        _parser_cache[grammar] = parser

    try:
        data = source.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ValueError(str(e)) from e

    return parser.parse(data).root_node


def iter_nodes(root: Node) -> Iterator[Node]:
    """Yield every node below root (inclusive) in source order."""
    stack = [root]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def node_text(node: Node) -> str:
    return node.text.decode("utf-8", errors="replace") if node.text else ""


def string_value(node: Optional[Node]) -> Optional[str]:
    """Return the value of a string literal node, or None for anything else."""
    if node is None:
        return None

    if node.type == "string":
        return node_text(node)[1:-1]

    if node.type == "template_string":
        if any(child.type == "template_substitution" for child in node.children):
            return None
        return node_text(node)[1:-1]

    return None


def call_name(node: Node) -> Optional[str]:
    """Name of the callee of a call_expression: 'require', 'import', 'require.config'..."""
    function = node.child_by_field_name("function")
    if function is None:
        return None
    if function.type == "import":
        return "import"
    if function.type in ("identifier", "member_expression"):
        return node_text(function)
    return None


def call_arguments(node: Node) -> List[Node]:
    arguments = node.child_by_field_name("arguments")
    if arguments is None:
        return []
    return [arg for arg in arguments.named_children if arg.type != "comment"]


def _single_string_argument(node: Node) -> Optional[str]:
    args = call_arguments(node)
    if len(args) != 1:
        return None
    return string_value(args[0])


def _is_inside_function(node: Node) -> bool:
    parent = node.parent
    while parent is not None:
        if parent.type in FUNCTION_NODE_TYPES:
            return True
        parent = parent.parent
    return False


def _is_type_only(node: Node) -> bool:
    return any(child.type == "type" for child in node.children)


def sniff_module_type(root: Node) -> str:
    """
    Guess the module system of a JavaScript file from its syntax tree.

    Returns:
        One of "es6", "amd", "commonjs" or "none".
    """
    for child in root.children:
        if child.type in ("import_statement", "export_statement"):
            return "es6"

    for child in root.children:
        if child.type != "expression_statement" or not child.named_children:
            continue
        expression = child.named_children[0]
        if expression.type != "call_expression":
            continue
        name = call_name(expression)
        if name == "define":
            return "amd"
        if name in ("require", "requirejs") and any(
            arg.type == "array" for arg in call_arguments(expression)
        ):
            return "amd"

    for node in iter_nodes(root):
        if node.type == "call_expression" and call_name(node) == "require":
            return "commonjs"
        if node.type == "member_expression":
            text = node_text(node)
            if text.startswith("module.exports") or text.startswith("exports."):
                return "commonjs"

    return "none"


def extract_es6(
    root: Node,
    mixed_imports: bool = False,
    include_dynamic: bool = False,
    skip_type_imports: bool = False,
) -> List[str]:
    """
    Collect the specifiers of an ES module (also used for TypeScript).

    Args:
        root: Root node of the parsed file.
        mixed_imports: Also collect CommonJS require() calls.
        include_dynamic: Also collect import('...') targets.
        skip_type_imports: Ignore `import type` / `export type` statements.

    Returns:
        Specifiers in source order.
    """
    specifiers: List[str] = []

    for node in iter_nodes(root):
        if node.type in ("import_statement", "export_statement"):
            if skip_type_imports and _is_type_only(node):
                continue
            value = string_value(node.child_by_field_name("source"))
            if value is not None:
                specifiers.append(value)

        elif node.type == "import_require_clause":
            source = node.child_by_field_name("source")
            if source is None:
                source = next((c for c in node.children if c.type == "string"), None)
            value = string_value(source)
            if value is not None:
                specifiers.append(value)

        elif node.type == "call_expression":
            name = call_name(node)
            if name == "import" and include_dynamic:
                value = _single_string_argument(node)
            elif name == "require" and mixed_imports:
                value = _single_string_argument(node)
            else:
                continue
            if value is not None:
                specifiers.append(value)

    return specifiers


def extract_commonjs(root: Node, include_dynamic: bool = False) -> List[str]:
    """Collect every require('...') call, including lazily nested ones."""
    specifiers: List[str] = []

    for node in iter_nodes(root):
        if node.type != "call_expression":
            continue
        name = call_name(node)
        if name == "require" or (name == "import" and include_dynamic):
            value = _single_string_argument(node)
            if value is not None:
                specifiers.append(value)

    return specifiers


def extract_amd(root: Node, skip_lazy_loaded: bool = False) -> List[str]:
    """
    Collect AMD dependencies.

    Dependency arrays of define()/require()/requirejs() calls are always
    collected; inner calls (require('x') in a factory, or nested
    require([...])) are skipped when skip_lazy_loaded is set.
    """
    specifiers: List[str] = []

    for node in iter_nodes(root):
        if node.type != "call_expression":
            continue
        name = call_name(node)
        if name not in ("define", "require", "requirejs"):
            continue
        if skip_lazy_loaded and _is_inside_function(node):
            continue

        args = call_arguments(node)
        array = next((arg for arg in args if arg.type == "array"), None)
        if array is not None:
            for element in array.named_children:
                value = string_value(element)
                if value:
                    specifiers.append(value)
        elif name != "define" and len(args) == 1:
            value = string_value(args[0])
            if value:
                specifiers.append(value)

    return [s for s in specifiers if s not in AMD_MAGIC_MODULES]


def literal_value(node: Optional[Node], dirname: Optional[str] = None) -> Any:
    """
    Statically evaluate a JavaScript literal.

    Handles strings, numbers, booleans, null, arrays, objects, `__dirname`
    and path.resolve()/path.join() calls over those. Anything else
    evaluates to None.
    """
    if node is None:
        return None

    kind = node.type

    if kind in ("string", "template_string"):
        return string_value(node)

    if kind == "number":
        text = node_text(node)
        try:
            return int(text)
        except ValueError:
            try:
                return float(text)
            except ValueError:
                return None

    if kind == "true":
        return True
    if kind == "false":
        return False
    if kind in ("null", "undefined"):
        return None

    if kind == "parenthesized_expression":
        inner = [c for c in node.named_children if c.type != "comment"]
        return literal_value(inner[0], dirname) if inner else None

    if kind == "identifier":
        return dirname if node_text(node) == "__dirname" else None

    if kind == "array":
        return [
            literal_value(element, dirname)
            for element in node.named_children
            if element.type != "comment"
        ]

    if kind == "object":
        result: Dict[str, Any] = {}
        for pair in node.named_children:
            if pair.type != "pair":
                continue
            key_node = pair.child_by_field_name("key")
            if key_node is None:
                continue
            key = string_value(key_node)
            if key is None:
                key = node_text(key_node)
            result[key] = literal_value(pair.child_by_field_name("value"), dirname)
        return result

    if kind == "call_expression" and call_name(node) in ("path.resolve", "path.join"):
        parts = [literal_value(arg, dirname) for arg in call_arguments(node)]
        if not parts or not all(isinstance(part, str) for part in parts):
            return None
        return os.path.normpath(os.path.join(*parts))

    return None


def find_config_object(root: Node) -> Optional[Node]:
    """
    Find the object literal a JavaScript config file exports.

    Recognizes `require.config({...})`, `requirejs.config({...})`,
    `requirejs({...})`, `var require = {...}`, `module.exports = {...}` and
    `export default {...}`.
    """
    for node in iter_nodes(root):
        if node.type == "call_expression" and call_name(node) in (
            "require.config", "requirejs.config", "requirejs",
        ):
            for arg in call_arguments(node):
                if arg.type == "object":
                    return arg

        elif node.type == "assignment_expression":
            left = node.child_by_field_name("left")
            right = node.child_by_field_name("right")
            if left is not None and right is not None and right.type == "object":
                if node_text(left) in ("module.exports", "require", "requirejs"):
                    return right

        elif node.type == "variable_declarator":
            name = node.child_by_field_name("name")
            value = node.child_by_field_name("value")
            if name is not None and value is not None and value.type == "object":
                if node_text(name) in ("require", "requirejs"):
                    return value

        elif node.type == "export_statement":
            value = node.child_by_field_name("value")
            if value is not None and value.type == "object":
                return value

    return None

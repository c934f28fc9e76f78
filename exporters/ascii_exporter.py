"""ASCII tree-style exporter for dependency trees."""

from typing import Any, Dict, List, Optional, Set, Tuple

from .paths import display_path


# Unicode tree characters
UNICODE_BRANCH = "├── "
UNICODE_LAST = "└── "
UNICODE_VERTICAL = "│   "
UNICODE_SPACE = "    "

# ASCII fallback characters
ASCII_BRANCH = "|-- "
ASCII_LAST = "\\-- "
ASCII_VERTICAL = "|   "
ASCII_SPACE = "    "


def to_ascii(
    tree: Dict[str, Any],
    base: Optional[str] = None,
    style: str = "tree",
    missing: Optional[Dict[str, List[str]]] = None,
) -> str:
    """
    Convert a dependency tree to ASCII tree representation.

    A subtree that was already printed is shown again with a `[*]` marker
    and not expanded a second time.

    Args:
        tree: A build_tree() result.
        base: Optional directory that paths are displayed relative to.
        style: Output style - "tree" (Unicode) or "ascii" (pure ASCII).
        missing: Optional unresolved specifiers per file (a `non_existent`
            mapping), shown as `[MISSING]` leaves.

    Returns:
        ASCII tree string.
    """
    # Select character set based on style
    if style == "ascii":
        chars = (ASCII_BRANCH, ASCII_LAST, ASCII_VERTICAL, ASCII_SPACE)
    else:
        chars = (UNICODE_BRANCH, UNICODE_LAST, UNICODE_VERTICAL, UNICODE_SPACE)

    lines: List[str] = []
    expanded: Set[str] = set()

    for i, (node, subtree) in enumerate(tree.items()):
        _render_node(
            node=node,
            subtree=subtree,
            base=base,
            prefix="",
            is_last=True,
            chars=chars,
            expanded=expanded,
            lines=lines,
            missing=missing or {},
            is_root=True,
        )

        # Add blank line between root trees (except after last)
        if i < len(tree) - 1:
            lines.append("")

    return "\n".join(lines)


def _render_node(
    node: str,
    subtree: Any,
    base: Optional[str],
    prefix: str,
    is_last: bool,
    chars: Tuple[str, str, str, str],
    expanded: Set[str],
    lines: List[str],
    missing: Dict[str, List[str]],
    is_root: bool = False,
) -> None:
    """
    Recursively render a node and its children.

    Args:
        node: File to render.
        subtree: Its dependencies: a nested dict, or a list from a seeded cache.
        base: Base path for display.
        prefix: Current line prefix for indentation.
        is_last: Whether this is the last child of its parent.
        chars: Character set (branch, last, vertical, space).
        expanded: Files whose dependencies were already printed.
        lines: Output lines list (modified in place).
        missing: Unresolved specifiers per file.
        is_root: Whether this is a root-level node.
    """
    branch, last, vertical, space = chars

    label = display_path(node, base)

    if isinstance(subtree, dict):
        children = list(subtree.items())
    else:
        children = [(child, {}) for child in subtree if child != node]
    missing_refs = missing.get(node, [])

    is_repeat = node in expanded and bool(children or missing_refs)
    marker = " [*]" if is_repeat else ""

    if is_root:
        lines.append(f"{label}{marker}")
    else:
        connector = last if is_last else branch
        lines.append(f"{prefix}{connector}{label}{marker}")

    if is_repeat:
        return
    expanded.add(node)

    if is_root:
        new_prefix = ""
    else:
        new_prefix = prefix + (space if is_last else vertical)

    total_items = len(children) + len(missing_refs)
    item_index = 0

    for child, child_subtree in children:
        item_index += 1
        _render_node(
            node=child,
            subtree=child_subtree,
            base=base,
            prefix=new_prefix,
            is_last=(item_index == total_items),
            chars=chars,
            expanded=expanded,
            lines=lines,
            missing=missing,
        )

    for specifier in missing_refs:
        item_index += 1
        connector = last if item_index == total_items else branch
        lines.append(f"{new_prefix}{connector}{specifier} [MISSING]")

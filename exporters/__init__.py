"""Exporters for assembling and printing dependency trees."""

from .ascii_exporter import to_ascii
from .json_exporter import to_json, tree_to_json
from .mermaid_exporter import to_mermaid
from .tree_exporter import ListAssembler, TreeAssembler, dedupe

__all__ = [
    "ListAssembler",
    "TreeAssembler",
    "dedupe",
    "to_ascii",
    "to_json",
    "to_mermaid",
    "tree_to_json",
]

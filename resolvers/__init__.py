"""Resolvers mapping raw specifiers to files on disk."""

from .config_files import load_config_file, parse_config_file
from .module_resolver import ModuleResolver
from .resolution import EXCLUDED, NOT_FOUND, Resolution, ResolutionStatus

__all__ = [
    "EXCLUDED",
    "NOT_FOUND",
    "ModuleResolver",
    "Resolution",
    "ResolutionStatus",
    "load_config_file",
    "parse_config_file",
]

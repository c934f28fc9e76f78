"""Exceptions raised while building dependency trees."""


class DependencyTreeError(Exception):
    """Base class for all dependency tree errors."""


class ConfigurationError(DependencyTreeError):
    """
    Raised before any traversal when the options are unusable.

    Examples: a missing entry filename, a missing base directory, a filter
    that is not callable, or a config file that cannot be parsed.
    """


class ExtractionError(DependencyTreeError):
    """Raised when a file's contents cannot be parsed at all."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(f"Cannot extract dependencies from {file_path}: {reason}")
        self.file_path = file_path
        self.reason = reason

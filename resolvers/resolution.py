"""Resolution outcomes and path helpers shared by the resolvers."""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ResolutionStatus(Enum):
    RESOLVED = "resolved"
    NOT_FOUND = "not_found"
    # Builtin or remote module: no file on disk, not an error either
    EXCLUDED = "excluded"


@dataclass(frozen=True)
class Resolution:
    """Result of resolving one specifier."""

    status: ResolutionStatus
    path: Optional[str] = None

    @classmethod
    def found(cls, path: str) -> "Resolution":
        return cls(ResolutionStatus.RESOLVED, to_file_id(path))

    @property
    def is_resolved(self) -> bool:
        return self.status is ResolutionStatus.RESOLVED


NOT_FOUND = Resolution(ResolutionStatus.NOT_FOUND)
EXCLUDED = Resolution(ResolutionStatus.EXCLUDED)


def to_file_id(path: str) -> str:
    """Absolute, normalized form of a path; symlinks are left alone."""
    return os.path.normpath(os.path.abspath(path))


def is_path_specifier(specifier: str) -> bool:
    """True for ./x, ../x, . and .. and absolute paths."""
    return (
        specifier in (".", "..")
        or specifier.startswith(("./", "../", ".\\", "..\\"))
        or os.path.isabs(specifier)
    )


def is_remote(specifier: str) -> bool:
    lowered = specifier.lower()
    return lowered.startswith(("http://", "https://", "//", "data:"))


def iter_node_modules(start_dir: str):
    """Yield node_modules directories from start_dir up to the filesystem root."""
    current = start_dir
    while True:
        if os.path.basename(current) != "node_modules":
            candidate = os.path.join(current, "node_modules")
            if os.path.isdir(candidate):
                yield candidate
        parent = os.path.dirname(current)
        if parent == current:
            return
        current = parent

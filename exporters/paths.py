"""Path display shared by the printers."""

import os
from typing import Optional


def display_path(path: str, base: Optional[str] = None) -> str:
    """
    Forward-slash form of a path, relative to base when it lies inside it.

    Paths outside base (or on another drive) stay absolute.
    """
    if base:
        try:
            rel_path = os.path.relpath(path, base)
        except ValueError:
            # Different drive on Windows
            return path.replace("\\", "/")
        if not rel_path.startswith(".."):
            return rel_path.replace("\\", "/")
    return path.replace("\\", "/")

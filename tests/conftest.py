"""Shared fixtures."""

from pathlib import Path
from typing import Dict, Union

import pytest


@pytest.fixture
def make_files(tmp_path):
    """
    Write a file tree under tmp_path.

    Takes a mapping of relative path to contents (str or bytes) and returns
    tmp_path as a string.
    """

    def _make(files: Dict[str, Union[str, bytes]]) -> str:
        for rel_path, content in files.items():
            path = Path(tmp_path) / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            if isinstance(content, bytes):
                path.write_bytes(content)
            else:
                path.write_text(content, encoding="utf-8")
        return str(tmp_path)

    return _make

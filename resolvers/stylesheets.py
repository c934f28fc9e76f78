"""Partial and extension lookup for Sass, Less and Stylus imports."""

import os
from typing import List, Optional

from extractors.definition import ModuleFormat
from .resolution import iter_node_modules, to_file_id


SASS_EXTENSIONS = (".scss", ".sass", ".css")


def sass_candidates(specifier: str) -> List[str]:
    """
    Relative file names a Sass import may refer to.

    `foo/b` yields foo/b.scss, foo/_b.scss, foo/b.sass, foo/_b.sass,
    foo/b.css, then the foo/b/_index and foo/b/index forms.
    """
    head, name = os.path.split(specifier)
    partial = name if name.startswith("_") else "_" + name

    if os.path.splitext(name)[1] in SASS_EXTENSIONS:
        return [specifier, os.path.join(head, partial)]

    candidates: List[str] = []
    for ext in SASS_EXTENSIONS:
        candidates.append(os.path.join(head, name + ext))
        if ext != ".css":
            candidates.append(os.path.join(head, partial + ext))
    for ext in (".scss", ".sass"):
        candidates.append(os.path.join(specifier, "_index" + ext))
        candidates.append(os.path.join(specifier, "index" + ext))
    candidates.append(specifier)
    return candidates


def less_candidates(specifier: str) -> List[str]:
    if os.path.splitext(specifier)[1]:
        return [specifier]
    return [specifier + ".less", specifier]


def stylus_candidates(specifier: str) -> List[str]:
    if os.path.splitext(specifier)[1]:
        return [specifier]
    return [specifier + ".styl", os.path.join(specifier, "index.styl"), specifier]


CANDIDATES = {
    ModuleFormat.SASS: sass_candidates,
    ModuleFormat.LESS: less_candidates,
    ModuleFormat.STYLUS: stylus_candidates,
}


class StylesheetResolver:
    """
    Resolve stylesheet imports.

    Searches the importing file's directory, then the base directory; a
    leading `~` searches node_modules instead.
    """

    def __init__(self, directory: str):
        self.directory = to_file_id(directory)

    def resolve(
        self,
        specifier: str,
        containing_file: str,
        module_format: ModuleFormat,
    ) -> Optional[str]:
        candidates = CANDIDATES.get(module_format)
        if candidates is None:
            return None

        source_dir = os.path.dirname(containing_file)
        if specifier.startswith("~"):
            specifier = specifier[1:]
            search_dirs = list(iter_node_modules(source_dir))
        elif os.path.isabs(specifier):
            search_dirs = [""]
        else:
            search_dirs = [source_dir, self.directory]

        for search_dir in search_dirs:
            for candidate in candidates(specifier):
                path = os.path.join(search_dir, candidate)
                if os.path.isfile(path):
                    return to_file_id(path)

        return None

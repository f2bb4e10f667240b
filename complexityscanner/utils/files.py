"""
Source file discovery for the command-line interface.
"""

from __future__ import annotations

import fnmatch
from pathlib import Path
from typing import Iterable, List, Sequence, Tuple

from complexityscanner.core.models import SourceFile


SOURCE_EXTENSIONS = {".js", ".mjs", ".cjs", ".jsx", ".ts", ".tsx"}

IGNORED_DIRS = {
    ".git",
    ".hg",
    ".svn",
    ".idea",
    ".vscode",
    ".venv",
    "node_modules",
    "bower_components",
    "coverage",
    "dist",
    "build",
    "out",
}


def _excluded(relative: str, patterns: Sequence[str]) -> bool:
    name = relative.rsplit("/", 1)[-1]
    return any(fnmatch.fnmatch(relative, p) or fnmatch.fnmatch(name, p) for p in patterns)


def iter_source_files(
    roots: Iterable[str],
    exclude_patterns: Sequence[str] = (),
) -> Iterable[Tuple[Path, str]]:
    """
    Yield ``(path, display_name)`` for every source file under ``roots``.

    Display names are relative to the root they were found under and always
    use forward slashes, so they can serve as dependency-graph keys.
    """
    for root in roots:
        root_path = Path(root)
        if not root_path.exists():
            raise FileNotFoundError(f"Path not found: {root}")
        if root_path.is_file():
            yield root_path, root_path.as_posix()
            continue
        for path in sorted(root_path.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in SOURCE_EXTENSIONS:
                continue
            relative = path.relative_to(root_path)
            if any(part in IGNORED_DIRS for part in relative.parts):
                continue
            if _excluded(relative.as_posix(), exclude_patterns):
                continue
            yield path, relative.as_posix()


def read_source_files(
    roots: Iterable[str],
    exclude_patterns: Sequence[str] = (),
) -> List[SourceFile]:
    files = []
    for path, name in iter_source_files(roots, exclude_patterns):
        text = path.read_text(encoding="utf-8", errors="replace")
        files.append(SourceFile(name=name, text=text, id=str(path)))
    return files

"""Discovery of the git working tree that contains a book."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Optional

GIT_MARKER = ".git"


class RepositoryNotFoundError(RuntimeError):
    """Raised when no enclosing git repository can be found for the book."""


def find_repository_root(start: Path) -> Optional[Path]:
    """Walk upwards from ``start`` and return the first directory holding ``.git``.

    The walk stops before the filesystem root, which is never treated as a
    repository. Returns ``None`` when no marker is found.
    """
    current = Path(os.path.normpath(Path(start).absolute()))
    while not (current / GIT_MARKER).exists():
        parent = current.parent
        if parent == current or parent == Path(parent.anchor):
            return None
        current = parent
    return current


__all__ = ["GIT_MARKER", "RepositoryNotFoundError", "find_repository_root"]

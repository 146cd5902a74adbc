"""Git repository helpers."""

from .repository import RepositoryNotFoundError, find_repository_root

__all__ = ["RepositoryNotFoundError", "find_repository_root"]

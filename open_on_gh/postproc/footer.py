"""Appends the "edit on GitHub" footer to chapter content."""

from __future__ import annotations

from pathlib import Path, PurePath
from urllib.parse import quote

from ..config import OpenOnConfig
from ..logging import get_logger
from ..models import Chapter
from .template import FOOTER_MARKER, FooterTemplate

logger = get_logger("postproc.footer")


class PathOutsideRepositoryError(RuntimeError):
    """Raised when a chapter source resolves outside the git repository."""


class FooterInjector:
    """Builds edit links for chapters and splices the footer into their content."""

    def __init__(
        self,
        repo_root: Path,
        src_root: Path,
        config: OpenOnConfig,
        template: FooterTemplate,
    ) -> None:
        self.repo_root = Path(repo_root).resolve()
        self.src_root = Path(src_root)
        self.config = config
        self.template = template

    def inject(self, chapter: Chapter) -> str:
        """Return the chapter content with the footer appended.

        Content already carrying the footer marker, chapters without a source
        path (drafts) and chapters whose file cannot be resolved on disk are
        returned unchanged.
        """
        content = chapter.content
        if FOOTER_MARKER in content:
            logger.debug("Footer already present in %r; skipping", chapter.name)
            return content

        if chapter.path is None:
            logger.debug("Chapter %r has no source file; skipping", chapter.name)
            return content

        try:
            source = (self.src_root / chapter.path).resolve(strict=True)
        except OSError:
            logger.debug("Source for %r not found at %s; skipping", chapter.name, chapter.path)
            return content

        relative = self.relative_path(source)
        url = self.edit_url(relative)
        logger.debug("Chapter path: %s", source)
        logger.debug("URL: %s", url)

        return f"{content}\n{self.template.render(url)}"

    def relative_path(self, source: Path) -> PurePath:
        """Return ``source`` relative to the repository root."""
        try:
            return source.relative_to(self.repo_root)
        except ValueError as exc:
            raise PathOutsideRepositoryError(
                f"{source} is not inside the git repository at {self.repo_root}"
            ) from exc

    def edit_url(self, relative: PurePath) -> str:
        """Return the GitHub edit URL for a repository-relative path.

        Branch and path are percent-encoded with ``/`` kept as a separator.
        """
        branch = quote(self.config.branch, safe="/")
        path = quote(relative.as_posix(), safe="/")
        return f"{self.config.repository_url}/edit/{branch}/{path}"


__all__ = ["FOOTER_MARKER", "FooterInjector", "PathOutsideRepositoryError"]

"""Preprocessor wiring: configuration, repository lookup and footer injection."""

from __future__ import annotations

from .config import resolve_config
from .context import PreprocessorContext
from .git.repository import RepositoryNotFoundError, find_repository_root
from .logging import get_logger
from .models import Book, Chapter
from .postproc.footer import FooterInjector
from .postproc.template import FooterTemplate

SUPPORTED_RENDERERS = frozenset({"html"})


class OpenOnPreprocessor:
    """Adds an "edit this page on GitHub" footer to every chapter of a book."""

    name = "open-on-gh"

    def __init__(self) -> None:
        self.logger = get_logger("preprocessor")

    def supports_renderer(self, renderer: str) -> bool:
        return renderer in SUPPORTED_RENDERERS

    def run(self, context: PreprocessorContext, book: Book) -> Book:
        """Return ``book`` with footers appended, or untouched when not configured.

        Raises ``ConfigError`` for an unusable footer template,
        ``RepositoryNotFoundError`` when the book is not inside a git
        repository and ``PathOutsideRepositoryError`` when a chapter file
        resolves outside it. Chapters visited before an error keep their
        new content.
        """
        config = resolve_config(context)
        if config is None:
            return book

        src_root = context.src_root
        repo_root = find_repository_root(context.root)
        if repo_root is None:
            raise RepositoryNotFoundError(
                f"No git repository found above book root {context.root}"
            )
        self.logger.debug("Book root: %s", context.root)
        self.logger.debug("Src root: %s", src_root)
        self.logger.debug("Git root: %s", repo_root)

        template = FooterTemplate.parse(config.open_on_text)
        injector = FooterInjector(repo_root, src_root, config, template)

        def _apply(chapter: Chapter) -> None:
            chapter.content = injector.inject(chapter)

        book.for_each_chapter(_apply)
        return book


__all__ = ["OpenOnPreprocessor", "SUPPORTED_RENDERERS"]

"""Resolution of the output.html options that drive footer injection."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urlparse

from .context import PreprocessorContext
from .logging import get_logger

REPOSITORY_URL_KEY = "output.html.git-repository-url"
BRANCH_KEY = "output.html.git-branch"
OPEN_ON_TEXT_KEY = "output.html.open-on-text"

DEFAULT_BRANCH = "main"
DEFAULT_OPEN_ON_TEXT = "Found a bug? [Edit this page on GitHub.]"

_GITHUB_HOST = "github.com"

logger = get_logger("config")


class ConfigError(RuntimeError):
    """Raised when book.toml holds a value the preprocessor cannot use."""


@dataclass(frozen=True)
class OpenOnConfig:
    """Effective settings for one preprocessor run."""

    repository_url: str
    branch: str = DEFAULT_BRANCH
    open_on_text: str = DEFAULT_OPEN_ON_TEXT


def resolve_config(context: PreprocessorContext) -> Optional[OpenOnConfig]:
    """Return the resolved settings, or ``None`` when the book should pass through."""
    repository_url = _as_str(context.get(REPOSITORY_URL_KEY))
    if repository_url is None:
        logger.info("%s is not set to a string; leaving book unchanged", REPOSITORY_URL_KEY)
        return None
    logger.debug("Repository URL: %s", repository_url)

    if not is_github_url(repository_url):
        logger.info("%s does not point at GitHub; leaving book unchanged", repository_url)
        return None

    branch = _optional_str(context.get(BRANCH_KEY), DEFAULT_BRANCH)
    if branch is None:
        logger.info("%s is not a string; leaving book unchanged", BRANCH_KEY)
        return None
    logger.debug("Git branch: %s", branch)

    open_on_text = _optional_str(context.get(OPEN_ON_TEXT_KEY), DEFAULT_OPEN_ON_TEXT)
    if open_on_text is None:
        logger.info("%s is not a string; leaving book unchanged", OPEN_ON_TEXT_KEY)
        return None

    return OpenOnConfig(
        repository_url=repository_url.rstrip("/"),
        branch=branch,
        open_on_text=open_on_text,
    )


def is_github_url(url: str) -> bool:
    """Return True when ``url`` is hosted on github.com or one of its subdomains."""
    if _GITHUB_HOST not in url:
        return False
    host = (urlparse(url).hostname or "").lower()
    return host == _GITHUB_HOST or host.endswith("." + _GITHUB_HOST)


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _optional_str(value: Any, default: str) -> Optional[str]:
    if value is None:
        return default
    return _as_str(value)


__all__ = [
    "BRANCH_KEY",
    "ConfigError",
    "DEFAULT_BRANCH",
    "DEFAULT_OPEN_ON_TEXT",
    "OPEN_ON_TEXT_KEY",
    "OpenOnConfig",
    "REPOSITORY_URL_KEY",
    "is_github_url",
    "resolve_config",
]

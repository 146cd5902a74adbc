"""Parser for the ``prefix [link text] suffix`` footer template."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import ConfigError

FOOTER_MARKER = '<footer id="open-on-gh">'
FOOTER_END = "</footer>"


class TemplateError(ConfigError):
    """Raised when the open-on-text template has no usable link segment."""


@dataclass(frozen=True)
class FooterTemplate:
    """Footer text split around its single link label."""

    prefix: str
    label: str
    suffix: str

    @classmethod
    def parse(cls, text: str) -> "FooterTemplate":
        """Split ``text`` on its first ``[...]`` pair.

        Brackets after the first closing ``]`` are kept as literal suffix text.
        """
        start = text.find("[")
        if start == -1:
            raise TemplateError(
                f"open-on-text {text!r} must mark the link text with [brackets]"
            )
        end = text.find("]", start + 1)
        if end == -1:
            raise TemplateError(f"open-on-text {text!r} has an unterminated '['")
        label = text[start + 1 : end]
        if not label:
            raise TemplateError(f"open-on-text {text!r} has an empty link text")
        return cls(prefix=text[:start], label=label, suffix=text[end + 1 :])

    def render(self, url: str) -> str:
        """Return the footer HTML linking ``label`` to ``url``."""
        link = f'<a href="{url}">{self.label}</a>'
        return f"{FOOTER_MARKER}{self.prefix}{link}{self.suffix}{FOOTER_END}"


__all__ = ["FOOTER_END", "FOOTER_MARKER", "FooterTemplate", "TemplateError"]

"""Chapter content post-processing."""

from .footer import FOOTER_MARKER, FooterInjector, PathOutsideRepositoryError
from .template import FooterTemplate, TemplateError

__all__ = [
    "FOOTER_MARKER",
    "FooterInjector",
    "FooterTemplate",
    "PathOutsideRepositoryError",
    "TemplateError",
]

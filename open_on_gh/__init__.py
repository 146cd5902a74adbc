"""mdbook preprocessor that links every chapter to its source on GitHub."""

from .preprocessor import OpenOnPreprocessor

__all__ = ["OpenOnPreprocessor"]

"""Helper utilities for constructing throwaway books inside git repositories."""

from __future__ import annotations

import textwrap
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from open_on_gh.context import PreprocessorContext


class BookBuilder:
    """Writes a book below a directory marked as a git repository."""

    def __init__(self, tmp_path: Path, *, book_dir: str = "docs") -> None:
        self.root = tmp_path / "repo"
        self.root.mkdir()
        (self.root / ".git").mkdir()
        self.book_root = self.root / book_dir if book_dir else self.root
        self.book_root.mkdir(parents=True, exist_ok=True)

    def write(self, files: Mapping[str, str]) -> None:
        """Write `path -> contents` entries relative to the book root."""
        for relative, content in files.items():
            path = self.book_root / relative
            path.parent.mkdir(parents=True, exist_ok=True)
            normalised = textwrap.dedent(content).lstrip("\n")
            path.write_text(normalised, encoding="utf-8")

    def context(
        self,
        html: Optional[Dict[str, Any]] = None,
        *,
        src: Optional[str] = None,
    ) -> PreprocessorContext:
        """Return a preprocessor context with the given ``output.html`` table."""
        config: Dict[str, Any] = {"book": {"src": src or "src"}}
        if html is not None:
            config["output"] = {"html": html}
        return PreprocessorContext(root=self.book_root, config=config)


__all__ = ["BookBuilder"]

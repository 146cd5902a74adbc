"""Preprocessor context handed over by mdbook."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping

DEFAULT_SRC_DIR = "src"


@dataclass(frozen=True)
class PreprocessorContext:
    """Book root, loaded book.toml and renderer details for one build."""

    root: Path
    config: Mapping[str, Any] = field(default_factory=dict)
    renderer: str = "html"
    mdbook_version: str = ""

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "PreprocessorContext":
        if not isinstance(data, dict):
            raise ValueError("Preprocessor context JSON must be an object")
        root = data.get("root")
        if not isinstance(root, str) or not root:
            raise ValueError("Preprocessor context is missing the book root")
        config = data.get("config")
        return cls(
            root=Path(root),
            config=config if isinstance(config, dict) else {},
            renderer=str(data.get("renderer") or "html"),
            mdbook_version=str(data.get("mdbook_version") or ""),
        )

    @property
    def src_root(self) -> Path:
        """Directory holding the book's markdown sources."""
        src = self.get("book.src")
        return self.root / (src if isinstance(src, str) and src else DEFAULT_SRC_DIR)

    def get(self, key: str) -> Any:
        """Look up a dotted key such as ``output.html.git-branch``."""
        node: Any = self.config
        for segment in key.split("."):
            if not isinstance(node, Mapping) or segment not in node:
                return None
            node = node[segment]
        return node


__all__ = ["DEFAULT_SRC_DIR", "PreprocessorContext"]

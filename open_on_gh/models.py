"""Book data models exchanged with mdbook over the preprocessor protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, Optional, Union

_CHAPTER_KEYS = ("name", "content", "number", "sub_items", "path", "source_path", "parent_names")


@dataclass
class Chapter:
    """A single page of the book and its nested sub-chapters."""

    name: str
    content: str = ""
    number: Optional[List[int]] = None
    sub_items: List["BookItem"] = field(default_factory=list)
    path: Optional[Path] = None
    source_path: Optional[Path] = None
    parent_names: List[str] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Chapter":
        return cls(
            name=str(data.get("name", "")),
            content=str(data.get("content") or ""),
            number=data.get("number"),
            sub_items=[_item_from_json(item) for item in data.get("sub_items") or []],
            path=_as_path(data.get("path")),
            source_path=_as_path(data.get("source_path")),
            parent_names=list(data.get("parent_names") or []),
            extra={key: value for key, value in data.items() if key not in _CHAPTER_KEYS},
        )

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "name": self.name,
            "content": self.content,
            "number": self.number,
            "sub_items": [_item_to_json(item) for item in self.sub_items],
            "path": _path_to_json(self.path),
            "source_path": _path_to_json(self.source_path),
            "parent_names": list(self.parent_names),
        }
        payload.update(self.extra)
        return payload


@dataclass
class Separator:
    """Horizontal rule between groups of chapters."""


@dataclass
class PartTitle:
    """Heading that introduces a part of the book."""

    title: str


BookItem = Union[Chapter, Separator, PartTitle]


@dataclass
class Book:
    """Top-level collection of book items."""

    sections: List[BookItem] = field(default_factory=list)
    extra: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Book":
        if not isinstance(data, dict):
            raise ValueError("Book JSON must be an object")
        sections = [_item_from_json(item) for item in data.get("sections") or []]
        extra = {key: value for key, value in data.items() if key != "sections"}
        return cls(sections=sections, extra=extra)

    def to_json(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"sections": [_item_to_json(item) for item in self.sections]}
        payload.update(self.extra)
        return payload

    def iter_chapters(self) -> Iterator[Chapter]:
        """Yield every chapter depth-first in document order."""
        yield from _walk(self.sections)

    def for_each_chapter(self, visit: Callable[[Chapter], None]) -> None:
        """Call ``visit`` on every chapter; the first exception stops the walk."""
        for chapter in self.iter_chapters():
            visit(chapter)


def _walk(items: List[BookItem]) -> Iterator[Chapter]:
    for item in items:
        if isinstance(item, Chapter):
            yield item
            yield from _walk(item.sub_items)


def _item_from_json(data: Any) -> BookItem:
    if data == "Separator":
        return Separator()
    if isinstance(data, dict):
        if "Chapter" in data:
            return Chapter.from_json(data["Chapter"])
        if "PartTitle" in data:
            return PartTitle(title=str(data["PartTitle"]))
    raise ValueError(f"Unrecognised book item: {data!r}")


def _item_to_json(item: BookItem) -> Any:
    if isinstance(item, Chapter):
        return {"Chapter": item.to_json()}
    if isinstance(item, PartTitle):
        return {"PartTitle": item.title}
    return "Separator"


def _as_path(value: Any) -> Optional[Path]:
    if isinstance(value, str) and value:
        return Path(value)
    return None


def _path_to_json(path: Optional[Path]) -> Optional[str]:
    if path is None:
        return None
    return path.as_posix()


__all__ = ["Book", "BookItem", "Chapter", "PartTitle", "Separator"]

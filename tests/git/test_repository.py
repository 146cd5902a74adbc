"""Tests for git repository discovery."""

from __future__ import annotations

from pathlib import Path

from open_on_gh.git.repository import find_repository_root


def test_find_repository_root_returns_directory_with_marker(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    assert find_repository_root(repo) == repo


def test_find_repository_root_walks_up_from_nested_directory(tmp_path: Path) -> None:
    repo = tmp_path / "repo"
    (repo / ".git").mkdir(parents=True)
    nested = repo / "docs" / "book"
    nested.mkdir(parents=True)
    assert find_repository_root(nested) == repo


def test_find_repository_root_prefers_closest_marker(tmp_path: Path) -> None:
    outer = tmp_path / "outer"
    inner = outer / "vendor" / "inner"
    (outer / ".git").mkdir(parents=True)
    (inner / ".git").mkdir(parents=True)
    assert find_repository_root(inner / ".") == inner


def test_find_repository_root_accepts_git_file(tmp_path: Path) -> None:
    worktree = tmp_path / "worktree"
    worktree.mkdir()
    (worktree / ".git").write_text("gitdir: /elsewhere/.git/worktrees/wt\n", encoding="utf-8")
    assert find_repository_root(worktree) == worktree


def test_find_repository_root_returns_none_without_marker(tmp_path: Path, monkeypatch) -> None:
    book = tmp_path / "book"
    book.mkdir()
    real_exists = Path.exists

    def _exists(self: Path) -> bool:
        if self.name == ".git":
            return False
        return real_exists(self)

    monkeypatch.setattr(Path, "exists", _exists)
    assert find_repository_root(book) is None


def test_find_repository_root_never_inspects_filesystem_root(tmp_path: Path, monkeypatch) -> None:
    checked = []
    real_exists = Path.exists

    def _exists(self: Path) -> bool:
        if self.name == ".git":
            checked.append(self.parent)
            return False
        return real_exists(self)

    monkeypatch.setattr(Path, "exists", _exists)
    assert find_repository_root(tmp_path) is None
    anchor = Path(tmp_path.anchor)
    assert anchor not in checked
    assert checked[0] == tmp_path


def test_find_repository_root_collapses_parent_references(tmp_path: Path) -> None:
    outer = tmp_path / "outer"
    inner = outer / "inner"
    (outer / ".git").mkdir(parents=True)
    (inner / ".git").mkdir(parents=True)
    assert find_repository_root(Path(f"{inner}/..")) == outer

from __future__ import annotations

from pathlib import Path

import pytest

from tests._fixtures.book_builder import BookBuilder


@pytest.fixture
def book_builder(tmp_path: Path) -> BookBuilder:
    """Provide a book inside a git-marked repository rooted at the pytest tmp_path."""
    return BookBuilder(tmp_path)

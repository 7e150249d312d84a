from __future__ import annotations

from collections.abc import Iterator

import pytest

from latexprint import LatexFormatter, set_formatter


@pytest.fixture(autouse=True)
def fresh_default_formatter() -> Iterator[LatexFormatter]:
    formatter = set_formatter(LatexFormatter())
    yield formatter
    set_formatter(LatexFormatter())


@pytest.fixture
def formatter() -> LatexFormatter:
    return LatexFormatter()

"""Rules for vectors, matrices and sets."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

from latexprint.core.rules import formats
from latexprint.core.values import Matrix, RowVector, is_matrix_like


if TYPE_CHECKING:  # pragma: no cover - typing only
    from latexprint.core.formatter import LatexFormatter


@formats(list, tuple, priority=10, name="render_nested_matrix", when=is_matrix_like)
def render_nested_matrix(value: list[Any] | tuple[Any, ...], formatter: LatexFormatter) -> str:
    """Render a sequence of equal-length rows as a matrix."""
    return formatter.render(Matrix(value))


@formats(list, tuple, name="render_column_vector")
def render_column_vector(value: list[Any] | tuple[Any, ...], formatter: LatexFormatter) -> str:
    """Render a sequence as a single centred column, one element per line."""
    return formatter.render_array([[item] for item in value], columns=1)


@formats(RowVector, name="render_row_vector")
def render_row_vector(value: RowVector, formatter: LatexFormatter) -> str:
    """Render a transposed vector with one alignment column per element."""
    return formatter.render_array([list(value.items)], columns=len(value.items))


@formats(Matrix, name="render_matrix")
def render_matrix(value: Matrix, formatter: LatexFormatter) -> str:
    """Render a matrix with ``&`` between elements and ``\\\\`` after each row."""
    _, columns = value.shape
    return formatter.render_array(value.rows, columns=columns)


def sort_set_items(items: Iterable[Any], formatter: LatexFormatter) -> list[str]:
    """Return rendered items in ascending order.

    Items without a total order are ordered by their rendered LaTeX instead.
    That covers unorderable mixes, which make ``sorted`` raise, and partial
    orders such as subsets or NaN, which it silently leaves unsorted.
    """
    values = list(items)
    try:
        ordered = sorted(values)
        chained = all(left <= right for left, right in zip(ordered, ordered[1:]))
    except TypeError:
        chained = False
    if not chained:
        return sorted(formatter.render_all(values))
    return formatter.render_all(ordered)


@formats(set, frozenset, name="render_set")
def render_set(value: set[Any] | frozenset[Any], formatter: LatexFormatter) -> str:
    """Render a set as a comma separated list between braces."""
    if not value:
        return formatter.config.emptyset
    return formatter.environments.set(sort_set_items(value, formatter))


__all__ = [
    "render_column_vector",
    "render_matrix",
    "render_nested_matrix",
    "render_row_vector",
    "render_set",
    "sort_set_items",
]

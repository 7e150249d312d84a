"""Value wrappers that select a layout the builtin types cannot express."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .formatter import LatexFormatter


@runtime_checkable
class LatexRenderable(Protocol):
    """Capability implemented by objects that know their own LaTeX form."""

    def __latex__(self, formatter: LatexFormatter) -> str: ...


@dataclass(frozen=True, slots=True)
class RowVector:
    """Vector typeset as a single row instead of a column."""

    items: tuple[Any, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "items", tuple(self.items))

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)


@dataclass(frozen=True, slots=True)
class Matrix:
    """Two-dimensional table of values with rows of equal length."""

    rows: tuple[tuple[Any, ...], ...]

    def __post_init__(self) -> None:
        materialised = tuple(tuple(row) for row in self.rows)
        widths = {len(row) for row in materialised}
        if len(widths) > 1:
            msg = f"Matrix rows must have the same length, got lengths {sorted(widths)}"
            raise ValueError(msg)
        object.__setattr__(self, "rows", materialised)

    @property
    def shape(self) -> tuple[int, int]:
        """Return ``(rows, columns)``."""
        if not self.rows:
            return (0, 0)
        return (len(self.rows), len(self.rows[0]))

    def __iter__(self):
        return iter(self.rows)


def transpose(vector: Sequence[Any] | RowVector | Matrix) -> RowVector | Matrix | list[Any]:
    """Flip a column vector into a row vector and back; transpose matrices.

    Matrices, nested equal-length sequences and 2-D arrays come back as a
    :class:`Matrix` with rows and columns swapped.
    """
    if isinstance(vector, RowVector):
        return list(vector.items)
    if isinstance(vector, Matrix):
        return Matrix(zip(*vector.rows))
    ndim = getattr(vector, "ndim", None)
    if ndim is not None and callable(getattr(vector, "tolist", None)):
        if ndim == 2:
            return Matrix(zip(*vector.tolist()))
        if ndim == 1:
            return RowVector(vector.tolist())
        msg = f"Cannot transpose a {ndim}-dimensional array"
        raise TypeError(msg)
    if isinstance(vector, (list, tuple)) and is_matrix_like(vector):
        return Matrix(zip(*vector))
    return RowVector(vector)


def is_matrix_like(value: Sequence[Any]) -> bool:
    """Return True when ``value`` is a non-empty sequence of equal-length rows."""
    if not value:
        return False
    if not all(isinstance(row, (list, tuple)) for row in value):
        return False
    widths = {len(row) for row in value}
    return len(widths) == 1 and 0 not in widths


__all__ = [
    "LatexRenderable",
    "Matrix",
    "RowVector",
    "is_matrix_like",
    "transpose",
]

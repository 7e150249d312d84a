"""Rules for NumPy arrays and scalars."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import numpy as np

from latexprint.core.rules import formats
from latexprint.core.values import Matrix


if TYPE_CHECKING:  # pragma: no cover - typing only
    from latexprint.core.formatter import LatexFormatter


@formats(np.ndarray, name="render_ndarray")
def render_ndarray(value: np.ndarray, formatter: LatexFormatter) -> str:
    """Render 1-D arrays as column vectors and 2-D arrays as matrices.

    Arrays of any other rank fall back to ``str()``.
    """
    if value.ndim == 0:
        return formatter.render(value.item())
    if value.ndim == 1:
        return formatter.render_array([[item] for item in value.tolist()], columns=1)
    if value.ndim == 2:
        return formatter.render(Matrix(value.tolist()))
    return formatter.fallback(value)


@formats(np.generic, name="render_numpy_scalar")
def render_numpy_scalar(value: np.generic, formatter: LatexFormatter) -> str:
    """Render NumPy scalars through their Python equivalent."""
    native: Any = value.item()
    if isinstance(native, np.generic):
        return formatter.fallback(value)
    return formatter.render(native)


__all__ = ["render_ndarray", "render_numpy_scalar"]

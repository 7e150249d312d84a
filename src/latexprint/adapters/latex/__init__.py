"""LaTeX-specific building blocks: partial templates and escaping."""

from __future__ import annotations

from .environments import EnvironmentRenderer
from .utils import escape_latex_chars


__all__ = ["EnvironmentRenderer", "escape_latex_chars"]

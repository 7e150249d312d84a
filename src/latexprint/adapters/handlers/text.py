"""Rules for strings, self-rendering objects and the generic fallback."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from latexprint.adapters.latex.utils import escape_latex_chars
from latexprint.core.rules import formats
from latexprint.core.values import LatexRenderable


if TYPE_CHECKING:  # pragma: no cover - typing only
    from latexprint.core.formatter import LatexFormatter


@formats(str, name="render_text")
def render_text(value: str, formatter: LatexFormatter) -> str:
    """Wrap strings in ``\\text`` so they can be pasted into math mode."""
    config = formatter.config
    if config.escape_text:
        value = escape_latex_chars(value, legacy_accents=config.legacy_accents)
    return formatter.environments.text(value)


@formats(
    LatexRenderable,
    name="render_latex_capable",
    when=lambda value: not isinstance(value, type),
)
def render_latex_capable(value: LatexRenderable, formatter: LatexFormatter) -> str:
    """Delegate to objects exposing ``__latex__``."""
    return value.__latex__(formatter)


@formats(object, priority=-1000, name="render_fallback")
def render_fallback(value: Any, formatter: LatexFormatter) -> str:
    """Render unregistered types with ``str()``."""
    return formatter.fallback(value)


__all__ = ["render_fallback", "render_latex_capable", "render_text"]

"""Print Python values in LaTeX form.

Instead of seeing ``Fraction(1, 3)`` in your document, you get ``\\frac{1}{3}``.

>>> from fractions import Fraction
>>> import latexprint
>>> latexprint.lap(Fraction(2, 6))
\\frac{1}{3}

The module-level helpers share one default :class:`LatexFormatter`; settings
changed with ``set_*`` apply to every later call. Build a formatter of your own,
or use :func:`formatter_context`, to keep settings local.
"""

from __future__ import annotations

from collections.abc import Callable
import sys
from typing import Any, TextIO

from latexprint.core.config import RenderConfig
from latexprint.core.diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from latexprint.core.exceptions import (
    FormatRuleError,
    InvalidAlignmentError,
    LatexPrintError,
    RenderError,
)
from latexprint.core.formatter import LatexFormatter
from latexprint.core.rules import FormatRegistry, FormatRule, formats
from latexprint.core.session import (
    configure_formatter,
    formatter_context,
    get_formatter,
    set_formatter,
)
from latexprint.core.values import LatexRenderable, Matrix, RowVector, transpose
from latexprint.version import get_version


__version__ = get_version()


def render(value: Any) -> str:
    """Return the LaTeX form of ``value`` using the default formatter."""
    return get_formatter().render(value)


latex_form = render


def render_tabular(value: Any, alignment: str | None = None, *, hlines: bool = False) -> str:
    """Return ``value`` laid out in a text-mode ``tabular`` environment."""
    return get_formatter().render_tabular(value, alignment, hlines=hlines)


tabular = render_tabular


def laprint(value: Any, *, file: TextIO | None = None) -> None:
    """Write the LaTeX form of ``value`` without a trailing newline."""
    stream = file if file is not None else sys.stdout
    stream.write(render(value))


def laprintln(value: Any, *, file: TextIO | None = None) -> None:
    """Write the LaTeX form of ``value`` followed by a newline."""
    stream = file if file is not None else sys.stdout
    stream.write(render(value) + "\n")


lap = laprintln


def register(handler: Any) -> None:
    """Add ``@formats`` rules (a function, class or module) to the default formatter."""
    get_formatter().register(handler)


def register_type(target: type, handler: Callable[[Any, LatexFormatter], str]) -> None:
    """Render ``target`` values with ``handler`` in the default formatter."""
    get_formatter().register_type(target, handler)


def set_inf(symbol: str) -> str:
    return get_formatter().set_inf(symbol)


def set_nan(symbol: str) -> str:
    return get_formatter().set_nan(symbol)


def set_bool(true: str, false: str) -> tuple[str, str]:
    return get_formatter().set_bool(true, false)


def set_im(symbol: str) -> str:
    return get_formatter().set_im(symbol)


def set_emptyset(symbol: str) -> str:
    return get_formatter().set_emptyset(symbol)


def set_align(char: str) -> str:
    return get_formatter().set_align(char)


def set_delims(left: str, right: str) -> tuple[str, str]:
    return get_formatter().set_delims(left, right)


def set_nothing(symbol: str) -> str:
    return get_formatter().set_nothing(symbol)


def set_escape_text(enabled: bool) -> bool:
    return get_formatter().set_escape_text(enabled)


def reset_config() -> RenderConfig:
    """Restore the default formatter's settings to their defaults."""
    return get_formatter().reset_config()


__all__ = [
    "DiagnosticEmitter",
    "FormatRegistry",
    "FormatRule",
    "FormatRuleError",
    "InvalidAlignmentError",
    "LatexFormatter",
    "LatexPrintError",
    "LatexRenderable",
    "LoggingEmitter",
    "Matrix",
    "NullEmitter",
    "RenderConfig",
    "RenderError",
    "RowVector",
    "__version__",
    "configure_formatter",
    "formats",
    "formatter_context",
    "get_formatter",
    "lap",
    "laprint",
    "laprintln",
    "latex_form",
    "register",
    "register_type",
    "render",
    "render_tabular",
    "reset_config",
    "set_align",
    "set_bool",
    "set_delims",
    "set_emptyset",
    "set_escape_text",
    "set_formatter",
    "set_im",
    "set_inf",
    "set_nan",
    "set_nothing",
    "tabular",
    "transpose",
]

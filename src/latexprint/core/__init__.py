"""Core primitives: configuration, rules, formatter and diagnostics."""

from __future__ import annotations

from .config import RenderConfig
from .diagnostics import DiagnosticEmitter, LoggingEmitter, NullEmitter
from .exceptions import (
    FormatRuleError,
    InvalidAlignmentError,
    LatexPrintError,
    RenderError,
)
from .formatter import LatexFormatter
from .rules import FormatRegistry, FormatRule, formats
from .values import LatexRenderable, Matrix, RowVector, transpose


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
    "formats",
    "transpose",
]

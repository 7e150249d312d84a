"""Exception hierarchy raised while converting values to LaTeX."""

from __future__ import annotations


class LatexPrintError(RuntimeError):
    """Base exception for LaTeX formatting failures."""


class InvalidAlignmentError(LatexPrintError, ValueError):
    """Raised when an alignment character or column specification is malformed."""


class FormatRuleError(LatexPrintError, TypeError):
    """Raised when a format rule cannot be registered."""


class RenderError(LatexPrintError):
    """Raised when a registered format rule fails on a value."""


def exception_messages(exc: BaseException) -> list[str]:
    """Return the collected message chain for an exception and its causes."""
    messages: list[str] = []
    visited: set[int] = set()
    current: BaseException | None = exc
    while current is not None and id(current) not in visited:
        visited.add(id(current))
        text = str(current).strip()
        if text:
            first_line = text.splitlines()[0].strip()
            if first_line:
                messages.append(first_line)
        current = current.__cause__ or current.__context__
    return messages


__all__ = [
    "FormatRuleError",
    "InvalidAlignmentError",
    "LatexPrintError",
    "RenderError",
    "exception_messages",
]

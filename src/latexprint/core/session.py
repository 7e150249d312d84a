"""Process-wide default formatter backing the module-level helpers."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from threading import RLock
from typing import Any

from .config import RenderConfig
from .formatter import LatexFormatter


__all__ = [
    "configure_formatter",
    "formatter_context",
    "get_formatter",
    "set_formatter",
]

_FORMATTER: LatexFormatter | None = None
_LOCK: RLock = RLock()


def _resolve(
    config: RenderConfig | Mapping[str, Any] | None, overrides: Mapping[str, Any]
) -> RenderConfig:
    if config is None:
        resolved = RenderConfig()
    elif isinstance(config, RenderConfig):
        resolved = config
    else:
        resolved = RenderConfig.from_mapping(config)
    if overrides:
        resolved = resolved.replace(**overrides)
    return resolved


def configure_formatter(
    config: RenderConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> LatexFormatter:
    """Replace the default formatter with a freshly configured instance."""
    return set_formatter(LatexFormatter(_resolve(config, overrides)))


def get_formatter() -> LatexFormatter:
    """Return the lazily created default formatter."""
    global _FORMATTER
    with _LOCK:
        if _FORMATTER is None:
            _FORMATTER = LatexFormatter()
        return _FORMATTER


def set_formatter(formatter: LatexFormatter) -> LatexFormatter:
    """Install ``formatter`` as the default and return it."""
    global _FORMATTER
    with _LOCK:
        _FORMATTER = formatter
        return _FORMATTER


@contextmanager
def formatter_context(
    config: RenderConfig | Mapping[str, Any] | None = None,
    **overrides: Any,
) -> Iterator[LatexFormatter]:
    """Temporarily install a new default formatter.

    The temporary formatter starts from a copy of the current rules. The
    previous default, including any settings changed through the global
    setters, is restored on exit.
    """
    global _FORMATTER
    with _LOCK:
        previous = _FORMATTER
        registry = get_formatter().registry.copy()
    current = set_formatter(LatexFormatter(_resolve(config, overrides), registry=registry))
    try:
        yield current
    finally:
        with _LOCK:
            _FORMATTER = previous

"""Type-dispatched conversion of Python values into LaTeX markup."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping, Sequence
from importlib import metadata
import inspect
import logging
from typing import Any

from latexprint.adapters.latex import EnvironmentRenderer

from .config import RenderConfig, validate_column_spec
from .diagnostics import DiagnosticEmitter, NullEmitter
from .exceptions import LatexPrintError, RenderError
from .rules import FormatCallable, FormatRegistry, FormatRule, RuleDefinition
from .values import Matrix, RowVector, is_matrix_like


logger = logging.getLogger(__name__)


class LatexFormatter:
    """Convert values to LaTeX strings using a registry of format rules.

    Each formatter owns its :class:`RenderConfig` and its
    :class:`FormatRegistry`, so independent formatters never share state.
    """

    _ENTRY_POINT_GROUP = "latexprint.formatters"
    _ENTRY_POINT_PAYLOADS: list[tuple[str, Any]] | None = None

    def __init__(
        self,
        config: RenderConfig | Mapping[str, Any] | None = None,
        *,
        registry: FormatRegistry | None = None,
        emitter: DiagnosticEmitter | None = None,
        load_entry_points: bool = True,
    ) -> None:
        if config is None:
            config = RenderConfig()
        elif not isinstance(config, RenderConfig):
            config = RenderConfig.from_mapping(config)
        self.config: RenderConfig = config
        self.emitter: DiagnosticEmitter = emitter or NullEmitter()
        self.environments = EnvironmentRenderer()

        if registry is None:
            self.registry = FormatRegistry()
            self._register_builtin_handlers()
            if load_entry_points:
                self._register_entry_point_handlers()
        else:
            self.registry = registry

    # ------------------------------------------------------------ registration

    def _register_builtin_handlers(self) -> None:
        """Register the builtin value rules."""
        from latexprint.adapters.handlers import (
            arrays as array_handlers,
            collections as collection_handlers,
            numbers as number_handlers,
            text as text_handlers,
        )

        self.registry.collect_from(number_handlers)
        self.registry.collect_from(text_handlers)
        self.registry.collect_from(collection_handlers)
        self.registry.collect_from(array_handlers)

    def register(self, handler: Any) -> None:
        """Register additional rules on demand.

        Arguments can be callables decorated with :func:`formats` or
        modules/classes exposing decorated attributes.
        """
        definition = getattr(handler, "__format_rule__", None)
        if isinstance(definition, RuleDefinition):
            self.registry.register_handler(handler)
            return
        self.registry.collect_from(handler)

    def register_type(
        self,
        target: type,
        handler: FormatCallable,
        *,
        priority: int = 0,
        name: str | None = None,
    ) -> None:
        """Register an undecorated callable as the rule for ``target``."""
        definition = RuleDefinition(types=(target,), priority=priority, name=name)
        self.registry.register(definition.bind(handler))

    @classmethod
    def _iter_entry_point_payloads(cls) -> Iterable[tuple[str, Any]]:
        if cls._ENTRY_POINT_PAYLOADS is None:
            payloads: list[tuple[str, Any]] = []
            group = metadata.entry_points().select(group=cls._ENTRY_POINT_GROUP)
            for entry_point in sorted(group, key=lambda ep: ep.name):
                try:
                    payloads.append((entry_point.name, entry_point.load()))
                except (ImportError, AttributeError) as exc:
                    logger.warning(
                        "Could not load formatter plugin '%s'", entry_point.name, exc_info=exc
                    )
            cls._ENTRY_POINT_PAYLOADS = payloads
        return cls._ENTRY_POINT_PAYLOADS

    def _register_entry_point_handlers(self) -> None:
        for name, payload in self._iter_entry_point_payloads():
            try:
                self._apply_entry_point(payload)
            except LatexPrintError as exc:
                self.emitter.warning(f"Could not register formatter plugin '{name}'", exc)
                self.emitter.event("entry_point_failed", {"entry_point": name})

    def _apply_entry_point(self, payload: Any) -> None:
        def _accepts_formatter(target: Callable[..., Any]) -> bool:
            try:
                signature = inspect.signature(target)
            except (TypeError, ValueError):
                return False
            return len(signature.parameters) == 1

        if getattr(payload, "__format_rule__", None) is not None:
            self.register(payload)
            return

        if callable(payload) and not isinstance(payload, type) and _accepts_formatter(payload):
            payload(self)
            return

        register = getattr(payload, "register", None)
        if callable(register):
            register(self)
            return

        self.register(payload)

    # --------------------------------------------------------------- rendering

    def render(self, value: Any) -> str:
        """Return the LaTeX form of ``value``."""
        rule = self.registry.resolve(value)
        if rule is None:
            return self.fallback(value)
        return self._apply(rule, value)

    __call__ = render

    def _apply(self, rule: FormatRule, value: Any) -> str:
        try:
            return rule.handler(value, self)
        except LatexPrintError:
            raise
        except Exception as exc:
            msg = f"Format rule '{rule.name}' failed on {type(value).__name__} value"
            raise RenderError(msg) from exc

    def fallback(self, value: Any) -> str:
        """Render ``value`` with its generic string conversion."""
        self.emitter.event("fallback", {"type": type(value).__qualname__})
        return str(value)

    def render_all(self, values: Iterable[Any]) -> list[str]:
        """Render every value of an iterable."""
        return [self.render(value) for value in values]

    def render_array(self, rows: Sequence[Sequence[Any]], *, columns: int) -> str:
        """Render rows of values as a delimited math-mode ``array``."""
        config = self.config
        return self.environments.array(
            (self.render_all(row) for row in rows),
            spec=config.align * columns,
            left=config.left_delim,
            right=config.right_delim,
        )

    def render_tabular(
        self,
        value: Any,
        alignment: str | None = None,
        *,
        hlines: bool = False,
    ) -> str:
        """Render a matrix for the text-mode ``tabular`` environment.

        ``alignment`` holds one ``l``/``r``/``c`` per column and may include
        ``|`` rules; it defaults to the configured alignment repeated per
        column. With ``hlines`` every row but the last ends with ``\\\\ \\hline``.
        """
        rows = _as_rows(value)
        columns = len(rows[0]) if rows else 0
        if alignment is None:
            alignment = self.config.align * columns
        else:
            validate_column_spec(alignment, columns)
        cells = [self.render_all(row) for row in rows]
        return self.environments.tabular(cells, spec=alignment, hlines=hlines)

    # ----------------------------------------------------------------- setters

    def _update(self, **changes: Any) -> None:
        self.config = self.config.replace(**changes)
        for field_name, value in changes.items():
            logger.debug("render setting %s -> %r", field_name, value)
            self.emitter.event("config_changed", {"field": field_name, "value": value})

    def set_inf(self, symbol: str) -> str:
        """Set the LaTeX used for infinity."""
        self._update(inf=symbol)
        return self.config.inf

    def set_nan(self, symbol: str) -> str:
        """Set the LaTeX used for not-a-number."""
        self._update(nan=symbol)
        return self.config.nan

    def set_bool(self, true: str, false: str) -> tuple[str, str]:
        """Set the LaTeX used for ``True`` and ``False``."""
        self._update(true=true, false=false)
        return self.config.true, self.config.false

    def set_im(self, symbol: str) -> str:
        """Set the imaginary unit symbol."""
        self._update(im=symbol)
        return self.config.im

    def set_emptyset(self, symbol: str) -> str:
        """Set the LaTeX used for an empty set."""
        self._update(emptyset=symbol)
        return self.config.emptyset

    def set_align(self, char: str) -> str:
        """Set the array alignment character (``l``, ``r`` or ``c``)."""
        self._update(align=char)
        return self.config.align

    def set_delims(self, left: str, right: str) -> tuple[str, str]:
        """Set the delimiters placed around vectors and matrices."""
        self._update(left_delim=left, right_delim=right)
        return self.config.left_delim, self.config.right_delim

    def set_nothing(self, symbol: str) -> str:
        """Set the LaTeX used for ``None``."""
        self._update(nothing=symbol)
        return self.config.nothing

    def set_escape_text(self, enabled: bool) -> bool:
        """Toggle escaping of LaTeX special characters inside strings."""
        self._update(escape_text=enabled)
        return self.config.escape_text

    def reset_config(self) -> RenderConfig:
        """Restore every setting to its default."""
        self.config = RenderConfig()
        self.emitter.event("config_changed", {"field": "*", "value": None})
        return self.config


def _as_rows(value: Any) -> list[list[Any]]:
    """Return the rows of a matrix-like value; vectors become one column."""
    if isinstance(value, Matrix):
        return [list(row) for row in value.rows]
    if isinstance(value, RowVector):
        return [list(value.items)]
    tolist = getattr(value, "tolist", None)
    if callable(tolist) and getattr(value, "ndim", None) in (1, 2):
        value = tolist()
    if isinstance(value, (list, tuple)):
        if is_matrix_like(value):
            return [list(row) for row in value]
        return [[item] for item in value]
    msg = f"Cannot lay out {type(value).__name__} value as a table"
    raise TypeError(msg)


__all__ = ["LatexFormatter"]

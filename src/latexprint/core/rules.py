"""Rule declaration and lookup for the LaTeX formatter.

Formatting is an open dispatch over value types. Handlers declare the types
they render with the ``@formats`` decorator, which records a lightweight
:class:`RuleDefinition` on the callable. A :class:`FormatRegistry` collects
those declarations into :class:`FormatRule` instances and resolves the rule for
a value at render time.

Architecture

`Declaration layer`
: ``@formats`` stores a :class:`RuleDefinition` on every handler.

`Registry layer`
: :class:`FormatRegistry` buckets rules per target type, ordered by priority
  then name.

`Resolution`
: capability rules (targets that are runtime-checkable protocols) are tried
  first, then the value's MRO is walked from the most specific class.
  Abstract base classes the value only registers with (such as
  ``numbers.Integral``) are tried next, most derived first, and ``object``
  comes last. Within a bucket the first rule whose ``when`` predicate accepts
  the value wins. The ``str()`` fallback is an ordinary rule registered for
  ``object``.
"""

from __future__ import annotations

from abc import ABCMeta
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, cast

from .exceptions import FormatRuleError


if TYPE_CHECKING:  # pragma: no cover - typing only
    from .formatter import LatexFormatter


FormatCallable = Callable[[Any, "LatexFormatter"], str]
Predicate = Callable[[Any], bool]


@dataclass
class FormatRule:
    """Concrete formatting rule registered in a registry."""

    types: tuple[type, ...]
    name: str
    handler: FormatCallable
    priority: int = 0
    when: Predicate | None = None

    def accepts(self, value: Any) -> bool:
        """Return True when the rule's predicate (if any) admits ``value``."""
        return self.when is None or bool(self.when(value))


@dataclass(frozen=True)
class RuleDefinition:
    """Descriptor installed on handler callables by the decorator."""

    types: tuple[type, ...]
    priority: int = 0
    name: str | None = None
    when: Predicate | None = None

    def bind(self, handler: FormatCallable) -> FormatRule:
        """Create a concrete rule instance bound to the callable."""
        name = self.name or getattr(handler, "__name__", handler.__class__.__name__)
        return FormatRule(
            types=self.types,
            name=name,
            handler=handler,
            priority=self.priority,
            when=self.when,
        )


def _is_capability(target: type) -> bool:
    return bool(getattr(target, "_is_protocol", False))


def _type_label(target: type) -> str:
    module = getattr(target, "__module__", "")
    if module == "builtins":
        return target.__qualname__
    return f"{module}.{target.__qualname__}"


class FormatRegistry:
    """Container mapping value types to their formatting rules."""

    def __init__(self) -> None:
        self._rules: dict[type, list[FormatRule]] = {}
        self._capabilities: list[FormatRule] = []

    def register(self, rule: FormatRule) -> None:
        """Register a rule under each of its target types."""
        if not rule.types:
            msg = f"Format rule '{rule.name}' does not declare any target type"
            raise FormatRuleError(msg)
        for target in rule.types:
            if _is_capability(target):
                bucket = self._capabilities
            else:
                bucket = self._rules.setdefault(target, [])
            if rule not in bucket:
                bucket.append(rule)
            bucket.sort(key=lambda item: (-item.priority, item.name))

    def register_handler(self, handler: FormatCallable) -> None:
        """Register a standalone callable decorated with ``@formats``."""
        definition = getattr(handler, "__format_rule__", None)
        if definition is None and hasattr(handler, "__func__"):
            definition = getattr(handler.__func__, "__format_rule__", None)
        if not isinstance(definition, RuleDefinition):
            msg = "Handler must be decorated with @formats"
            raise FormatRuleError(msg)
        self.register(definition.bind(handler))

    def collect_from(self, owner: Any) -> int:
        """Collect decorated callables from an object or module.

        Returns the number of rules registered.
        """
        count = 0
        for attribute in dir(owner):
            handler = getattr(owner, attribute)
            definition = getattr(handler, "__format_rule__", None)
            if definition is None and hasattr(handler, "__func__"):
                definition = getattr(handler.__func__, "__format_rule__", None)
            if isinstance(definition, RuleDefinition):
                self.register(definition.bind(handler))
                count += 1
        return count

    def resolve(self, value: Any) -> FormatRule | None:
        """Return the rule that should render ``value``."""
        for rule in self._capabilities:
            if any(isinstance(value, target) for target in rule.types if _is_capability(target)):
                if rule.accepts(value):
                    return rule

        mro = type(value).__mro__
        for klass in mro[:-1]:
            for rule in self._rules.get(klass, ()):
                if rule.accepts(value):
                    return rule

        virtual = [
            target
            for target in self._rules
            if isinstance(target, ABCMeta) and target not in mro and isinstance(value, target)
        ]
        for target in sorted(virtual, key=lambda item: -len(item.__mro__)):
            for rule in self._rules[target]:
                if rule.accepts(value):
                    return rule

        for rule in self._rules.get(object, ()):
            if rule.accepts(value):
                return rule
        return None

    def rules_for(self, target: type) -> tuple[FormatRule, ...]:
        """Return the rules registered directly for ``target``."""
        if _is_capability(target):
            return tuple(rule for rule in self._capabilities if target in rule.types)
        return tuple(self._rules.get(target, ()))

    def copy(self) -> FormatRegistry:
        """Return an independent registry holding the same rules."""
        clone = FormatRegistry()
        clone._rules = {target: list(rules) for target, rules in self._rules.items()}
        clone._capabilities = list(self._capabilities)
        return clone

    def describe(self) -> list[dict[str, object]]:
        """Return a serialisable snapshot of the registered rules."""
        entries: list[dict[str, object]] = []
        buckets: list[tuple[str, list[FormatRule]]] = [
            (_type_label(target), rules) for target, rules in self._rules.items()
        ]
        if self._capabilities:
            buckets.append(("<capability>", self._capabilities))
        for label, rules in sorted(buckets, key=lambda item: item[0]):
            for order, rule in enumerate(rules):
                entries.append(
                    {
                        "type": label,
                        "name": rule.name,
                        "priority": rule.priority,
                        "conditional": rule.when is not None,
                        "order": order,
                    }
                )
        return entries


def formats(
    *types: type,
    priority: int = 0,
    name: str | None = None,
    when: Predicate | None = None,
) -> Callable[[FormatCallable], FormatCallable]:
    """Decorator used to declare the value types a handler renders."""
    if not types:
        msg = "@formats requires at least one target type"
        raise FormatRuleError(msg)
    definition = RuleDefinition(types=tuple(types), priority=priority, name=name, when=when)

    def decorator(handler: FormatCallable) -> FormatCallable:
        cast(Any, handler).__format_rule__ = definition
        return handler

    return decorator


__all__ = [
    "FormatCallable",
    "FormatRegistry",
    "FormatRule",
    "RuleDefinition",
    "formats",
]

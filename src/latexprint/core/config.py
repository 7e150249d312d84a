"""Rendering settings consumed by :class:`~latexprint.core.formatter.LatexFormatter`.

RenderConfig

`inf` (`str`)
: LaTeX emitted for positive infinity. Negative infinity is rendered as this
  symbol prefixed with a minus sign.

`nan` (`str`)
: LaTeX emitted for not-a-number values.

`true` / `false` (`str`)
: LaTeX emitted for the boolean values.

`im` (`str`)
: Symbol appended to the imaginary part of complex numbers. Some folks prefer
  `j`.

`emptyset` (`str`)
: LaTeX emitted for an empty set. `\\varnothing` is a popular alternative.

`align` (`str`)
: Column alignment character used by arrays and by default tabular columns.
  Must be one of `l`, `r` or `c`.

`left_delim` / `right_delim` (`str`)
: Delimiters placed after `\\left` and `\\right` around vectors and matrices.

`nothing` (`str`)
: LaTeX emitted for `None`.

`escape_text` (`bool`)
: Escape LaTeX special characters in strings before wrapping them in `\\text`.
  Disabled by default so that strings holding LaTeX pass through untouched.

`legacy_accents` (`bool`)
: When escaping text, also encode accented characters and typographic
  punctuation as legacy LaTeX macros (`\\'{e}`) instead of keeping Unicode.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from .exceptions import InvalidAlignmentError


ALIGNMENT_CHARACTERS = frozenset("lrc")
COLUMN_RULE = "|"


def validate_align(value: str) -> str:
    """Return ``value`` when it is a single supported alignment character."""
    if value not in ALIGNMENT_CHARACTERS:
        msg = f"Alignment must be one of 'l', 'r' or 'c', got {value!r}"
        raise InvalidAlignmentError(msg)
    return value


def validate_column_spec(spec: str, columns: int) -> str:
    """Validate a tabular column specification against a column count.

    Vertical rules (``|``) are allowed anywhere and do not count as columns.
    """
    invalid = sorted({char for char in spec if char not in ALIGNMENT_CHARACTERS | {COLUMN_RULE}})
    if invalid:
        msg = f"Invalid alignment characters {''.join(invalid)!r} in {spec!r}"
        raise InvalidAlignmentError(msg)
    declared = sum(1 for char in spec if char in ALIGNMENT_CHARACTERS)
    if declared != columns:
        msg = f"Alignment {spec!r} declares {declared} column(s) but the matrix has {columns}"
        raise InvalidAlignmentError(msg)
    return spec


class RenderConfig(BaseModel):
    """Immutable set of symbols and layout options used while rendering."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    inf: str = r"\infty"
    nan: str = r"\text{NaN}"
    true: str = r"\mathrm{T}"
    false: str = r"\mathrm{F}"
    im: str = "i"
    emptyset: str = r"\emptyset"
    align: str = "c"
    left_delim: str = "["
    right_delim: str = "]"
    nothing: str = r"\mathrm{nothing}"
    escape_text: bool = False
    legacy_accents: bool = False

    @field_validator("align")
    @classmethod
    def _check_align(cls, value: str) -> str:
        return validate_align(value)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> RenderConfig:
        """Build a config from plain settings.

        A bad ``align`` raises :class:`InvalidAlignmentError` here, whereas
        calling the model directly wraps it in a pydantic ``ValidationError``.
        """
        if "align" in data:
            validate_align(str(data["align"]))
        return cls.model_validate(dict(data))

    def replace(self, **changes: object) -> RenderConfig:
        """Return a validated copy with ``changes`` applied."""
        if "align" in changes:
            validate_align(str(changes["align"]))
        return type(self).model_validate({**self.model_dump(), **changes})


__all__ = [
    "ALIGNMENT_CHARACTERS",
    "RenderConfig",
    "validate_align",
    "validate_column_spec",
]

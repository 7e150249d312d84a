"""Rules for scalar values: numbers, booleans and ``None``."""

from __future__ import annotations

from decimal import Decimal
from fractions import Fraction
import math
import numbers
import re
from typing import TYPE_CHECKING

from latexprint.core.rules import formats


if TYPE_CHECKING:  # pragma: no cover - typing only
    from latexprint.core.formatter import LatexFormatter


_CONTROL_WORD_END = re.compile(r"\\[A-Za-z]+$")


def _special_float(value: float | Decimal, formatter: LatexFormatter) -> str | None:
    """Return the configured symbol for infinities and NaN, else ``None``."""
    config = formatter.config
    if isinstance(value, Decimal):
        if value.is_nan():
            return config.nan
        if value.is_infinite():
            return f"-{config.inf}" if value.is_signed() else config.inf
        return None
    if math.isnan(value):
        return config.nan
    if math.isinf(value):
        return f"-{config.inf}" if value < 0 else config.inf
    return None


@formats(bool, name="render_bool")
def render_bool(value: bool, formatter: LatexFormatter) -> str:
    """Render booleans with the configured symbols."""
    return formatter.config.true if value else formatter.config.false


@formats(type(None), name="render_none")
def render_none(_value: None, formatter: LatexFormatter) -> str:
    return formatter.config.nothing


@formats(int, numbers.Integral, name="render_integer")
def render_integer(value: int, _formatter: LatexFormatter) -> str:
    return str(int(value))


@formats(float, name="render_float")
def render_float(value: float, formatter: LatexFormatter) -> str:
    """Render floats unchanged apart from infinities and NaN."""
    special = _special_float(value, formatter)
    if special is not None:
        return special
    return repr(float(value))


@formats(Decimal, name="render_decimal")
def render_decimal(value: Decimal, formatter: LatexFormatter) -> str:
    special = _special_float(value, formatter)
    if special is not None:
        return special
    return str(value)


@formats(Fraction, numbers.Rational, name="render_rational")
def render_rational(value: numbers.Rational, formatter: LatexFormatter) -> str:
    """Render rationals as ``\\frac`` unless the denominator is one.

    ``Fraction`` keeps the sign on the numerator, so a negative value renders
    as ``\\frac{-5}{2}``.
    """
    fraction = Fraction(value.numerator, value.denominator)
    if fraction.denominator == 1:
        return formatter.render(fraction.numerator)
    return formatter.environments.frac(str(fraction.numerator), str(fraction.denominator))


def _complex_part(part: float, formatter: LatexFormatter) -> str:
    # complex() stores float parts; integral ones read better as integers
    if math.isfinite(part) and float(part).is_integer():
        return formatter.render(int(part))
    return formatter.render(part)


@formats(complex, numbers.Complex, name="render_complex")
def render_complex(value: complex, formatter: LatexFormatter) -> str:
    """Render ``a+bi``, keeping both parts even when one of them is zero."""
    real = _complex_part(value.real, formatter)
    imag_value = value.imag
    sign = "+"
    if imag_value < 0:
        sign = "-"
        imag_value = -imag_value
    imag = _complex_part(imag_value, formatter)
    if _CONTROL_WORD_END.search(imag):
        imag += " "
    return f"{real}{sign}{imag}{formatter.config.im}"


__all__ = [
    "render_bool",
    "render_complex",
    "render_decimal",
    "render_float",
    "render_integer",
    "render_none",
    "render_rational",
]

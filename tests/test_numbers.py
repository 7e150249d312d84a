from decimal import Decimal
from fractions import Fraction
import math

import pytest

from latexprint import LatexFormatter, RenderConfig


def test_integers_printed_unchanged(formatter: LatexFormatter) -> None:
    assert formatter.render(23) == "23"
    assert formatter.render(-544) == "-544"


def test_floats_printed_unchanged(formatter: LatexFormatter) -> None:
    assert formatter.render(math.sqrt(2)) == "1.4142135623730951"
    assert formatter.render(1.0) == "1.0"


def test_infinite_and_invalid_floats(formatter: LatexFormatter) -> None:
    assert formatter.render(math.inf) == r"\infty"
    assert formatter.render(-math.inf) == r"-\infty"
    assert formatter.render(math.nan) == r"\text{NaN}"


def test_configured_infinity_symbol_is_negated() -> None:
    formatter = LatexFormatter(RenderConfig(inf=r"\text{inf}"))
    assert formatter.render(-math.inf) == r"-\text{inf}"


def test_decimal_follows_float_rules(formatter: LatexFormatter) -> None:
    assert formatter.render(Decimal("1.50")) == "1.50"
    assert formatter.render(Decimal("Infinity")) == r"\infty"
    assert formatter.render(Decimal("-Infinity")) == r"-\infty"
    assert formatter.render(Decimal("NaN")) == r"\text{NaN}"


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (Fraction(10, 4), r"\frac{5}{2}"),
        (Fraction(2, 6), r"\frac{1}{3}"),
        (Fraction(-10, 4), r"\frac{-5}{2}"),
        (Fraction(5, -3), r"\frac{-5}{3}"),
    ],
)
def test_rationals_render_as_reduced_fractions(
    formatter: LatexFormatter, value: Fraction, expected: str
) -> None:
    assert formatter.render(value) == expected


@pytest.mark.parametrize("value", [Fraction(10, 2), Fraction(-6, 3), Fraction(0, 7)])
def test_rationals_with_unit_denominator_render_as_integers(
    formatter: LatexFormatter, value: Fraction
) -> None:
    assert formatter.render(value) == formatter.render(int(value))


def test_complex_always_has_both_parts(formatter: LatexFormatter) -> None:
    assert formatter.render(1 + 1j) == "1+1i"
    assert formatter.render((1 + 1j) * (1 + 1j)) == "0+2i"
    assert formatter.render(2 + 0j) == "2+0i"


def test_complex_with_fractional_parts(formatter: LatexFormatter) -> None:
    latex = formatter.render(1j**1j)
    assert latex.startswith("0.207879576350")
    assert latex.endswith("+0i")
    assert latex.count("i") == 1


def test_complex_negative_imaginary_part(formatter: LatexFormatter) -> None:
    assert formatter.render(complex(1, -2)) == "1-2i"
    assert formatter.render(complex(-0.5, -1.25)) == "-0.5-1.25i"


def test_complex_infinite_part(formatter: LatexFormatter) -> None:
    assert formatter.render(complex(1, math.inf)) == r"1+\infty i"


def test_imaginary_unit_is_configurable() -> None:
    formatter = LatexFormatter(RenderConfig(im="j"))
    assert formatter.render(3 + 2j) == "3+2j"


def test_booleans(formatter: LatexFormatter) -> None:
    assert formatter.render(True) == r"\mathrm{T}"
    assert formatter.render(False) == r"\mathrm{F}"


def test_none_renders_nothing_symbol(formatter: LatexFormatter) -> None:
    assert formatter.render(None) == r"\mathrm{nothing}"

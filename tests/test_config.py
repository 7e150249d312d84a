import math

from pydantic import ValidationError
import pytest

from latexprint import InvalidAlignmentError, LatexFormatter, RenderConfig, configure_formatter


def test_defaults() -> None:
    config = RenderConfig()
    assert config.inf == r"\infty"
    assert config.nan == r"\text{NaN}"
    assert (config.true, config.false) == (r"\mathrm{T}", r"\mathrm{F}")
    assert config.im == "i"
    assert config.emptyset == r"\emptyset"
    assert config.align == "c"
    assert (config.left_delim, config.right_delim) == ("[", "]")
    assert config.nothing == r"\mathrm{nothing}"
    assert config.escape_text is False


def test_config_is_immutable() -> None:
    config = RenderConfig()
    with pytest.raises(ValidationError):
        config.inf = "oo"  # type: ignore[misc]


def test_config_rejects_unknown_fields() -> None:
    with pytest.raises(ValidationError):
        RenderConfig.model_validate({"infinity": "oo"})


def test_config_rejects_bad_alignment() -> None:
    with pytest.raises(ValidationError):
        RenderConfig(align="x")


def test_mapping_configs_raise_alignment_error() -> None:
    with pytest.raises(InvalidAlignmentError):
        LatexFormatter({"align": "x"})
    with pytest.raises(InvalidAlignmentError):
        RenderConfig.from_mapping({"align": "lr"})
    with pytest.raises(InvalidAlignmentError):
        configure_formatter({"align": "x"})
    assert RenderConfig.from_mapping({"align": "r"}).align == "r"


def test_formatter_accepts_mapping_config() -> None:
    formatter = LatexFormatter({"im": "j", "align": "l"})
    assert formatter.config.im == "j"
    assert formatter.render([1]).splitlines()[1] == r"\begin{array}{l}"


def test_setters_return_new_value(formatter: LatexFormatter) -> None:
    assert formatter.set_inf(r"\text{inf}") == r"\text{inf}"
    assert formatter.set_nan(r"\text{nan}") == r"\text{nan}"
    assert formatter.set_bool(r"\textsf{true}", r"\textsf{false}") == (
        r"\textsf{true}",
        r"\textsf{false}",
    )
    assert formatter.set_im("j") == "j"
    assert formatter.set_emptyset(r"\{ \}") == r"\{ \}"
    assert formatter.set_align("r") == "r"
    assert formatter.set_delims("(", ")") == ("(", ")")
    assert formatter.set_nothing(r"\mathrm{---}") == r"\mathrm{---}"
    assert formatter.set_escape_text(True) is True


def test_setters_change_later_renders(formatter: LatexFormatter) -> None:
    formatter.set_inf(r"\text{inf}")
    formatter.set_bool(r"\textsf{true}", r"\textsf{false}")
    formatter.set_im("j")
    formatter.set_emptyset(r"\varnothing")
    formatter.set_nothing(r"\mathrm{---}")
    formatter.set_delims("(", ")")
    formatter.set_align("r")

    assert formatter.render(math.inf) == r"\text{inf}"
    assert formatter.render(True) == r"\textsf{true}"
    assert formatter.render(3 + 2j) == "3+2j"
    assert formatter.render(set()) == r"\varnothing"
    assert formatter.render(None) == r"\mathrm{---}"
    assert formatter.render([2, 10, -544]) == (
        "\\left(\n\\begin{array}{r}\n2 \\\\\n10 \\\\\n-544 \\\\\n\\end{array}\n\\right)"
    )


def test_setters_replace_config_object(formatter: LatexFormatter) -> None:
    before = formatter.config
    formatter.set_nan("?")
    assert formatter.config is not before
    assert before.nan == r"\text{NaN}"


@pytest.mark.parametrize("char", ["x", "", "lc", "L"])
def test_set_align_validates(formatter: LatexFormatter, char: str) -> None:
    with pytest.raises(InvalidAlignmentError):
        formatter.set_align(char)
    assert formatter.config.align == "c"


def test_invalid_alignment_is_value_error() -> None:
    assert issubclass(InvalidAlignmentError, ValueError)


def test_reset_config(formatter: LatexFormatter) -> None:
    formatter.set_im("j")
    assert formatter.reset_config() == RenderConfig()
    assert formatter.render(1j) == "0+1i"


def test_escape_text(formatter: LatexFormatter) -> None:
    assert formatter.render("50% & more") == r"\text{50% & more}"
    formatter.set_escape_text(True)
    assert formatter.render("50% & more") == r"\text{50\% \& more}"


def test_escape_text_with_legacy_accents() -> None:
    formatter = LatexFormatter(RenderConfig(escape_text=True, legacy_accents=True))
    assert "\\'{e}" in formatter.render("café")

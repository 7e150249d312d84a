import numpy as np

from latexprint import LatexFormatter


def test_one_dimensional_array_is_column(formatter: LatexFormatter) -> None:
    assert formatter.render(np.array([1, 2, 3])) == formatter.render([1, 2, 3])


def test_two_dimensional_array_is_matrix(formatter: LatexFormatter) -> None:
    assert formatter.render(np.eye(2)) == (
        "\\left[\n\\begin{array}{cc}\n1.0 & 0.0 \\\\\n0.0 & 1.0 \\\\\n\\end{array}\n\\right]"
    )


def test_higher_rank_arrays_fall_back(formatter: LatexFormatter) -> None:
    cube = np.zeros((2, 2, 2))
    assert formatter.render(cube) == str(cube)


def test_zero_dimensional_array(formatter: LatexFormatter) -> None:
    assert formatter.render(np.array(7)) == "7"


def test_numpy_scalars(formatter: LatexFormatter) -> None:
    assert formatter.render(np.int64(5)) == "5"
    assert formatter.render(np.float64(np.inf)) == r"\infty"
    assert formatter.render(np.float32(np.nan)) == r"\text{NaN}"
    assert formatter.render(np.bool_(True)) == r"\mathrm{T}"
    assert formatter.render(np.complex128(1 + 2j)) == "1+2i"


def test_tabular_from_array(formatter: LatexFormatter) -> None:
    assert formatter.render_tabular(np.array([[1, 2], [3, 4]]), alignment="rr") == (
        "\\begin{tabular}{rr}\n$1$ & $2$\\\\\n$3$ & $4$\n\\end{tabular}"
    )

"""Jinja2 partials used to assemble LaTeX fragments."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, Template


TEMPLATE_DIR = Path(__file__).resolve().parent / "partials"

ROW_END = r"\\"
HLINE_ROW_END = r"\\ \hline"


class EnvironmentRenderer:
    """Render LaTeX partials using Jinja2 with LaTeX-friendly delimiters."""

    def __init__(self, template_dir: Path = TEMPLATE_DIR) -> None:
        self.env = Environment(
            block_start_string=r"\BLOCK{",
            block_end_string=r"}",
            variable_start_string=r"\VAR{",
            variable_end_string=r"}",
            comment_start_string=r"\COMMENT{",
            comment_end_string=r"}",
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
            loader=FileSystemLoader(template_dir),
        )
        self._template_names = {
            path.stem: path.name for path in sorted(template_dir.glob("*.tex"))
        }
        self.templates: dict[str, Template] = {}

    @property
    def template_names(self) -> set[str]:
        """Return the set of available partial identifiers."""
        return set(self._template_names)

    def _get_template(self, key: str) -> Template:
        template = self.templates.get(key)
        if template is not None:
            return template
        template_name = self._template_names.get(key)
        if template_name is None:
            raise KeyError(key)
        template = self.env.get_template(template_name)
        self.templates[key] = template
        return template

    def __getitem__(self, key: str) -> Callable[..., str]:
        return self._get_template(key).render

    def override_template(self, name: str, source: str) -> None:
        """Replace a partial with an inline template payload."""
        template = self.env.from_string(source)
        template.name = name
        self.templates[name] = template
        self._template_names[name] = name

    def array(
        self,
        rows: Iterable[Sequence[str]],
        *,
        spec: str,
        left: str,
        right: str,
    ) -> str:
        """Render an ``array`` environment wrapped in sized delimiters."""
        return self["array"](rows=[list(row) for row in rows], spec=spec, left=left, right=right)

    def tabular(self, rows: Sequence[Sequence[str]], *, spec: str, hlines: bool = False) -> str:
        """Render a text-mode ``tabular`` with every cell in inline math."""
        row_end = HLINE_ROW_END if hlines else ROW_END
        lines: list[str] = []
        for index, row in enumerate(rows):
            line = " & ".join(f"${cell}$" for cell in row)
            if index < len(rows) - 1:
                line += row_end
            lines.append(line)
        return self["tabular"](lines=lines, spec=spec)

    def set(self, items: Sequence[str]) -> str:
        """Render a brace-delimited, comma separated list."""
        return self["set"](items=list(items))

    def frac(self, numerator: str, denominator: str) -> str:
        """Render a ``\\frac`` command."""
        return self["frac"](numerator=numerator, denominator=denominator)

    def text(self, text: str) -> str:
        """Render a ``\\text`` command."""
        return self["text"](text=text)


__all__ = ["EnvironmentRenderer", "TEMPLATE_DIR"]

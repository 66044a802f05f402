"""LaTeX rendering of tables, as a ``tabular`` environment."""

import functools

from ._config import ColSpec, check_colspec, get_config
from ._logging import get_logger
from ._render import TemplateBundle, make_environment, make_grid, render_grid

__all__ = [
    "ColSpec",
    "escape_latex",
    "has_latex_specials",
    "any_latex_specials",
    "repr_latex",
]

logger = get_logger(__name__)

_LATEX_SPECIALS = {
    "\\": r"\textbackslash{}",
    "&": r"\&",
    "%": r"\%",
    "$": r"\$",
    "#": r"\#",
    "_": r"\_",
    "{": r"\{",
    "}": r"\}",
    "~": r"\textasciitilde{}",
    "^": r"\textasciicircum{}",
}

_LATEX_TRANSLATION = str.maketrans(_LATEX_SPECIALS)


def escape_latex(text):
    r"""Escape the characters that have a special meaning in LaTeX.

    The replacements are made in a single pass, so the backslashes inserted
    for one character are never escaped again.

    >>> from tablerepr import escape_latex
    >>> print(escape_latex(r"50% of a_b \ {c}"))
    50\% of a\_b \textbackslash{} \{c\}
    """
    return text.translate(_LATEX_TRANSLATION)


def has_latex_specials(values):
    """Whether any of the strings in ``values`` needs escaping."""
    return any(ch in _LATEX_SPECIALS for v in values for ch in v)


def any_latex_specials(grid):
    """Whether any column of a ``CellGrid`` holds a LaTeX special character."""
    return any(has_latex_specials(column) for column in grid.columns())


def _get_jinja_env():
    # The templates are full of braces: jinja2 delimiters that read like
    # LaTeX macros avoid clashes.
    return make_environment(
        block_start_string=r"\BLOCK{",
        block_end_string="}",
        variable_start_string=r"\VAR{",
        variable_end_string="}",
        comment_start_string=r"\#{",
        comment_end_string="}",
        autoescape=False,
    )


_LATEX_ENV = _get_jinja_env()


@functools.lru_cache(maxsize=64)
def _latex_bundle(preamble):
    return TemplateBundle(
        wrap=(
            r"\begin{tabular}{" + preamble + "}\n"
            r"\VAR{header}\VAR{body}\end{tabular}" + "\n"
        ),
        header_wrap=r"\VAR{content}\\" + "\n" + r"\hline" + "\n",
        corner="  &",
        last_corner=" ",
        head=r" \VAR{value} &",
        last_head=r" \VAR{value}",
        body_wrap=r"\VAR{content}",
        row_wrap="\t" + r"\VAR{content}\\" + "\n",
        row_head=r"\VAR{value} &",
        last_row_head=r"\VAR{value}",
        cell=r" \VAR{value} &",
        last_cell=r" \VAR{value}",
        environment=_LATEX_ENV,
    )


def _escape_grid(grid):
    grid = grid.map_names(escape_latex)
    if any_latex_specials(grid):
        logger.debug("escaping LaTeX special characters in the cells")
        grid = grid.map_cells(escape_latex)
    return grid


def repr_latex(obj, colspec=None, *, max_rows=None, max_cols=None):
    r"""LaTeX ``tabular`` for a pandas or polars DataFrame or a 2D numpy array.

    Large tables are truncated (see :func:`truncate`). Row and column names
    are always escaped; the cells are escaped when any of them contains a
    character with a special meaning in LaTeX.

    Parameters
    ----------
    obj : pandas DataFrame, polars DataFrame or 2D numpy array
        The table to display.
    colspec : ColSpec or dict, default=None
        Column alignment of the ``tabular`` environment. If ``None``, the
        ``latex_colspec`` configuration is used. The preamble has one ``col``
        token per displayed column: after truncation, that is the kept columns
        plus the column of ellipses, not the columns of ``obj``.
    max_rows, max_cols : int, default=None
        Display limits; the configured values are used when ``None``.

    Returns
    -------
    str
        The ``tabular`` environment.

    Examples
    --------
    >>> import pandas as pd
    >>> from tablerepr import repr_latex
    >>> df = pd.DataFrame({"a_b": [1, 2], "c": ["x", "y"]})
    >>> print(repr_latex(df), end="")
    \begin{tabular}{r|ll}
      & a\_b & c\\
    \hline
    	0 & 1 & x\\
    	1 & 2 & y\\
    \end{tabular}
    """
    config = get_config()
    colspec = check_colspec(config["latex_colspec"] if colspec is None else colspec)
    grid = make_grid(obj, max_rows=max_rows, max_cols=max_cols, config=config)
    n_columns = grid.shape[1]
    preamble = colspec.preamble(n_columns, has_row_names=grid.row_names is not None)
    return render_grid(_escape_grid(grid), _latex_bundle(preamble))

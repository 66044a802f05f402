"""Markdown rendering of tables, as a pipe table."""

import functools
from dataclasses import replace

from ._render import TemplateBundle, make_grid, render_grid

__all__ = ["repr_markdown"]


def _escape_markdown(text):
    return text.replace("|", r"\|").replace("\n", " ")


@functools.lru_cache(maxsize=64)
def _markdown_bundle(n_separators):
    return TemplateBundle(
        wrap="{{ header }}{{ body }}",
        header_wrap="|{{ content }}\n|" + "---|" * n_separators + "\n",
        corner="   |",
        head=" {{ value }} |",
        body_wrap="{{ content }}",
        row_wrap="|{{ content }}\n",
        row_head=" {{ value }} |",
        cell=" {{ value }} |",
    )


def repr_markdown(obj, *, max_rows=None, max_cols=None):
    """Markdown pipe table for a pandas or polars DataFrame or a 2D numpy array.

    Large tables are truncated (see :func:`truncate`). Markdown tables need a
    header row: it is left empty when the table has no column names.

    Parameters
    ----------
    obj : pandas DataFrame, polars DataFrame or 2D numpy array
        The table to display.
    max_rows, max_cols : int, default=None
        Display limits; the configured values are used when ``None``.

    Returns
    -------
    str
        The pipe table.

    Examples
    --------
    >>> import pandas as pd
    >>> from tablerepr import repr_markdown
    >>> print(repr_markdown(pd.DataFrame({"a": [1, 2], "b": ["x|y", "z"]})), end="")
    |   | a | b |
    |---|---|---|
    | 0 | 1 | x\\|y |
    | 1 | 2 | z |
    """
    grid = make_grid(obj, max_rows=max_rows, max_cols=max_cols)
    grid = grid.map_names(_escape_markdown).map_cells(_escape_markdown)
    n_columns = grid.shape[1]
    if grid.column_names is None:
        grid = replace(grid, column_names=[""] * n_columns)
    n_separators = n_columns + (grid.row_names is not None)
    return render_grid(grid, _markdown_bundle(n_separators))

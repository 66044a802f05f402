"""
Generic rendering of a table with one template per structural slot.

A ``TemplateBundle`` describes an output format (HTML, LaTeX, Markdown) as a
set of jinja2 templates:

- ``wrap``: the whole table; receives the rendered ``header`` and ``body``.
- ``header_wrap``: the header row; receives its rendered cells as ``content``.
- ``corner``: the header cell above the row names (only when there are row
  names); it does not receive any value. ``last_corner`` is used instead when
  the table has no columns, if provided.
- ``head``: a column name, as ``value``. ``last_head`` is used instead for the
  last column name, if provided.
- ``body_wrap``: all the rows, as ``content``.
- ``row_wrap``: one row, as ``content``.
- ``row_head``: a row name, as ``value``. ``last_row_head`` is used instead
  when the table has no columns, if provided.
- ``cell``: a data cell, as ``value``. ``last_cell`` is used instead for the
  last cell of each row, if provided.

Values are display strings. Rendered slots are passed to the enclosing slot as
markup so that they are not escaped twice in formats that escape values.
"""

import functools
from dataclasses import dataclass, field
from typing import Callable, Optional

import jinja2
from markupsafe import Markup

from ._config import get_config
from ._grid import CellGrid
from ._truncate import _truncate

__all__ = ["TemplateBundle", "make_environment", "make_grid", "render", "render_grid"]


def make_environment(**kwargs):
    """A jinja2 environment for table templates.

    Trailing newlines are significant in the templates so they are kept.
    """
    return jinja2.Environment(
        keep_trailing_newline=True, undefined=jinja2.StrictUndefined, **kwargs
    )


_DEFAULT_ENVIRONMENT = make_environment(autoescape=False)


@functools.lru_cache(maxsize=256)
def _compile(environment, source):
    return environment.from_string(source)


@dataclass(frozen=True)
class TemplateBundle:
    wrap: str
    header_wrap: str
    corner: str
    head: str
    body_wrap: str
    row_wrap: str
    row_head: str
    cell: str
    last_head: Optional[str] = None
    last_cell: Optional[str] = None
    last_corner: Optional[str] = None
    last_row_head: Optional[str] = None
    environment: jinja2.Environment = field(
        default=_DEFAULT_ENVIRONMENT, repr=False, compare=False
    )

    def template(self, slot):
        source = getattr(self, slot)
        if source is None:
            source = getattr(self, slot.removeprefix("last_"))
        return _compile(self.environment, source)


def _render_slot(bundle, slot, **context):
    return bundle.template(slot).render(**context)


def _render_cells(bundle, slot, values):
    cells = [_render_slot(bundle, slot, value=v) for v in values[:-1]]
    if values:
        cells.append(_render_slot(bundle, f"last_{slot}", value=values[-1]))
    return cells


def _join(parts):
    return Markup("".join(parts))


def render_grid(grid, bundle):
    """Render a ``CellGrid`` with the templates of ``bundle``.

    Parameters
    ----------
    grid : CellGrid
        The display strings and names of the table.
    bundle : TemplateBundle
        The templates of the output format.

    Returns
    -------
    str
        The rendered table.
    """
    has_row_names = grid.row_names is not None
    header = ""
    if grid.column_names is not None:
        heads = _render_cells(bundle, "head", grid.column_names)
        if has_row_names:
            corner = "corner" if heads else "last_corner"
            heads.insert(0, _render_slot(bundle, corner))
        header = _render_slot(bundle, "header_wrap", content=_join(heads))

    rows = []
    for i, row in enumerate(grid.rows):
        cells = _render_cells(bundle, "cell", row)
        if has_row_names:
            row_head = "row_head" if cells else "last_row_head"
            cells.insert(0, _render_slot(bundle, row_head, value=grid.row_names[i]))
        rows.append(_render_slot(bundle, "row_wrap", content=_join(cells)))
    body = _render_slot(bundle, "body_wrap", content=_join(rows))

    return str(_render_slot(bundle, "wrap", header=Markup(header), body=Markup(body)))


def make_grid(obj, *, max_rows=None, max_cols=None, config=None):
    """Truncate a table and format its values.

    Parameters
    ----------
    obj : pandas DataFrame, polars DataFrame or 2D numpy array
        The table.
    max_rows, max_cols : int, default=None
        Display limits; the configured values are used when ``None``.
    config : dict, default=None
        The configuration to use, as returned by :func:`get_config`. It is
        read when ``None``.

    Returns
    -------
    CellGrid
    """
    if config is None:
        config = get_config()
    truncated = _truncate(
        obj,
        max_rows=config["max_rows"] if max_rows is None else max_rows,
        max_cols=config["max_cols"] if max_cols is None else max_cols,
        float_precision=config["float_precision"],
    )
    return CellGrid.from_source(truncated, float_precision=config["float_precision"])


def render(
    obj,
    bundle,
    *,
    max_rows=None,
    max_cols=None,
    cell_transform: Optional[Callable[[CellGrid], CellGrid]] = None,
):
    """Truncate a table and render it with the templates of ``bundle``.

    Parameters
    ----------
    obj : pandas DataFrame, polars DataFrame or 2D numpy array
        The table.
    bundle : TemplateBundle
        The templates of the output format.
    max_rows, max_cols : int, default=None
        Display limits; the configured values are used when ``None``.
    cell_transform : callable, default=None
        Applied to the ``CellGrid`` before rendering, e.g. to escape values.

    Returns
    -------
    str
        The rendered table.

    Examples
    --------
    >>> import numpy as np
    >>> from tablerepr import TemplateBundle, render
    >>> csv = TemplateBundle(
    ...     wrap="{{ header }}{{ body }}",
    ...     header_wrap="{{ content }}\\n",
    ...     corner=",",
    ...     head="{{ value }},",
    ...     last_head="{{ value }}",
    ...     body_wrap="{{ content }}",
    ...     row_wrap="{{ content }}\\n",
    ...     row_head="{{ value }},",
    ...     cell="{{ value }},",
    ...     last_cell="{{ value }}",
    ... )
    >>> print(render(np.arange(12).reshape(2, 6), csv, max_cols=4), end="")
    0,1,⋯,4,5
    6,7,⋯,10,11
    """
    grid = make_grid(obj, max_rows=max_rows, max_cols=max_cols)
    if cell_transform is not None:
        grid = cell_transform(grid)
    return render_grid(grid, bundle)

"""HTML rendering of tables."""

from ._render import TemplateBundle, make_environment, render

__all__ = ["HTML_BUNDLE", "repr_html"]


def _get_jinja_env():
    return make_environment(autoescape=True)


HTML_BUNDLE = TemplateBundle(
    wrap="<table>\n{{ header }}{{ body }}</table>\n",
    header_wrap="<thead><tr>{{ content }}</tr></thead>\n",
    corner="<th></th>",
    head="<th scope=col>{{ value }}</th>",
    body_wrap="<tbody>\n{{ content }}</tbody>\n",
    row_wrap="\t<tr>{{ content }}</tr>\n",
    row_head="<th scope=row>{{ value }}</th>",
    cell="<td>{{ value }}</td>",
    environment=_get_jinja_env(),
)


def repr_html(obj, *, max_rows=None, max_cols=None):
    """HTML table for a pandas or polars DataFrame or a 2D numpy array.

    Large tables are truncated (see :func:`truncate`). Values and names are
    HTML-escaped.

    Parameters
    ----------
    obj : pandas DataFrame, polars DataFrame or 2D numpy array
        The table to display.
    max_rows, max_cols : int, default=None
        Display limits; the configured values are used when ``None``.

    Returns
    -------
    str
        The ``<table>`` element.

    Examples
    --------
    >>> import numpy as np
    >>> from tablerepr import repr_html
    >>> print(repr_html(np.array([[1, 2], [3, 4]])), end="")
    <table>
    <tbody>
    	<tr><td>1</td><td>2</td></tr>
    	<tr><td>3</td><td>4</td></tr>
    </tbody>
    </table>
    """
    return render(obj, HTML_BUNDLE, max_rows=max_rows, max_cols=max_cols)

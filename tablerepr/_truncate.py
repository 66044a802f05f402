"""
Elide the rows and columns of tables that are too large to be displayed.

When a table has more rows than ``max_rows``, only the first
``ceil(max_rows / 2)`` and the last ``floor(max_rows / 2)`` rows are kept and a
row of vertical ellipses is inserted between them. Columns are elided in the
same way with a column of horizontal ellipses. When both are elided, the cell
at the intersection holds a diagonal ellipsis.

With ``max_rows=4`` and ``max_cols=3``, a 20 × 10 table becomes:

        c0  c1  ⋯  c9
    0   .   .   ⋯  .
    1   .   .   ⋯  .
    ⋮   ⋮   ⋮   ⋱  ⋮
    18  .   .   ⋯  .
    19  .   .   ⋯  .

The result is a container of the same kind as the input (pandas DataFrame,
polars DataFrame or numpy array). Some columns cannot hold the ellipsis
strings as they are; what happens to them is decided by
``_marker_capability``:

``"native"``
    the column accepts strings once the markers are inserted (e.g. pandas
    numeric columns become ``object`` columns).
``"extend_levels"``
    the column is a closed set of categories; the ellipses are added to its
    categories so that inserting them neither fails nor produces nulls.
``"to_string"``
    the column is converted to display strings first (dates, and in polars
    every column that is not a string column).
"""

from . import _dataframe as sbd
from ._config import check_display_limit, get_config
from ._dispatch import dispatch, raise_dispatch_unregistered_type
from ._logging import get_logger
from ._utils import format_value, is_null

__all__ = ["ELLIPSIS_H", "ELLIPSIS_V", "ELLIPSIS_D", "ELLIPSES", "truncate"]

#: Inserted in place of elided columns.
ELLIPSIS_H = "⋯"
#: Inserted in place of elided rows.
ELLIPSIS_V = "⋮"
#: Inserted where the row and column of ellipses cross.
ELLIPSIS_D = "⋱"

ELLIPSES = (ELLIPSIS_H, ELLIPSIS_V, ELLIPSIS_D)

logger = get_logger(__name__)


def truncate(obj, max_rows=None, max_cols=None):
    """Elide rows and columns so that a table fits the display limits.

    Parameters
    ----------
    obj : pandas DataFrame, polars DataFrame or 2D numpy array
        The table to truncate. It is not modified.
    max_rows : int, default=None
        Maximum number of data rows kept, must be >= 2. If ``None``, the
        ``max_rows`` configuration (see :func:`set_config`) is used.
    max_cols : int, default=None
        Maximum number of data columns kept, must be >= 2. If ``None``, the
        ``max_cols`` configuration is used.

    Returns
    -------
    pandas DataFrame, polars DataFrame or numpy array
        ``obj`` itself if it fits within both limits (or has no rows or no
        columns). Otherwise a new table of the same kind, with
        ``max_rows + 1`` rows if rows were elided and ``max_cols + 1`` columns
        if columns were elided.

    Examples
    --------
    >>> import pandas as pd
    >>> from tablerepr import truncate
    >>> df = pd.DataFrame({f"c{i}": range(i, i + 5) for i in range(4)})
    >>> small = truncate(df, max_rows=2, max_cols=2)
    >>> small.shape
    (3, 3)
    >>> list(small.columns)
    ['c0', '⋯', 'c3']
    >>> small.index[1]
    '⋮'
    >>> small.iloc[1].tolist()
    ['⋮', '⋱', '⋮']
    >>> truncate(df, max_rows=10, max_cols=10) is df
    True
    """
    config = get_config()
    return _truncate(
        obj,
        max_rows=config["max_rows"] if max_rows is None else max_rows,
        max_cols=config["max_cols"] if max_cols is None else max_cols,
        float_precision=config["float_precision"],
    )


def _split(limit):
    """Number of rows (columns) kept before and after the ellipsis."""
    return (limit + 1) // 2, limit // 2


def _truncate(obj, max_rows, max_cols, float_precision):
    check_display_limit("max_rows", max_rows)
    check_display_limit("max_cols", max_cols)
    check_source(obj)
    max_rows, max_cols = int(max_rows), int(max_cols)
    n_rows, n_cols = sbd.shape(obj)
    truncate_rows = n_rows > max_rows
    truncate_cols = n_cols > max_cols
    if not (truncate_rows or truncate_cols) or n_rows == 0 or n_cols == 0:
        return obj

    top, bottom = _split(max_rows)
    left, right = _split(max_cols)

    # Slice first so that only the displayed values need to be converted.
    if truncate_rows:
        obj = sbd.concat_vertical(
            sbd.slice(obj, top), sbd.slice(obj, n_rows - bottom, n_rows)
        )
        logger.debug("eliding rows %d to %d", top, n_rows - bottom - 1)
    if truncate_cols:
        obj = sbd.take_columns(obj, [*range(left), *range(n_cols - right, n_cols)])
        logger.debug("eliding columns %d to %d", left, n_cols - right - 1)
    obj = _accommodate_markers(obj, float_precision)

    if truncate_cols:
        obj = sbd.insert_column(
            obj, left, [ELLIPSIS_H] * sbd.shape(obj)[0], name=ELLIPSIS_H
        )
    if truncate_rows:
        marker_row = [ELLIPSIS_V] * sbd.shape(obj)[1]
        if truncate_cols:
            marker_row[left] = ELLIPSIS_D
        obj = sbd.insert_row(obj, top, marker_row, name=ELLIPSIS_V)
    return obj


@dispatch
def check_source(obj):
    """Raise an error if ``obj`` is not a table that can be displayed."""
    raise_dispatch_unregistered_type(obj)


@check_source.specialize("pandas", argument_type="DataFrame")
@check_source.specialize("polars", argument_type="DataFrame")
def _check_source_dataframe(obj):
    pass


@check_source.specialize("numpy")
def _check_source_numpy(obj):
    if obj.ndim != 2:
        raise ValueError(
            f"Expecting a 2D numpy array, got an array with {obj.ndim} dimension(s)."
        )


#
# Making room for the ellipses
# ============================
#


@dispatch
def _marker_capability(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@_marker_capability.specialize("pandas", argument_type="Column")
def _marker_capability_pandas(col):
    if sbd.is_categorical(col):
        return "extend_levels"
    if sbd.is_any_date(col):
        return "to_string"
    return "native"


@_marker_capability.specialize("polars", argument_type="Column")
def _marker_capability_polars(col):
    import polars as pl

    if col.dtype == pl.String:
        return "native"
    if col.dtype == pl.Enum:
        return "extend_levels"
    return "to_string"


@dispatch
def _to_display_strings(col, float_precision):
    raise_dispatch_unregistered_type(col, kind="Series")


@_to_display_strings.specialize("pandas", argument_type="Column")
@_to_display_strings.specialize("polars", argument_type="Column")
def _to_display_strings_dataframe(col, float_precision):
    # Same formatting as the cells of tables that are not truncated.
    values = [
        None if is_null(v) else format_value(v, float_precision)
        for v in sbd.to_list(col)
    ]
    return sbd.make_column_like(col, values, sbd.name(col))


def _accommodate_column(col, float_precision):
    capability = _marker_capability(col)
    if capability == "extend_levels":
        return sbd.add_categories(col, ELLIPSES)
    if capability == "to_string":
        return _to_display_strings(col, float_precision)
    return col


def _accommodate_columns(df, float_precision):
    for position in range(sbd.shape(df)[1]):
        col = sbd.col_at(df, position)
        new_col = _accommodate_column(col, float_precision)
        if new_col is not col:
            df = sbd.replace_col_at(df, position, new_col)
    return df


@dispatch
def _accommodate_markers(obj, float_precision):
    raise_dispatch_unregistered_type(obj)


@_accommodate_markers.specialize("pandas", argument_type="DataFrame")
def _accommodate_markers_pandas(obj, float_precision):
    import pandas as pd

    # A flat label is inserted for the ellipses: multi-level labels are
    # displayed as tuples.
    if isinstance(obj.columns, pd.MultiIndex):
        obj = obj.set_axis(obj.columns.to_flat_index(), axis=1)
    if isinstance(obj.index, pd.MultiIndex):
        obj = obj.set_axis(obj.index.to_flat_index(), axis=0)
    return _accommodate_columns(obj, float_precision)


@_accommodate_markers.specialize("polars", argument_type="DataFrame")
def _accommodate_markers_polars(obj, float_precision):
    return _accommodate_columns(obj, float_precision)


@_accommodate_markers.specialize("numpy")
def _accommodate_markers_numpy(obj, float_precision):
    return obj.astype(object)


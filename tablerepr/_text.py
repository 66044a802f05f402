"""Plain text rendering of tables.

The table is truncated with the tablerepr ellipses, then printed by the
container library itself with its own elision turned off.
"""

from ._dispatch import dispatch, raise_dispatch_unregistered_type
from ._truncate import truncate

__all__ = ["repr_text"]


@dispatch
def _to_text(obj):
    raise_dispatch_unregistered_type(obj)


@_to_text.specialize("pandas", argument_type="DataFrame")
def _to_text_pandas(obj):
    return obj.to_string()


@_to_text.specialize("polars", argument_type="DataFrame")
def _to_text_polars(obj):
    import polars as pl

    with pl.Config(tbl_rows=-1, tbl_cols=-1):
        return str(obj)


@_to_text.specialize("numpy")
def _to_text_numpy(obj):
    import numpy as np

    return np.array2string(obj, threshold=max(obj.size, 1))


def repr_text(obj, *, max_rows=None, max_cols=None):
    """Plain text for a pandas or polars DataFrame or a 2D numpy array.

    Parameters
    ----------
    obj : pandas DataFrame, polars DataFrame or 2D numpy array
        The table to display.
    max_rows, max_cols : int, default=None
        Display limits; the configured values are used when ``None``.

    Returns
    -------
    str
        The text, as printed by pandas, polars or numpy.

    Examples
    --------
    >>> import pandas as pd
    >>> from tablerepr import repr_text
    >>> df = pd.DataFrame({"a": range(5)})
    >>> print(repr_text(df, max_rows=2))
       a
    0  0
    ⋮  ⋮
    4  4
    """
    return _to_text(truncate(obj, max_rows=max_rows, max_cols=max_cols))

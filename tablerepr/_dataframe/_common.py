import builtins

import numpy as np
import pandas as pd
import pandas.api.types

try:
    import polars as pl
except ImportError:
    pass

from .._dispatch import dispatch, raise_dispatch_unregistered_type

__all__ = [
    #
    # Conversions to and from other container types
    #
    "to_list",
    "make_column_like",
    #
    # Querying metadata
    #
    "shape",
    "name",
    "column_names",
    "row_names",
    #
    # Inspecting dtypes and categories
    #
    "is_any_date",
    "is_categorical",
    "add_categories",
    #
    # Selecting and assembling rows and columns
    #
    "col_at",
    "replace_col_at",
    "slice",
    "take_columns",
    "concat_vertical",
    "insert_row",
    "insert_column",
    "iter_rows",
]

#
# Conversions to and from other container types
# =============================================
#


@dispatch
def to_list(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@to_list.specialize("pandas", argument_type="Column")
def _to_list_pandas(col):
    result = col.tolist()
    return [None if item is pd.NA else item for item in result]


@to_list.specialize("polars", argument_type="Column")
def _to_list_polars(col):
    return col.to_list()


@dispatch
def make_column_like(obj, values, name):
    raise_dispatch_unregistered_type(obj, kind="Series")


@make_column_like.specialize("pandas")
def _make_column_like_pandas(obj, values, name):
    return pd.Series(data=values, name=name, dtype=object)


@make_column_like.specialize("polars")
def _make_column_like_polars(obj, values, name):
    return pl.Series(name=name, values=values, dtype=pl.String)


#
# Querying metadata
# =================
#


@dispatch
def shape(obj):
    raise_dispatch_unregistered_type(obj)


@shape.specialize("pandas")
def _shape_pandas(obj):
    return obj.shape


@shape.specialize("polars")
def _shape_polars(obj):
    return obj.shape


@shape.specialize("numpy")
def _shape_numpy(obj):
    return obj.shape


@dispatch
def name(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@name.specialize("pandas", argument_type="Column")
def _name_pandas(col):
    return col.name


@name.specialize("polars", argument_type="Column")
def _name_polars(col):
    return col.name


@dispatch
def column_names(df):
    """The column names, or ``None`` if the container does not have any."""
    raise_dispatch_unregistered_type(df)


@column_names.specialize("pandas", argument_type="DataFrame")
def _column_names_pandas(df):
    return df.columns.tolist()


@column_names.specialize("polars", argument_type="DataFrame")
def _column_names_polars(df):
    return df.columns


@column_names.specialize("numpy")
def _column_names_numpy(df):
    return None


@dispatch
def row_names(df):
    """The row names, or ``None`` if the container does not have any.

    Only pandas dataframes have row names: the labels of their index.
    """
    raise_dispatch_unregistered_type(df)


@row_names.specialize("pandas", argument_type="DataFrame")
def _row_names_pandas(df):
    return df.index.tolist()


@row_names.specialize("polars", argument_type="DataFrame")
def _row_names_polars(df):
    return None


@row_names.specialize("numpy")
def _row_names_numpy(df):
    return None


#
# Inspecting dtypes and categories
# ================================
#


@dispatch
def is_any_date(col):
    raise_dispatch_unregistered_type(col, kind="Series")


@is_any_date.specialize("pandas", argument_type="Column")
def _is_any_date_pandas(col):
    return pandas.api.types.is_datetime64_any_dtype(col)


@is_any_date.specialize("polars", argument_type="Column")
def _is_any_date_polars(col):
    return col.dtype in (pl.Date, pl.Datetime)


@dispatch
def is_categorical(col):
    """Return True for columns whose values come from a closed set of categories."""
    raise_dispatch_unregistered_type(col, kind="Series")


@is_categorical.specialize("pandas", argument_type="Column")
def _is_categorical_pandas(col):
    return isinstance(col.dtype, pd.CategoricalDtype)


@is_categorical.specialize("polars", argument_type="Column")
def _is_categorical_polars(col):
    return col.dtype in (pl.Categorical, pl.Enum)


@dispatch
def add_categories(col, new_categories):
    """Extend the categories of a categorical column.

    Categories that the column already has are skipped.
    """
    raise_dispatch_unregistered_type(col, kind="Series")


@add_categories.specialize("pandas", argument_type="Column")
def _add_categories_pandas(col, new_categories):
    existing = set(col.cat.categories)
    to_add = [c for c in new_categories if c not in existing]
    if not to_add:
        return col
    return col.cat.add_categories(to_add)


@add_categories.specialize("polars", argument_type="Column")
def _add_categories_polars(col, new_categories):
    if col.dtype != pl.Enum:
        # polars Categoricals are not a closed set: any string can be added
        return col
    existing = col.dtype.categories.to_list()
    to_add = [c for c in new_categories if c not in set(existing)]
    if not to_add:
        return col
    return col.cast(pl.Enum(existing + to_add))


#
# Selecting and assembling rows and columns
# =========================================
#


@dispatch
def col_at(df, position):
    """Get the column at the given position (column names may be duplicated)."""
    raise_dispatch_unregistered_type(df)


@col_at.specialize("pandas", argument_type="DataFrame")
def _col_at_pandas(df, position):
    return df.iloc[:, position]


@col_at.specialize("polars", argument_type="DataFrame")
def _col_at_polars(df, position):
    return df.to_series(position)


@dispatch
def replace_col_at(df, position, new_col):
    """Return a copy of ``df`` where the column at ``position`` is ``new_col``."""
    raise_dispatch_unregistered_type(df)


@replace_col_at.specialize("pandas", argument_type="DataFrame")
def _replace_col_at_pandas(df, position, new_col):
    df = df.copy()
    df.isetitem(position, new_col.set_axis(df.index))
    return df


@replace_col_at.specialize("polars", argument_type="DataFrame")
def _replace_col_at_polars(df, position, new_col):
    df = df.clone()
    df.replace_column(position, new_col.alias(df.columns[position]))
    return df


@dispatch
def slice(obj, *start_stop):
    """Select a contiguous range of rows, like ``obj[start:stop]`` for a list.

    ``slice(obj, stop)`` selects the first ``stop`` rows.
    """
    raise_dispatch_unregistered_type(obj)


@slice.specialize("pandas")
def _slice_pandas(obj, *start_stop):
    return obj.iloc[builtins.slice(*start_stop)]


@slice.specialize("polars")
def _slice_polars(obj, *start_stop):
    start, stop, _ = builtins.slice(*start_stop).indices(obj.shape[0])
    return obj.slice(start, max(stop - start, 0))


@slice.specialize("numpy")
def _slice_numpy(obj, *start_stop):
    return obj[builtins.slice(*start_stop)]


@dispatch
def take_columns(df, positions):
    """Select columns by position, in the given order."""
    raise_dispatch_unregistered_type(df)


@take_columns.specialize("pandas", argument_type="DataFrame")
def _take_columns_pandas(df, positions):
    return df.iloc[:, list(positions)]


@take_columns.specialize("polars", argument_type="DataFrame")
def _take_columns_polars(df, positions):
    return df.select([df.to_series(p) for p in positions])


@take_columns.specialize("numpy")
def _take_columns_numpy(df, positions):
    return df[:, list(positions)]


@dispatch
def concat_vertical(df, *other_dfs):
    """Stack dataframes with the same columns on top of each other."""
    raise_dispatch_unregistered_type(df)


@concat_vertical.specialize("pandas", argument_type="DataFrame")
def _concat_vertical_pandas(df, *other_dfs):
    return pd.concat([df, *other_dfs], axis=0)


@concat_vertical.specialize("polars", argument_type="DataFrame")
def _concat_vertical_polars(df, *other_dfs):
    return pl.concat([df, *other_dfs], how="vertical")


@concat_vertical.specialize("numpy")
def _concat_vertical_numpy(df, *other_dfs):
    return np.concatenate([df, *other_dfs], axis=0)


@dispatch
def insert_row(df, position, values, name=None):
    """Return a copy of ``df`` with a new row inserted before ``position``.

    ``values`` contains one value per column. ``name`` is the row name, used
    only by containers which have row names. The dtypes of the columns are
    kept whenever they can hold the inserted values.
    """
    raise_dispatch_unregistered_type(df)


@insert_row.specialize("pandas", argument_type="DataFrame")
def _insert_row_pandas(df, position, values, name=None):
    new_row = pd.DataFrame(
        {
            i: pd.Series(
                [v],
                index=[name],
                dtype=dt if isinstance(dt, pd.CategoricalDtype) else object,
            )
            for i, (v, dt) in enumerate(zip(values, df.dtypes))
        }
    )
    new_row.columns = df.columns
    return pd.concat([df.iloc[:position], new_row, df.iloc[position:]], axis=0)


@insert_row.specialize("polars", argument_type="DataFrame")
def _insert_row_polars(df, position, values, name=None):
    new_row = pl.DataFrame(
        [
            pl.Series(col_name, [v], dtype=col_dtype)
            for (col_name, col_dtype), v in zip(df.schema.items(), values)
        ]
    )
    return pl.concat(
        [df.slice(0, position), new_row, df.slice(position)], how="vertical"
    )


@insert_row.specialize("numpy")
def _insert_row_numpy(df, position, values, name=None):
    return np.insert(df, position, np.asarray(values, dtype=df.dtype), axis=0)


@dispatch
def insert_column(df, position, values, name=None):
    """Return a copy of ``df`` with a new column inserted before ``position``."""
    raise_dispatch_unregistered_type(df)


@insert_column.specialize("pandas", argument_type="DataFrame")
def _insert_column_pandas(df, position, values, name=None):
    df = df.copy()
    df.insert(
        position,
        name,
        pd.Series(values, index=df.index, dtype=object),
        allow_duplicates=True,
    )
    return df


@insert_column.specialize("polars", argument_type="DataFrame")
def _insert_column_polars(df, position, values, name=None):
    df = df.clone()
    return df.insert_column(position, pl.Series(name, values, dtype=pl.String))


@insert_column.specialize("numpy")
def _insert_column_numpy(df, position, values, name=None):
    return np.insert(df, position, np.asarray(values, dtype=df.dtype), axis=1)


@dispatch
def iter_rows(df):
    """Iterate over the rows of ``df``, yielding tuples of Python values."""
    raise_dispatch_unregistered_type(df)


@iter_rows.specialize("pandas", argument_type="DataFrame")
def _iter_rows_pandas(df):
    if df.shape[1] == 0:
        # itertuples yields nothing when there are no columns
        return (() for _ in range(df.shape[0]))
    return df.itertuples(index=False, name=None)


@iter_rows.specialize("polars", argument_type="DataFrame")
def _iter_rows_polars(df):
    return df.iter_rows()


@iter_rows.specialize("numpy")
def _iter_rows_numpy(df):
    return (tuple(row) for row in df.tolist())

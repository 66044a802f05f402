"""
Note: most tests in this file use the ``df_module`` fixture, which is defined
in ``tablerepr.conftest``. See the corresponding docstrings for details.
"""

import inspect

import numpy as np
import pandas as pd
import pytest
from numpy.testing import assert_array_equal

from tablerepr._dataframe import _common as ns


def test_not_implemented():
    for func_name in sorted(ns.__all__):
        func = getattr(ns, func_name)
        n_params = len(inspect.signature(func).parameters)
        params = [None] * n_params
        with pytest.raises(TypeError):
            func(*params)


#
# Conversions to and from other container types
# =============================================
#


def test_to_list(df_module):
    col = ns.col_at(df_module.example_dataframe, 0)
    assert ns.to_list(col)[:3] == [4, 0, -1]


def test_make_column_like(df_module):
    col = df_module.make_column("a", [1, 2])
    new_col = ns.make_column_like(col, ["x", None], "b")
    assert isinstance(new_col, df_module.Column)
    assert ns.name(new_col) == "b"
    assert ns.to_list(new_col) == ["x", None]


#
# Querying metadata
# =================
#


def test_shape_and_names(df_module):
    df = df_module.make_dataframe({"a": [1, 2, 3], "b": ["x", "y", "z"]})
    assert ns.shape(df) == (3, 2)
    assert ns.column_names(df) == ["a", "b"]
    assert ns.name(ns.col_at(df, 1)) == "b"
    if df_module.has_row_names:
        assert ns.row_names(df) == [0, 1, 2]
    else:
        assert ns.row_names(df) is None


def test_names_numpy():
    arr = np.zeros((2, 3))
    assert ns.shape(arr) == (2, 3)
    assert ns.column_names(arr) is None
    assert ns.row_names(arr) is None


#
# Inspecting dtypes and categories
# ================================
#


def test_is_any_date(df_module):
    df = df_module.example_dataframe
    assert ns.is_any_date(ns.col_at(df, 5))
    assert not ns.is_any_date(ns.col_at(df, 0))
    if df_module.name == "polars":
        assert ns.is_any_date(ns.col_at(df, 6))


def test_categories(df_module):
    col = df_module.make_categorical("a", ["b", "a", "b"])
    assert ns.is_categorical(col)
    assert not ns.is_categorical(df_module.make_column("a", ["b", "a"]))
    assert df_module.categories(col) == ["a", "b"]
    extended = ns.add_categories(col, ["a", "c", "d"])
    assert df_module.categories(extended) == ["a", "b", "c", "d"]
    assert ns.to_list(extended) == ["b", "a", "b"]
    assert ns.add_categories(extended, ["c"]) is extended
    # the input is not modified
    assert df_module.categories(col) == ["a", "b"]


def test_add_categories_polars_categorical():
    pl = pytest.importorskip("polars")
    col = pl.Series("a", ["x", "y"], dtype=pl.Categorical)
    assert ns.add_categories(col, ["z"]) is col


#
# Selecting and assembling rows and columns
# =========================================
#


def test_col_at(df_module):
    df = df_module.make_dataframe({"a": [1, 2], "b": [3, 4]})
    assert ns.to_list(ns.col_at(df, 1)) == [3, 4]


def test_replace_col_at(df_module):
    df = df_module.make_dataframe({"a": [1, 2], "b": [3, 4]})
    new_col = ns.make_column_like(ns.col_at(df, 0), ["x", "y"], "ignored")
    out = ns.replace_col_at(df, 0, new_col)
    assert ns.column_names(out) == ["a", "b"]
    assert ns.to_list(ns.col_at(out, 0)) == ["x", "y"]
    assert ns.to_list(ns.col_at(df, 0)) == [1, 2]


def test_replace_col_at_pandas_index():
    df = pd.DataFrame({"a": [1, 2]}, index=[10, 20])
    out = ns.replace_col_at(df, 0, pd.Series(["x", "y"]))
    assert out["a"].tolist() == ["x", "y"]
    assert out.index.tolist() == [10, 20]


def test_slice(df_module):
    df = df_module.make_dataframe({"a": list(range(10))})
    assert ns.to_list(ns.col_at(ns.slice(df, 3), 0)) == [0, 1, 2]
    assert ns.to_list(ns.col_at(ns.slice(df, 8, 10), 0)) == [8, 9]
    assert ns.to_list(ns.col_at(ns.slice(df, -2, None), 0)) == [8, 9]
    assert ns.shape(ns.slice(df, 5, 2)) == (0, 1)
    assert_array_equal(ns.slice(np.arange(10).reshape(5, 2), 1, 3), [[2, 3], [4, 5]])


def test_take_columns(df_module):
    df = df_module.make_dataframe({"a": [1], "b": [2], "c": [3]})
    out = ns.take_columns(df, [2, 0])
    assert ns.column_names(out) == ["c", "a"]
    assert_array_equal(ns.take_columns(np.eye(3), [0, 2]), [[1, 0], [0, 0], [0, 1]])


def test_concat_vertical(df_module):
    df = df_module.make_dataframe({"a": [1, 2], "b": ["x", "y"]})
    out = ns.concat_vertical(ns.slice(df, 1), ns.slice(df, 1, 2))
    df_module.assert_frame_equal(out, df)
    assert_array_equal(
        ns.concat_vertical(np.eye(2), np.zeros((1, 2))), [[1, 0], [0, 1], [0, 0]]
    )


def test_insert_row(df_module):
    df = df_module.make_dataframe({"a": ["x", "y"], "b": ["u", "v"]})
    out = ns.insert_row(df, 1, ["new-a", "new-b"], name="new")
    assert ns.shape(out) == (3, 2)
    assert ns.to_list(ns.col_at(out, 0)) == ["x", "new-a", "y"]
    assert ns.to_list(ns.col_at(out, 1)) == ["u", "new-b", "v"]
    if df_module.has_row_names:
        assert ns.row_names(out) == [0, "new", 1]
    assert ns.shape(df) == (2, 2)


def test_insert_row_keeps_categories(df_module):
    col = ns.add_categories(df_module.make_categorical("a", ["x", "y"]), ["z"])
    df = df_module.make_dataframe({"a": col})
    out = ns.insert_row(df, 2, ["z"])
    assert ns.is_categorical(ns.col_at(out, 0))
    assert ns.to_list(ns.col_at(out, 0)) == ["x", "y", "z"]


def test_insert_row_numpy():
    out = ns.insert_row(np.arange(4).reshape(2, 2), 1, [7, 8])
    assert_array_equal(out, [[0, 1], [7, 8], [2, 3]])


def test_insert_column(df_module):
    df = df_module.make_dataframe({"a": ["x", "y"], "b": ["u", "v"]})
    out = ns.insert_column(df, 1, ["1", "2"], name="new")
    assert ns.column_names(out) == ["a", "new", "b"]
    assert ns.to_list(ns.col_at(out, 1)) == ["1", "2"]
    assert ns.column_names(df) == ["a", "b"]
    assert_array_equal(
        ns.insert_column(np.zeros((2, 1)), 0, [1, 2]), [[1, 0], [2, 0]]
    )


def test_iter_rows(df_module):
    df = df_module.make_dataframe({"a": [1, 2], "b": ["x", "y"]})
    assert [list(row) for row in ns.iter_rows(df)] == [[1, "x"], [2, "y"]]
    assert list(ns.iter_rows(np.eye(2))) == [(1.0, 0.0), (0.0, 1.0)]


def test_iter_rows_without_columns():
    df = pd.DataFrame(index=["a", "b"])
    assert [list(row) for row in ns.iter_rows(df)] == [[], []]
    assert list(ns.iter_rows(np.zeros((2, 0)))) == [(), ()]


def test_names_keep_python_values():
    index = pd.date_range("2020-01-01", periods=2)
    df = pd.DataFrame({"a": [1, 2]}, index=index)
    assert ns.row_names(df) == [pd.Timestamp("2020-01-01"), pd.Timestamp("2020-01-02")]
    df = pd.DataFrame([[1, 2]], columns=index)
    assert ns.column_names(df) == list(index)

import datetime
from types import SimpleNamespace

import pandas as pd
import pandas.testing
import pytest

import tablerepr
from tablerepr import _config


def _example_data_dict():
    return {
        "int-col": [4, 0, -1, None],
        "int-not-null-col": [4, 0, -1, 10],
        "float-col": [4.5, 0.5, None, -1.5],
        "str-col": ["one", None, "three", "four"],
        "bool-col": [False, True, None, True],
        "datetime-col": [
            datetime.datetime.fromisoformat(dt)
            for dt in [
                "2020-02-03T12:30:05",
                "2021-03-15T00:37:15",
                "2022-02-13T17:03:25",
            ]
        ]
        + [None],
        "date-col": [
            datetime.date.fromisoformat(dt)
            for dt in ["2002-02-03", "2001-05-17", "2005-02-13", "2004-10-02"]
        ],
    }


def _wide_data_dict(n_rows, n_cols):
    return {f"c{j}": [i * n_cols + j for i in range(n_rows)] for j in range(n_cols)}


_DATAFAME_MODULES_INFO = {}
_DATAFAME_MODULES_INFO["pandas-numpy-dtypes"] = SimpleNamespace(
    **{
        "name": "pandas",
        "description": "pandas-numpy-dtypes",
        "module": pd,
        "DataFrame": pd.DataFrame,
        "Column": pd.Series,
        "make_dataframe": pd.DataFrame.from_dict,
        "make_column": lambda name, values: pd.Series(name=name, data=values),
        "make_categorical": lambda name, values: pd.Series(
            name=name, data=values, dtype="category"
        ),
        "categories": lambda col: list(col.cat.categories),
        "assert_frame_equal": pandas.testing.assert_frame_equal,
        "assert_column_equal": pandas.testing.assert_series_equal,
        "empty_dataframe": pd.DataFrame(),
        "example_dataframe": pd.DataFrame(_example_data_dict()),
        "has_row_names": True,
    }
)

_DATAFAME_MODULES_INFO["pandas-nullable-dtypes"] = SimpleNamespace(
    **{
        "name": "pandas",
        "description": "pandas-nullable-dtypes",
        "module": pd,
        "DataFrame": pd.DataFrame,
        "Column": pd.Series,
        "make_dataframe": lambda data: pd.DataFrame(data).convert_dtypes(),
        "make_column": lambda name, values: pd.Series(
            name=name, data=values
        ).convert_dtypes(),
        "make_categorical": lambda name, values: pd.Series(
            name=name, data=values, dtype="category"
        ),
        "categories": lambda col: list(col.cat.categories),
        "assert_frame_equal": pandas.testing.assert_frame_equal,
        "assert_column_equal": pandas.testing.assert_series_equal,
        "empty_dataframe": pd.DataFrame(),
        "example_dataframe": pd.DataFrame(_example_data_dict()).convert_dtypes(),
        "has_row_names": True,
    }
)


try:
    import polars as pl
    import polars.testing

    _POLARS_INSTALLED = True
except ImportError:
    _POLARS_INSTALLED = False

if _POLARS_INSTALLED:
    _DATAFAME_MODULES_INFO["polars"] = SimpleNamespace(
        **{
            "name": "polars",
            "description": "polars",
            "module": pl,
            "DataFrame": pl.DataFrame,
            "Column": pl.Series,
            "make_dataframe": pl.from_dict,
            "make_column": lambda name, values: pl.Series(name=name, values=values),
            "make_categorical": lambda name, values: pl.Series(
                name=name, values=values, dtype=pl.Enum(sorted(set(values)))
            ),
            "categories": lambda col: col.dtype.categories.to_list(),
            "assert_frame_equal": polars.testing.assert_frame_equal,
            "assert_column_equal": polars.testing.assert_series_equal,
            "empty_dataframe": pl.DataFrame(),
            "example_dataframe": pl.DataFrame(_example_data_dict()),
            "has_row_names": False,
        }
    )


pd.set_option("display.show_dimensions", False)


@pytest.fixture(autouse=True)
def _restore_config():
    """Undo configuration changes and display patching made by a test."""
    original_config = tablerepr.get_config()
    yield
    _config._get_threadlocal_config().update(original_config)
    tablerepr.unpatch_display()


@pytest.fixture
def all_dataframe_modules():
    return _DATAFAME_MODULES_INFO


@pytest.fixture(params=list(_DATAFAME_MODULES_INFO.keys()))
def df_module(request):
    """Return information about a dataframe module (either polars or pandas).

    Information is accessed through attributes, for example ``df_module.name``,
    ``df_module.make_dataframe(dict(a=[1, 2, 3, 4]))``.

    The fixture is parametrized with the installed dataframe modules so a test
    that requests it will be executed once for each installed module (eg once
    for pandas and once for polars if both are installed).

    The list of provided attributes is:

    name
        The module name as a string.
    module
        The module object itself (either ``pandas`` or ``polars``).
    DataFrame
        The module's dataframe class.
    Column
        The module's column class (``pd.Series`` or ``pl.Series``).
    make_dataframe
        A function that takes a dictionary of ``{column_name: column_values}``
        and returns a dataframe.
    make_column
        A function that takes a name and sequence of values and returns a column.
        ``df_module.make_column("country", ["France", "Spain"])``
    make_categorical
        Same as ``make_column`` but returns a column with a closed set of
        categories (pandas ``category``, polars ``Enum``).
    categories
        A function returning the list of categories of a column made by
        ``make_categorical``.
    assert_frame_equal
        A function that asserts 2 dataframes are equal.
    assert_column_equal
        A function that asserts 2 columns are equal.
    empty_dataframe
        A dataframe with 0 rows and 0 columns.
    example_dataframe
        An example dataframe, see ``_example_data_dict`` in this module for the
        contents.
    has_row_names
        Whether the dataframes of this module have row names (an index).
    """
    return _DATAFAME_MODULES_INFO[request.param]


@pytest.fixture
def wide_data_dict():
    """A function returning ``{"c0": [...], ...}`` with distinct integers."""
    return _wide_data_dict

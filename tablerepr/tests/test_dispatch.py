import numpy as np
import pandas as pd
import pytest

from tablerepr._dispatch import dispatch, raise_dispatch_unregistered_type


def test_dispatch():
    @dispatch
    def f(x, y=None):
        return "default"

    @f.specialize("pandas")
    def _(x, y=None):
        return "pandas"

    @f.specialize("pandas", argument_type="Column")
    def _(x, y=None):
        return "pandas series"

    @f.specialize("numpy")
    def _(x, y=None):
        return "numpy"

    @f.specialize("polars")
    def _(x, y=None):
        return "polars"

    assert f(0) == "default"

    df = pd.DataFrame(dict(a=[1, 2, 3]))
    assert f(df) == "pandas"
    assert f(0, df) == "default"
    assert f(df["a"]) == "pandas series"
    assert f(np.eye(2)) == "numpy"

    with pytest.raises(KeyError, match="Unknown dataframe module"):
        f.specialize("dask")

    try:
        import polars as pl
    except ImportError:
        pytest.skip("polars not installed")

    df = pl.DataFrame(dict(a=[1, 2, 3]))
    assert f(df) == "polars"
    assert f(df.lazy()) == "polars"
    assert f(df["a"]) == "polars"
    assert f(0, df["a"]) == "default"


def test_dispatch_dataframe_only():
    @dispatch
    def f(x):
        raise_dispatch_unregistered_type(x)

    @f.specialize("polars", argument_type="DataFrame")
    def _(x):
        return "polars"

    with pytest.raises(TypeError, match="Expecting a pandas or polars DataFrame"):
        f(pd.DataFrame())

    try:
        import polars as pl
    except ImportError:
        pytest.skip("polars not installed")

    assert f(pl.DataFrame()) == "polars"
    with pytest.raises(TypeError, match="got an object of type"):
        f(pl.DataFrame().lazy())


def test_unregistered_type_message():
    with pytest.raises(TypeError, match="pandas or polars Series or a 2D numpy array"):
        raise_dispatch_unregistered_type([1], kind="Series")

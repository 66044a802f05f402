from dataclasses import dataclass, replace
from typing import List, Optional

from . import _dataframe as sbd
from ._utils import format_value

__all__ = ["CellGrid"]


@dataclass(frozen=True)
class CellGrid:
    """The display strings of a table, with its row and column names.

    A grid is always 2D: ``rows`` is a list of rows, each a list of strings
    with one item per column, even when there is a single row or a single
    column. ``row_names`` and ``column_names`` are ``None`` when the table has
    no such names. ``n_columns`` is the number of columns of the table, which
    ``rows`` and ``column_names`` cannot tell when the table has no rows and no
    column names; it is deduced from them when ``None``.

    Examples
    --------
    >>> import pandas as pd
    >>> from tablerepr import CellGrid
    >>> grid = CellGrid.from_source(pd.DataFrame({"a": [1.5], "b": ["x"]}))
    >>> grid
    CellGrid(rows=[['1.5', 'x']], row_names=['0'], column_names=['a', 'b'],
             n_columns=2)
    >>> grid.map_cells(str.upper).rows
    [['1.5', 'X']]
    """

    rows: List[List[str]]
    row_names: Optional[List[str]] = None
    column_names: Optional[List[str]] = None
    n_columns: Optional[int] = None

    @classmethod
    def from_source(cls, obj, float_precision=7):
        """Format all the values of a (truncated) table."""

        def fmt(value):
            return format_value(value, float_precision)

        n_columns = sbd.shape(obj)[1]
        row_names = sbd.row_names(obj)
        column_names = sbd.column_names(obj)
        return cls(
            rows=[[fmt(v) for v in row] for row in sbd.iter_rows(obj)],
            row_names=None if row_names is None else [fmt(n) for n in row_names],
            column_names=(
                None if column_names is None else [fmt(n) for n in column_names]
            ),
            n_columns=n_columns,
        )

    @property
    def shape(self):
        if self.n_columns is not None:
            n_columns = self.n_columns
        elif self.rows:
            n_columns = len(self.rows[0])
        else:
            n_columns = len(self.column_names or [])
        return len(self.rows), n_columns

    def columns(self):
        """The cells, column by column."""
        return [list(column) for column in zip(*self.rows)]

    def map_cells(self, func):
        """Apply ``func`` to every cell; names and shape are kept."""
        return replace(self, rows=[[func(v) for v in row] for row in self.rows])

    def map_names(self, func):
        """Apply ``func`` to the row and column names that exist."""
        return replace(
            self,
            row_names=(
                None if self.row_names is None else [func(n) for n in self.row_names]
            ),
            column_names=(
                None
                if self.column_names is None
                else [func(n) for n in self.column_names]
            ),
        )

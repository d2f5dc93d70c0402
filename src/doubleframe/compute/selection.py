"""Transforms that select or add columns.

A common need when working on tabular data is to pick
only some of the columns, or to add new columns
computed from the existing ones.
An example is the ``SELECT`` clause in SQL queries.

This module implements both capabilities.
"""

import logging
from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from ..errors import InternalInconsistencyError
from ..utils.inspect import get_qualname
from .base import FrameTransform

if TYPE_CHECKING:
    from ..dataframe import DataVector, DoubleDataFrame

logger = logging.getLogger(__name__)


class ProjectTransform(FrameTransform):
    """Keep only some of the columns of a frame.

    The columns in the result are always in the same
    order they had in the original frame, independently
    from the order in which they were requested.
    Requesting the same column twice keeps it only once.

    >>> from doubleframe import DoubleDataFrame
    >>> df = DoubleDataFrame(["a", "b", "c"], [[1, 2, 3], [4, 5, 6]])
    >>> ProjectTransform(["c", "a", "c"]).apply(df).to_pydict()
    {'a': [1.0, 4.0], 'c': [3.0, 6.0]}
    """

    def __init__(self, columns: Iterable[str]) -> None:
        """
        :param columns: The names of the columns to keep.
        """
        if isinstance(columns, str):
            raise TypeError(
                f"Expected a list of column names, got the string {columns!r}"
            )
        self.columns = list(columns)

    def __str__(self) -> str:
        return f"ProjectTransform(columns={self.columns})"

    def apply(self, frame: "DoubleDataFrame") -> "DoubleDataFrame":
        """Build a new frame out of the requested columns.

        Each requested name is resolved to its position in
        the frame, which also checks that the column exists.
        Sorting the positions restores the original order
        of the columns, and the set removes duplicates.
        """
        positions = sorted({frame.column_index(name) for name in self.columns})
        names = frame.column_names
        result = frame.from_columns([frame.get_column(names[pos]) for pos in positions])
        logger.debug(f"Projected {len(positions)} of {frame.num_columns} columns")
        return result


class ComputeColumnTransform(FrameTransform):
    """Add a new column computed from the other columns of each row.

    The new column is appended after all the existing ones.

    >>> from doubleframe import DoubleDataFrame
    >>> df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
    >>> transform = ComputeColumnTransform("c", lambda row: row["a"] * row["b"])
    >>> transform.apply(df).get_column("c").get_values()
    [2.0, 12.0]
    """

    def __init__(self, name: str, function: Callable[["DataVector"], float]) -> None:
        """
        :param name: The name of the new column.
        :param function: Called with each row, returns the value of the
                         new column for that row.
        """
        self.name = name
        self.function = function

    def __str__(self) -> str:
        return f"ComputeColumnTransform({self.name!r}, {get_qualname(self.function)})"

    def apply(self, frame: "DoubleDataFrame") -> "DoubleDataFrame":
        """Compute the new values and add them as a column.

        The values are computed first for all the rows,
        then the frame is expanded with an empty column
        which is finally filled with the computed values.
        """
        values = [self.function(row) for row in frame.get_rows()]
        if len(values) != frame.num_rows:
            raise InternalInconsistencyError(
                f"Computed {len(values)} values for a frame with {frame.num_rows} rows"
            )

        result = frame.expand(0, [self.name])
        for rowidx, value in enumerate(values):
            result.set_value(rowidx, self.name, value)
        logger.debug(f"Computed column {self.name!r} for {len(values)} rows")
        return result

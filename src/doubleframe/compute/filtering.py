"""Transforms that implement filtering of rows.

A common request when analysing data is to pick
only the rows that respect a specific condition.
An example is the ``WHERE`` condition in SQL queries.

This module implements the filtering capabilities.
"""

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..utils.inspect import get_qualname
from .base import FrameTransform

if TYPE_CHECKING:
    from ..dataframe import DataVector, DoubleDataFrame

logger = logging.getLogger(__name__)


class SelectTransform(FrameTransform):
    """Filter rows based on a predicate.

    The predicate is invoked for each row, in order,
    and receives the row as a :class:`doubleframe.dataframe.DataVector`.
    Rows for which it returns ``True`` are kept,
    in the same relative order they had.

    >>> from doubleframe import DoubleDataFrame
    >>> df = DoubleDataFrame(["values"], [[1], [2], [3], [4], [5]])
    >>> SelectTransform(lambda row: row["values"] > 3).apply(df).to_pydict()
    {'values': [4.0, 5.0]}

    When no row matches, the result still has
    the columns of the original frame:

    >>> SelectTransform(lambda row: False).apply(df).column_names
    ['values']
    """

    def __init__(self, predicate: Callable[["DataVector"], bool]) -> None:
        """
        :param predicate: Called with each row, returns ``True``
                          for the rows that should be kept.
        """
        self.predicate = predicate

    def __str__(self) -> str:
        return f"SelectTransform({get_qualname(self.predicate)})"

    def apply(self, frame: "DoubleDataFrame") -> "DoubleDataFrame":
        """Evaluate the predicate on each row and keep the matching ones."""
        matching = [row for row in frame.get_rows() if self.predicate(row)]
        logger.debug(f"Selected {len(matching)} of {frame.num_rows} rows")
        return frame.from_rows(matching, column_names=frame.column_names)

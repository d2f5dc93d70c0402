"""Transforms that reduce columns to a single value.

Frequently when analysing data is necessary
to compute totals or statistics, like the sum,
the min or the max of the values of a column.

The summarize transform reduces every column of
a frame to a single value by repeatedly applying
a function that combines two values into one.

For example, given the following data::

    a, b
    1, 2
    3, 4
    5, 6

Summarizing with ``operator.add`` would compute::

    a = (1 + 3) + 5 = 9
    b = (2 + 4) + 6 = 12
"""

import functools
import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ..dataframe.vector import DataVector
from ..errors import EmptyFrameError
from ..utils.inspect import get_qualname
from .base import FrameTransform

if TYPE_CHECKING:
    from ..dataframe import DoubleDataFrame

__all__ = ("SummarizeTransform",)

logger = logging.getLogger(__name__)


class SummarizeTransform(FrameTransform):
    """Reduce each column of a frame to a single value.

    The result is a :class:`doubleframe.dataframe.DataVector`
    with one entry for each column of the frame, in the same order.

    Values are combined left to right, so functions
    that are not associative, like subtraction,
    still lead to predictable results:

    >>> import operator
    >>> from doubleframe import DoubleDataFrame
    >>> df = DoubleDataFrame(["a", "b"], [[10, 1], [3, 2], [2, 3]])
    >>> SummarizeTransform("diff", operator.sub).apply(df)
    DataVector('diff', {'a': 5.0, 'b': -4.0})
    """

    def __init__(
        self,
        name: str,
        function: Callable[[float, float], float],
        initial: float | None = None,
    ) -> None:
        """
        :param name: The name of the resulting vector.
        :param function: Combines the value accumulated so far
                         with the value of the next row.
        :param initial: Value to start the reduction from,
                        when ``None`` the value of the first row is used.
        """
        self.name = name
        self.function = function
        self.initial = initial

    def __str__(self) -> str:
        return f"SummarizeTransform({self.name!r}, {get_qualname(self.function)}, initial={self.initial})"

    def apply(self, frame: "DoubleDataFrame") -> DataVector:
        """Fold the values of each column, from the first to the last row.

        A column with a single value, and no initial value,
        is reduced to that value without invoking the function.
        """
        if frame.num_rows == 0 and frame.num_columns and self.initial is None:
            raise EmptyFrameError(
                f"Can't summarize {self.name!r} on a frame without rows, "
                "provide an initial value"
            )

        results = []
        for column in frame.get_columns():
            values = column.get_values()
            if self.initial is None:
                results.append(functools.reduce(self.function, values))
            else:
                results.append(functools.reduce(self.function, values, self.initial))

        logger.debug(f"Summarized {frame.num_columns} columns as {self.name!r}")
        return DataVector(self.name, frame.column_names, results)

"""Dataframe of named float rows and columns.

A dataframe is a tool designed to handle and manipulate structured data,
in the form of a table of rows and columns.
It allows users to explore data, apply transformations, and analyze it.

The :class:`DoubleDataFrame` stores only floating point numbers,
all columns have a name and all rows have a name (``row_0``, ``row_1``, ...).
Rows and columns can be extracted from the frame as :class:`DataVector`
objects, which are read-only snapshots of the data at the time
they were extracted.

Transformations are eager: each of them immediately
computes a new frame, leaving the original one untouched.

>>> import operator
>>> df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
>>> df.project(["b"]).to_pydict()
{'b': [2.0, 4.0]}
>>> df.summarize("sum", operator.add).as_dict()
{'a': 4.0, 'b': 6.0}
"""

from .vector import DataVector  # isort: skip
from .dataframe import DEFAULT_FILL_VALUE, ROW_NAME_PREFIX, DoubleDataFrame

__all__ = ("DataVector", "DoubleDataFrame", "DEFAULT_FILL_VALUE", "ROW_NAME_PREFIX")

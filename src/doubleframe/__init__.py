"""DoubleFrame

A labeled, two dimensional table of floating point numbers
to embed tabular computation directly in Python programs.

The package is constituted by multiple components, each isolated within its own
module and each self documented:

* The Dataframe, :mod:`doubleframe.dataframe`, which stores the data and
  allows to read, change and extend it.
* The Compute Transforms, :mod:`doubleframe.compute`, which derive new
  frames from existing ones: projecting columns, selecting rows,
  computing new columns and summarizing columns.
* The Errors, :mod:`doubleframe.errors`, raised when the data or the
  requested operations are not valid.

For the user guide and code documentation of each component, refer to the
component itself.

>>> from doubleframe import DoubleDataFrame
>>> df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
>>> df.compute_column("c", lambda row: row["a"] + row["b"]).get_column("c").get_values()
[3.0, 7.0]
"""

from . import dataframe  # isort: skip
from . import compute, errors
from .dataframe import DataVector, DoubleDataFrame

__all__ = ("compute", "dataframe", "errors", "DataVector", "DoubleDataFrame")

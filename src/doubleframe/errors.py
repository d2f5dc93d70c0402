"""Errors raised by the dataframe and its transforms.

All errors inherit from :class:`DataFrameError`, so that callers
can catch anything raised by the library with a single ``except``.
Each error also inherits from the closest Python builtin exception,
so that code already catching ``IndexError`` or ``ValueError``
keeps working. For example, a row index past the end of the frame
is both a :class:`OutOfRangeError` and an ``IndexError``:

>>> from doubleframe import DoubleDataFrame
>>> df = DoubleDataFrame(["a"], [[1.0]])
>>> try:
...     df.get_value(1, "a")
... except IndexError as e:
...     print(e)
Row index 1 out of range for a frame with 1 rows
"""


class DataFrameError(Exception):
    """Base class for all the errors raised by doubleframe."""

    pass


class OutOfRangeError(DataFrameError, IndexError):
    """A row index outside of ``[0, num_rows)`` was requested."""

    pass


class UnknownNameError(DataFrameError, LookupError):
    """A column or entry name that does not exist was requested."""

    pass


class DuplicateNameError(DataFrameError, ValueError):
    """A column name was provided that already exists."""

    pass


class ShapeMismatchError(DataFrameError, ValueError):
    """Rows or columns with inconsistent lengths were provided."""

    pass


class InternalInconsistencyError(DataFrameError, RuntimeError):
    """The frame ended up in a state that should not be reachable."""

    pass


class EmptyFrameError(DataFrameError, ValueError):
    """An operation that requires at least one row was run on an empty frame."""

    pass


class NullValueError(DataFrameError, ValueError):
    """Missing values were found in data being loaded into a frame."""

    pass

"""The DoubleDataFrame object itself.

Data is stored row major, as a list of rows where each row
is a list of floats. A separate dictionary maps each column name
to its position in the rows, so that looking up a column by name
doesn't require scanning the names::

    columns = ["a", "b"]
    index   = {"a": 0, "b": 1}
    rows    = [[1.0, 2.0],
               [3.0, 4.0]]

    rows[1][index["b"]] == 4.0

The ``columns`` list and the ``index`` dictionary must always agree,
every operation that adds columns updates both of them.

>>> df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
>>> df.get_value(1, "b")
4.0
>>> print(df)
      | a    | b
----- | ---- | ----
row_0 | 1.00 | 2.00
row_1 | 3.00 | 4.00
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from typing import Any, Literal, Self

import pyarrow as pa
import pyarrow.compute as pc

from ..compute import (
    ComputeColumnTransform,
    ProjectTransform,
    SelectTransform,
    SummarizeTransform,
)
from ..errors import (
    DuplicateNameError,
    NullValueError,
    OutOfRangeError,
    ShapeMismatchError,
    UnknownNameError,
)
from ..utils import tabulate
from .vector import DataVector

logger = logging.getLogger(__name__)

DEFAULT_FILL_VALUE = 0.0
"""Value used for the cells of columns and rows added by :meth:`DoubleDataFrame.expand`"""

ROW_NAME_PREFIX = "row_"
"""Prefix of the names given to the rows, the first row is ``row_0``"""


def row_name(index: int) -> str:
    """The name of the row at the given index."""
    return f"{ROW_NAME_PREFIX}{index}"


class DoubleDataFrame:
    """Data structure that handles float data in named rows and columns.

    The frame is eager and keeps all its data in memory.
    Transformations like :meth:`project`, :meth:`select`,
    :meth:`compute_column` and :meth:`expand` never modify
    the frame they are invoked on, they return a new frame instead.
    The only methods that change the frame in place are
    :meth:`set_value` and :meth:`extend`.
    """

    def __init__(
        self, column_names: Sequence[str], data: Iterable[Sequence[float]]
    ) -> None:
        """
        :param column_names: The names of the columns, in order.
        :param data: The rows of the frame, each row must have
                     exactly one value for each column.
        """
        self._columns: list[str] = []
        self._index: dict[str, int] = {}
        for name in column_names:
            if name in self._index:
                raise DuplicateNameError(f"Column {name!r} is repeated")
            self._index[name] = len(self._columns)
            self._columns.append(name)

        width = len(self._columns)
        self._rows: list[list[float]] = []
        for rowidx, row in enumerate(data):
            if len(row) != width:
                raise ShapeMismatchError(
                    f"Row {rowidx} has {len(row)} values, but there are {width} columns"
                )
            self._rows.append([float(value) for value in row])

    @classmethod
    def from_frame(cls, other: "DoubleDataFrame") -> Self:
        """Create a new frame with a copy of the data of another frame.

        The new frame shares no state with ``other``,
        changing one of the two won't affect the other.
        """
        return cls(other._columns, other._rows)

    @classmethod
    def from_vectors(
        cls,
        vectors: Sequence[DataVector],
        orientation: Literal["rows", "columns"],
    ) -> Self:
        """Create a frame from a list of vectors.

        :param vectors: The vectors holding the data.
        :param orientation: ``"rows"`` if each vector is a row
                            of the new frame, ``"columns"`` if
                            each vector is a column.
        """
        if orientation == "rows":
            return cls.from_rows(vectors)
        elif orientation == "columns":
            return cls.from_columns(vectors)
        raise ValueError(
            f"Invalid orientation {orientation!r}, expected 'rows' or 'columns'"
        )

    @classmethod
    def from_rows(
        cls, rows: Sequence[DataVector], column_names: Sequence[str] | None = None
    ) -> Self:
        """Create a frame where each vector becomes a row.

        The column names are those of the entries of the first vector,
        the values of all the vectors are taken in positional order,
        so all vectors are expected to have entries in the same order.

        As an empty list of rows has no entries to take the column names from,
        ``column_names`` can be provided to set the columns explicitly.

        >>> row = DataVector("row_0", ["a", "b"], [1, 2])
        >>> DoubleDataFrame.from_rows([row, row]).to_pydict()
        {'a': [1.0, 1.0], 'b': [2.0, 2.0]}
        >>> DoubleDataFrame.from_rows([], column_names=["a", "b"]).column_names
        ['a', 'b']
        """
        if column_names is None:
            column_names = rows[0].entry_names() if rows else []
        return cls(column_names, [row.get_values() for row in rows])

    @classmethod
    def from_columns(cls, columns: Sequence[DataVector]) -> Self:
        """Create a frame where each vector becomes a column.

        The name of each vector becomes the name of the column
        and all vectors must have the same number of entries.

        >>> a = DataVector("a", ["row_0", "row_1"], [1, 3])
        >>> b = DataVector("b", ["row_0", "row_1"], [2, 4])
        >>> DoubleDataFrame.from_columns([a, b]).to_pylist()
        [[1.0, 2.0], [3.0, 4.0]]
        """
        lengths = {len(column) for column in columns}
        if len(lengths) > 1:
            sizes = ", ".join(f"{column.name}={len(column)}" for column in columns)
            raise ShapeMismatchError(f"Columns have different lengths: {sizes}")

        values = [column.get_values() for column in columns]
        num_rows = lengths.pop() if lengths else 0
        data = [[colvalues[rowidx] for colvalues in values] for rowidx in range(num_rows)]
        return cls([column.name for column in columns], data)

    @classmethod
    def from_arrow(cls, table: pa.Table | pa.RecordBatch) -> Self:
        """Create a frame from a :class:`pyarrow.Table` or :class:`pyarrow.RecordBatch`.

        All columns are cast to ``float64``, columns that can't
        be cast will lead to a :class:`pyarrow.ArrowInvalid` error.
        The frame doesn't support missing values, so columns
        containing nulls are refused.

        >>> import pyarrow as pa
        >>> DoubleDataFrame.from_arrow(pa.table({"a": [1, 2], "b": [0.5, 1.5]})).to_pydict()
        {'a': [1.0, 2.0], 'b': [0.5, 1.5]}
        """
        columns_data = []
        for name, column in zip(table.column_names, table.columns):
            if column.null_count:
                raise NullValueError(
                    f"Column {name!r} contains {column.null_count} null values"
                )
            columns_data.append(pc.cast(column, pa.float64()).to_pylist())

        logger.debug(
            f"Loading {table.num_rows} rows and {table.num_columns} columns from arrow"
        )
        return cls(table.column_names, list(zip(*columns_data)))

    def copy(self) -> Self:
        """A copy of the frame that shares no state with it."""
        return self.from_frame(self)

    @property
    def num_rows(self) -> int:
        """How many rows the frame has."""
        return len(self._rows)

    @property
    def num_columns(self) -> int:
        """How many columns the frame has.

        This is the number of column names, so a frame
        with columns but no rows still reports its columns.
        """
        return len(self._columns)

    @property
    def column_names(self) -> list[str]:
        """The names of the columns, in the order they were added."""
        return list(self._columns)

    def column_index(self, name: str) -> int:
        """The position of a column within the rows."""
        try:
            return self._index[name]
        except KeyError:
            raise UnknownNameError(f"Column {name!r} does not exist") from None

    def _check_row(self, row: int) -> None:
        if row < 0 or row >= len(self._rows):
            raise OutOfRangeError(
                f"Row index {row} out of range for a frame with {len(self._rows)} rows"
            )

    def get_value(self, row: int, column: str) -> float:
        """Get the value of a single cell.

        :param row: The index of the row, first row is 0.
        :param column: The name of the column.
        """
        self._check_row(row)
        return self._rows[row][self.column_index(column)]

    def set_value(self, row: int, column: str, value: float) -> None:
        """Change the value of a single cell in place.

        :param row: The index of the row, first row is 0.
        :param column: The name of the column.
        :param value: The new value of the cell.
        """
        self._check_row(row)
        colidx = self.column_index(column)
        self._rows[row][colidx] = float(value)

    def get_row(self, row: int) -> DataVector:
        """Export a row as a vector named ``row_N``.

        The entries of the vector are named after the columns.
        """
        self._check_row(row)
        return DataVector(row_name(row), self._columns, self._rows[row])

    def get_column(self, column: str) -> DataVector:
        """Export a column as a vector named after the column.

        The entries of the vector are named after the rows,
        ``row_0``, ``row_1``, etc...
        """
        colidx = self.column_index(column)
        return DataVector(
            column,
            [row_name(rowidx) for rowidx in range(len(self._rows))],
            [row[colidx] for row in self._rows],
        )

    def get_rows(self) -> list[DataVector]:
        """Export all rows as vectors."""
        return [self.get_row(rowidx) for rowidx in range(len(self._rows))]

    def get_columns(self) -> list[DataVector]:
        """Export all columns as vectors."""
        return [self.get_column(name) for name in self._columns]

    def expand(
        self,
        additional_rows: int,
        new_columns: Sequence[str],
        fill_value: float = DEFAULT_FILL_VALUE,
        inplace: bool = False,
    ) -> Self:
        """Add new columns and rows to the frame.

        New columns are appended after the existing ones
        and new rows after the existing ones. All the new cells
        are set to ``fill_value``.

        >>> df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
        >>> df.expand(1, ["c"]).to_pylist()
        [[1.0, 2.0, 0.0], [3.0, 4.0, 0.0], [0.0, 0.0, 0.0]]

        :param additional_rows: How many rows to add.
        :param new_columns: The names of the columns to add.
        :param fill_value: The value of the new cells.
        :param inplace: Grow this frame instead of returning
                        a grown copy of it.
        """
        target = self if inplace else self.copy()
        target.extend(additional_rows, new_columns, fill_value)
        return target

    def extend(
        self,
        additional_rows: int = 0,
        new_columns: Sequence[str] = (),
        fill_value: float = DEFAULT_FILL_VALUE,
    ) -> None:
        """Add new columns and rows to this frame, in place.

        See :meth:`expand` for the details. Arguments are validated
        before the frame is changed, so a failure leaves the frame untouched.
        """
        if additional_rows < 0:
            raise ValueError(f"Can't add a negative number of rows: {additional_rows}")

        if isinstance(new_columns, str):
            raise TypeError(
                f"Expected a list of column names, got the string {new_columns!r}"
            )
        new_columns = list(new_columns)
        seen: set[str] = set()
        for name in new_columns:
            if name in self._index or name in seen:
                raise DuplicateNameError(f"Column {name!r} is already defined")
            seen.add(name)

        fill_value = float(fill_value)
        for name in new_columns:
            self._index[name] = len(self._columns)
            self._columns.append(name)
        for row in self._rows:
            row.extend([fill_value] * len(new_columns))

        width = len(self._columns)
        self._rows.extend([fill_value] * width for _ in range(additional_rows))
        logger.debug(
            f"Extended frame with {additional_rows} rows and columns {new_columns}"
        )

    def project(self, columns: Iterable[str]) -> Self:
        """Return a new frame with only the requested columns.

        The columns are kept in the order they have in this frame,
        not in the order they were requested.

        >>> df = DoubleDataFrame(["a", "b", "c"], [[1, 2, 3]])
        >>> df.project(["c", "a"]).column_names
        ['a', 'c']
        """
        return ProjectTransform(columns).apply(self)

    def select(self, predicate: Callable[[DataVector], bool]) -> Self:
        """Return a new frame with only the rows matching a predicate.

        >>> df = DoubleDataFrame(["a"], [[1], [2], [3]])
        >>> df.select(lambda row: row["a"] >= 2).to_pydict()
        {'a': [2.0, 3.0]}

        :param predicate: A function receiving each row as a
                          :class:`DataVector` and returning
                          ``True`` for the rows to keep.
        """
        return SelectTransform(predicate).apply(self)

    def compute_column(
        self, name: str, function: Callable[[DataVector], float]
    ) -> Self:
        """Return a new frame with an additional column computed from each row.

        >>> df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
        >>> df.compute_column("c", lambda row: row["a"] + row["b"]).to_pydict()
        {'a': [1.0, 3.0], 'b': [2.0, 4.0], 'c': [3.0, 7.0]}

        :param name: The name of the new column.
        :param function: A function receiving each row as a
                         :class:`DataVector` and returning the
                         value of the new column for that row.
        """
        return ComputeColumnTransform(name, function).apply(self)

    def summarize(
        self,
        name: str,
        function: Callable[[float, float], float],
        initial: float | None = None,
    ) -> DataVector:
        """Reduce each column to a single value.

        The values of each column are combined from the first
        to the last row, so for a column ``[v0, v1, v2]`` the result
        is ``function(function(v0, v1), v2)``.

        >>> import operator
        >>> df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
        >>> df.summarize("sum", operator.add)
        DataVector('sum', {'a': 4.0, 'b': 6.0})

        :param name: The name of the resulting vector.
        :param function: The binary function combining two values.
        :param initial: If provided, the value the reduction starts from.
        """
        return SummarizeTransform(name, function, initial).apply(self)

    def to_pydict(self) -> dict[str, list[float]]:
        """The data of the frame as a ``{column_name: values}`` dictionary."""
        return {
            name: [row[colidx] for row in self._rows]
            for colidx, name in enumerate(self._columns)
        }

    def to_pylist(self) -> list[list[float]]:
        """The data of the frame as a list of rows."""
        return [list(row) for row in self._rows]

    def to_arrow(self) -> pa.Table:
        """The data of the frame as a :class:`pyarrow.Table` of ``float64`` columns."""
        return pa.table(
            {
                name: pa.array(values, type=pa.float64())
                for name, values in self.to_pydict().items()
            }
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DoubleDataFrame):
            return NotImplemented
        return self._columns == other._columns and self._rows == other._rows

    def __repr__(self) -> str:
        return f"DoubleDataFrame(columns={self._columns}, rows={len(self._rows)})"

    def __str__(self) -> str:
        return tabulate.tabulate(self)

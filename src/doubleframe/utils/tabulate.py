"""Format a dataframe into a text table for print.

The `tabulate` function takes a :class:`doubleframe.dataframe.DoubleDataFrame`
and formats it into a text table. Each row is labeled with its name,
values are formatted to 2 decimal places, and the number of rows
to display can be limited.
The function is used to display frames when they are printed.

Example:

    >>> from doubleframe import DoubleDataFrame
    >>> df = DoubleDataFrame(["Quantity", "Price"], [[8, 66.5], [8, 38.72], [7, 77.46]])
    >>> print(tabulate(df))
          | Quantity | Price
    ----- | -------- | -----
    row_0 | 8.00     | 66.50
    row_1 | 8.00     | 38.72
    row_2 | 7.00     | 77.46
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..dataframe import DoubleDataFrame


def tabulate(frame: "DoubleDataFrame", max_rows: int = 20) -> str:
    """Format a DoubleDataFrame into a text table.

    Will produce a string like::

              | Quantity | Price | Total
        ----- | -------- | ----- | ------
        row_0 | 8.00     | 66.50 | 532.00
        row_1 | 8.00     | 38.72 | 309.76
        row_2 | 7.00     | 77.46 | 542.22

    Rows after ``max_rows`` are not displayed,
    only their count is reported.
    """
    cols = [""] + frame.column_names
    rows = [
        [format_value(row.name)] + [format_value(v) for v in row.get_values()]
        for row in frame.get_rows()[:max_rows]
    ]

    colsizes = compute_max_colsize(cols, rows)
    header = [maketablerow(cols, colsizes=colsizes)]
    separator = [maketablerow(["-"] * len(cols), colsizes=colsizes, fillvalue="-")]
    textrows = [maketablerow(row, colsizes=colsizes) for row in rows]

    table = "\n".join(header + separator + textrows)
    if frame.num_rows > max_rows:
        table += f"\n... and {frame.num_rows - max_rows} more rows"
    return table


def compute_max_colsize(cols: list[str], rows: list[list[str]]) -> list[int]:
    """Compute the maximum size of each column in a table."""
    return [
        max([len(row[colidx]) for row in rows] + [len(cols[colidx])])
        for colidx, _ in enumerate(cols)
    ]


def maketablerow(cols: list[str], colsizes: list[int], fillvalue: str = " ") -> str:
    """Make a table row with the given column sizes."""
    return " | ".join(
        [col.ljust(colsizes[idx], fillvalue) for idx, col in enumerate(cols)]
    )


def format_value(v: Any) -> str:
    """Format a value to be printed in the table.

    Floats are formatted to 2 decimal places,
    anything else is converted to text and truncated if too long.
    """
    if isinstance(v, float):
        return f"{v:.2f}"

    v = str(v)
    if len(v) > 30:
        v = v[:27] + "..."
    return v

"""Named vectors of values exported from a dataframe.

Whenever a row or a column is extracted from a
:class:`doubleframe.dataframe.DoubleDataFrame` it is returned
as a :class:`DataVector`. The vector is a detached snapshot:
changing the frame afterwards does not change vectors
that were already exported, and vectors can't be changed at all.

A vector has a name and an ordered set of named entries:

>>> v = DataVector("row_0", ["a", "b"], [1, 2])
>>> v.name
'row_0'
>>> v["b"]
2.0
>>> v.entry_names()
['a', 'b']
>>> v.get_values()
[1.0, 2.0]
"""

from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from ..errors import DuplicateNameError, ShapeMismatchError, UnknownNameError


class DataVector(Mapping):
    """An immutable, named, ordered mapping of entry names to float values.

    Vectors behave as read-only dictionaries, the iteration order
    is always the order in which the entries were provided,
    which for rows is the order of the columns in the frame
    and for columns is the order of the rows.
    """

    __slots__ = ("_name", "_entries")

    def __init__(
        self, name: str, entry_names: Sequence[str], values: Sequence[float]
    ) -> None:
        """
        :param name: The name of the vector, like ``"row_0"`` or a column name.
        :param entry_names: The names of the entries, in order.
        :param values: The value of each entry, aligned to ``entry_names``.
        """
        if len(entry_names) != len(values):
            raise ShapeMismatchError(
                f"Vector {name!r} got {len(entry_names)} names and {len(values)} values"
            )

        entries: dict[str, float] = {}
        for entry_name, value in zip(entry_names, values):
            if entry_name in entries:
                raise DuplicateNameError(
                    f"Entry {entry_name!r} is repeated in vector {name!r}"
                )
            entries[entry_name] = float(value)

        self._name = name
        self._entries = entries

    @property
    def name(self) -> str:
        """The name of the vector."""
        return self._name

    def __getitem__(self, entry_name: str) -> float:
        return self._entries[entry_name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def get_value(self, entry_name: str) -> float:
        """Get the value of an entry by name.

        Unlike ``vector.get(name)`` which returns ``None`` for
        missing entries, this raises :class:`UnknownNameError`.
        """
        try:
            return self._entries[entry_name]
        except KeyError:
            raise UnknownNameError(
                f"Entry {entry_name!r} does not exist in vector {self._name!r}"
            ) from None

    def entry_names(self) -> list[str]:
        """The names of the entries, in order."""
        return list(self._entries)

    def get_values(self) -> list[float]:
        """The values of the entries, in order."""
        return list(self._entries.values())

    def as_dict(self) -> dict[str, float]:
        """A copy of the entries as a plain dictionary."""
        return dict(self._entries)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DataVector):
            return NotImplemented
        # Order of the entries matters, so compare the items lists.
        return self._name == other._name and list(self._entries.items()) == list(
            other._entries.items()
        )

    def __repr__(self) -> str:
        return f"DataVector({self._name!r}, {self._entries!r})"

"""Base classes and interfaces for frame transforms

Every transformation that derives new data from a
:class:`doubleframe.dataframe.DoubleDataFrame` is implemented
as a :class:`FrameTransform`. The frame methods like
:meth:`doubleframe.dataframe.DoubleDataFrame.project` are
thin wrappers that build the transform and apply it.
"""

import abc
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ..dataframe import DoubleDataFrame


class FrameTransform(abc.ABC):
    """A transformation of the data of a frame.

    Transforms receive a frame and return the result
    of the transformation, usually a new frame.
    They are expected to read the frame exclusively
    through its accessors, like :meth:`get_rows` and
    :meth:`get_columns`, and to build the result
    through one of the frame construction paths,
    so that the result never shares state with the input.

    For example a transform that keeps only the first row
    could be implemented as::

        class HeadTransform(FrameTransform):
            def apply(self, frame):
                return frame.from_rows(
                    frame.get_rows()[:1], column_names=frame.column_names
                )

            def __str__(self):
                return "HeadTransform()"
    """

    @abc.abstractmethod
    def apply(self, frame: "DoubleDataFrame") -> Any:
        """Apply the transformation to a frame and return the result."""
        ...

    @abc.abstractmethod
    def __str__(self) -> str:
        """Human readable representation of the transform."""
        ...

    def __repr__(self) -> str:
        return str(self)

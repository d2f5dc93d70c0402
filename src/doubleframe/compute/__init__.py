"""The DoubleFrame Compute Transforms

The compute module defines how the data of a frame
is transformed to derive new data.

Each transformation is implemented as a
:class:`doubleframe.compute.base.FrameTransform`,
which receives a frame and eagerly computes its result.
A transform never modifies the frame it's applied to,
the result is always built as a new frame (or vector)
that shares no data with the original one::

    (DoubleDataFrame)-->Transform-->(new DoubleDataFrame)

The transforms themselves are in charge of their execution,
this keeps the behavior near to the transform and thus makes easy to
know how a transform is actually executed without having to look around too much.

Transforms are usually applied through the methods of
:class:`doubleframe.dataframe.DoubleDataFrame`, but can be used directly:

>>> from doubleframe import DoubleDataFrame
>>> from doubleframe.compute import SelectTransform
>>> data = DoubleDataFrame(["n_legs", "n_arms"], [[2, 2], [4, 0], [5, 0], [100, 0]])
>>> # SELECT * FROM data WHERE n_legs >= 5
>>> SelectTransform(lambda row: row["n_legs"] >= 5).apply(data).to_pydict()
{'n_legs': [5.0, 100.0], 'n_arms': [0.0, 0.0]}
"""

from .aggregate import SummarizeTransform
from .base import FrameTransform
from .filtering import SelectTransform
from .selection import ComputeColumnTransform, ProjectTransform

__all__ = (
    "FrameTransform",
    "ProjectTransform",
    "ComputeColumnTransform",
    "SelectTransform",
    "SummarizeTransform",
)

import operator

import pytest

from doubleframe import DataVector, DoubleDataFrame
from doubleframe.compute import SummarizeTransform
from doubleframe.errors import EmptyFrameError

TEST_DATA = DoubleDataFrame(
    ["n_employees", "revenue"], [[10, 100], [15, 250], [8, 50], [12, 75]]
)


@pytest.mark.parametrize(
    "function, expected",
    [
        (operator.add, [45.0, 475.0]),
        (min, [8.0, 50.0]),
        (max, [15.0, 250.0]),
        (operator.mul, [14400.0, 93750000.0]),
    ],
)
def test_summarize(function, expected):
    result = TEST_DATA.summarize("result", function)
    assert result.name == "result"
    assert result.entry_names() == ["n_employees", "revenue"]
    assert result.get_values() == expected


def test_summarize_scenario():
    df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
    assert df.summarize("sum", lambda x, y: x + y) == DataVector("sum", ["a", "b"], [4, 6])


def test_summarize_is_a_left_fold():
    df = DoubleDataFrame(["a"], [[100], [10], [1]])
    # (100 - 10) - 1, a right fold would give 100 - (10 - 1)
    assert df.summarize("diff", operator.sub)["a"] == 89.0


def test_summarize_single_row_is_identity():
    df = DoubleDataFrame(["a", "b"], [[3, 7]])

    def fail(x, y):
        raise AssertionError("should not be called")

    assert df.summarize("result", fail).get_values() == [3.0, 7.0]


def test_summarize_with_initial():
    assert TEST_DATA.summarize("total", operator.add, initial=1000).get_values() == [
        1045.0,
        1475.0,
    ]


def test_summarize_empty_frame():
    df = DoubleDataFrame(["a"], [])
    with pytest.raises(EmptyFrameError):
        df.summarize("sum", operator.add)
    assert df.summarize("sum", operator.add, initial=0).as_dict() == {"a": 0.0}


def test_summarize_no_columns():
    df = DoubleDataFrame([], [[], []])
    assert len(df.summarize("sum", operator.add)) == 0


def test_summarize_str():
    transform = SummarizeTransform("total", max)
    assert str(transform) == "SummarizeTransform('total', builtins.max, initial=None)"
    assert repr(transform) == str(transform)


def test_summarize_no_rows_and_no_columns():
    df = DoubleDataFrame.from_rows([])
    result = df.summarize("sum", operator.add)
    assert result == DataVector("sum", [], [])

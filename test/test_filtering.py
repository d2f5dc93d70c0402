import pytest

from doubleframe import DoubleDataFrame
from doubleframe.compute import SelectTransform


@pytest.fixture
def mock_data():
    return DoubleDataFrame(["values", "weights"], [[1, 10], [2, 20], [3, 30], [4, 40]])


def is_even(row):
    return row["values"] % 2 == 0


def test_select(mock_data):
    result = mock_data.select(lambda row: row["values"] > 2)
    assert result.to_pydict() == {"values": [3.0, 4.0], "weights": [30.0, 40.0]}


def test_select_keeps_relative_order(mock_data):
    result = mock_data.select(is_even)
    assert result.get_column("values").get_values() == [2.0, 4.0]


def test_select_all(mock_data):
    result = mock_data.select(lambda row: True)
    assert result == mock_data
    assert result is not mock_data


def test_select_none_keeps_columns(mock_data):
    result = mock_data.select(lambda row: False)
    assert result.num_rows == 0
    assert result.column_names == ["values", "weights"]


def test_select_does_not_change_receiver(mock_data):
    mock_data.select(is_even)
    assert mock_data.num_rows == 4


def test_select_receives_row_vectors(mock_data):
    seen = []

    def record(row):
        seen.append((row.name, row.entry_names()))
        return True

    mock_data.select(record)
    assert seen == [(f"row_{i}", ["values", "weights"]) for i in range(4)]


def test_select_renumbers_rows(mock_data):
    result = mock_data.select(is_even)
    assert [row.name for row in result.get_rows()] == ["row_0", "row_1"]


def test_select_empty_frame():
    df = DoubleDataFrame(["a"], [])
    assert df.select(lambda row: True).column_names == ["a"]


def test_select_str():
    assert str(SelectTransform(is_even)) == "SelectTransform(test_filtering.is_even)"

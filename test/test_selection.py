import operator

import pytest

from doubleframe import DoubleDataFrame
from doubleframe.compute import ComputeColumnTransform, ProjectTransform
from doubleframe.errors import DuplicateNameError, UnknownNameError


@pytest.fixture
def mock_data():
    """Create a mock frame for testing."""
    return DoubleDataFrame(["a", "b", "c"], [[1, 4, 7], [2, 5, 8], [3, 6, 9]])


def test_project_str():
    assert str(ProjectTransform(["a", "b"])) == "ProjectTransform(columns=['a', 'b'])"


def test_project_columns(mock_data):
    result = mock_data.project(["a", "b"])
    assert result.num_columns == 2
    assert result.column_names == ["a", "b"]
    assert result.to_pydict() == {"a": [1.0, 2.0, 3.0], "b": [4.0, 5.0, 6.0]}


def test_project_single_column():
    df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
    result = df.project(["b"])
    assert result.column_names == ["b"]
    assert result.get_column("b").get_values() == [2.0, 4.0]


def test_project_keeps_original_order(mock_data):
    result = mock_data.project(["c", "a"])
    assert result.column_names == ["a", "c"]
    assert result.to_pydict() == {"a": [1.0, 2.0, 3.0], "c": [7.0, 8.0, 9.0]}


def test_project_collapses_duplicates(mock_data):
    result = mock_data.project(["b", "b", "a"])
    assert result.column_names == ["a", "b"]


def test_project_identity(mock_data):
    assert mock_data.project(mock_data.column_names) == mock_data


def test_project_unknown_column(mock_data):
    with pytest.raises(UnknownNameError, match="'d'"):
        mock_data.project(["a", "d"])


def test_project_does_not_alias(mock_data):
    result = mock_data.project(["a"])
    result.set_value(0, "a", 100.0)
    assert mock_data.get_value(0, "a") == 1.0


def test_project_frame_without_rows():
    df = DoubleDataFrame(["a", "b"], [])
    result = df.project(["b"])
    assert result.column_names == ["b"]
    assert result.num_rows == 0


def test_compute_column():
    df = DoubleDataFrame(["a", "b"], [[1, 2], [3, 4]])
    result = df.compute_column("c", lambda row: row.get("a") + row.get("b"))
    assert result.column_names == ["a", "b", "c"]
    assert result.get_column("c").get_values() == [3.0, 7.0]


def test_compute_column_does_not_change_receiver(mock_data):
    mock_data.compute_column("d", lambda row: 1.0)
    assert mock_data.column_names == ["a", "b", "c"]


def test_compute_column_receives_rows_in_order(mock_data):
    seen = []

    def record(row):
        seen.append(row.name)
        return row["a"]

    mock_data.compute_column("d", record)
    assert seen == ["row_0", "row_1", "row_2"]


def test_compute_column_coerces_to_float(mock_data):
    result = mock_data.compute_column("d", lambda row: int(row["a"]) * 2)
    assert result.get_column("d").get_values() == [2.0, 4.0, 6.0]
    assert all(isinstance(v, float) for v in result.get_column("d").get_values())


def test_compute_column_existing_name(mock_data):
    with pytest.raises(DuplicateNameError):
        mock_data.compute_column("a", lambda row: 0.0)


def test_compute_column_frame_without_rows():
    df = DoubleDataFrame(["a"], [])
    result = df.compute_column("b", lambda row: row["a"])
    assert result.column_names == ["a", "b"]
    assert result.num_rows == 0


def test_compute_column_error_propagates(mock_data):
    with pytest.raises(ZeroDivisionError):
        mock_data.compute_column("d", lambda row: row["a"] / 0)


def test_compute_column_str():
    transform = ComputeColumnTransform("total", operator.itemgetter("a"))
    assert str(transform) == "ComputeColumnTransform('total', operator.itemgetter)"


def test_project_rejects_single_string():
    df = DoubleDataFrame(["a", "b", "ab"], [[1, 2, 3]])
    with pytest.raises(TypeError, match="'ab'"):
        df.project("ab")
    assert df.project(["ab"]).column_names == ["ab"]

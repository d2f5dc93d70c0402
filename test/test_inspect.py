import functools
import operator

from doubleframe import DoubleDataFrame
from doubleframe.utils.inspect import get_qualname


def double(value):
    return value * 2


class Scaler:
    def __init__(self, factor):
        self.factor = factor

    def __call__(self, row):
        return row["a"] * self.factor

    def scale(self, row):
        return row["a"] * self.factor

    @classmethod
    def create(cls):
        return cls(1)


def test_function():
    assert get_qualname(double) == "test_inspect.double"


def test_lambda():
    assert get_qualname(lambda x: x) == "test_inspect.test_lambda.<locals>.<lambda>"


def test_builtin():
    assert get_qualname(max) == "builtins.max"
    assert get_qualname(operator.add) == "_operator.add"


def test_methods():
    assert get_qualname(Scaler(2).scale) == "test_inspect.Scaler.scale"
    assert get_qualname(Scaler.create) == "test_inspect.Scaler.create"
    assert get_qualname(DoubleDataFrame.get_row) == "doubleframe.dataframe.dataframe.DoubleDataFrame.get_row"


def test_callable_objects():
    assert get_qualname(Scaler(2)) == "test_inspect.Scaler"
    assert get_qualname(functools.partial(double)) == "functools.partial"


def test_class():
    assert get_qualname(Scaler) == "test_inspect.Scaler"


def test_module():
    assert get_qualname(operator) == "operator"

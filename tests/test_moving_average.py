from collections import deque

import pytest

from trendkit.moving_average import MovingAverage, MovingAverageConstructor


class Sma(MovingAverage):
    def __init__(self, length, initial_value):
        self._length = length
        self._window = deque([initial_value] * length, maxlen=length)
        self._sum = initial_value * length

    def next(self, value):
        oldest = self._window[0]
        self._window.append(value)
        self._sum += value - oldest
        return self._sum / self._length


class Lag(MovingAverage):
    def __init__(self, length, initial_value):
        self._previous = initial_value

    def next(self, value):
        previous, self._previous = self._previous, value
        return previous


class Ma(MovingAverageConstructor):
    KINDS = {"sma": Sma, "lag": Lag}

    def __init__(self, kind, period):
        self.kind = kind
        self.period = period

    def init(self, initial_value):
        return self.KINDS[self.kind](self.period, initial_value)

    def ma_period(self):
        return self.period

    def ma_type(self):
        return self.kind


def test_init_builds_working_instance():
    instance = Ma("sma", 2).init(1.0)
    assert isinstance(instance, MovingAverage)
    assert MovingAverage.over(instance, [1.0, 2.0, 3.0]) == [1.0, 1.5, 2.5]


def test_period_and_type():
    ma = Ma("lag", 7)
    assert ma.ma_period() == 7
    assert ma.ma_type() == "lag"
    assert MovingAverageConstructor.is_similar_to(ma, Ma("lag", 3))


def test_is_similar_to():
    assert MovingAverageConstructor.is_similar_to(Ma("sma", 2), Ma("sma", 30))
    assert not MovingAverageConstructor.is_similar_to(Ma("sma", 2), Ma("lag", 2))


def test_instances_are_methods():
    instance = Ma("lag", 1).init(5.0)
    assert MovingAverage.__call__(instance, 6.0) == 5.0
    assert MovingAverage.name(instance) == "Lag"


def test_constructor_is_abstract():
    with pytest.raises(TypeError):
        MovingAverageConstructor()


def test_moving_average_is_abstract():
    with pytest.raises(TypeError):
        MovingAverage()
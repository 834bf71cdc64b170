from collections import deque

import pytest

from trendkit.errors import WrongMethodParametersError
from trendkit.method import Method, WithHistory, WithLastValue


class Sma(Method):
    def __init__(self, length, initial_value):
        if length < 1:
            raise WrongMethodParametersError()
        self._length = length
        self._window = deque([initial_value] * length, maxlen=length)
        self._sum = initial_value * length

    def next(self, value):
        oldest = self._window[0]
        self._window.append(value)
        self._sum += value - oldest
        return self._sum / self._length


class Lag(Method):
    def __init__(self, parameters, initial_value):
        self._previous = initial_value

    def next(self, value):
        previous, self._previous = self._previous, value
        return previous


DATA = [1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0]
EXPECTED = [1.0, 1.5, 2.5, 3.5, 4.5, 5.5, 6.5, 7.5, 8.5, 9.5]


def test_over_matches_documented_example():
    assert Method.over(Sma(2, DATA[0]), DATA) == EXPECTED


@pytest.mark.parametrize("length", [1, 5, 100])
def test_over_keeps_length(length):
    assert len(Method.over(Sma(length, DATA[0]), DATA)) == len(DATA)


def test_call_is_next():
    wrapped = WithHistory(Sma(3, 1.0))
    plain = Sma(3, 1.0)
    called = [wrapped(x) for x in DATA]
    assert called == [plain.next(x) for x in DATA]
    assert list(wrapped.history) == called


def test_apply_in_place():
    values = list(DATA)
    Method.apply(Sma(2, values[0]), values)
    assert values == EXPECTED


def test_new_over():
    assert Sma.new_over(2, DATA) == WithHistory(Sma(2, DATA[0])).over(DATA)
    assert Sma.new_over(2, DATA) == EXPECTED


def test_new_over_empty_creates_nothing():
    assert Sma.new_over(0, []) == Method.over(Sma(1, 0.0), [])
    assert Sma.new_over(0, []) == []


def test_new_over_propagates_error():
    new_over = Method.new_over.__func__
    with pytest.raises(WrongMethodParametersError):
        new_over(Sma, 0, DATA)


def test_new_apply():
    values = list(DATA)
    Sma.new_apply(2, values)
    assert values == Method.over(Sma(2, DATA[0]), DATA)
    assert values == EXPECTED


def test_new_apply_empty_leaves_sequence():
    values = []
    new_apply = Method.new_apply.__func__
    new_apply(Sma, 0, values)
    assert values == []
    assert values == Method.over(Sma(1, 0.0), [])


def test_lag_outputs_previous_inputs():
    assert Method.over(Lag(None, 0.0), DATA) == [0.0] + DATA[:-1]


def test_with_history_get():
    wrapped = WithHistory(Lag(None, 0.0))
    outputs = Method.over(wrapped, DATA)
    assert [WithHistory.get(wrapped, i) for i in range(len(DATA))] == outputs[::-1]
    assert list(wrapped.history) == outputs
    assert len(wrapped) == len(DATA)


def test_with_history_constructor():
    with_history = Method.with_history.__func__
    wrapped = with_history(Lag, None, 0.0)
    assert isinstance(wrapped, WithHistory)
    assert Method.over(wrapped, [5.0, 6.0]) == [0.0, 5.0]


def test_with_history_out_of_range():
    wrapped = WithHistory(Lag(None, 0.0))
    assert WithHistory.get(wrapped, 0) is None
    assert WithHistory.next(wrapped, 1.0) == 0.0
    assert WithHistory.get(wrapped, 0) == 0.0
    assert WithHistory.get(wrapped, 1) is None
    assert WithHistory.get(wrapped, -1) is None


def test_with_last_value_peek():
    wrapped = WithLastValue(Sma(2, 5.0), 5.0)
    assert WithLastValue.peek(wrapped) == 5.0
    result = WithLastValue.next(wrapped, 7.0)
    assert result == 6.0
    assert WithLastValue.peek(wrapped) == result


def test_with_last_value_constructor():
    with_last_value = Method.with_last_value.__func__
    wrapped = with_last_value(Sma, 2, 5.0)
    assert isinstance(wrapped, WithLastValue)
    assert WithLastValue.peek(wrapped) == 5.0


def test_with_last_value_feeds_initial_value():
    wrapped = WithLastValue(Lag(None, 3.0), 4.0)
    assert wrapped.peek() == 3.0
    assert wrapped.next(9.0) == 4.0


def test_name():
    assert Method.name(Sma(2, 1.0)) == "Sma"
    assert Method.name(WithHistory(Lag(None, 0.0))) == "WithHistory"


def test_method_is_abstract():
    with pytest.raises(TypeError):
        Method()
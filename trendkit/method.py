"""Stateful calculations over timeseries and wrappers that keep their output."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, MutableSequence, Sequence
from typing import Any, Generic, TypeVar

I = TypeVar("I")
O = TypeVar("O")


class Method(ABC, Generic[I, O]):
    """A stateful calculation that turns each input value into an output value.

    Concrete methods are created as ``cls(parameters, initial_value)``.
    There is no reset: create a new instance to start over.
    """

    @abstractmethod
    def next(self, value: I) -> O:
        """Produce the next output value for the input ``value``."""

    def __call__(self, value: I) -> O:
        return self.next(value)

    def over(self, inputs: Iterable[I]) -> list[O]:
        """Feed every input in turn; the result has one output per input."""
        return [self.next(value) for value in inputs]

    def apply(self, sequence: MutableSequence[Any]) -> None:
        """Replace every value of ``sequence`` with the method's output for it."""
        sequence[:] = [self.next(value) for value in sequence]

    @classmethod
    def new_over(cls, parameters: Any, inputs: Iterable[Any]) -> list[Any]:
        """Create a method from the first input and feed it all the inputs.

        An empty input gives an empty list without creating a method.
        """
        values = list(inputs)
        if not values:
            return []
        return cls(parameters, values[0]).over(values)

    @classmethod
    def new_apply(cls, parameters: Any, sequence: MutableSequence[Any]) -> None:
        """Create a method from the first value and apply it to ``sequence``."""
        if not sequence:
            return
        cls(parameters, sequence[0]).apply(sequence)

    @classmethod
    def with_history(cls, parameters: Any, initial_value: Any) -> WithHistory:
        """Create the method wrapped so that every output is remembered."""
        return WithHistory(cls(parameters, initial_value))

    @classmethod
    def with_last_value(cls, parameters: Any, initial_value: Any) -> WithLastValue:
        """Create the method wrapped so that its last output can be peeked."""
        return WithLastValue(cls(parameters, initial_value), initial_value)

    def name(self) -> str:
        """Return the name of the method."""
        return type(self).__name__


class WithHistory(Method[Any, Any]):
    """Wraps a method and remembers every value it produced."""

    def __init__(self, instance: Method) -> None:
        self.instance = instance
        self._history: list[Any] = []

    def next(self, value: Any) -> Any:
        result = self.instance.next(value)
        self._history.append(result)
        return result

    def get(self, index: int) -> Any | None:
        """Return the output ``index`` steps back from the newest, or ``None``."""
        if index < 0 or index >= len(self._history):
            return None
        return self._history[-1 - index]

    @property
    def history(self) -> Sequence[Any]:
        """All produced values, oldest first."""
        return tuple(self._history)

    def __len__(self) -> int:
        return len(self._history)


class WithLastValue(Method[Any, Any]):
    """Wraps a method and keeps the last value it produced.

    The wrapped method is fed ``initial_value`` once on creation, so a value
    can be peeked right away.
    """

    def __init__(self, instance: Method, initial_value: Any) -> None:
        self.instance = instance
        self._last_value = instance.next(initial_value)

    def next(self, value: Any) -> Any:
        self._last_value = self.instance.next(value)
        return self._last_value

    def peek(self) -> Any:
        """Return the last produced value."""
        return self._last_value
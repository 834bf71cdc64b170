"""Operations over sequences of values or candles."""

from __future__ import annotations

import math
from collections.abc import Iterable, MutableSequence, Sequence
from functools import reduce
from operator import add
from typing import Any, TypeVar

from .method import Method
from .ohlcv import to_ohlcv

T = TypeVar("T")


def validate_values(values: Iterable[float]) -> bool:
    """Check that every value is finite."""
    return all(math.isfinite(value) for value in values)


def validate_candles(candles: Iterable[Any]) -> bool:
    """Check that every candle is valid."""
    return all(to_ohlcv(candle).validate() for candle in candles)


def call(sequence: Iterable[Any], method: Method) -> list[Any]:
    """Feed every value to ``method`` and return its outputs."""
    return method.over(sequence)


def apply(sequence: MutableSequence[Any], method: Method) -> None:
    """Replace every value of ``sequence`` with the output of ``method``."""
    method.apply(sequence)


def initial_value(sequence: Sequence[T]) -> T | None:
    """Return the first value, or ``None`` when the sequence is empty."""
    return sequence[0] if sequence else None


def collapse_timeframe(
    sequence: Sequence[T], size: int, continuous: bool
) -> list[T]:
    """Merge every ``size`` consecutive candles into one.

    With ``continuous`` every overlapping run of ``size`` candles is merged;
    otherwise runs start every ``size`` candles.
    """
    if size < 1:
        raise ValueError(f"window size must be positive, got {size}")
    step = 1 if continuous else size
    return [
        reduce(add, sequence[start : start + size])
        for start in range(0, len(sequence) - size + 1, step)
    ]
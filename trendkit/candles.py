"""A simple candlestick value type."""

from __future__ import annotations

import math
import struct
from collections.abc import Sequence
from typing import Any

from .ohlcv import OHLCV, to_ohlcv


def _bits(value: float) -> int:
    return struct.unpack("<Q", struct.pack("<d", value))[0]


def _fmax(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return max(a, b)


def _fmin(a: float, b: float) -> float:
    if math.isnan(a):
        return b
    if math.isnan(b):
        return a
    return min(a, b)


class Candle(OHLCV):
    """An immutable open-high-low-close-volume candle.

    Every value defaults to ``0.0``. Equality compares the exact bit
    patterns of the values, so two candles holding NaN in the same place
    are equal while ``0.0`` and ``-0.0`` are not.
    """

    __slots__ = ("_open", "_high", "_low", "_close", "_volume")

    def __init__(
        self,
        open: float = 0.0,
        high: float = 0.0,
        low: float = 0.0,
        close: float = 0.0,
        volume: float = 0.0,
    ) -> None:
        self._open = float(open)
        self._high = float(high)
        self._low = float(low)
        self._close = float(close)
        self._volume = float(volume)

    @classmethod
    def from_ohlcv(cls, src: Any) -> Candle:
        """Copy the values of any OHLCV object or 5-value row."""
        src = to_ohlcv(src)
        return cls(src.open(), src.high(), src.low(), src.close(), src.volume())

    @classmethod
    def from_tuple(cls, values: Sequence[float]) -> Candle:
        """Build from ``(open, high, low, close)`` or ``(open, high, low, close, volume)``.

        A 4-value tuple leaves the volume as NaN.
        """
        values = tuple(values)
        if len(values) == 4:
            return cls(*values, math.nan)
        if len(values) == 5:
            return cls(*values)
        raise ValueError(f"a candle needs 4 or 5 values, got {len(values)}")

    def open(self) -> float:
        return self._open

    def high(self) -> float:
        return self._high

    def low(self) -> float:
        return self._low

    def close(self) -> float:
        return self._close

    def volume(self) -> float:
        return self._volume

    def as_tuple(self) -> tuple[float, float, float, float, float]:
        return (self._open, self._high, self._low, self._close, self._volume)

    def replace(self, **changes: float) -> Candle:
        """Return a copy with some values changed."""
        fields = dict(
            zip(("open", "high", "low", "close", "volume"), self.as_tuple())
        )
        unknown = set(changes) - fields.keys()
        if unknown:
            raise TypeError(f"unknown candle fields: {sorted(unknown)}")
        fields.update(changes)
        return Candle(**fields)

    def __add__(self, other: Any) -> Candle:
        """Merge a following period into this candle."""
        try:
            rhs = to_ohlcv(other)
        except (TypeError, ValueError):
            return NotImplemented
        return Candle(
            open=self._open,
            high=_fmax(self._high, rhs.high()),
            low=_fmin(self._low, rhs.low()),
            close=rhs.close(),
            volume=self._volume + rhs.volume(),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Candle):
            return NotImplemented
        return all(
            _bits(a) == _bits(b) for a, b in zip(self.as_tuple(), other.as_tuple())
        )

    def __hash__(self) -> int:
        return hash(tuple(_bits(x) for x in self.as_tuple()))

    def __repr__(self) -> str:
        return (
            f"Candle(open={self._open!r}, high={self._high!r}, low={self._low!r}, "
            f"close={self._close!r}, volume={self._volume!r})"
        )


Candlestick = Candle
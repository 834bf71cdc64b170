"""Open-high-low-close-volume data access and derived prices."""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from collections.abc import Sequence
from enum import Enum
from typing import Any

from .errors import SourceParseError


class Source(Enum):
    """A common part of a candle."""

    CLOSE = "close"
    OPEN = "open"
    HIGH = "high"
    LOW = "low"
    HL2 = "hl2"
    TP = "tp"
    VOLUME = "volume"
    VOLUMED_PRICE = "volumed_price"

    @classmethod
    def parse(cls, text: str) -> Source:
        """Parse a case-insensitive name; ``hlc3`` is an alias for ``tp``."""
        key = text.lower().strip()
        if key == "hlc3":
            return cls.TP
        try:
            return cls(key)
        except ValueError:
            raise SourceParseError(key) from None

    def __str__(self) -> str:
        return self.value


class OHLCV(ABC):
    """A period of timeseries data: open, high, low, close and volume."""

    @abstractmethod
    def open(self) -> float:
        """Open value of the period."""

    @abstractmethod
    def high(self) -> float:
        """Highest value of the period."""

    @abstractmethod
    def low(self) -> float:
        """Lowest value of the period."""

    @abstractmethod
    def close(self) -> float:
        """Close value of the period."""

    @abstractmethod
    def volume(self) -> float:
        """Volume of the period."""

    def tp(self) -> float:
        """Typical price: (high + low + close) / 3."""
        return (self.high() + self.low() + self.close()) / 3.0

    def hl2(self) -> float:
        return (self.high() + self.low()) * 0.5

    def ohlc4(self) -> float:
        return (self.high() + self.low() + self.close() + self.open()) * 0.25

    def clv(self) -> float:
        """Close location value; zero when high equals low."""
        high, low = self.high(), self.low()
        if high == low:
            return 0.0
        return (2.0 * self.close() - low - high) / (high - low)

    def tr(self, prev_candle: Any) -> float:
        """True range against the previous candle."""
        return self.tr_close(to_ohlcv(prev_candle).close())

    def tr_close(self, prev_close: float) -> float:
        """True range against the previous candle's close."""
        return max(self.high(), prev_close) - min(self.low(), prev_close)

    def validate(self) -> bool:
        """Check that the candle's values are consistent, positive and finite."""
        o, h, l, c, v = self.open(), self.high(), self.low(), self.close(), self.volume()
        return (
            not (c > h or c < l or h < l)
            and c > 0.0
            and o > 0.0
            and h > 0.0
            and l > 0.0
            and all(math.isfinite(x) for x in (c, o, h, l))
            and (math.isnan(v) or v >= 0.0)
        )

    def source(self, source: Source | str) -> float:
        """Return the value of the given source."""
        if isinstance(source, str):
            source = Source.parse(source)
        getters = {
            Source.CLOSE: self.close,
            Source.OPEN: self.open,
            Source.HIGH: self.high,
            Source.LOW: self.low,
            Source.TP: self.tp,
            Source.HL2: self.hl2,
            Source.VOLUME: self.volume,
            Source.VOLUMED_PRICE: self.volumed_price,
        }
        return getters[source]()

    def volumed_price(self) -> float:
        return self.tp() * self.volume()

    def is_rising(self) -> bool:
        return self.close() > self.open()

    def is_falling(self) -> bool:
        return self.close() < self.open()


class _RowOHLCV(OHLCV):
    """An ``(open, high, low, close, volume)`` row seen as OHLCV."""

    __slots__ = ("_row",)

    def __init__(self, row: Sequence[float]) -> None:
        self._row = tuple(float(x) for x in row)

    def open(self) -> float:
        return self._row[0]

    def high(self) -> float:
        return self._row[1]

    def low(self) -> float:
        return self._row[2]

    def close(self) -> float:
        return self._row[3]

    def volume(self) -> float:
        return self._row[4]

    def __repr__(self) -> str:
        return f"{type(self).__name__}{self._row!r}"


def to_ohlcv(value: Any) -> OHLCV:
    """Return ``value`` as OHLCV; accepts OHLCV objects and 5-value rows."""
    if isinstance(value, OHLCV):
        return value
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        if len(value) != 5:
            raise ValueError(f"an OHLCV row needs 5 values, got {len(value)}")
        return _RowOHLCV(value)
    raise TypeError(f"cannot use {value!r} as OHLCV")
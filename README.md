# trendkit

Building blocks for technical analysis of price series in Python.

trendkit provides the core pieces that indicators are built from:

- `trendkit.ohlcv`: the `OHLCV` interface (open, high, low, close, volume)
  with derived values such as typical price (`tp`), `hl2`, `ohlc4`, `clv`,
  true range (`tr`, `tr_close`), `volumed_price`, `is_rising`, `is_falling`
  and `validate`. `Source` picks one part of a candle, and `to_ohlcv` turns a
  5-value row `(open, high, low, close, volume)` into an `OHLCV` object.
- `trendkit.candles`: `Candle` (also available as `Candlestick`), an
  immutable candle value type.
- `trendkit.action`: `Action`, a trading signal. It is a buy or a sell with
  a strength from `0` to `255`, or no signal at all.
- `trendkit.method`: `Method`, the interface for step-by-step calculations
  over a series, with the `WithHistory` and `WithLastValue` wrappers.
- `trendkit.sequence`: functions that run a method over a sequence, validate
  values or candles, and merge candles into longer time frames.
- `trendkit.moving_average`: the `MovingAverage` and
  `MovingAverageConstructor` interfaces.
- `trendkit.errors`: the exceptions the package raises, all derived from
  `TrendkitError`.

The package has no dependencies beyond the standard library.

## Installation

```
pip install trendkit
```

To run the tests:

```
pip install "trendkit[test]"
pytest
```

## Candles

```python
from trendkit.candles import Candle
from trendkit.ohlcv import Source

candle = Candle.from_tuple((3.0, 5.0, 2.0, 4.0, 50.0))  # open, high, low, close, volume
print(candle.tp())                          # (5 + 2 + 4) / 3
print(candle.source(Source.parse("hl2")))   # 3.5
print(candle.source("hlc3"))                # same as Source.TP
print(candle.validate())                    # True
```

`Candle.from_tuple` also takes four values; the volume is then NaN. Every
`OHLCV` method accepts a plain 5-value row where it expects a candle, e.g.
`candle.tr((1.0, 2.0, 0.5, 1.5, 10.0))`.

Adding two candles merges them into one longer period. The result keeps the
first open, takes the highest high, the lowest low and the later close, and
sums the volumes. Candles compare equal only when their values have exactly
the same bit patterns.

`Source.parse` is case-insensitive and raises `SourceParseError` for an
unknown name.

## Signals

```python
from trendkit.action import Action

print(Action.from_float(-0.5))          # -0.50 (a sell of strength 128)
print(Action.BUY_ALL.ratio())           # 1.0
print((-Action.buy(10)).analog())       # -1
print(Action.from_analog(0).is_none())  # True
```

`Action.from_value` accepts `None`, a bool, an int (read as an analog
signal) or a float (read as a ratio and clamped to `[-1.0, 1.0]`). Actions
can be negated and subtracted. A buy and a sell of strength `0` are equal.

## Methods

Subclass `Method` and implement `next`. Concrete methods are created as
`cls(parameters, initial_value)`:

```python
from trendkit.method import Method

class RunningSum(Method):
    def __init__(self, parameters, initial_value):
        self.total = 0.0

    def next(self, value):
        self.total += value
        return self.total

print(RunningSum.new_over(None, [1.0, 2.0, 3.0]))   # [1.0, 3.0, 6.0]

values = [1.0, 2.0, 3.0]
RunningSum.new_apply(None, values)                  # values is now [1.0, 3.0, 6.0]

tracked = RunningSum.with_history(None, 0.0)
tracked.next(1.0)
tracked.next(2.0)
print(tracked.get(0), tracked.get(1))               # 3.0 1.0

last = RunningSum.with_last_value(None, 5.0)         # fed 5.0 once on creation
print(last.peek())                                  # 5.0
```

A method instance can also be called directly: `method(value)` is
`method.next(value)`, and `method.over(inputs)` returns one output per input.

## Sequences

```python
from trendkit.candles import Candle
from trendkit.sequence import collapse_timeframe, validate_candles, validate_values

candles = [Candle(1.0, 2.0, 0.5, 1.5, 10.0), Candle(1.5, 3.0, 1.0, 2.5, 20.0),
           Candle(2.5, 2.8, 2.0, 2.2, 5.0), Candle(2.2, 2.4, 1.8, 2.0, 8.0)]

print(collapse_timeframe(candles, 2, False))  # 2 candles: runs start every 2
print(collapse_timeframe(candles, 2, True))   # 3 candles: every overlapping run
print(validate_candles(candles))              # True
print(validate_values([1.0, float("inf")]))   # False
```

## What trendkit does not do

trendkit defines interfaces and value types only. It ships no concrete
moving averages or other ready-made methods, and no indicators:
`MovingAverageConstructor` must be implemented by the user. There is no
sliding-window buffer, no indicator configuration or result types, no
generator of test candles, and no command-line tool.
"""Building blocks for technical analysis: candles, trading signals, methods and moving average interfaces."""

__version__ = "0.1.0"
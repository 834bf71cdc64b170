"""Exception types raised across the package."""

from __future__ import annotations


class TrendkitError(Exception):
    """Base class for every error raised by the package.

    Raised directly (with a free-form message) for errors that fit no
    narrower category.
    """

    default_message = "Unknown error"

    def __str__(self) -> str:
        return super().__str__() or self.default_message


class SourceParseError(TrendkitError, ValueError):
    """A string could not be parsed as a candle source."""

    def __init__(self, value: str) -> None:
        self.value = value
        super().__init__(f'Unable to parse value as Source: "{value}"')


class ParameterParseError(TrendkitError, ValueError):
    """An indicator parameter could not be parsed or is unknown."""

    def __init__(self, name: str, value: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f'Unable to parse into {name}: "{value}"')


class MovingAverageParseError(TrendkitError, ValueError):
    """A moving average description could not be parsed."""

    default_message = "Error parsing moving average type and length"


class WrongMethodParametersError(TrendkitError, ValueError):
    """A method was created with invalid parameters."""

    default_message = "Wrong method parameters"


class WrongConfigError(TrendkitError, ValueError):
    """An indicator configuration failed validation."""

    default_message = "Wrong config"


class InvalidCandlesError(TrendkitError, ValueError):
    """Candles given to a calculation are not valid."""

    default_message = "Invalid candles"
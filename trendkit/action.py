"""Trading signal values produced by indicators."""

from __future__ import annotations

import math
from enum import Enum
from typing import Any

BOUND = 255


class Direction(Enum):
    """Which way a signal points."""

    BUY = "buy"
    NONE = "none"
    SELL = "sell"


def _round_half_away(value: float) -> int:
    floor = math.floor(value)
    return floor + 1 if value - floor >= 0.5 else floor


class Action:
    """A signal: buy some amount, sell some amount, or no signal at all.

    The amount is an integer in ``[0; 255]``; ``255`` means everything.
    ``ratio()`` maps it to ``[-1.0; 1.0]`` and ``analog()`` to ``-1``, ``0`` or ``1``.
    """

    __slots__ = ("_direction", "_amount")

    BUY_ALL: Action
    SELL_ALL: Action
    NONE: Action

    def __init__(self, direction: Direction, value: int | None = None) -> None:
        direction = Direction(direction)
        if direction is Direction.NONE:
            if value is not None:
                raise ValueError("an empty signal carries no value")
        else:
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"signal value must be an int, got {value!r}")
            if not 0 <= value <= BOUND:
                raise ValueError(f"signal value must be in [0; {BOUND}], got {value}")
        self._direction = direction
        self._amount = value

    @property
    def direction(self) -> Direction:
        return self._direction

    @classmethod
    def buy(cls, value: int) -> Action:
        return cls(Direction.BUY, value)

    @classmethod
    def sell(cls, value: int) -> Action:
        return cls(Direction.SELL, value)

    @classmethod
    def from_analog(cls, value: int) -> Action:
        """Positive gives BUY_ALL, negative SELL_ALL, zero no signal."""
        if value > 0:
            return cls.BUY_ALL
        if value < 0:
            return cls.SELL_ALL
        return cls.NONE

    @classmethod
    def from_bool(cls, value: bool) -> Action:
        return cls.BUY_ALL if value else cls.NONE

    @classmethod
    def from_float(cls, value: float) -> Action:
        """Convert a ratio (clamped to ``[-1.0; 1.0]``); NaN gives no signal."""
        if math.isnan(value):
            return cls.NONE
        normalized = min(max(value, -1.0), 1.0)
        amount = _round_half_away(abs(normalized) * BOUND)
        if math.copysign(1.0, normalized) < 0:
            return cls(Direction.SELL, amount)
        return cls(Direction.BUY, amount)

    @classmethod
    def from_value(cls, value: Any) -> Action:
        """Convert ``None``, a bool, an int (analog) or a float (ratio)."""
        if value is None:
            return cls.NONE
        if isinstance(value, Action):
            return value
        if isinstance(value, bool):
            return cls.from_bool(value)
        if isinstance(value, int):
            return cls.from_analog(value)
        if isinstance(value, float):
            return cls.from_float(value)
        raise TypeError(f"cannot convert {value!r} to Action")

    def ratio(self) -> float | None:
        if self._direction is Direction.NONE:
            return None
        ratio = self._amount / BOUND
        return ratio if self._direction is Direction.BUY else -ratio

    def analog(self) -> int:
        if self._direction is Direction.NONE or self._amount == 0:
            return 0
        return 1 if self._direction is Direction.BUY else -1

    def sign(self) -> int | None:
        if self._direction is Direction.NONE:
            return None
        return self.analog()

    def value(self) -> int | None:
        return self._amount

    def is_none(self) -> bool:
        return self._direction is Direction.NONE

    def is_some(self) -> bool:
        return not self.is_none()

    def __neg__(self) -> Action:
        if self._direction is Direction.BUY:
            return Action(Direction.SELL, self._amount)
        if self._direction is Direction.SELL:
            return Action(Direction.BUY, self._amount)
        return self

    def __sub__(self, other: object) -> Action:
        if not isinstance(other, Action):
            return NotImplemented
        if other.is_none():
            return self
        if self.is_none():
            return -other
        if self._direction is not other._direction:
            return self - (-other)
        a, b = self._amount, other._amount
        if a >= b:
            return Action(self._direction, a - b)
        return -Action(self._direction, b - a)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Action):
            return NotImplemented
        if self.is_none() or other.is_none():
            return self.is_none() and other.is_none()
        if self._amount == 0 and other._amount == 0:
            return True
        return self._direction is other._direction and self._amount == other._amount

    def __hash__(self) -> int:
        if self.is_none():
            return hash(Direction.NONE)
        if self._amount == 0:
            return hash(0)
        return hash((self._direction, self._amount))

    def __str__(self) -> str:
        ratio = self.ratio()
        if ratio is None:
            return "N"
        if self._direction is Direction.BUY:
            return f"+{ratio:.2f}"
        return f"-{abs(ratio):.2f}"

    def __repr__(self) -> str:
        if self.is_none():
            return "N"
        prefix = "+" if self._direction is Direction.BUY else "-"
        return f"{prefix}{self._amount}"


Action.BUY_ALL = Action(Direction.BUY, BOUND)
Action.SELL_ALL = Action(Direction.SELL, BOUND)
Action.NONE = Action(Direction.NONE)
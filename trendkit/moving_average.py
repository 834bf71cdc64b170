"""Interfaces for moving averages and for building them dynamically."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from .method import Method


class MovingAverage(Method[float, float]):
    """A method taking one float per step and producing one float."""


class MovingAverageConstructor(ABC):
    """Describes a moving average by its type and period and builds instances."""

    @abstractmethod
    def init(self, initial_value: float) -> MovingAverage:
        """Create a moving average instance starting from ``initial_value``."""

    @abstractmethod
    def ma_period(self) -> int:
        """Return the period length."""

    @abstractmethod
    def ma_type(self) -> Any:
        """Return a value identifying the moving average type."""

    def is_similar_to(self, other: MovingAverageConstructor) -> bool:
        """Check whether both describe the same type of moving average."""
        return self.ma_type() == other.ma_type()
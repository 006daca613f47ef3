"""Binary quantization: map every value to one of two levels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from vecquant.vector import Vector


def _check_level(name: str, value: int) -> None:
    if not 0 <= value <= 255:
        raise ValueError(f"{name} must be between 0 and 255")


@dataclass(frozen=True)
class BinaryQuantizer:
    """Maps values at or above ``threshold`` to ``high`` and the rest to ``low``."""

    threshold: float
    low: int
    high: int

    def __post_init__(self) -> None:
        _check_level("low", self.low)
        _check_level("high", self.high)

    @classmethod
    def fit(cls, threshold: float, low: int, high: int) -> BinaryQuantizer:
        """Return a quantizer with the given threshold and output levels."""
        return cls(threshold, low, high)

    def quantize(self, vector: Iterable[float]) -> Vector:
        """Return a vector of ``low``/``high`` levels, one per input value."""
        return Vector(self.high if x >= self.threshold else self.low for x in vector)
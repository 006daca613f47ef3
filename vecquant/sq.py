"""Uniform scalar quantization into at most 256 levels."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable

from vecquant.vector import Vector


@dataclass(frozen=True)
class ScalarQuantizer:
    """Clamps values to ``[minimum, maximum]`` and maps them to evenly spaced levels."""

    minimum: float
    maximum: float
    levels: int
    step: float = field(init=False)

    def __post_init__(self) -> None:
        if not self.maximum > self.minimum:
            raise ValueError("max must be greater than min")
        if self.levels < 2:
            raise ValueError("levels must be at least 2")
        if self.levels > 256:
            raise ValueError("levels must be no more than 256")
        object.__setattr__(
            self, "step", (self.maximum - self.minimum) / (self.levels - 1)
        )

    @classmethod
    def fit(cls, minimum: float, maximum: float, levels: int) -> ScalarQuantizer:
        """Return a quantizer over ``[minimum, maximum]`` with ``levels`` levels."""
        return cls(minimum, maximum, levels)

    def quantize(self, vector: Iterable[float]) -> Vector:
        """Return the level index of every value."""
        return Vector(self.quantize_scalar(x) for x in vector)

    def quantize_scalar(self, x: float) -> int:
        """Return the level index of a single value."""
        clamped = min(max(x, self.minimum), self.maximum)
        # Round half away from zero; the quotient is never negative.
        index = math.floor((clamped - self.minimum) / self.step + 0.5)
        return min(index, self.levels - 1)
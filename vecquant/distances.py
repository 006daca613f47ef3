"""Distance metrics between equally long numeric sequences."""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, Iterable, Optional


class Metric(Enum):
    """The kinds of distance that :class:`Distance` can compute."""

    SQUARED_EUCLIDEAN = "squared_euclidean"
    EUCLIDEAN = "euclidean"
    COSINE = "cosine"
    MANHATTAN = "manhattan"
    CHEBYSHEV = "chebyshev"
    MINKOWSKI = "minkowski"
    HAMMING = "hamming"


@dataclass(frozen=True)
class Distance:
    """A distance metric; Minkowski distances also carry their order ``p``."""

    metric: Metric
    p: Optional[float] = None

    SQUARED_EUCLIDEAN: ClassVar[Distance]
    EUCLIDEAN: ClassVar[Distance]
    COSINE: ClassVar[Distance]
    MANHATTAN: ClassVar[Distance]
    CHEBYSHEV: ClassVar[Distance]
    HAMMING: ClassVar[Distance]

    def __post_init__(self) -> None:
        if self.metric is Metric.MINKOWSKI:
            if self.p is None:
                raise ValueError("Minkowski distance needs an order p")
            if self.p == 0:
                raise ValueError("Minkowski order p must be non-zero")
        elif self.p is not None:
            raise ValueError(f"{self.metric.value} distance takes no order p")

    @classmethod
    def minkowski(cls, p: float) -> Distance:
        """Return a Minkowski distance of order ``p``."""
        return cls(Metric.MINKOWSKI, float(p))

    def compute(self, a: Iterable, b: Iterable) -> float:
        """Return the distance between ``a`` and ``b``."""
        xs = list(a)
        ys = list(b)
        if len(xs) != len(ys):
            raise ValueError("Input slices must have the same length")
        pairs = list(zip(xs, ys))
        metric = self.metric

        if metric in (Metric.SQUARED_EUCLIDEAN, Metric.EUCLIDEAN):
            total = float(sum((x - y) * (x - y) for x, y in pairs))
            return total if metric is Metric.SQUARED_EUCLIDEAN else math.sqrt(total)
        if metric is Metric.COSINE:
            dot = sum(x * y for x, y in pairs)
            norm_a = math.sqrt(sum(x * x for x in xs))
            norm_b = math.sqrt(sum(y * y for y in ys))
            if norm_a == 0 or norm_b == 0:
                return 1.0
            return 1.0 - dot / (norm_a * norm_b)
        if metric is Metric.MANHATTAN:
            return float(sum(abs(x - y) for x, y in pairs))
        if metric is Metric.CHEBYSHEV:
            return float(max((abs(x - y) for x, y in pairs), default=0.0))
        if metric is Metric.MINKOWSKI:
            p = self.p
            total = sum(abs(x - y) ** p for x, y in pairs)
            return float(total ** (1.0 / p))
        return float(sum(1 for x, y in pairs if x != y))


Distance.SQUARED_EUCLIDEAN = Distance(Metric.SQUARED_EUCLIDEAN)
Distance.EUCLIDEAN = Distance(Metric.EUCLIDEAN)
Distance.COSINE = Distance(Metric.COSINE)
Distance.MANHATTAN = Distance(Metric.MANHATTAN)
Distance.CHEBYSHEV = Distance(Metric.CHEBYSHEV)
Distance.HAMMING = Distance(Metric.HAMMING)
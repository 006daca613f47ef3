"""Immutable numeric vectors with basic arithmetic."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable, Iterator

import numpy as np


def _require_same_length(left: Vector, right: Vector) -> None:
    if len(left) != len(right):
        raise ValueError("Vectors must be same length")


@dataclass(frozen=True)
class Vector:
    """An immutable sequence of numbers supporting vector arithmetic."""

    data: tuple = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "data", tuple(self.data))

    def __len__(self) -> int:
        return len(self.data)

    def __iter__(self) -> Iterator:
        return iter(self.data)

    def __getitem__(self, index):
        return self.data[index]

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        _require_same_length(self, other)
        return sum(a * b for a, b in zip(self.data, other.data))

    def norm(self) -> float:
        """Return the Euclidean norm."""
        return math.sqrt(self.dot(self))

    def distance2(self, other: Vector) -> float:
        """Return the squared Euclidean distance to ``other``."""
        diff = self - other
        return diff.dot(diff)

    def __add__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _require_same_length(self, other)
        return Vector(a + b for a, b in zip(self.data, other.data))

    def __sub__(self, other: Vector) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        _require_same_length(self, other)
        return Vector(a - b for a, b in zip(self.data, other.data))

    def __mul__(self, scalar) -> Vector:
        if isinstance(scalar, Vector):
            return NotImplemented
        return Vector(a * scalar for a in self.data)

    __rmul__ = __mul__

    def __str__(self) -> str:
        return "Vector [" + ", ".join(str(x) for x in self.data) + "]"


def mean_vector(vectors: Iterable[Vector]) -> Vector:
    """Return the component-wise mean of equally sized vectors."""
    vectors = list(vectors)
    if not vectors:
        raise ValueError("Cannot compute mean of empty slice")
    dim = len(vectors[0])
    if any(len(v) != dim for v in vectors):
        raise ValueError("All vectors must have the same dimension")
    count = len(vectors)
    if dim == 0:
        return Vector()
    return Vector(sum(column) / count for column in zip(*(v.data for v in vectors)))


def to_half(values: Iterable) -> Vector:
    """Round values to half precision and return them as a vector of floats."""
    halves = np.asarray(list(values), dtype=np.float32).astype(np.float16)
    return Vector(float(x) for x in halves)
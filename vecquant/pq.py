"""Product quantization: independent codebooks for equal slices of a vector."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from vecquant.distances import Distance
from vecquant.lbg import lbg_quantize
from vecquant.vector import Vector, to_half


def _nearest_codeword(values: Sequence[float], codebook: Sequence[Vector], distance: Distance) -> Vector:
    return min(codebook, key=lambda centroid: distance.compute(values, centroid))


@dataclass(frozen=True)
class ProductQuantizer:
    """Splits vectors into ``m`` slices and quantizes each with its own codebook."""

    codebooks: tuple
    sub_dim: int
    m: int
    distance: Distance

    @classmethod
    def fit(
        cls,
        training_data: Iterable[Vector],
        m: int,
        k: int,
        max_iters: int,
        distance: Distance,
        seed: int,
    ) -> ProductQuantizer:
        """Learn one ``k``-word codebook per slice; slice ``i`` uses ``seed + i``."""
        data = [v if isinstance(v, Vector) else Vector(v) for v in training_data]
        if not data:
            raise ValueError("Training data must not be empty")
        dim = len(data[0])
        if m <= 0:
            raise ValueError("m must be greater than 0")
        if dim < m:
            raise ValueError("Data dimension must be at least m")
        if dim % m:
            raise ValueError("Data dimension must be divisible by m")
        if any(len(v) != dim for v in data):
            raise ValueError("All training vectors must have the same dimension")
        sub_dim = dim // m

        codebooks = tuple(
            tuple(
                lbg_quantize(
                    [Vector(v.data[i * sub_dim:(i + 1) * sub_dim]) for v in data],
                    k,
                    max_iters,
                    seed + i,
                )
            )
            for i in range(m)
        )
        return cls(codebooks, sub_dim, m, distance)

    def quantize(self, vector: Iterable[float]) -> Vector:
        """Return the concatenated nearest codewords, rounded to half precision."""
        values = tuple(vector)
        if len(values) != self.sub_dim * self.m:
            raise ValueError("Input vector has incorrect dimension")
        out: list[float] = []
        for i, codebook in enumerate(self.codebooks):
            part = values[i * self.sub_dim:(i + 1) * self.sub_dim]
            out.extend(_nearest_codeword(part, codebook, self.distance))
        return to_half(out)
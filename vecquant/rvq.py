"""Residual quantization: a vector as a sum of codewords from successive stages."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from vecquant.distances import Distance
from vecquant.lbg import lbg_quantize
from vecquant.vector import Vector, to_half


def _nearest_codeword(residual: Vector, codebook, distance: Distance) -> Vector:
    return min(codebook, key=lambda centroid: distance.compute(residual, centroid))


@dataclass(frozen=True)
class ResidualQuantizer:
    """Each stage's codebook quantizes what the earlier stages left over."""

    stages: int
    codebooks: tuple
    dim: int
    distance: Distance
    epsilon: float

    @classmethod
    def fit(
        cls,
        training_data: Iterable[Vector],
        stages: int,
        k: int,
        max_iters: int,
        epsilon: float,
        distance: Distance,
        seed: int,
    ) -> ResidualQuantizer:
        """Learn up to ``stages`` codebooks; stage ``s`` uses ``seed + s``.

        Training stops early once the mean residual norm falls below ``epsilon``.
        """
        residuals = [v if isinstance(v, Vector) else Vector(v) for v in training_data]
        if not residuals:
            raise ValueError("Training data cannot be empty")
        dim = len(residuals[0])
        if any(len(v) != dim for v in residuals):
            raise ValueError("All training vectors must have the same dimension")

        codebooks = []
        for stage in range(stages):
            codebook = tuple(lbg_quantize(residuals, k, max_iters, seed + stage))
            codebooks.append(codebook)
            residuals = [res - _nearest_codeword(res, codebook, distance) for res in residuals]
            avg_norm = sum(r.norm() for r in residuals) / len(residuals)
            if avg_norm < epsilon:
                break

        return cls(stages, tuple(codebooks), dim, distance, epsilon)

    def quantize(self, vector: Iterable[float]) -> Vector:
        """Return the sum of the chosen codewords, rounded to half precision."""
        residual = vector if isinstance(vector, Vector) else Vector(vector)
        if len(residual) != self.dim:
            raise ValueError("Input vector has wrong dimension")
        total = Vector([0.0] * self.dim)
        for codebook in self.codebooks:
            chosen = _nearest_codeword(residual, codebook, self.distance)
            total = total + chosen
            residual = residual - chosen
            if residual.norm() < self.epsilon:
                break
        return to_half(total)
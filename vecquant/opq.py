"""Optimized product quantization: a learned rotation followed by product quantization."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from vecquant.distances import Distance
from vecquant.lbg import lbg_quantize
from vecquant.vector import Vector, to_half


def _nearest_codeword(values: Sequence[float], codebook: Sequence[Vector], distance: Distance) -> Vector:
    return min(codebook, key=lambda centroid: distance.compute(values, centroid))


def _reconstruct(row: np.ndarray, codebooks: Sequence[Sequence[Vector]], sub_dim: int, distance: Distance) -> list[float]:
    out: list[float] = []
    for i, codebook in enumerate(codebooks):
        part = row[i * sub_dim:(i + 1) * sub_dim].tolist()
        out.extend(_nearest_codeword(part, codebook, distance))
    return out


@dataclass(frozen=True, eq=False)
class OptimizedProductQuantizer:
    """Rotates vectors with a learned orthogonal matrix, then product-quantizes them."""

    rotation: np.ndarray
    codebooks: tuple
    sub_dim: int
    m: int
    dim: int
    distance: Distance

    @classmethod
    def fit(
        cls,
        training_data: Iterable[Sequence[float]],
        m: int,
        k: int,
        max_iters: int,
        opq_iters: int,
        distance: Distance,
        seed: int,
    ) -> OptimizedProductQuantizer:
        """Alternate ``opq_iters`` times between codebook learning and rotation update.

        Subspace ``i`` trains its codebook with ``seed + i``.
        """
        data = [tuple(v) for v in training_data]
        if not data:
            raise ValueError("Training data must not be empty")
        dim = len(data[0])
        if m <= 0:
            raise ValueError("m must be greater than 0")
        if dim < m:
            raise ValueError("Dimension must be at least m")
        if dim % m:
            raise ValueError("Dimension must be divisible by m")
        if any(len(v) != dim for v in data):
            raise ValueError("All training vectors must have the same dimension")
        sub_dim = dim // m

        original = np.array(data, dtype=float).reshape(len(data), dim)
        rotation = np.eye(dim)
        rotated = original.copy()
        codebooks: tuple = ()

        for _ in range(opq_iters):
            codebooks = tuple(
                tuple(
                    lbg_quantize(
                        [Vector(row.tolist()) for row in rotated[:, i * sub_dim:(i + 1) * sub_dim]],
                        k,
                        max_iters,
                        seed + i,
                    )
                )
                for i in range(m)
            )
            reconstructions = np.array(
                [_reconstruct(row, codebooks, sub_dim, distance) for row in rotated],
                dtype=float,
            )
            # Orthogonal Procrustes: rotation maximising alignment of data with reconstructions.
            u, _, vt = np.linalg.svd(reconstructions.T @ rotated)
            rotation = vt.T @ u.T
            rotated = original @ rotation.T

        return cls(rotation, codebooks, sub_dim, m, dim, distance)

    def quantize(self, vector: Iterable[float]) -> Vector:
        """Rotate ``vector`` and return its nearest codewords, rounded to half precision."""
        values = np.asarray(tuple(vector), dtype=float)
        if values.shape != (self.dim,):
            raise ValueError("Input vector has wrong dimension")
        if not self.codebooks:
            raise ValueError("Quantizer has no codebooks; fit with opq_iters of at least 1")
        rotated = self.rotation @ values
        return to_half(_reconstruct(rotated, self.codebooks, self.sub_dim, self.distance))
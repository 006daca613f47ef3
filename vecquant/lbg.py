"""Linde-Buzo-Gray (k-means) codebook training."""

from __future__ import annotations

from typing import Sequence

import numpy as np

from vecquant.vector import Vector


def _nearest(points: np.ndarray, centroids: np.ndarray) -> np.ndarray:
    """Index of the nearest centroid for every point; ties go to the lowest index."""
    point_sq = np.einsum("ij,ij->i", points, points)[:, None]
    centroid_sq = np.einsum("ij,ij->i", centroids, centroids)[None, :]
    dist = point_sq - 2.0 * points @ centroids.T + centroid_sq
    return np.argmin(dist, axis=1)


def lbg_quantize(data: Sequence[Vector], k: int, max_iters: int, seed: int) -> list[Vector]:
    """Learn ``k`` centroids from ``data`` with at most ``max_iters`` iterations."""
    n = len(data)
    if k <= 0:
        raise ValueError("k must be greater than 0")
    if n < k:
        raise ValueError("Not enough data points for k clusters")

    points = np.array([list(v) for v in data], dtype=float).reshape(n, -1)
    rng = np.random.default_rng(seed)
    centroids = points[rng.choice(n, size=k, replace=False)].copy()
    assignments = np.zeros(n, dtype=np.intp)

    for _ in range(max_iters):
        new_assignments = _nearest(points, centroids)
        changed = bool(np.any(new_assignments != assignments))
        assignments = new_assignments

        counts = np.bincount(assignments, minlength=k)
        sums = np.zeros_like(centroids)
        np.add.at(sums, assignments, points)
        for j in range(k):
            if counts[j]:
                centroids[j] = sums[j] / counts[j]
            else:
                centroids[j] = points[rng.integers(n)]

        if not changed:
            break

    return [Vector(row.tolist()) for row in centroids]
"""Synthetic data and quality metrics for evaluating quantizers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from vecquant.vector import Vector

SEED = 66
NUM_SAMPLES = (1_000, 5_000, 10_000, 50_000, 100_000)
DIM = 128
M = 16
K = 256
MAX_ITERS = 10

_MAX_EVAL_SAMPLES = 1000
_LARGE_DATASET = 10_000
_LARGE_SEARCH_WINDOW = 5000


@dataclass(frozen=True)
class BenchmarkResult:
    """Timings and quality figures from one benchmark run."""

    n_samples: int
    n_dims: int
    training_time_ms: float
    quantization_time_ms: float
    reconstruction_error: float
    recall: float
    memory_reduction_ratio: float = 0.0


def _as_matrix(vectors: Sequence[Sequence[float]]) -> np.ndarray:
    rows = [list(v) for v in vectors]
    width = len(rows[0]) if rows else 0
    return np.array(rows, dtype=float).reshape(len(rows), width)


def generate_synthetic_data(n_samples: int, n_dims: int, seed: int) -> list[Vector]:
    """Return ``n_samples`` vectors of ``n_dims`` values drawn uniformly from [0, 1)."""
    rng = np.random.default_rng(seed)
    values = rng.random((n_samples, n_dims))
    return [Vector(row.tolist()) for row in values]


def euclidean_distance(a: Sequence[float], b: Sequence[float]) -> float:
    """Return the Euclidean distance between two vectors."""
    left = a if isinstance(a, Vector) else Vector(a)
    right = b if isinstance(b, Vector) else Vector(b)
    return float(np.sqrt(left.distance2(right)))


def calculate_reconstruction_error(
    original: Sequence[Sequence[float]], reconstructed: Sequence[Sequence[float]]
) -> float:
    """Return the mean squared error per element between two datasets."""
    if not original:
        raise ValueError("Original data must not be empty")
    if len(original) != len(reconstructed):
        raise ValueError("Datasets must contain the same number of vectors")
    orig = _as_matrix(original)
    recon = _as_matrix(reconstructed)
    if orig.shape != recon.shape:
        raise ValueError("Vectors must be same length")
    total_elements = orig.shape[0] * orig.shape[1]
    return float(np.sum((orig - recon) ** 2) / total_elements)


def _neighbours(points: np.ndarray, query: int, start: int, end: int, k: int) -> np.ndarray:
    candidates = np.arange(start, end)
    candidates = candidates[candidates != query]
    dists = np.sqrt(np.sum((points[candidates] - points[query]) ** 2, axis=1))
    order = np.argsort(dists, kind="stable")[:k]
    return candidates[order]


def calculate_recall(
    original: Sequence[Sequence[float]], approx: Sequence[Sequence[float]], k: int
) -> float:
    """Return recall@k of nearest neighbours found in ``approx`` against ``original``.

    At most about 1000 evenly spaced queries are evaluated; for datasets larger
    than 10,000 vectors the search is limited to a window around each query.
    """
    n_samples = len(original)
    if n_samples == 0:
        raise ValueError("Original data must not be empty")
    if len(approx) != n_samples:
        raise ValueError("Datasets must contain the same number of vectors")
    if k <= 0:
        raise ValueError("k must be greater than 0")

    orig = _as_matrix(original)
    appr = _as_matrix(approx)

    eval_samples = min(n_samples, _MAX_EVAL_SAMPLES)
    step = max(n_samples // eval_samples, 1)
    search_window = _LARGE_SEARCH_WINDOW if n_samples > _LARGE_DATASET else n_samples
    half_window = search_window // 2

    total_recall = 0.0
    for i in range(0, n_samples, step):
        start = i - half_window if i > half_window else 0
        end = min(i + half_window, n_samples)
        true_neighbours = _neighbours(orig, i, start, end, k)
        approx_neighbours = set(_neighbours(appr, i, start, end, k).tolist())
        hits = sum(1 for idx in true_neighbours.tolist() if idx in approx_neighbours)
        total_recall += hits / k

    return total_recall / (n_samples // step)
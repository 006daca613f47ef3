"""Benchmarks for the scalar, binary and product quantizers, and result output."""

from __future__ import annotations

import logging
import time
from os import PathLike
from typing import Callable, Iterable, Sequence, Union

from vecquant.bq import BinaryQuantizer
from vecquant.distances import Distance
from vecquant.metrics import (
    DIM,
    K,
    M,
    MAX_ITERS,
    NUM_SAMPLES,
    SEED,
    BenchmarkResult,
    calculate_recall,
    calculate_reconstruction_error,
    generate_synthetic_data,
)
from vecquant.pq import ProductQuantizer
from vecquant.sq import ScalarQuantizer
from vecquant.vector import Vector

logger = logging.getLogger("vecquant.evaluate")

BQ_OUTPUT = "notebooks/data/eval_bq_results.csv"
SQ_OUTPUT = "notebooks/data/eval_sq_results.csv"
PQ_OUTPUT = "notebooks/data/eval_pq_results.csv"

BQ_THRESHOLD = 0.5
BQ_LOW = 0
BQ_HIGH = 1

SQ_MIN = 0.0
SQ_MAX = 1.0
SQ_LEVELS = 256

PQ_SEED = 42
RECALL_K = 10

CSV_HEADER = "n_samples,n_dims,training_time_ms,quantization_time_ms,reconstruction_error,recall"


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _finish(
    original: Sequence[Vector],
    reconstructed: Sequence[Vector],
    n_samples: int,
    n_dims: int,
    training_time_ms: float,
    quantization_time_ms: float,
) -> BenchmarkResult:
    error = calculate_reconstruction_error(original, reconstructed)
    recall = calculate_recall(original, reconstructed, RECALL_K)
    if training_time_ms:
        logger.info("Training time: %.2fms", training_time_ms)
    logger.info("Quantization time: %.2fms", quantization_time_ms)
    logger.info("Reconstruction error: %.4f", error)
    logger.info("Recall@%d: %.4f", RECALL_K, recall)
    return BenchmarkResult(
        n_samples=n_samples,
        n_dims=n_dims,
        training_time_ms=training_time_ms,
        quantization_time_ms=quantization_time_ms,
        reconstruction_error=error,
        recall=recall,
    )


def benchmark_bq(
    n_samples: int,
    n_dims: int = DIM,
    threshold: float = BQ_THRESHOLD,
    low: int = BQ_LOW,
    high: int = BQ_HIGH,
) -> BenchmarkResult:
    """Benchmark the binary quantizer on synthetic data."""
    data = generate_synthetic_data(n_samples, n_dims, SEED)
    quantizer = BinaryQuantizer.fit(threshold, low, high)

    start = time.perf_counter()
    quantized = [quantizer.quantize(v) for v in data]
    quantization_time_ms = _elapsed_ms(start)

    reconstructed = [Vector(float(x) for x in q) for q in quantized]
    return _finish(data, reconstructed, n_samples, n_dims, 0.0, quantization_time_ms)


def benchmark_sq(
    n_samples: int,
    n_dims: int = DIM,
    min_val: float = SQ_MIN,
    max_val: float = SQ_MAX,
    levels: int = SQ_LEVELS,
) -> BenchmarkResult:
    """Benchmark the scalar quantizer on synthetic data."""
    data = generate_synthetic_data(n_samples, n_dims, SEED)
    quantizer = ScalarQuantizer.fit(min_val, max_val, levels)

    start = time.perf_counter()
    quantized = [quantizer.quantize(v) for v in data]
    quantization_time_ms = _elapsed_ms(start)

    step = (max_val - min_val) / (levels - 1)
    reconstructed = [Vector(min_val + index * step for index in q) for q in quantized]
    return _finish(data, reconstructed, n_samples, n_dims, 0.0, quantization_time_ms)


def benchmark_pq(
    n_samples: int,
    n_dims: int = DIM,
    m: int = M,
    k: int = K,
    max_iters: int = MAX_ITERS,
) -> BenchmarkResult:
    """Benchmark training and quantization of the product quantizer."""
    data = generate_synthetic_data(n_samples, n_dims, SEED)

    start = time.perf_counter()
    quantizer = ProductQuantizer.fit(data, m, k, max_iters, Distance.EUCLIDEAN, PQ_SEED)
    training_time_ms = _elapsed_ms(start)

    start = time.perf_counter()
    reconstructed = [quantizer.quantize(v) for v in data]
    quantization_time_ms = _elapsed_ms(start)

    return _finish(data, reconstructed, n_samples, n_dims, training_time_ms, quantization_time_ms)


def run_suite(
    benchmark: Callable[[int], BenchmarkResult],
    sample_sizes: Iterable[int] = NUM_SAMPLES,
) -> list[BenchmarkResult]:
    """Run ``benchmark`` once per sample size and log a summary of the results."""
    results = []
    for n_samples in sample_sizes:
        logger.info("Running benchmark with %d samples...", n_samples)
        results.append(benchmark(n_samples))

    for result in results:
        logger.info("Results for %d samples:", result.n_samples)
        if result.training_time_ms:
            logger.info("Training time: %.2fms", result.training_time_ms)
        logger.info("Quantization time: %.2fms", result.quantization_time_ms)
        logger.info("Reconstruction error: %.4f", result.reconstruction_error)
        logger.info("Recall@%d: %.4f", RECALL_K, result.recall)
    return results


def _format(value: Union[int, float]) -> str:
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def write_results(results: Iterable[BenchmarkResult], path: Union[str, PathLike]) -> None:
    """Write results as CSV; the memory reduction ratio is left out."""
    with open(path, "w", encoding="utf-8", newline="") as out:
        out.write(CSV_HEADER + "\n")
        for r in results:
            fields = (
                r.n_samples,
                r.n_dims,
                r.training_time_ms,
                r.quantization_time_ms,
                r.reconstruction_error,
                r.recall,
            )
            out.write(",".join(_format(f) for f in fields) + "\n")
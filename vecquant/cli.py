"""Command-line evaluation of the quantizers on synthetic data."""

from __future__ import annotations

import argparse
import logging
import sys
import time
from functools import partial
from typing import Callable, Optional, Sequence

from vecquant.distances import Distance
from vecquant.evaluate import (
    BQ_OUTPUT,
    PQ_OUTPUT,
    SQ_OUTPUT,
    benchmark_bq,
    benchmark_pq,
    benchmark_sq,
    run_suite,
    write_results,
)
from vecquant.logsetup import configure_logging
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
from vecquant.opq import OptimizedProductQuantizer
from vecquant.rvq import ResidualQuantizer
from vecquant.tsvq import TSVQ

logger = logging.getLogger("vecquant.cli")

OPQ_OUTPUT = "notebooks/data/eval_opq_results.csv"
RVQ_OUTPUT = "notebooks/data/eval_rvq_results.csv"
TSVQ_OUTPUT = "notebooks/data/eval_tsvq_results.csv"

TRAINING_SEED = 42
OPQ_ITERS = 5
RVQ_STAGES = 4
RVQ_EPSILON = 0.01
TSVQ_MAX_DEPTH = 10
RECALL_K = 10


def _elapsed_ms(start: float) -> float:
    return (time.perf_counter() - start) * 1000.0


def _run(
    n_samples: int,
    n_dims: int,
    train: Callable[[list], object],
) -> BenchmarkResult:
    data = generate_synthetic_data(n_samples, n_dims, SEED)

    start = time.perf_counter()
    quantizer = train(data)
    training_time_ms = _elapsed_ms(start)

    start = time.perf_counter()
    reconstructed = [quantizer.quantize(v) for v in data]
    quantization_time_ms = _elapsed_ms(start)

    error = calculate_reconstruction_error(data, reconstructed)
    recall = calculate_recall(data, reconstructed, RECALL_K)
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


def benchmark_opq(
    n_samples: int,
    n_dims: int = DIM,
    m: int = M,
    k: int = K,
    max_iters: int = MAX_ITERS,
) -> BenchmarkResult:
    """Benchmark training and quantization of the optimized product quantizer."""
    return _run(
        n_samples,
        n_dims,
        lambda data: OptimizedProductQuantizer.fit(
            data, m, k, max_iters, OPQ_ITERS, Distance.EUCLIDEAN, TRAINING_SEED
        ),
    )


def benchmark_rvq(
    n_samples: int,
    n_dims: int = DIM,
    stages: int = RVQ_STAGES,
    k: int = K,
    max_iters: int = MAX_ITERS,
    epsilon: float = RVQ_EPSILON,
) -> BenchmarkResult:
    """Benchmark training and quantization of the residual quantizer."""
    return _run(
        n_samples,
        n_dims,
        lambda data: ResidualQuantizer.fit(
            data, stages, k, max_iters, epsilon, Distance.EUCLIDEAN, TRAINING_SEED
        ),
    )


def benchmark_tsvq(
    n_samples: int,
    n_dims: int = DIM,
    max_depth: int = TSVQ_MAX_DEPTH,
) -> BenchmarkResult:
    """Benchmark building and querying a tree-structured quantizer."""
    return _run(n_samples, n_dims, lambda data: TSVQ(data, max_depth, Distance.EUCLIDEAN))


_EVALUATIONS = {
    "opq": (benchmark_opq, OPQ_OUTPUT),
    "pq": (benchmark_pq, PQ_OUTPUT),
    "tsvq": (benchmark_tsvq, TSVQ_OUTPUT),
    "rvq": (benchmark_rvq, RVQ_OUTPUT),
    "bq": (benchmark_bq, BQ_OUTPUT),
    "sq": (benchmark_sq, SQ_OUTPUT),
}


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="eval", description="Run an evaluation of one of the quantizers."
    )
    parser.add_argument(
        "-e",
        "--eval",
        required=True,
        help="which evaluation to run: " + ", ".join(_EVALUATIONS),
    )
    parser.add_argument(
        "--samples",
        type=int,
        nargs="+",
        default=None,
        help="sample sizes to benchmark (default: %s)" % ", ".join(map(str, NUM_SAMPLES)),
    )
    parser.add_argument("--dims", type=int, default=DIM, help="vector dimensionality")
    parser.add_argument("--output", default=None, help="CSV file to write the results to")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the selected evaluation and write its results as CSV."""
    args = _parser().parse_args(argv)
    entry = _EVALUATIONS.get(args.eval)
    if entry is None:
        print(f"Unknown evaluation: {args.eval}", file=sys.stderr)
        return 1

    configure_logging()
    logging.basicConfig(level=logging.INFO)

    benchmark, default_output = entry
    sample_sizes = tuple(args.samples) if args.samples else NUM_SAMPLES
    results = run_suite(partial(benchmark, n_dims=args.dims), sample_sizes)
    write_results(results, args.output or default_output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
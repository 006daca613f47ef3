"""Demonstration of every quantizer on random training data."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

import numpy as np

from vecquant.bq import BinaryQuantizer
from vecquant.distances import Distance
from vecquant.opq import OptimizedProductQuantizer
from vecquant.pq import ProductQuantizer
from vecquant.rvq import ResidualQuantizer
from vecquant.sq import ScalarQuantizer
from vecquant.tsvq import TSVQ
from vecquant.vector import Vector


def generate_training_data(n: int, dim: int, seed: int) -> list[Vector]:
    """Return ``n`` vectors of ``dim`` values drawn uniformly from [0, 10)."""
    rng = np.random.default_rng(seed)
    return [Vector(row.tolist()) for row in rng.uniform(0.0, 10.0, size=(n, dim))]


def _example_bq(vector: Vector) -> Vector:
    return BinaryQuantizer.fit(5.0, 0, 1).quantize(vector)


def _example_sq(vector: Vector) -> Vector:
    return ScalarQuantizer.fit(-1.0, 1.0, 5).quantize(vector)


def _example_pq(training_data: list[Vector], vector: Vector) -> Vector:
    pq = ProductQuantizer.fit(training_data, 2, 2, 20, Distance.EUCLIDEAN, 33)
    return pq.quantize(vector)


def _example_opq(training_data: list[Vector], vector: Vector) -> Vector:
    opq = OptimizedProductQuantizer.fit(training_data, 2, 2, 20, 5, Distance.EUCLIDEAN, 43)
    return opq.quantize(vector)


def _example_tsvq(training_data: list[Vector], vector: Vector) -> Vector:
    return TSVQ(training_data, 3, Distance.EUCLIDEAN).quantize(vector)


def _example_rvq(training_data: list[Vector], vector: Vector) -> Vector:
    rvq = ResidualQuantizer.fit(training_data, 2, 2, 20, 10e-6, Distance.EUCLIDEAN, 53)
    return rvq.quantize(vector)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Quantize a fixed test vector with each quantizer and print the results."""
    argparse.ArgumentParser(
        prog="vq-examples", description="Show the output of every quantizer."
    ).parse_args(argv)

    training_data = generate_training_data(1000, 10, 900)
    test_vector = Vector([1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 10.0])

    print(f"Binary Quantizer output: {_example_bq(test_vector)}")
    print(f"Scalar Quantizer output: {_example_sq(test_vector)}")
    print(f"Product Quantizer output: {_example_pq(training_data, test_vector)}")
    print(f"Optimized Product Quantizer output: {_example_opq(training_data, test_vector)}")
    print(f"Tree-Structured Quantizer output: {_example_tsvq(training_data, test_vector)}")
    print(f"Residual Quantizer output: {_example_rvq(training_data, test_vector)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
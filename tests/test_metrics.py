import math

import pytest

from vecquant.metrics import (
    BenchmarkResult,
    calculate_recall,
    calculate_reconstruction_error,
    euclidean_distance,
    generate_synthetic_data,
)
from vecquant.vector import Vector


def test_synthetic_data_shape_and_range():
    data = generate_synthetic_data(20, 7, 66)
    assert len(data) == 20
    assert all(len(v) == 7 for v in data)
    assert all(0.0 <= x < 1.0 for v in data for x in v)


def test_synthetic_data_is_deterministic_per_seed():
    first = generate_synthetic_data(5, 4, 3)
    second = generate_synthetic_data(5, 4, 3)
    other = generate_synthetic_data(5, 4, 4)
    assert first == second
    assert first != other


def test_euclidean_distance_worked_example():
    assert euclidean_distance(Vector([0.0, 0.0]), Vector([3.0, 4.0])) == pytest.approx(5.0)


def test_euclidean_distance_symmetric_and_zero_on_self():
    a, b = generate_synthetic_data(2, 6, 1)
    assert euclidean_distance(a, b) == pytest.approx(euclidean_distance(b, a))
    assert euclidean_distance(a, a) == 0.0


def test_euclidean_distance_mismatched_lengths():
    with pytest.raises(ValueError):
        euclidean_distance(Vector([1.0]), Vector([1.0, 2.0]))


def test_reconstruction_error_of_identical_data_is_zero():
    data = generate_synthetic_data(10, 5, 2)
    assert calculate_reconstruction_error(data, data) == 0.0


def test_reconstruction_error_constant_offset():
    data = generate_synthetic_data(10, 5, 2)
    shifted = [Vector(x + 1.0 for x in v) for v in data]
    assert calculate_reconstruction_error(data, shifted) == pytest.approx(1.0)


def test_reconstruction_error_mismatched_counts():
    data = generate_synthetic_data(4, 3, 2)
    with pytest.raises(ValueError):
        calculate_reconstruction_error(data, data[:3])


def test_recall_of_identical_data_is_one():
    data = generate_synthetic_data(40, 4, 5)
    assert calculate_recall(data, data, 10) == pytest.approx(1.0)


def test_recall_is_between_zero_and_one():
    data = generate_synthetic_data(60, 4, 5)
    noise = generate_synthetic_data(60, 4, 9)
    recall = calculate_recall(data, noise, 10)
    assert 0.0 <= recall <= 1.0
    assert math.isfinite(recall)


def test_recall_rejects_empty_data():
    with pytest.raises(ValueError):
        calculate_recall([], [], 10)


def test_recall_rejects_non_positive_k():
    data = generate_synthetic_data(5, 2, 1)
    with pytest.raises(ValueError):
        calculate_recall(data, data, 0)


def test_benchmark_result_holds_values():
    result = BenchmarkResult(100, 8, 1.5, 2.5, 0.1, 0.9)
    assert result.n_samples == 100
    assert result.recall == 0.9
    assert result.memory_reduction_ratio == 0.0
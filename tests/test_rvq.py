import numpy as np
import pytest

from vecquant.distances import Distance
from vecquant.rvq import ResidualQuantizer
from vecquant.vector import Vector


def _random_vectors(n, dim, seed=42):
    rng = np.random.default_rng(seed)
    return [Vector(row.tolist()) for row in rng.uniform(-1000.0, 1000.0, size=(n, dim))]


@pytest.fixture(scope="module")
def trained():
    training_data = _random_vectors(1000, 10)
    rvq = ResidualQuantizer.fit(training_data, 3, 2, 50, 1e-6, Distance.SQUARED_EUCLIDEAN, 42)
    return training_data, rvq


def test_rvq_dimension(trained):
    training_data, rvq = trained
    for vector in training_data:
        assert len(rvq.quantize(vector)) == len(vector)


def test_rvq_reconstruction_error(trained):
    training_data, rvq = trained
    for vector in training_data:
        quantized = list(rvq.quantize(vector))
        assert len(quantized) == 10
        total_error = sum(abs(a - b) for a, b in zip(vector, quantized))
        # Each stage's residual at most doubles the range, so the error stays bounded.
        assert 0.0 <= total_error < 80000.0


def test_all_stages_trained_on_random_data(trained):
    _, rvq = trained
    assert rvq.stages == 3
    assert len(rvq.codebooks) == 3
    assert all(len(codebook) == 2 for codebook in rvq.codebooks)


def test_early_termination_in_training():
    training_data = [Vector([0.0, 0.0, 0.0]), Vector([4.0, 8.0, 2.0])]
    rvq = ResidualQuantizer.fit(training_data, 3, 2, 20, 1e-6, Distance.EUCLIDEAN, 5)
    assert rvq.stages == 3
    assert len(rvq.codebooks) == 1
    assert list(rvq.quantize([4.0, 8.0, 2.0])) == [4.0, 8.0, 2.0]
    assert list(rvq.quantize([0.5, -0.5, 0.0])) == [0.0, 0.0, 0.0]


def test_single_stage_picks_nearest_point():
    training_data = [Vector([0.0, 0.0]), Vector([10.0, 10.0])]
    rvq = ResidualQuantizer.fit(training_data, 1, 2, 20, 1e-6, Distance.EUCLIDEAN, 9)
    assert list(rvq.quantize([9.0, 8.0])) == [10.0, 10.0]


def test_zero_stages_give_zero_vector():
    rvq = ResidualQuantizer.fit([Vector([1.0, 2.0])], 0, 1, 5, 1e-6, Distance.EUCLIDEAN, 0)
    assert rvq.codebooks == ()
    assert list(rvq.quantize([1.0, 2.0])) == [0.0, 0.0]


def test_empty_training_data():
    with pytest.raises(ValueError, match="Training data cannot be empty"):
        ResidualQuantizer.fit([], 2, 2, 10, 1e-6, Distance.EUCLIDEAN, 42)


def test_wrong_input_dimension(trained):
    _, rvq = trained
    with pytest.raises(ValueError, match="wrong dimension"):
        rvq.quantize([1.0, 2.0])


def test_too_few_points_for_k():
    with pytest.raises(ValueError, match="Not enough data points"):
        ResidualQuantizer.fit([Vector([1.0])], 1, 2, 10, 1e-6, Distance.EUCLIDEAN, 42)
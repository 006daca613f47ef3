import numpy as np
import pytest

from vecquant.sq import ScalarQuantizer
from vecquant.vector import Vector


def _random_vectors(n, dim, seed=42):
    rng = np.random.default_rng(seed)
    return [Vector(row.tolist()) for row in rng.uniform(-1000.0, 1000.0, size=(n, dim))]


def test_scalar_quantizer_on_scalars():
    quantizer = ScalarQuantizer.fit(-1.0, 1.0, 5)
    for x in [-1.2, -1.0, -0.8, -0.3, 0.0, 0.3, 0.6, 1.0, 1.2]:
        indices = quantizer.quantize(Vector([x]))
        assert len(indices) == 1
        reconstructed = quantizer.minimum + indices[0] * quantizer.step
        clamped = min(max(x, -1.0), 1.0)
        assert abs(reconstructed - clamped) <= quantizer.step / 2.0 + 1e-6


def test_scalar_quantizer_on_large_vectors():
    dim = 1024
    quantizer = ScalarQuantizer.fit(-1000.0, 1000.0, 256)
    for vector in _random_vectors(100, dim):
        indices = quantizer.quantize(vector)
        assert len(indices) == dim
        reconstructed = [quantizer.minimum + i * quantizer.step for i in indices]
        assert len(reconstructed) == dim
        for orig, recon in zip(vector, reconstructed):
            clamped = min(max(orig, quantizer.minimum), quantizer.maximum)
            assert abs(clamped - recon) <= quantizer.step / 2.0 + 1e-6


def test_step_size():
    assert ScalarQuantizer.fit(-1.0, 1.0, 5).step == pytest.approx(0.5)


@pytest.mark.parametrize(
    "x, expected",
    [(-1.2, 0), (-1.0, 0), (-0.75, 1), (-0.3, 1), (0.0, 2), (0.25, 3), (0.6, 3), (1.0, 4), (1.2, 4)],
)
def test_quantize_scalar_values(x, expected):
    quantizer = ScalarQuantizer.fit(-1.0, 1.0, 5)
    assert quantizer.quantize_scalar(x) == expected


def test_indices_stay_below_levels():
    quantizer = ScalarQuantizer.fit(0.0, 1.0, 256)
    indices = quantizer.quantize([-5.0, 0.0, 1.0, 5.0])
    assert list(indices) == [0, 0, 255, 255]


@pytest.mark.parametrize(
    "minimum, maximum, levels, message",
    [
        (1.0, 1.0, 5, "max must be greater than min"),
        (2.0, 1.0, 5, "max must be greater than min"),
        (0.0, 1.0, 1, "levels must be at least 2"),
        (0.0, 1.0, 257, "levels must be no more than 256"),
    ],
)
def test_invalid_configuration(minimum, maximum, levels, message):
    with pytest.raises(ValueError, match=message):
        ScalarQuantizer.fit(minimum, maximum, levels)
# vecquant

Vector quantization for dense floating-point vectors. The package offers six
quantizers that share one shape: build or fit a quantizer, then call
`quantize` on a vector.

| Module           | Quantizer                   | `quantize` returns                         |
|------------------|-----------------------------|--------------------------------------------|
| `vecquant.bq`    | `BinaryQuantizer`           | `low` or `high` (0–255) per value          |
| `vecquant.sq`    | `ScalarQuantizer`           | a level index per value                    |
| `vecquant.pq`    | `ProductQuantizer`          | reconstruction rounded to half precision   |
| `vecquant.opq`   | `OptimizedProductQuantizer` | reconstruction rounded to half precision   |
| `vecquant.rvq`   | `ResidualQuantizer`         | reconstruction rounded to half precision   |
| `vecquant.tsvq`  | `TSVQ`                      | reconstruction rounded to half precision   |

Every result is a `vecquant.vector.Vector`. The half-precision results are
ordinary Python floats whose values have been rounded through float16.

The product, optimized product and residual quantizers train their codebooks
with the LBG (k-means) algorithm in `vecquant.lbg.lbg_quantize(data, k,
max_iters, seed)`, which uses a seeded NumPy generator so that training is
reproducible.

## Installation

```
pip install vecquant
```

Python 3.10 or later and NumPy are required.

## Usage

```python
from vecquant.vector import Vector
from vecquant.bq import BinaryQuantizer
from vecquant.sq import ScalarQuantizer

v = Vector([0.3, 0.5, 0.8])

BinaryQuantizer.fit(0.5, 0, 1).quantize(v)      # Vector [0, 1, 1]
sq = ScalarQuantizer.fit(0.0, 1.0, 256)         # clamp to [0, 1], 256 uniform levels
sq.quantize(v)                                  # level indices
sq.minimum + sq.quantize_scalar(0.5) * sq.step  # value of a level
```

`ScalarQuantizer` requires `maximum > minimum` and between 2 and 256 levels.

The learned quantizers take training data, codebook sizes, an iteration
limit, a `vecquant.distances.Distance` used to pick codewords, and a seed:

```python
from vecquant.distances import Distance
from vecquant.pq import ProductQuantizer
from vecquant.opq import OptimizedProductQuantizer
from vecquant.rvq import ResidualQuantizer
from vecquant.tsvq import TSVQ

training = [Vector([float(i + j) for j in range(10)]) for i in range(100)]

# m=2 subspaces, k=2 codewords each, 20 LBG iterations, seed 33
pq = ProductQuantizer.fit(training, 2, 2, 20, Distance.EUCLIDEAN, 33)
pq.quantize(training[0])

# as above, plus 5 rotation-update iterations
opq = OptimizedProductQuantizer.fit(training, 2, 2, 20, 5, Distance.EUCLIDEAN, 43)

# 2 stages of 2 codewords; stops early once the residual norm is below epsilon
rvq = ResidualQuantizer.fit(training, 2, 2, 20, 1e-5, Distance.EUCLIDEAN, 53)

# binary tree of depth at most 3, split at the median of the widest dimension
tree = TSVQ(training, 3, Distance.EUCLIDEAN)
tree.quantize(training[0])
```

`Distance` has the ready-made values `SQUARED_EUCLIDEAN`, `EUCLIDEAN`,
`COSINE`, `MANHATTAN`, `CHEBYSHEV` and `HAMMING`, and
`Distance.minkowski(p)` for a Minkowski distance of order `p`; the kind is
held as a `Metric` enumeration member. `Distance.compute(a, b)` works on any
two equally long sequences of numbers.

Invalid input raises `ValueError`: sequences of different lengths, a
dimension that is not divisible by the number of subspaces, fewer training
vectors than codewords, empty training data, or a vector of the wrong
dimension passed to `quantize`.

`vecquant.vector` also provides `mean_vector`, `to_half` and vector
arithmetic (`+`, `-`, scalar `*`, `dot`, `norm`, `distance2`).

## Evaluation helpers

`vecquant.metrics` generates uniform synthetic data
(`generate_synthetic_data`) and measures quality
(`calculate_reconstruction_error`, the mean squared error per element, and
`calculate_recall`, recall@k of nearest neighbours). Results are held in
`BenchmarkResult`.

`vecquant.evaluate` has `benchmark_bq`, `benchmark_sq` and `benchmark_pq`;
`vecquant.cli` has `benchmark_opq`, `benchmark_rvq` and `benchmark_tsvq`.
`run_suite(benchmark, sample_sizes)` runs a benchmark for several sample
sizes and `write_results(results, path)` writes them as CSV.

## Command-line tools

Run a short demonstration of every quantizer on random training data:

```
vecquant-examples
```

Benchmark one quantizer on synthetic data, logging training time,
quantization time, reconstruction error and recall@10, and writing the
results as CSV:

```
vecquant-eval --eval pq --samples 1000 5000 --dims 128 --output pq.csv
```

`--eval` is one of `bq`, `sq`, `pq`, `opq`, `tsvq` and `rvq`; an unknown name
prints an error and exits with status 1. Without `--samples` the sizes
1000, 5000, 10000, 50000 and 100000 are run, which takes a long time for the
learned quantizers. Without `--output` the results go to
`notebooks/data/eval_<name>_results.csv`; the directory is not created, so it
must already exist.

## Debug logging

`vecquant.logsetup.configure_logging()` turns on debug-level logging for the
`vecquant` logger when the `DEBUG_VQ` environment variable holds anything
other than `0`, `false`, `no`, `off` or an empty value. `vecquant-eval` calls
it on start-up; in your own code, call it yourself.

## Limitations

- Trained quantizers cannot be saved or loaded; they live only in memory.
- The learned quantizers return reconstructed vectors, not codeword indices,
  so there is no compact code format to store or transmit.
- All work runs in a single thread.

## Running the tests

```
pip install "vecquant[test]"
pytest
```
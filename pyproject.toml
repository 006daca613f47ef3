[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "vecquant"
version = "0.1.0"
description = "Vector quantization: binary, scalar, product, optimized product, residual and tree-structured quantizers"
requires-python = ">=3.10"
dependencies = [
    "numpy",
]
keywords = [
    "vector quantization",
    "product quantization",
    "residual quantization",
    "k-means",
    "compression",
    "nearest neighbour search",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Mathematics",
    "Topic :: Scientific/Engineering :: Information Analysis",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
vecquant-eval = "vecquant.cli:main"
vecquant-examples = "vecquant.examples:main"

[tool.hatch.build.targets.wheel]
packages = ["vecquant"]

[tool.hatch.build.targets.sdist]
include = [
    "vecquant",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true

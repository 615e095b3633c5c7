[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "readapt"
version = "0.1.1"
description = "A reinforcement learning library: stochastic multi-armed bandits and benchmarks"
requires-python = ">=3.10"
dependencies = []
keywords = ["ai", "machine-learning", "reinforcement", "bandits"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Scientific/Engineering :: Artificial Intelligence",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["readapt"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

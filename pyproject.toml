[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "dpnumeric"
version = "0.1.0"
description = "Numeric helpers for differential privacy work: overflow-checked integer arithmetic, an inverse normal CDF estimate and small sequence statistics."
requires-python = ">=3.10"
dependencies = []
keywords = ["differential privacy", "statistics", "overflow", "quantile", "numeric"]
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
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["dpnumeric"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

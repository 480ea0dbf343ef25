[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "plonkit"
version = "0.1.0"
description = "Prime-field polynomials, witnesses, Halo helpers and proof data structures for PLONK-style proof systems"
requires-python = ">=3.10"
dependencies = []
keywords = ["plonk", "halo", "zero-knowledge", "polynomial", "finite-field", "witness"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["plonkit"]

[tool.pytest.ini_options]
addopts = "-ra"

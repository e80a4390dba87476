[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "parexp"
version = "0.1.0"
description = "Matrix exponential by Taylor series with strided and block work splits, and midpoint-rule numerical integration"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "matrix exponential",
    "taylor series",
    "numerical integration",
    "midpoint rule",
    "work decomposition",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Education",
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

[project.scripts]
parexp = "parexp.cli:main"
parexp-integrate = "parexp.integrate:main"

[tool.hatch.build.targets.wheel]
packages = ["parexp"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true

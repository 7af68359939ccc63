[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "telesched"
version = "0.1.0"
description = "Multi-objective telescope observation scheduling with NSGA-II over permutations"
requires-python = ">=3.10"
dependencies = []
keywords = [
    "nsga-ii",
    "multi-objective",
    "genetic-algorithm",
    "scheduling",
    "telescope",
    "astronomy",
    "permutation",
]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: Astronomy",
    "Topic :: Scientific/Engineering :: Mathematics",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
telesched = "telesched.nsga2:main"
telesched-permcheck = "telesched.permcheck:main"

[tool.hatch.build.targets.wheel]
packages = ["telesched"]

[tool.pytest.ini_options]
addopts = "-ra"

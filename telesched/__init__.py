"""Multi-objective telescope observation scheduling with NSGA-II over target permutations."""

__version__ = "0.1.0"
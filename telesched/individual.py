"""Candidate solutions: target permutations with their objective values and ranking data."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from itertools import chain

from telesched.evaluation import evaluate_permutation
from telesched.instance import ProblemInstance
from telesched.rand import RandomGenerator

INF = 1.0e14
N_OBJECTIVES = 2


@dataclass
class Individual:
    """A permutation of targets together with its objectives, rank and crowding distance."""

    rep: list[int]
    objectives: list[float] = field(default_factory=lambda: [0.0] * N_OBJECTIVES)
    rank: int = 0
    crowd_dist: float = 0.0
    constr_violation: float = 0.0

    def copy(self) -> Individual:
        """Return an independent copy of this individual."""
        return Individual(
            rep=list(self.rep),
            objectives=list(self.objectives),
            rank=self.rank,
            crowd_dist=self.crowd_dist,
            constr_violation=self.constr_violation,
        )

    def evaluate(self, instance: ProblemInstance) -> None:
        """Decode the permutation and store (negated value, cost) as the objectives."""
        self.objectives = list(evaluate_permutation(self.rep, instance))


def random_individual(rng: RandomGenerator, size: int) -> Individual:
    """Return an individual holding a random permutation of ``range(size)``."""
    rep = list(range(size))
    for position in range(size):
        other = rng.randint(0, size - 1)
        rep[position], rep[other] = rep[other], rep[position]
    return Individual(rep=rep, constr_violation=0.0)


def initialize_population(rng: RandomGenerator, popsize: int, size: int) -> list[Individual]:
    """Return ``popsize`` random individuals over permutations of ``range(size)``."""
    return [random_individual(rng, size) for _ in range(popsize)]


def evaluate_population(population: Iterable[Individual], instance: ProblemInstance) -> None:
    """Evaluate every individual of the population in place."""
    for individual in population:
        individual.evaluate(instance)


def merge(
    population1: Iterable[Individual], population2: Iterable[Individual]
) -> list[Individual]:
    """Return copies of the individuals of both populations, the first one first."""
    return [individual.copy() for individual in chain(population1, population2)]
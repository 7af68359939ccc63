"""Variation operators: order crossover, swap mutation and binary tournament selection."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from telesched.dominance import check_dominance
from telesched.individual import Individual
from telesched.rand import RandomGenerator


@dataclass
class OperatorCounts:
    """How many crossovers and mutations actually took place."""

    crossovers: int = 0
    mutations: int = 0


def _ox_child(donor: Sequence[int], other: Sequence[int], start: int, end: int) -> list[int]:
    size = len(donor)
    child = list(donor)
    taken = set(donor[start:end + 1])
    genes = [gene for gene in [*other[end + 1:], *other[:end + 1]] if gene not in taken]
    positions = [*range(end + 1, size), *range(start)]
    for position, gene in zip(positions, genes):
        child[position] = gene
    return child


def crossover_ox(
    parent1: Individual,
    parent2: Individual,
    rng: RandomGenerator,
    probability: float,
    counts: OperatorCounts | None = None,
) -> tuple[Individual, Individual]:
    """Return two children made by order crossover, or copies of the parents' permutations."""
    if rng.random() < probability:
        if counts is not None:
            counts.crossovers += 1
        size = len(parent1.rep)
        start = rng.randint(0, size - 1)
        end = rng.randint(0, size - 1)
        if start > end:
            start, end = end, start
        return (
            Individual(rep=_ox_child(parent1.rep, parent2.rep, start, end)),
            Individual(rep=_ox_child(parent2.rep, parent1.rep, start, end)),
        )
    return Individual(rep=list(parent1.rep)), Individual(rep=list(parent2.rep))


def random_swap(
    individual: Individual,
    rng: RandomGenerator,
    probability: float,
    counts: OperatorCounts | None = None,
) -> bool:
    """Swap two distinct positions of the permutation with the given probability."""
    if not rng.random() < probability:
        return False
    size = len(individual.rep)
    if size < 2:
        raise ValueError("a permutation needs at least two elements to swap")
    if counts is not None:
        counts.mutations += 1
    first = rng.randint(0, size - 1)
    second = rng.randint(0, size - 1)
    while first == second:
        second = rng.randint(0, size - 1)
    rep = individual.rep
    rep[first], rep[second] = rep[second], rep[first]
    return True


def mutate_population(
    population: Iterable[Individual],
    rng: RandomGenerator,
    probability: float,
    counts: OperatorCounts | None = None,
) -> None:
    """Apply swap mutation to every individual in place."""
    for individual in population:
        random_swap(individual, rng, probability, counts)


def tournament(ind1: Individual, ind2: Individual, rng: RandomGenerator) -> Individual:
    """Return the winner by dominance, then crowding distance, then a coin toss."""
    flag = check_dominance(ind1, ind2)
    if flag == 1:
        return ind1
    if flag == -1:
        return ind2
    if ind1.crowd_dist > ind2.crowd_dist:
        return ind1
    if ind2.crowd_dist > ind1.crowd_dist:
        return ind2
    return ind1 if rng.random() <= 0.5 else ind2


def selection(
    population: Sequence[Individual],
    rng: RandomGenerator,
    probability: float,
    counts: OperatorCounts | None = None,
) -> list[Individual]:
    """Build an offspring population by tournaments over two shuffles and crossover."""
    popsize = len(population)
    if popsize < 4 or popsize % 4:
        raise ValueError(f"population size must be a positive multiple of 4, got {popsize}")
    first = list(range(popsize))
    second = list(range(popsize))
    for position in range(popsize):
        chosen = rng.randint(position, popsize - 1)
        first[chosen], first[position] = first[position], first[chosen]
        chosen = rng.randint(position, popsize - 1)
        second[chosen], second[position] = second[position], second[chosen]

    offspring: list[Individual] = []
    for block in range(0, popsize, 4):
        for order in (first, second):
            parent1 = tournament(population[order[block]], population[order[block + 1]], rng)
            parent2 = tournament(
                population[order[block + 2]], population[order[block + 3]], rng
            )
            offspring.extend(crossover_ox(parent1, parent2, rng, probability, counts))
    return offspring
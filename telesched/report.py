"""Text reports of populations: objectives, permutation, rank and crowding distance."""

from __future__ import annotations

from collections.abc import Iterable

from telesched.individual import Individual


def format_individual(individual: Individual) -> str:
    """Return one report line for an individual, newline included."""
    objectives = "".join(f"{value:e}\t" for value in individual.objectives)
    permutation = "".join(f"{gene} " for gene in individual.rep)
    return (
        f"{objectives}{permutation}"
        f"\tRank: {individual.rank}\tCDD: {individual.crowd_dist:e}\n"
    )


def format_population(population: Iterable[Individual]) -> str:
    """Return the report lines of every individual of the population."""
    return "".join(format_individual(individual) for individual in population)


def format_feasible(population: Iterable[Individual]) -> str:
    """Return the report lines of the feasible individuals of the first front."""
    return "".join(
        format_individual(individual)
        for individual in population
        if individual.constr_violation == 0.0 and individual.rank == 1
    )
"""Crowding distance of the individuals of one front."""

from __future__ import annotations

from collections.abc import Sequence

from telesched.individual import INF, Individual
from telesched.rand import RandomGenerator
from telesched.sorting import sort_by_objective


def assign_crowding_distance(
    population: Sequence[Individual], indices: Sequence[int], rng: RandomGenerator
) -> None:
    """Set the crowding distance of the individuals at ``indices``, which form one front."""
    front = list(indices)
    if not front:
        return
    if len(front) <= 2:
        for index in front:
            population[index].crowd_dist = INF
        return

    n_objectives = len(population[front[0]].objectives)
    orders = [
        sort_by_objective(population, front, objective, rng)
        for objective in range(n_objectives)
    ]
    for index in front:
        population[index].crowd_dist = 0.0
    for order in orders:
        population[order[0]].crowd_dist = INF

    for objective, order in enumerate(orders):
        low = population[order[0]].objectives[objective]
        high = population[order[-1]].objectives[objective]
        span = high - low
        for previous, current, following in zip(order, order[1:-1], order[2:]):
            individual = population[current]
            if individual.crowd_dist == INF or span == 0:
                continue
            gap = (
                population[following].objectives[objective]
                - population[previous].objectives[objective]
            )
            individual.crowd_dist += gap / span

    for index in front:
        if population[index].crowd_dist != INF:
            population[index].crowd_dist /= n_objectives
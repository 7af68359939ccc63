"""Non-dominated sorting of a population into ranked fronts."""

from __future__ import annotations

from collections.abc import Sequence

from telesched.crowding import assign_crowding_distance
from telesched.dominance import check_dominance
from telesched.individual import INF, Individual
from telesched.rand import RandomGenerator


def _next_front(population: Sequence[Individual], pending: list[int]) -> list[int]:
    """Remove the next non-dominated front from ``pending`` and return its indices.

    Members join the front at its head, and members pushed out of the front
    go back to the head of ``pending``, so the orders match those the
    crowding distance computation consumes.
    """
    front = [pending.pop(0)]
    position = 0
    while position < len(pending):
        candidate = population[pending[position]]
        flag = 0
        member = 0
        while member < len(front):
            flag = check_dominance(candidate, population[front[member]])
            if flag == 1:
                pending.insert(0, front.pop(member))
                position += 1
            elif flag == 0:
                member += 1
            else:
                break
        if flag >= 0:
            front.insert(0, pending.pop(position))
        else:
            position += 1
    return front


def assign_rank_and_crowding_distance(
    population: Sequence[Individual], rng: RandomGenerator
) -> None:
    """Set the front rank (from 1) and crowding distance of every individual."""
    pending = list(range(len(population)))
    rank = 1
    while pending:
        if len(pending) == 1:
            last = population[pending[0]]
            last.rank = rank
            last.crowd_dist = INF
            break
        front = _next_front(population, pending)
        for index in front:
            population[index].rank = rank
        assign_crowding_distance(population, front, rng)
        rank += 1
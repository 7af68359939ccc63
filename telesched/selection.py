"""Elitist survivor selection by non-dominated fronts and crowding distance."""

from __future__ import annotations

from collections.abc import Sequence
from itertools import islice

from telesched.crowding import assign_crowding_distance
from telesched.individual import Individual
from telesched.rand import RandomGenerator
from telesched.ranking import _next_front
from telesched.sorting import sort_by_crowding


def fill_nondominated_sort(
    mixed: Sequence[Individual], popsize: int, rng: RandomGenerator
) -> list[Individual]:
    """Return ``popsize`` copies chosen front by front from ``mixed``.

    Whole fronts are taken while they fit; the front that overflows is
    thinned by decreasing crowding distance.
    """
    if popsize > len(mixed):
        raise ValueError(
            f"cannot select {popsize} individuals from a population of {len(mixed)}"
        )
    pending = list(range(len(mixed)))
    chosen: list[Individual] = []
    rank = 1
    while len(chosen) < popsize:
        front = _next_front(mixed, pending)
        start = len(chosen)
        if start + len(front) <= popsize:
            for index in front:
                survivor = mixed[index].copy()
                survivor.rank = rank
                chosen.append(survivor)
            assign_crowding_distance(chosen, range(start, len(chosen)), rng)
            rank += 1
        else:
            for survivor in crowding_fill(mixed, front, popsize - start, rng):
                survivor.rank = rank
                chosen.append(survivor)
    return chosen


def crowding_fill(
    mixed: Sequence[Individual],
    front: Sequence[int],
    count: int,
    rng: RandomGenerator,
) -> list[Individual]:
    """Return copies of the ``count`` front members with the largest crowding distance."""
    assign_crowding_distance(mixed, front, rng)
    order = sort_by_crowding(mixed, front, rng)
    return [mixed[index].copy() for index in islice(reversed(order), count)]
"""Randomized quicksort of population indices by objective value or crowding distance."""

from __future__ import annotations

from collections.abc import Callable, Sequence

from telesched.individual import Individual
from telesched.rand import RandomGenerator


def _randomized_quicksort(
    indices: Sequence[int], key: Callable[[int], float], rng: RandomGenerator
) -> list[int]:
    items = list(indices)
    pending = [(0, len(items) - 1)]
    while pending:
        left, right = pending.pop()
        if left >= right:
            continue
        chosen = rng.randint(left, right)
        items[right], items[chosen] = items[chosen], items[right]
        pivot = key(items[right])
        boundary = left - 1
        for position in range(left, right):
            if key(items[position]) <= pivot:
                boundary += 1
                items[position], items[boundary] = items[boundary], items[position]
        split = boundary + 1
        items[split], items[right] = items[right], items[split]
        # The left part is finished before the right one, as a recursive sort would.
        pending.append((split + 1, right))
        pending.append((left, split - 1))
    return items


def sort_by_objective(
    population: Sequence[Individual],
    indices: Sequence[int],
    objective: int,
    rng: RandomGenerator,
) -> list[int]:
    """Return the indices ordered by increasing value of the given objective."""
    return _randomized_quicksort(
        indices, lambda index: population[index].objectives[objective], rng
    )


def sort_by_crowding(
    population: Sequence[Individual], indices: Sequence[int], rng: RandomGenerator
) -> list[int]:
    """Return the indices ordered by increasing crowding distance."""
    return _randomized_quicksort(indices, lambda index: population[index].crowd_dist, rng)
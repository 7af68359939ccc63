"""Objective values of decoded schedules and simple permutation measures."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from itertools import combinations, pairwise

from telesched.instance import ProblemInstance
from telesched.scheduling import TelescopeQueue, decode_permutation


def evaluate_queues(
    queues: Iterable[TelescopeQueue], instance: ProblemInstance
) -> tuple[float, float]:
    """Return (negated total value, total cost) of the scheduled observations.

    Telescopes are filled in order, so the first empty queue ends the scan.
    """
    total_value = 0.0
    total_cost = 0.0
    for queue in queues:
        items = list(queue)
        if not items:
            break
        total_cost += items[0].target.start_cost
        total_value += sum(item.value for item in items)
        total_cost += sum(
            instance.slew[current.id][following.id]
            for current, following in pairwise(items)
        )
    return -total_value, total_cost


def evaluate_permutation(
    permutation: Sequence[int], instance: ProblemInstance
) -> tuple[float, float]:
    """Decode the permutation into telescope queues and evaluate them."""
    return evaluate_queues(decode_permutation(permutation, instance), instance)


def count_displaced(permutation: Sequence[int]) -> int:
    """Count the positions that do not hold their own index."""
    return sum(1 for position, value in enumerate(permutation) if value != position)


def count_inversions(permutation: Sequence[int]) -> int:
    """Count the pairs of positions whose values are out of order."""
    return sum(1 for first, second in combinations(permutation, 2) if first > second)
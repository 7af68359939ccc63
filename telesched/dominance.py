"""Constrained Pareto dominance between two individuals."""

from __future__ import annotations

from telesched.individual import Individual


def check_dominance(a: Individual, b: Individual) -> int:
    """Return 1 if ``a`` dominates ``b``, -1 if ``b`` dominates ``a`` and 0 otherwise."""
    if a.constr_violation < 0 and b.constr_violation < 0:
        if a.constr_violation > b.constr_violation:
            return 1
        if a.constr_violation < b.constr_violation:
            return -1
        return 0
    if a.constr_violation < 0 and b.constr_violation == 0:
        return -1
    if a.constr_violation == 0 and b.constr_violation < 0:
        return 1
    a_better = any(x < y for x, y in zip(a.objectives, b.objectives))
    b_better = any(x > y for x, y in zip(a.objectives, b.objectives))
    if a_better and not b_better:
        return 1
    if b_better and not a_better:
        return -1
    return 0
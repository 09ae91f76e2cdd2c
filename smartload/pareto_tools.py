# smartload/pareto_tools.py
from __future__ import annotations
from typing import FrozenSet, Iterable, List, Set

from .models import ParetoSolution

# ======== Pareto dominance (maximization) ========
def dominates(a: List[float], b: List[float], eps: float = 0.0) -> bool:
    """Maximization objectives: a >= b everywhere and a > b somewhere."""
    assert len(a) == len(b)
    not_worse = True
    strictly_better = False
    for ai, bi in zip(a, b):
        if ai + eps < bi:
            not_worse = False
            break
        if ai > bi + eps:
            strictly_better = True
    return not_worse and strictly_better


def solution_dominates(a: ParetoSolution, b: ParetoSolution) -> bool:
    return dominates(a.obj_vector(), b.obj_vector())


# ======== Deduplication ========
def selection_key(order_ids: Iterable[str]) -> FrozenSet[str]:
    return frozenset(order_ids)


def dedupe_solutions(solutions: List[ParetoSolution]) -> List[ParetoSolution]:
    """Keep the first solution for each distinct set of order ids."""
    seen: Set[FrozenSet[str]] = set()
    out: List[ParetoSolution] = []
    for s in solutions:
        key = selection_key(s.order_ids)
        if key in seen:
            continue
        seen.add(key)
        out.append(s)
    return out


# ======== Non-dominated filter ========
def non_dominated(solutions: List[ParetoSolution]) -> List[ParetoSolution]:
    """
    O(k^2) filter; k is at most the number of sampled weight vectors.
    Input order is preserved among survivors.
    """
    front: List[ParetoSolution] = []
    for i, s in enumerate(solutions):
        if any(solution_dominates(o, s) for j, o in enumerate(solutions) if j != i):
            continue
        front.append(s)
    return front

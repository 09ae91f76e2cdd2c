# smartload/strategies.py
from __future__ import annotations
from typing import Optional, Sequence

from .backtracking import BacktrackingOptimizer
from .constraints import ConstraintChecker, default_checker
from .dp import DPOptimizer, MAX_DP_ORDERS
from .greedy import GreedyOptimizer
from .models import Algorithm, Order, Truck, OptimizationResult


def resolve_algorithm(algorithm: Algorithm, n_orders: int, max_dp_orders: int = MAX_DP_ORDERS) -> Algorithm:
    """AUTO becomes DP up to the exact bound and GREEDY above it; explicit choices pass through."""
    if algorithm is Algorithm.AUTO:
        return Algorithm.DP if n_orders <= max_dp_orders else Algorithm.GREEDY
    return algorithm


def run_strategy(
    algorithm: Algorithm,
    truck: Truck,
    orders: Sequence[Order],
    checker: Optional[ConstraintChecker] = None,
    max_dp_orders: int = MAX_DP_ORDERS,
) -> OptimizationResult:
    checker = checker or default_checker()
    concrete = resolve_algorithm(algorithm, len(orders), max_dp_orders)
    if concrete is Algorithm.DP:
        return DPOptimizer(checker, max_orders=max_dp_orders).optimize(truck, orders)
    if concrete is Algorithm.BACKTRACKING:
        return BacktrackingOptimizer(checker).optimize(truck, orders)
    if concrete is Algorithm.GREEDY:
        return GreedyOptimizer(checker).optimize(truck, orders)
    raise ValueError(f"Unsupported algorithm '{algorithm}'")


class HybridOptimizer:
    """Hard size threshold: exact DP for small inputs, greedy heuristic otherwise."""
    def __init__(self, checker: Optional[ConstraintChecker] = None, max_dp_size: int = MAX_DP_ORDERS):
        self.checker = checker or default_checker()
        self.max_dp_size = max_dp_size

    def optimize(self, truck: Truck, orders: Sequence[Order]) -> OptimizationResult:
        return run_strategy(Algorithm.AUTO, truck, orders, self.checker, self.max_dp_size)

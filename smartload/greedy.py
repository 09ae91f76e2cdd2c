# Heuristic selection for inputs too large for the exact solvers:
# rank orders by value density (payout per lb) and take each one that still fits
# and is compatible with everything already loaded. No optimality guarantee.

from __future__ import annotations                      # Allow forward references in type hints
from typing import List, Optional, Sequence
import time

from .constraints import ConstraintChecker, default_checker, filter_feasible_orders
from .models import Order, Truck, OptimizationResult


def value_density(order: Order) -> float:
    return order.payout / order.weight


class GreedyOptimizer:
    def __init__(self, checker: Optional[ConstraintChecker] = None):
        self.checker = checker or default_checker()

    def optimize(self, truck: Truck, orders: Sequence[Order]) -> OptimizationResult:
        t0 = time.perf_counter()
        ranked = sorted(filter_feasible_orders(truck, orders), key=value_density, reverse=True)

        selected: List[Order] = []
        weight = volume = payout = 0
        for order in ranked:                                       # Single pass, densest first
            if order.payout <= 0:
                continue                                           # Adds nothing to the load
            if not self.checker.can_fit(truck, weight, volume, order):
                continue                                           # Would overflow capacity
            if not self.checker.compatible_with_all(order, selected):
                continue                                           # Clashes with a loaded order
            selected.append(order)
            weight += order.weight
            volume += order.volume
            payout += order.payout

        return OptimizationResult(
            selected_orders=selected,
            total_payout=payout,
            total_weight=weight,
            total_volume=volume,
            compute_time_ms=int((time.perf_counter() - t0) * 1000),
        )

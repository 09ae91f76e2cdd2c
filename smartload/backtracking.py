# smartload/backtracking.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Sequence
import time

from .constraints import ConstraintChecker, default_checker, filter_feasible_orders
from .models import Order, Truck, OptimizationResult


@dataclass
class _Incumbent:
    """Best solution found so far. One per optimize() call, threaded through the recursion."""
    payout: int = 0
    weight: int = 0
    volume: int = 0
    orders: List[Order] = field(default_factory=list)


class BacktrackingOptimizer:
    """
    Exact branch-and-bound over include/exclude decisions in index order.

    Bound: payout so far + payout of every not-yet-considered order. It never
    underestimates, so a branch is dropped only when it cannot beat the
    incumbent. No 2^n table is built; worst-case time can exceed the DP's.
    """
    def __init__(self, checker: Optional[ConstraintChecker] = None):
        self.checker = checker or default_checker()

    def optimize(self, truck: Truck, orders: Sequence[Order]) -> OptimizationResult:
        t0 = time.perf_counter()
        orders = filter_feasible_orders(truck, orders)

        # suffix[i] = sum of payouts of orders[i:]
        suffix = [0] * (len(orders) + 1)
        for i in range(len(orders) - 1, -1, -1):
            suffix[i] = suffix[i + 1] + orders[i].payout

        best = _Incumbent()
        self._search(truck, orders, suffix, [], 0, 0, 0, 0, best)

        return OptimizationResult(
            selected_orders=best.orders,
            total_payout=best.payout,
            total_weight=best.weight,
            total_volume=best.volume,
            compute_time_ms=int((time.perf_counter() - t0) * 1000),
        )

    def _search(
        self,
        truck: Truck,
        orders: Sequence[Order],
        suffix: List[int],
        current: List[Order],
        index: int,
        payout: int,
        weight: int,
        volume: int,
        best: _Incumbent,
    ) -> None:
        if payout > best.payout:
            best.payout, best.weight, best.volume = payout, weight, volume
            best.orders = current[:]

        if index >= len(orders):
            return
        if payout + suffix[index] <= best.payout:
            return  # prune

        order = orders[index]
        if (self.checker.can_fit(truck, weight, volume, order)
                and self.checker.compatible_with_all(order, current)):
            current.append(order)
            self._search(truck, orders, suffix, current, index + 1,
                         payout + order.payout, weight + order.weight, volume + order.volume, best)
            current.pop()

        self._search(truck, orders, suffix, current, index + 1, payout, weight, volume, best)

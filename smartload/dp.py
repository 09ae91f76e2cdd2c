# smartload/dp.py
from __future__ import annotations
from typing import List, Optional, Sequence
import time

import numpy as np

from .constraints import ConstraintChecker, default_checker, filter_feasible_orders
from .models import Order, Truck, OptimizationResult

MAX_DP_ORDERS = 22


class TooManyOrdersError(ValueError):
    """Raised when the exact bitmask solver is handed more orders than it can tabulate."""


class DPOptimizer:
    """
    Exact subset selection by bitmask dynamic programming.

    State = subset mask over order indices; four flat numpy buffers of size 2^n
    hold payout / weight / volume / reachable for each mask. The table is filled
    one order at a time: the block of masks whose highest bit is i is derived
    from the block below 2^i by adding order i, so every mask is built from a
    final proper subset. A mask is reachable iff its lower part is reachable,
    order i clashes with nothing in it, and capacity still holds.
    O(2^n) vectorised work, O(2^n) space.

    The buffers are allocated inside optimize() and dropped when it returns;
    the instance itself only holds the (immutable) checker.
    """
    def __init__(self, checker: Optional[ConstraintChecker] = None, max_orders: int = MAX_DP_ORDERS):
        self.checker = checker or default_checker()
        self.max_orders = max_orders

    def incompatibility_masks(self, orders: Sequence[Order]) -> List[int]:
        """Bit j of masks[i] is set when orders i and j may not share the truck."""
        n = len(orders)
        masks = [0] * n
        for i in range(n):
            for j in range(n):
                if i != j and not self.checker.can_combine(orders[i], orders[j]):
                    masks[i] |= 1 << j
        return masks

    def optimize(self, truck: Truck, orders: Sequence[Order]) -> OptimizationResult:
        t0 = time.perf_counter()
        orders = filter_feasible_orders(truck, orders)
        n = len(orders)
        if n == 0:
            return OptimizationResult(compute_time_ms=_elapsed_ms(t0))
        if n > self.max_orders:
            raise TooManyOrdersError(
                f"bitmask solver supports at most {self.max_orders} orders (got {n})"
            )

        incompatible = self.incompatibility_masks(orders)

        size = 1 << n
        dp_payout = np.zeros(size, dtype=np.int64)
        dp_weight = np.zeros(size, dtype=np.int64)
        dp_volume = np.zeros(size, dtype=np.int64)
        reachable = np.zeros(size, dtype=bool)
        reachable[0] = True
        masks = np.arange(size, dtype=np.int64)

        for i, order in enumerate(orders):
            lo, hi = 1 << i, 1 << (i + 1)
            np.add(dp_payout[:lo], order.payout, out=dp_payout[lo:hi])
            np.add(dp_weight[:lo], order.weight, out=dp_weight[lo:hi])
            np.add(dp_volume[:lo], order.volume, out=dp_volume[lo:hi])

            ok = reachable[lo:hi]
            np.copyto(ok, reachable[:lo])
            # only bits below i can be set in the lower block
            ok &= (masks[:lo] & (incompatible[i] & (lo - 1))) == 0
            ok &= dp_weight[lo:hi] <= truck.max_weight
            ok &= dp_volume[lo:hi] <= truck.max_volume

        # argmax returns the first maximum -> lowest mask wins ties
        candidates = np.flatnonzero(reachable)
        best_mask = int(candidates[np.argmax(dp_payout[candidates])])

        return OptimizationResult(
            selected_orders=self.extract_orders(best_mask, orders),
            total_payout=int(dp_payout[best_mask]),
            total_weight=int(dp_weight[best_mask]),
            total_volume=int(dp_volume[best_mask]),
            compute_time_ms=_elapsed_ms(t0),
        )

    @staticmethod
    def extract_orders(mask: int, orders: Sequence[Order]) -> List[Order]:
        return [o for i, o in enumerate(orders) if mask & (1 << i)]


def _elapsed_ms(t0: float) -> int:
    return int((time.perf_counter() - t0) * 1000)

""" LoadOptimizerService ties the engine together for one truck and one batch of orders.

It:

Drops orders that can never fit and flags mixed hazmat batches.
Chooses the strategy (explicit algorithm or AUTO size dispatch).
Scalarizes payout against capacity utilization when the weights ask for it, solves on relabeled
copies, then reports totals from the original orders only.
Samples five fixed weight vectors to build a deduplicated, non-dominated trade-off list.

The service holds configuration only; every solve works on call-local data, so one instance can be
shared by concurrent requests. """

from __future__ import annotations
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .constraints import (
    ConstraintChecker, default_checker, strict_checker,
    filter_feasible_orders, separate_hazmat_orders,
)
from .dp import MAX_DP_ORDERS
from .models import (
    Algorithm, Order, Truck, OptimizationConfig, OptimizationResult, ParetoSolution,
)
from .objectives import (
    PARETO_WEIGHTS, display_score, format_dollars, round_half_up,
    scalarize_orders, utilization_percent,
)
from .pareto_tools import dedupe_solutions, non_dominated
from .strategies import resolve_algorithm, run_strategy

logger = logging.getLogger(__name__)


class LoadOptimizerService:
    def __init__(self, checker: Optional[ConstraintChecker] = None, max_dp_orders: int = MAX_DP_ORDERS):
        self.checker = checker or default_checker()
        self.max_dp_orders = max_dp_orders

    @classmethod
    def from_settings(cls, settings) -> "LoadOptimizerService":
        checker = strict_checker(settings.time_window_days) if settings.strict_time_window else default_checker()
        return cls(checker=checker, max_dp_orders=settings.max_dp_orders)

    # ----- preprocessing -----
    def preprocess_orders(self, truck: Truck, orders: Sequence[Order]) -> List[Order]:
        feasible = filter_feasible_orders(truck, orders)
        dropped = len(orders) - len(feasible)
        if dropped:
            logger.info("Dropped %d order(s) exceeding truck %s capacity", dropped, truck.id)

        hazmat, non_hazmat = separate_hazmat_orders(feasible)
        if hazmat and non_hazmat:
            logger.warning("Mixed hazmat/non-hazmat orders detected: %d hazmat, %d non-hazmat",
                           len(hazmat), len(non_hazmat))
        return feasible

    def select_algorithm(self, config: Optional[OptimizationConfig], n_orders: int) -> Algorithm:
        algorithm = config.algorithm if config is not None else Algorithm.AUTO
        return resolve_algorithm(algorithm, n_orders, self.max_dp_orders)

    # ----- single solve -----
    def optimize(
        self,
        truck: Truck,
        orders: Sequence[Order],
        config: Optional[OptimizationConfig] = None,
    ) -> Tuple[OptimizationResult, Algorithm]:
        """Returns the result and the concrete algorithm that produced it."""
        orders = self.preprocess_orders(truck, orders)
        algorithm = self.select_algorithm(config, len(orders))

        logger.info("Optimizing %d orders for truck %s with %s", len(orders), truck.id, algorithm.value)
        if config is not None and not config.is_pure_revenue:
            result = self.optimize_with_weights(
                truck, orders, config.revenue_weight, config.utilization_weight, algorithm,
            )
        else:
            result = run_strategy(algorithm, truck, orders, self.checker, self.max_dp_orders)

        logger.info("Found solution with %d orders, %s payout in %dms",
                    len(result.selected_orders), format_dollars(result.total_payout),
                    result.compute_time_ms)
        return result, algorithm

    def optimize_with_weights(
        self,
        truck: Truck,
        orders: Sequence[Order],
        revenue_weight: float,
        utilization_weight: float,
        algorithm: Algorithm = Algorithm.AUTO,
    ) -> OptimizationResult:
        weighted = scalarize_orders(orders, truck, revenue_weight, utilization_weight)
        # an order whose score truncates to 0 adds nothing under these weights
        scored = [o for o in weighted if o.payout > 0]
        if len(scored) < len(weighted):
            logger.debug("Skipping %d order(s) with zero weighted score (weights %.2f/%.2f)",
                         len(weighted) - len(scored), revenue_weight, utilization_weight)
        weighted = scored
        solved = run_strategy(algorithm, truck, weighted, self.checker, self.max_dp_orders)

        # map relabeled copies back to the caller's orders (ids are unique)
        by_id: Dict[str, Order] = {o.id: o for o in orders}
        originals = [by_id[o.id] for o in solved.selected_orders]
        return OptimizationResult.from_orders(originals, compute_time_ms=solved.compute_time_ms)

    # ----- trade-off frontier -----
    def pareto_solutions(
        self,
        truck: Truck,
        orders: Sequence[Order],
        max_solutions: int = 5,
        algorithm: Algorithm = Algorithm.AUTO,
    ) -> List[ParetoSolution]:
        orders = self.preprocess_orders(truck, orders)
        algorithm = resolve_algorithm(algorithm, len(orders), self.max_dp_orders)

        candidates: List[ParetoSolution] = []
        for rw, uw in PARETO_WEIGHTS:
            result = self.optimize_with_weights(truck, orders, rw, uw, algorithm)
            weight_pct = utilization_percent(result.total_weight, truck.max_weight)
            volume_pct = utilization_percent(result.total_volume, truck.max_volume)
            candidates.append(ParetoSolution(
                order_ids=result.order_ids,
                total_payout=result.total_payout,
                total_weight=result.total_weight,
                total_volume=result.total_volume,
                utilization_weight_percent=round_half_up(weight_pct),
                utilization_volume_percent=round_half_up(volume_pct),
                score=round_half_up(display_score(result.total_payout, weight_pct, volume_pct, rw, uw)),
            ))

        front = non_dominated(dedupe_solutions(candidates))
        logger.info("Pareto frontier for truck %s: %d candidate(s), %d non-dominated",
                    truck.id, len(candidates), len(front))
        return front[:max_solutions]

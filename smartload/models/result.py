from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List

from .order import Order

# ======== Data containers ========

@dataclass
class OptimizationResult:
    """Outcome of one solve. Built per call and discarded after the response is assembled."""
    selected_orders: List[Order] = field(default_factory=list)
    total_payout: int = 0          # cents
    total_weight: int = 0          # lbs
    total_volume: int = 0          # cubic feet
    compute_time_ms: int = 0

    @property
    def order_ids(self) -> List[str]:
        return [o.id for o in self.selected_orders]

    @classmethod
    def from_orders(cls, orders: List[Order], compute_time_ms: int = 0) -> "OptimizationResult":
        """Totals recomputed from the orders' own attributes."""
        return cls(
            selected_orders=list(orders),
            total_payout=sum(o.payout for o in orders),
            total_weight=sum(o.weight for o in orders),
            total_volume=sum(o.volume for o in orders),
            compute_time_ms=compute_time_ms,
        )


@dataclass
class ParetoSolution:
    order_ids: List[str]
    total_payout: int
    total_weight: int
    total_volume: int
    utilization_weight_percent: float
    utilization_volume_percent: float
    score: float                   # display only, never used for ranking

    def obj_vector(self) -> List[float]:
        # maximization objectives
        return [
            float(self.total_payout),
            self.utilization_weight_percent,
            self.utilization_volume_percent,
        ]

    def as_payload(self) -> Dict[str, Any]:
        return {
            "order_ids": list(self.order_ids),
            "total_payout_cents": self.total_payout,
            "total_weight_lbs": self.total_weight,
            "total_volume_cuft": self.total_volume,
            "utilization_weight_percent": self.utilization_weight_percent,
            "utilization_volume_percent": self.utilization_volume_percent,
            "score": self.score,
        }

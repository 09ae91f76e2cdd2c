from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence, Tuple

from .models import Order, Truck

# (revenue_weight, utilization_weight) sampled for the trade-off frontier
PARETO_WEIGHTS: List[Tuple[float, float]] = [
    (1.0, 0.0),
    (0.8, 0.2),
    (0.6, 0.4),
    (0.4, 0.6),
    (0.2, 0.8),
]

UTILIZATION_SCALE = 10000       # brings a [0,1] capacity fraction near cent magnitudes
SCORE_UTILIZATION_SCALE = 1000  # display score: percent points -> score units


def round_half_up(value: float, places: int = 2) -> float:
    q = Decimal(1).scaleb(-places)
    return float(Decimal(str(value)).quantize(q, rounding=ROUND_HALF_UP))


def format_dollars(cents: int) -> str:
    return f"${cents / 100.0:.2f}"


def capacity_fraction(order: Order, truck: Truck) -> float:
    """Mean share of the truck's weight and volume capacity that one order uses."""
    return (order.weight / truck.max_weight + order.volume / truck.max_volume) / 2


def scaled_payout(order: Order, truck: Truck, revenue_weight: float, utilization_weight: float) -> int:
    score = (revenue_weight * order.payout
             + utilization_weight * capacity_fraction(order, truck) * UTILIZATION_SCALE)
    return int(score)


def scalarize_orders(orders: Sequence[Order], truck: Truck,
                     revenue_weight: float, utilization_weight: float) -> List[Order]:
    """
    Copies of `orders` whose payout is replaced by the weighted score. Only the
    solvers ever see these; reported totals come from the originals.
    """
    return [
        o.model_copy(update={"payout": scaled_payout(o, truck, revenue_weight, utilization_weight)})
        for o in orders
    ]


def utilization_percent(total: int, capacity: int) -> float:
    if capacity <= 0:
        return 0.0
    return total / capacity * 100


def display_score(total_payout: int, weight_pct: float, volume_pct: float,
                  revenue_weight: float, utilization_weight: float) -> float:
    return (revenue_weight * total_payout
            + utilization_weight * (weight_pct + volume_pct) * SCORE_UTILIZATION_SCALE)


def utilization_metrics(total_weight: int, total_volume: int, truck: Truck) -> Dict[str, float]:
    return {
        "utilization_weight_percent": round_half_up(utilization_percent(total_weight, truck.max_weight)),
        "utilization_volume_percent": round_half_up(utilization_percent(total_volume, truck.max_volume)),
    }

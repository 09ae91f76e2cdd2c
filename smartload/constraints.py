# Compatibility and capacity predicates shared by every solver:
# - ConstraintChecker: which orders may ride together (route, hazmat isolation, pickup window)
# - filter_feasible_orders: drops orders that could never fit, before any solver runs
# - group/separate helpers used for diagnostics by the service layer

from __future__ import annotations                     # Allow forward references in type hints
from dataclasses import dataclass                       # Immutable checker configuration
from typing import Dict, List, Optional, Sequence, Tuple

from .models import Order, Truck


@dataclass(frozen=True)
class ConstraintChecker:
    """
    Pairwise compatibility rules as configuration instead of subclasses:
      route_match       -> orders must share the exact origin/destination pairing
      hazmat_exclusive  -> hazmat and non-hazmat orders never share a load
      time_window_days  -> max |pickup_a - pickup_b| in days; None means unbounded
    """
    route_match: bool = True
    hazmat_exclusive: bool = True
    time_window_days: Optional[float] = None

    def can_combine(self, a: Order, b: Order) -> bool:
        if self.route_match and a.route != b.route:
            return False
        if self.hazmat_exclusive and a.is_hazmat != b.is_hazmat:
            return False
        return self._time_windows_compatible(a, b)

    def _time_windows_compatible(self, a: Order, b: Order) -> bool:
        if self.time_window_days is None:
            return True
        days = abs((a.pickup_date - b.pickup_date).days)
        return days <= self.time_window_days

    @staticmethod
    def can_fit(truck: Truck, current_weight: int, current_volume: int, order: Order) -> bool:
        return (current_weight + order.weight <= truck.max_weight
                and current_volume + order.volume <= truck.max_volume)

    def compatible_with_all(self, order: Order, selected: Sequence[Order]) -> bool:
        return all(self.can_combine(order, s) for s in selected)

    def validate_order_set(self, orders: Sequence[Order]) -> bool:
        """O(n^2) sanity check; not used on the solver hot path."""
        for i in range(len(orders)):
            for j in range(i + 1, len(orders)):
                if not self.can_combine(orders[i], orders[j]):
                    return False
        return True


def default_checker() -> ConstraintChecker:
    """Route + hazmat rules, any pickup dates."""
    return ConstraintChecker()


def strict_checker(window_days: float = 1.0) -> ConstraintChecker:
    """Route + hazmat rules, pickups at most `window_days` apart."""
    return ConstraintChecker(time_window_days=window_days)


def filter_feasible_orders(truck: Truck, orders: Sequence[Order]) -> List[Order]:
    return [o for o in orders if o.fits_in(truck.max_weight, truck.max_volume)]


def group_orders_by_route(orders: Sequence[Order]) -> Dict[str, List[Order]]:
    groups: Dict[str, List[Order]] = {}
    for o in orders:
        groups.setdefault(o.route, []).append(o)
    return groups


def separate_hazmat_orders(orders: Sequence[Order]) -> Tuple[List[Order], List[Order]]:
    hazmat = [o for o in orders if o.is_hazmat]
    non_hazmat = [o for o in orders if not o.is_hazmat]
    return hazmat, non_hazmat

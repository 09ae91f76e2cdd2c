from datetime import date

from smartload.models import Order


def make_order(id, payout, weight, volume=1, origin="Los Angeles, CA", destination="Dallas, TX",
               is_hazmat=False, pickup=date(2025, 12, 5), delivery=date(2025, 12, 9)) -> Order:
    return Order(
        id=id, payout=payout, weight=weight, volume=volume,
        origin=origin, destination=destination,
        pickup_date=pickup, delivery_date=delivery, is_hazmat=is_hazmat,
    )

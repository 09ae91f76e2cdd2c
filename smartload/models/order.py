""" The Order model is one candidate shipment that may be loaded onto the truck.

It carries:

Payout in integer minor currency units (cents), never a float.
Weight (lbs) and volume (cubic feet) consumed on the truck if selected.
Origin/destination pair, whose exact string pairing is the route key.
Pickup/delivery dates and the hazmat flag used by compatibility rules.

Orders are frozen: the optimizers may build relabeled copies, but never mutate an input order. """

from datetime import date                          # Calendar dates for pickup/delivery
from pydantic import BaseModel, ConfigDict         # Pydantic base class and model configuration


class Order(BaseModel):                            # Shipment order data model
    model_config = ConfigDict(frozen=True)         # Immutable for the duration of a solve

    id: str                                        # Unique order identifier
    payout: int                                    # Payout in cents
    weight: int                                    # Weight in lbs
    volume: int                                    # Volume in cubic feet
    origin: str                                    # Pickup location (opaque string)
    destination: str                               # Drop-off location (opaque string)
    pickup_date: date                              # Day the order is picked up
    delivery_date: date                            # Day the order must be delivered
    is_hazmat: bool = False                        # Hazardous materials flag

    @property
    def route(self) -> str:                        # Route key: exact origin/destination pairing
        return f"{self.origin}->{self.destination}"

    def fits_in(self, available_weight: int, available_volume: int) -> bool:
        return self.weight <= available_weight and self.volume <= available_volume

# Defines the Truck model: the single vehicle whose capacity the optimizer fills.

from pydantic import BaseModel, ConfigDict        # Pydantic base class and model configuration


class Truck(BaseModel):                           # Truck data model
    model_config = ConfigDict(frozen=True)        # Capacity never changes during a solve

    id: str                                       # Truck identifier
    max_weight: int                               # Maximum load weight in lbs
    max_volume: int                               # Maximum load volume in cubic feet

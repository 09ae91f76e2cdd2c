from datetime import date, datetime
from typing import Any, List, Dict, Optional
from pydantic import BaseModel, Field, field_validator, model_validator

from .order import Order
from .truck import Truck
from .config import OptimizationConfig, Objective, Algorithm

MAX_ORDERS = 22                     # exact-solver bound; larger requests are rejected at the edge
MAX_TRUCK_WEIGHT = 1_000_000
MAX_TRUCK_VOLUME = 100_000
MAX_PAYOUT_CENTS = 100_000_000_000


class TruckInput(BaseModel):
    id: str = Field(..., min_length=1, description="Truck identifier")
    max_weight_lbs: int = Field(..., gt=0, le=MAX_TRUCK_WEIGHT)
    max_volume_cuft: int = Field(..., gt=0, le=MAX_TRUCK_VOLUME)

    def to_domain(self) -> Truck:
        return Truck(id=self.id, max_weight=self.max_weight_lbs, max_volume=self.max_volume_cuft)


class OrderInput(BaseModel):
    id: str = Field(..., min_length=1, max_length=100)
    payout_cents: int = Field(..., gt=0, le=MAX_PAYOUT_CENTS)
    weight_lbs: int = Field(..., gt=0, le=MAX_TRUCK_WEIGHT)
    volume_cuft: int = Field(..., gt=0, le=MAX_TRUCK_VOLUME)
    origin: str = Field(..., min_length=1, max_length=200)
    destination: str = Field(..., min_length=1, max_length=200)
    pickup_date: date = Field(..., description="YYYY-MM-DD")
    delivery_date: date = Field(..., description="YYYY-MM-DD")
    is_hazmat: bool = False

    @field_validator("pickup_date", "delivery_date", mode="before")
    @classmethod
    def _parse_calendar_date(cls, v, info):
        if isinstance(v, date):
            return v
        if not isinstance(v, str):
            raise ValueError(f"invalid {info.field_name} format (expected YYYY-MM-DD)")
        try:
            return datetime.strptime(v, "%Y-%m-%d").date()
        except ValueError:
            raise ValueError(f"invalid {info.field_name} format (expected YYYY-MM-DD)")

    @model_validator(mode="after")
    def _check_dates(self):
        if self.delivery_date < self.pickup_date:
            raise ValueError("delivery_date cannot be before pickup_date")
        return self

    def to_domain(self) -> Order:
        return Order(
            id=self.id,
            payout=self.payout_cents,
            weight=self.weight_lbs,
            volume=self.volume_cuft,
            origin=self.origin,
            destination=self.destination,
            pickup_date=self.pickup_date,
            delivery_date=self.delivery_date,
            is_hazmat=self.is_hazmat,
        )


class OptimizationConfigInput(BaseModel):
    objective: Objective = Objective.REVENUE
    revenue_weight: float = Field(0.0, ge=0.0, le=1.0)
    utilization_weight: float = Field(0.0, ge=0.0, le=1.0)
    algorithm: Algorithm = Algorithm.AUTO

    @field_validator("objective", "algorithm", mode="before")
    @classmethod
    def _blank_means_default(cls, v, info):
        # empty string behaves like an omitted field
        if v is None or v == "":
            return cls.model_fields[info.field_name].default
        return v

    def to_domain(self) -> OptimizationConfig:
        return OptimizationConfig(**self.model_dump())


class OptimizeRequest(BaseModel):
    truck: TruckInput
    orders: List[OrderInput] = Field(..., min_length=1, max_length=MAX_ORDERS)
    optimization_config: Optional[OptimizationConfigInput] = None

    @model_validator(mode="after")
    def _unique_order_ids(self):
        seen = set()
        for o in self.orders:
            if o.id in seen:
                raise ValueError(f"duplicate order id: {o.id}")
            seen.add(o.id)
        return self

    def to_domain(self):
        cfg = self.optimization_config.to_domain() if self.optimization_config else None
        return self.truck.to_domain(), [o.to_domain() for o in self.orders], cfg


class OptimizeResponse(BaseModel):
    truck_id: str
    selected_order_ids: List[str]
    total_payout_cents: int
    total_weight_lbs: int
    total_volume_cuft: int
    utilization_weight_percent: float
    utilization_volume_percent: float
    algorithm: str
    compute_time_ms: int


class ParetoResponse(BaseModel):
    truck_id: str
    solutions: List[Dict[str, Any]]
    count: int


class ErrorDetail(BaseModel):
    code: int
    message: str


class ErrorResponse(BaseModel):
    error: ErrorDetail

from .order import Order
from .truck import Truck
from .config import OptimizationConfig, Objective, Algorithm
from .result import OptimizationResult, ParetoSolution

from .api_schemas import (
    TruckInput, OrderInput, OptimizationConfigInput,
    OptimizeRequest, OptimizeResponse,
    ParetoResponse, ErrorDetail, ErrorResponse,
)

# Defines the optimization configuration: objective, scalarization weights and solving strategy.

from enum import Enum                              # String enums for objective/algorithm choices
from pydantic import BaseModel, Field, model_validator  # Pydantic base class, field bounds, post-init hook


class Objective(str, Enum):                        # What the caller wants to maximize
    REVENUE = "revenue"                            # Total payout only
    UTILIZATION = "utilization"                    # Capacity usage only
    BALANCED = "balanced"                          # Even mix of both


class Algorithm(str, Enum):                        # Closed set of solving strategies
    DP = "dp"                                      # Exact bitmask dynamic programming
    BACKTRACKING = "backtracking"                  # Exact branch-and-bound
    GREEDY = "greedy"                              # Value-density heuristic
    AUTO = "auto"                                  # DP up to the exact bound, greedy above it


# Weights applied when the caller leaves both weights at zero
DEFAULT_WEIGHTS = {
    Objective.REVENUE: (1.0, 0.0),
    Objective.UTILIZATION: (0.0, 1.0),
    Objective.BALANCED: (0.5, 0.5),
}


class OptimizationConfig(BaseModel):
    objective: Objective = Objective.REVENUE
    revenue_weight: float = Field(0.0, ge=0.0, le=1.0)
    utilization_weight: float = Field(0.0, ge=0.0, le=1.0)
    algorithm: Algorithm = Algorithm.AUTO

    @model_validator(mode="after")                 # Fill weights from the objective when both are zero
    def _default_weights(self):
        if self.revenue_weight == 0 and self.utilization_weight == 0:
            self.revenue_weight, self.utilization_weight = DEFAULT_WEIGHTS[self.objective]
        return self

    @property
    def is_pure_revenue(self) -> bool:             # True when scalarization can be skipped
        return self.revenue_weight == 1.0 and self.utilization_weight == 0.0

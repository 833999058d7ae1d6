from pydantic import BaseModel, Field, model_validator
from typing import Literal, List, Optional

RatioRule = Literal["tightest", "first_run"]
Status = Literal["optimal", "unbounded", "iteration_limit"]


class SystemSpec(BaseModel):
    objective: List[float]
    constraints: List[List[float]] = Field(default_factory=list)

    @model_validator(mode="after")
    def _check_widths(self) -> "SystemSpec":
        if not self.objective:
            raise ValueError("Objective needs at least a constant term.")
        width = len(self.objective)
        for idx, row in enumerate(self.constraints):
            if len(row) != width:
                raise ValueError(
                    f"Constraint {idx} has {len(row)} coefficients, objective has {width}."
                )
        return self


class SolveOptions(BaseModel):
    max_iters: int = Field(default=100, ge=0)
    ratio_rule: RatioRule = "tightest"
    tol: float = 1e-6


class TableauSolution(BaseModel):
    status: Status
    objective_value: Optional[float]
    basic_values: List[float] | None
    objective: List[float]
    constraints: List[List[float]]
    iterations: int
    message: str = ""

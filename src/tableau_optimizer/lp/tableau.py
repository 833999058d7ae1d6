from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

import numpy as np

from ..errors import IterationLimitError, UnboundedError
from ..schemas import RatioRule, SystemSpec
from .utils import format_system

logger = logging.getLogger(__name__)

MAX_PIVOTS = 100
RATIO_RULES = ("tightest", "first_run")


def scale(row: np.ndarray, factor: float) -> None:
    row *= factor


def rewrite(row: np.ndarray, x: int) -> None:
    """
    Solve a row for variable ``x`` in place, swapping it with the row's basic variable.

    ``w = 4 + 2x`` (stored as ``[4, 2]``) becomes ``x = -2 + 0.5w`` (``[-2, 0.5]``);
    column ``x`` then holds the coefficient of ``w``. Rewriting the result again at
    the same index gives back the original row.
    """

    q = float(row[x])
    if q == 0.0:
        raise ValueError(f"Cannot solve for variable {x}: its coefficient is zero.")
    row[x] = -1.0
    scale(row, -1.0 / q)


def substitute(definition: np.ndarray, x: int, row: np.ndarray) -> None:
    """
    Replace variable ``x`` in ``row`` by ``definition`` (a row already solved for ``x``).

    Column ``x`` of ``row`` ends up holding the coefficient of the variable that
    left the basis.
    """

    k = float(row[x])
    row[x] = 0.0
    row += k * definition


class LinearSystem:
    """
    Objective row plus constraint matrix, rewritten in place by each pivot.

    Column 0 is the constant term, column ``i`` the coefficient of variable ``i``.
    Every constraint row reads ``row >= 0`` and every variable is non-negative.
    """

    def __init__(
        self,
        objective: Sequence[float],
        constraints: Optional[Sequence[Sequence[float]]] = None,
    ) -> None:
        self.objective = np.array(objective, dtype=float)
        if self.objective.ndim != 1 or self.objective.size == 0:
            raise ValueError("Objective must be a non-empty row of coefficients.")
        width = self.objective.size

        if constraints is None or len(constraints) == 0:
            self.constraints = np.zeros((0, width), dtype=float)
        else:
            for idx, row in enumerate(constraints):
                if len(row) != width:
                    raise ValueError(
                        f"Constraint {idx} has {len(row)} coefficients, objective has {width}."
                    )
            self.constraints = np.array(constraints, dtype=float)

        self.iterations = 0
        if np.any(self.constraints[:, 0] < 0.0):
            logger.warning(
                "Constraint constants %s are negative; the starting point is infeasible.",
                np.flatnonzero(self.constraints[:, 0] < 0.0).tolist(),
            )

    @classmethod
    def from_spec(cls, spec: SystemSpec) -> "LinearSystem":
        return cls(spec.objective, spec.constraints)

    def to_spec(self) -> SystemSpec:
        return SystemSpec(objective=self.objective.tolist(), constraints=self.constraints.tolist())

    def copy(self) -> "LinearSystem":
        clone = object.__new__(LinearSystem)
        clone.objective = self.objective.copy()
        clone.constraints = self.constraints.copy()
        clone.iterations = self.iterations
        return clone

    @property
    def shape(self) -> Tuple[int, int]:
        return self.constraints.shape[0], self.objective.size

    @property
    def variable_count(self) -> int:
        return self.objective.size - 1

    def basic_values(self) -> np.ndarray:
        return self.constraints[:, 0].copy()

    def entering_column(self) -> Optional[int]:
        """First variable with a positive objective coefficient, or None when optimal."""
        positive = np.flatnonzero(self.objective[1:] > 0.0)
        if positive.size == 0:
            return None
        return int(positive[0]) + 1

    def pivot_row(self, x: int, ratio_rule: RatioRule = "tightest") -> int:
        return self._ratio_test(x, ratio_rule)[0]

    def _ratio_test(self, x: int, ratio_rule: str) -> Tuple[int, float]:
        self._check_column(x)
        if ratio_rule not in RATIO_RULES:
            raise ValueError(f"Unknown ratio rule '{ratio_rule}'.")

        best: Optional[Tuple[int, float]] = None
        for idx in range(self.constraints.shape[0]):
            coef = self.constraints[idx, x]
            if coef >= 0.0:
                continue
            ratio = float(self.constraints[idx, 0] / coef)
            if best is not None and ratio <= best[1]:
                if ratio_rule == "first_run":
                    break
                continue
            best = (idx, ratio)

        if best is None:
            raise UnboundedError(x)
        return best

    def rewrite_system(self, x: int, ratio_rule: RatioRule = "tightest") -> int:
        """
        Make variable ``x`` basic in the most restrictive constraint and remove it
        from every other row, the objective included.

        Returns the index of the pivot row. Raises ``UnboundedError`` when no
        constraint has a negative coefficient at ``x``.
        """

        pivot, ratio = self._ratio_test(x, ratio_rule)

        definition = self.constraints[pivot].copy()
        rewrite(definition, x)

        substitute(definition, x, self.objective)
        for idx in range(self.constraints.shape[0]):
            if idx != pivot:
                substitute(definition, x, self.constraints[idx])
        self.constraints[pivot] = definition

        logger.debug(
            "Pivot: variable %d enters at row %d (ratio %s), objective now %s",
            x,
            pivot,
            ratio,
            self.objective[0],
        )
        return pivot

    def solve(self, max_iters: int = MAX_PIVOTS, ratio_rule: RatioRule = "tightest") -> float:
        """
        Pivot until no objective coefficient is positive and return the constant term.

        At most ``max_iters`` pivots are performed; needing more raises
        ``IterationLimitError``. The rewritten rows stay in place afterwards.
        """

        self.iterations = 0
        while True:
            x = self.entering_column()
            if x is None:
                value = float(self.objective[0])
                logger.info("Optimum %s reached after %d pivots", value, self.iterations)
                return value
            if self.iterations >= max_iters:
                raise IterationLimitError(self.iterations)
            self.rewrite_system(x, ratio_rule)
            self.iterations += 1

    def _check_column(self, x: int) -> None:
        if not 0 < x < self.objective.size:
            raise IndexError(f"Variable index {x} outside 1..{self.objective.size - 1}.")

    def __str__(self) -> str:
        return format_system(self)

    def __repr__(self) -> str:
        return (
            f"LinearSystem(objective={self.objective.tolist()!r}, "
            f"constraints={self.constraints.tolist()!r})"
        )

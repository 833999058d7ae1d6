from __future__ import annotations

import logging
from typing import Optional

from ..errors import IterationLimitError, UnboundedError
from ..schemas import SolveOptions, TableauSolution
from .parser import parse_system
from .tableau import LinearSystem

logger = logging.getLogger(__name__)


def tableau_solve(system: LinearSystem, opts: Optional[SolveOptions] = None) -> TableauSolution:
    """
    Run the tableau solver and report the outcome as a status instead of raising.

    The system is rewritten in place either way; the returned rows are its state
    when the solve stopped.
    """

    opts = opts or SolveOptions()
    try:
        value = system.solve(max_iters=opts.max_iters, ratio_rule=opts.ratio_rule)
    except UnboundedError as exc:
        logger.info("Solve stopped: %s", exc)
        return _failed(system, "unbounded", str(exc))
    except IterationLimitError as exc:
        logger.info("Solve stopped: %s", exc)
        return _failed(system, "iteration_limit", str(exc))

    return TableauSolution(
        status="optimal",
        objective_value=value,
        basic_values=system.basic_values().tolist(),
        objective=system.objective.tolist(),
        constraints=system.constraints.tolist(),
        iterations=system.iterations,
        message="",
    )


def solve_text(text: str, opts: Optional[SolveOptions] = None) -> TableauSolution:
    return tableau_solve(parse_system(text), opts)


def _failed(system: LinearSystem, status: str, message: str) -> TableauSolution:
    return TableauSolution(
        status=status,  # type: ignore[arg-type]
        objective_value=None,
        basic_values=None,
        objective=system.objective.tolist(),
        constraints=system.constraints.tolist(),
        iterations=system.iterations,
        message=message,
    )

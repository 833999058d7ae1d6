from __future__ import annotations

from typing import Dict, Optional

import numpy as np
from scipy.optimize import linprog

from .tableau import LinearSystem


def cross_check(system: LinearSystem, value: Optional[float] = None, tol: float = 1e-6) -> Dict[str, object]:
    """
    Solve the same problem with SciPy's HiGHS and compare against a tableau optimum.

    Pass the system as it was before solving (see ``LinearSystem.copy``); a
    rewritten system describes the same problem in other variables.
    """

    c0 = float(system.objective[0])
    c = system.objective[1:]
    A0 = system.constraints[:, 0]
    A = system.constraints[:, 1:]
    n = c.size

    if n == 0:
        feasible = bool(np.all(A0 >= -tol))
        reference_status = "optimal" if feasible else "infeasible"
        reference_value: Optional[float] = c0 if feasible else None
    else:
        # maximise c0 + c.x  s.t.  A0 + A.x >= 0, x >= 0
        res = linprog(
            -c,
            A_ub=-A if A.size else None,
            b_ub=A0 if A.size else None,
            bounds=[(0.0, None)] * n,
            method="highs",
        )
        reference_status = _map_status(res.status)
        reference_value = c0 - float(res.fun) if res.status == 0 else None

    report: Dict[str, object] = {
        "reference_status": reference_status,
        "reference_value": reference_value,
    }
    if value is not None:
        report["value"] = value
        report["agrees"] = reference_value is not None and abs(value - reference_value) <= tol * max(
            1.0, abs(reference_value)
        )
    return report


def _map_status(code: int) -> str:
    mapping = {
        0: "optimal",
        1: "iteration_limit",
        2: "infeasible",
        3: "unbounded",
    }
    return mapping.get(code, "iteration_limit")

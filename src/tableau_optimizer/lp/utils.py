from __future__ import annotations

from typing import TYPE_CHECKING, List, Sequence

import numpy as np

if TYPE_CHECKING:  # pragma: no cover
    from .tableau import LinearSystem


def _number(value: float) -> str:
    # adding 0.0 turns -0.0 into 0.0
    return f"{float(value) + 0.0:g}"


def format_row(row: Sequence[float]) -> str:
    """Render ``[5, -1, 0]`` as ``"5 - 1x1 + 0x2"``. Zero terms are kept so positions stay visible."""

    values = [float(v) for v in row]
    if not values:
        return ""
    parts: List[str] = [_number(values[0])]
    for idx, coef in enumerate(values[1:], start=1):
        sign = "-" if coef < 0 else "+"
        parts.append(f"{sign} {_number(abs(coef))}x{idx}")
    return " ".join(parts)


def format_system(system: "LinearSystem") -> str:
    lines = [
        f"objective: {np.array2string(system.objective, precision=4)}",
        f"  max {format_row(system.objective)}",
        "constraints:",
    ]
    if system.constraints.shape[0] == 0:
        lines.append("  (none)")
    for idx, row in enumerate(system.constraints):
        lines.append(f"  [{idx}] {np.array2string(row, precision=4)}  {format_row(row)} >= 0")
    return "\n".join(lines)

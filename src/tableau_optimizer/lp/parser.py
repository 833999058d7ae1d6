from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Tuple, Union

from ..errors import MissingObjectiveError, ParseError
from .tableau import LinearSystem

_SIGNS = {"+": 1, "-": -1}


def parse_line(line: str, lineno: Optional[int] = None) -> List[float]:
    """
    Turn one expression such as ``"4 - x1 + 3x2"`` into ``[4.0, -1.0, 3.0]``.

    Variable names only mark where a coefficient ends; they are never checked, so
    coefficients are identified purely by position. A name with no number in
    front counts as a coefficient of one.
    """

    coefficients: List[float] = []
    digits: Optional[int] = None
    start = 0
    sign = 1
    in_name = False

    def submit() -> None:
        if not in_name and digits is None:
            return
        try:
            coefficients.append(float(sign * (1 if digits is None else digits)))
        except OverflowError:
            raise ParseError("Coefficient too large.", lineno, start) from None

    for column, char in enumerate(line, start=1):
        if char.isspace():
            continue
        if char in _SIGNS:
            submit()
            digits = None
            sign = _SIGNS[char]
            in_name = False
        elif char.isalpha() or char == "_":
            in_name = True
        elif "0" <= char <= "9":
            if not in_name:  # digits after a name are a subscript
                if digits is None:
                    start = column
                digits = (digits or 0) * 10 + int(char)
        else:
            raise ParseError(f"Unexpected character {char!r}.", lineno, column)

    submit()
    return coefficients


def parse_rows(text: str) -> Tuple[List[float], List[List[float]]]:
    rows: List[Tuple[int, List[float]]] = []
    for lineno, raw in enumerate(text.splitlines(), start=1):
        stripped = raw.strip()
        if not stripped or stripped.startswith("#"):
            continue
        rows.append((lineno, parse_line(raw, lineno)))

    if not rows:
        raise MissingObjectiveError()

    (objective_line, objective), *rest = rows
    if not objective:
        raise ParseError("Objective has no coefficients.", objective_line)

    constraints: List[List[float]] = []
    for lineno, row in rest:
        if len(row) != len(objective):
            raise ParseError(
                f"Expected {len(objective)} coefficients like the objective, found {len(row)}.",
                lineno,
            )
        constraints.append(row)
    return objective, constraints


def parse_system(text: str) -> LinearSystem:
    objective, constraints = parse_rows(text)
    return LinearSystem(objective, constraints)


def parse_file(path: Union[str, Path]) -> LinearSystem:
    return parse_system(Path(path).read_text(encoding="utf-8"))

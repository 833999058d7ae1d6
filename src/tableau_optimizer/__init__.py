"""Tableau Optimizer: small LPs from text, solved by direct substitution."""

from .errors import (
    IterationLimitError,
    MissingObjectiveError,
    ParseError,
    TableauError,
    UnboundedError,
)
from .lp import LinearSystem, parse_system, solve_text, tableau_solve
from .schemas import SolveOptions, SystemSpec, TableauSolution

__all__ = [
    "LinearSystem",
    "parse_system",
    "solve_text",
    "tableau_solve",
    "SolveOptions",
    "SystemSpec",
    "TableauSolution",
    "TableauError",
    "ParseError",
    "MissingObjectiveError",
    "UnboundedError",
    "IterationLimitError",
]

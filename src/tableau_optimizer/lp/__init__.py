"""Tableau rewriting solver and the text parser that feeds it."""

from .tableau import LinearSystem, rewrite, scale, substitute
from .parser import parse_line, parse_system, parse_file
from .simplex import tableau_solve, solve_text

__all__ = [
    "LinearSystem",
    "rewrite",
    "scale",
    "substitute",
    "parse_line",
    "parse_system",
    "parse_file",
    "tableau_solve",
    "solve_text",
]

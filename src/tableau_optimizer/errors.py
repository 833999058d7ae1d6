from __future__ import annotations

from typing import Optional


class TableauError(Exception):
    """Base class for everything the tableau optimizer raises."""


class ParseError(TableauError, ValueError):
    """Malformed problem text."""

    def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None) -> None:
        self.message = message
        self.line = line
        self.column = column
        super().__init__(self._render())

    def _render(self) -> str:
        if self.line is None:
            return self.message
        if self.column is None:
            return f"line {self.line}: {self.message}"
        return f"line {self.line}, column {self.column}: {self.message}"


class MissingObjectiveError(ParseError):
    def __init__(self) -> None:
        super().__init__("Need at least one line for the objective function.")


class UnboundedError(TableauError):
    def __init__(self, column: int) -> None:
        self.column = column
        super().__init__(f"System is unbounded in variable {column}.")


class IterationLimitError(TableauError):
    def __init__(self, iterations: int) -> None:
        self.iterations = iterations
        super().__init__(f"Couldn't solve linear system within {iterations} pivots.")

from __future__ import annotations

import os

from mcp.server.fastmcp import FastMCP

from .errors import ParseError
from .schemas import SolveOptions, SystemSpec
from .lp.diagnostics import cross_check
from .lp.parser import parse_system
from .lp.simplex import tableau_solve
from .lp.tableau import LinearSystem

mcp = FastMCP("Tableau Optimizer")


@mcp.tool()
def parse_problem(text: str) -> dict:
    "Parse problem text (objective first, one constraint per line) into coefficient rows."
    try:
        return parse_system(text).to_spec().model_dump()
    except ParseError as exc:
        return {"error": f"Failed to parse problem: {exc}"}


@mcp.tool()
def solve_problem(text: str, options: SolveOptions | None = None) -> dict:
    "Parse problem text and solve it with the tableau rewriting solver."
    try:
        system = parse_system(text)
    except ParseError as exc:
        return {"error": f"Failed to parse problem: {exc}", "solution": None}
    return tableau_solve(system, options or SolveOptions()).model_dump()


@mcp.tool()
def solve_system(system: SystemSpec, options: SolveOptions | None = None) -> dict:
    "Solve a system given directly as an objective row and constraint rows."
    return tableau_solve(LinearSystem.from_spec(system), options or SolveOptions()).model_dump()


@mcp.tool()
def verify_problem(text: str, options: SolveOptions | None = None) -> dict:
    "Solve problem text and compare the optimum with SciPy's HiGHS solver."
    opts = options or SolveOptions()
    try:
        system = parse_system(text)
    except ParseError as exc:
        return {"error": f"Failed to parse problem: {exc}", "solution": None, "check": None}
    original = system.copy()
    solution = tableau_solve(system, opts)
    check = cross_check(original, solution.objective_value, tol=opts.tol)
    return {"solution": solution.model_dump(), "check": check}


if __name__ == "__main__":
    transport = os.environ.get("MCP_TRANSPORT", "stdio")
    if transport == "stdio":
        mcp.run(transport="stdio")
    else:
        mcp.settings.host = "0.0.0.0"
        mcp.settings.port = int(os.environ.get("PORT", "8081"))
        mcp.run(transport="streamable-http")

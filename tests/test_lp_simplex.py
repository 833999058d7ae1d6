from pathlib import Path

import pytest
from pydantic import ValidationError

from tableau_optimizer.errors import ParseError
from tableau_optimizer.lp.simplex import solve_text, tableau_solve
from tableau_optimizer.lp.tableau import LinearSystem
from tableau_optimizer.schemas import SolveOptions, SystemSpec


def load_example(name: str) -> str:
    return Path(__file__).parent.parent.joinpath("examples", name).read_text()


def test_solves_worked_example():
    solution = solve_text(load_example("worked.txt"))

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(5.0)
    assert solution.basic_values == [2.0, 2.0]
    assert solution.objective == [5.0, -1.0]
    assert solution.iterations == 1
    assert solution.message == ""


def test_solves_production_example():
    solution = solve_text(load_example("production.txt"), SolveOptions())

    assert solution.status == "optimal"
    assert solution.objective_value == pytest.approx(11.0)
    assert solution.basic_values == pytest.approx([1.0, 0.0, 3.0])


def test_unbounded_status():
    solution = solve_text(load_example("unbounded.txt"))

    assert solution.status == "unbounded"
    assert solution.objective_value is None
    assert solution.basic_values is None
    assert "unbounded" in solution.message


def test_iteration_limit_status():
    solution = solve_text(load_example("production.txt"), SolveOptions(max_iters=1))

    assert solution.status == "iteration_limit"
    assert solution.objective_value is None
    assert solution.iterations == 1


def test_parse_errors_propagate():
    with pytest.raises(ParseError):
        solve_text("1 + 2*x")


def test_tableau_solve_rewrites_given_system():
    system = LinearSystem([1.0, 2.0], [[4.0, -2.0], [1.0, 1.0]])
    solution = tableau_solve(system)

    assert solution.objective_value == pytest.approx(5.0)
    assert solution.constraints == [[2.0, -0.5], [3.0, -0.5]]
    assert system.constraints.tolist() == solution.constraints


def test_solve_options_validation():
    with pytest.raises(ValidationError):
        SolveOptions(max_iters=-1)
    with pytest.raises(ValidationError):
        SolveOptions(ratio_rule="steepest")


def test_system_spec_validation():
    with pytest.raises(ValidationError):
        SystemSpec(objective=[1.0, 2.0], constraints=[[4.0]])
    with pytest.raises(ValidationError):
        SystemSpec(objective=[])

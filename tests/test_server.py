import pytest

from tableau_optimizer.schemas import SolveOptions, SystemSpec
from tableau_optimizer.server import parse_problem, solve_problem, solve_system, verify_problem

PRODUCTION = "0 + 3x1 + 2x2\n4 - x1 - x2\n6 - x1 - 3x2\n3 - x1 - 0x2"


def test_parse_problem_tool():
    result = parse_problem("1 + 2x\n4 - 2x")

    assert result == {"objective": [1.0, 2.0], "constraints": [[4.0, -2.0]]}


def test_parse_problem_reports_errors():
    assert "error" in parse_problem("1 + *")


def test_solve_problem_tool():
    result = solve_problem("1 + 2x\n4 - 2x\n0 + x")

    assert result["status"] == "optimal"
    assert result["objective_value"] == pytest.approx(5.0)


def test_solve_problem_reports_parse_errors():
    result = solve_problem("")

    assert result["solution"] is None
    assert "objective" in result["error"]


def test_solve_system_tool():
    result = solve_system(SystemSpec(objective=[0.0, 1.0], constraints=[[5.0, 1.0]]))

    assert result["status"] == "unbounded"


def test_verify_problem_tool():
    result = verify_problem(PRODUCTION, SolveOptions(ratio_rule="first_run"))

    assert result["solution"]["objective_value"] == pytest.approx(12.0)
    assert result["check"]["reference_value"] == pytest.approx(11.0)
    assert result["check"]["agrees"] is False


def test_oversized_coefficient_is_reported_by_tools():
    text = "1" * 400 + " + x"

    assert "too large" in parse_problem(text)["error"]
    assert solve_problem(text)["solution"] is None
    assert verify_problem(text)["check"] is None

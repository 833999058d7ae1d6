#!/usr/bin/env python3
import time
from pathlib import Path

from tableau_optimizer.lp.diagnostics import cross_check
from tableau_optimizer.lp.parser import parse_system
from tableau_optimizer.lp.simplex import tableau_solve
from tableau_optimizer.schemas import SolveOptions
from scripts.generate_instances import generate_random_problem


def main() -> None:
    opts = SolveOptions()
    examples = Path(__file__).resolve().parent.parent / "examples"
    cases = [(f"examples/{path.name}", path.read_text()) for path in sorted(examples.glob("*.txt"))]
    for seed in range(3):
        cases.append((f"random-{seed}", generate_random_problem(3, 3, seed)))

    print("name,status,objective,reference,iterations,time_ms")
    for name, text in cases:
        system = parse_system(text)
        original = system.copy()
        start = time.perf_counter()
        solution = tableau_solve(system, opts)
        elapsed_ms = (time.perf_counter() - start) * 1000
        check = cross_check(original, solution.objective_value, tol=opts.tol)
        print(
            f"{name},{solution.status},{solution.objective_value},{check['reference_value']},"
            f"{solution.iterations},{elapsed_ms:.2f}"
        )


if __name__ == "__main__":
    main()

#!/usr/bin/env python3
import argparse
import random
from pathlib import Path
from typing import List, Optional

from tableau_optimizer.lp.utils import format_row


def generate_random_problem(num_vars: int, num_constraints: int, seed: Optional[int] = None) -> str:
    """Random problem text that is feasible at the origin and bounded in every variable."""
    rng = random.Random(seed)
    rows: List[List[int]] = [[0] + [rng.randint(1, 4) for _ in range(num_vars)]]
    for _ in range(max(num_constraints, 1)):
        rhs = rng.randint(num_vars * 2, num_vars * 6)
        rows.append([rhs] + [-rng.randint(1, 5) for _ in range(num_vars)])
    return "\n".join(format_row(row) for row in rows) + "\n"


def main() -> None:
    parser = argparse.ArgumentParser(description="Generate random bounded problem files.")
    parser.add_argument("--vars", type=int, default=3, help="Number of variables")
    parser.add_argument("--constraints", type=int, default=3, help="Number of constraints")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--count", type=int, default=1, help="Number of instances")
    parser.add_argument("--out", type=Path, default=None, help="Optional output directory")
    args = parser.parse_args()

    for idx in range(args.count):
        text = generate_random_problem(args.vars, args.constraints, (args.seed or 0) + idx)
        if args.out:
            args.out.mkdir(parents=True, exist_ok=True)
            (args.out / f"random-{idx}.txt").write_text(text)
        else:
            print(text)


if __name__ == "__main__":
    main()

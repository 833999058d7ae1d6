from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from .errors import TableauError
from .lp.diagnostics import cross_check
from .lp.parser import parse_file
from .schemas import SolveOptions

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    defaults = SolveOptions()
    parser = argparse.ArgumentParser(
        prog="tableau-optimizer",
        description="Solve a small linear program written as one expression per line.",
    )
    parser.add_argument("path", nargs="?", help="Text file: objective on the first line, one constraint per line after it")
    parser.add_argument("--max-iters", type=int, default=defaults.max_iters, help="Maximum number of pivots")
    parser.add_argument(
        "--ratio-rule",
        choices=["tightest", "first_run"],
        default=defaults.ratio_rule,
        help="How the pivot row is chosen",
    )
    parser.add_argument("--verify", action="store_true", help="Compare the optimum with SciPy's HiGHS")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every pivot")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.path is None:
        print("problem parsing arguments: Not enough arguments, no file specified!", file=sys.stderr)
        return 1

    try:
        opts = SolveOptions(max_iters=args.max_iters, ratio_rule=args.ratio_rule)
    except ValueError as exc:
        print(f"invalid options: {exc}", file=sys.stderr)
        return 1

    try:
        system = parse_file(args.path)
    except (OSError, UnicodeDecodeError) as exc:
        print(f"Couldn't read file: {exc}", file=sys.stderr)
        return 1
    except TableauError as exc:
        print(f"Couldn't parse {args.path}: {exc}", file=sys.stderr)
        return 1

    print(f"System:\n{system}")
    original = system.copy()

    try:
        value = system.solve(max_iters=opts.max_iters, ratio_rule=opts.ratio_rule)
    except TableauError as exc:
        logger.debug("Solve failed", exc_info=True)
        print(f"Couldn't solve system: {exc}", file=sys.stderr)
        return 1

    print(f"Solved System: value:{value}\n{system}")

    if args.verify:
        report = cross_check(original, value, tol=opts.tol)
        verdict = "agrees" if report["agrees"] else "DISAGREES"
        print(
            f"Reference (HiGHS): status:{report['reference_status']} "
            f"value:{report['reference_value']} ({verdict})"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())

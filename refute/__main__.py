"""
CLI entry point. Run as: python -m refute <file> | --problem <name> | --interactive
"""

import argparse
import sys

from .core.engine import load_session, run
from .parser import read_clauses
from .problems import PROBLEMS
from .interactive import interactive_loop
from .visualization import print_session, print_history, export_dot


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="refute",
        description="Propositional resolution by refutation",
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument("file", nargs="?", default=None,
                        help="Clause file, one comma-separated clause per line")
    source.add_argument("--problem", choices=list(PROBLEMS.keys()),
                        help="Run a built-in problem")
    source.add_argument("--interactive", action="store_true",
                        help="Prompt for files or typed clauses until 'q'")
    source.add_argument("--list", action="store_true",
                        help="List the built-in problems")
    parser.add_argument("--trace",   action="store_true", help="Print per-step progress")
    parser.add_argument("--history", action="store_true", help="Print the step history")
    parser.add_argument("--summary", action="store_true", help="Print the final search state")
    parser.add_argument("--dot",  type=str, default=None, help="Export the proof DAG to a DOT file")
    parser.add_argument("--json", action="store_true",    help="Print the outcome as JSON")
    return parser


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.json and (args.trace or args.history or args.summary):
        parser.error("--json cannot be combined with --trace, --history or --summary")

    if args.list:
        for name, problem in PROBLEMS.items():
            print(f"  {name:22s} {problem['description']}")
        return 0

    if args.interactive:
        interactive_loop(trace=args.trace)
        return 0

    # --- Load clauses ---
    if args.problem:
        clauses = PROBLEMS[args.problem]["make_clauses"]()
    elif args.file:
        try:
            clauses = read_clauses(args.file)
        except (OSError, ValueError) as e:
            parser.error(f"{args.file}: {e}")
    else:
        parser.error("give a clause file, --problem, --interactive or --list")

    # --- Run ---
    verbose = not args.json
    session = load_session(clauses, verbose=verbose)
    outcome = run(session, verbose=verbose, trace=args.trace)

    # --- Post-processing ---
    if args.json:
        print(outcome.to_json())
    if args.summary:
        print_session(session)
    if args.history:
        print_history(session)
    if args.dot:
        export_dot(outcome, args.dot, verbose=verbose)
    return 0


if __name__ == "__main__":
    sys.exit(main())

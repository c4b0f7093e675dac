"""
Interactive prompt loop.

The user picks where clauses come from, a file or typed directly, and each
argument is proved as soon as it is loaded. Runs until 'q'.
"""

from .core.engine import load_session, run
from .parser import parse_clause, read_clauses


MENU = (
    "Enter 'f' to read input from a file.\n"
    "Enter 'i' to enter your own input directly.\n"
    "Enter 'q' to quit."
)


def read_typed_clauses(input_fn=None) -> list:
    """Ask for a clause count, then read that many clause lines."""
    input_fn = input_fn or input
    count = int(input_fn("Enter the number of clauses: ").strip())
    if count < 0:
        raise ValueError(f"Invalid clause count: {count}")
    print("Now input the clauses, hitting the 'Enter' key after each one")
    return [parse_clause(input_fn("")) for _ in range(count)]


def interactive_loop(input_fn=None, trace: bool = False) -> list:
    """
    Prompt until the user quits. Returns the outcome of every argument run.
    """
    input_fn = input_fn or input
    outcomes = []
    while True:
        print(MENU)
        try:
            command = input_fn("> ").strip().lower()
        except EOFError:
            return outcomes

        if command in ("q", "quit", "exit"):
            return outcomes

        try:
            if command == "f":
                clauses = read_clauses(input_fn("Enter the filename: ").strip())
            elif command == "i":
                clauses = read_typed_clauses(input_fn)
            else:
                print("Command unrecognized\n")
                continue
        except EOFError:
            return outcomes
        except (ValueError, OSError) as e:
            print(f"Invalid input. ({e})\n")
            continue

        outcomes.append(run(load_session(clauses), trace=trace))
        print()

"""
Reading clauses from text.

One clause per line, literals separated by commas:

    P, ~Q, R     ->  {P, ~Q, R}

A literal is a single letter, optionally preceded by ~. Whitespace is
ignored and letters are folded to uppercase.
"""

from typing import Iterable

from .core.state import Literal, Clause


def parse_literal(token: str) -> Literal:
    """Parse one token such as 'p' or '~q'."""
    token = "".join(token.split())
    negated = token.startswith("~")
    letter = token[1:] if negated else token
    if len(letter) != 1 or not letter.isalpha():
        raise ValueError(f"Invalid literal: {token!r}")
    return Literal(letter.upper(), negated)


def parse_clause(line: str) -> Clause:
    """Parse a comma-separated line into a Clause."""
    if line is None or not line.strip():
        raise ValueError("Invalid input: empty clause line")
    return Clause(parse_literal(token) for token in line.split(","))


def parse_clauses(lines: Iterable[str]) -> list:
    """Parse every non-blank line. Errors name the offending line number."""
    clauses = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            clauses.append(parse_clause(line))
        except ValueError as e:
            raise ValueError(f"line {lineno}: {e}") from e
    return clauses


def read_clauses(path) -> list:
    """Read and parse a clause file."""
    with open(path) as f:
        return parse_clauses(f)

"""
refute: propositional resolution by refutation.

Give it the premises of an argument plus the negation of its conclusion,
in clause form. It saturates the clause set under binary resolution; if the
empty clause shows up the argument is valid, and the derivation is printed
as a numbered proof.

Usage:
    python -m refute clauses.txt
    python -m refute --problem chain
    python -m refute --interactive
"""

from .core.state import Literal, Clause, Derivation, ProofLine, Session, Outcome
from .core.index import ClauseIndex
from .core.engine import load_session, saturation_step, run, prove
from .core.proof import reconstruct_proof, format_outcome, print_proof, check_proof
from .parser import parse_literal, parse_clause, parse_clauses, read_clauses
from .problems import PROBLEMS

__all__ = [
    "Literal", "Clause", "Derivation", "ProofLine", "Session", "Outcome",
    "ClauseIndex",
    "load_session", "saturation_step", "run", "prove",
    "reconstruct_proof", "format_outcome", "print_proof", "check_proof",
    "parse_literal", "parse_clause", "parse_clauses", "read_clauses",
    "PROBLEMS",
]

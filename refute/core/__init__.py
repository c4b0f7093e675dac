from .state import Literal, Clause, Derivation, ProofLine, Session, Outcome
from .index import ClauseIndex
from .engine import load_session, saturation_step, run, prove
from .proof import reconstruct_proof, format_outcome, print_proof, check_proof

__all__ = [
    "Literal", "Clause", "Derivation", "ProofLine", "Session", "Outcome",
    "ClauseIndex",
    "load_session", "saturation_step", "run", "prove",
    "reconstruct_proof", "format_outcome", "print_proof", "check_proof",
]

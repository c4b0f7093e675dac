"""
Proof reconstruction and display.

After the saturation loop derives the empty clause, these utilities walk
back through the derivation records to recover the part of the search that
was actually used, number it, and print it.
"""

from .state import Clause, Outcome, ProofLine


def reconstruct_proof(session, empty: Clause) -> list:
    """
    Number and list the derived ancestors of empty, parents first.

    Post-order walk over the derivation DAG with an explicit stack of
    (clause, children_visited) frames. Premises already carry their load
    numbers and are not listed again. A clause shared by several branches
    is listed once, the first time it completes.

    The session is only read, so repeated calls give the same lines.
    """
    numbering = dict(session.numbering)
    next_number = session.next_number
    lines = []
    stack = [(empty, False)]

    while stack:
        clause, children_visited = stack.pop()
        derivation = session.parents.get(clause)
        if derivation is None or clause in numbering:
            continue

        if not children_visited:
            stack.append((clause, True))
            stack.append((derivation.right, False))
            stack.append((derivation.left, False))
            continue

        numbering[clause] = next_number
        next_number += 1
        parents = (numbering[derivation.left], numbering[derivation.right])
        lines.append(ProofLine(numbering[clause], clause, parents))

    return lines


def format_outcome(outcome: Outcome) -> list:
    """Premise lines, then the proof transcript, then the verdict."""
    return [str(line) for line in outcome.lines] + [outcome.verdict]


def print_proof(outcome: Outcome):
    """Pretty-print a finished run."""
    for text in format_outcome(outcome):
        print(text)


def check_proof(lines) -> bool:
    """
    Independently check a numbered transcript.

    Every derived line must cite two earlier lines and be a resolvent of
    their clauses on some pivot. The last line must be the empty clause.
    """
    lines = list(lines)
    if not lines or not lines[-1].clause.is_empty:
        return False

    seen = {}
    for line in lines:
        if line.number in seen:
            return False
        if line.parents:
            if len(line.parents) != 2:
                return False
            if any(p >= line.number or p not in seen for p in line.parents):
                return False
            left, right = (seen[p] for p in line.parents)
            if not _is_resolvent(line.clause, left, right):
                return False
        seen[line.number] = line.clause
    return True


def _is_resolvent(clause: Clause, left: Clause, right: Clause) -> bool:
    for pivot in left:
        if pivot.complement() in right and left.resolve(right, pivot) == clause:
            return True
    return False

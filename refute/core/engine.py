"""
The saturation loop.

Breadth-first resolution by refutation: take the oldest clause off the
worklist, resolve it against indexed clauses holding the complement of each
of its literals, and queue every resolvent the index has not seen before.
The loop ends when the empty clause turns up or the worklist runs dry.

There are finitely many clauses over a finite set of symbols and the index
never lets the same clause be queued twice, so the loop always halts.
"""

from typing import Iterable, Optional

from .state import Clause, Derivation, Outcome, ProofLine, Session
from .proof import reconstruct_proof


def load_session(clauses: Iterable[Clause], verbose: bool = True) -> Session:
    """
    Start a fresh session from premises (negated conclusion included).

    Premises are numbered in input order and printed when verbose. Every
    premise is queued, duplicates too; only the index deduplicates them.
    """
    premises = tuple(clauses)
    session = Session(premises=premises)

    for clause in premises:
        number = session.next_number
        session.next_number += 1
        session.numbering.setdefault(clause, number)
        line = ProofLine(number, clause)
        session.premise_lines.append(line)
        if verbose:
            print(line)

        session.index.insert(clause)
        session.worklist.append(clause)
        if clause.is_empty and session.contradiction is None:
            session.contradiction = clause

    if session.contradiction is not None:
        session.halted = True
        session.halt_reason = "empty premise"

    return session


def saturation_step(session: Session, trace: bool = False) -> Optional[Clause]:
    """
    Execute one step of the loop: resolve the next queued clause.

    For each literal of the focus clause, candidates holding its complement
    are tried smallest first. Tautologies are skipped. The first real
    resolvent for a literal ends the scan for that literal, whether or not
    it was new.

    Returns the empty clause if this step derived it, else None.
    """
    if not session.worklist:
        session.halted = True
        session.halt_reason = "worklist empty"
        return None

    focus = session.worklist.popleft()
    session.step += 1
    if trace:
        print(f"\n--- Step {session.step}: Focus on {focus} ---")

    produced = []
    tautologies = 0
    duplicates = 0
    found = None

    for lit in focus:
        for candidate in session.index.candidates_for(lit.complement()):
            resolvent = focus.resolve(candidate, lit)
            if resolvent is None:
                tautologies += 1
                if trace:
                    print(f"  [tautology] {focus} + {candidate} on {lit}")
                continue

            if resolvent.is_empty:
                session.parents[resolvent] = Derivation(focus, candidate, lit)
                found = resolvent
                if trace:
                    print(f"  [contradiction] {focus} + {candidate} on {lit}")
            elif session.index.insert(resolvent):
                session.parents[resolvent] = Derivation(focus, candidate, lit)
                session.worklist.append(resolvent)
                produced.append(resolvent)
                if trace:
                    print(f"  [new] {resolvent} (from {focus} + {candidate})")
            else:
                duplicates += 1
                if trace:
                    print(f"  [duplicate] {resolvent}")
            break
        if found is not None:
            break

    session.history.append({
        "step": session.step,
        "focus": str(focus),
        "produced": [str(c) for c in produced],
        "tautologies": tautologies,
        "duplicates": duplicates,
        "worklist_size": len(session.worklist),
        "index_size": len(session.index),
    })

    if trace:
        print(f"  Worklist: {len(session.worklist)} | Indexed: {len(session.index)}")

    if found is not None:
        session.contradiction = found
        session.halted = True
        session.halt_reason = "empty clause derived"
    return found


def run(session: Session, verbose: bool = True, trace: bool = False) -> Outcome:
    """
    Run the loop until the empty clause is derived or the worklist is empty.

    Args:
        session: a session from load_session
        verbose: print the proof transcript and the verdict
        trace:   print per-step progress
    """
    while session.contradiction is None and not session.halted:
        saturation_step(session, trace=trace)

    if session.contradiction is not None:
        transcript = reconstruct_proof(session, session.contradiction)
        if verbose:
            for line in transcript:
                print(line)
    else:
        transcript = []

    # an empty premise is the proof: the outcome stops at its line
    premise_lines = tuple(session.premise_lines)
    if session.halt_reason == "empty premise":
        cut = next(i for i, line in enumerate(premise_lines) if line.clause.is_empty)
        premise_lines = premise_lines[:cut + 1]

    outcome = Outcome(
        valid=session.contradiction is not None,
        premise_lines=premise_lines,
        transcript=tuple(transcript),
        steps=session.step,
        clauses_kept=len(session.index),
    )
    if verbose:
        print(outcome.verdict)
    return outcome


def prove(clauses: Iterable[Clause], verbose: bool = False, trace: bool = False) -> Outcome:
    """Load clauses into a new session and run it to completion."""
    return run(load_session(clauses, verbose=verbose), verbose=verbose, trace=trace)

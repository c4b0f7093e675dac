"""
Tests for proof reconstruction, display and checking.

Core claims:
    - Parents are listed before children, left branch first
    - A clause shared by two branches is listed once
    - Deep derivation chains do not hit the recursion limit
    - check_proof rejects transcripts that cite later or bogus lines
"""

import sys

from refute.core.state import Literal, Clause, Derivation, ProofLine, Outcome
from refute.core.engine import load_session, run, prove
from refute.core.proof import reconstruct_proof, format_outcome, print_proof, check_proof


# ── Helpers ──────────────────────────────────────────────────────────────────

def lit(token: str) -> Literal:
    return Literal(token[-1], token.startswith("~"))


def clause(*tokens) -> Clause:
    return Clause(lit(t) for t in tokens)


class TestReconstructProof:
    def test_parents_listed_before_children(self):
        p_or_q, not_p_or_q = clause("P", "Q"), clause("~P", "Q")
        not_q_or_r, not_q_or_not_r = clause("~Q", "R"), clause("~Q", "~R")
        session = load_session(
            [p_or_q, not_p_or_q, not_q_or_r, not_q_or_not_r], verbose=False,
        )
        q, r, not_q = clause("Q"), clause("R"), clause("~Q")
        session.parents[q] = Derivation(p_or_q, not_p_or_q, lit("P"))
        session.parents[r] = Derivation(q, not_q_or_r, lit("Q"))
        session.parents[not_q] = Derivation(not_q_or_r, not_q_or_not_r, lit("R"))
        session.parents[Clause()] = Derivation(q, not_q, lit("Q"))

        lines = reconstruct_proof(session, Clause())
        assert [str(l) for l in lines] == ["5. {Q} 1,2", "6. {~Q} 3,4", "7. {} 5,6"]

    def test_shared_clause_listed_once(self):
        # {Q} feeds both {R} and {~R}
        a, b = clause("P", "Q"), clause("~P", "Q")
        c, d = clause("~Q", "R"), clause("~Q", "~R")
        session = load_session([a, b, c, d], verbose=False)
        q, r, not_r = clause("Q"), clause("R"), clause("~R")
        session.parents[q] = Derivation(a, b, lit("P"))
        session.parents[r] = Derivation(q, c, lit("Q"))
        session.parents[not_r] = Derivation(q, d, lit("Q"))
        session.parents[Clause()] = Derivation(r, not_r, lit("R"))

        lines = reconstruct_proof(session, Clause())
        assert [str(l) for l in lines] == [
            "5. {Q} 1,2",
            "6. {R} 5,3",
            "7. {~R} 5,4",
            "8. {} 6,7",
        ]
        assert check_proof(list(session.premise_lines) + lines)

    def test_premise_only_proof_is_empty(self):
        session = load_session([Clause()], verbose=False)
        assert reconstruct_proof(session, Clause()) == []

    def test_deep_chain_is_iterative(self):
        # P1, ~P1|P2, ..., ~Pn-1|Pn, ~Pn: a chain longer than the recursion limit
        n = sys.getrecursionlimit() + 200
        symbols = [("P", i) for i in range(n)]
        premises = [Clause.of(Literal(symbols[0]))]
        premises += [
            Clause.of(Literal(symbols[i], True), Literal(symbols[i + 1]))
            for i in range(n - 1)
        ]
        premises.append(Clause.of(Literal(symbols[-1], True)))

        session = load_session(premises, verbose=False)
        current = premises[0]
        for i in range(1, n):
            nxt = Clause.of(Literal(symbols[i]))
            session.parents[nxt] = Derivation(current, premises[i], Literal(symbols[i - 1]))
            current = nxt
        session.parents[Clause()] = Derivation(current, premises[-1], Literal(symbols[-1]))

        lines = reconstruct_proof(session, Clause())
        assert len(lines) == n
        assert lines[-1].clause.is_empty
        assert all(p < l.number for l in lines for p in l.parents)

    def test_repeat_calls_agree(self):
        session = load_session([clause("P", "Q"), clause("~P"), clause("~Q")], verbose=False)
        outcome = prove(session.premises)
        run(session, verbose=False)
        next_number = session.next_number
        first = reconstruct_proof(session, Clause())
        second = reconstruct_proof(session, Clause())
        assert first == second != []
        assert [str(l) for l in first] == [str(l) for l in outcome.transcript]
        assert session.next_number == next_number


class TestFormatting:
    def test_format_valid_outcome(self):
        outcome = prove([clause("P"), clause("~P")])
        assert format_outcome(outcome) == [
            "1. {P}",
            "2. {~P}",
            "3. {} 1,2",
            "Contradiction, therefore the conclusion is valid.",
        ]

    def test_print_invalid_outcome(self, capsys):
        print_proof(prove([clause("P")]))
        assert capsys.readouterr().out.splitlines() == [
            "1. {P}",
            "No contradiction found, therefore the argument is invalid.",
        ]


class TestCheckProof:
    def premises(self):
        return [ProofLine(1, clause("P")), ProofLine(2, clause("~P", "Q")),
                ProofLine(3, clause("~Q"))]

    def test_accepts_good_proof(self):
        lines = self.premises() + [
            ProofLine(4, clause("Q"), (1, 2)),
            ProofLine(5, Clause(), (4, 3)),
        ]
        assert check_proof(lines)

    def test_rejects_forward_citation(self):
        lines = self.premises() + [
            ProofLine(4, Clause(), (5, 3)),
            ProofLine(5, clause("Q"), (1, 2)),
        ]
        assert not check_proof(lines)

    def test_rejects_wrong_resolvent(self):
        lines = self.premises() + [
            ProofLine(4, clause("~P"), (1, 2)),
            ProofLine(5, Clause(), (1, 4)),
        ]
        assert not check_proof(lines)

    def test_rejects_proof_not_ending_in_empty_clause(self):
        lines = self.premises() + [ProofLine(4, clause("Q"), (1, 2))]
        assert not check_proof(lines)

    def test_rejects_empty_transcript(self):
        assert not check_proof([])

    def test_engine_proofs_check(self):
        outcome = prove([
            clause("~P", "Q"), clause("~Q", "R"), clause("P"), clause("~R"),
        ])
        assert outcome.valid
        assert check_proof(outcome.lines)

    def test_outcome_lines_round_trip(self):
        outcome = Outcome(valid=True, premise_lines=tuple(self.premises()))
        assert outcome.lines == tuple(self.premises())

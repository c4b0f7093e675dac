"""
Core data structures: Literal, Clause, Derivation, ProofLine, Session, Outcome.

These are the atoms of the whole system. Nothing in here depends on the
saturation loop or on how clauses are read in.

Literals and clauses:
    Literal("P")          ->  P
    Literal("P", True)    ->  ~P

    A Clause is a frozenset of literals (disjunction).
    The empty clause {} is a contradiction -> the argument is valid.
"""

from dataclasses import dataclass, field
from functools import cached_property, total_ordering
from typing import Hashable, Optional
from collections import deque
import json

from .index import ClauseIndex


@total_ordering
@dataclass(frozen=True)
class Literal:
    """An atomic proposition or its negation."""
    symbol: Hashable
    negated: bool = False

    def complement(self) -> 'Literal':
        return Literal(self.symbol, not self.negated)

    @property
    def sort_key(self):
        return (type(self.symbol).__name__, str(self.symbol), self.negated)

    def __lt__(self, other):
        if not isinstance(other, Literal):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self):
        return f"~{self.symbol}" if self.negated else str(self.symbol)

    def __repr__(self):
        return f"Literal({self})"


@total_ordering
@dataclass(frozen=True)
class Clause:
    """
    A disjunction of literals.

    Built from any iterable; duplicate literals collapse. Iteration is in
    canonical literal order so every run explores clauses the same way.
    Clauses are ordered by size, then by their canonical literal sequence.
    """
    literals: frozenset = frozenset()

    def __post_init__(self):
        object.__setattr__(self, "literals", frozenset(self.literals))

    @classmethod
    def of(cls, *literals) -> 'Clause':
        return cls(frozenset(literals))

    @cached_property
    def ordered(self) -> tuple:
        return tuple(sorted(self.literals))

    @property
    def size(self) -> int:
        return len(self.literals)

    @property
    def is_empty(self) -> bool:
        return not self.literals

    @property
    def is_tautology(self) -> bool:
        return any(lit.complement() in self.literals for lit in self.literals)

    @property
    def sort_key(self):
        return (self.size, tuple(lit.sort_key for lit in self.ordered))

    def resolve(self, other: 'Clause', pivot: Literal) -> Optional['Clause']:
        """
        Resolve this clause against other on pivot.

        pivot must be in this clause and its complement in other. Returns
        None when the resolvent is a tautology; that is a normal outcome,
        not an error.
        """
        negated_pivot = pivot.complement()
        if pivot not in self.literals:
            raise ValueError(f"pivot {pivot} not in {self}")
        if negated_pivot not in other.literals:
            raise ValueError(f"complement {negated_pivot} of pivot not in {other}")

        resolvent = Clause((self.literals - {pivot}) | (other.literals - {negated_pivot}))
        if resolvent.is_tautology:
            return None
        return resolvent

    def __contains__(self, literal):
        return literal in self.literals

    def __iter__(self):
        return iter(self.ordered)

    def __len__(self):
        return len(self.literals)

    def __lt__(self, other):
        if not isinstance(other, Clause):
            return NotImplemented
        return self.sort_key < other.sort_key

    def __str__(self):
        return "{" + ", ".join(str(lit) for lit in self.ordered) + "}"

    def __repr__(self):
        return f"Clause({self})"


@dataclass(frozen=True)
class Derivation:
    """Parent link of a derived clause: left was dequeued, right was indexed."""
    left: Clause
    right: Clause
    pivot: Literal


@dataclass(frozen=True)
class ProofLine:
    """One numbered line of a transcript. Premises cite no parents."""
    number: int
    clause: Clause
    parents: tuple = ()

    def __str__(self):
        line = f"{self.number}. {self.clause}"
        if self.parents:
            line += " " + ",".join(str(p) for p in self.parents)
        return line

    def to_dict(self):
        return {
            "number": self.number,
            "clause": [str(lit) for lit in self.clause],
            "parents": list(self.parents),
        }


@dataclass
class Session:
    """
    Full state of one proof search.

    worklist:  clauses waiting to be resolved against the index (FIFO)
    index:     every distinct clause kept so far, by literal
    parents:   derivation record of every derived clause
    numbering: premise line numbers, first occurrence wins
    history:   log of what happened at each step
    """
    premises: tuple = ()
    index: ClauseIndex = field(default_factory=ClauseIndex)
    worklist: deque = field(default_factory=deque)
    parents: dict = field(default_factory=dict)
    numbering: dict = field(default_factory=dict)
    premise_lines: list = field(default_factory=list)
    next_number: int = 1
    history: list = field(default_factory=list)
    step: int = 0
    halted: bool = False
    halt_reason: str = ""
    contradiction: Optional[Clause] = None


@dataclass
class Outcome:
    """Result of a run: a proof transcript when valid, nothing derived when not."""
    valid: bool
    premise_lines: tuple = ()
    transcript: tuple = ()
    steps: int = 0
    clauses_kept: int = 0

    @property
    def verdict(self) -> str:
        if self.valid:
            return "Contradiction, therefore the conclusion is valid."
        return "No contradiction found, therefore the argument is invalid."

    @property
    def lines(self) -> tuple:
        return tuple(self.premise_lines) + tuple(self.transcript)

    def to_dict(self):
        return {
            "valid": self.valid,
            "premises": [line.to_dict() for line in self.premise_lines],
            "proof": [line.to_dict() for line in self.transcript],
            "steps": self.steps,
            "clauses_kept": self.clauses_kept,
        }

    def to_json(self, indent=2) -> str:
        return json.dumps(self.to_dict(), indent=indent)

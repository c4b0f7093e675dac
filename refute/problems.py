"""
Built-in sample arguments.

Each problem is a dict:
    make_clauses:  () -> list[Clause]   premises, then the negated conclusion
    valid:         bool                 expected verdict
    description:   str
"""

from .core.state import Literal, Clause


def _clause(*tokens) -> Clause:
    return Clause(Literal(t[-1], t.startswith("~")) for t in tokens)


def make_contradiction_clauses() -> list:
    """P, and the negated goal ~P. Resolves to {} in one step."""
    return [_clause("P"), _clause("~P")]


def make_modus_ponens_clauses() -> list:
    """
    Premises:
        P
        P -> Q          ~P | Q
    Negated goal:
        ~Q
    """
    return [_clause("P"), _clause("~P", "Q"), _clause("~Q")]


def make_chain_clauses() -> list:
    """
    Proof by cases.

    Premises:
        P | Q
        P -> R          ~P | R
        Q -> R          ~Q | R
    Negated goal:
        ~R
    """
    return [
        _clause("P", "Q"),
        _clause("~P", "R"),
        _clause("~Q", "R"),
        _clause("~R"),
    ]


def make_syllogism_clauses() -> list:
    """
    Hypothetical syllogism: from P -> Q and Q -> R conclude P -> R.

    Negating P -> R gives two unit clauses, P and ~R.
    """
    return [
        _clause("~P", "Q"),
        _clause("~Q", "R"),
        _clause("P"),
        _clause("~R"),
    ]


def make_affirming_consequent_clauses() -> list:
    """
    The fallacy: from P -> Q and Q conclude P. Not valid.
    """
    return [_clause("~P", "Q"), _clause("Q"), _clause("~P")]


def make_tautology_pair_clauses() -> list:
    """
    P | Q and ~P | ~Q. Either pivot only yields a tautology, and the pair
    is satisfiable, so nothing is proved.
    """
    return [_clause("P", "Q"), _clause("~P", "~Q")]


PROBLEMS = {
    "contradiction": {
        "make_clauses": make_contradiction_clauses,
        "valid":        True,
        "description":  "A fact and its negation: direct contradiction",
    },
    "modus_ponens": {
        "make_clauses": make_modus_ponens_clauses,
        "valid":        True,
        "description":  "P, P -> Q, therefore Q",
    },
    "chain": {
        "make_clauses": make_chain_clauses,
        "valid":        True,
        "description":  "P | Q, P -> R, Q -> R, therefore R",
    },
    "syllogism": {
        "make_clauses": make_syllogism_clauses,
        "valid":        True,
        "description":  "P -> Q, Q -> R, therefore P -> R",
    },
    "affirming_consequent": {
        "make_clauses": make_affirming_consequent_clauses,
        "valid":        False,
        "description":  "P -> Q, Q, therefore P (fallacy)",
    },
    "tautology_pair": {
        "make_clauses": make_tautology_pair_clauses,
        "valid":        False,
        "description":  "P | Q and ~P | ~Q: every resolvent is a tautology",
    },
}

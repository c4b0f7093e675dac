"""
Clause index: literal -> clauses containing that literal.

Resolution partners for a literal L are exactly the indexed clauses that
contain complement(L), so the saturation loop never scans clauses that
cannot resolve. Each bucket is kept sorted smallest clause first: unit
clauses are tried as partners before anything else, which gives smaller
resolvents and reaches the empty clause sooner.

The index is also the loop's memory of what it has already seen. A clause
is inserted once; inserting a value-equal clause again changes nothing and
reports False.
"""

from bisect import insort


class ClauseIndex:
    """Size-ordered buckets of clauses, keyed by literal."""

    def __init__(self):
        self._buckets = {}
        self._clauses = {}

    def insert(self, clause) -> bool:
        """
        Add clause to the bucket of every literal it contains.

        Returns False if a value-equal clause is already indexed, True if
        the clause was newly added.
        """
        if clause in self._clauses:
            return False
        self._clauses[clause] = None
        for lit in clause:
            insort(self._buckets.setdefault(lit, []), clause)
        return True

    def candidates_for(self, literal) -> tuple:
        """Clauses containing literal, smallest first."""
        return tuple(self._buckets.get(literal, ()))

    def __contains__(self, item):
        return item in self._clauses or item in self._buckets

    def __iter__(self):
        return iter(self._clauses)

    def __len__(self):
        return len(self._clauses)

    def __repr__(self):
        return f"ClauseIndex({len(self._clauses)} clauses, {len(self._buckets)} literals)"

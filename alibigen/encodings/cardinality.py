from itertools import combinations
from typing import List, Sequence

Clause = List[int]


def at_least_one(lits: Sequence[int]) -> List[Clause]:
    """A single clause: OR over the literals."""
    return [list(lits)]


def at_most_one(lits: Sequence[int]) -> List[Clause]:
    """
    Pairwise encoding of AtMost(1, lits).
    Quadratic in len(lits); callers keep the lists at character/room/time scale.
    """
    return [[-l1, -l2] for l1, l2 in combinations(lits, 2)]


def exactly_one(lits: Sequence[int]) -> List[Clause]:
    return at_least_one(lits) + at_most_one(lits)


def define_and(out: int, inputs: Sequence[int]) -> List[Clause]:
    """
    Tseitin definition out <-> (i1 /\\ i2 /\\ ...).
    Inputs are literals, so "nobody else here" is passed as negated occupancy.
    """
    # out -> in
    clauses = [[-out, i] for i in inputs]
    # (in1 /\ in2 /\ ...) -> out
    clauses.append([-i for i in inputs] + [out])
    return clauses


def define_or(out: int, inputs: Sequence[int]) -> List[Clause]:
    """Tseitin definition out <-> (i1 \\/ i2 \\/ ...)."""
    # in -> out
    clauses = [[-i, out] for i in inputs]
    # out -> (in1 \/ in2 \/ ...)
    clauses.append([-out] + list(inputs))
    return clauses

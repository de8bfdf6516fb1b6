import itertools

import pytest
from pysat.solvers import Solver

from alibigen.encodings import at_least_one, at_most_one, define_and, define_or, exactly_one


def satisfies(clauses, assignment: dict) -> bool:
    return all(any(assignment[abs(l)] == (l > 0) for l in clause) for clause in clauses)


@pytest.mark.parametrize("n", [1, 2, 3, 5])
def test_cardinality_against_brute_force(n):
    lits = list(range(1, n + 1))
    for values in itertools.product([False, True], repeat=n):
        assignment = dict(zip(lits, values))
        count = sum(values)
        assert satisfies(at_least_one(lits), assignment) == (count >= 1)
        assert satisfies(at_most_one(lits), assignment) == (count <= 1)
        assert satisfies(exactly_one(lits), assignment) == (count == 1)


def test_at_most_one_is_pairwise():
    clauses = at_most_one([1, 2, 3, 4])
    assert len(clauses) == 6
    assert all(len(c) == 2 and c[0] < 0 and c[1] < 0 for c in clauses)


def test_empty_inputs():
    assert at_most_one([]) == []
    assert at_least_one([]) == [[]]


def test_encodings_do_not_alias_input():
    lits = [1, 2]
    clauses = at_least_one(lits)
    clauses[0].append(3)
    assert lits == [1, 2]


def check_definition(encode, combine, n_inputs):
    """out <-> combine(inputs) must hold for every assignment of the inputs."""
    inputs = list(range(1, n_inputs + 1))
    out = n_inputs + 1
    clauses = encode(out, inputs)
    for values in itertools.product([False, True], repeat=n_inputs):
        expected = combine(values)
        assumptions = [v if val else -v for v, val in zip(inputs, values)]
        with Solver(name="minisat22", bootstrap_with=clauses) as solver:
            assert solver.solve(assumptions=assumptions + [out]) == expected
            assert solver.solve(assumptions=assumptions + [-out]) == (not expected)


@pytest.mark.parametrize("n_inputs", [1, 2, 3, 4])
def test_define_and(n_inputs):
    check_definition(define_and, all, n_inputs)


@pytest.mark.parametrize("n_inputs", [1, 2, 3, 4])
def test_define_or(n_inputs):
    check_definition(define_or, any, n_inputs)


def test_define_and_with_negated_inputs():
    # out <-> (1 AND NOT 2)
    clauses = define_and(3, [1, -2])
    for a, b in itertools.product([False, True], repeat=2):
        for out in (False, True):
            assignment = {1: a, 2: b, 3: out}
            assert satisfies(clauses, assignment) == (out == (a and not b))

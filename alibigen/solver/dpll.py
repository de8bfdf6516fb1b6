"""
DPLL with exhaustive unit propagation and a seeded random branching heuristic.

Clauses are simplified in place as variables get assigned: a clause satisfied
by an assignment is replaced by the SATISFIED sentinel (its slot stays so that
the occurrence lists remain valid), a falsified literal is removed from its
clause. Every slot replacement and every assignment is recorded on a trail, so
backtracking restores exactly the state that existed at the branch point.
"""
import time
from typing import List, Optional, Sequence, Tuple

from alibigen.core.errors import CNFError
from alibigen.core.logging import get_logger
from alibigen.rng import Mulberry32
from alibigen.solver.types import SatResult, SatStatus

logger = get_logger("alibigen.solver")

DEFAULT_TIMEOUT_MS = 12000
MAX_BRANCH_SAMPLES = 1000

SATISFIED: Tuple[int, ...] = (0,)

# (assignment trail length, clause trail length, open clause count)
_Mark = Tuple[int, int, int]


class _SolveTimeout(Exception):
    pass


class DPLLSolver:
    def __init__(self, clauses: Sequence[Sequence[int]], num_vars: int,
                 seed: int = 0, timeout_ms: float = DEFAULT_TIMEOUT_MS):
        if num_vars < 0:
            raise CNFError(f"Variable count must be non-negative, got {num_vars}")
        self.num_vars = num_vars
        self.timeout_ms = timeout_ms
        self.decisions = 0

        self._rng = Mulberry32(seed)
        self._clauses: List[Sequence[int]] = []
        self._assigns: List[int] = [0] * (num_vars + 1)  # 0 unassigned, 1 true, -1 false
        self._occ_pos: List[List[int]] = [[] for _ in range(num_vars + 1)]
        self._occ_neg: List[List[int]] = [[] for _ in range(num_vars + 1)]
        self._has_empty = False

        for ci, clause in enumerate(clauses):
            work = list(clause)
            for lit in dict.fromkeys(work):
                v = abs(lit)
                if lit == 0 or v > num_vars:
                    raise CNFError(f"Clause {ci} has invalid literal {lit} (num_vars={num_vars})")
                if lit > 0:
                    self._occ_pos[v].append(ci)
                else:
                    self._occ_neg[v].append(ci)
            if not work:
                self._has_empty = True
            self._clauses.append(work)

        self._open = len(self._clauses)
        self._var_trail: List[int] = []
        self._clause_trail: List[Tuple[int, Sequence[int]]] = []
        self._start = 0.0

    # -- trail -----------------------------------------------------------

    def _mark(self) -> _Mark:
        return len(self._var_trail), len(self._clause_trail), self._open

    def _undo_to(self, mark: _Mark) -> None:
        n_vars, n_clauses, open_count = mark
        while len(self._clause_trail) > n_clauses:
            ci, previous = self._clause_trail.pop()
            self._clauses[ci] = previous
        while len(self._var_trail) > n_vars:
            self._assigns[self._var_trail.pop()] = 0
        self._open = open_count

    def _replace(self, ci: int, clause: Sequence[int]) -> None:
        self._clause_trail.append((ci, self._clauses[ci]))
        self._clauses[ci] = clause

    # -- propagation -----------------------------------------------------

    def _propagate(self, queue: List[int]) -> bool:
        """
        Assigns queued literals until the queue drains.
        Returns False on conflict; the caller undoes partial work.
        """
        clauses = self._clauses
        assigns = self._assigns

        while queue:
            lit = queue.pop()
            v = abs(lit)
            val = 1 if lit > 0 else -1
            current = assigns[v]
            if current == val:
                continue
            if current != 0:
                return False

            assigns[v] = val
            self._var_trail.append(v)

            if val > 0:
                satisfied, falsified = self._occ_pos[v], self._occ_neg[v]
            else:
                satisfied, falsified = self._occ_neg[v], self._occ_pos[v]

            for ci in satisfied:
                if clauses[ci] is not SATISFIED:
                    self._replace(ci, SATISFIED)
                    self._open -= 1

            for ci in falsified:
                clause = clauses[ci]
                if clause is SATISFIED:
                    continue
                reduced = [l for l in clause if l != -lit]
                self._replace(ci, reduced)
                if not reduced:
                    return False
                if len(reduced) == 1:
                    queue.append(reduced[0])

        return True

    # -- search ----------------------------------------------------------

    def _check_deadline(self) -> None:
        if (time.monotonic() - self._start) * 1000.0 > self.timeout_ms:
            raise _SolveTimeout()

    def _pick_branch_variable(self) -> int:
        """
        Variable of a random literal from a random open clause; falls back to
        the first unassigned variable. 0 means nothing is left to decide.
        """
        clauses = self._clauses
        n = len(clauses)
        if n:
            for _ in range(MAX_BRANCH_SAMPLES):
                clause = clauses[self._rng.randrange(n)]
                if clause is SATISFIED:
                    continue
                return abs(clause[self._rng.randrange(len(clause))])

        for v in range(1, self.num_vars + 1):
            if self._assigns[v] == 0:
                return v
        return 0

    def _search(self) -> bool:
        # Each frame is [variable, polarities tried, trail mark at the branch point]
        stack: List[list] = []
        descend = True

        while True:
            if descend:
                self._check_deadline()
                if self._open == 0:
                    return True
                var = self._pick_branch_variable()
                if var == 0:
                    return True
                stack.append([var, 0, self._mark()])

            descend = False
            while stack:
                frame = stack[-1]
                var, tried, mark = frame
                self._undo_to(mark)
                if tried == 2:
                    stack.pop()
                    continue
                frame[1] = tried + 1
                self.decisions += 1
                if self._propagate([var if tried == 0 else -var]):
                    descend = True
                    break

            if not descend:
                return False

    def solve(self) -> SatResult:
        self._start = time.monotonic()
        result = SatResult(status=SatStatus.UNSAT)

        try:
            if self._has_empty:
                logger.debug("Input contains an empty clause")
            else:
                units = [c[0] for c in self._clauses if len(c) == 1]
                if not self._propagate(units):
                    logger.debug("Conflict during initial unit propagation")
                elif self._search():
                    result.status = SatStatus.SAT
                    result.model = [self._assigns[v] == 1 for v in range(1, self.num_vars + 1)]
        except _SolveTimeout:
            logger.debug(f"Search exceeded {self.timeout_ms}ms after {self.decisions} decisions")
            result.status = SatStatus.UNKNOWN

        result.decisions = self.decisions
        result.time_taken = (time.monotonic() - self._start) * 1000.0
        if result.status == SatStatus.UNSAT:
            logger.debug(f"UNSAT after {self.decisions} decisions")
        return result


def solve_with_status(clauses: Sequence[Sequence[int]], num_vars: int,
                      seed: int = 0, timeout_ms: float = DEFAULT_TIMEOUT_MS) -> SatResult:
    """Solves and reports SAT, UNSAT or UNKNOWN (timed out) separately."""
    return DPLLSolver(clauses, num_vars, seed=seed, timeout_ms=timeout_ms).solve()


def sat_solve(clauses: Sequence[Sequence[int]], num_vars: int,
              seed: int = 0, timeout_ms: float = DEFAULT_TIMEOUT_MS) -> Optional[List[bool]]:
    """
    Returns a model of length num_vars, or None when the clauses are
    unsatisfiable or the deadline passed. The two failures are not told apart.
    """
    return solve_with_status(clauses, num_vars, seed=seed, timeout_ms=timeout_ms).model

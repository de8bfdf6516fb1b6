"""Shared checks for the scenario tests."""
from typing import Callable, Dict, List

from pysat.solvers import Solver

from alibigen.compilation import build_cnf
from alibigen.config import PuzzleConfig
from alibigen.decoder import ScenarioSolution, decode_solution, solve_and_decode
from alibigen.graph import neighbors
from alibigen.solver import SatResult, SatStatus

SEEDS = range(1, 6)
MIN_SUCCESSES = 3
TIMEOUT_MS = 10000


def occupants(sol: ScenarioSolution, t: int, room: str) -> List[str]:
    return [c for c, rooms in sol.schedule.items() if rooms[t] == room]


def check_schedule(config: PuzzleConfig, sol: ScenarioSolution) -> None:
    """Occupancy and movement invariants plus the derived tables."""
    g = neighbors(config.rooms, config.edges, config.include_self)
    assert set(sol.schedule) == set(config.chars)
    for c, rooms in sol.schedule.items():
        assert len(rooms) == config.T
        assert all(r in config.rooms for r in rooms)
        for t in range(config.T - 1):
            here, there = g.idx[rooms[t]], g.idx[rooms[t + 1]]
            assert there in g.nbr[here], f"{c} jumps {rooms[t]} -> {rooms[t + 1]}"
            if config.must_move:
                assert here != there

    assert sorted(sol.by_time) == list(range(1, config.T + 1))
    for t in range(config.T):
        for r in config.rooms:
            assert sol.by_time[t + 1][r] == len(occupants(sol, t, r))
    for c in config.chars:
        assert sum(sol.visits[c].values()) == config.T
        for r in config.rooms:
            assert sol.visits[c][r] == sol.schedule[c].count(r)


def decode_with_minisat(config) -> ScenarioSolution:
    """Decodes a model found by an independent solver, so encoding bugs are not masked by search quirks."""
    config = PuzzleConfig.coerce(config)
    artifact = build_cnf(config)
    with Solver(name="minisat22", bootstrap_with=artifact.clauses) as s:
        assert s.solve(), "compiled puzzle should be satisfiable"
        true_vars = {l for l in s.get_model() if l > 0}
    model = [v in true_vars for v in range(1, artifact.num_vars + 1)]
    return decode_solution(config, artifact, SatResult(status=SatStatus.SAT, model=model))


def run_seeds(config: Dict, check: Callable[[PuzzleConfig, ScenarioSolution], None]) -> int:
    """
    Solves `config` over consecutive seeds, checking every decoded solution.
    Returns the number of seeds that produced a schedule.
    """
    successes = 0
    for seed in SEEDS:
        cfg = PuzzleConfig.coerce(dict(config, seed=seed))
        sol = solve_and_decode(cfg, timeout_ms=TIMEOUT_MS)
        if sol is None:
            continue
        check_schedule(cfg, sol)
        check(cfg, sol)
        successes += 1
    return successes

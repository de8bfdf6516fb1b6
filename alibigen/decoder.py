from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import BaseModel, SerializeAsAny

from alibigen.compilation import CompilationArtifact, build_cnf
from alibigen.config import PuzzleConfig, SolverSettings
from alibigen.core.errors import AlibiError
from alibigen.core.logging import get_logger
from alibigen.scenarios.base import ScenarioFacts
from alibigen.scenarios.registry import ScenarioRegistry
from alibigen.solver import SatResult, solve_with_status
from alibigen.vars import VarKey

logger = get_logger("alibigen.decoder")


class SolveStats(BaseModel):
    total_vars: int
    total_clauses: int
    avg_clause_length: float
    solve_time_ms: float
    decisions: int


class ScenarioSolution(BaseModel):
    """
    A decoded puzzle.

    - schedule: character -> room at each of the T timesteps
    - by_time: 1-based timestep -> room -> number of occupants
    - visits: character -> room -> number of timesteps spent there
    - private: scenario name -> concrete role bindings
    """
    schedule: Dict[str, List[str]]
    by_time: Dict[int, Dict[str, int]]
    visits: Dict[str, Dict[str, int]]
    private: Dict[str, SerializeAsAny[ScenarioFacts]]
    stats: SolveStats


def decode_solution(config: PuzzleConfig, artifact: CompilationArtifact, result: SatResult) -> ScenarioSolution:
    """Pure read-back of a satisfying assignment; no further search."""
    model = result.model
    if model is None:
        raise AlibiError("Cannot decode a result without a model")

    def value(vid: int) -> bool:
        return model[vid - 1]

    rooms, chars, T = config.rooms, config.chars, config.T
    pool = artifact.pool

    schedule: Dict[str, List[str]] = {}
    for c in chars:
        row = []
        for t in range(T):
            found = next((r for r in rooms if value(pool.get(VarKey("X", (c, t, r))))), None)
            if found is None:
                raise AlibiError(f"Model places {c} in no room at time {t}")
            row.append(found)
        schedule[c] = row

    by_time: Dict[int, Dict[str, int]] = {}
    for t in range(T):
        counts = {r: 0 for r in rooms}
        for c in chars:
            counts[schedule[c][t]] += 1
        by_time[t + 1] = counts

    visits: Dict[str, Dict[str, int]] = {}
    for c in chars:
        v = {r: 0 for r in rooms}
        for room in schedule[c]:
            v[room] += 1
        visits[c] = v

    private = {}
    for name, roles in artifact.private_keys.items():
        private[name] = artifact.packs[name].decode(config, roles, value)

    stats = SolveStats(
        total_vars=artifact.num_vars,
        total_clauses=artifact.stats.get("total_clauses", len(artifact.clauses)),
        avg_clause_length=artifact.stats.get("avg_clause_length", 0.0),
        solve_time_ms=result.time_taken,
        decisions=result.decisions,
    )
    return ScenarioSolution(schedule=schedule, by_time=by_time, visits=visits, private=private, stats=stats)


def solve_and_decode(config: Union[PuzzleConfig, Mapping[str, Any]],
                     timeout_ms: Optional[float] = None,
                     registry: Optional[ScenarioRegistry] = None) -> Optional[ScenarioSolution]:
    """
    Compiles, solves with the configuration seed and decodes.
    Returns None when the solver fails, whether unsatisfiable or timed out.
    """
    config = PuzzleConfig.coerce(config)
    artifact = build_cnf(config, registry)

    if timeout_ms is None:
        timeout_ms = SolverSettings.from_env_or_file().timeout_ms

    result = solve_with_status(artifact.clauses, artifact.num_vars, seed=config.seed, timeout_ms=timeout_ms)
    if not result.is_sat:
        logger.info(f"No schedule for seed {config.seed} ({result.decisions} decisions, {result.time_taken:.1f}ms)")
        return None

    return decode_solution(config, artifact, result)

from typing import Any, Mapping, Optional, Union

from alibigen.compilation.artifact import CompilationArtifact
from alibigen.compilation.context import CompilationContext
from alibigen.config import PuzzleConfig
from alibigen.core.logging import get_logger
from alibigen.encodings import exactly_one
from alibigen.scenarios.registry import ScenarioRegistry

logger = get_logger("alibigen.compiler")


def _emit_occupancy(ctx: CompilationContext) -> None:
    """Every character is in exactly one room at every time."""
    for ci in range(len(ctx.chars)):
        for t in range(ctx.T):
            ctx.extend(exactly_one([ctx.x(ci, t, ri) for ri in range(len(ctx.rooms))]))


def _emit_movement(ctx: CompilationContext) -> None:
    """X[c][t][r] -> OR of X[c][t+1][n] over the neighbours n of r."""
    for ci in range(len(ctx.chars)):
        for t in range(ctx.T - 1):
            for ri in range(len(ctx.rooms)):
                nxt = [ctx.x(ci, t + 1, rj) for rj in ctx.graph.nbr[ri]]
                ctx.add([-ctx.x(ci, t, ri)] + nxt)


def build_cnf(config: Union[PuzzleConfig, Mapping[str, Any]],
              registry: Optional[ScenarioRegistry] = None) -> CompilationArtifact:
    """
    Translates a puzzle configuration into clauses.
    Scenario preconditions are checked first and raise ConfigurationError.
    """
    config = PuzzleConfig.coerce(config)
    registry = registry if registry else ScenarioRegistry()

    packs = registry.enabled(config.scenarios)
    for pack in packs:
        pack.validate(config)

    ctx = CompilationContext(config)

    # Occupancy variables are allocated first so they hold the lowest indices
    for ci in range(len(ctx.chars)):
        for t in range(ctx.T):
            for ri in range(len(ctx.rooms)):
                ctx.x(ci, t, ri)

    _emit_occupancy(ctx)
    _emit_movement(ctx)
    base_clauses = len(ctx.clauses)

    clauses_by_scenario = {}
    for pack in packs:
        before = len(ctx.clauses)
        ctx.roles[pack.name] = pack.compile(ctx)
        clauses_by_scenario[pack.name] = len(ctx.clauses) - before

    n_clauses = len(ctx.clauses)
    stats = {
        "total_vars": ctx.pool.count(),
        "total_clauses": n_clauses,
        "avg_clause_length": sum(len(c) for c in ctx.clauses) / n_clauses if n_clauses else 0.0,
        "base_clauses": base_clauses,
        "clauses_by_scenario": clauses_by_scenario,
    }
    logger.debug(
        f"Compiled {len(ctx.chars)} chars x {ctx.T} steps x {len(ctx.rooms)} rooms "
        f"with scenarios {list(clauses_by_scenario)}: {stats['total_vars']} vars, {n_clauses} clauses"
    )

    return CompilationArtifact(
        clauses=ctx.clauses,
        pool=ctx.pool,
        private_keys=ctx.roles,
        packs={pack.name: pack for pack in packs},
        graph=ctx.graph,
        stats=stats,
    )
